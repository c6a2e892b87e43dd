from fastapi import APIRouter, Depends
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.blocks.schemas import BlockCreate, BlockResponse, BlockedUserResponse
from informatch.modules.blocks.service import BlockService
from informatch.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/blocks", tags=["blocks"])


def get_block_service(supabase: Client = Depends(get_service_supabase)) -> BlockService:
    return BlockService(supabase)


@router.post("", response_model=BlockResponse, status_code=201)
async def block_user(
    block_data: BlockCreate,
    current_user: Dict = Depends(get_current_user_id),
    service: BlockService = Depends(get_block_service)
):
    """Block a user; they disappear from the caller's suggestions"""
    return service.block_user(current_user["id"], block_data)


@router.get("", response_model=List[BlockedUserResponse])
async def list_blocked(
    current_user: Dict = Depends(get_current_user_id),
    service: BlockService = Depends(get_block_service)
):
    """List users blocked by the caller"""
    return service.list_blocked(current_user["id"])


@router.delete("/{blocked_id}", status_code=204)
async def unblock_user(
    blocked_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: BlockService = Depends(get_block_service)
):
    service.unblock_user(current_user["id"], blocked_id)
    return None
