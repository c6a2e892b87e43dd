from fastapi import APIRouter, Depends
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.connections.schemas import (
    ConnectionRequestCreate, ConnectionRequestResponse, MatchResponse, SendRequestResponse
)
from informatch.modules.connections.service import ConnectionService
from informatch.core.dependencies import get_current_user_id
from supabase import Client
from typing import List, Dict

router = APIRouter(prefix="/connections", tags=["connections"])


def get_connection_service(supabase: Client = Depends(get_service_supabase)) -> ConnectionService:
    return ConnectionService(supabase)


@router.get("", response_model=List[MatchResponse])
async def list_matches(
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    """List the caller's accepted connections"""
    return service.list_matches(current_user["id"])


@router.delete("/{match_id}", status_code=204)
async def remove_match(
    match_id: int,
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    """Remove an accepted connection (either party)"""
    service.remove_match(current_user["id"], match_id)
    return None


@router.post("/requests", response_model=SendRequestResponse, status_code=201)
async def send_request(
    request_data: ConnectionRequestCreate,
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    """Send a connection request (instant match when the target account is private)"""
    return service.send_request(current_user["id"], request_data)


@router.get("/requests/incoming", response_model=List[ConnectionRequestResponse])
async def list_incoming(
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    return service.list_incoming(current_user["id"])


@router.get("/requests/outgoing", response_model=List[ConnectionRequestResponse])
async def list_outgoing(
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    return service.list_outgoing(current_user["id"])


@router.post("/requests/{notification_id}/accept", response_model=MatchResponse)
async def accept_request(
    notification_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    """Accept a request addressed to the caller"""
    return service.accept_request(current_user["id"], notification_id)


@router.post("/requests/{notification_id}/reject", status_code=204)
async def reject_request(
    notification_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    """Reject a request addressed to the caller"""
    service.reject_request(current_user["id"], notification_id)
    return None


@router.delete("/requests/{notification_id}", status_code=204)
async def cancel_request(
    notification_id: str,
    current_user: Dict = Depends(get_current_user_id),
    service: ConnectionService = Depends(get_connection_service)
):
    """Withdraw a request the caller sent"""
    service.cancel_request(current_user["id"], notification_id)
    return None
