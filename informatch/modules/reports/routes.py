from fastapi import APIRouter, Depends
from informatch.database.supabase_client import get_service_supabase
from informatch.modules.reports.schemas import ReportCreate, ReportResponse
from informatch.modules.reports.service import ReportService
from informatch.core.dependencies import get_current_user_id
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/reports", tags=["reports"])


def get_report_service(supabase: Client = Depends(get_service_supabase)) -> ReportService:
    return ReportService(supabase)


@router.post("", response_model=ReportResponse, status_code=201)
async def create_report(
    report_data: ReportCreate,
    current_user: Dict = Depends(get_current_user_id),
    service: ReportService = Depends(get_report_service)
):
    """Report another user"""
    return service.create_report(current_user["id"], report_data)
