from supabase import Client
from informatch.modules.reports.schemas import ReportCreate, ReportResponse
from informatch.modules.blocks.schemas import BlockCreate
from informatch.modules.blocks.service import BlockService
from informatch.core.errors import to_http_exception, FOREIGN_KEY_VIOLATION
from fastapi import HTTPException
import logging

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.blocks = BlockService(supabase)

    def create_report(self, reporter_id: str, report_data: ReportCreate) -> ReportResponse:
        """Report a user, optionally blocking them in the same step"""
        if report_data.reported_id == reporter_id:
            raise HTTPException(status_code=400, detail="You cannot report yourself")
        try:
            result = self.supabase.table("reports").insert({
                "reporter_id": reporter_id,
                "reported_id": report_data.reported_id,
                "reason": report_data.reason,
                "details": report_data.details
            }).execute()

            if not result.data:
                raise HTTPException(status_code=500, detail="Failed to submit report")
        except Exception as e:
            raise to_http_exception(e, {FOREIGN_KEY_VIOLATION: "User not found"})

        logger.warning(f"User {reporter_id} reported {report_data.reported_id} ({report_data.reason})")

        if report_data.block and report_data.reported_id not in self.blocks.get_blocked_ids(reporter_id):
            self.blocks.block_user(reporter_id, BlockCreate(blocked_id=report_data.reported_id))

        return ReportResponse(**result.data[0], blocked=report_data.block)
