"""Service for customer reports about bookings."""
import logging
from typing import List

from customer_app.database.models import Report, ReportInsert
from customer_app.database.queries import insert_row, select_rows

logger = logging.getLogger(__name__)


class ReportService:
    """
    Read and file reports.

    Methods:
    - get_reports_by_user(): Reports filed by a user, oldest first
    - get_reports_by_booking(): Reports attached to one booking
    - create_report(): Insert a report and return the stored row
    """

    @staticmethod
    async def get_reports_by_user(user_id: str) -> List[Report]:
        """
        Reports filed by one user.

        Args:
            user_id: users.id of the reporter

        Returns:
            Reports ordered by created_at ascending
        """
        reports = await select_rows(
            "reports",
            filters={"user_id": user_id},
            order_by="created_at",
            model=Report,
        )
        logger.info(f"Retrieved {len(reports)} reports for user {user_id}")
        return reports

    @staticmethod
    async def get_reports_by_booking(booking_id: int) -> List[Report]:
        return await select_rows("reports", filters={"booking_id": booking_id}, model=Report)

    @staticmethod
    async def create_report(report: ReportInsert) -> Report:
        """File a report; image_urls must already point at uploaded files"""
        created = await insert_row("reports", report, model=Report)
        logger.info(f"Report created successfully: {created.id}")
        return created
