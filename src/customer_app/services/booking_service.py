"""Service for reading and creating bookings."""
import logging
from datetime import datetime
from typing import List, Optional

from customer_app.database.models import Booking, BookingInsert, BookingStatus
from customer_app.database.queries import insert_row, select_rows
from customer_app.utils.date_time_utils import booking_window

logger = logging.getLogger(__name__)


class BookingService:
    """
    Booking reads and the single write path.

    Methods:
    - get_bookings(): A customer's bookings ordered by start time
    - build_insert(): Assemble a pending BookingInsert from UI input
    - create_booking(): Insert and return the created booking
    """

    @staticmethod
    async def get_bookings(customer_id: str) -> List[Booking]:
        """
        Bookings of one customer.

        Args:
            customer_id: users.id of the customer

        Returns:
            Bookings ordered by start_at ascending
        """
        return await select_rows(
            "bookings",
            filters={"customer_id": customer_id},
            order_by="start_at",
            model=Booking,
        )

    @staticmethod
    def build_insert(
        customer_id: str,
        provider_service_id: int,
        location: Optional[str],
        start: datetime,
        end: Optional[datetime] = None,
        duration_minutes: Optional[int] = None,
        workers: Optional[str] = None,
    ) -> BookingInsert:
        """
        Assemble a pending booking.

        Naive datetimes are read as local time. The worker count comes from a
        free-text field and falls back to 1 when it is not a number.
        """
        start_at, end_at = booking_window(start, end, duration_minutes)
        try:
            number_workers = int(workers) if workers is not None else 1
        except ValueError:
            number_workers = 1

        return BookingInsert(
            customer_id=customer_id,
            provider_service_id=provider_service_id,
            status=BookingStatus.PENDING.value,
            location=location,
            start_at=start_at,
            end_at=end_at,
            number_workers=number_workers,
        )

    @staticmethod
    async def create_booking(booking: BookingInsert) -> Booking:
        """Insert a booking; raises RemoteFailure when the backend rejects it"""
        created = await insert_row("bookings", booking, model=Booking)
        logger.info(
            f"Created booking {created.id} for provider service {booking.provider_service_id}"
        )
        return created
