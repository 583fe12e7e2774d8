"""Loaders backing the individual screens"""

from collections import OrderedDict
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from customer_app.database.models import (
    Booking,
    Conversation,
    ProviderService,
    Report,
    ReportStatus,
    ServiceType,
    Voucher,
)
from customer_app.services.booking_service import BookingService
from customer_app.services.catalog_service import CatalogService
from customer_app.services.chat_service import ChatService
from customer_app.services.report_service import ReportService
from customer_app.services.voucher_service import VoucherService
from customer_app.utils.date_time_utils import local_date
from customer_app.viewmodels.loader import AsyncListLoader, Fetch


class ServiceDetailViewModel(AsyncListLoader[ProviderService]):
    """Providers offering the service shown on the detail screen"""

    def __init__(self, fetch: Optional[Fetch] = None):
        super().__init__(fetch or CatalogService.get_providers_by_service_id)

    @property
    def providers(self) -> List[ProviderService]:
        return self.items

    async def load_providers(self, service_id: int):
        return await self.load(service_id)


class ServiceTypeViewModel(AsyncListLoader[ServiceType]):
    """Service types listed on the home screen"""

    def __init__(self, fetch: Optional[Fetch] = None):
        super().__init__(fetch or CatalogService.get_service_types)

    @property
    def service_types(self) -> List[ServiceType]:
        return self.items


class ConversationsViewModel(AsyncListLoader[Conversation]):
    """Chat list of the signed-in user"""

    def __init__(self, fetch: Optional[Fetch] = None):
        super().__init__(fetch or ChatService.get_conversations)

    @property
    def conversations(self) -> List[Conversation]:
        return self.items

    @property
    def total_unread(self) -> int:
        return sum(c.unread_count for c in self.items)


class TaskCalendarViewModel(AsyncListLoader[Booking]):
    """Bookings of a customer, laid out on the task calendar"""

    def __init__(self, fetch: Optional[Fetch] = None, tz=None):
        super().__init__(fetch or BookingService.get_bookings)
        self._tz = tz

    @property
    def tasks(self) -> List[Booking]:
        return self.items

    def tasks_by_date(self) -> Dict[date, List[Booking]]:
        """
        Group loaded bookings by the local date of start_at.

        Dates keep the order in which they first appear; bookings without a
        start time have no calendar cell and are left out.
        """
        grouped: Dict[date, List[Booking]] = OrderedDict()
        for booking in self.items:
            day = local_date(booking.start_at, self._tz)
            if day is None:
                continue
            grouped.setdefault(day, []).append(booking)
        return grouped


class ReportSortOption(Enum):
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    STATUS = "status"


class ReportViewModel(AsyncListLoader[Report]):
    """
    Reports the signed-in user has filed.

    Filtering and sorting return new lists and leave the loaded items alone,
    so clearing a filter does not need another load.
    """

    def __init__(self, fetch: Optional[Fetch] = None):
        super().__init__(fetch or ReportService.get_reports_by_user)
        self.selected_report: Optional[Report] = None

    @property
    def reports(self) -> List[Report]:
        return self.items

    def select_report(self, report: Report):
        self.selected_report = report

    def clear_selected_report(self):
        self.selected_report = None

    def filter_by_status(self, status: Optional[str]) -> List[Report]:
        if status is None:
            return self.items
        return [r for r in self.items if r.status.lower() == status.lower()]

    def sorted_reports(self, sort_by: ReportSortOption) -> List[Report]:
        if sort_by is ReportSortOption.STATUS:
            return sorted(self.items, key=lambda r: r.status.lower())
        return sorted(
            self.items,
            key=lambda r: r.created_at or "",
            reverse=sort_by is ReportSortOption.DATE_DESC,
        )

    def count_by_status(self) -> Dict[ReportStatus, int]:
        counts = {status: 0 for status in ReportStatus}
        for report in self.items:
            counts[ReportStatus.from_value(report.status)] += 1
        return counts


class VoucherViewModel(AsyncListLoader[Voucher]):
    """Vouchers offered on the checkout screen"""

    def __init__(self, fetch: Optional[Fetch] = None):
        super().__init__(fetch or VoucherService.get_active_vouchers)

    @property
    def vouchers(self) -> List[Voucher]:
        return self.items
