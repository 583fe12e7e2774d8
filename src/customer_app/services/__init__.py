"""Services over the remote backend"""
from .booking_service import BookingService
from .catalog_service import CatalogService
from .chat_service import ChatService
from .report_service import ReportService
from .voucher_service import VoucherService

__all__ = ["BookingService", "CatalogService", "ChatService", "ReportService", "VoucherService"]
