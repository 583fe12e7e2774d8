"""Database module for Supabase integration"""
from .client import SupabaseClient
from .models import (
    Booking,
    BookingInsert,
    BookingStatus,
    Conversation,
    Message,
    ProviderService,
    Report,
    ReportInsert,
    ReportStatus,
    Service,
    ServiceType,
    User,
    Voucher,
)

__all__ = [
    "SupabaseClient",
    "Booking",
    "BookingInsert",
    "BookingStatus",
    "Conversation",
    "Message",
    "ProviderService",
    "Report",
    "ReportInsert",
    "ReportStatus",
    "Service",
    "ServiceType",
    "User",
    "Voucher",
]
