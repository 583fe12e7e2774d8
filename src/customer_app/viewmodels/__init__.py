"""View-models exposing load state to the presentation layer"""
from .loader import AsyncListLoader, LoadState
from .screens import (
    ConversationsViewModel,
    ReportSortOption,
    ReportViewModel,
    ServiceDetailViewModel,
    ServiceTypeViewModel,
    TaskCalendarViewModel,
    VoucherViewModel,
)

__all__ = [
    "AsyncListLoader",
    "LoadState",
    "ConversationsViewModel",
    "ReportSortOption",
    "ReportViewModel",
    "ServiceDetailViewModel",
    "ServiceTypeViewModel",
    "TaskCalendarViewModel",
    "VoucherViewModel",
]
