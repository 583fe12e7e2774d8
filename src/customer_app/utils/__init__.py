"""Utils module for the customer app"""
from .date_time_utils import (
    booking_window,
    get_local_now,
    get_timezone,
    local_date,
    localize,
    parse_timestamp,
    to_iso_offset,
)

__all__ = [
    "booking_window",
    "get_local_now",
    "get_timezone",
    "local_date",
    "localize",
    "parse_timestamp",
    "to_iso_offset",
]
