"""Pydantic models for remote table rows"""

import json
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Record(BaseModel):
    """Immutable snapshot of a remote row"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BookingStatus(str, Enum):
    """Known values of bookings.status"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Booking(Record):
    """Booking model"""

    id: Optional[int] = None  # assigned by the backend
    customer_id: str
    provider_service_id: int
    status: str
    location: Optional[str] = None
    created_at: Optional[str] = None
    start_at: Optional[str] = None
    end_at: Optional[str] = None
    description: Optional[str] = None
    number_workers: Optional[int] = None

    def to_insert(self) -> "BookingInsert":
        """Writable part of this booking"""
        return BookingInsert(
            **{name: getattr(self, name) for name in BookingInsert.model_fields}
        )


class BookingInsert(Record):
    """Write-only shape sent when creating a booking"""

    customer_id: str
    provider_service_id: int
    status: str = BookingStatus.PENDING.value
    location: Optional[str] = None
    start_at: Optional[str] = None
    end_at: Optional[str] = None
    number_workers: Optional[int] = None


# Columns the backend fills in on insert
BOOKING_READ_ONLY_FIELDS = frozenset({"id", "created_at", "description"})


def _check_booking_insert_shape():
    writable = set(Booking.model_fields) - BOOKING_READ_ONLY_FIELDS
    extra = set(BookingInsert.model_fields) - writable
    if extra:
        raise TypeError(f"BookingInsert has fields Booking cannot write: {sorted(extra)}")


_check_booking_insert_shape()


class User(Record):
    """User model"""

    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    role: Optional[str] = None


class Message(Record):
    """Chat message model"""

    id: Optional[str] = None
    sender_id: Optional[str] = None
    receiver_id: Optional[str] = None
    content: str = ""
    created_at: Optional[str] = None
    seen_at: Optional[str] = None


class Conversation(Record):
    """Aggregated view of the messages exchanged with one other user"""

    other_user: User = Field(alias="otherUser")
    last_message: Optional[Message] = Field(default=None, alias="lastMessage")
    unread_count: int = Field(default=0, ge=0, alias="unreadCount")
    last_message_time: Optional[str] = Field(default=None, alias="lastMessageTime")


class Service(Record):
    """Service catalog entry"""

    id: int
    name: Optional[str] = None
    description: Optional[str] = None
    base_price: Optional[float] = None


class ProviderService(Record):
    """A provider's offering of a catalog service"""

    id: int
    provider_id: str
    service_id: int
    custom_price: Optional[float] = None
    custom_description: Optional[str] = None
    is_active: bool = True
    duration_minutes: Optional[int] = None
    name: Optional[str] = None
    user: Optional[User] = None
    service: Optional[Service] = None


class ServiceType(Record):
    """Single-column projection of bookings.service_type"""

    service_type: str


class ReportStatus(str, Enum):
    """Known values of reports.status"""

    PENDING = "pending"
    PROCESSING = "processing"
    RESOLVED = "resolved"
    REJECTED = "rejected"

    @classmethod
    def from_value(cls, value: Optional[str]) -> "ReportStatus":
        """Case-insensitive lookup; unknown values read as pending"""
        for status in cls:
            if value and status.value == value.lower():
                return status
        return cls.PENDING


def _image_url_list(value: Any) -> Optional[List[str]]:
    # Older rows store the list as a JSON-encoded string
    if value is None or isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            decoded = json.loads(value)
        except ValueError:
            return []
        return [str(url) for url in decoded] if isinstance(decoded, list) else []
    return []


class Report(Record):
    """Complaint a customer filed about a booking"""

    id: Optional[int] = None
    user_id: str
    booking_id: int
    provider_id: str
    title: str
    description: str
    image_urls: Optional[List[str]] = None
    status: str = ReportStatus.PENDING.value
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    admin_response: Optional[str] = None
    resolved_at: Optional[str] = None

    @field_validator("image_urls", mode="before")
    @classmethod
    def _parse_image_urls(cls, value: Any) -> Optional[List[str]]:
        return _image_url_list(value)


class ReportInsert(Record):
    """Write-only shape sent when filing a report"""

    user_id: str
    booking_id: int
    provider_id: str
    title: str
    description: str
    image_urls: Optional[List[str]] = None
    status: str = ReportStatus.PENDING.value


class Voucher(Record):
    """Discount voucher; discount is a percentage from 0 to 100"""

    id: int
    name: str
    describe: str
    discount: float
    status: str
    created_at: Optional[str] = None
    date: Optional[str] = None  # expiry

    def is_valid(self) -> bool:
        return self.status == "active"

    def discount_amount(self, total: float) -> float:
        return total * self.discount / 100.0

    def final_amount(self, total: float) -> float:
        return total - self.discount_amount(total)
