"""Tests for the screen view-models"""
import pytest
from unittest.mock import AsyncMock, Mock
from datetime import date

import pytz

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from customer_app.database.models import Booking, Conversation, ServiceType, User
from customer_app.errors import RemoteFailure
from customer_app.viewmodels import (
    ConversationsViewModel,
    ServiceDetailViewModel,
    ServiceTypeViewModel,
    TaskCalendarViewModel,
)


def _booking(id, start_at):
    return Booking(id=id, customer_id="c", provider_service_id=1, status="pending", start_at=start_at)


class TestServiceTypeViewModel:
    """Home screen service types against the real query path"""

    @pytest.mark.asyncio
    async def test_load_service_types(self, mock_supabase_client):
        table = mock_supabase_client.table.return_value
        table.select.return_value.execute.return_value = Mock(
            data=[{"service_type": "cleaning"}, {"service_type": "repair"}]
        )
        viewmodel = ServiceTypeViewModel()

        await viewmodel.load()

        assert viewmodel.service_types == [
            ServiceType(service_type="cleaning"),
            ServiceType(service_type="repair"),
        ]
        assert viewmodel.is_loading is False
        assert viewmodel.error is None

    @pytest.mark.asyncio
    async def test_network_timeout(self, mock_supabase_client):
        table = mock_supabase_client.table.return_value
        table.select.return_value.execute.side_effect = Exception("network timeout")
        viewmodel = ServiceTypeViewModel()

        await viewmodel.load()

        assert viewmodel.error == "network timeout"
        assert viewmodel.is_loading is False
        assert viewmodel.service_types == []


class TestServiceDetailViewModel:
    """Provider list of the service detail screen"""

    @pytest.mark.asyncio
    async def test_load_providers(self, mock_supabase_client):
        table = mock_supabase_client.table.return_value
        table.select.return_value.eq.return_value.eq.return_value.execute.return_value = Mock(
            data=[{"id": 4, "provider_id": "p", "service_id": 9}]
        )
        viewmodel = ServiceDetailViewModel()

        await viewmodel.load_providers(9)

        assert [p.id for p in viewmodel.providers] == [4]
        table.select.return_value.eq.assert_called_with("service_id", 9)

    @pytest.mark.asyncio
    async def test_custom_fetch(self):
        fetch = AsyncMock(side_effect=RemoteFailure("JWT expired"))
        viewmodel = ServiceDetailViewModel(fetch)

        await viewmodel.load_providers(1)

        assert viewmodel.error == "JWT expired"


class TestConversationsViewModel:
    """Chat list"""

    @pytest.mark.asyncio
    async def test_total_unread(self):
        conversations = [
            Conversation(other_user=User(id="a"), unread_count=2),
            Conversation(other_user=User(id="b"), unread_count=3),
        ]
        viewmodel = ConversationsViewModel(AsyncMock(return_value=conversations))

        await viewmodel.load("me")

        assert viewmodel.conversations == conversations
        assert viewmodel.total_unread == 5


class TestTaskCalendarViewModel:
    """Task calendar grouping"""

    @pytest.mark.asyncio
    async def test_tasks_by_date(self):
        bookings = [
            _booking(1, "2026-01-27T09:00:00+07:00"),
            _booking(2, "2026-01-26T18:30:00+00:00"),  # 01:30 on the 27th locally
            _booking(3, "2026-01-28T10:00:00+07:00"),
            _booking(4, None),
        ]
        viewmodel = TaskCalendarViewModel(
            AsyncMock(return_value=bookings), tz=pytz.timezone("Asia/Ho_Chi_Minh")
        )

        await viewmodel.load("c")
        grouped = viewmodel.tasks_by_date()

        assert list(grouped) == [date(2026, 1, 27), date(2026, 1, 28)]
        assert [b.id for b in grouped[date(2026, 1, 27)]] == [1, 2]
        assert [b.id for b in grouped[date(2026, 1, 28)]] == [3]

    def test_empty_before_load(self):
        viewmodel = TaskCalendarViewModel(AsyncMock(return_value=[]))

        assert viewmodel.tasks_by_date() == {}
