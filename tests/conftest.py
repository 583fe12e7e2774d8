"""Shared fixtures"""
import pytest
from unittest.mock import Mock, patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from customer_app.database.client import SupabaseClient


@pytest.fixture
def mock_supabase_client():
    """Create a mock Supabase client"""
    with patch("customer_app.database.queries.SupabaseClient.get_client") as mock:
        client = Mock()
        mock.return_value = client
        yield client


@pytest.fixture(autouse=True)
def reset_supabase_client():
    """Never leak a real client between tests"""
    SupabaseClient.reset()
    yield
    SupabaseClient.reset()
