"""Tests for the notification-to-navigation boundary"""
from unittest.mock import Mock, call

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from customer_app.navigation import AppShell, resolve_start_routes


class TestStartRoutes:
    def test_no_session_goes_to_login(self):
        assert resolve_start_routes("notifications", has_session=False) == ["login"]

    def test_notification_opens_home_then_notifications(self):
        assert resolve_start_routes("notifications", has_session=True) == ["home", "notifications"]

    def test_default_is_search(self):
        assert resolve_start_routes(None, has_session=True) == ["search"]
        assert resolve_start_routes("orders", has_session=True) == ["search"]


class TestAppShell:
    def test_start_navigates_in_order(self):
        navigator = Mock()
        shell = AppShell(navigator, has_session=True)

        shell.start("notifications")

        assert navigator.navigate.call_args_list == [call("home"), call("notifications")]

    def test_new_intent_forwards_route_key(self):
        navigator = Mock()
        shell = AppShell(navigator, has_session=True)

        assert shell.on_new_intent({"navigate_to": "orders/42"}) == "orders/42"
        navigator.navigate.assert_called_once_with("orders/42")

    def test_new_intent_without_route(self):
        navigator = Mock()
        shell = AppShell(navigator)

        assert shell.on_new_intent({"other": "x"}) is None
        assert shell.on_new_intent(None) is None
        navigator.navigate.assert_not_called()
