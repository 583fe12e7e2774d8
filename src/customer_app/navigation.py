"""Hands notification route keys from the hosting shell to navigation"""

import logging
from typing import List, Mapping, Optional, Protocol

logger = logging.getLogger(__name__)

NAVIGATE_TO_EXTRA = "navigate_to"

LOGIN_ROUTE = "login"
HOME_ROUTE = "home"
SEARCH_ROUTE = "search"
NOTIFICATIONS_ROUTE = "notifications"


class Navigator(Protocol):
    def navigate(self, route: str) -> None:
        ...


def resolve_start_routes(initial_route: Optional[str], has_session: bool) -> List[str]:
    """
    Routes to open, in order, when the app starts.

    Without a session the user lands on login. A notification route opens
    home first so back navigation has somewhere to go.
    """
    if not has_session:
        return [LOGIN_ROUTE]
    if initial_route == NOTIFICATIONS_ROUTE:
        return [HOME_ROUTE, NOTIFICATIONS_ROUTE]
    return [SEARCH_ROUTE]


class AppShell:
    """Receives intent extras at startup and while running"""

    def __init__(self, navigator: Navigator, has_session: bool = False):
        self.navigator = navigator
        self.has_session = has_session

    def start(self, navigate_to: Optional[str] = None) -> List[str]:
        """Open the start routes; returns them"""
        if navigate_to is not None:
            logger.info(f"Notification clicked, navigate to: {navigate_to}")
        routes = resolve_start_routes(navigate_to, self.has_session)
        for route in routes:
            self.navigator.navigate(route)
        return routes

    def on_new_intent(self, extras: Optional[Mapping[str, str]]) -> Optional[str]:
        """Forward the route key of an intent delivered while running"""
        navigate_to = (extras or {}).get(NAVIGATE_TO_EXTRA)
        if navigate_to is None:
            return None
        logger.info(f"New notification clicked, navigate to: {navigate_to}")
        self.navigator.navigate(navigate_to)
        return navigate_to
