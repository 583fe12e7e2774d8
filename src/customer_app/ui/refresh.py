"""Pull-to-refresh gesture state, independent of any UI toolkit."""

import logging
from typing import Callable, Optional

from customer_app.config import config

logger = logging.getLogger(__name__)

# Downward drags move the content at half speed
PULL_DAMPING = 0.5
# The pull can overshoot the trigger by half its length
MAX_PULL_RATIO = 1.5
INDICATOR_RATIO = 0.8


class PullToRefreshGesture:
    """
    Turns vertical drag deltas into a content offset and a refresh trigger.

    Args:
        on_refresh: Called once when a release crosses the trigger distance
        trigger_dp: Trigger distance in density-independent units
        density: Pixels per dp of the current screen
    """

    def __init__(
        self,
        on_refresh: Callable[[], None],
        trigger_dp: Optional[float] = None,
        density: Optional[float] = None,
    ):
        self.on_refresh = on_refresh
        trigger_dp = config.refresh_trigger_dp if trigger_dp is None else trigger_dp
        density = config.screen_density if density is None else density
        self.trigger_distance = trigger_dp * density
        self.max_offset = self.trigger_distance * MAX_PULL_RATIO
        self.offset = 0.0
        self.is_refreshing = False

    def drag(self, dy: float) -> float:
        """Apply one drag delta (positive is downward); returns the new offset"""
        if dy > 0 and self.offset >= 0:
            self.offset = min(self.offset + dy * PULL_DAMPING, self.max_offset)
        elif dy < 0 and self.offset > 0:
            self.offset = max(self.offset + dy, 0.0)
        return self.offset

    def release(self) -> bool:
        """
        End the drag.

        Returns:
            True if on_refresh was invoked
        """
        triggered = self.offset > self.trigger_distance and not self.is_refreshing
        self.offset = 0.0
        if triggered:
            logger.debug("Pull-to-refresh triggered")
            self.on_refresh()
        return triggered

    def set_refreshing(self, is_refreshing: bool):
        """Mirror the external refreshing flag; finishing snaps content back"""
        self.is_refreshing = is_refreshing
        if not is_refreshing:
            self.offset = 0.0

    @property
    def content_offset(self) -> int:
        return 0 if self.is_refreshing else round(self.offset)

    @property
    def indicator_offset(self) -> int:
        return round(self.offset * INDICATOR_RATIO)

    @property
    def indicator_visible(self) -> bool:
        return self.is_refreshing or self.offset > 0
