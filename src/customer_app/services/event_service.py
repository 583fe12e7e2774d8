"""Service for pushing loader state to remote UI clients via LiveKit data messages."""
import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Set
from livekit import rtc
from pydantic import BaseModel

from customer_app.viewmodels.loader import AsyncListLoader, LoadState

logger = logging.getLogger(__name__)


def _dump_item(item: Any) -> Any:
    if isinstance(item, BaseModel):
        return item.model_dump(mode="json")
    return item


class EventService:
    """
    Emit load-state snapshots to the presentation layer over the data channel.

    Methods:
    - state_event(): Build the JSON payload for a snapshot
    - emit_state(): Publish one snapshot
    - bind(): Publish every snapshot a loader produces
    """

    # Strong references to in-flight publishes; the loop only keeps weak ones
    _pending: Set["asyncio.Task"] = set()

    @staticmethod
    def state_event(topic: str, state: LoadState) -> Dict[str, Any]:
        """JSON-serialisable payload for a snapshot"""
        items: List[Any] = [_dump_item(item) for item in state.items]
        return {
            "type": "load_state",
            "topic": topic,
            "items": items,
            "is_loading": state.is_loading,
            "error": state.error,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    async def emit_state(room: Optional[rtc.Room], topic: str, state: LoadState):
        """
        Send a load-state snapshot to the frontend.

        Args:
            room: LiveKit room (if None, event skipped)
            topic: Screen/list name, e.g. "providers"
            state: Snapshot to publish
        """
        if not room:
            return

        event = EventService.state_event(topic, state)

        try:
            await room.local_participant.publish_data(
                json.dumps(event).encode("utf-8"),
                reliable=True,
                topic=topic,
            )
        except Exception as e:
            logger.error(f"Failed to emit state for {topic}: {e}")

    @staticmethod
    def bind(
        loader: AsyncListLoader, room: Optional[rtc.Room], topic: str
    ) -> Callable[[], None]:
        """
        Publish every state change of a loader.

        Must be called from a running event loop. Returns the unsubscribe
        function.
        """
        loop = asyncio.get_running_loop()

        def on_state(state: LoadState):
            task = loop.create_task(EventService.emit_state(room, topic, state))
            EventService._pending.add(task)
            task.add_done_callback(EventService._pending.discard)

        return loader.subscribe(on_state)
