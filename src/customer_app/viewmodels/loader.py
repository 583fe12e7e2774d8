"""Observable loader for one remote list.

A loader owns a single LoadState (items, is_loading, error) and replaces it
wholesale on every transition. Subscribers receive each new snapshot in order.

Policies:
- A failed load keeps the items of the last successful load.
- Overlapping loads resolve latest-wins: a load that finishes after a newer
  one has started leaves the state untouched, and is_loading stays True until
  the newest load completes.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from customer_app.errors import failure_message

logger = logging.getLogger(__name__)

T = TypeVar("T")

Fetch = Callable[[Optional[Any]], Awaitable[Sequence[T]]]
Subscriber = Callable[["LoadState[T]"], None]


@dataclass(frozen=True)
class LoadState(Generic[T]):
    """Snapshot of a loader"""

    items: Tuple[T, ...] = ()
    is_loading: bool = False
    error: Optional[str] = None


class AsyncListLoader(Generic[T]):
    """
    Mediates between a UI surface and one remote list read.

    Args:
        fetch: Async callable taking the optional load parameter (e.g. a
            service id) and returning the rows
    """

    def __init__(self, fetch: Fetch):
        self._fetch = fetch
        self._state: LoadState[T] = LoadState()
        self._subscribers: List[Subscriber] = []
        self._generation = 0

    @property
    def state(self) -> LoadState[T]:
        return self._state

    @property
    def items(self) -> List[T]:
        return list(self._state.items)

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for state snapshots.

        Returns:
            A function that removes the callback
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _set_state(self, **changes):
        self._state = replace(self._state, **changes)
        for callback in list(self._subscribers):
            try:
                callback(self._state)
            except Exception as e:
                logger.error(f"Loader subscriber failed: {e}")

    async def load(self, parameter: Optional[Any] = None) -> LoadState[T]:
        """
        Run one remote read and publish the outcome.

        Args:
            parameter: Identifier or filter passed to the fetch; None for
                unfiltered loads

        Returns:
            The state after this call settled
        """
        self._generation += 1
        generation = self._generation
        self._set_state(is_loading=True, error=None)

        try:
            rows = await self._fetch(parameter)
            if generation == self._generation:
                self._set_state(items=tuple(rows), is_loading=False)
            else:
                logger.debug(f"Discarding result of superseded load #{generation}")
        except Exception as e:
            if generation == self._generation:
                message = failure_message(e)
                logger.error(f"Load failed: {message}")
                self._set_state(error=message, is_loading=False)
            else:
                logger.debug(f"Discarding failure of superseded load #{generation}: {e}")
        finally:
            # Cancellation skips both branches above
            if generation == self._generation and self._state.is_loading:
                self._set_state(is_loading=False)
        return self._state

    def launch(self, parameter: Optional[Any] = None) -> "asyncio.Task":
        """Start a load without awaiting it (needs a running event loop)"""
        return asyncio.ensure_future(self.load(parameter))
