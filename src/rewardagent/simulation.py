"""
Simulated event feed.

Used when no SDK is available: a fixed sequence of synthetic events is
delivered one at a time, each preceded by a fixed delay, to every
subscribed handler whose glob pattern matches the event type.
"""

from __future__ import annotations

import asyncio
import fnmatch
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from .events import EventContext, EventEnvelope, EventHandler

logger = logging.getLogger(__name__)

SIMULATED_EVENTS: tuple[dict[str, Any], ...] = (
    {"type": "faucet_claim:first_time", "user": "0xUserA", "payload": {}},
    {"type": "random_event", "user": "0xUserB", "payload": {}},
    {"type": "daily_active", "user": "0xUserC", "payload": {}},
)

Sleep = Callable[[float], Awaitable[Any]]


class SimulatedEventSource:
    """In-memory event source replaying a fixed list of events.

    Args:
        events: Raw events to replay, in order.
        delay: Seconds to wait before each event.
        sleep: Awaitable sleep function, replaceable in tests.
    """

    def __init__(
        self,
        events: Optional[Sequence[Any]] = None,
        delay: float = 1.0,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self._events = list(SIMULATED_EVENTS if events is None else events)
        self._delay = delay
        self._sleep = sleep or asyncio.sleep
        self._subscriptions: list[tuple[str, EventHandler]] = []

    def subscribe(self, pattern: str, handler: EventHandler) -> None:
        self._subscriptions.append((pattern, handler))

    async def start(self) -> None:
        """Replay every event, then return."""
        for raw in self._events:
            await self._sleep(self._delay)
            envelope = EventEnvelope.from_raw(raw)
            ctx = EventContext(event=envelope, user=envelope.user, rewards=None)
            event_type = envelope.type or envelope.name or ""
            for pattern, handler in self._subscriptions:
                if fnmatch.fnmatchcase(event_type, pattern):
                    result = handler(ctx)
                    if inspect.isawaitable(result):
                        await result

        logger.info(
            "Simulation complete. When you wire the WASP SDK, real rewards can be sent."
        )
