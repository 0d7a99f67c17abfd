"""
Event envelopes and per-event context.

Envelopes arrive loosely shaped: a plain mapping from the simulated feed or
whatever object the SDK hands over. They are normalized here so the router
works with one structure and one set of default-resolution rules.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

UNKNOWN_EVENT = "unknown_event"
UNKNOWN_USER = "unknown_user"

# Event types the agent subscribes to explicitly on an SDK event source
EVENT_FAUCET_CLAIM_FIRST_TIME = "faucet_claim:first_time"
EVENT_DAILY_ACTIVE = "daily_active"
EVENT_WILDCARD = "*"

SUBSCRIBED_EVENT_TYPES = [
    EVENT_FAUCET_CLAIM_FIRST_TIME,
    EVENT_DAILY_ACTIVE,
    EVENT_WILDCARD,
]

_ENVELOPE_FIELDS = ("type", "name", "user", "payload")


def _read(source: Any, key: str) -> Any:
    """Read *key* from a mapping or an attribute-bearing object."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)


@dataclass(frozen=True)
class EventEnvelope:
    """A single external occurrence, e.g. a user's first faucet claim."""

    type: Optional[str] = None
    name: Optional[str] = None
    user: Optional[str] = None
    payload: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> "EventEnvelope":
        """Normalize a mapping, object or existing envelope."""
        if isinstance(raw, EventEnvelope):
            return raw
        if raw is None:
            return cls()

        payload = _read(raw, "payload")
        if isinstance(payload, Mapping):
            payload = dict(payload)
        elif payload is not None and _read(payload, "user") is not None:
            payload = {"user": _read(payload, "user")}
        else:
            payload = {}

        extra: dict[str, Any] = {}
        if isinstance(raw, Mapping):
            extra = {k: v for k, v in raw.items() if k not in _ENVELOPE_FIELDS}

        return cls(
            type=_read(raw, "type"),
            name=_read(raw, "name"),
            user=_read(raw, "user"),
            payload=payload,
            extra=extra,
        )


def resolve_event_type(envelope: EventEnvelope) -> str:
    """``type``, then ``name``, then ``unknown_event``."""
    return envelope.type or envelope.name or UNKNOWN_EVENT


def resolve_recipient(envelope: EventEnvelope, fallback_user: Optional[str] = None) -> str:
    """Envelope user, fallback user, ``payload.user``, then ``unknown_user``."""
    return (
        envelope.user
        or fallback_user
        or envelope.payload.get("user")
        or UNKNOWN_USER
    )


@dataclass
class EventContext:
    """What an event source hands to the agent for one event.

    Attributes:
        event: The normalized envelope.
        user: Fallback recipient supplied by the source.
        rewards: Optional dispatch capability for real transfers.
        log: Optional platform logger exposing ``info`` and ``error``.
    """

    event: EventEnvelope
    user: Optional[str] = None
    rewards: Any = None
    log: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> "EventContext":
        """Build a context from an SDK context object or mapping."""
        if isinstance(raw, EventContext):
            return raw
        return cls(
            event=EventEnvelope.from_raw(_read(raw, "event")),
            user=_read(raw, "user"),
            rewards=_read(raw, "rewards"),
            log=_read(raw, "log"),
        )


EventHandler = Callable[[Any], Any]
