"""
Prometheus metrics for the reward agent.

Exposes:
- reward_agent_events_total{event_type="<rule event type>|unknown_event|other"}
- reward_agent_rewards_total{outcome="sent|failed|simulated"}
"""

from __future__ import annotations

import logging

from prometheus_client import Counter, start_http_server

from .events import UNKNOWN_EVENT
from .rules import DEFAULT_RULES

logger = logging.getLogger(__name__)

OTHER_EVENT = "other"

# event_type label values: these plus OTHER_EVENT
TRACKED_EVENT_TYPES = frozenset(
    [t for rule in DEFAULT_RULES for t in rule.event_types] + [UNKNOWN_EVENT]
)

EVENTS_TOTAL = Counter(
    "reward_agent_events_total",
    "Events routed through the reward agent",
    ["event_type"],
)
REWARDS_TOTAL = Counter(
    "reward_agent_rewards_total",
    "Reward dispatch attempts by outcome",
    ["outcome"],
)


def event_label(event_type: str) -> str:
    return event_type if event_type in TRACKED_EVENT_TYPES else OTHER_EVENT


def record_event(event_type: str) -> None:
    EVENTS_TOTAL.labels(event_type=event_label(event_type)).inc()


def record_reward(outcome: str) -> None:
    REWARDS_TOTAL.labels(outcome=outcome).inc()


def start_exporter(port: int) -> bool:
    """Start the Prometheus HTTP exporter on *port*. A port of 0 disables it."""
    if not port:
        return False
    start_http_server(port)
    logger.info("Prometheus metrics exporter listening on port %d", port)
    return True
