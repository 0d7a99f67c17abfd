"""
Event Router

Pulls the event type and recipient out of an envelope, asks the rule
evaluator for a decision and hands qualifying decisions to the dispatcher.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from . import metrics
from .dispatcher import DispatchCapability, DispatchOutcome, RewardDispatcher
from .events import EventEnvelope, resolve_event_type, resolve_recipient
from .rules import RuleEvaluator

logger = logging.getLogger(__name__)


class EventRouter:
    """Routes one event at a time from evaluation to dispatch.

    Args:
        evaluator: Rule evaluator producing reward decisions.
        dispatcher: Dispatcher used for qualifying decisions.
    """

    def __init__(self, evaluator: RuleEvaluator, dispatcher: RewardDispatcher) -> None:
        self._evaluator = evaluator
        self._dispatcher = dispatcher

    async def route(
        self,
        envelope: Any,
        fallback_user: Optional[str] = None,
        capability: Optional[DispatchCapability] = None,
        log: Any = None,
    ) -> Optional[DispatchOutcome]:
        """Route *envelope*. Returns the dispatch outcome, or None for no reward."""
        envelope = EventEnvelope.from_raw(envelope)
        event_type = resolve_event_type(envelope)
        recipient = resolve_recipient(envelope, fallback_user)
        metrics.record_event(event_type)

        decision = self._evaluator.evaluate(event_type)
        if not decision.qualifies:
            logger.info("No reward for event: %s", event_type)
            return None

        logger.info("Condition met: %s (event: %s)", decision.reason, event_type)
        return await self._dispatcher.dispatch(
            capability, recipient, decision.amount, decision.reason, log=log,
        )
