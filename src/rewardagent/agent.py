"""
Reward Agent

Holds the static identity and wires the rule evaluator, dispatcher and
router together. ``handle_event`` is the handler registered on every event
source.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .config import AgentIdentity
from .dispatcher import DispatchOutcome, RewardDispatcher
from .events import EventContext
from .router import EventRouter
from .rules import RuleEvaluator

logger = logging.getLogger(__name__)


class RewardAgent:
    """A reward agent paying out in its identity's token.

    Args:
        identity: Display name, description, wallet and token.
        evaluator: Rule evaluator. Uses the default rule table if None.
    """

    def __init__(
        self,
        identity: AgentIdentity,
        evaluator: Optional[RuleEvaluator] = None,
    ) -> None:
        self.identity = identity
        self.evaluator = evaluator or RuleEvaluator()
        self.dispatcher = RewardDispatcher(identity.token)
        self.router = EventRouter(self.evaluator, self.dispatcher)

    async def on_start(self) -> None:
        logger.info("Reward Agent %s is starting...", self.identity.name)
        logger.info("%s", self.identity.description)
        logger.info("Wallet: %s", self.identity.wallet)
        logger.info("Ready to reward in %s", self.identity.token)

    async def handle_event(self, ctx: Any) -> Optional[DispatchOutcome]:
        """Handle one event context from an SDK or the simulated feed."""
        ctx = EventContext.from_raw(ctx)
        return await self.router.route(ctx.event, ctx.user, ctx.rewards, ctx.log)
