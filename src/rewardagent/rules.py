"""
Reward rules.

Maps an event type to a reward decision using a fixed, ordered rule table.
Matching is exact and the first matching rule wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class RewardDecision:
    """Verdict on whether, and how much, to reward for an event."""

    should_reward: bool
    reason: Optional[str] = None
    amount: Optional[float] = None

    @property
    def qualifies(self) -> bool:
        """True only when the decision carries everything needed to pay out."""
        return bool(self.should_reward and self.amount and self.reason)


NO_REWARD = RewardDecision(should_reward=False)


@dataclass(frozen=True)
class RewardRule:
    """A single row of the rule table."""

    event_types: tuple[str, ...]
    amount: float
    reason: str

    def matches(self, event_type: str) -> bool:
        return event_type in self.event_types

    def decision(self) -> RewardDecision:
        return RewardDecision(should_reward=True, reason=self.reason, amount=self.amount)


DEFAULT_RULES: tuple[RewardRule, ...] = (
    RewardRule(
        event_types=("faucet_claim:first_time", "first_faucet_claim"),
        amount=10,
        reason="First faucet claim",
    ),
    RewardRule(event_types=("daily_active",), amount=5, reason="Daily active"),
)


class RuleEvaluator:
    """Evaluates event types against an ordered rule table.

    Args:
        rules: Rules in priority order. Defaults to ``DEFAULT_RULES``.
    """

    def __init__(self, rules: Optional[Iterable[RewardRule]] = None) -> None:
        self._rules = tuple(DEFAULT_RULES if rules is None else rules)

    @property
    def rules(self) -> tuple[RewardRule, ...]:
        return self._rules

    def evaluate(self, event_type: Optional[str]) -> RewardDecision:
        """Return the reward decision for *event_type*."""
        if not event_type:
            return NO_REWARD
        for rule in self._rules:
            if rule.matches(event_type):
                return rule.decision()
        return NO_REWARD


_default_evaluator = RuleEvaluator()


def evaluate(event_type: Optional[str]) -> RewardDecision:
    """Evaluate *event_type* against the default rule table."""
    return _default_evaluator.evaluate(event_type)
