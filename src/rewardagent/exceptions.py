"""Centralized exception hierarchy for the reward agent.

All reward agent exceptions inherit from RewardAgentError. Resolution and
dispatch errors are recovered locally and only ever show up in logs; a
ConfigurationError aborts startup.
"""


class RewardAgentError(Exception):
    """Base exception for all reward agent errors."""


class ConfigurationError(RewardAgentError):
    """Invalid configuration value (environment or CLI)."""


class CapabilityResolutionError(RewardAgentError):
    """The optional SDK module could not be adapted to an event source."""


class DispatchError(RewardAgentError):
    """A reward transfer through the dispatch capability failed."""

    def __init__(self, recipient: str, amount: float, cause: BaseException) -> None:
        super().__init__(f"Transfer of {amount} to {recipient} failed: {cause}")
        self.recipient = recipient
        self.amount = amount
        self.cause = cause


__all__ = [
    "RewardAgentError",
    "ConfigurationError",
    "CapabilityResolutionError",
    "DispatchError",
]
