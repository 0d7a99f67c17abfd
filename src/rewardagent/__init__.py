"""
Reward Agent - event-driven UOMI rewards

Receives lifecycle events from a rewards platform SDK (or a simulated feed),
evaluates a fixed rule table against each event and sends token rewards.

Version: 1.0.0
"""

__version__ = "1.0.0"

from .config import AgentIdentity, AgentSettings
from .rules import DEFAULT_RULES, RewardDecision, RewardRule, RuleEvaluator, evaluate
from .events import EventContext, EventEnvelope, resolve_event_type, resolve_recipient
from .dispatcher import DispatchCapability, DispatchOutcome, RewardDispatcher, TransferRequest
from .router import EventRouter
from .agent import RewardAgent
from .simulation import SIMULATED_EVENTS, SimulatedEventSource
from .resolver import (
    AgentMode,
    CapabilityResolver,
    EventSource,
    Found,
    NotFound,
    SdkEventSource,
    probe_sdk,
)

from .exceptions import (
    RewardAgentError,
    ConfigurationError,
    CapabilityResolutionError,
    DispatchError,
)

__all__ = [
    "__version__",
    # Configuration
    "AgentIdentity",
    "AgentSettings",
    # Rules
    "DEFAULT_RULES",
    "RewardDecision",
    "RewardRule",
    "RuleEvaluator",
    "evaluate",
    # Events
    "EventContext",
    "EventEnvelope",
    "resolve_event_type",
    "resolve_recipient",
    # Dispatch and routing
    "DispatchCapability",
    "DispatchOutcome",
    "RewardDispatcher",
    "TransferRequest",
    "EventRouter",
    "RewardAgent",
    # Event sources
    "SIMULATED_EVENTS",
    "SimulatedEventSource",
    "AgentMode",
    "CapabilityResolver",
    "EventSource",
    "Found",
    "NotFound",
    "SdkEventSource",
    "probe_sdk",
    # Exceptions
    "RewardAgentError",
    "ConfigurationError",
    "CapabilityResolutionError",
    "DispatchError",
]
