"""
Capability Resolver

Decides at startup where events come from. The optional SDK module is
probed for one of several known shapes; when it fits, it is wrapped in an
``SdkEventSource`` and control passes to the SDK's own event loop.
Otherwise the agent runs the simulated feed.

Probe order:
    constructor: ``Agent``, ``default.Agent``, ``createAgent``, ``create_agent``
    start:       ``instance.start()``, then ``module.start(instance)``
"""

from __future__ import annotations

import enum
import importlib
import inspect
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from .agent import RewardAgent
from .config import AgentIdentity, AgentSettings
from .events import EVENT_WILDCARD, SUBSCRIBED_EVENT_TYPES, EventHandler
from .exceptions import CapabilityResolutionError
from .simulation import SimulatedEventSource, Sleep

logger = logging.getLogger(__name__)

_CONSTRUCTOR_PROBES: tuple[tuple[str, Callable[[ModuleType], Any]], ...] = (
    ("Agent", lambda m: getattr(m, "Agent", None)),
    ("default.Agent", lambda m: getattr(getattr(m, "default", None), "Agent", None)),
    ("createAgent", lambda m: getattr(m, "createAgent", None)),
    ("create_agent", lambda m: getattr(m, "create_agent", None)),
)


class AgentMode(str, enum.Enum):
    RESOLVING = "resolving"
    SDK_ACTIVE = "sdk_active"
    SIMULATING = "simulating"


@runtime_checkable
class EventSource(Protocol):
    """Where events come from: register handlers, then hand over control."""

    def subscribe(self, pattern: str, handler: EventHandler) -> None:
        ...

    async def start(self) -> None:
        ...


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class SdkEventSource:
    """Adapts an SDK agent instance to the ``EventSource`` protocol.

    Args:
        module: The imported SDK module.
        instance: The SDK agent created from the module's constructor.
        start: Zero-argument callable that starts the SDK.
    """

    def __init__(self, module: ModuleType, instance: Any, start: Callable[[], Any]) -> None:
        self.module = module
        self.instance = instance
        self._start = start

    @property
    def can_subscribe(self) -> bool:
        return callable(getattr(self.instance, "on", None))

    def subscribe(self, pattern: str, handler: EventHandler) -> None:
        if self.can_subscribe:
            self.instance.on(pattern, handler)

    async def start(self) -> None:
        await _maybe_await(self._start())


@dataclass(frozen=True)
class Found:
    source: SdkEventSource


@dataclass(frozen=True)
class NotFound:
    reason: str


ProbeResult = Union[Found, NotFound]


def _find_constructor(module: ModuleType) -> tuple[str, Callable[..., Any]]:
    for label, probe in _CONSTRUCTOR_PROBES:
        candidate = probe(module)
        if candidate is not None and callable(candidate):
            return label, candidate
    raise CapabilityResolutionError(
        "SDK present but Agent constructor not detected."
    )


def _find_start(module: ModuleType, instance: Any) -> Callable[[], Any]:
    start = getattr(instance, "start", None)
    if callable(start):
        return start
    module_start = getattr(module, "start", None)
    if callable(module_start):
        return lambda: module_start(instance)
    raise CapabilityResolutionError("SDK loaded but no start() found.")


def probe_sdk(module_name: str, identity: AgentIdentity) -> ProbeResult:
    """Import *module_name* and adapt it to an event source.

    Never raises; every failure is reported as ``NotFound``.
    """
    try:
        module = importlib.import_module(module_name)
    except ImportError:
        return NotFound(f"SDK module {module_name!r} not installed")
    except Exception as exc:
        logger.debug("SDK module %s failed to import", module_name, exc_info=True)
        return NotFound(f"Error loading SDK module {module_name!r}: {exc}")
    logger.info("SDK module %s loaded. Will attempt to initialize SDK agent.", module_name)

    try:
        label, constructor = _find_constructor(module)
        logger.debug("Using SDK constructor %s", label)
        instance = constructor(
            name=identity.name,
            description=identity.description,
            wallet=identity.wallet,
        )
        start = _find_start(module, instance)
    except CapabilityResolutionError as exc:
        return NotFound(str(exc))
    except Exception as exc:
        logger.debug("SDK initialization failed", exc_info=True)
        return NotFound(f"Error initializing SDK: {exc}")

    return Found(SdkEventSource(module, instance, start))


class CapabilityResolver:
    """Runs the agent against the SDK when possible, the simulation otherwise.

    Args:
        agent: The reward agent whose ``handle_event`` receives events.
        settings: Process settings (SDK module name, delay, force flag).
        sleep: Sleep function for the simulated feed; replaceable in tests.
    """

    def __init__(
        self,
        agent: RewardAgent,
        settings: AgentSettings,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self._agent = agent
        self._settings = settings
        self._sleep = sleep
        self.mode = AgentMode.RESOLVING

    async def run(self) -> AgentMode:
        """Resolve the event source and run it. Returns the terminal mode."""
        if self._settings.force_simulation:
            logger.info("Simulation forced by configuration.")
            return await self._simulate()

        result = probe_sdk(self._settings.sdk_module, self._agent.identity)
        if isinstance(result, NotFound):
            logger.info("%s; running in simulation mode.", result.reason)
            return await self._simulate()

        source = result.source
        try:
            if source.can_subscribe:
                for event_type in SUBSCRIBED_EVENT_TYPES:
                    source.subscribe(event_type, self._agent.handle_event)
            self.mode = AgentMode.SDK_ACTIVE
            await source.start()
        except Exception:
            logger.exception("Error starting SDK agent, falling back to simulation")
            return await self._simulate()
        return self.mode

    async def _simulate(self) -> AgentMode:
        self.mode = AgentMode.SIMULATING
        source = SimulatedEventSource(
            delay=self._settings.simulation_delay,
            sleep=self._sleep,
        )
        source.subscribe(EVENT_WILDCARD, self._agent.handle_event)
        await source.start()
        return self.mode
