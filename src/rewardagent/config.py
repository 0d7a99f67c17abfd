"""
Agent configuration.

The static identity and the runtime settings are built once at process
start (usually from the environment) and passed by reference to every
component that needs them. Both models are frozen.
"""

from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

DEFAULT_AGENT_NAME = "Dani"
DEFAULT_AGENT_DESCRIPTION = "A Reward Agent that gives UOMI for specific milestones"
DEFAULT_AGENT_WALLET = "0x5da08546bff22a41b596424d454eb4191add0035"
DEFAULT_TOKEN = "UOMI"
DEFAULT_SDK_MODULE = "uomi_wasp"
DEFAULT_PORT = 3000

_TRUTHY = {"1", "true", "yes", "on"}


class AgentIdentity(BaseModel):
    """Display identity and payout wallet of the agent."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_AGENT_NAME
    description: str = DEFAULT_AGENT_DESCRIPTION
    wallet: str = DEFAULT_AGENT_WALLET
    token: str = DEFAULT_TOKEN


class AgentSettings(BaseModel):
    """Runtime settings for the reward agent process."""

    model_config = ConfigDict(frozen=True)

    identity: AgentIdentity = Field(default_factory=AgentIdentity)
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    sdk_module: str = DEFAULT_SDK_MODULE
    simulation_delay: float = Field(
        default=1.0,
        ge=0.0,
        description="Seconds to wait before each simulated event",
    )
    force_simulation: bool = False
    metrics_port: int = Field(
        default=0,
        ge=0,
        le=65535,
        description="Port for the Prometheus exporter; 0 disables it",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AgentSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ

        identity_values = {
            field: env[var]
            for field, var in (
                ("name", "REWARD_AGENT_NAME"),
                ("description", "REWARD_AGENT_DESCRIPTION"),
                ("wallet", "REWARD_AGENT_WALLET"),
                ("token", "REWARD_AGENT_TOKEN"),
            )
            if env.get(var)
        }
        values: dict = {"identity": AgentIdentity(**identity_values)}

        for field, var in (
            ("port", "PORT"),
            ("host", "REWARD_AGENT_HOST"),
            ("sdk_module", "REWARD_AGENT_SDK_MODULE"),
            ("simulation_delay", "REWARD_AGENT_SIMULATION_DELAY"),
            ("metrics_port", "REWARD_AGENT_METRICS_PORT"),
        ):
            if env.get(var):
                values[field] = env[var]

        if env.get("REWARD_AGENT_LOG_LEVEL"):
            values["log_level"] = env["REWARD_AGENT_LOG_LEVEL"].strip().upper()

        force = env.get("REWARD_AGENT_FORCE_SIMULATION", "")
        values["force_simulation"] = force.strip().lower() in _TRUTHY

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid agent configuration: {exc}") from exc
