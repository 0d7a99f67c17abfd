"""
Reward Agent CLI

Usage:
    reward-agent run --port 3000
    reward-agent rules list
    reward-agent rules evaluate daily_active
"""

import asyncio
import logging
import sys
from typing import Optional

import click

from rewardagent import __version__
from rewardagent.cli.rules_cli import rules
from rewardagent.config import AgentSettings
from rewardagent.exceptions import ConfigurationError
from rewardagent.runtime import run_agent

logger = logging.getLogger("rewardagent")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s — %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="reward-agent")
def app():
    """Reward Agent - pays UOMI for user milestones.

    Listens for rewards platform events (or replays a simulated feed),
    evaluates the rule table and sends token rewards.
    """
    pass


@app.command()
@click.option("--host", default=None, help="Keep-alive listener host (default 0.0.0.0).")
@click.option("--port", type=int, default=None, help="Keep-alive listener port (default $PORT or 3000).")
@click.option("--sdk-module", default=None, help="Import name of the rewards SDK module.")
@click.option("--simulate", is_flag=True, help="Skip SDK probing and run the simulated feed.")
@click.option("--delay", type=float, default=None, help="Seconds before each simulated event.")
@click.option("--no-keepalive", is_flag=True, help="Exit after startup instead of serving HTTP.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default $REWARD_AGENT_LOG_LEVEL or INFO).",
)
def run(
    host: Optional[str],
    port: Optional[int],
    sdk_module: Optional[str],
    simulate: bool,
    delay: Optional[float],
    no_keepalive: bool,
    log_level: Optional[str],
):
    """Start the reward agent."""
    try:
        settings = AgentSettings.from_env()
        overrides = {
            key: value
            for key, value in (
                ("host", host),
                ("port", port),
                ("sdk_module", sdk_module),
                ("simulation_delay", delay),
                ("log_level", log_level.upper() if log_level else None),
            )
            if value is not None
        }
        if simulate:
            overrides["force_simulation"] = True
        settings = AgentSettings.model_validate({**settings.model_dump(), **overrides})
    except (ConfigurationError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        asyncio.run(run_agent(settings, keepalive=not no_keepalive))
    except KeyboardInterrupt:
        logger.info("Agent stopped")
    except Exception:
        logger.exception("Agent failed")
        sys.exit(1)


app.add_command(rules)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
