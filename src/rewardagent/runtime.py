"""
Process bootstrap.

Starts the keep-alive listener, announces the agent and resolves the event
source. With the listener enabled the process keeps running after the
simulated feed finishes; without it ``run_agent`` returns once startup is
done.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from . import metrics, server
from .agent import RewardAgent
from .config import AgentSettings
from .resolver import AgentMode, CapabilityResolver
from .simulation import Sleep

logger = logging.getLogger(__name__)


async def start_agent(settings: AgentSettings, sleep: Optional[Sleep] = None) -> AgentMode:
    """Announce the agent and run it on the resolved event source."""
    agent = RewardAgent(settings.identity)
    await agent.on_start()
    return await CapabilityResolver(agent, settings, sleep=sleep).run()


async def run_agent(
    settings: AgentSettings,
    keepalive: bool = True,
    sleep: Optional[Sleep] = None,
) -> AgentMode:
    """Run the whole process. Errors escaping startup propagate to the caller."""
    metrics.start_exporter(settings.metrics_port)

    server_task: Optional[asyncio.Task[None]] = None
    if keepalive:
        server_task = asyncio.create_task(server.serve(settings))

    try:
        mode = await start_agent(settings, sleep=sleep)
    except BaseException:
        if server_task is not None:
            server_task.cancel()
            await asyncio.gather(server_task, return_exceptions=True)
        raise

    logger.info("Agent running in %s mode", mode.value)
    if server_task is not None:
        await server_task
    return mode
