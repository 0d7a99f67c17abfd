"""Tests for process bootstrap."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from rewardagent.agent import RewardAgent
from rewardagent.resolver import AgentMode
from rewardagent.runtime import run_agent, start_agent


class TestStartAgent:
    async def test_simulation_without_sdk(self, settings, recording_sleep) -> None:
        mode = await start_agent(settings, sleep=recording_sleep)
        assert mode is AgentMode.SIMULATING
        assert recording_sleep.delays == [0, 0, 0]


class TestRunAgent:
    async def test_without_keepalive_returns(self, settings, recording_sleep) -> None:
        with patch("rewardagent.server.serve", new=AsyncMock()) as serve:
            mode = await run_agent(settings, keepalive=False, sleep=recording_sleep)

        assert mode is AgentMode.SIMULATING
        serve.assert_not_called()

    async def test_keepalive_is_awaited(self, settings, recording_sleep) -> None:
        with patch("rewardagent.server.serve", new=AsyncMock()) as serve:
            mode = await run_agent(settings, keepalive=True, sleep=recording_sleep)

        assert mode is AgentMode.SIMULATING
        serve.assert_awaited_once_with(settings)

    async def test_startup_failure_propagates(self, settings) -> None:
        async def serve_forever(_settings):
            await asyncio.Event().wait()

        with patch("rewardagent.server.serve", new=serve_forever), \
                patch.object(RewardAgent, "on_start", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError, match="boom"):
                await run_agent(settings, keepalive=True)
