"""Shared fixtures for reward agent tests."""

from __future__ import annotations

import pytest

from rewardagent.config import AgentIdentity, AgentSettings


class RecordingCapability:
    """Dispatch capability that records every transfer request."""

    def __init__(self, fail: bool = False) -> None:
        self.calls: list[dict] = []
        self.fail = fail

    async def send(self, request):
        self.calls.append(dict(request))
        if self.fail:
            raise RuntimeError("transfer rejected")
        return {"tx": "0xabc"}


class RecordingSleep:
    """Awaitable sleep replacement that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def identity() -> AgentIdentity:
    return AgentIdentity()


@pytest.fixture
def settings() -> AgentSettings:
    return AgentSettings(sdk_module="rewardagent_tests_missing_sdk", simulation_delay=0)


@pytest.fixture
def capability() -> RecordingCapability:
    return RecordingCapability()


@pytest.fixture
def failing_capability() -> RecordingCapability:
    return RecordingCapability(fail=True)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


class RecordingLog:
    """Platform logger stand-in exposing info() and error()."""

    def __init__(self) -> None:
        self.info_messages: list[str] = []
        self.error_messages: list[str] = []

    def info(self, message: str) -> None:
        self.info_messages.append(message)

    def error(self, message: str) -> None:
        self.error_messages.append(message)


@pytest.fixture
def platform_log() -> RecordingLog:
    return RecordingLog()
