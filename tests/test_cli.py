"""Tests for the reward agent CLI."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from rewardagent import __version__
from rewardagent.cli.main import app
from rewardagent.resolver import AgentMode


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


class TestCLI:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Reward Agent" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestRunCommand:
    def test_simulation_completes(self, runner):
        result = runner.invoke(
            app,
            ["run", "--simulate", "--delay", "0", "--no-keepalive"],
            env={"REWARD_AGENT_METRICS_PORT": "0"},
        )
        assert result.exit_code == 0, result.output

    def test_options_override_environment(self, runner):
        with patch("rewardagent.cli.main.run_agent", new=AsyncMock(return_value=AgentMode.SIMULATING)) as run_agent:
            result = runner.invoke(
                app,
                ["run", "--port", "9000", "--sdk-module", "other_sdk", "--simulate", "--no-keepalive"],
                env={"PORT": "8000", "REWARD_AGENT_SDK_MODULE": "env_sdk"},
            )

        assert result.exit_code == 0, result.output
        settings = run_agent.await_args.args[0]
        assert settings.port == 9000
        assert settings.sdk_module == "other_sdk"
        assert settings.force_simulation is True
        assert run_agent.await_args.kwargs == {"keepalive": False}

    def test_startup_failure_exits_1(self, runner):
        with patch("rewardagent.cli.main.run_agent", new=AsyncMock(side_effect=RuntimeError("boom"))):
            result = runner.invoke(app, ["run", "--no-keepalive"])
        assert result.exit_code == 1

    def test_invalid_log_level_exits_1(self, runner):
        result = runner.invoke(app, ["run", "--no-keepalive"], env={"REWARD_AGENT_LOG_LEVEL": "FOO"})
        assert result.exit_code == 1
        assert "Error" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_invalid_port_exits_1(self, runner):
        result = runner.invoke(app, ["run", "--no-keepalive"], env={"PORT": "abc"})
        assert result.exit_code == 1
        assert "Error" in result.output


class TestRulesCommands:
    def test_list_json(self, runner):
        result = runner.invoke(app, ["rules", "list", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [r["reason"] for r in data] == ["First faucet claim", "Daily active"]
        assert data[0]["event_types"] == ["faucet_claim:first_time", "first_faucet_claim"]
        assert data[0]["amount"] == 10

    def test_list_table(self, runner):
        result = runner.invoke(app, ["rules", "list"])
        assert result.exit_code == 0
        assert "daily_active" in result.output
        assert "Total rules: 2" in result.output

    def test_evaluate_json(self, runner):
        result = runner.invoke(app, ["rules", "evaluate", "daily_active", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "event_type": "daily_active",
            "should_reward": True,
            "amount": 5,
            "reason": "Daily active",
        }

    def test_evaluate_no_reward(self, runner):
        result = runner.invoke(app, ["rules", "evaluate", "random_event"])
        assert result.exit_code == 0
        assert "No reward" in result.output
