"""Unit tests for the command-line entry point."""

import pytest
import uvicorn
from click.testing import CliRunner

from boundcache.cli import main


@pytest.fixture
def served(monkeypatch):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    return calls


class TestCli:
    """Test the boundcache command group."""

    def test_serve_builds_app_from_options(self, served):
        """Test serve passes CLI options to the app and uvicorn."""
        result = CliRunner().invoke(
            main,
            ["serve", "--port", "8080", "--capacity", "10", "--ttl", "5", "--no-report", "--log-level", "warning"],
        )

        assert result.exit_code == 0, result.output
        runtime = served["app"].state.runtime
        assert served["port"] == 8080
        assert served["log_level"] == "warning"
        assert runtime.cache.capacity == 10
        assert runtime.cache.ttl_seconds == 5
        assert runtime.reporter is None

    def test_serve_rejects_zero_capacity(self, served):
        """Test serve refuses a zero capacity before starting uvicorn."""
        result = CliRunner().invoke(main, ["serve", "--capacity", "0"])

        assert result.exit_code == 2
        assert "capacity must be >= 1" in result.output
        assert served == {}

    def test_help_lists_serve(self):
        """Test the group help lists the serve command."""
        result = CliRunner().invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "serve" in result.output
