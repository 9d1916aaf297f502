"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from faucetctl.config.logging import REDACTED, configure_logging, redact_secrets


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    faucet = logging.getLogger("faucetctl")
    faucet_level = faucet.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    faucet.setLevel(faucet_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("faucetctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("faucetctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("faucetctl.test")
        log.warning("json test", sompi=150_000_000)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["sompi"] == 150_000_000
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "faucetctl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("faucetctl.config.discovery").debug("Loaded config")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Loaded config"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "faucetctl.config.discovery"

    def test_private_key_redacted(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("faucetctl.test").info("loaded", faucet_private_key="deadbeef")
        captured = capfd.readouterr()
        assert "deadbeef" not in captured.err
        assert json.loads(captured.err.strip())["faucet_private_key"] == REDACTED

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("jinja2").debug("template noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


class TestRedactSecrets:
    def test_masks_only_non_empty_secrets(self) -> None:
        event = {"event": "x", "faucet_private_key": "k", "private_key": "", "port": 1}
        out = redact_secrets(None, "info", event)
        assert out["faucet_private_key"] == REDACTED
        assert out["private_key"] == ""
        assert out["port"] == 1
