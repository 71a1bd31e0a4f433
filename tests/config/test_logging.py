"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
import structlog

from warungctl.config.logging import bind_workspace, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("warungctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("warungctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("warungctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "warungctl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("warungctl.services.order").debug("Checkout rejected: empty_cart")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Checkout rejected: empty_cart"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "warungctl.services.order"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("markdown_it").debug("parser noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_quiet_keeps_errors_only(self) -> None:
        configure_logging(quiet=True)
        assert logging.getLogger("warungctl").level == logging.ERROR

    def test_verbose_wins_over_quiet(self) -> None:
        configure_logging(verbose=True, quiet=True)
        assert logging.getLogger("warungctl").level == logging.DEBUG


class TestBindWorkspace:
    def test_workspace_on_every_line(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(log_json=True)
        bind_workspace(tmp_path)
        logging.getLogger("warungctl.services.site").warning("Color primary is empty")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["workspace"] == str(tmp_path)

    def test_rebinding_replaces_workspace(
        self, tmp_path: Path, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(log_json=True)
        bind_workspace(tmp_path / "lama")
        bind_workspace(tmp_path / "baru")
        structlog.get_logger("warungctl.test").warning("rebound")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["workspace"] == str(tmp_path / "baru")
