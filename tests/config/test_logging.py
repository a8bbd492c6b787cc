"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from symtax.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    symtax = logging.getLogger("symtax")
    symtax_level = symtax.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    symtax.setLevel(symtax_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("symtax").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("symtax").level == logging.WARNING

    def test_pluggy_quiet(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("pluggy").level == logging.WARNING

    def test_single_root_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("symtax.test")
        log.debug("validate.complete", taxonomy="Tests.Mini")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "validate.complete"
        assert parsed["taxonomy"] == "Tests.Mini"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "symtax.test"
        assert "timestamp" in parsed

    def test_stdlib_symtax_logger_gets_structured_fields(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("symtax.domain.taxonomy").debug("Taxonomy %s rejected contract", "Tests.Mini")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Taxonomy Tests.Mini rejected contract"
        assert parsed["logger"] == "symtax.domain.taxonomy"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("pluggy").debug("hook noise")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_debug_hidden_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("symtax.domain.taxonomy").debug("hidden")
        assert capfd.readouterr().err == ""
