"""Tests for the command-line entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog

from src import main as main_module
from src.config import BudgetSettings, Settings


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _settings(**budget: float) -> Settings:
    return Settings(_env_file=None, log_level="INFO", budget=BudgetSettings(_env_file=None, **budget))


class TestMain:
    """Test the budget summary run."""

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch.object(main_module, "settings", _settings()),
            caplog.at_level(logging.INFO, logger="src.main"),
        ):
            assert main_module.main() == 0
        assert "payment 3459.73/month" in caplog.text
        assert "above_guideline" in caplog.text

    def test_invalid_configuration(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch.object(main_module, "settings", _settings(term_years=0)),
            caplog.at_level(logging.INFO, logger="src.main"),
        ):
            assert main_module.main() == 1
        assert "Invalid budget configuration" in caplog.text
