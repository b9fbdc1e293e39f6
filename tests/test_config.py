"""Tests for settings loading and budget defaults from the environment."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.calculators.budget import Budget
from src.config import BudgetSettings, Settings


class TestBudgetSettings:
    """Test BUDGET_* environment overrides."""

    def test_defaults_match_budget(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            budget = Budget.from_settings(BudgetSettings(_env_file=None))
        assert budget.summary() == Budget().summary()

    def test_env_override(self) -> None:
        env = {"BUDGET_PRICE": "500000", "BUDGET_TERM_YEARS": "15", "BUDGET_ANNUAL_RATE": "0.05"}
        with patch.dict(os.environ, env, clear=True):
            budget_settings = BudgetSettings(_env_file=None)
        assert budget_settings.price == 500_000
        assert budget_settings.term_years == 15
        budget = Budget.from_settings(budget_settings)
        assert budget.loan_amount == pytest.approx(400_000)
        assert budget.annual_rate == 0.05

    def test_guideline_default(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert BudgetSettings(_env_file=None).affordability_guideline_percent == 28.0


class TestSettings:
    """Test root settings validation."""

    def test_log_level_upper_cased(self) -> None:
        assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None, log_level="verbose")

    def test_composed_budget_settings(self) -> None:
        with patch.dict(os.environ, {"BUDGET_PERCENT_DOWN": "0.25"}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.budget.percent_down == 0.25
