"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Settings are organized into logical groups and composed into a single Settings object.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BudgetSettings(BaseSettings):
    """Default household budget inputs (BUDGET_* variables)."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BUDGET_", extra="ignore")

    price: float = Field(default=1_000_000, description="House price ($)")
    percent_down: float = Field(default=0.20, description="Down payment as a fraction of the price")
    annual_rate: float = Field(default=0.032, description="Nominal annual interest rate (0.032 = 3.2%)")
    term_years: float = Field(default=30, description="Loan term in years")
    annual_income: float = Field(default=100_000, description="Gross yearly income ($)")
    annual_insurance: float = Field(default=1_000, description="Yearly insurance bill ($)")
    tax_rate: float = Field(default=0.01, description="Yearly property tax as a fraction of the price")
    extra_monthly_expense: float = Field(default=0, description="Other monthly housing expense ($)")
    affordability_guideline_percent: float = Field(
        default=28.0,
        description="Expense-to-income ratio ceiling considered affordable",
    )


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.log_level
        settings.budget.price
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Composed settings (loaded from same .env)
    budget: BudgetSettings = Field(default_factory=BudgetSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
