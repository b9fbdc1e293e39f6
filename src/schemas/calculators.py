"""Pydantic schemas for the mortgage and budget calculators.

Pure data classes — no business logic. Used as inputs/outputs by
the amortization function and the budget model.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class AffordabilityLevel(str, Enum):
    """Housing cost vs. income, against the affordability guideline."""

    WITHIN_GUIDELINE = "within_guideline"   # ratio ≤ guideline (28% by default)
    ABOVE_GUIDELINE = "above_guideline"
    UNDEFINED = "undefined"                 # zero income, ratio not finite


class LoanTerms(BaseModel):
    """Inputs to the amortization function."""

    model_config = ConfigDict(frozen=True)

    principal: float
    annual_rate: float
    term_years: float


class BudgetSummary(BaseModel):
    """Snapshot of a budget's inputs and derived monthly figures."""

    model_config = ConfigDict(frozen=True)

    # Inputs
    price: float
    percent_down: float
    annual_rate: float
    term_years: float
    annual_income: float
    annual_insurance: float
    tax_rate: float
    extra_monthly_expense: float

    # Derived
    loan_amount: float
    down_payment: float
    monthly_payment: float
    monthly_tax: float
    monthly_insurance: float
    monthly_total: float
    expense_to_income_ratio_percent: float
    affordability: AffordabilityLevel
