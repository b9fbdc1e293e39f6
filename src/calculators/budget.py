"""Household housing budget built around a fixed-rate mortgage.

Derives the monthly PITI figures (principal + interest, tax, insurance)
plus any extra monthly expense, and the expense-to-income ratio used
as an affordability signal:

  ratio ≤ 28%  → WITHIN_GUIDELINE
  ratio > 28%  → ABOVE_GUIDELINE
  no income    → UNDEFINED
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from src.calculators.mortgage import MONTHS_PER_YEAR, InvalidArgument, Mortgage
from src.schemas.calculators import AffordabilityLevel, BudgetSummary, LoanTerms

if TYPE_CHECKING:
    from src.config import BudgetSettings

logger = logging.getLogger(__name__)

DEFAULT_AFFORDABILITY_GUIDELINE = 28.0


class Budget:
    """Mutable household budget; the monthly payment is never stale.

    Setting a field to its current value does nothing. Changing a loan
    field (price, percent_down, annual_rate, term_years) recomputes the
    monthly payment immediately; an invalid change (including percent_down
    outside [0, 1]) raises InvalidArgument and leaves the budget as it was.
    """

    def __init__(
        self,
        price: float = 1_000_000,
        percent_down: float = 0.20,
        annual_rate: float = 0.032,
        term_years: float = 30,
        annual_income: float = 100_000,
        annual_insurance: float = 1_000,
        tax_rate: float = 0.01,
        extra_monthly_expense: float = 0,
    ) -> None:
        _check_percent_down(percent_down)
        self._price = price
        self._percent_down = percent_down
        self._mortgage = Mortgage(_loan_amount(price, percent_down), annual_rate, term_years)
        self._annual_income = annual_income
        self._annual_insurance = annual_insurance
        self._tax_rate = tax_rate
        self._extra_monthly_expense = extra_monthly_expense

    @classmethod
    def from_settings(cls, budget_settings: BudgetSettings) -> Budget:
        """Build a budget from configured defaults."""
        return cls(
            price=budget_settings.price,
            percent_down=budget_settings.percent_down,
            annual_rate=budget_settings.annual_rate,
            term_years=budget_settings.term_years,
            annual_income=budget_settings.annual_income,
            annual_insurance=budget_settings.annual_insurance,
            tax_rate=budget_settings.tax_rate,
            extra_monthly_expense=budget_settings.extra_monthly_expense,
        )

    def __repr__(self) -> str:
        return (
            f"Budget(price={self._price!r}, percent_down={self._percent_down!r}, "
            f"annual_rate={self.annual_rate!r}, term_years={self.term_years!r}, "
            f"annual_income={self._annual_income!r}, annual_insurance={self._annual_insurance!r}, "
            f"tax_rate={self._tax_rate!r}, extra_monthly_expense={self._extra_monthly_expense!r})"
        )

    # ── Loan fields ──────────────────────────────────────────────────

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        if value == self._price:
            return
        self._change_loan("price", value, loan_amount=_loan_amount(value, self._percent_down))
        self._price = value

    @property
    def percent_down(self) -> float:
        return self._percent_down

    @percent_down.setter
    def percent_down(self, value: float) -> None:
        if value == self._percent_down:
            return
        _check_percent_down(value)
        self._change_loan("percent_down", value, loan_amount=_loan_amount(self._price, value))
        self._percent_down = value

    @property
    def annual_rate(self) -> float:
        return self._mortgage.annual_rate

    @annual_rate.setter
    def annual_rate(self, value: float) -> None:
        if value == self.annual_rate:
            return
        self._change_loan("annual_rate", value, annual_rate=value)

    @property
    def term_years(self) -> float:
        return self._mortgage.term_years

    @term_years.setter
    def term_years(self, value: float) -> None:
        if value == self.term_years:
            return
        self._change_loan("term_years", value, term_years=value)

    def _change_loan(self, field: str, value: float, **changes: float) -> None:
        try:
            self._mortgage.update(**changes)
        except InvalidArgument as exc:
            logger.debug("Rejected %s=%r: %s", field, value, exc)
            raise

    # ── Household fields ─────────────────────────────────────────────

    @property
    def annual_income(self) -> float:
        return self._annual_income

    @annual_income.setter
    def annual_income(self, value: float) -> None:
        if value != self._annual_income:
            self._annual_income = value

    @property
    def annual_insurance(self) -> float:
        return self._annual_insurance

    @annual_insurance.setter
    def annual_insurance(self, value: float) -> None:
        if value != self._annual_insurance:
            self._annual_insurance = value

    @property
    def tax_rate(self) -> float:
        return self._tax_rate

    @tax_rate.setter
    def tax_rate(self, value: float) -> None:
        if value != self._tax_rate:
            self._tax_rate = value

    @property
    def extra_monthly_expense(self) -> float:
        return self._extra_monthly_expense

    @extra_monthly_expense.setter
    def extra_monthly_expense(self, value: float) -> None:
        if value != self._extra_monthly_expense:
            self._extra_monthly_expense = value

    # ── Derived figures ──────────────────────────────────────────────

    @property
    def loan_amount(self) -> float:
        return self._mortgage.loan_amount

    @property
    def down_payment(self) -> float:
        return self._price * self._percent_down

    @property
    def monthly_payment(self) -> float:
        return self._mortgage.monthly_payment

    @property
    def monthly_tax(self) -> float:
        return self._price * self._tax_rate / MONTHS_PER_YEAR

    @property
    def monthly_insurance(self) -> float:
        return self._annual_insurance / MONTHS_PER_YEAR

    @property
    def monthly_total(self) -> float:
        return (
            self.monthly_payment
            + self.monthly_tax
            + self.monthly_insurance
            + self._extra_monthly_expense
        )

    @property
    def expense_to_income_ratio_percent(self) -> float:
        """Monthly housing cost as a percentage of monthly gross income.

        With zero income the ratio is inf (or nan when the cost is also zero).
        """
        total = self.monthly_total
        monthly_income = self._annual_income / MONTHS_PER_YEAR
        if monthly_income == 0:
            return math.nan if total == 0 else math.copysign(math.inf, total)
        return 100 * total / monthly_income

    def affordability(
        self, guideline_percent: float = DEFAULT_AFFORDABILITY_GUIDELINE
    ) -> AffordabilityLevel:
        """Classify the expense-to-income ratio against the guideline."""
        ratio = self.expense_to_income_ratio_percent
        if not math.isfinite(ratio):
            return AffordabilityLevel.UNDEFINED
        if ratio <= guideline_percent:
            return AffordabilityLevel.WITHIN_GUIDELINE
        return AffordabilityLevel.ABOVE_GUIDELINE

    def loan_terms(self) -> LoanTerms:
        return self._mortgage.loan_terms()

    def summary(self, guideline_percent: float = DEFAULT_AFFORDABILITY_GUIDELINE) -> BudgetSummary:
        """Snapshot of all inputs and derived figures."""
        return BudgetSummary(
            price=self._price,
            percent_down=self._percent_down,
            annual_rate=self.annual_rate,
            term_years=self.term_years,
            annual_income=self._annual_income,
            annual_insurance=self._annual_insurance,
            tax_rate=self._tax_rate,
            extra_monthly_expense=self._extra_monthly_expense,
            loan_amount=self.loan_amount,
            down_payment=self.down_payment,
            monthly_payment=self.monthly_payment,
            monthly_tax=self.monthly_tax,
            monthly_insurance=self.monthly_insurance,
            monthly_total=self.monthly_total,
            expense_to_income_ratio_percent=self.expense_to_income_ratio_percent,
            affordability=self.affordability(guideline_percent),
        )


def _loan_amount(price: float, percent_down: float) -> float:
    return price * (1 - percent_down)


def _check_percent_down(value: float) -> None:
    if not 0 <= value <= 1:
        raise InvalidArgument("percent_down", value, "must be between 0 and 1")
