"""Fixed-rate mortgage calculator.

Pure Python, float arithmetic. Implements:
- Monthly payment for a fully amortizing loan (annuity formula)
- A loan object that keeps its monthly payment current on every change

Payment formula, with n monthly periods and monthly rate r = annual_rate / 12:

    payment = principal × (1+r)^n / Σ_{i=1..n} (1+r)^(i-1)
            = principal / Σ_{j=1..n} (1+r)^(-j)

which equals principal × r(1+r)^n / ((1+r)^n - 1) for r > 0 and
principal / n for r = 0, without branching on the rate. The second form
is the one computed: its terms shrink toward 0, so large rates or long
terms cannot overflow.

Fractional terms are truncated to whole months (2.5 years → 30 periods).
Terms are capped at MAX_TERM_YEARS; the sum is linear in the period count.
"""

from __future__ import annotations

import logging
import math

from src.schemas.calculators import LoanTerms

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
MAX_TERM_YEARS = 10_000


class InvalidArgument(ValueError):
    """Raised when a loan parameter violates a precondition."""

    def __init__(self, parameter: str, value: object, reason: str) -> None:
        super().__init__(f"{parameter} {reason} (got {value!r})")
        self.parameter = parameter
        self.value = value
        self.reason = reason


def monthly_periods(term_years: float) -> int:
    """Number of whole monthly periods in a term, truncating partial months.

    Raises:
        InvalidArgument: If the term is not positive, not finite,
            longer than MAX_TERM_YEARS or shorter than one month.
    """
    if not term_years > 0:
        raise InvalidArgument("term_years", term_years, "must be greater than 0")
    if not math.isfinite(term_years):
        raise InvalidArgument("term_years", term_years, "must be finite")
    if term_years > MAX_TERM_YEARS:
        raise InvalidArgument("term_years", term_years, f"must be at most {MAX_TERM_YEARS}")
    periods = math.floor(term_years * MONTHS_PER_YEAR)
    if periods < 1:
        raise InvalidArgument("term_years", term_years, "must cover at least one monthly period")
    return periods


def amortize(principal: float, annual_rate: float, term_years: float) -> float:
    """Calculate the fixed monthly payment (principal + interest) of a loan.

    Args:
        principal: Amount borrowed, in currency units.
        annual_rate: Nominal yearly rate as a decimal (0.032 = 3.2%),
            compounded monthly.
        term_years: Loan term in years; partial months are truncated.

    Returns:
        The monthly payment.

    Raises:
        InvalidArgument: If principal < 0, annual_rate < 0 or term_years ≤ 0,
            or any of them is not finite.
    """
    if not principal >= 0:
        raise InvalidArgument("principal", principal, "must be greater than or equal to 0")
    if not math.isfinite(principal):
        raise InvalidArgument("principal", principal, "must be finite")
    if not annual_rate >= 0:
        raise InvalidArgument("annual_rate", annual_rate, "must be greater than or equal to 0")
    if not math.isfinite(annual_rate):
        raise InvalidArgument("annual_rate", annual_rate, "must be finite")
    periods = monthly_periods(term_years)

    growth = 1.0 + annual_rate / MONTHS_PER_YEAR
    # Σ (1+r)^(-j) over all periods; equals `periods` when the rate is 0
    discount = math.fsum(math.pow(growth, -j) for j in range(1, periods + 1))
    return principal / discount


def amortize_terms(terms: LoanTerms) -> float:
    """Calculate the monthly payment for a LoanTerms value."""
    return amortize(terms.principal, terms.annual_rate, terms.term_years)


class Mortgage:
    """A fixed-rate loan whose monthly payment is recomputed on every change.

    Changes are applied all-or-nothing: the new payment is computed before
    any field is written, so a rejected value leaves the loan untouched.
    """

    def __init__(self, loan_amount: float, annual_rate: float, term_years: float) -> None:
        terms = LoanTerms(principal=loan_amount, annual_rate=annual_rate, term_years=term_years)
        self._monthly_payment = amortize_terms(terms)
        self._terms = terms

    def __repr__(self) -> str:
        return (
            f"Mortgage(loan_amount={self.loan_amount!r}, annual_rate={self.annual_rate!r}, "
            f"term_years={self.term_years!r})"
        )

    @property
    def loan_amount(self) -> float:
        return self._terms.principal

    @loan_amount.setter
    def loan_amount(self, value: float) -> None:
        self.update(loan_amount=value)

    @property
    def annual_rate(self) -> float:
        return self._terms.annual_rate

    @annual_rate.setter
    def annual_rate(self, value: float) -> None:
        self.update(annual_rate=value)

    @property
    def term_years(self) -> float:
        return self._terms.term_years

    @term_years.setter
    def term_years(self, value: float) -> None:
        self.update(term_years=value)

    @property
    def monthly_payment(self) -> float:
        """Cached payment, always consistent with the current terms."""
        return self._monthly_payment

    def loan_terms(self) -> LoanTerms:
        return self._terms

    def update(
        self,
        *,
        loan_amount: float | None = None,
        annual_rate: float | None = None,
        term_years: float | None = None,
    ) -> None:
        """Change one or more loan fields with a single recomputation.

        Fields left as None keep their current value. A change that
        leaves every field equal to its current value is a no-op.

        Raises:
            InvalidArgument: If the resulting terms are invalid. The loan
                keeps its previous terms and payment.
        """
        current = self._terms
        terms = LoanTerms(
            principal=current.principal if loan_amount is None else loan_amount,
            annual_rate=current.annual_rate if annual_rate is None else annual_rate,
            term_years=current.term_years if term_years is None else term_years,
        )
        if terms == current:
            return

        payment = amortize_terms(terms)
        self._terms = terms
        self._monthly_payment = payment
        logger.debug(
            "Mortgage recomputed: principal=%.2f rate=%.4f term=%s → payment=%.2f",
            terms.principal,
            terms.annual_rate,
            terms.term_years,
            payment,
        )
