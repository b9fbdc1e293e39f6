"""Financial calculators — mortgage amortization, household budget."""

from src.calculators.budget import Budget
from src.calculators.mortgage import InvalidArgument, Mortgage, amortize, amortize_terms, monthly_periods

__all__ = [
    "Budget",
    "InvalidArgument",
    "Mortgage",
    "amortize",
    "amortize_terms",
    "monthly_periods",
]
