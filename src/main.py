"""Command-line entry point — logs the configured default budget.

Usage:
    python -m src.main

Budget inputs come from BUDGET_* environment variables (see src.config).
"""

from __future__ import annotations

import logging
import sys

import structlog

from src.calculators import Budget, InvalidArgument
from src.config import settings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Route stdlib logging and structlog to stdout at the given level."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def main() -> int:
    configure_logging(settings.log_level)
    logger.info("Computing budget (env=%s)", settings.environment)

    try:
        budget = Budget.from_settings(settings.budget)
    except InvalidArgument as exc:
        logger.error("Invalid budget configuration: %s", exc)
        return 1

    summary = budget.summary(settings.budget.affordability_guideline_percent)
    logger.info(
        "Loan %.2f (down %.2f): payment %.2f/month",
        summary.loan_amount,
        summary.down_payment,
        summary.monthly_payment,
    )
    logger.info(
        "Monthly total %.2f (tax %.2f, insurance %.2f, extra %.2f)",
        summary.monthly_total,
        summary.monthly_tax,
        summary.monthly_insurance,
        summary.extra_monthly_expense,
    )
    logger.info(
        "Expense/income %.1f%% → %s",
        summary.expense_to_income_ratio_percent,
        summary.affordability.value,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
