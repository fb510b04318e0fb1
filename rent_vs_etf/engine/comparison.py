"""Comparator: rental property vs ETF on the same starting capital.

Pure computation. No I/O. ComparisonInput in, ComparisonOutcome out.
"""

import logging

from rent_vs_etf.models.assumptions import ComparisonInput
from rent_vs_etf.models.results import ComparisonOutcome, Strategy
from rent_vs_etf.engine.rental import project_rental
from rent_vs_etf.engine.etf import project_etf

logger = logging.getLogger(__name__)


def compare_investments(inputs: ComparisonInput) -> ComparisonOutcome:
    """Run both projections and decide which strategy earns more.

    The ETF starts with exactly the rental's down payment plus closing costs.
    Rental wins only on strictly greater profit; ties go to the ETF.
    """
    rental = project_rental(inputs)
    etf = project_etf(inputs, rental.initial_investment)

    if rental.total_profit > etf.total_profit:
        better = Strategy.RENTAL
    else:
        better = Strategy.ETF
    difference = abs(rental.total_profit - etf.total_profit)

    logger.debug(
        "Comparison over %d years: rental profit %s, ETF profit %s -> %s",
        inputs.comparison_period_years,
        rental.total_profit,
        etf.total_profit,
        better.value,
    )

    return ComparisonOutcome(
        inputs=inputs,
        rental=rental,
        etf=etf,
        better_investment=better,
        profit_difference=difference,
    )
