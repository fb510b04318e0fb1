"""ETF buy-and-hold projection.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from rent_vs_etf.models.assumptions import ComparisonInput, HUNDRED
from rent_vs_etf.models.results import EtfProjection
from rent_vs_etf.engine.errors import ComparisonDomainError
from rent_vs_etf.engine.returns import annualized_return

TWO_PLACES = Decimal("0.01")


def net_annual_return(inputs: ComparisonInput) -> Decimal:
    """Return after the fund's expense ratio, as a fraction."""
    return (inputs.etf_annual_return_rate - inputs.etf_annual_fee_rate) / HUNDRED


def etf_equity_curve(
    initial_investment: Decimal,
    hold_years: int,
    net_return: Decimal,
) -> list[Decimal]:
    """Year-end fund values, compounded once per year.

    Returns list of length hold_years + 1 (year 0 = initial). A net return at
    or below -100% wipes the position out; the value never goes negative.
    """
    growth = max(1 + net_return, Decimal("0"))
    curve = [initial_investment]
    for year in range(1, hold_years + 1):
        curve.append((initial_investment * growth ** year).quantize(TWO_PLACES, ROUND_HALF_UP))
    return curve


def project_etf(inputs: ComparisonInput, initial_investment: Decimal) -> EtfProjection:
    """Compound `initial_investment` over the comparison period."""
    horizon = inputs.comparison_period_years
    if horizon <= 0:
        raise ComparisonDomainError("comparison_period_years must be positive")
    if initial_investment <= 0:
        raise ComparisonDomainError("ETF initial investment must be positive")

    curve = etf_equity_curve(initial_investment, horizon, net_annual_return(inputs))
    final_value = curve[-1]

    return EtfProjection(
        initial_investment=initial_investment,
        final_value=final_value,
        total_profit=final_value - initial_investment,
        annualized_return=annualized_return(final_value / initial_investment, horizon),
        yearly_values=curve,
    )
