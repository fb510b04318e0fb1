"""Return metrics: annualized return (CAGR) and IRR.

Pure functions. No I/O.
"""

import math
from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import brentq

from rent_vs_etf.engine.errors import ComparisonDomainError

FOUR_PLACES = Decimal("0.0001")
TOTAL_LOSS_PCT = Decimal("-100")


def annualized_return(growth_ratio: Decimal, years: int) -> Decimal:
    """Annualized return in percent for an ending/starting value ratio.

    ((ratio)^(1/years) - 1) * 100. A ratio at or below zero means the whole
    stake (or more) was lost, which is reported as -100%.
    """
    if years <= 0:
        raise ComparisonDomainError("annualized return needs a horizon of at least one year")
    if growth_ratio <= 0:
        return TOTAL_LOSS_PCT.quantize(FOUR_PLACES)

    # Fractional exponent: go through float like the IRR solver does
    cagr = float(growth_ratio) ** (1 / years) - 1
    return (Decimal(str(cagr)) * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)


def compute_irr(cash_flows: list[Decimal]) -> Decimal:
    """Compute IRR from a vector of annual cash flows.

    cash_flows[0] should be negative (initial investment).
    cash_flows[-1] should include sale proceeds.

    Uses Brent's method on NPV function. Returns 0 when no root is found,
    including long horizons where discounting at the search bounds leaves
    float range.
    """
    if not cash_flows or len(cash_flows) < 2:
        return Decimal("0")

    # Convert to float for scipy
    cf_float = [float(cf) for cf in cash_flows]

    def npv(rate: float) -> float:
        value = sum(cf / (1 + rate) ** t for t, cf in enumerate(cf_float))
        if not math.isfinite(value):
            raise OverflowError(f"NPV out of float range at rate {rate}")
        return value

    # Search between -99% and 1000%
    try:
        irr = brentq(npv, -0.99, 10.0, xtol=1e-8, maxiter=1000)
        return Decimal(str(irr)).quantize(FOUR_PLACES, ROUND_HALF_UP)
    except (ValueError, ZeroDivisionError, OverflowError):
        # No sign change in range (e.g., all-negative cash flows), or NPV
        # not representable as a float at a bound
        return Decimal("0")
