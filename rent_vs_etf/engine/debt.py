"""Fixed-rate mortgage math.

Pure functions: Decimal in, Decimal out. No I/O.
Rates are annual fractions (Decimal("0.065") for 6.5%).
"""

from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Calculate fixed monthly mortgage payment."""
    if principal <= 0:
        return Decimal("0")
    if annual_rate <= 0:
        return (principal / (term_years * 12)).quantize(TWO_PLACES, ROUND_HALF_UP)

    r = annual_rate / 12
    n = term_years * 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def remaining_balance(
    principal: Decimal,
    annual_rate: Decimal,
    term_years: int,
    months_elapsed: int,
) -> Decimal:
    """Outstanding loan balance after `months_elapsed` scheduled payments.

    Closed form B = P * [(1+r)^n - (1+r)^k] / [(1+r)^n - 1]. A zero-rate loan
    amortizes straight-line, so its balance is P * (n - k) / n.
    """
    n = term_years * 12
    if principal <= 0 or months_elapsed >= n:
        return Decimal("0")
    k = max(months_elapsed, 0)

    if annual_rate <= 0:
        return (principal * (n - k) / n).quantize(TWO_PLACES, ROUND_HALF_UP)

    r = annual_rate / 12
    factor_n = (1 + r) ** n
    factor_k = (1 + r) ** k
    balance = principal * (factor_n - factor_k) / (factor_n - 1)
    return balance.quantize(TWO_PLACES, ROUND_HALF_UP)


def annual_debt_service(payment: Decimal, term_years: int, year: int) -> Decimal:
    """Mortgage paid during `year` (1-indexed); zero once the loan is paid off."""
    if year * 12 <= term_years * 12:
        return payment * 12
    return Decimal("0")
