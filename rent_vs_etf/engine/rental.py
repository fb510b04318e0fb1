"""Rental property projection: buy, rent out, sell at the horizon.

Pure functions: ComparisonInput in, RentalProjection out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from rent_vs_etf.models.assumptions import ComparisonInput, HUNDRED
from rent_vs_etf.models.results import RentalProjection, YearlyRentalProjection
from rent_vs_etf.engine.debt import monthly_payment, remaining_balance, annual_debt_service
from rent_vs_etf.engine.errors import ComparisonDomainError
from rent_vs_etf.engine.returns import annualized_return, compute_irr

TWO_PLACES = Decimal("0.01")


def _pct(value: Decimal) -> Decimal:
    return value / HUNDRED


def rent_collected(inputs: ComparisonInput, year: int) -> Decimal:
    """Rent actually collected in a given year (1-indexed), net of vacancy.

    Rent escalates once per year, so year 1 uses the starting rent.
    """
    growth = (1 + _pct(inputs.annual_rent_increase_rate)) ** (year - 1)
    occupancy = 1 - _pct(inputs.vacancy_rate_percentage)
    return (inputs.monthly_rent * 12 * growth * occupancy).quantize(TWO_PLACES, ROUND_HALF_UP)


def property_value(inputs: ComparisonInput, year: int) -> Decimal:
    """Property value at end of year based on appreciation (year 0 = price).

    Negative appreciation is allowed and the value is not floored.
    """
    if year == 0:
        return inputs.property_price.quantize(TWO_PLACES, ROUND_HALF_UP)
    growth = (1 + _pct(inputs.annual_property_appreciation_rate)) ** year
    return (inputs.property_price * growth).quantize(TWO_PLACES, ROUND_HALF_UP)


def operating_expenses(inputs: ComparisonInput, year: int) -> dict[str, Decimal]:
    """Itemized non-mortgage expenses for a given year.

    Property tax is levied on the value at the start of the year; maintenance
    and insurance stay flat.
    """
    maintenance = (inputs.monthly_maintenance_cost * 12).quantize(TWO_PLACES, ROUND_HALF_UP)
    prop_tax = (
        property_value(inputs, year - 1) * _pct(inputs.annual_property_tax_rate)
    ).quantize(TWO_PLACES, ROUND_HALF_UP)
    insurance = inputs.annual_insurance_cost.quantize(TWO_PLACES, ROUND_HALF_UP)

    return {
        "maintenance": maintenance,
        "property_tax": prop_tax,
        "insurance": insurance,
        "total": maintenance + prop_tax + insurance,
    }


def project_rental(inputs: ComparisonInput) -> RentalProjection:
    """Simulate the rental strategy year by year and sell at the horizon."""
    horizon = inputs.comparison_period_years
    if horizon <= 0:
        raise ComparisonDomainError("comparison_period_years must be positive")
    if inputs.mortgage_term_years <= 0:
        raise ComparisonDomainError("mortgage_term_years must be positive")

    initial_investment = inputs.initial_investment.quantize(TWO_PLACES, ROUND_HALF_UP)
    if initial_investment <= 0:
        raise ComparisonDomainError(
            "initial investment (down payment + closing costs) must be positive"
        )

    mortgage_rate = _pct(inputs.mortgage_interest_rate)
    pmt = monthly_payment(inputs.loan_amount, mortgage_rate, inputs.mortgage_term_years)

    projections: list[YearlyRentalProjection] = []
    cash_flows: list[Decimal] = [-initial_investment]
    total_cash_flow = Decimal("0")

    for year in range(1, horizon + 1):
        rent = rent_collected(inputs, year)
        mortgage = annual_debt_service(pmt, inputs.mortgage_term_years, year)
        expenses = operating_expenses(inputs, year)
        total_expenses = mortgage + expenses["total"]
        year_cash_flow = rent - total_expenses
        total_cash_flow += year_cash_flow

        value = property_value(inputs, year)
        balance = remaining_balance(
            inputs.loan_amount, mortgage_rate, inputs.mortgage_term_years, year * 12
        )

        projections.append(YearlyRentalProjection(
            year=year,
            rent_collected=rent,
            mortgage_paid=mortgage,
            maintenance=expenses["maintenance"],
            property_tax=expenses["property_tax"],
            insurance=expenses["insurance"],
            total_expenses=total_expenses,
            cash_flow=year_cash_flow,
            property_value=value,
            loan_balance=balance,
            equity=value - balance,
        ))
        cash_flows.append(year_cash_flow)

    # Sale at the horizon
    value_at_end = property_value(inputs, horizon)
    selling_costs = (value_at_end * _pct(inputs.selling_costs_percentage)).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
    loan_payoff = remaining_balance(
        inputs.loan_amount, mortgage_rate, inputs.mortgage_term_years, inputs.horizon_months
    )
    net_sale_proceeds = value_at_end - selling_costs - loan_payoff
    cash_flows[-1] += net_sale_proceeds

    total_profit = total_cash_flow + net_sale_proceeds - initial_investment

    return RentalProjection(
        initial_investment=initial_investment,
        total_cash_flow=total_cash_flow,
        property_value_at_end=value_at_end,
        total_profit=total_profit,
        annualized_return=annualized_return(1 + total_profit / initial_investment, horizon),
        monthly_mortgage_payment=pmt,
        selling_costs=selling_costs,
        remaining_loan_balance=loan_payoff,
        net_sale_proceeds=net_sale_proceeds,
        irr=compute_irr(cash_flows),
        yearly_projections=projections,
    )
