from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from rent_vs_etf.models.assumptions import ComparisonInput


class Strategy(Enum):
    RENTAL = "rental"
    ETF = "etf"


@dataclass
class YearlyRentalProjection:
    year: int

    # Income
    rent_collected: Decimal = Decimal("0")  # Net of vacancy

    # Expenses
    mortgage_paid: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    property_tax: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")

    cash_flow: Decimal = Decimal("0")

    # Equity (end of year)
    property_value: Decimal = Decimal("0")
    loan_balance: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")  # Value - loan balance


@dataclass
class RentalProjection:
    initial_investment: Decimal = Decimal("0")
    total_cash_flow: Decimal = Decimal("0")
    property_value_at_end: Decimal = Decimal("0")
    total_profit: Decimal = Decimal("0")
    annualized_return: Decimal = Decimal("0")  # Percent

    # Sale
    monthly_mortgage_payment: Decimal = Decimal("0")
    selling_costs: Decimal = Decimal("0")
    remaining_loan_balance: Decimal = Decimal("0")
    net_sale_proceeds: Decimal = Decimal("0")  # After selling costs and loan payoff

    irr: Decimal = Decimal("0")  # Fraction, from yearly cash flows
    yearly_projections: list[YearlyRentalProjection] = field(default_factory=list)


@dataclass
class EtfProjection:
    initial_investment: Decimal = Decimal("0")
    final_value: Decimal = Decimal("0")
    total_profit: Decimal = Decimal("0")
    annualized_return: Decimal = Decimal("0")  # Percent

    yearly_values: list[Decimal] = field(default_factory=list)  # Year 0 = initial


@dataclass
class ComparisonOutcome:
    """Both projections for one input plus the decision between them."""

    inputs: ComparisonInput
    rental: RentalProjection
    etf: EtfProjection
    better_investment: Strategy
    profit_difference: Decimal
