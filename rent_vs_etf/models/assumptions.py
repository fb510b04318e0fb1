from dataclasses import dataclass, fields
from decimal import Decimal

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class ComparisonInput:
    """Assumptions for one rental-vs-ETF comparison.

    Rates are percentages (Decimal("6.5") means 6.5%), money is in dollars.
    """

    # Horizon
    comparison_period_years: int

    # Purchase & financing
    property_price: Decimal
    down_payment_percentage: Decimal = Decimal("20")
    mortgage_interest_rate: Decimal = Decimal("6.5")  # Annual
    mortgage_term_years: int = 30
    closing_costs: Decimal = Decimal("0")

    # Income
    monthly_rent: Decimal = Decimal("0")
    annual_rent_increase_rate: Decimal = Decimal("3")
    vacancy_rate_percentage: Decimal = Decimal("5")

    # Expenses
    monthly_maintenance_cost: Decimal = Decimal("0")
    annual_property_tax_rate: Decimal = Decimal("0")  # % of current property value
    annual_insurance_cost: Decimal = Decimal("0")

    # Appreciation & sale
    annual_property_appreciation_rate: Decimal = Decimal("0")  # May be negative
    selling_costs_percentage: Decimal = Decimal("6")  # % of sale price

    # ETF
    etf_annual_return_rate: Decimal = Decimal("8")  # May be negative
    etf_annual_fee_rate: Decimal = Decimal("0")

    @property
    def down_payment(self) -> Decimal:
        return self.property_price * self.down_payment_percentage / HUNDRED

    @property
    def loan_amount(self) -> Decimal:
        return self.property_price - self.down_payment

    @property
    def initial_investment(self) -> Decimal:
        """Cash needed at purchase; the ETF strategy starts with the same amount."""
        return self.down_payment + self.closing_costs

    @property
    def horizon_months(self) -> int:
        return self.comparison_period_years * 12

    @property
    def mortgage_term_months(self) -> int:
        return self.mortgage_term_years * 12

    def as_dict(self) -> dict[str, Decimal | int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
