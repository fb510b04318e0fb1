"""SQLAlchemy ORM models for comparison history."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import String, Integer, Numeric, DateTime, func
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class ComparisonRecord(Base):
    """One saved comparison: inputs verbatim plus both projections. Write-once."""

    __tablename__ = "investment_comparisons"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), index=True)

    # Inputs
    comparison_period_years: Mapped[int] = mapped_column(Integer)
    property_price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    down_payment_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    mortgage_interest_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    mortgage_term_years: Mapped[int] = mapped_column(Integer)
    monthly_rent: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    annual_rent_increase_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    annual_property_appreciation_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    monthly_maintenance_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    annual_property_tax_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    annual_insurance_cost: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    vacancy_rate_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    closing_costs: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    selling_costs_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    etf_annual_return_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    etf_annual_fee_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2))

    # Rental results
    rental_initial_investment: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    rental_total_cash_flow: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    rental_property_value_at_end: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    rental_total_profit: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    rental_annualized_return: Mapped[Decimal] = mapped_column(Numeric(12, 4))

    # ETF results
    etf_initial_investment: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    etf_final_value: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    etf_total_profit: Mapped[Decimal] = mapped_column(Numeric(14, 2))
    etf_annualized_return: Mapped[Decimal] = mapped_column(Numeric(12, 4))

    # Decision
    better_investment: Mapped[str] = mapped_column(String(10))  # "rental" or "etf"
    profit_difference: Mapped[Decimal] = mapped_column(Numeric(14, 2))


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
