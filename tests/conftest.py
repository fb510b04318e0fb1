"""Canonical test fixtures used across engine, store and API tests.

Fixture: $500K rental, 20% down, 6.5% rate, 30yr fixed, $3,000/mo rent,
compared over 10 years against an 8% ETF with a 0.1% fee.
"""

import asyncio
import os

# Keep the app's module-level engine off Postgres during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from decimal import Decimal

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from rent_vs_etf.data.comparison_store import SQLComparisonStore
from rent_vs_etf.models.assumptions import ComparisonInput
from rent_vs_etf.models.db import create_tables


CANONICAL_REQUEST = {
    "comparison_period_years": 10,
    "property_price": 500000,
    "down_payment_percentage": 20,
    "mortgage_interest_rate": 6.5,
    "mortgage_term_years": 30,
    "monthly_rent": 3000,
    "annual_rent_increase_rate": 3,
    "annual_property_appreciation_rate": 4,
    "monthly_maintenance_cost": 200,
    "annual_property_tax_rate": 1.2,
    "annual_insurance_cost": 1500,
    "vacancy_rate_percentage": 5,
    "closing_costs": 15000,
    "selling_costs_percentage": 6,
    "etf_annual_return_rate": 8,
    "etf_annual_fee_rate": 0.1,
}


@pytest.fixture
def canonical_inputs() -> ComparisonInput:
    """$500K property with standard assumptions."""
    return ComparisonInput(
        comparison_period_years=10,
        property_price=Decimal("500000"),
        down_payment_percentage=Decimal("20"),
        mortgage_interest_rate=Decimal("6.5"),
        mortgage_term_years=30,
        monthly_rent=Decimal("3000"),
        annual_rent_increase_rate=Decimal("3"),
        annual_property_appreciation_rate=Decimal("4"),
        monthly_maintenance_cost=Decimal("200"),
        annual_property_tax_rate=Decimal("1.2"),
        annual_insurance_cost=Decimal("1500"),
        vacancy_rate_percentage=Decimal("5"),
        closing_costs=Decimal("15000"),
        selling_costs_percentage=Decimal("6"),
        etf_annual_return_rate=Decimal("8"),
        etf_annual_fee_rate=Decimal("0.1"),
    )


@pytest.fixture
def canonical_request() -> dict:
    return dict(CANONICAL_REQUEST)


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'comparisons.db'}"


@pytest.fixture
def run_with_store(db_url):
    """Run `scenario(store)` against a fresh SQLite database; returns its result."""

    def runner(scenario):
        async def main():
            engine = create_async_engine(db_url)
            await create_tables(engine)
            session_factory = async_sessionmaker(engine, expire_on_commit=False)
            try:
                async with session_factory() as session:
                    return await scenario(SQLComparisonStore(session))
            finally:
                await engine.dispose()

        return asyncio.run(main())

    return runner
