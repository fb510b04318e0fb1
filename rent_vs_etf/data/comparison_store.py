"""SQLAlchemy-backed comparison history."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rent_vs_etf.data.base import ComparisonStore
from rent_vs_etf.engine.comparison import compare_investments
from rent_vs_etf.models.assumptions import ComparisonInput
from rent_vs_etf.models.db import ComparisonRecord
from rent_vs_etf.models.results import ComparisonOutcome

logger = logging.getLogger(__name__)


def record_from_outcome(outcome: ComparisonOutcome) -> ComparisonRecord:
    """Flatten an outcome into a row: every input field plus the summary results."""
    rental = outcome.rental
    etf = outcome.etf
    return ComparisonRecord(
        **outcome.inputs.as_dict(),
        rental_initial_investment=rental.initial_investment,
        rental_total_cash_flow=rental.total_cash_flow,
        rental_property_value_at_end=rental.property_value_at_end,
        rental_total_profit=rental.total_profit,
        rental_annualized_return=rental.annualized_return,
        etf_initial_investment=etf.initial_investment,
        etf_final_value=etf.final_value,
        etf_total_profit=etf.total_profit,
        etf_annualized_return=etf.annualized_return,
        better_investment=outcome.better_investment.value,
        profit_difference=outcome.profit_difference,
    )


class SQLComparisonStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, outcome: ComparisonOutcome) -> ComparisonRecord:
        record = record_from_outcome(outcome)
        self.session.add(record)
        await self.session.commit()
        # Pull back the database-assigned id and created_at
        await self.session.refresh(record)
        logger.info(
            "Saved comparison %s (%s wins by %s)",
            record.id, record.better_investment, record.profit_difference,
        )
        return record

    async def get(self, comparison_id: int) -> ComparisonRecord | None:
        return await self.session.get(ComparisonRecord, comparison_id)

    async def list_recent(
        self, limit: int | None = None, offset: int = 0
    ) -> list[ComparisonRecord]:
        stmt = (
            select(ComparisonRecord)
            .order_by(ComparisonRecord.created_at.desc(), ComparisonRecord.id.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


async def calculate_and_store(
    inputs: ComparisonInput, store: ComparisonStore
) -> ComparisonRecord:
    """Compute a comparison and append it to history.

    Storage errors propagate unchanged; nothing is returned unless the insert
    committed.
    """
    outcome = compare_investments(inputs)
    return await store.add(outcome)
