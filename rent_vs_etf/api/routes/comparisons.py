"""Comparison routes: compute, preview, and browse history."""

from fastapi import APIRouter, Depends, HTTPException, Query

from rent_vs_etf.api.deps import get_store
from rent_vs_etf.api.schemas import (
    ComparisonRequest,
    ComparisonRecordResponse,
    ComparisonPreviewResponse,
)
from rent_vs_etf.config import settings
from rent_vs_etf.data.comparison_store import SQLComparisonStore, calculate_and_store
from rent_vs_etf.engine.comparison import compare_investments
from rent_vs_etf.engine.errors import ComparisonDomainError

router = APIRouter(prefix="/api/v1/comparisons", tags=["comparisons"])


@router.post("", response_model=ComparisonRecordResponse, status_code=201)
async def create_comparison(
    req: ComparisonRequest,
    store: SQLComparisonStore = Depends(get_store),
):
    """Compute rental vs ETF and save the result to history."""
    try:
        record = await calculate_and_store(req.to_inputs(), store)
    except ComparisonDomainError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ComparisonRecordResponse.model_validate(record)


@router.post("/preview", response_model=ComparisonPreviewResponse)
async def preview_comparison(req: ComparisonRequest):
    """Compute with yearly detail, without saving."""
    try:
        outcome = compare_investments(req.to_inputs())
    except ComparisonDomainError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ComparisonPreviewResponse.model_validate(outcome)


@router.get("", response_model=list[ComparisonRecordResponse])
async def list_comparisons(
    limit: int | None = Query(None, ge=1, le=settings.history_max_limit),
    offset: int = Query(0, ge=0),
    store: SQLComparisonStore = Depends(get_store),
):
    """Saved comparisons, newest first."""
    records = await store.list_recent(limit=limit, offset=offset)
    return [ComparisonRecordResponse.model_validate(r) for r in records]


@router.get("/{comparison_id}", response_model=ComparisonRecordResponse)
async def get_comparison(
    comparison_id: int,
    store: SQLComparisonStore = Depends(get_store),
):
    record = await store.get(comparison_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Comparison {comparison_id} not found")
    return ComparisonRecordResponse.model_validate(record)
