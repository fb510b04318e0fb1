"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rent_vs_etf.api.routes import comparisons
from rent_vs_etf.config import configure_logging

configure_logging()

app = FastAPI(
    title="Rent vs ETF",
    description="Rental property vs ETF investment comparison",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comparisons.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
