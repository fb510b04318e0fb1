"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from rent_vs_etf.models.assumptions import ComparisonInput
from rent_vs_etf.models.results import Strategy


# ---- Request schemas ----

class ComparisonRequest(BaseModel):
    """All assumptions for one comparison. Rates are percentages."""

    comparison_period_years: int = Field(..., gt=0, description="Horizon in whole years")

    # Rental property
    property_price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    down_payment_percentage: Decimal = Field(..., ge=0, le=100, decimal_places=2)
    mortgage_interest_rate: Decimal = Field(..., ge=0, le=100, decimal_places=2, description="Annual %")
    mortgage_term_years: int = Field(..., gt=0)
    monthly_rent: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    annual_rent_increase_rate: Decimal = Field(..., ge=0, le=100, decimal_places=2)
    annual_property_appreciation_rate: Decimal = Field(..., ge=-100, le=100, decimal_places=2)
    monthly_maintenance_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    annual_property_tax_rate: Decimal = Field(..., ge=0, le=100, decimal_places=2, description="% of property value")
    annual_insurance_cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    vacancy_rate_percentage: Decimal = Field(..., ge=0, le=100, decimal_places=2)
    closing_costs: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    selling_costs_percentage: Decimal = Field(..., ge=0, le=100, decimal_places=2, description="% of sale price")

    # ETF
    etf_annual_return_rate: Decimal = Field(..., ge=-100, le=100, decimal_places=2)
    etf_annual_fee_rate: Decimal = Field(..., ge=0, le=100, decimal_places=2)

    def to_inputs(self) -> ComparisonInput:
        return ComparisonInput(**self.model_dump())


# ---- Response schemas ----

class ComparisonRecordResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: int

    comparison_period_years: int
    property_price: Decimal
    down_payment_percentage: Decimal
    mortgage_interest_rate: Decimal
    mortgage_term_years: int
    monthly_rent: Decimal
    annual_rent_increase_rate: Decimal
    annual_property_appreciation_rate: Decimal
    monthly_maintenance_cost: Decimal
    annual_property_tax_rate: Decimal
    annual_insurance_cost: Decimal
    vacancy_rate_percentage: Decimal
    closing_costs: Decimal
    selling_costs_percentage: Decimal
    etf_annual_return_rate: Decimal
    etf_annual_fee_rate: Decimal

    rental_initial_investment: Decimal
    rental_total_cash_flow: Decimal
    rental_property_value_at_end: Decimal
    rental_total_profit: Decimal
    rental_annualized_return: Decimal

    etf_initial_investment: Decimal
    etf_final_value: Decimal
    etf_total_profit: Decimal
    etf_annualized_return: Decimal

    better_investment: Literal["rental", "etf"]
    profit_difference: Decimal

    created_at: datetime


class YearlyRentalProjectionResponse(BaseModel):
    model_config = {"from_attributes": True}

    year: int
    rent_collected: Decimal
    mortgage_paid: Decimal
    maintenance: Decimal
    property_tax: Decimal
    insurance: Decimal
    total_expenses: Decimal
    cash_flow: Decimal
    property_value: Decimal
    loan_balance: Decimal
    equity: Decimal


class RentalProjectionResponse(BaseModel):
    model_config = {"from_attributes": True}

    initial_investment: Decimal
    total_cash_flow: Decimal
    property_value_at_end: Decimal
    total_profit: Decimal
    annualized_return: Decimal
    monthly_mortgage_payment: Decimal
    selling_costs: Decimal
    remaining_loan_balance: Decimal
    net_sale_proceeds: Decimal
    irr: Decimal
    yearly_projections: list[YearlyRentalProjectionResponse]


class EtfProjectionResponse(BaseModel):
    model_config = {"from_attributes": True}

    initial_investment: Decimal
    final_value: Decimal
    total_profit: Decimal
    annualized_return: Decimal
    yearly_values: list[Decimal]


class ComparisonPreviewResponse(BaseModel):
    """Unsaved comparison with yearly detail for both strategies."""

    model_config = {"from_attributes": True}

    rental: RentalProjectionResponse
    etf: EtfProjectionResponse
    better_investment: Strategy
    profit_difference: Decimal
