from dataclasses import replace
from decimal import Decimal

import pytest

from rent_vs_etf.engine.errors import ComparisonDomainError
from rent_vs_etf.engine.rental import (
    rent_collected,
    property_value,
    operating_expenses,
    project_rental,
)


class TestRentCollected:
    def test_year_one_net_of_vacancy(self, canonical_inputs):
        # 3000 * 12 * 0.95
        assert rent_collected(canonical_inputs, 1) == Decimal("34200.00")

    def test_rent_escalates(self, canonical_inputs):
        # 3090 * 12 * 0.95
        assert rent_collected(canonical_inputs, 2) == Decimal("35226.00")

    def test_full_vacancy(self, canonical_inputs):
        inputs = replace(canonical_inputs, vacancy_rate_percentage=Decimal("100"))
        assert rent_collected(inputs, 3) == Decimal("0")


class TestPropertyValue:
    def test_year_zero_is_price(self, canonical_inputs):
        assert property_value(canonical_inputs, 0) == Decimal("500000.00")

    def test_ten_percent_for_five_years(self, canonical_inputs):
        inputs = replace(canonical_inputs, annual_property_appreciation_rate=Decimal("10"))
        # 500000 * 1.1^5
        assert property_value(inputs, 5) == Decimal("805255.00")

    def test_negative_appreciation(self, canonical_inputs):
        inputs = replace(canonical_inputs, annual_property_appreciation_rate=Decimal("-2"))
        assert property_value(inputs, 5) < inputs.property_price


class TestOperatingExpenses:
    def test_year_one(self, canonical_inputs):
        expenses = operating_expenses(canonical_inputs, 1)
        assert expenses["maintenance"] == Decimal("2400.00")
        assert expenses["property_tax"] == Decimal("6000.00")  # 1.2% of 500K
        assert expenses["insurance"] == Decimal("1500.00")
        assert expenses["total"] == Decimal("9900.00")

    def test_tax_follows_appreciated_value(self, canonical_inputs):
        # Year 2 is taxed on 520K (one year of 4% appreciation)
        assert operating_expenses(canonical_inputs, 2)["property_tax"] == Decimal("6240.00")

    def test_maintenance_not_escalated(self, canonical_inputs):
        assert (
            operating_expenses(canonical_inputs, 7)["maintenance"]
            == operating_expenses(canonical_inputs, 1)["maintenance"]
        )


class TestProjectRental:
    def test_initial_investment(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        # 20% of 500K + 15K closing
        assert result.initial_investment == Decimal("115000")

    def test_initial_investment_ignores_other_fields(self, canonical_inputs):
        inputs = replace(
            canonical_inputs,
            comparison_period_years=3,
            monthly_rent=Decimal("900"),
            mortgage_interest_rate=Decimal("0"),
            etf_annual_return_rate=Decimal("-20"),
        )
        assert project_rental(inputs).initial_investment == Decimal("115000")

    def test_yearly_projections_sequential(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        assert [p.year for p in result.yearly_projections] == list(range(1, 11))

    def test_total_cash_flow_is_sum_of_years(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        assert result.total_cash_flow == sum(p.cash_flow for p in result.yearly_projections)

    def test_mortgage_payment(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        # $400K at 6.5% for 30 years
        assert abs(result.monthly_mortgage_payment - Decimal("2528.27")) < Decimal("0.01")
        assert result.yearly_projections[0].mortgage_paid == result.monthly_mortgage_payment * 12

    def test_value_at_end(self, canonical_inputs):
        inputs = replace(
            canonical_inputs,
            annual_property_appreciation_rate=Decimal("10"),
            comparison_period_years=5,
        )
        result = project_rental(inputs)
        assert abs(result.property_value_at_end - Decimal("805255")) < Decimal("5000")

    def test_negative_appreciation_loses_value(self, canonical_inputs):
        inputs = replace(
            canonical_inputs,
            annual_property_appreciation_rate=Decimal("-2"),
            comparison_period_years=5,
        )
        result = project_rental(inputs)
        assert result.property_value_at_end < inputs.property_price

    def test_profit_identity(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        expected = (
            result.total_cash_flow
            + result.property_value_at_end
            - result.selling_costs
            - result.remaining_loan_balance
            - result.initial_investment
        )
        assert result.total_profit == expected

    def test_selling_costs(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        expected = result.property_value_at_end * Decimal("0.06")
        assert abs(result.selling_costs - expected) < Decimal("0.01")

    def test_annualized_return_matches_profit(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        growth = float(1 + result.total_profit / result.initial_investment)
        implied = (1 + float(result.annualized_return) / 100) ** 10
        assert abs(implied - growth) < 1e-4

    def test_lower_vacancy_never_reduces_cash_flow(self, canonical_inputs):
        high = project_rental(replace(canonical_inputs, vacancy_rate_percentage=Decimal("10")))
        low = project_rental(replace(canonical_inputs, vacancy_rate_percentage=Decimal("2")))
        assert low.total_cash_flow > high.total_cash_flow

    def test_no_mortgage_after_term(self, canonical_inputs):
        inputs = replace(canonical_inputs, mortgage_term_years=5, comparison_period_years=8)
        result = project_rental(inputs)
        for p in result.yearly_projections[:5]:
            assert p.mortgage_paid > 0
        for p in result.yearly_projections[5:]:
            assert p.mortgage_paid == Decimal("0")
            assert p.loan_balance == Decimal("0")
        assert result.remaining_loan_balance == Decimal("0")

    def test_loan_balance_decreases(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        for i in range(1, len(result.yearly_projections)):
            assert (
                result.yearly_projections[i].loan_balance
                < result.yearly_projections[i - 1].loan_balance
            )

    def test_payoff_matches_final_year_balance(self, canonical_inputs):
        result = project_rental(canonical_inputs)
        assert result.remaining_loan_balance == result.yearly_projections[-1].loan_balance

    def test_zero_rate_mortgage_leaves_straight_line_balance(self, canonical_inputs):
        inputs = replace(canonical_inputs, mortgage_interest_rate=Decimal("0"))
        result = project_rental(inputs)
        assert result.monthly_mortgage_payment == Decimal("1111.11")
        # 240 of 360 payments still owed on $400K
        assert result.remaining_loan_balance == Decimal("266666.67")

    def test_all_cash_purchase(self, canonical_inputs):
        inputs = replace(canonical_inputs, down_payment_percentage=Decimal("100"))
        result = project_rental(inputs)
        assert result.monthly_mortgage_payment == Decimal("0")
        assert result.remaining_loan_balance == Decimal("0")
        assert result.initial_investment == Decimal("515000")

    def test_wiped_out_property_reports_total_loss(self, canonical_inputs):
        inputs = replace(
            canonical_inputs,
            annual_property_appreciation_rate=Decimal("-100"),
            comparison_period_years=5,
        )
        result = project_rental(inputs)
        assert result.property_value_at_end == Decimal("0")
        assert result.total_profit < -result.initial_investment
        assert result.annualized_return == Decimal("-100.0000")

    def test_irr_positive_with_appreciation(self, canonical_inputs):
        assert project_rental(canonical_inputs).irr > 0

    def test_two_hundred_year_horizon(self, canonical_inputs):
        result = project_rental(replace(canonical_inputs, comparison_period_years=200))
        assert len(result.yearly_projections) == 200
        assert result.remaining_loan_balance == Decimal("0")
        assert isinstance(result.irr, Decimal)
        assert result.annualized_return > 0


class TestDomainErrors:
    def test_zero_horizon(self, canonical_inputs):
        with pytest.raises(ComparisonDomainError):
            project_rental(replace(canonical_inputs, comparison_period_years=0))

    def test_zero_mortgage_term(self, canonical_inputs):
        with pytest.raises(ComparisonDomainError):
            project_rental(replace(canonical_inputs, mortgage_term_years=0))

    def test_zero_initial_investment(self, canonical_inputs):
        inputs = replace(
            canonical_inputs,
            down_payment_percentage=Decimal("0"),
            closing_costs=Decimal("0"),
        )
        with pytest.raises(ComparisonDomainError):
            project_rental(inputs)
