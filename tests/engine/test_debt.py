from decimal import Decimal

from rent_vs_etf.engine.debt import monthly_payment, remaining_balance, annual_debt_service


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$400K loan at 7% for 30 years."""
        pmt = monthly_payment(Decimal("400000"), Decimal("0.07"), 30)
        # Expected: ~$2,661.21
        assert pmt == Decimal("2661.21")

    def test_zero_rate(self):
        pmt = monthly_payment(Decimal("360000"), Decimal("0"), 30)
        assert pmt == Decimal("1000.00")

    def test_zero_principal(self):
        pmt = monthly_payment(Decimal("0"), Decimal("0.07"), 30)
        assert pmt == Decimal("0")


class TestRemainingBalance:
    def test_no_payments_made(self):
        balance = remaining_balance(Decimal("400000"), Decimal("0.07"), 30, 0)
        assert balance == Decimal("400000.00")

    def test_paid_off_at_term(self):
        assert remaining_balance(Decimal("400000"), Decimal("0.07"), 30, 360) == Decimal("0")

    def test_past_term(self):
        assert remaining_balance(Decimal("400000"), Decimal("0.07"), 15, 240) == Decimal("0")

    def test_balance_decreases(self):
        balances = [
            remaining_balance(Decimal("400000"), Decimal("0.07"), 30, year * 12)
            for year in range(0, 31)
        ]
        for i in range(1, len(balances)):
            assert balances[i] < balances[i - 1]

    def test_first_month_principal(self):
        """First payment: $2,333.33 interest, ~$327.88 principal."""
        balance = remaining_balance(Decimal("400000"), Decimal("0.07"), 30, 1)
        assert abs(balance - Decimal("399672.12")) < Decimal("0.05")

    def test_zero_rate_is_straight_line(self):
        # 10 of 30 years paid: two thirds remain
        balance = remaining_balance(Decimal("360000"), Decimal("0"), 30, 120)
        assert balance == Decimal("240000.00")

    def test_zero_principal(self):
        assert remaining_balance(Decimal("0"), Decimal("0.07"), 30, 12) == Decimal("0")


class TestAnnualDebtService:
    def test_within_term(self):
        assert annual_debt_service(Decimal("1000.00"), 30, 1) == Decimal("12000.00")

    def test_last_year_of_term(self):
        assert annual_debt_service(Decimal("1000.00"), 5, 5) == Decimal("12000.00")

    def test_after_term(self):
        assert annual_debt_service(Decimal("1000.00"), 5, 6) == Decimal("0")
