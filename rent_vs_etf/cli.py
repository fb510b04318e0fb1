"""CLI for running and browsing rental vs ETF comparisons.

Usage:
    python -m rent_vs_etf.cli init-db
    python -m rent_vs_etf.cli compare --years 10 --price 500000 --rent 2500 --yearly
    python -m rent_vs_etf.cli compare --years 10 --price 500000 --rent 2500 --save
    python -m rent_vs_etf.cli history --limit 20
    python -m rent_vs_etf.cli show 42
"""

import argparse
import asyncio
from decimal import Decimal, InvalidOperation

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from rent_vs_etf.config import settings, configure_logging
from rent_vs_etf.data.comparison_store import SQLComparisonStore
from rent_vs_etf.engine.comparison import compare_investments
from rent_vs_etf.engine.errors import ComparisonDomainError
from rent_vs_etf.models.assumptions import ComparisonInput
from rent_vs_etf.models.db import ComparisonRecord, create_tables
from rent_vs_etf.models.results import ComparisonOutcome


def print_outcome(outcome: ComparisonOutcome, yearly: bool = False) -> None:
    rental = outcome.rental
    etf = outcome.etf
    print(f"\n{'=' * 60}")
    print(f"  Rental vs ETF over {outcome.inputs.comparison_period_years} years")
    print(f"{'=' * 60}")
    print(f"  {'':<22}{'Rental':>16}{'ETF':>16}")
    print(f"  {'Initial investment':<22}{rental.initial_investment:>16,.0f}{etf.initial_investment:>16,.0f}")
    print(f"  {'Ending value':<22}{rental.property_value_at_end:>16,.0f}{etf.final_value:>16,.0f}")
    print(f"  {'Total cash flow':<22}{rental.total_cash_flow:>16,.0f}{'n/a':>16}")
    print(f"  {'Total profit':<22}{rental.total_profit:>16,.0f}{etf.total_profit:>16,.0f}")
    print(f"  {'Annualized return':<22}{rental.annualized_return:>15.2f}%{etf.annualized_return:>15.2f}%")
    print()
    print(f"  Mortgage payment:     ${rental.monthly_mortgage_payment:,.2f}/mo")
    print(f"  Loan payoff at sale:  ${rental.remaining_loan_balance:,.0f}")
    print(f"  Rental IRR:           {rental.irr:.2%}")
    print()
    print(f"  Better investment:    {outcome.better_investment.value.upper()}"
          f" (by ${outcome.profit_difference:,.0f})")
    print()

    if yearly:
        print(f"  {'Year':>4}  {'Rent':>10}  {'Expenses':>10}  {'Cash Flow':>10}"
              f"  {'Equity':>12}  {'ETF Value':>12}")
        for p in rental.yearly_projections:
            etf_value = etf.yearly_values[p.year]
            print(f"  {p.year:>4}  {p.rent_collected:>10,.0f}  {p.total_expenses:>10,.0f}"
                  f"  {p.cash_flow:>10,.0f}  {p.equity:>12,.0f}  {etf_value:>12,.0f}")
        print()


def print_record(record: ComparisonRecord) -> None:
    print(f"  #{record.id:<5} {record.created_at:%Y-%m-%d %H:%M}  "
          f"{record.comparison_period_years:>2}y  price ${record.property_price:>12,.0f}  "
          f"rental ${record.rental_total_profit:>12,.0f}  etf ${record.etf_total_profit:>12,.0f}  "
          f"-> {record.better_investment}")


def _inputs_from_args(args: argparse.Namespace) -> ComparisonInput:
    return ComparisonInput(
        comparison_period_years=args.years,
        property_price=args.price,
        down_payment_percentage=args.down_pct,
        mortgage_interest_rate=args.mortgage_rate,
        mortgage_term_years=args.mortgage_years,
        monthly_rent=args.rent,
        annual_rent_increase_rate=args.rent_increase,
        annual_property_appreciation_rate=args.appreciation,
        monthly_maintenance_cost=args.maintenance,
        annual_property_tax_rate=args.tax_rate,
        annual_insurance_cost=args.insurance,
        vacancy_rate_percentage=args.vacancy,
        closing_costs=args.closing_costs,
        selling_costs_percentage=args.selling_pct,
        etf_annual_return_rate=args.etf_return,
        etf_annual_fee_rate=args.etf_fee,
    )


def _amount(value: str) -> Decimal:
    """Decimal with at most two places, the precision history is stored at."""
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not amount.is_finite() or amount.as_tuple().exponent < -2:
        raise argparse.ArgumentTypeError(f"{value!r} has more than two decimal places")
    return amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rental property vs ETF comparison CLI")
    parser.add_argument("--db", default=None, help="Database URL (default: settings.database_url)")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the comparison history table")

    cmp = sub.add_parser("compare", help="Run a comparison")
    cmp.add_argument("--years", type=int, default=10, help="Comparison period in years (default: 10)")
    cmp.add_argument("--price", type=_amount, default=Decimal("500000"), help="Property price (default: 500000)")
    cmp.add_argument("--down-pct", type=_amount, default=Decimal("20"), help="Down payment %% (default: 20)")
    cmp.add_argument("--mortgage-rate", type=_amount, default=Decimal("6.5"), help="Mortgage rate %% (default: 6.5)")
    cmp.add_argument("--mortgage-years", type=int, default=30, help="Mortgage term in years (default: 30)")
    cmp.add_argument("--rent", type=_amount, default=Decimal("2500"), help="Monthly rent (default: 2500)")
    cmp.add_argument("--rent-increase", type=_amount, default=Decimal("3"), help="Annual rent increase %% (default: 3)")
    cmp.add_argument("--appreciation", type=_amount, default=Decimal("4"), help="Annual appreciation %% (default: 4)")
    cmp.add_argument("--maintenance", type=_amount, default=Decimal("200"), help="Monthly maintenance (default: 200)")
    cmp.add_argument("--tax-rate", type=_amount, default=Decimal("1.2"), help="Property tax %% of value (default: 1.2)")
    cmp.add_argument("--insurance", type=_amount, default=Decimal("1200"), help="Annual insurance (default: 1200)")
    cmp.add_argument("--vacancy", type=_amount, default=Decimal("5"), help="Vacancy %% (default: 5)")
    cmp.add_argument("--closing-costs", type=_amount, default=Decimal("10000"), help="Closing costs (default: 10000)")
    cmp.add_argument("--selling-pct", type=_amount, default=Decimal("6"), help="Selling costs %% (default: 6)")
    cmp.add_argument("--etf-return", type=_amount, default=Decimal("8"), help="ETF annual return %% (default: 8)")
    cmp.add_argument("--etf-fee", type=_amount, default=Decimal("0.5"), help="ETF annual fee %% (default: 0.5)")
    cmp.add_argument("--yearly", action="store_true", help="Print the year-by-year table")
    cmp.add_argument("--save", action="store_true", help="Save the result to history")

    hist = sub.add_parser("history", help="List saved comparisons, newest first")
    hist.add_argument("--limit", type=int, default=20, help="Max rows (default: 20)")

    show = sub.add_parser("show", help="Show one saved comparison")
    show.add_argument("id", type=int)

    return parser


async def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()

    if args.command == "compare":
        try:
            outcome = compare_investments(_inputs_from_args(args))
        except ComparisonDomainError as e:
            parser.error(str(e))
        print_outcome(outcome, yearly=args.yearly)
        if not args.save:
            return 0

    engine = create_async_engine(args.db or settings.database_url, echo=settings.debug)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    try:
        if args.command == "init-db":
            await create_tables(engine)
            print("Tables created.")
            return 0

        async with session_factory() as session:
            store = SQLComparisonStore(session)
            if args.command == "compare":
                record = await store.add(outcome)
                print(f"  Saved as comparison #{record.id}")
            elif args.command == "history":
                records = await store.list_recent(limit=args.limit)
                if not records:
                    print("No saved comparisons.")
                for record in records:
                    print_record(record)
            elif args.command == "show":
                record = await store.get(args.id)
                if record is None:
                    print(f"Comparison {args.id} not found.")
                    return 1
                print_record(record)
                print(f"         rental return {record.rental_annualized_return:.2f}%/yr, "
                      f"ETF return {record.etf_annualized_return:.2f}%/yr, "
                      f"difference ${record.profit_difference:,.0f}")
    finally:
        await engine.dispose()
    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
