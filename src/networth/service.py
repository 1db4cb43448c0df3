"""Dashboard and FIRE plan assembly over injected rate and price feeds.

NetWorthService is the seam between request handling and the pure engine:
it asks the providers for rates and quotes (provider failures propagate),
then runs valuation, history aggregation and the FIRE solver over the
records the caller supplies. It holds no state besides its collaborators.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from networth.config import FireSettings, HistorySettings
from networth.expenses import (
    ExpenseSlice,
    average_monthly_expenses,
    expense_breakdown,
    lookback_start,
)
from networth.fire import (
    FireAssumptions,
    FireInputs,
    FireResults,
    ProjectionPoint,
    build_fire_inputs,
    calculate_fire_metrics,
    generate_projection,
    real_return_rate,
)
from networth.history import (
    PeriodChange,
    SeriesPoint,
    last_n_days,
    last_n_months,
    last_n_years,
    merge_current_snapshot,
    period_changes,
    rebase_snapshots,
    utc_today,
)
from networth.logging import get_logger
from networth.models import Account, ExchangeRates, Expense, NetWorthSnapshot, StockPriceData
from networth.providers import PriceProvider, RateProvider
from networth.valuation import (
    AllocationSlice,
    PortfolioSummary,
    asset_allocation,
    summarize_portfolio,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard shows, in one base currency.

    today_snapshot is the row the caller should upsert for as_of.
    """

    as_of: date
    summary: PortfolioSummary
    allocation: list[AllocationSlice]
    month_expenses: list[ExpenseSlice]
    today_snapshot: NetWorthSnapshot
    daily: list[SeriesPoint]
    monthly: list[SeriesPoint]
    yearly: list[SeriesPoint]
    daily_changes: list[PeriodChange]


@dataclass(frozen=True)
class FirePlan:
    summary: PortfolioSummary
    average_monthly_expenses: Decimal
    inputs: FireInputs
    results: FireResults
    projection: list[ProjectionPoint]


class NetWorthService:
    """Builds dashboard and FIRE views from raw records.

    Args:
        rate_provider: Supplies exchange rates for a base currency.
        price_provider: Supplies latest stock quotes.
        fire_settings: Solver bounds and default assumptions.
        history_settings: Chart window lengths.
    """

    def __init__(
        self,
        rate_provider: RateProvider,
        price_provider: PriceProvider,
        fire_settings: FireSettings | None = None,
        history_settings: HistorySettings | None = None,
    ) -> None:
        self._rate_provider = rate_provider
        self._price_provider = price_provider
        self._fire_settings = fire_settings or FireSettings()
        self._history_settings = history_settings or HistorySettings()

    def _fetch_prices(self, accounts: Sequence[Account]) -> dict[str, StockPriceData]:
        tickers = sorted({h.ticker.upper() for a in accounts for h in a.stock_holdings})
        if not tickers:
            return {}
        prices = self._price_provider.get_prices(tickers)
        missing = [t for t in tickers if t not in prices]
        if missing:
            logger.warning("stock_prices_incomplete", missing=missing)
        return prices

    def _summarize(
        self, accounts: Sequence[Account], base_currency: str
    ) -> tuple[PortfolioSummary, ExchangeRates]:
        rates = self._rate_provider.get_rates(base_currency)
        prices = self._fetch_prices(accounts)
        return summarize_portfolio(accounts, prices, base_currency, rates), rates

    def build_dashboard(
        self,
        accounts: Sequence[Account],
        snapshots: Sequence[NetWorthSnapshot],
        expenses: Sequence[Expense],
        base_currency: str,
        as_of: date | None = None,
    ) -> DashboardView:
        """Value the portfolio and build the history series.

        Args:
            accounts: Accounts with holdings.
            snapshots: Stored history, possibly in older base currencies.
            expenses: Logged expenses; only as_of's month is broken down.
            base_currency: Reporting currency.
            as_of: Calendar day treated as today (UTC today when omitted).

        Returns:
            DashboardView in base_currency.
        """
        as_of = as_of or utc_today()
        summary, rates = self._summarize(accounts, base_currency)

        month_start = as_of.replace(day=1)
        this_month = [e for e in expenses if month_start <= e.expense_date <= as_of]

        today_snapshot = NetWorthSnapshot(
            snapshot_date=as_of,
            total_value=summary.total_net_worth,
            cash_value=summary.cash,
            investment_value=summary.investments,
            currency=base_currency,
        )
        history = rebase_snapshots(snapshots, base_currency, rates)
        if accounts:
            history = merge_current_snapshot(history, today_snapshot)

        settings = self._history_settings
        daily = last_n_days(history, settings.daily_points, as_of)

        logger.info(
            "dashboard_built",
            base_currency=base_currency,
            as_of=as_of.isoformat(),
            accounts=len(accounts),
            snapshots=len(history),
            total_net_worth=str(summary.total_net_worth),
        )

        return DashboardView(
            as_of=as_of,
            summary=summary,
            allocation=asset_allocation(summary),
            month_expenses=expense_breakdown(this_month, base_currency, rates),
            today_snapshot=today_snapshot,
            daily=daily,
            monthly=last_n_months(history, settings.monthly_points, as_of),
            yearly=last_n_years(history, settings.yearly_points, as_of),
            daily_changes=period_changes(daily),
        )

    def build_fire_plan(
        self,
        accounts: Sequence[Account],
        expenses: Sequence[Expense],
        base_currency: str,
        assumptions: FireAssumptions | None = None,
        as_of: date | None = None,
    ) -> FirePlan:
        """Compute FIRE metrics and the projection for the current portfolio.

        Spending is averaged over the configured lookback window ending at
        as_of, converted into base_currency.
        """
        as_of = as_of or utc_today()
        settings = self._fire_settings
        assumptions = assumptions or FireAssumptions.from_settings(settings)
        summary, rates = self._summarize(accounts, base_currency)

        start = lookback_start(as_of, settings.expense_lookback_months)
        recent = [e for e in expenses if start <= e.expense_date <= as_of]
        average = average_monthly_expenses(recent, base_currency, rates)

        inputs = build_fire_inputs(summary, average, assumptions)
        results = calculate_fire_metrics(inputs, max_years=settings.max_years)
        projection = generate_projection(
            inputs.current_net_worth,
            results.fire_number,
            inputs.annual_savings,
            real_return_rate(inputs.annual_growth_rate, inputs.inflation_rate),
            inputs.current_age,
            settings.projection_years,
        )

        logger.info(
            "fire_plan_built",
            base_currency=base_currency,
            fire_number=str(results.fire_number),
            years_to_fire=results.years_to_fire,
            include_retirement_accounts=assumptions.include_retirement_accounts,
        )

        return FirePlan(
            summary=summary,
            average_monthly_expenses=average,
            inputs=inputs,
            results=results,
            projection=projection,
        )
