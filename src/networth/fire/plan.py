"""Turn a portfolio summary and tracked spending into FIRE inputs."""

from dataclasses import dataclass
from decimal import Decimal

from networth.config import FireSettings
from networth.fire.models import FireInputs
from networth.valuation.portfolio import PortfolioSummary

MONTHS_PER_YEAR = Decimal("12")


@dataclass(frozen=True)
class FireAssumptions:
    """User-adjustable planning assumptions. Rates are fractions.

    monthly_expenses overrides the tracked average when set.
    include_retirement_accounts counts CPF/SRS towards current net worth.
    """

    current_age: int = 35
    safe_withdrawal_rate: Decimal = Decimal("0.04")
    annual_growth_rate: Decimal = Decimal("0.07")
    inflation_rate: Decimal = Decimal("0.03")
    include_retirement_accounts: bool = False
    monthly_expenses: Decimal | None = None
    monthly_savings: Decimal = Decimal("0")

    @classmethod
    def from_settings(cls, settings: FireSettings, **overrides) -> "FireAssumptions":
        values = {
            "current_age": settings.current_age,
            "safe_withdrawal_rate": settings.safe_withdrawal_rate,
            "annual_growth_rate": settings.annual_growth_rate,
            "inflation_rate": settings.inflation_rate,
        }
        values.update(overrides)
        return cls(**values)


def build_fire_inputs(
    summary: PortfolioSummary,
    average_monthly_expenses: Decimal,
    assumptions: FireAssumptions,
) -> FireInputs:
    """Build FireInputs from the current portfolio and spending.

    Args:
        summary: Current portfolio totals in base currency.
        average_monthly_expenses: Tracked average spend in base currency.
        assumptions: Planning assumptions.

    Returns:
        FireInputs with annual figures (monthly * 12).
    """
    if assumptions.include_retirement_accounts:
        net_worth = summary.total_net_worth
    else:
        net_worth = summary.liquid_net_worth

    monthly_expenses = (
        assumptions.monthly_expenses
        if assumptions.monthly_expenses is not None
        else average_monthly_expenses
    )

    return FireInputs(
        current_age=assumptions.current_age,
        safe_withdrawal_rate=assumptions.safe_withdrawal_rate,
        annual_growth_rate=assumptions.annual_growth_rate,
        inflation_rate=assumptions.inflation_rate,
        annual_expenses=monthly_expenses * MONTHS_PER_YEAR,
        current_net_worth=net_worth,
        annual_savings=assumptions.monthly_savings * MONTHS_PER_YEAR,
    )
