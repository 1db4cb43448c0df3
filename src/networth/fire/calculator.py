"""FIRE number, real return, time-to-target solver, and projection.

All calculations use Decimal arithmetic exclusively. Every function is pure.

Compounding recurrence shared by the solver and the projection (savings are
assumed to be added at the end of each year):

    net_worth = net_worth * (1 + real_return_rate) + annual_savings

years_to_fire is a bounded year-by-year search rather than a closed-form
annuity inversion: savings and real return may each be negative, and the
loop handles every sign combination uniformly.
"""

from decimal import Decimal

from networth.fire.models import FireInputs, FireResults, ProjectionPoint

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")


def fire_number(annual_expenses: Decimal, safe_withdrawal_rate: Decimal) -> Decimal:
    """Target net worth: annual_expenses / swr, or 0 when swr <= 0."""
    if safe_withdrawal_rate <= ZERO:
        return ZERO
    return annual_expenses / safe_withdrawal_rate


def real_return_rate(nominal_rate: Decimal, inflation_rate: Decimal) -> Decimal:
    """Inflation-adjusted return: (1 + nominal) / (1 + inflation) - 1. May be negative."""
    return (ONE + nominal_rate) / (ONE + inflation_rate) - ONE


def monthly_withdrawal(net_worth: Decimal, safe_withdrawal_rate: Decimal) -> Decimal:
    return net_worth * safe_withdrawal_rate / MONTHS_PER_YEAR


def years_to_fire(
    current_net_worth: Decimal,
    target: Decimal,
    annual_savings: Decimal,
    real_return: Decimal,
    max_years: int = 100,
) -> int | None:
    """Count whole years until net worth reaches ``target``.

    Net worth is not clamped during the search.

    Args:
        current_net_worth: Starting net worth.
        target: FIRE number to reach.
        annual_savings: Amount added at the end of every year (may be <= 0).
        real_return: Inflation-adjusted annual return (may be <= 0).
        max_years: Search bound.

    Returns:
        0 if already at or above target, the year count if reached before
        max_years, otherwise None (unreachable).
    """
    if current_net_worth >= target:
        return 0
    if annual_savings <= ZERO and real_return <= ZERO:
        return None

    net_worth = current_net_worth
    growth = ONE + real_return
    years = 0
    while net_worth < target and years < max_years:
        net_worth = net_worth * growth + annual_savings
        years += 1

    return years if years < max_years else None


def generate_projection(
    current_net_worth: Decimal,
    target: Decimal,
    annual_savings: Decimal,
    real_return: Decimal,
    current_age: int,
    years_to_project: int = 40,
) -> list[ProjectionPoint]:
    """Project net worth for ``years_to_project`` years.

    Returns ``years_to_project + 1`` points; point 0 is the current state.
    Each reported net worth is clamped to >= 0, but the unclamped value keeps
    compounding so the series stays in step with years_to_fire.
    """
    projection = [
        ProjectionPoint(
            year=0,
            age=current_age,
            net_worth=current_net_worth,
            fire_number=target,
        )
    ]

    net_worth = current_net_worth
    growth = ONE + real_return
    for year in range(1, years_to_project + 1):
        net_worth = net_worth * growth + annual_savings
        projection.append(
            ProjectionPoint(
                year=year,
                age=current_age + year,
                net_worth=max(ZERO, net_worth),
                fire_number=target,
            )
        )

    return projection


def calculate_fire_metrics(inputs: FireInputs, max_years: int = 100) -> FireResults:
    """Compute every FIRE metric for one set of inputs.

    Args:
        inputs: Current position and economic assumptions.
        max_years: Bound passed to the years_to_fire search.

    Returns:
        FireResults. progress_percent is capped at 100 and is 0 when the
        FIRE number is not positive.
    """
    real_return = real_return_rate(inputs.annual_growth_rate, inputs.inflation_rate)
    target = fire_number(inputs.annual_expenses, inputs.safe_withdrawal_rate)
    withdrawal = monthly_withdrawal(inputs.current_net_worth, inputs.safe_withdrawal_rate)

    gap = max(ZERO, target - inputs.current_net_worth)
    if target > ZERO:
        progress = min(HUNDRED, inputs.current_net_worth / target * HUNDRED)
    else:
        progress = ZERO

    years = years_to_fire(
        inputs.current_net_worth,
        target,
        inputs.annual_savings,
        real_return,
        max_years=max_years,
    )
    fire_age = inputs.current_age + years if years is not None else None

    income_gap = withdrawal - inputs.annual_expenses / MONTHS_PER_YEAR

    return FireResults(
        fire_number=target,
        monthly_withdrawal=withdrawal,
        gap_to_fire=gap,
        progress_percent=progress,
        years_to_fire=years,
        fire_age=fire_age,
        income_gap=income_gap,
    )
