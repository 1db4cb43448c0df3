"""Value objects for FIRE (Financial Independence, Retire Early) planning.

CRITICAL: All monetary values and rates use Decimal. Rates are fractions (0.04 = 4%).
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FireInputs:
    """Inputs to a FIRE calculation."""

    current_age: int
    safe_withdrawal_rate: Decimal  # e.g. 0.04 for 4%
    annual_growth_rate: Decimal  # nominal, e.g. 0.07
    inflation_rate: Decimal  # e.g. 0.03
    annual_expenses: Decimal
    current_net_worth: Decimal
    annual_savings: Decimal


@dataclass(frozen=True)
class FireResults:
    """Computed FIRE metrics.

    years_to_fire and fire_age are None when the target is currently
    unreachable; that is a valid steady state, not an error.
    """

    fire_number: Decimal
    monthly_withdrawal: Decimal
    gap_to_fire: Decimal
    progress_percent: Decimal
    years_to_fire: int | None
    fire_age: int | None
    income_gap: Decimal


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected net worth at the end of a given year."""

    year: int
    age: int
    net_worth: Decimal
    fire_number: Decimal
