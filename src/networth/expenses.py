"""Expense categories and spending aggregates that feed the FIRE plan."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from networth.models import Expense, ExchangeRates
from networth.valuation.conversion import convert_to_base


class ExpenseCategory(str, Enum):
    RECURRING = "recurring"
    NON_RECURRING = "non_recurring"


@dataclass(frozen=True)
class Subcategory:
    value: str
    label: str
    category: ExpenseCategory


EXPENSE_CATEGORIES: dict[ExpenseCategory, str] = {
    ExpenseCategory.RECURRING: "Recurring",
    ExpenseCategory.NON_RECURRING: "Non-Recurring",
}

_R = ExpenseCategory.RECURRING
_N = ExpenseCategory.NON_RECURRING

EXPENSE_SUBCATEGORIES: tuple[Subcategory, ...] = (
    Subcategory("rent_mortgage", "Rent/Mortgage", _R),
    Subcategory("utilities", "Utilities", _R),
    Subcategory("insurance", "Insurance", _R),
    Subcategory("subscriptions", "Subscriptions", _R),
    Subcategory("loan_payments", "Loan Payments", _R),
    Subcategory("memberships", "Memberships", _R),
    Subcategory("childcare", "Childcare", _R),
    Subcategory("phone_internet", "Phone/Internet", _R),
    Subcategory("family", "Family", _R),
    Subcategory("shopping", "Shopping", _N),
    Subcategory("food_dining", "Food & Dining", _N),
    Subcategory("groceries", "Groceries", _N),
    Subcategory("transportation", "Transportation", _N),
    Subcategory("entertainment", "Entertainment", _N),
    Subcategory("travel", "Travel", _N),
    Subcategory("healthcare", "Healthcare", _N),
    Subcategory("education", "Education", _N),
    Subcategory("gifts", "Gifts", _N),
    Subcategory("home_maintenance", "Home Maintenance", _N),
    Subcategory("personal_care", "Personal Care", _N),
    Subcategory("other", "Other", _N),
)

_SUBCATEGORY_LABELS = {s.value: s.label for s in EXPENSE_SUBCATEGORIES}


@dataclass(frozen=True)
class ExpenseSlice:
    subcategory: str
    label: str
    value: Decimal


def subcategories_for(category: ExpenseCategory | str) -> list[Subcategory]:
    category = ExpenseCategory(category)
    return [s for s in EXPENSE_SUBCATEGORIES if s.category is category]


def subcategory_label(subcategory: str) -> str:
    return _SUBCATEGORY_LABELS.get(subcategory, subcategory)


def category_label(category: str) -> str:
    for member, label in EXPENSE_CATEGORIES.items():
        if member.value == category:
            return label
    return category


def lookback_start(as_of: date, months: int) -> date:
    """First day of the month ``months`` calendar months before ``as_of``'s month."""
    month_index = as_of.year * 12 + (as_of.month - 1) - months
    return date(month_index // 12, month_index % 12 + 1, 1)


def average_monthly_expenses(
    expenses: Iterable[Expense],
    base_currency: str,
    rates: ExchangeRates | None = None,
) -> Decimal:
    """Average monthly spend in base currency.

    Total converted spend divided by the number of distinct calendar months
    that have at least one expense (minimum 1, so an empty list yields 0).
    """
    total = Decimal("0")
    months: set[tuple[int, int]] = set()
    for expense in expenses:
        total += convert_to_base(expense.amount, expense.currency, base_currency, rates)
        months.add((expense.expense_date.year, expense.expense_date.month))

    return total / Decimal(max(1, len(months)))


def expense_breakdown(
    expenses: Iterable[Expense],
    base_currency: str,
    rates: ExchangeRates | None = None,
) -> list[ExpenseSlice]:
    """Total spend per subcategory in base currency, largest first."""
    grouped: dict[str, Decimal] = defaultdict(Decimal)
    for expense in expenses:
        grouped[expense.subcategory] += convert_to_base(
            expense.amount, expense.currency, base_currency, rates
        )

    slices = [
        ExpenseSlice(subcategory=key, label=subcategory_label(key), value=value)
        for key, value in grouped.items()
    ]
    return sorted(slices, key=lambda s: s.value, reverse=True)
