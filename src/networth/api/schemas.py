"""Request bodies for the JSON API. Each converts into the engine's dataclasses."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator

from networth.fire import FireAssumptions
from networth.history import parse_snapshot_date
from networth.models import (
    Account,
    AccountType,
    CashHolding,
    Expense,
    NetWorthSnapshot,
    StockHolding,
)
from networth.sorting import SortDirection


class CashHoldingIn(BaseModel):
    id: str = ""
    account_id: str = ""
    balance: Decimal
    currency: str
    label: str | None = None


class StockHoldingIn(BaseModel):
    id: str = ""
    account_id: str = ""
    ticker: str
    shares: Decimal
    cost_basis_per_share: Decimal = Decimal("0")


class AccountIn(BaseModel):
    id: str
    type: AccountType
    name: str = ""
    cash_holdings: list[CashHoldingIn] = Field(default_factory=list)
    stock_holdings: list[StockHoldingIn] = Field(default_factory=list)

    def to_model(self) -> Account:
        return Account(
            id=self.id,
            type=self.type,
            name=self.name,
            cash_holdings=tuple(
                CashHolding(**h.model_dump(exclude={"account_id"}), account_id=h.account_id or self.id)
                for h in self.cash_holdings
            ),
            stock_holdings=tuple(
                StockHolding(**h.model_dump(exclude={"account_id"}), account_id=h.account_id or self.id)
                for h in self.stock_holdings
            ),
        )


class SnapshotIn(BaseModel):
    snapshot_date: date
    total_value: Decimal
    cash_value: Decimal = Decimal("0")
    investment_value: Decimal = Decimal("0")
    currency: str = "USD"

    @field_validator("snapshot_date", mode="before")
    @classmethod
    def _calendar_day(cls, value: Any) -> date:
        return parse_snapshot_date(value)

    def to_model(self) -> NetWorthSnapshot:
        return NetWorthSnapshot(**self.model_dump())


class ExpenseIn(BaseModel):
    id: str = ""
    amount: Decimal
    currency: str
    category: str
    subcategory: str
    expense_date: date
    description: str | None = None

    def to_model(self) -> Expense:
        return Expense(**self.model_dump())


class AssumptionsIn(BaseModel):
    """FIRE assumptions. Omitted fields fall back to FireSettings defaults."""

    current_age: int | None = None
    safe_withdrawal_rate: Decimal | None = None
    annual_growth_rate: Decimal | None = None
    inflation_rate: Decimal | None = None
    include_retirement_accounts: bool = False
    monthly_expenses: Decimal | None = None
    monthly_savings: Decimal = Decimal("0")

    def to_model(self, defaults: FireAssumptions) -> FireAssumptions:
        overrides = self.model_dump(exclude_none=True)
        return replace(defaults, **overrides)


class DashboardRequest(BaseModel):
    base_currency: str | None = None
    as_of: date | None = None
    accounts: list[AccountIn] = Field(default_factory=list)
    snapshots: list[SnapshotIn] = Field(default_factory=list)
    expenses: list[ExpenseIn] = Field(default_factory=list)


class FireRequest(BaseModel):
    base_currency: str | None = None
    as_of: date | None = None
    accounts: list[AccountIn] = Field(default_factory=list)
    expenses: list[ExpenseIn] = Field(default_factory=list)
    assumptions: AssumptionsIn = Field(default_factory=AssumptionsIn)


class SortRequest(BaseModel):
    records: list[dict[str, Any]]
    key: str
    direction: SortDirection = SortDirection.DESC
