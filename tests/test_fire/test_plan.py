"""Tests for building FIRE inputs from a portfolio summary and tracked spending."""

from decimal import Decimal

import pytest

from networth.config import FireSettings
from networth.fire import FireAssumptions, build_fire_inputs
from networth.valuation import GainLoss, PortfolioSummary


@pytest.fixture
def summary() -> PortfolioSummary:
    return PortfolioSummary(
        base_currency="SGD",
        cash=Decimal("50000"),
        investments=Decimal("150000"),
        cpf=Decimal("80000"),
        srs=Decimal("20000"),
        investment_cost=Decimal("120000"),
        gain_loss=GainLoss(Decimal("30000"), Decimal("25")),
    )


class TestBuildFireInputs:
    def test_excludes_retirement_accounts_by_default(self, summary: PortfolioSummary) -> None:
        inputs = build_fire_inputs(summary, Decimal("3000"), FireAssumptions())
        assert inputs.current_net_worth == Decimal("200000")

    def test_includes_retirement_accounts_when_toggled(self, summary: PortfolioSummary) -> None:
        assumptions = FireAssumptions(include_retirement_accounts=True)
        inputs = build_fire_inputs(summary, Decimal("3000"), assumptions)
        assert inputs.current_net_worth == Decimal("300000")

    def test_annualizes_tracked_expenses_and_savings(self, summary: PortfolioSummary) -> None:
        assumptions = FireAssumptions(monthly_savings=Decimal("2500"))
        inputs = build_fire_inputs(summary, Decimal("3000"), assumptions)
        assert inputs.annual_expenses == Decimal("36000")
        assert inputs.annual_savings == Decimal("30000")

    def test_manual_expenses_override_tracked(self, summary: PortfolioSummary) -> None:
        assumptions = FireAssumptions(monthly_expenses=Decimal("4000"))
        inputs = build_fire_inputs(summary, Decimal("3000"), assumptions)
        assert inputs.annual_expenses == Decimal("48000")

    def test_zero_manual_expenses_still_overrides(self, summary: PortfolioSummary) -> None:
        assumptions = FireAssumptions(monthly_expenses=Decimal("0"))
        inputs = build_fire_inputs(summary, Decimal("3000"), assumptions)
        assert inputs.annual_expenses == Decimal("0")

    def test_rates_pass_through(self, summary: PortfolioSummary) -> None:
        assumptions = FireAssumptions(current_age=40, safe_withdrawal_rate=Decimal("0.035"))
        inputs = build_fire_inputs(summary, Decimal("0"), assumptions)
        assert inputs.current_age == 40
        assert inputs.safe_withdrawal_rate == Decimal("0.035")
        assert inputs.annual_growth_rate == Decimal("0.07")
        assert inputs.inflation_rate == Decimal("0.03")


class TestAssumptionsFromSettings:
    def test_uses_settings_defaults(self) -> None:
        settings = FireSettings(current_age=28, safe_withdrawal_rate=Decimal("0.03"))
        assumptions = FireAssumptions.from_settings(settings)
        assert assumptions.current_age == 28
        assert assumptions.safe_withdrawal_rate == Decimal("0.03")
        assert assumptions.include_retirement_accounts is False

    def test_overrides_win(self) -> None:
        assumptions = FireAssumptions.from_settings(FireSettings(), monthly_savings=Decimal("100"))
        assert assumptions.monthly_savings == Decimal("100")
