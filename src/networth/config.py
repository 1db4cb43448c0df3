"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_reference_rates() -> dict[str, Decimal]:
    # Units of each currency per 1 USD. Overridden via CURRENCY_REFERENCE_RATES (JSON).
    return {
        "USD": Decimal("1"),
        "EUR": Decimal("0.92"),
        "GBP": Decimal("0.79"),
        "SGD": Decimal("1.34"),
        "JPY": Decimal("149.5"),
        "AUD": Decimal("1.52"),
        "CAD": Decimal("1.36"),
        "CHF": Decimal("0.88"),
        "CNY": Decimal("7.24"),
        "HKD": Decimal("7.82"),
    }


class CurrencySettings(BaseSettings):
    """Base currency and the static FX table used by the in-memory rate provider."""

    model_config = SettingsConfigDict(env_prefix="CURRENCY_")

    base_currency: str = "USD"
    reference_currency: str = "USD"
    reference_rates: dict[str, Decimal] = Field(default_factory=_default_reference_rates)


class FireSettings(BaseSettings):
    """Default FIRE assumptions. Rates are fractions (0.04 = 4%)."""

    model_config = SettingsConfigDict(env_prefix="FIRE_")

    current_age: int = 35
    safe_withdrawal_rate: Decimal = Decimal("0.04")
    annual_growth_rate: Decimal = Decimal("0.07")
    inflation_rate: Decimal = Decimal("0.03")
    max_years: int = 100  # solver bound
    projection_years: int = 40
    expense_lookback_months: int = 3  # months of expenses averaged for the plan


class HistorySettings(BaseSettings):
    """Chart window lengths for the net worth history series."""

    model_config = SettingsConfigDict(env_prefix="HISTORY_")

    daily_points: int = 7
    monthly_points: int = 12
    yearly_points: int = 5


class ApiSettings(BaseSettings):
    """HTTP API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 8080
    enabled: bool = True


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"  # LOG_FORMAT
    currency: CurrencySettings = CurrencySettings()
    fire: FireSettings = FireSettings()
    history: HistorySettings = HistorySettings()
    api: ApiSettings = ApiSettings()
