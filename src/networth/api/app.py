"""FastAPI application factory for the net worth JSON API."""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from networth.api import routes
from networth.config import AppSettings
from networth.exceptions import ProviderError
from networth.providers import StaticPriceProvider, StaticRateProvider
from networth.service import NetWorthService

log = structlog.get_logger(__name__)


async def _provider_error_handler(request: Request, exc: ProviderError) -> JSONResponse:
    log.error("provider_failed", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=502, content={"error": str(exc)})


def build_service(settings: AppSettings) -> NetWorthService:
    """Wire the service with the static rate table from settings.

    No price feed is bundled, so requests carrying stock holdings fail with
    StockPriceUnavailableError (502) unless a service with a real
    PriceProvider is passed to create_app.
    """
    return NetWorthService(
        rate_provider=StaticRateProvider(
            settings.currency.reference_rates,
            reference_currency=settings.currency.reference_currency,
        ),
        price_provider=StaticPriceProvider(),
        fire_settings=settings.fire,
        history_settings=settings.history,
    )


def create_app(
    service: NetWorthService | None = None,
    settings: AppSettings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        service: Engine facade; built from settings when omitted.
        settings: Application settings; loaded from the environment when omitted.

    Returns:
        Configured FastAPI application with the /api router.
    """
    settings = settings or AppSettings()

    app = FastAPI(title="Net Worth Tracker")
    app.state.settings = settings
    app.state.service = service or build_service(settings)

    app.add_exception_handler(ProviderError, _provider_error_handler)
    app.include_router(routes.router, prefix="/api")

    return app
