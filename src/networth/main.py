"""Entry point: load settings, configure logging, and serve the JSON API."""

import uvicorn

from networth.api import create_app
from networth.config import AppSettings
from networth.logging import get_logger, setup_logging


def main() -> None:
    settings = AppSettings()
    setup_logging(settings.log_level, settings.log_format)
    logger = get_logger("networth.main")

    if not settings.api.enabled:
        logger.warning("api_disabled", note="Set API_ENABLED=true to serve the API")
        return

    app = create_app(settings=settings)
    logger.info(
        "api_starting",
        host=settings.api.host,
        port=settings.api.port,
        base_currency=settings.currency.base_currency,
    )
    uvicorn.run(app, host=settings.api.host, port=settings.api.port, log_config=None)


if __name__ == "__main__":
    main()
