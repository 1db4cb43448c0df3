"""JSON API over the net worth engine."""

from networth.api.app import build_service, create_app

__all__ = ["build_service", "create_app"]
