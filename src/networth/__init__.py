"""Personal net worth tracking engine: valuation, FIRE planning, and history series."""

__version__ = "0.1.0"
