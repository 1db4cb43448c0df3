"""FIRE solver: target number, real return, years-to-target, and projection."""

from networth.fire.calculator import (
    calculate_fire_metrics,
    fire_number,
    generate_projection,
    monthly_withdrawal,
    real_return_rate,
    years_to_fire,
)
from networth.fire.models import FireInputs, FireResults, ProjectionPoint
from networth.fire.plan import FireAssumptions, build_fire_inputs

__all__ = [
    "FireAssumptions",
    "FireInputs",
    "FireResults",
    "ProjectionPoint",
    "build_fire_inputs",
    "calculate_fire_metrics",
    "fire_number",
    "generate_projection",
    "monthly_withdrawal",
    "real_return_rate",
    "years_to_fire",
]
