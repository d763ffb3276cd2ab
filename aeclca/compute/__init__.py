"""Impact evaluation of building elements against their EPD."""

from aeclca.compute.evaluate import (
    DEFAULT_FIELD,
    evaluate_by_area,
    evaluate_by_mass,
    evaluate_by_volume,
    evaluate_per_object,
)

__all__ = [
    "DEFAULT_FIELD",
    "evaluate_by_area",
    "evaluate_by_mass",
    "evaluate_by_volume",
    "evaluate_per_object",
]
