"""Queries over EPDs and building elements."""

from aeclca.query.composition import material_composition
from aeclca.query.geometry import (
    ElementQuantityProvider,
    QuantityProvider,
    QueryResult,
    QueryStatus,
)
from aeclca.query.metrics import (
    environmental_metrics,
    get_element_environmental_metrics,
    get_environmental_metrics,
    get_evaluation_value,
    material_epds,
)

__all__ = [
    "ElementQuantityProvider",
    "QuantityProvider",
    "QueryResult",
    "QueryStatus",
    "environmental_metrics",
    "get_element_environmental_metrics",
    "get_environmental_metrics",
    "get_evaluation_value",
    "material_composition",
    "material_epds",
]
