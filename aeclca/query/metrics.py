"""Environmental metric queries on EPDs and elements."""

from __future__ import annotations

from typing import Any

from aeclca.models.element import BuildingElement, Material
from aeclca.models.epd import (
    EnvironmentalMetric,
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
)
from aeclca.query.composition import material_composition


def get_environmental_metrics(
    epd: EnvironmentalProductDeclaration | None,
) -> list[EnvironmentalMetric]:
    """Return all metrics of *epd* in declaration order (empty for None)."""
    if epd is None:
        return []
    return list(epd.environmental_metrics)


def material_epds(material: Material) -> list[EnvironmentalProductDeclaration]:
    """Return the EPD fragments attached to *material*."""
    return [p for p in material.properties if isinstance(p, EnvironmentalProductDeclaration)]


def get_element_environmental_metrics(
    element: BuildingElement | None,
) -> list[EnvironmentalMetric]:
    """Flatten the metrics of every EPD on every material of *element*.

    Metrics are not deduplicated: two materials sharing one EPD contribute
    its metrics twice.
    """
    if element is None:
        return []

    metrics: list[EnvironmentalMetric] = []
    for material in material_composition(element).materials:
        for epd in material_epds(material):
            metrics.extend(epd.environmental_metrics)
    return metrics


def environmental_metrics(obj: Any) -> list[EnvironmentalMetric]:
    """Return the metrics of an EPD or of a building element."""
    if isinstance(obj, EnvironmentalProductDeclaration):
        return get_environmental_metrics(obj)
    if isinstance(obj, BuildingElement):
        return get_element_environmental_metrics(obj)
    return []


def get_evaluation_value(
    epd: EnvironmentalProductDeclaration,
    field: EnvironmentalProductDeclarationField,
) -> float | None:
    """Return the per-unit factor *epd* declares for *field*, or None."""
    for metric in epd.environmental_metrics:
        if metric.field == field:
            return metric.quantity
    return None
