"""Extract material associations and their EPD data from IFC elements."""

from __future__ import annotations

import logging
from typing import Any

import ifcopenshell
import ifcopenshell.util.element

from aeclca.config import (
    DECLARED_UNITS,
    DENSITY_PROPERTY,
    EPD_INDICATORS,
    EPD_PSET,
    MATERIAL_PSET,
)
from aeclca.extraction.properties import extract_psets
from aeclca.models.element import Material, MaterialLayer
from aeclca.models.epd import (
    EnvironmentalMetric,
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
    QuantityType,
)

logger = logging.getLogger(__name__)


def epd_from_pset(
    props: dict[str, Any],
    fallback_name: str = "",
    density: float | None = None,
) -> EnvironmentalProductDeclaration | None:
    """Build an EPD from ``Pset_EnvironmentalImpactIndicators`` values.

    Returns None when the set declares no known indicator.
    """
    metrics: list[EnvironmentalMetric] = []
    for prop_name, field in EPD_INDICATORS.items():
        value = props.get(prop_name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            metrics.append(EnvironmentalMetric(
                field=EnvironmentalProductDeclarationField(field),
                quantity=float(value),
            ))
    if not metrics:
        return None

    unit = str(props.get("Unit") or "").strip().lower()
    quantity_type = QuantityType(DECLARED_UNITS.get(unit, QuantityType.UNDEFINED.value))

    return EnvironmentalProductDeclaration(
        name=str(props.get("Reference") or fallback_name),
        id=str(props.get("Reference") or ""),
        quantity_type=quantity_type,
        density=density,
        environmental_metrics=tuple(metrics),
    )


def material_from_ifc(mat: ifcopenshell.entity_instance | None) -> Material:
    """Convert an ``IfcMaterial`` into a Material with density and EPD."""
    if mat is None:
        return Material()

    name = mat.Name or ""
    psets = extract_psets(mat)

    density = psets.get(MATERIAL_PSET, {}).get(DENSITY_PROPERTY)
    if not isinstance(density, (int, float)) or isinstance(density, bool):
        density = None

    properties: list[Any] = []
    if EPD_PSET in psets:
        epd = epd_from_pset(psets[EPD_PSET], fallback_name=name, density=density)
        if epd is not None:
            properties.append(epd)

    return Material(name=name, density=density, properties=properties)


def extract_materials(element: ifcopenshell.entity_instance) -> list[MaterialLayer]:
    """Return material layers / constituents for *element*.

    Handles IfcMaterialLayerSetUsage, IfcMaterialLayerSet,
    IfcMaterialConstituentSet, IfcMaterialList, and single IfcMaterial
    assignments.
    """
    try:
        mat = ifcopenshell.util.element.get_material(element)
    except Exception:
        logger.debug("Material extraction failed for %s", element.GlobalId, exc_info=True)
        return []

    if mat is None:
        return []

    mat_type = mat.is_a()

    if mat_type == "IfcMaterial":
        return [MaterialLayer(
            material=material_from_ifc(mat),
            category=getattr(mat, "Category", None),
        )]

    if mat_type == "IfcMaterialLayerSetUsage":
        mat = mat.ForLayerSet
        mat_type = mat.is_a()

    if mat_type == "IfcMaterialLayerSet":
        return [
            MaterialLayer(
                material=material_from_ifc(layer.Material),
                thickness=layer.LayerThickness,
                category=getattr(layer, "Category", None),
            )
            for layer in mat.MaterialLayers
        ]

    if mat_type == "IfcMaterialConstituentSet":
        return [
            MaterialLayer(
                material=material_from_ifc(constituent.Material),
                category=getattr(constituent, "Category", None),
                fraction=getattr(constituent, "Fraction", None),
            )
            for constituent in (mat.MaterialConstituents or [])
        ]

    if mat_type == "IfcMaterialList":
        return [MaterialLayer(material=material_from_ifc(m)) for m in mat.Materials]

    logger.debug("Unhandled material assignment %s on %s", mat_type, element.GlobalId)
    return []
