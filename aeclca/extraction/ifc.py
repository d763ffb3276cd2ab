"""Build BuildingElements from IFC entities.

Entry points: ``element_from_ifc(entity)`` and
``elements_from_ifc_file(ifc_path)``.

Quantities come from the element's ``Qto_*`` sets (no geometry kernel is
involved): a planar area for the classes listed in
:data:`aeclca.config.AREA_QUANTITIES` and a net or gross volume for all.
EPD data is read from ``Pset_EnvironmentalImpactIndicators`` on the
element, or else taken from the first material carrying one.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import ifcopenshell

from aeclca.config import AREA_QUANTITIES, ELEMENT_BASE_CLASS, EPD_PSET, VOLUME_QUANTITIES
from aeclca.extraction.materials import epd_from_pset, extract_materials
from aeclca.extraction.properties import extract_psets, first_quantity, named_properties
from aeclca.models.element import BuildingElement, GeometryInfo, MaterialLayer
from aeclca.models.epd import EnvironmentalProductDeclaration
from aeclca.query.metrics import material_epds

logger = logging.getLogger(__name__)


def _area_quantity_names(entity: ifcopenshell.entity_instance) -> tuple[str, ...] | None:
    for ifc_class, names in AREA_QUANTITIES.items():
        if entity.is_a(ifc_class):
            return names
    return None


def _extract_geometry(entity: ifcopenshell.entity_instance) -> GeometryInfo:
    qtos = extract_psets(entity, qtos_only=True)

    area = None
    names = _area_quantity_names(entity)
    if names is not None:
        area = first_quantity(qtos, names)

    return GeometryInfo(area=area, volume=first_quantity(qtos, VOLUME_QUANTITIES))


def _element_epd(
    psets: dict[str, dict[str, Any]],
    materials: list[MaterialLayer],
    fallback_name: str,
) -> EnvironmentalProductDeclaration | None:
    if EPD_PSET in psets:
        density = next(
            (layer.material.density for layer in materials if layer.material.density),
            None,
        )
        epd = epd_from_pset(psets[EPD_PSET], fallback_name=fallback_name, density=density)
        if epd is not None:
            return epd

    for layer in materials:
        epds = material_epds(layer.material)
        if epds:
            return epds[0]
    return None


def element_from_ifc(entity: ifcopenshell.entity_instance) -> BuildingElement:
    """Convert one IFC building element into a BuildingElement."""
    psets = extract_psets(entity)
    materials = extract_materials(entity)
    name = entity.Name

    return BuildingElement(
        global_id=entity.GlobalId,
        ifc_class=entity.is_a(),
        name=name,
        geometry=_extract_geometry(entity),
        materials=materials,
        epd=_element_epd(psets, materials, name or entity.GlobalId),
        properties=named_properties(psets),
        psets=psets,
    )


def elements_from_ifc_file(ifc_path: str | Path) -> list[BuildingElement]:
    """Open an IFC file and convert every building element.

    Elements that fail to convert are logged and skipped.
    """
    ifc_path = Path(ifc_path)
    logger.info("Opening %s", ifc_path)
    ifc_file = ifcopenshell.open(str(ifc_path))

    entities = ifc_file.by_type(ELEMENT_BASE_CLASS)
    logger.info("Found %d building elements", len(entities))

    elements: list[BuildingElement] = []
    for entity in entities:
        try:
            elements.append(element_from_ifc(entity))
        except Exception:
            logger.warning(
                "Skipping element %s (%s) due to error",
                entity.GlobalId,
                entity.is_a(),
                exc_info=True,
            )
    return elements
