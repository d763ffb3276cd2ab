"""IFC adapter: build BuildingElements from ifcopenshell entities."""

from aeclca.extraction.ifc import element_from_ifc, elements_from_ifc_file

__all__ = ["element_from_ifc", "elements_from_ifc_file"]
