"""Tests for the IFC adapter.

All tests create a synthetic IFC in-memory using ifcopenshell's API and
convert its elements into BuildingElements.
"""

from __future__ import annotations

from pathlib import Path

import ifcopenshell
import ifcopenshell.api
import pytest

from aeclca.compute.evaluate import evaluate_per_object
from aeclca.extraction.ifc import element_from_ifc, elements_from_ifc_file
from aeclca.extraction.materials import epd_from_pset, extract_materials
from aeclca.extraction.properties import extract_psets, first_quantity, named_properties
from aeclca.models.element import BuildingElement
from aeclca.models.epd import EnvironmentalProductDeclarationField as F, QuantityType


# ---------------------------------------------------------------------------
# Fixtures: synthetic IFC files
# ---------------------------------------------------------------------------


def _build_minimal_ifc() -> ifcopenshell.file:
    """Return an IFC4 file with one wall, one slab, and one beam.

    The wall has:
      - Qto_WallBaseQuantities with NetSideArea and NetVolume
      - A two-layer material (Concrete 200mm + Insulation 50mm)
      - Concrete carries MassDensity and a volume-based EPD
    The slab declares an area-based EPD on itself and a NetArea.
    The beam has no quantities and no material.
    """
    f = ifcopenshell.file(schema="IFC4")
    ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcProject", name="LCAProject")

    # --- Wall ---
    wall = ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcWall", name="ExteriorWall")
    qto = ifcopenshell.api.run("pset.add_qto", f, product=wall, name="Qto_WallBaseQuantities")
    ifcopenshell.api.run(
        "pset.edit_qto", f, qto=qto, properties={"NetSideArea": 15.0, "NetVolume": 3.0}
    )

    mat_set = ifcopenshell.api.run(
        "material.add_material_set", f, name="WallLayers", set_type="IfcMaterialLayerSet"
    )
    concrete = ifcopenshell.api.run("material.add_material", f, name="Concrete")
    insulation = ifcopenshell.api.run("material.add_material", f, name="Insulation")

    common = ifcopenshell.api.run("pset.add_pset", f, product=concrete, name="Pset_MaterialCommon")
    ifcopenshell.api.run("pset.edit_pset", f, pset=common, properties={"MassDensity": 2400.0})
    indicators = ifcopenshell.api.run(
        "pset.add_pset", f, product=concrete, name="Pset_EnvironmentalImpactIndicators"
    )
    ifcopenshell.api.run(
        "pset.edit_pset",
        f,
        pset=indicators,
        properties={
            "Reference": "EPD-CONCRETE",
            "Unit": "m3",
            "ClimateChangePerUnit": 250.0,
            "EutrophicationPerUnit": 0.05,
        },
    )

    layer1 = ifcopenshell.api.run("material.add_layer", f, layer_set=mat_set, material=concrete)
    ifcopenshell.api.run("material.edit_layer", f, layer=layer1, attributes={"LayerThickness": 200.0})
    layer2 = ifcopenshell.api.run("material.add_layer", f, layer_set=mat_set, material=insulation)
    ifcopenshell.api.run("material.edit_layer", f, layer=layer2, attributes={"LayerThickness": 50.0})
    ifcopenshell.api.run("material.assign_material", f, products=[wall], material=mat_set)

    # --- Slab ---
    slab = ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcSlab", name="GroundSlab")
    slab_qto = ifcopenshell.api.run("pset.add_qto", f, product=slab, name="Qto_SlabBaseQuantities")
    ifcopenshell.api.run("pset.edit_qto", f, qto=slab_qto, properties={"NetArea": 36.0})
    slab_epd = ifcopenshell.api.run(
        "pset.add_pset", f, product=slab, name="Pset_EnvironmentalImpactIndicators"
    )
    ifcopenshell.api.run(
        "pset.edit_pset",
        f,
        pset=slab_epd,
        properties={"Reference": "EPD-SCREED", "Unit": "m2", "ClimateChangePerUnit": 12.0},
    )

    # --- Beam ---
    ifcopenshell.api.run("root.create_entity", f, ifc_class="IfcBeam", name="Beam")

    return f


@pytest.fixture()
def synthetic_ifc_file() -> ifcopenshell.file:
    return _build_minimal_ifc()


@pytest.fixture()
def synthetic_ifc(tmp_path: Path) -> Path:
    """Write a synthetic IFC4 to a temp file and return its path."""
    p = tmp_path / "synthetic.ifc"
    _build_minimal_ifc().write(str(p))
    return p


# ---------------------------------------------------------------------------
# Unit tests — individual extractors
# ---------------------------------------------------------------------------


class TestPropertyExtraction:
    def test_quantities(self, synthetic_ifc_file: ifcopenshell.file):
        wall = synthetic_ifc_file.by_type("IfcWall")[0]
        qtos = extract_psets(wall, qtos_only=True)
        assert qtos["Qto_WallBaseQuantities"]["NetVolume"] == pytest.approx(3.0)
        assert "id" not in qtos["Qto_WallBaseQuantities"]

    def test_first_quantity(self):
        qtos = {"A": {"GrossVolume": 2.0}, "B": {"NetVolume": 1.5, "Flag": True}}
        assert first_quantity(qtos, ("NetVolume", "GrossVolume")) == pytest.approx(1.5)
        assert first_quantity(qtos, ("Flag",)) is None
        assert first_quantity(qtos, ("Missing",)) is None

    def test_named_properties_first_wins(self):
        flat = named_properties({"A": {"Area": 1.0}, "B": {"Area": 2.0, "Volume": 3.0}})
        assert flat == {"Area": 1.0, "Volume": 3.0}


class TestMaterialExtraction:
    def test_layer_set_with_epd(self, synthetic_ifc_file: ifcopenshell.file):
        wall = synthetic_ifc_file.by_type("IfcWall")[0]
        layers = extract_materials(wall)

        assert [layer.material.name for layer in layers] == ["Concrete", "Insulation"]
        assert layers[0].thickness == 200.0
        assert layers[0].material.density == pytest.approx(2400.0)

        epd = layers[0].material.properties[0]
        assert epd.name == "EPD-CONCRETE"
        assert epd.quantity_type == QuantityType.VOLUME
        assert epd.density == pytest.approx(2400.0)
        assert layers[1].material.properties == []

    def test_no_material(self, synthetic_ifc_file: ifcopenshell.file):
        beam = synthetic_ifc_file.by_type("IfcBeam")[0]
        assert extract_materials(beam) == []

    def test_epd_from_pset(self):
        epd = epd_from_pset(
            {"Unit": "kg", "ClimateChangePerUnit": 1.1, "AtmosphericAcidificationPerUnit": 0.004},
            fallback_name="Steel",
            density=7850.0,
        )
        assert epd is not None
        assert epd.name == "Steel"
        assert epd.quantity_type == QuantityType.MASS
        assert [m.field for m in epd.environmental_metrics] == [
            F.GLOBAL_WARMING_POTENTIAL,
            F.ACIDIFICATION_POTENTIAL,
        ]

    def test_epd_from_pset_unknown_unit(self):
        epd = epd_from_pset({"Unit": "bags", "ClimateChangePerUnit": 1.0})
        assert epd.quantity_type == QuantityType.UNDEFINED

    def test_epd_from_pset_without_indicators(self):
        assert epd_from_pset({"Unit": "m3", "Reference": "Empty"}) is None


# ---------------------------------------------------------------------------
# Element conversion
# ---------------------------------------------------------------------------


class TestElementFromIfc:
    def test_wall(self, synthetic_ifc_file: ifcopenshell.file):
        wall = element_from_ifc(synthetic_ifc_file.by_type("IfcWall")[0])

        assert isinstance(wall, BuildingElement)
        assert wall.ifc_class == "IfcWall"
        assert wall.name == "ExteriorWall"
        assert wall.geometry.area == pytest.approx(15.0)
        assert wall.geometry.volume == pytest.approx(3.0)
        assert wall.epd is not None
        assert wall.epd.name == "EPD-CONCRETE"
        assert wall.properties["NetVolume"] == pytest.approx(3.0)

    def test_slab_element_level_epd(self, synthetic_ifc_file: ifcopenshell.file):
        slab = element_from_ifc(synthetic_ifc_file.by_type("IfcSlab")[0])

        assert slab.geometry.area == pytest.approx(36.0)
        assert slab.geometry.volume is None
        assert slab.epd.quantity_type == QuantityType.AREA
        assert slab.epd.name == "EPD-SCREED"

    def test_beam_is_not_planar(self, synthetic_ifc_file: ifcopenshell.file):
        beam = element_from_ifc(synthetic_ifc_file.by_type("IfcBeam")[0])

        assert beam.geometry.area is None
        assert beam.geometry.volume is None
        assert beam.epd is None
        assert beam.materials == []

    def test_evaluate_converted_elements(self, synthetic_ifc_file: ifcopenshell.file):
        wall = element_from_ifc(synthetic_ifc_file.by_type("IfcWall")[0])
        slab = element_from_ifc(synthetic_ifc_file.by_type("IfcSlab")[0])

        assert evaluate_per_object(wall).value == pytest.approx(750.0)
        assert evaluate_per_object(wall, F.EUTROPHICATION_POTENTIAL).value == pytest.approx(0.15)
        assert evaluate_per_object(slab).value == pytest.approx(432.0)


class TestIfcFile:
    def test_elements_from_file(self, synthetic_ifc: Path):
        elements = elements_from_ifc_file(synthetic_ifc)

        classes = {e.ifc_class for e in elements}
        assert classes == {"IfcWall", "IfcSlab", "IfcBeam"}
        assert all(e.global_id for e in elements)
