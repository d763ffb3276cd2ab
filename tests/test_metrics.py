"""Tests for metric extraction and material composition."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from aeclca.models.element import (
    BuildingElement,
    Material,
    MaterialLayer,
    MechanicalProperty,
)
from aeclca.models.epd import (
    EnvironmentalMetric,
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField as F,
    QuantityType,
)
from aeclca.query.composition import material_composition
from aeclca.query.metrics import (
    environmental_metrics,
    get_element_environmental_metrics,
    get_environmental_metrics,
    get_evaluation_value,
    material_epds,
)


def _concrete_epd() -> EnvironmentalProductDeclaration:
    return EnvironmentalProductDeclaration(
        name="Concrete C30/37",
        quantity_type=QuantityType.VOLUME,
        environmental_metrics=(
            EnvironmentalMetric(field=F.GLOBAL_WARMING_POTENTIAL, quantity=300.0),
            EnvironmentalMetric(field=F.ACIDIFICATION_POTENTIAL, quantity=0.8),
        ),
    )


def _timber_epd() -> EnvironmentalProductDeclaration:
    return EnvironmentalProductDeclaration(
        name="CLT",
        quantity_type=QuantityType.MASS,
        density=470.0,
        environmental_metrics=(
            EnvironmentalMetric(field=F.GLOBAL_WARMING_POTENTIAL, quantity=-1.2),
        ),
    )


def _layer(material: Material, thickness: float | None = None) -> MaterialLayer:
    return MaterialLayer(material=material, thickness=thickness)


# ---------------------------------------------------------------------------
# EPD metrics
# ---------------------------------------------------------------------------

class TestEPDMetrics:
    def test_none_is_empty(self):
        assert get_environmental_metrics(None) == []

    def test_order_preserved(self):
        metrics = get_environmental_metrics(_concrete_epd())
        assert [m.field for m in metrics] == [
            F.GLOBAL_WARMING_POTENTIAL,
            F.ACIDIFICATION_POTENTIAL,
        ]

    def test_evaluation_value(self):
        epd = _concrete_epd()
        assert get_evaluation_value(epd, F.ACIDIFICATION_POTENTIAL) == pytest.approx(0.8)
        assert get_evaluation_value(epd, F.EUTROPHICATION_POTENTIAL) is None

    def test_epd_is_frozen(self):
        epd = _concrete_epd()
        with pytest.raises(ValidationError):
            epd.name = "changed"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Element metrics
# ---------------------------------------------------------------------------

class TestElementMetrics:
    def test_none_is_empty(self):
        assert get_element_environmental_metrics(None) == []

    def test_flattens_all_materials(self):
        element = BuildingElement(materials=[
            _layer(Material(name="Concrete", properties=[_concrete_epd()])),
            _layer(Material(name="Timber", properties=[_timber_epd()])),
        ])
        metrics = get_element_environmental_metrics(element)
        assert len(metrics) == 3
        assert metrics[-1].quantity == pytest.approx(-1.2)

    def test_shared_epd_is_not_deduplicated(self):
        epd = _concrete_epd()
        element = BuildingElement(materials=[
            _layer(Material(name="A", properties=[epd])),
            _layer(Material(name="B", properties=[epd])),
        ])
        metrics = get_element_environmental_metrics(element)
        assert metrics == list(epd.environmental_metrics) * 2

    def test_non_epd_properties_ignored(self):
        material = Material(
            name="Steel",
            properties=[MechanicalProperty(youngs_modulus=210e9), _timber_epd()],
        )
        assert material_epds(material) == [_timber_epd()]
        element = BuildingElement(materials=[_layer(material)])
        assert len(get_element_environmental_metrics(element)) == 1

    def test_no_materials(self):
        assert get_element_environmental_metrics(BuildingElement()) == []

    def test_dispatch(self):
        epd = _concrete_epd()
        element = BuildingElement(materials=[_layer(Material(properties=[epd]))])
        assert environmental_metrics(epd) == list(epd.environmental_metrics)
        assert environmental_metrics(element) == list(epd.environmental_metrics)
        assert environmental_metrics(None) == []

    def test_properties_from_dicts(self):
        material = Material.model_validate({
            "name": "Concrete",
            "properties": [
                {"kind": "mechanical", "youngs_modulus": 30e9},
                _concrete_epd().model_dump(mode="json"),
            ],
        })
        assert len(material_epds(material)) == 1


# ---------------------------------------------------------------------------
# Material composition
# ---------------------------------------------------------------------------

class TestMaterialComposition:
    def test_none(self):
        comp = material_composition(None)
        assert comp.materials == []
        assert comp.ratios == []

    def test_thickness_ratios(self):
        element = BuildingElement(materials=[
            _layer(Material(name="Concrete"), 200.0),
            _layer(Material(name="Insulation"), 50.0),
        ])
        comp = material_composition(element)
        assert [m.name for m in comp.materials] == ["Concrete", "Insulation"]
        assert comp.ratios == pytest.approx([0.8, 0.2])

    def test_fraction_ratios(self):
        element = BuildingElement(materials=[
            MaterialLayer(material=Material(name="Sand"), fraction=0.3),
            MaterialLayer(material=Material(name="Cement"), fraction=0.1),
        ])
        assert material_composition(element).ratios == pytest.approx([0.75, 0.25])

    def test_even_split_without_dimensions(self):
        element = BuildingElement(materials=[
            _layer(Material(name="A")),
            _layer(Material(name="B"), 10.0),
        ])
        assert material_composition(element).ratios == pytest.approx([0.5, 0.5])
