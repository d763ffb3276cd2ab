"""BuildingElement — the geometry-bearing object whose impact is evaluated.

Elements are supplied by the caller (built by hand or by the IFC adapter)
and never mutated by the evaluator.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from aeclca.models.epd import EnvironmentalProductDeclaration


class MechanicalProperty(BaseModel):
    """Structural material data carried alongside any EPD."""

    kind: Literal["mechanical"] = "mechanical"
    youngs_modulus: float | None = None
    poissons_ratio: float | None = None
    thermal_expansion_coefficient: float | None = None


MaterialProperty = Annotated[
    Union[EnvironmentalProductDeclaration, MechanicalProperty],
    Field(discriminator="kind"),
]


class Material(BaseModel):
    """A physical material and the property fragments attached to it."""

    name: str = ""
    density: float | None = None
    properties: list[MaterialProperty] = Field(default_factory=list)


class MaterialLayer(BaseModel):
    """A single material layer or constituent of an element."""

    material: Material = Field(default_factory=Material)
    thickness: float | None = None
    category: str | None = None
    fraction: float | None = None


class MaterialComposition(BaseModel):
    """Materials of an element with ratios summing to one."""

    materials: list[Material] = Field(default_factory=list)
    ratios: list[float] = Field(default_factory=list)


class GeometryInfo(BaseModel):
    """Quantities the geometry of an element can answer for.

    ``area`` is None for elements that are not planar; ``volume`` is None
    when no solid volume can be computed.
    """

    area: float | None = None
    volume: float | None = None
    centroid: tuple[float, float, float] | None = None


class BuildingElement(BaseModel):
    """An element evaluated for environmental impact.

    ``epd`` is the EPD governing the whole element.  ``properties`` holds
    plain named values (e.g. ``"Area"``, ``"Volume"``) used only when the
    geometry cannot answer.
    """

    global_id: str = ""
    ifc_class: str = ""
    name: str | None = None

    geometry: GeometryInfo = Field(default_factory=GeometryInfo)
    materials: list[MaterialLayer] = Field(default_factory=list)
    epd: EnvironmentalProductDeclaration | None = None
    properties: dict[str, Any] = Field(default_factory=dict)
    psets: dict[str, dict[str, Any]] = Field(default_factory=dict)
