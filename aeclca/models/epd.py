"""Environmental Product Declaration models.

An EPD declares the environmental footprint of one material or product
per declared unit.  The declared unit is captured by ``quantity_type``:
every metric value is a factor per kg, per m3, or per m2 depending on it.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class QuantityType(str, Enum):
    """Physical quantity an EPD's factors are normalised against."""

    UNDEFINED = "Undefined"
    MASS = "Mass"
    VOLUME = "Volume"
    AREA = "Area"
    LENGTH = "Length"
    ITEM = "Item"


class EnvironmentalProductDeclarationField(str, Enum):
    """Impact categories an EPD can report."""

    ACIDIFICATION_POTENTIAL = "AcidificationPotential"
    DEPLETION_OF_ABIOTIC_RESOURCES_FOSSIL_FUELS = "DepletionOfAbioticResourcesFossilFuels"
    DEPLETION_OF_ABIOTIC_RESOURCES_ELEMENTS = "DepletionOfAbioticResourcesElements"
    EUTROPHICATION_POTENTIAL = "EutrophicationPotential"
    GLOBAL_WARMING_POTENTIAL = "GlobalWarmingPotential"
    OZONE_DEPLETION_POTENTIAL = "OzoneDepletionPotential"
    PHOTOCHEMICAL_OZONE_CREATION_POTENTIAL = "PhotochemicalOzoneCreationPotential"


class EPDType(str, Enum):
    PRODUCT = "Product"
    SECTOR = "Sector"
    INDUSTRY = "Industry"


class LifeCycleAssessmentPhase(str, Enum):
    """EN 15804 life-cycle modules."""

    A1 = "A1"
    A2 = "A2"
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    B1 = "B1"
    B2 = "B2"
    B3 = "B3"
    B4 = "B4"
    B5 = "B5"
    B6 = "B6"
    B7 = "B7"
    C1 = "C1"
    C2 = "C2"
    C3 = "C3"
    C4 = "C4"
    D = "D"


class EnvironmentalMetric(BaseModel):
    """One impact category and its per-declared-unit factor.

    ``quantity`` may be negative (e.g. sequestration credits).
    """

    model_config = ConfigDict(frozen=True)

    field: EnvironmentalProductDeclarationField
    quantity: float
    phases: tuple[LifeCycleAssessmentPhase, ...] = ()


class EnvironmentalProductDeclaration(BaseModel):
    """A named EPD dataset.  Immutable once loaded."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["epd"] = "epd"
    name: str
    id: str = ""
    epd_type: EPDType = EPDType.PRODUCT
    quantity_type: QuantityType = QuantityType.UNDEFINED
    density: float | None = None
    environmental_metrics: tuple[EnvironmentalMetric, ...] = Field(default_factory=tuple)
    manufacturer: str | None = None
    description: str | None = None
