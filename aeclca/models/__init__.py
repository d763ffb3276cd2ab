"""Object model: EPDs, materials, and building elements."""

from aeclca.models.element import (
    BuildingElement,
    GeometryInfo,
    Material,
    MaterialComposition,
    MaterialLayer,
    MechanicalProperty,
)
from aeclca.models.epd import (
    EnvironmentalMetric,
    EnvironmentalProductDeclaration,
    EnvironmentalProductDeclarationField,
    EPDType,
    LifeCycleAssessmentPhase,
    QuantityType,
)

__all__ = [
    "BuildingElement",
    "EPDType",
    "EnvironmentalMetric",
    "EnvironmentalProductDeclaration",
    "EnvironmentalProductDeclarationField",
    "GeometryInfo",
    "LifeCycleAssessmentPhase",
    "Material",
    "MaterialComposition",
    "MaterialLayer",
    "MechanicalProperty",
    "QuantityType",
]
