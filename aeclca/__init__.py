"""aeclca — EPD-based environmental impact evaluation for building elements."""

__version__ = "1.0.0"

from aeclca.compute.evaluate import (
    evaluate_by_area,
    evaluate_by_mass,
    evaluate_by_volume,
    evaluate_per_object,
)
from aeclca.diagnostics import Diagnostic, DiagnosticKind, Evaluation
from aeclca.engine import LCAEngine
from aeclca.library import EPDLibrary
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
from aeclca.query.composition import material_composition
from aeclca.query.geometry import ElementQuantityProvider, QuantityProvider, QueryResult, QueryStatus
from aeclca.query.metrics import (
    environmental_metrics,
    get_element_environmental_metrics,
    get_environmental_metrics,
    get_evaluation_value,
)
from aeclca.report import ImpactEntry, ImpactReport

__all__ = [
    "__version__",
    # Evaluation
    "Diagnostic",
    "DiagnosticKind",
    "Evaluation",
    "evaluate_by_area",
    "evaluate_by_mass",
    "evaluate_by_volume",
    "evaluate_per_object",
    # Engine
    "EPDLibrary",
    "ImpactEntry",
    "ImpactReport",
    "LCAEngine",
    # Models
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
    # Queries
    "ElementQuantityProvider",
    "QuantityProvider",
    "QueryResult",
    "QueryStatus",
    "environmental_metrics",
    "get_element_environmental_metrics",
    "get_environmental_metrics",
    "get_evaluation_value",
    "material_composition",
]
