"""LCAEngine — batch impact evaluation of building elements.

Usage::

    from aeclca import LCAEngine

    engine = LCAEngine(library=EPDLibrary.from_path("epds.json"))
    report = engine.assess(elements)
    print(report.to_markdown())
"""

from __future__ import annotations

import logging
from typing import Iterable

from aeclca.compute.evaluate import DEFAULT_FIELD, evaluate_per_object
from aeclca.diagnostics import Evaluation
from aeclca.library import EPDLibrary
from aeclca.models.element import BuildingElement
from aeclca.models.epd import EnvironmentalProductDeclarationField
from aeclca.query.composition import material_composition
from aeclca.query.geometry import QuantityProvider
from aeclca.query.metrics import material_epds
from aeclca.report import ImpactEntry, ImpactReport

logger = logging.getLogger(__name__)


class LCAEngine:
    """Impact evaluation engine.

    Parameters
    ----------
    provider:
        Quantity provider.  Defaults to reading the element model.
    library:
        EPD library used to attach an EPD to elements that have none.
    field:
        Default impact category.
    """

    def __init__(
        self,
        provider: QuantityProvider | None = None,
        library: EPDLibrary | None = None,
        field: EnvironmentalProductDeclarationField = DEFAULT_FIELD,
    ) -> None:
        self.provider = provider
        self.library = library
        self.default_field = EnvironmentalProductDeclarationField(field)

    def evaluate(
        self,
        element: BuildingElement | None,
        field: EnvironmentalProductDeclarationField | None = None,
    ) -> Evaluation:
        """Evaluate one element, attaching an EPD first if needed."""
        if element is not None:
            element = self.with_epd(element)
        return evaluate_per_object(element, field or self.default_field, self.provider)

    def assess(
        self,
        elements: Iterable[BuildingElement | None],
        field: EnvironmentalProductDeclarationField | None = None,
        project: str = "",
    ) -> ImpactReport:
        """Evaluate every element and collect the results in a report."""
        field = EnvironmentalProductDeclarationField(field or self.default_field)
        report = ImpactReport(field=field.value, project=project)

        for element in elements:
            if element is None:
                report.entries.append(ImpactEntry(
                    element_id="",
                    ifc_class="",
                    name="",
                    epd_name="",
                    evaluation=evaluate_per_object(None, field, self.provider),
                ))
                continue

            element = self.with_epd(element)
            evaluation = evaluate_per_object(element, field, self.provider)
            report.entries.append(ImpactEntry(
                element_id=element.global_id,
                ifc_class=element.ifc_class,
                name=element.name or "",
                epd_name=element.epd.name if element.epd else "",
                evaluation=evaluation,
            ))

        logger.info(
            "Assessed %d elements: total %s = %.3f (%d failed)",
            len(report.entries),
            field.value,
            report.total,
            len(report.failed),
        )
        return report

    def with_epd(self, element: BuildingElement) -> BuildingElement:
        """Return *element* with an EPD attached when it lacks one.

        Uses the first EPD found on the element's materials, then the
        library match for the first material that has one.
        """
        if element.epd is not None:
            return element

        materials = material_composition(element).materials
        for material in materials:
            epds = material_epds(material)
            if epds:
                return element.model_copy(update={"epd": epds[0]})

        if self.library is not None:
            for material in materials:
                epd = self.library.find_for_material(material.name)
                if epd is not None:
                    logger.debug(
                        "Attached library EPD '%s' to %s via material '%s'",
                        epd.name, element.global_id, material.name,
                    )
                    return element.model_copy(update={"epd": epd})

        return element
