"""Evaluate the EPD metrics of a building element.

Usage::

    from aeclca.compute import evaluate_per_object

    result = evaluate_per_object(element)          # Global Warming Potential
    result.value, result.ok, result.diagnostics

The element's EPD declares a quantity basis (Mass, Volume or Area).  The
matching quantity is resolved from the element's geometry, falling back
to the named ``"Area"`` / ``"Volume"`` properties, and multiplied by the
EPD factor for the requested field.

``evaluate_by_area``, ``evaluate_by_volume`` and ``evaluate_by_mass`` can
be called directly when the quantity is already known; each one checks
the EPD basis itself.
"""

from __future__ import annotations

import logging

from aeclca.config import AREA_PROPERTY, VOLUME_PROPERTY
from aeclca.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    Evaluation,
    failed,
    record_error,
    record_warning,
)
from aeclca.models.element import BuildingElement
from aeclca.models.epd import EnvironmentalProductDeclarationField, QuantityType
from aeclca.query.geometry import (
    ElementQuantityProvider,
    QuantityProvider,
    QueryResult,
    QueryStatus,
    to_number,
)
from aeclca.query.metrics import get_evaluation_value

logger = logging.getLogger(__name__)

DEFAULT_FIELD = EnvironmentalProductDeclarationField.GLOBAL_WARMING_POTENTIAL

_DEFAULT_PROVIDER = ElementQuantityProvider()


def evaluate_per_object(
    element: BuildingElement | None,
    field: EnvironmentalProductDeclarationField = DEFAULT_FIELD,
    provider: QuantityProvider | None = None,
) -> Evaluation:
    """Evaluate *field* for *element* using the basis its EPD declares.

    Parameters
    ----------
    element:
        The element to evaluate.  Its ``epd`` supplies the factors and,
        for Mass-based EPDs, the density.
    field:
        Impact category to evaluate.
    provider:
        Quantity source.  Defaults to reading the element model.

    Returns
    -------
    Evaluation
        Value 0.0 with an error diagnostic when anything is missing.
    """
    if element is None:
        return failed(
            DiagnosticKind.MISSING_INPUT,
            "No element was provided, so no EPD metric can be evaluated.",
        )

    epd = element.epd
    element_id = element.global_id
    if epd is None:
        return failed(
            DiagnosticKind.MISSING_EPD_DATA,
            f"Element {element_id} carries no EPD data to evaluate.",
            element_id,
        )

    provider = provider or _DEFAULT_PROVIDER
    field = EnvironmentalProductDeclarationField(field)
    diagnostics: list[Diagnostic] = []
    basis = epd.quantity_type

    if basis == QuantityType.AREA:
        area = _resolve_area(element, provider, diagnostics)
        if area is None:
            return Evaluation(0.0, diagnostics)
        result = evaluate_by_area(element, field, area)

    elif basis == QuantityType.VOLUME:
        volume = _resolve_volume(element, provider, diagnostics)
        if volume is None:
            return Evaluation(0.0, diagnostics)
        result = evaluate_by_volume(element, field, volume)

    elif basis == QuantityType.MASS:
        volume = _resolve_volume(element, provider, diagnostics)
        if volume is None:
            return Evaluation(0.0, diagnostics)
        density = epd.density
        if density is None or density <= 0:
            return failed(
                DiagnosticKind.MISSING_EPD_DATA,
                f"EPD '{epd.name}' is Mass-based but declares no valid density; "
                "a density in kg/m3 is required to derive mass from volume.",
                element_id,
                diagnostics,
            )
        result = evaluate_by_mass(element, field, volume * density)

    else:
        return failed(
            DiagnosticKind.UNSUPPORTED_BASIS,
            f"EPD '{epd.name}' declares a {basis.value} unit, which is not supported. "
            "Only Mass, Volume and Area based EPDs can be evaluated.",
            element_id,
        )

    result.diagnostics = diagnostics + result.diagnostics
    return result


def evaluate_by_mass(
    element: BuildingElement | None,
    field: EnvironmentalProductDeclarationField = DEFAULT_FIELD,
    mass: float = 0.0,
) -> Evaluation:
    """Evaluate *field* for a known mass in kg."""
    return _evaluate_by(element, field, mass, QuantityType.MASS)


def evaluate_by_volume(
    element: BuildingElement | None,
    field: EnvironmentalProductDeclarationField = DEFAULT_FIELD,
    volume: float = 0.0,
) -> Evaluation:
    """Evaluate *field* for a known volume in m3."""
    return _evaluate_by(element, field, volume, QuantityType.VOLUME)


def evaluate_by_area(
    element: BuildingElement | None,
    field: EnvironmentalProductDeclarationField = DEFAULT_FIELD,
    area: float = 0.0,
) -> Evaluation:
    """Evaluate *field* for a known area in m2."""
    return _evaluate_by(element, field, area, QuantityType.AREA)


def _evaluate_by(
    element: BuildingElement | None,
    field: EnvironmentalProductDeclarationField,
    quantity: float,
    basis: QuantityType,
) -> Evaluation:
    if element is None:
        return failed(
            DiagnosticKind.MISSING_INPUT,
            f"No element was provided for the {basis.value}-based evaluation.",
        )

    element_id = element.global_id
    epd = element.epd
    if epd is None:
        return failed(
            DiagnosticKind.MISSING_EPD_DATA,
            f"Element {element_id} carries no EPD data to evaluate.",
            element_id,
        )

    if epd.quantity_type != basis:
        return failed(
            DiagnosticKind.BASIS_MISMATCH,
            f"EPD '{epd.name}' declares a {epd.quantity_type.value} unit, not {basis.value}. "
            f"Supply a {basis.value}-based EPD or use the matching evaluation.",
            element_id,
        )

    field = EnvironmentalProductDeclarationField(field)
    factor = get_evaluation_value(epd, field)
    if factor is None:
        return failed(
            DiagnosticKind.MISSING_EPD_DATA,
            f"EPD '{epd.name}' does not declare a value for {field.value}.",
            element_id,
        )

    return Evaluation(
        value=quantity * factor,
        quantity=quantity,
        quantity_type=basis.value,
    )


# ---------------------------------------------------------------------------
# Quantity resolution
# ---------------------------------------------------------------------------

def _resolve_area(
    element: BuildingElement,
    provider: QuantityProvider,
    diagnostics: list[Diagnostic],
) -> float | None:
    try:
        result = provider.area(element)
    except Exception:
        logger.debug("Area query failed for %s", element.global_id, exc_info=True)
        result = QueryResult.unsupported()

    if result.status == QueryStatus.UNSUPPORTED:
        return _property_fallback(element, provider, AREA_PROPERTY, "planar", diagnostics)

    if result.status == QueryStatus.ZERO_VALUE or result.value <= 0:
        record_error(
            diagnostics,
            DiagnosticKind.INVALID_QUANTITY_VALUE,
            f"Element {element.global_id} has an invalid area of {result.value}. "
            "Area must be a positive value in m2.",
            element.global_id,
        )
        return None
    return result.value


def _resolve_volume(
    element: BuildingElement,
    provider: QuantityProvider,
    diagnostics: list[Diagnostic],
) -> float | None:
    try:
        result = provider.solid_volume(element)
    except Exception:
        logger.debug(
            "Solid volume query failed for %s", element.global_id, exc_info=True
        )
        result = QueryResult.unsupported()

    if result.status == QueryStatus.UNSUPPORTED:
        return _property_fallback(element, provider, VOLUME_PROPERTY, "solid", diagnostics)

    if result.status == QueryStatus.ZERO_VALUE or result.value == 0:
        record_error(
            diagnostics,
            DiagnosticKind.INVALID_QUANTITY_VALUE,
            f"Element {element.global_id} has a solid volume of zero. "
            "The EPD requires a volume-derived quantity, so the element must have a volume.",
            element.global_id,
        )
        return None
    return result.value


def _property_fallback(
    element: BuildingElement,
    provider: QuantityProvider,
    name: str,
    shape: str,
    diagnostics: list[Diagnostic],
) -> float | None:
    value = to_number(provider.property_value(element, name))
    if value is None:
        record_error(
            diagnostics,
            DiagnosticKind.UNRESOLVABLE_QUANTITY,
            f"No {name.lower()} can be resolved for element {element.global_id}: "
            f"it is not a {shape} element and has no numeric '{name}' property.",
            element.global_id,
        )
        return None

    record_warning(
        diagnostics,
        DiagnosticKind.PROPERTY_FALLBACK,
        f"Element {element.global_id} is not a {shape} element. "
        f"Its value is calculated from the '{name}' property value of {value}; "
        "confirm this value is accurate.",
        element.global_id,
    )
    return value
