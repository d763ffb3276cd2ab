"""Diagnostics and evaluation results.

Every failure during evaluation is recorded once, where it is detected,
as a Diagnostic on the returned Evaluation.  The value of a failed
evaluation is 0.0; check ``ok`` to tell that apart from a real zero.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class DiagnosticKind(str, Enum):
    MISSING_INPUT = "missing_input"
    MISSING_EPD_DATA = "missing_epd_data"
    BASIS_MISMATCH = "basis_mismatch"
    UNRESOLVABLE_QUANTITY = "unresolvable_quantity"
    INVALID_QUANTITY_VALUE = "invalid_quantity_value"
    UNSUPPORTED_BASIS = "unsupported_basis"
    PROPERTY_FALLBACK = "property_fallback"


class Diagnostic:
    """A single error or warning raised during evaluation."""

    def __init__(
        self,
        kind: DiagnosticKind,
        message: str,
        severity: str = "error",
        element_id: str = "",
    ) -> None:
        self.kind = kind
        self.message = message
        self.severity = severity  # "error" or "warning"
        self.element_id = element_id

    @property
    def is_error(self) -> bool:
        return self.severity == "error"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "severity": self.severity,
            "message": self.message,
            "element_id": self.element_id,
        }

    def __repr__(self) -> str:
        return f"Diagnostic({self.kind.value!r}, {self.severity!r}, {self.message!r})"


class Evaluation:
    """Result of an impact evaluation.

    Parameters
    ----------
    value:
        The computed impact, or 0.0 when the evaluation failed.
    diagnostics:
        Errors and warnings recorded along the way.
    quantity:
        The physical quantity the factor was multiplied by, if one was resolved.
    quantity_type:
        Name of the basis used (``"Mass"``, ``"Volume"``, ``"Area"``).
    """

    def __init__(
        self,
        value: float = 0.0,
        diagnostics: list[Diagnostic] | None = None,
        quantity: float | None = None,
        quantity_type: str = "",
    ) -> None:
        self.value = value
        self.diagnostics = diagnostics or []
        self.quantity = quantity
        self.quantity_type = quantity_type

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if not d.is_error]

    def __float__(self) -> float:
        return float(self.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "ok": self.ok,
            "quantity": self.quantity,
            "quantity_type": self.quantity_type,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def __repr__(self) -> str:
        return f"Evaluation(value={self.value!r}, ok={self.ok})"


def record_error(
    diagnostics: list[Diagnostic],
    kind: DiagnosticKind,
    message: str,
    element_id: str = "",
) -> None:
    """Append an error to *diagnostics* and log it."""
    logger.error(message)
    diagnostics.append(Diagnostic(kind, message, "error", element_id))


def record_warning(
    diagnostics: list[Diagnostic],
    kind: DiagnosticKind,
    message: str,
    element_id: str = "",
) -> None:
    """Append a warning to *diagnostics* and log it."""
    logger.warning(message)
    diagnostics.append(Diagnostic(kind, message, "warning", element_id))


def failed(
    kind: DiagnosticKind,
    message: str,
    element_id: str = "",
    diagnostics: list[Diagnostic] | None = None,
) -> Evaluation:
    """Record an error and return the zero-valued Evaluation carrying it."""
    diagnostics = diagnostics if diagnostics is not None else []
    record_error(diagnostics, kind, message, element_id)
    return Evaluation(0.0, diagnostics)
