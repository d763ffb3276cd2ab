"""Geometry queries used to resolve the quantity an EPD is evaluated against.

Queries return a QueryResult instead of raising, so the resolver can
switch on the outcome:

* ``OK``: a usable value
* ``UNSUPPORTED``: the element cannot answer this query (fall back to
  named properties)
* ``ZERO_VALUE``: the element answered with exactly zero
"""

from __future__ import annotations

import abc
import logging
import math
from enum import Enum
from typing import Any

from aeclca.models.element import BuildingElement

logger = logging.getLogger(__name__)


class QueryStatus(str, Enum):
    OK = "ok"
    UNSUPPORTED = "unsupported"
    ZERO_VALUE = "zero_value"


class QueryResult:
    """Outcome of a structured geometry query."""

    def __init__(self, status: QueryStatus, value: float = 0.0) -> None:
        self.status = status
        self.value = value

    @classmethod
    def ok(cls, value: float) -> QueryResult:
        return cls(QueryStatus.OK, value)

    @classmethod
    def unsupported(cls) -> QueryResult:
        return cls(QueryStatus.UNSUPPORTED)

    @classmethod
    def from_value(cls, value: float | None) -> QueryResult:
        """Classify a raw value: None is unsupported, 0.0 is a zero value."""
        if value is None:
            return cls.unsupported()
        if value == 0:
            return cls(QueryStatus.ZERO_VALUE)
        return cls.ok(float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryResult):
            return NotImplemented
        return self.status == other.status and self.value == other.value

    def __repr__(self) -> str:
        return f"QueryResult({self.status.value!r}, {self.value!r})"


class QuantityProvider(abc.ABC):
    """Source of physical quantities for building elements."""

    @abc.abstractmethod
    def area(self, element: BuildingElement) -> QueryResult:
        """Planar area in m2; UNSUPPORTED for non-planar elements."""

    @abc.abstractmethod
    def solid_volume(self, element: BuildingElement) -> QueryResult:
        """Solid volume in m3; UNSUPPORTED when no solid is available."""

    @abc.abstractmethod
    def property_value(self, element: BuildingElement, name: str) -> Any:
        """Raw named property value, or None."""


class ElementQuantityProvider(QuantityProvider):
    """Reads quantities straight from the element model.  Always available."""

    def area(self, element: BuildingElement) -> QueryResult:
        return QueryResult.from_value(element.geometry.area)

    def solid_volume(self, element: BuildingElement) -> QueryResult:
        return QueryResult.from_value(element.geometry.volume)

    def property_value(self, element: BuildingElement, name: str) -> Any:
        return element.properties.get(name)


def to_number(value: Any) -> float | None:
    """Convert a named property value to float, or None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Property value %r is not numeric", value)
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number
