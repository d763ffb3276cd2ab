"""Read property and quantity sets from IFC entities."""

from __future__ import annotations

import logging
from typing import Any

import ifcopenshell
import ifcopenshell.util.element

logger = logging.getLogger(__name__)


def extract_psets(
    entity: ifcopenshell.entity_instance,
    qtos_only: bool = False,
) -> dict[str, dict[str, Any]]:
    """Return property sets (or quantity sets) for *entity*, keyed by set name.

    Works for elements and for materials.  Entity references are converted
    to strings and the internal ``id`` key is dropped.
    """
    try:
        raw = ifcopenshell.util.element.get_psets(entity, qtos_only=qtos_only)
    except Exception:
        logger.debug("Pset extraction failed for %s", entity, exc_info=True)
        return {}

    cleaned: dict[str, dict[str, Any]] = {}
    for pset_name, props in raw.items():
        clean_props: dict[str, Any] = {}
        for k, v in props.items():
            if k == "id":
                continue
            if isinstance(v, ifcopenshell.entity_instance):
                clean_props[k] = str(v)
            else:
                clean_props[k] = v
        cleaned[pset_name] = clean_props
    return cleaned


def named_properties(psets: dict[str, dict[str, Any]]) -> dict[str, Any]:
    """Flatten sets into bare property names; the first occurrence wins."""
    flat: dict[str, Any] = {}
    for props in psets.values():
        for k, v in props.items():
            flat.setdefault(k, v)
    return flat


def first_quantity(
    qtos: dict[str, dict[str, Any]],
    names: tuple[str, ...],
) -> float | None:
    """Return the first numeric quantity among *names* found in any set."""
    for name in names:
        for props in qtos.values():
            value = props.get(name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return float(value)
    return None
