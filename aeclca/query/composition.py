"""Material composition of a building element."""

from __future__ import annotations

from aeclca.models.element import BuildingElement, MaterialComposition


def material_composition(element: BuildingElement | None) -> MaterialComposition:
    """Return the materials of *element* with normalised ratios.

    Ratios come from layer fractions when every layer declares one, then
    from layer thicknesses, and are split evenly otherwise.
    """
    if element is None or not element.materials:
        return MaterialComposition()

    layers = element.materials
    materials = [layer.material for layer in layers]

    weights: list[float]
    if all(layer.fraction is not None for layer in layers):
        weights = [float(layer.fraction) for layer in layers]  # type: ignore[arg-type]
    elif all(layer.thickness is not None for layer in layers):
        weights = [float(layer.thickness) for layer in layers]  # type: ignore[arg-type]
    else:
        weights = [1.0] * len(layers)

    total = sum(weights)
    if total <= 0:
        weights = [1.0] * len(layers)
        total = float(len(layers))

    return MaterialComposition(
        materials=materials,
        ratios=[w / total for w in weights],
    )
