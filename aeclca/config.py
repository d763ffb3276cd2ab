"""Global configuration: defaults, property names, IFC lookup tables."""

# Named properties probed when structured geometry is unavailable
AREA_PROPERTY = "Area"
VOLUME_PROPERTY = "Volume"

# IFC classes treated as building elements by the IFC adapter.
# Using the base class captures all subtypes (IfcWall, IfcDoor, IfcSlab, etc.)
ELEMENT_BASE_CLASS = "IfcBuildingElement"

# Property set carrying EPD indicators (IFC4 standard pset)
EPD_PSET = "Pset_EnvironmentalImpactIndicators"

# Material density lives here (kg/m3)
MATERIAL_PSET = "Pset_MaterialCommon"
DENSITY_PROPERTY = "MassDensity"

# Quantity names tried in order when reading an element's planar area.
# Classes not listed here are not treated as planar.
AREA_QUANTITIES: dict[str, tuple[str, ...]] = {
    "IfcWall": ("NetSideArea", "GrossSideArea"),
    "IfcWallStandardCase": ("NetSideArea", "GrossSideArea"),
    "IfcCurtainWall": ("NetSideArea", "GrossSideArea"),
    "IfcSlab": ("NetArea", "GrossArea"),
    "IfcRoof": ("NetArea", "GrossArea"),
    "IfcCovering": ("NetArea", "GrossArea"),
    "IfcPlate": ("NetArea", "GrossArea"),
    "IfcDoor": ("Area",),
    "IfcWindow": ("Area",),
}

VOLUME_QUANTITIES: tuple[str, ...] = ("NetVolume", "GrossVolume")

# Declared-unit labels found in EPD property sets -> QuantityType value
DECLARED_UNITS: dict[str, str] = {
    "kg": "Mass",
    "m3": "Volume",
    "m³": "Volume",
    "m2": "Area",
    "m²": "Area",
    "m": "Length",
    "pcs": "Item",
    "unit": "Item",
}

# IFC indicator property -> EnvironmentalProductDeclarationField value
EPD_INDICATORS: dict[str, str] = {
    "ClimateChangePerUnit": "GlobalWarmingPotential",
    "AtmosphericAcidificationPerUnit": "AcidificationPotential",
    "EutrophicationPerUnit": "EutrophicationPotential",
    "StratosphericOzoneLayerDestructionPerUnit": "OzoneDepletionPotential",
    "PhotochemicalOzoneFormationPerUnit": "PhotochemicalOzoneCreationPotential",
    "ResourceDepletionPerUnit": "DepletionOfAbioticResourcesElements",
    "NonRenewableEnergyConsumptionPerUnit": "DepletionOfAbioticResourcesFossilFuels",
}
