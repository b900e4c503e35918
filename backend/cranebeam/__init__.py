"""cranebeam — overhead crane bridge beam section analysis and verification."""

from .balance import BalanceItem, assess_geometric_balance
from .calculator import (
    calculate_beam_properties,
    calculate_double_beam_properties,
    calculate_v_beam_properties,
)
from .diagrams import generate_diagram_data
from .geometry import CrossSectionGeometry, CrossSectionPolygon, Point, build_cross_section_geometry
from .inputs import (
    DEFAULT_SINGLE_GIRDER,
    DEFAULT_V_BEAM,
    BeamInputs,
    BeamType,
    DoubleBeamInputs,
    VBeamInputs,
)
from .material import MATERIAL_LIBRARY, Material, MaterialType, get_material, list_materials
from .results import (
    BucklingCheck,
    CalculationResults,
    CheckStatus,
    DiagramPoint,
    StiffenerRecommendation,
    TorsionResult,
)
from .section_properties import mesh_section_properties

__all__ = [
    "BalanceItem",
    "BeamInputs",
    "BeamType",
    "BucklingCheck",
    "CalculationResults",
    "CheckStatus",
    "CrossSectionGeometry",
    "CrossSectionPolygon",
    "DEFAULT_SINGLE_GIRDER",
    "DEFAULT_V_BEAM",
    "DiagramPoint",
    "DoubleBeamInputs",
    "MATERIAL_LIBRARY",
    "Material",
    "MaterialType",
    "Point",
    "StiffenerRecommendation",
    "TorsionResult",
    "VBeamInputs",
    "assess_geometric_balance",
    "build_cross_section_geometry",
    "calculate_beam_properties",
    "calculate_double_beam_properties",
    "calculate_v_beam_properties",
    "generate_diagram_data",
    "get_material",
    "list_materials",
    "mesh_section_properties",
]
