"""Typed input records for crane bridge beam calculations.

Units follow the workshop drawings the calculator is used with:
- Plate dimensions: mm
- Span and end-carriage distances: cm
- Loads: kgf
- Stresses and elastic modulus: kg/cm²
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .material import MaterialType, get_material


class BeamType(str, Enum):
    """Beam family; selects both the geometry and the formula variant."""

    SINGLE_GIRDER = "single-girder"
    I_BEAM = "i-beam"
    DOUBLE_GIRDER = "double-girder"
    V_BEAM = "v-beam"


@dataclass(frozen=True)
class BeamInputs:
    # Geometry (mm)
    b: float = 0.0        # bottom flange width
    h: float = 0.0        # total section height
    t1: float = 0.0       # bottom flange thickness
    t2: float = 0.0       # top flange thickness
    t3: float = 0.0       # web thickness
    b1: float = 0.0       # clear spacing between webs
    b3: float | None = None  # top flange width, defaults to b

    # Span and end carriage (cm)
    L: float = 0.0
    A: float = 0.0        # wheel centre distance, advisory only
    C: float = 0.0        # inclined segment length, advisory only

    # Loads (kgf)
    P_hoist: float = 0.0
    P_trolley: float = 0.0

    # Material
    sigma_allow: float = 0.0  # kg/cm²
    sigma_yield: float = 0.0  # kg/cm²
    E: float = 0.0            # kg/cm²
    nu: float = 0.0
    material: MaterialType = MaterialType.CUSTOM

    q: float = 0.0  # kg/cm, distributed load override

    @property
    def top_width(self) -> float:
        return self.b if self.b3 is None else self.b3

    def with_material(self, material: MaterialType | str) -> BeamInputs:
        """Return a copy with the four material fields taken from the library.

        ``CUSTOM`` keeps the entered values and only records the selector.
        """
        material = MaterialType(material.upper() if isinstance(material, str) else material)
        if material is MaterialType.CUSTOM:
            return replace(self, material=material)
        props = get_material(material)
        return replace(
            self,
            material=material,
            sigma_allow=props.sigma_allow,
            sigma_yield=props.sigma_yield,
            E=props.E,
            nu=props.nu,
        )


@dataclass(frozen=True)
class DoubleBeamInputs:
    """Two identical girders sharing the trolley and a transversal load."""

    beam: BeamInputs
    girder_spacing: float = 0.0     # mm, centre to centre
    q_transversal: float = 0.0      # kg/m, cross-member load on both girders
    rail_eccentricity: float = 0.0  # mm, rail offset from girder axis


@dataclass(frozen=True)
class VBeamInputs:
    """V-section beam. Span, loads and material come from ``beam``."""

    beam: BeamInputs
    b1: float = 0.0   # mm, bottom flange width
    t1: float = 0.0   # mm, bottom flange thickness
    t2: float = 0.0   # mm, central web (body) thickness
    h1: float = 0.0   # mm, central web height
    t3: float = 0.0   # mm, inclined web thickness
    h3: float = 0.0   # mm, inclined web length
    t4: float = 0.0   # mm, roof plate thickness
    A: float = 0.0    # mm, end-carriage wheel centre distance
    web_angle_deg: float = 30.0   # from vertical
    roof_angle_deg: float = 10.0  # from horizontal


# ── Reference inputs (drawing defaults) ─────────────────────────────────

DEFAULT_SINGLE_GIRDER = BeamInputs(
    b=600, h=900, t1=30, t2=30, t3=15, b1=400, b3=600,
    L=800, P_hoist=15000, P_trolley=5000,
    sigma_allow=1650, sigma_yield=2450, E=2.1e6, nu=0.3,
    q=20,
)

DEFAULT_V_BEAM = VBeamInputs(
    beam=BeamInputs(
        L=1200, P_hoist=40000, P_trolley=12000,
        sigma_allow=1650, sigma_yield=2450, E=2.1e6, nu=0.3,
        material=MaterialType.SS400,
    ),
    b1=170, t1=16, t2=12, h1=235, t3=6, h3=1000, t4=10, A=150,
)
