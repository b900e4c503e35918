"""Stress, deflection and local buckling verification.

Plate slenderness limits follow EN 1993-1-1 Table 5.2 (Class 3):
  - outstand flange in compression:       c/t <= 14·ε
  - internal compression part in bending: c/t <= 42·ε
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .inputs import BeamType
from .results import BucklingCheck

KG_CM2_TO_MPA = 0.0980665
KGF_TO_N = 9.80665

OUTSTAND_LIMIT = 14.0
INTERNAL_LIMIT = 42.0

# Allowable deflection as span / ratio, per beam family
_DEFLECTION_RATIO: dict[BeamType, float] = {
    BeamType.SINGLE_GIRDER: 1000.0,
    BeamType.DOUBLE_GIRDER: 1000.0,
    BeamType.I_BEAM: 800.0,
    BeamType.V_BEAM: 850.0,
}


@dataclass(frozen=True)
class StressState:
    sigma_u: float
    sigma_compression: float
    sigma_tension: float


def epsilon(sigma_yield: float) -> float:
    """ε = √(235 / fy), fy in MPa from a yield stress in kg/cm²."""
    fy = sigma_yield * KG_CM2_TO_MPA
    return math.sqrt(235.0 / fy) if fy > 0 else 0.0


def safety_factor(capacity: float, demand: float) -> float:
    """capacity / demand; infinite when there is no demand."""
    if demand == 0:
        return math.inf
    return capacity / demand


def _ratio(num: float, den: float) -> float:
    return num / den if den != 0 else 0.0


def stresses(
    M_x: float,
    M_y: float,
    Wx: float,
    Wy: float,
    Jx: float,
    H: float,
    Yc: float,
    load_on_bottom_flange: bool = False,
) -> StressState:
    """Combined stress and extreme fibre stresses.

    With the load hanging on the bottom flange (V-beam) the fibre that is
    reported as compressed is the bottom one.
    """
    sigma_u = _ratio(M_x, Wx) + _ratio(M_y, Wy)
    top = _ratio(M_x * (H - Yc), Jx)
    bottom = _ratio(M_x * Yc, Jx)
    if load_on_bottom_flange:
        return StressState(sigma_u, sigma_compression=bottom, sigma_tension=top)
    return StressState(sigma_u, sigma_compression=top, sigma_tension=bottom)


def midspan_deflection(q: float, P: float, span_cm: float, E: float, Jx: float) -> float:
    """Uniform load plus midspan point load on a simple span (cm)."""
    EJ = E * Jx
    if EJ == 0:
        return 0.0
    L = span_cm
    return 5 * q * L**4 / (384 * EJ) + P * L**3 / (48 * EJ)


def allowable_deflection(span_cm: float, beam_type: BeamType) -> float:
    return span_cm / _DEFLECTION_RATIO[beam_type]


def local_buckling(
    width: float,
    thickness: float,
    eps: float,
    element: str,
) -> tuple[BucklingCheck, float]:
    """Class 3 check of one plate; returns the detail and K_buckling."""
    limit = (OUTSTAND_LIMIT if element == "outstand" else INTERNAL_LIMIT) * eps
    ratio = width / thickness if width > 0 and thickness > 0 else 0.0
    k = limit / ratio if ratio > 0 else math.inf
    return BucklingCheck(element, width, thickness, ratio, limit), k
