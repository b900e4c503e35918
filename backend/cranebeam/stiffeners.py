"""Transverse web stiffener sizing (EN 1993-1-5).

1. Web slenderness h_w/t_w against the shear buckling limit 72·ε/η (§5.1)
2. Spacing from the plastic shear utilisation, bounded by 0.5 ≤ a/h_w ≤ 3
3. Plate size and the §9.3 minimum second moment of area
4. Layout along the span and total added weight
"""

from __future__ import annotations

import logging
import math

from .checks import KG_CM2_TO_MPA, KGF_TO_N, epsilon
from .loads import STEEL_DENSITY, support_shear
from .results import StiffenerRecommendation

logger = logging.getLogger(__name__)

ETA = 1.2        # EN 1993-1-5 §5.1(2)
GAMMA_M1 = 1.1
MAX_STIFFENERS = 500

MIN_PLATE_WIDTH = 80.0      # mm
MIN_PLATE_THICKNESS = 8.0   # mm


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _round_to_10(value: float) -> float:
    return _round_half_up(value / 10) * 10


def size_stiffeners(
    web_height: float,
    web_thickness: float,
    sigma_yield: float,
    P: float,
    q: float,
    span_cm: float,
) -> tuple[StiffenerRecommendation, list[str]]:
    """Recommend web stiffeners for one web.

    ``web_height`` and ``web_thickness`` in mm, ``sigma_yield`` in kg/cm²,
    ``P`` in kg, ``q`` in kg/cm. Returns the recommendation and any
    non-fatal warnings.
    """
    warnings: list[str] = []
    eps = epsilon(sigma_yield)
    h_w = max(web_height, 0.0)
    t_w = web_thickness

    if h_w <= 0 or t_w <= 0:
        msg = "Web height or thickness is not positive; stiffener sizing skipped."
        logger.warning(msg)
        warnings.append(msg)
        return StiffenerRecommendation(effective_web_height=h_w, epsilon=eps), warnings

    ratio = h_w / t_w
    limit = 72 * eps / ETA
    if not (math.isfinite(ratio) and ratio > limit):
        return StiffenerRecommendation(
            effective_web_height=h_w,
            epsilon=eps,
            slenderness_ratio=ratio,
            slenderness_limit=limit,
        ), warnings

    # ── Spacing ──────────────────────────────────────────────────────────
    fy = sigma_yield * KG_CM2_TO_MPA
    V_Ed = support_shear(P, q, span_cm) * KGF_TO_N  # N
    spacing = 0.0
    if fy > 0 and V_Ed > 0:
        V_pl = h_w * t_w * fy / (math.sqrt(3) * GAMMA_M1)
        spacing = V_pl / V_Ed * h_w
    if not math.isfinite(spacing) or spacing <= 0:
        spacing = h_w
    spacing = max(0.5 * h_w, min(spacing, 3 * h_w))
    spacing = max(10.0, _round_to_10(spacing))

    # ── Plate ────────────────────────────────────────────────────────────
    width = _round_to_10(max(0.1 * h_w, MIN_PLATE_WIDTH))
    raw_t = max(0.6 * math.sqrt(max(fy, 1.0) / 235) * t_w, MIN_PLATE_THICKNESS)
    thickness = max(MIN_PLATE_THICKNESS, _round_half_up(raw_t))
    provided_inertia = width * thickness**3 / 12
    required_inertia = h_w**3 * t_w / (10.5 * spacing)
    if provided_inertia < required_inertia:
        # Reported only; the plate is not enlarged automatically
        msg = (
            f"Stiffener inertia {provided_inertia:.0f} mm⁴ is below the "
            f"EN 1993-1-5 §9.3 minimum {required_inertia:.0f} mm⁴."
        )
        logger.warning(msg)
        warnings.append(msg)

    span_mm = span_cm * 10
    if spacing >= span_mm:
        return StiffenerRecommendation(
            required=False,
            effective_web_height=h_w,
            epsilon=eps,
            slenderness_ratio=ratio,
            slenderness_limit=limit,
            spacing=span_mm,
            width=width,
            thickness=thickness,
            required_inertia=required_inertia,
            provided_inertia=provided_inertia,
        ), warnings

    # ── Layout ───────────────────────────────────────────────────────────
    spacing_cm = spacing / 10
    positions: list[float] = []
    k = 1
    while k * spacing_cm < span_cm and len(positions) < MAX_STIFFENERS:
        positions.append(round(k * spacing_cm, 2))
        k += 1

    single_weight = h_w * width * thickness * STEEL_DENSITY / 1e9
    return StiffenerRecommendation(
        required=True,
        effective_web_height=h_w,
        epsilon=eps,
        slenderness_ratio=ratio,
        slenderness_limit=limit,
        spacing=spacing,
        count=len(positions),
        width=width,
        thickness=thickness,
        required_inertia=required_inertia,
        provided_inertia=provided_inertia,
        positions=tuple(positions),
        total_weight=len(positions) * single_weight,
    ), warnings
