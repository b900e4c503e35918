"""Loads and bending moments on a simply supported crane girder."""

from __future__ import annotations

from dataclasses import dataclass

STEEL_DENSITY = 7850.0  # kg/m³

# Dynamic/impact and biaxial bending allowances of the crane load model
MAJOR_AXIS_FACTOR = 1.05
POINT_LOAD_FACTOR = 1.25
MINOR_AXIS_FACTOR = 0.05


@dataclass(frozen=True)
class LoadEffects:
    P: float     # kg, total point load at midspan
    q: float     # kg/cm, total distributed load
    M_bt: float  # kg·cm, from the distributed load
    M_vn: float  # kg·cm, from the point load
    M_x: float   # kg·cm, design moment, major axis
    M_y: float   # kg·cm, design moment, minor axis
    self_weight: float  # kg, q·L


def self_weight_per_cm(area_cm2: float) -> float:
    """Steel self-weight in kg/cm for an area in cm²."""
    return area_cm2 * STEEL_DENSITY / 1_000_000


def resolve_loads(
    area_cm2: float,
    span_cm: float,
    P_hoist: float,
    P_trolley: float,
    q_extra: float = 0.0,
) -> LoadEffects:
    """Moments for a midspan point load plus a uniform load.

    ``q_extra`` (kg/cm) is added to the self-weight, e.g. a share of the
    transversal cross-member load on a double girder.
    """
    P = P_hoist + P_trolley
    q = self_weight_per_cm(area_cm2) + q_extra
    L = span_cm

    M_bt = q * L**2 / 8
    M_vn = P * L / 4
    M_x = MAJOR_AXIS_FACTOR * (M_bt + POINT_LOAD_FACTOR * M_vn)
    M_y = MINOR_AXIS_FACTOR * (M_bt + M_vn)

    return LoadEffects(
        P=P, q=q, M_bt=M_bt, M_vn=M_vn, M_x=M_x, M_y=M_y, self_weight=q * L,
    )


def support_shear(P: float, q: float, span_cm: float) -> float:
    """Reaction at either support (kg)."""
    return P / 2 + q * span_cm / 2
