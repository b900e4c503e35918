"""Geometric balance: proportion checks of the section against the span.

Advisory only; these do not enter the structural verification.
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import build_cross_section_geometry
from .inputs import BeamInputs, BeamType, VBeamInputs
from .results import CheckStatus

MM_TO_CM = 0.1


@dataclass(frozen=True)
class BalanceItem:
    key: str
    actual: float          # cm
    minimum: float         # cm
    maximum: float         # cm
    status: CheckStatus
    adjustment_pct: float  # >0 increase, <0 decrease, 0 when met


def assess(key: str, actual: float, ref: float, min_ratio: float, max_ratio: float) -> BalanceItem:
    lo = min_ratio * ref
    hi = max_ratio * ref
    if actual == 0:
        return BalanceItem(key, actual, lo, hi, CheckStatus.FAIL, 100.0)
    if 0 < actual < lo:
        pct = (lo - actual) / actual * 100
        return BalanceItem(key, actual, lo, hi, CheckStatus.FAIL, pct)
    if actual > hi and actual > 0:
        pct = (actual - hi) / actual * 100
        return BalanceItem(key, actual, lo, hi, CheckStatus.FAIL, -pct)
    return BalanceItem(key, actual, lo, hi, CheckStatus.PASS, 0.0)


def assess_geometric_balance(
    inputs: BeamInputs | VBeamInputs,
    beam_type: BeamType | str,
    total_height_mm: float | None = None,
) -> list[BalanceItem]:
    """Proportion checks for a beam.

    ``total_height_mm`` overrides the section height; V-beams default to
    the height of the drawn section.
    """
    beam_type = BeamType(beam_type)

    if isinstance(inputs, VBeamInputs):
        L = inputs.beam.L
        if total_height_mm is None:
            total_height_mm = build_cross_section_geometry(inputs, BeamType.V_BEAM).bounds.max_y
        H = total_height_mm * MM_TO_CM
        return [
            assess("H", H, L, 1 / 16, 1 / 12),
            assess("b1", inputs.b1 * MM_TO_CM, H, 1 / 3, 1 / 2),
            assess("h1", inputs.h1 * MM_TO_CM, H, 1 / 2, 2 / 3),
            assess("h3", inputs.h3 * MM_TO_CM, H, 1 / 4, 1 / 3),
            assess("A", inputs.A * MM_TO_CM, L, 1 / 8, 1 / 6),
        ]

    L = inputs.L
    h = total_height_mm if total_height_mm is not None else inputs.h
    H = h * MM_TO_CM
    items = [
        assess("H", H, L, 1 / 16, 1 / 12),
        assess("b", inputs.b * MM_TO_CM, H, 1 / 3, 1 / 2),
    ]
    if inputs.A > 0:
        items.append(assess("A", inputs.A, L, 1 / 8, 1 / 6))
    return items
