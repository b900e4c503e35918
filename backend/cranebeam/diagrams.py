"""Shear and bending moment stations along the span."""

from __future__ import annotations

from .inputs import BeamInputs
from .results import CalculationResults, DiagramPoint


def generate_diagram_data(
    inputs: BeamInputs,
    results: CalculationResults,
    num_points: int = 101,
) -> list[DiagramPoint]:
    """Evaluate V(x) and M(x) at evenly spaced stations.

    Moments are scaled so that the midspan value matches the amplified
    design moment ``M_x``.
    """
    L = inputs.L
    P = results.P
    q = results.q
    R = P / 2 + q * L / 2

    M_simple = P * L / 4 + q * L**2 / 8
    scale = results.M_x / M_simple if M_simple > 0 else 1.0

    data: list[DiagramPoint] = []
    for k in range(num_points):
        x = L / (num_points - 1) * k if num_points > 1 else 0.0
        if x < L / 2:
            V = R - q * x
        else:
            V = R - q * x - P
        M = R * x - q * x**2 / 2
        if x > L / 2:
            M -= P * (x - L / 2)
        data.append(DiagramPoint(x=x, shear=V, moment=M * scale))

    # Remove round-off at the far support
    if num_points > 1:
        last = data[-1]
        M_end = R * last.x - q * last.x**2 / 2 - P * (last.x - L / 2)
        data[-1] = DiagramPoint(
            x=last.x,
            shear=last.shear,
            moment=0.0 if abs(M_end) < 1e-9 else M_end * scale,
        )

    return data
