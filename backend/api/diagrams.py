"""Compute force diagram arrays from CalculationResults."""

from __future__ import annotations

from cranebeam import BeamInputs, CalculationResults, generate_diagram_data

from .schemas import DiagramOutput


def compute_diagrams(
    inputs: BeamInputs,
    results: CalculationResults,
    num_points: int = 101,
) -> DiagramOutput:
    """Compute shear and moment arrays along the span."""
    points = generate_diagram_data(inputs, results, max(num_points, 2))
    return DiagramOutput(
        beam_type=results.beam_type.value,
        x=[round(p.x, 6) for p in points],
        shear=[round(p.shear, 6) for p in points],
        moment=[round(p.moment, 6) for p in points],
    )
