"""Demo: default single box girder, double girder and V-beam checks."""

import logging

from cranebeam import (
    DEFAULT_SINGLE_GIRDER,
    DEFAULT_V_BEAM,
    BeamType,
    DoubleBeamInputs,
    MaterialType,
    assess_geometric_balance,
    calculate_beam_properties,
    calculate_double_beam_properties,
    calculate_v_beam_properties,
    generate_diagram_data,
)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    # ── Single girder ─────────────────────────────────────────────
    beam = DEFAULT_SINGLE_GIRDER
    results = calculate_beam_properties(beam, BeamType.SINGLE_GIRDER)
    results.print_summary()

    points = generate_diagram_data(beam, results)
    mid = points[len(points) // 2]
    print(f"\n  Midspan  x = {mid.x:.1f} cm   V = {mid.shear:.1f} kg   "
          f"M = {mid.moment:.0f} kg·cm")

    print("\n  Geometric balance")
    for item in assess_geometric_balance(beam, BeamType.SINGLE_GIRDER):
        print(f"    {item.key:<3} {item.actual:>8.1f} cm  "
              f"[{item.minimum:.1f} – {item.maximum:.1f}]  "
              f"{item.status.value.upper():<4}  {item.adjustment_pct:+.1f}%")

    # ── Double girder, SS400 ──────────────────────────────────────
    double = DoubleBeamInputs(
        beam=beam.with_material(MaterialType.SS400),
        girder_spacing=2000,
        q_transversal=50,
        rail_eccentricity=20,
    )
    results = calculate_double_beam_properties(double)
    results.print_summary()
    t = results.torsion
    print(f"  Torsion  T = {t.torque:.0f} kg·cm   It = {t.torsion_constant:.0f} cm⁴   "
          f"τ = {t.shear_stress:.2f} kg/cm²")

    # ── V-beam ────────────────────────────────────────────────────
    results = calculate_v_beam_properties(DEFAULT_V_BEAM)
    results.print_summary()


if __name__ == "__main__":
    main()
