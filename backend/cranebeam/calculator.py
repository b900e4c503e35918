"""Crane bridge beam calculation, one entry point per beam family.

Every variant runs the same sequence:
  1. Section properties (closed-form primitives)
  2. Loads and design moments
  3. Stresses and deflection
  4. Safety factors and local buckling
  5. Web stiffeners
"""

from __future__ import annotations

from dataclasses import replace

from .checks import (
    StressState,
    allowable_deflection,
    epsilon,
    local_buckling,
    midspan_deflection,
    safety_factor,
    stresses,
)
from .inputs import BeamInputs, BeamType, DoubleBeamInputs, VBeamInputs
from .loads import LoadEffects, resolve_loads
from .results import (
    BucklingCheck,
    CalculationResults,
    CheckStatus,
    StiffenerRecommendation,
    TorsionResult,
)
from .section_properties import (
    MM_TO_CM,
    SectionProperties,
    girder_section,
    i_beam_section,
    v_beam_section,
)
from .stiffeners import size_stiffeners


def _assemble(
    beam_type: BeamType,
    section: SectionProperties,
    loads: LoadEffects,
    stress: StressState,
    f: float,
    f_allow: float,
    sigma_allow: float,
    buckling: BucklingCheck,
    K_buckling: float,
    stiffener: StiffenerRecommendation,
    torsion: TorsionResult | None = None,
    warnings: list[str] | None = None,
) -> CalculationResults:
    K_sigma = safety_factor(sigma_allow, stress.sigma_u)
    n_f = safety_factor(f_allow, f)
    return CalculationResults(
        beam_type=beam_type,
        F=section.F, Yc=section.Yc, Xc=section.Xc,
        Jx=section.Jx, Jy=section.Jy, Wx=section.Wx, Wy=section.Wy,
        Jx_top=section.Jx_top, Jx_bottom=section.Jx_bottom, Jx_webs=section.Jx_webs,
        Jy_top=section.Jy_top, Jy_bottom=section.Jy_bottom, Jy_webs=section.Jy_webs,
        P=loads.P, M_bt=loads.M_bt, M_vn=loads.M_vn, M_x=loads.M_x, M_y=loads.M_y,
        beam_self_weight=loads.self_weight, q=loads.q,
        sigma_u=stress.sigma_u,
        sigma_compression=stress.sigma_compression,
        sigma_tension=stress.sigma_tension,
        f=f, f_allow=f_allow,
        K_sigma=K_sigma, n_f=n_f, K_buckling=K_buckling,
        stress_check=CheckStatus.of(K_sigma),
        deflection_check=CheckStatus.of(n_f),
        buckling_check=CheckStatus.of(K_buckling),
        buckling=buckling,
        stiffener=stiffener,
        torsion=torsion or TorsionResult(),
        warnings=tuple(warnings or ()),
    )


# ══════════════════════════════════════════════════════════════════════
#  Single girder / rolled I-beam
# ══════════════════════════════════════════════════════════════════════


def calculate_beam_properties(
    inputs: BeamInputs,
    mode: BeamType | str = BeamType.SINGLE_GIRDER,
    q_extra: float = 0.0,
) -> CalculationResults:
    """Single box girder or rolled I-beam.

    Any mode other than ``i-beam`` uses the box girder formulas.
    ``q_extra`` (kg/cm) is added to the self-weight distributed load.
    """
    try:
        mode = BeamType(mode)
    except ValueError:
        mode = BeamType.SINGLE_GIRDER
    if mode is not BeamType.I_BEAM:
        mode = BeamType.SINGLE_GIRDER

    section = i_beam_section(inputs) if mode is BeamType.I_BEAM else girder_section(inputs)
    L = inputs.L

    loads = resolve_loads(section.F, L, inputs.P_hoist, inputs.P_trolley, q_extra)
    stress = stresses(loads.M_x, loads.M_y, section.Wx, section.Wy,
                      section.Jx, section.H, section.Yc)
    f = midspan_deflection(loads.q, loads.P, L, inputs.E, section.Jx)
    f_allow = allowable_deflection(L, mode)

    eps = epsilon(inputs.sigma_yield)
    t_top = inputs.t2 * MM_TO_CM
    if mode is BeamType.I_BEAM:
        # Outstand flange from the web face to the tip
        width = (inputs.b - inputs.t3) / 2 * MM_TO_CM
        buckling, K_buckling = local_buckling(width, t_top, eps, "outstand")
    else:
        # Top flange between the webs
        buckling, K_buckling = local_buckling(inputs.b1 * MM_TO_CM, t_top, eps, "internal")

    h_w = max(inputs.h - inputs.t2 - inputs.t1, 0.0)
    stiffener, warnings = size_stiffeners(
        h_w, inputs.t3, inputs.sigma_yield, loads.P, loads.q, L,
    )

    return _assemble(
        mode, section, loads, stress, f, f_allow, inputs.sigma_allow,
        buckling, K_buckling, stiffener, warnings=warnings,
    )


# ══════════════════════════════════════════════════════════════════════
#  Double girder
# ══════════════════════════════════════════════════════════════════════


def _box_torsion(inputs: BeamInputs, torque: float, eccentricity: float) -> TorsionResult:
    """Bredt torsion of one closed box girder (thin-walled, cm units)."""
    t_bottom = inputs.t1 * MM_TO_CM
    t_top = inputs.t2 * MM_TO_CM
    t_web = inputs.t3 * MM_TO_CM
    b_m = (inputs.b1 + inputs.t3) * MM_TO_CM
    h_m = inputs.h * MM_TO_CM - t_top / 2 - t_bottom / 2

    if b_m <= 0 or h_m <= 0 or min(t_bottom, t_top, t_web) <= 0:
        return TorsionResult(eccentricity=eccentricity, torque=torque)

    A_m = b_m * h_m
    perimeter_over_t = 2 * h_m / t_web + b_m / t_top + b_m / t_bottom
    I_t = 4 * A_m**2 / perimeter_over_t
    tau = abs(torque) / (2 * A_m * min(t_bottom, t_top, t_web))
    return TorsionResult(
        eccentricity=eccentricity,
        torque=torque,
        enclosed_area=A_m,
        torsion_constant=I_t,
        shear_stress=tau,
    )


def calculate_double_beam_properties(inputs: DoubleBeamInputs) -> CalculationResults:
    """Two identical box girders sharing the crab and a transversal load.

    Each girder carries half of the hoist and trolley loads and half of
    the transversal load; section and moment totals are for both girders.
    """
    beam = inputs.beam
    half = replace(beam, P_hoist=beam.P_hoist / 2, P_trolley=beam.P_trolley / 2)
    q_share = inputs.q_transversal / 100 / 2  # kg/m → kg/cm, per girder
    one = calculate_beam_properties(half, BeamType.SINGLE_GIRDER, q_extra=q_share)

    # ── Both girders ─────────────────────────────────────────────────────
    offset = inputs.girder_spacing * MM_TO_CM / 2
    half_width = max(beam.b, beam.top_width) * MM_TO_CM / 2
    F = 2 * one.F
    Jx = 2 * one.Jx
    Wx = 2 * one.Wx
    Jy = 2 * (one.Jy + one.F * offset**2)
    Wy = Jy / (offset + half_width) if offset + half_width > 0 else 0.0
    section = SectionProperties(
        H=beam.h * MM_TO_CM, F=F, Yc=one.Yc, Xc=0.0, Jx=Jx, Jy=Jy, Wx=Wx, Wy=Wy,
        Jx_top=2 * one.Jx_top, Jx_bottom=2 * one.Jx_bottom, Jx_webs=2 * one.Jx_webs,
        Jy_top=2 * one.Jy_top, Jy_bottom=2 * one.Jy_bottom, Jy_webs=2 * one.Jy_webs,
    )
    loads = LoadEffects(
        P=beam.P_hoist + beam.P_trolley,
        q=2 * one.q,
        M_bt=2 * one.M_bt,
        M_vn=2 * one.M_vn,
        M_x=2 * one.M_x,
        M_y=2 * one.M_y,
        self_weight=2 * one.beam_self_weight,
    )
    stress = stresses(loads.M_x, loads.M_y, Wx, Wy, Jx, section.H, section.Yc)

    # Both girders deflect together under their own share
    f = one.f
    f_allow = allowable_deflection(beam.L, BeamType.DOUBLE_GIRDER)

    # The rail sits on the top flange: internal compression plate between webs
    eps = epsilon(beam.sigma_yield)
    buckling, K_buckling = local_buckling(
        beam.b1 * MM_TO_CM, beam.t2 * MM_TO_CM, eps, "internal",
    )

    e = inputs.rail_eccentricity * MM_TO_CM
    torsion = _box_torsion(beam, one.P * e, e)

    return _assemble(
        BeamType.DOUBLE_GIRDER, section, loads, stress, f, f_allow,
        beam.sigma_allow, buckling, K_buckling, one.stiffener,
        torsion=torsion, warnings=list(one.warnings),
    )


# ══════════════════════════════════════════════════════════════════════
#  V-beam
# ══════════════════════════════════════════════════════════════════════


def calculate_v_beam_properties(inputs: VBeamInputs) -> CalculationResults:
    """Asymmetric V-section with the trolley running on the bottom flange."""
    beam = inputs.beam
    section = v_beam_section(inputs)
    L = beam.L

    loads = resolve_loads(section.F, L, beam.P_hoist, beam.P_trolley)
    stress = stresses(loads.M_x, loads.M_y, section.Wx, section.Wy,
                      section.Jx, section.H, section.Yc, load_on_bottom_flange=True)
    f = midspan_deflection(loads.q, loads.P, L, beam.E, section.Jx)
    f_allow = allowable_deflection(L, BeamType.V_BEAM)

    # Bottom flange outstand either side of the central web
    eps = epsilon(beam.sigma_yield)
    width = (inputs.b1 - inputs.t2) / 2 * MM_TO_CM
    buckling, K_buckling = local_buckling(width, inputs.t1 * MM_TO_CM, eps, "outstand")

    stiffener, warnings = size_stiffeners(
        inputs.h3, inputs.t3, beam.sigma_yield, loads.P, loads.q, L,
    )

    return _assemble(
        BeamType.V_BEAM, section, loads, stress, f, f_allow, beam.sigma_allow,
        buckling, K_buckling, stiffener, warnings=warnings,
    )
