"""Converts JSON input into cranebeam calls and results back into JSON models."""

from __future__ import annotations

import math

from cranebeam import (
    BeamInputs,
    BeamType,
    CalculationResults,
    DoubleBeamInputs,
    MaterialType,
    VBeamInputs,
    calculate_beam_properties,
    calculate_double_beam_properties,
    calculate_v_beam_properties,
)
from cranebeam.section_properties import (
    SectionProperties,
    girder_section,
    i_beam_section,
    v_beam_section,
)

from .schemas import (
    BeamInputsModel,
    BeamRequest,
    BucklingOutput,
    CalculationOutput,
    StiffenerOutput,
    TorsionOutput,
)


# ── Input conversion ──────────────────────────────────────────


def to_beam_inputs(data: BeamInputsModel) -> BeamInputs:
    """Build core inputs; named materials override the entered values."""
    inputs = BeamInputs(**data.model_dump(exclude={"material"}))
    return inputs.with_material(MaterialType(data.material))


def to_core_inputs(data: BeamRequest) -> BeamInputs | DoubleBeamInputs | VBeamInputs:
    beam = to_beam_inputs(data.inputs)
    beam_type = BeamType(data.beam_type)

    if beam_type is BeamType.DOUBLE_GIRDER:
        return DoubleBeamInputs(
            beam=beam,
            girder_spacing=data.girder_spacing,
            q_transversal=data.q_transversal,
            rail_eccentricity=data.rail_eccentricity,
        )
    if beam_type is BeamType.V_BEAM:
        if data.v_beam is None:
            raise ValueError("v_beam parameters are required for a V-beam")
        return VBeamInputs(beam=beam, **data.v_beam.model_dump())
    return beam


# ── Public entry point ────────────────────────────────────────


def build_and_calculate(
    data: BeamRequest,
) -> tuple[BeamInputs | DoubleBeamInputs | VBeamInputs, CalculationResults]:
    """Run the calculation variant selected by ``beam_type``.

    Returns (core_inputs, results).
    """
    inputs = to_core_inputs(data)
    if isinstance(inputs, DoubleBeamInputs):
        return inputs, calculate_double_beam_properties(inputs)
    if isinstance(inputs, VBeamInputs):
        return inputs, calculate_v_beam_properties(inputs)
    return inputs, calculate_beam_properties(inputs, data.beam_type)


def span_inputs(inputs: BeamInputs | DoubleBeamInputs | VBeamInputs) -> BeamInputs:
    """The record carrying span and loads for any variant."""
    if isinstance(inputs, (DoubleBeamInputs, VBeamInputs)):
        return inputs.beam
    return inputs


def section_inputs(
    inputs: BeamInputs | DoubleBeamInputs | VBeamInputs,
) -> BeamInputs | VBeamInputs:
    """The record describing one drawn cross section."""
    if isinstance(inputs, DoubleBeamInputs):
        return inputs.beam
    return inputs


def closed_form_section(
    inputs: BeamInputs | DoubleBeamInputs | VBeamInputs,
    beam_type: BeamType | str,
) -> SectionProperties:
    """Closed-form properties of one drawn section (cm units)."""
    section = section_inputs(inputs)
    if isinstance(section, VBeamInputs):
        return v_beam_section(section)
    if BeamType(beam_type) is BeamType.I_BEAM:
        return i_beam_section(section)
    return girder_section(section)


# ── Output conversion ─────────────────────────────────────────


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def to_output(r: CalculationResults) -> CalculationOutput:
    s = r.stiffener
    t = r.torsion
    return CalculationOutput(
        beam_type=r.beam_type.value,
        F=r.F, Yc=r.Yc, Xc=r.Xc, Jx=r.Jx, Jy=r.Jy, Wx=r.Wx, Wy=r.Wy,
        Jx_top=r.Jx_top, Jx_bottom=r.Jx_bottom, Jx_webs=r.Jx_webs,
        Jy_top=r.Jy_top, Jy_bottom=r.Jy_bottom, Jy_webs=r.Jy_webs,
        P=r.P, M_bt=r.M_bt, M_vn=r.M_vn, M_x=r.M_x, M_y=r.M_y,
        beam_self_weight=r.beam_self_weight, q=r.q,
        sigma_u=r.sigma_u,
        sigma_compression=r.sigma_compression,
        sigma_tension=r.sigma_tension,
        f=r.f, f_allow=r.f_allow,
        K_sigma=_finite_or_none(r.K_sigma),
        n_f=_finite_or_none(r.n_f),
        K_buckling=_finite_or_none(r.K_buckling),
        stress_check=r.stress_check.value,
        deflection_check=r.deflection_check.value,
        buckling_check=r.buckling_check.value,
        all_pass=r.all_pass,
        buckling=BucklingOutput(
            element=r.buckling.element,
            width_cm=r.buckling.width,
            thickness_cm=r.buckling.thickness,
            ratio=r.buckling.ratio,
            limit=r.buckling.limit,
        ),
        stiffener=StiffenerOutput(
            required=s.required,
            effective_web_height_mm=s.effective_web_height,
            epsilon=s.epsilon,
            slenderness_ratio=s.slenderness_ratio,
            slenderness_limit=s.slenderness_limit,
            spacing_mm=s.spacing,
            count=s.count,
            width_mm=s.width,
            thickness_mm=s.thickness,
            required_inertia_mm4=s.required_inertia,
            provided_inertia_mm4=s.provided_inertia,
            inertia_ok=s.inertia_ok,
            positions_cm=list(s.positions),
            total_weight_kg=s.total_weight,
        ),
        torsion=TorsionOutput(
            eccentricity_cm=t.eccentricity,
            torque_kgcm=t.torque,
            enclosed_area_cm2=t.enclosed_area,
            torsion_constant_cm4=t.torsion_constant,
            shear_stress_kgcm2=t.shear_stress,
        ),
        warnings=list(r.warnings),
    )
