"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

BeamTypeTag = Literal["single-girder", "i-beam", "double-girder", "v-beam"]
MaterialTag = Literal["SS400", "CT3", "A36", "CUSTOM"]


# ── Request Models ────────────────────────────────────────────


class BeamInputsModel(BaseModel):
    # Geometry (mm)
    b: float = 0.0
    h: float = 0.0
    t1: float = 0.0
    t2: float = 0.0
    t3: float = 0.0
    b1: float = 0.0
    b3: float | None = None
    # Span and end carriage (cm)
    L: float = 0.0
    A: float = 0.0
    C: float = 0.0
    # Loads (kg)
    P_hoist: float = 0.0
    P_trolley: float = 0.0
    # Material (kg/cm²)
    material: MaterialTag = "CUSTOM"
    sigma_allow: float = 0.0
    sigma_yield: float = 0.0
    E: float = 0.0
    nu: float = 0.0
    q: float = 0.0  # kg/cm


class VBeamParamsModel(BaseModel):
    b1: float = 0.0  # mm
    t1: float = 0.0
    t2: float = 0.0
    h1: float = 0.0
    t3: float = 0.0
    h3: float = 0.0
    t4: float = 0.0
    A: float = 0.0
    web_angle_deg: float = 30.0
    roof_angle_deg: float = 10.0


class BeamRequest(BaseModel):
    beam_type: BeamTypeTag = "single-girder"
    inputs: BeamInputsModel
    # Double girder only
    girder_spacing: float = 0.0     # mm
    q_transversal: float = 0.0      # kg/m
    rail_eccentricity: float = 0.0  # mm
    # V-beam only
    v_beam: VBeamParamsModel | None = None


class DiagramRequest(BeamRequest):
    num_points: int = 101


# ── Response Models ───────────────────────────────────────────


class MaterialOutput(BaseModel):
    name: str
    sigma_yield: float
    sigma_allow: float
    E: float
    nu: float


class StiffenerOutput(BaseModel):
    required: bool
    effective_web_height_mm: float
    epsilon: float
    slenderness_ratio: float
    slenderness_limit: float
    spacing_mm: float
    count: int
    width_mm: float
    thickness_mm: float
    required_inertia_mm4: float
    provided_inertia_mm4: float
    inertia_ok: bool
    positions_cm: list[float] = []
    total_weight_kg: float


class TorsionOutput(BaseModel):
    eccentricity_cm: float
    torque_kgcm: float
    enclosed_area_cm2: float
    torsion_constant_cm4: float
    shear_stress_kgcm2: float


class BucklingOutput(BaseModel):
    element: str
    width_cm: float
    thickness_cm: float
    ratio: float
    limit: float


class CalculationOutput(BaseModel):
    beam_type: BeamTypeTag
    # Section
    F: float
    Yc: float
    Xc: float
    Jx: float
    Jy: float
    Wx: float
    Wy: float
    Jx_top: float
    Jx_bottom: float
    Jx_webs: float
    Jy_top: float
    Jy_bottom: float
    Jy_webs: float
    # Loads
    P: float
    M_bt: float
    M_vn: float
    M_x: float
    M_y: float
    beam_self_weight: float
    q: float
    # Stress / deflection
    sigma_u: float
    sigma_compression: float
    sigma_tension: float
    f: float
    f_allow: float
    # Safety factors (null = unbounded)
    K_sigma: float | None
    n_f: float | None
    K_buckling: float | None
    stress_check: Literal["pass", "fail"]
    deflection_check: Literal["pass", "fail"]
    buckling_check: Literal["pass", "fail"]
    all_pass: bool
    buckling: BucklingOutput
    stiffener: StiffenerOutput
    torsion: TorsionOutput
    warnings: list[str] = []


class DiagramOutput(BaseModel):
    beam_type: BeamTypeTag
    x: list[float]       # cm
    shear: list[float]   # kg
    moment: list[float]  # kg·cm


class PointOutput(BaseModel):
    x: float
    y: float


class PolygonOutput(BaseModel):
    id: str
    points: list[PointOutput]


class BoundsOutput(BaseModel):
    min_x: float
    max_x: float
    min_y: float
    max_y: float


class GeometryOutput(BaseModel):
    beam_type: BeamTypeTag
    polygons: list[PolygonOutput]
    bounds: BoundsOutput


class SectionPropertiesOutput(BaseModel):
    area_mm2: float
    centroid_x_mm: float
    centroid_y_mm: float
    ixx_mm4: float
    iyy_mm4: float
    ixy_mm4: float
    polygon_ids: list[str]
    # Closed-form values for comparison (mm units)
    closed_form_area_mm2: float
    closed_form_centroid_y_mm: float
    closed_form_ixx_mm4: float


class BalanceItemOutput(BaseModel):
    key: str
    actual_cm: float
    minimum_cm: float
    maximum_cm: float
    status: Literal["pass", "fail"]
    adjustment_pct: float
