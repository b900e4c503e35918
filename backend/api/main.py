"""FastAPI application — crane bridge beam calculation API."""

from __future__ import annotations

import logging
import os

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from cranebeam import (
    BeamType,
    assess_geometric_balance,
    build_cross_section_geometry,
    list_materials,
    mesh_section_properties,
)

from .builder import (
    build_and_calculate,
    closed_form_section,
    section_inputs,
    span_inputs,
    to_core_inputs,
    to_output,
)
from .diagrams import compute_diagrams
from .schemas import (
    BalanceItemOutput,
    BeamRequest,
    BoundsOutput,
    CalculationOutput,
    DiagramOutput,
    DiagramRequest,
    GeometryOutput,
    MaterialOutput,
    PointOutput,
    PolygonOutput,
    SectionPropertiesOutput,
)

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Crane Beam API", version="0.1.0")


def _cors_origins() -> list[str]:
    raw_origins = os.getenv("CORS_ORIGINS", "")
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Materials ─────────────────────────────────────────────────


@app.get("/api/materials", response_model=list[MaterialOutput])
def get_materials() -> list[MaterialOutput]:
    """List the steel grades of the material library."""
    return [
        MaterialOutput(
            name=m.name,
            sigma_yield=m.sigma_yield,
            sigma_allow=m.sigma_allow,
            E=m.E,
            nu=m.nu,
        )
        for m in list_materials()
    ]


# ── Calculation ───────────────────────────────────────────────


def _calculate(data: BeamRequest) -> CalculationOutput:
    try:
        _, results = build_and_calculate(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    logger.info(
        "%s: K_sigma=%.3f n_f=%.3f K_buckling=%.3f",
        results.beam_type.value, results.K_sigma, results.n_f, results.K_buckling,
    )
    return to_output(results)


@app.post("/api/calculate", response_model=CalculationOutput)
def calculate(data: BeamRequest) -> CalculationOutput:
    """Run the section, stress, deflection and buckling checks."""
    return _calculate(data)


@app.post("/api/calculate/double-girder", response_model=CalculationOutput)
def calculate_double_girder(data: BeamRequest) -> CalculationOutput:
    return _calculate(data.model_copy(update={"beam_type": "double-girder"}))


@app.post("/api/calculate/v-beam", response_model=CalculationOutput)
def calculate_v_beam(data: BeamRequest) -> CalculationOutput:
    return _calculate(data.model_copy(update={"beam_type": "v-beam"}))


# ── Force diagrams ────────────────────────────────────────────


@app.post("/api/diagrams", response_model=DiagramOutput)
def diagrams(data: DiagramRequest) -> DiagramOutput:
    """Compute shear and moment diagrams along the span."""
    try:
        inputs, results = build_and_calculate(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return compute_diagrams(span_inputs(inputs), results, data.num_points)


# ── Cross section ─────────────────────────────────────────────


@app.post("/api/geometry", response_model=GeometryOutput)
def geometry(data: BeamRequest) -> GeometryOutput:
    """Polygon outline of the cross section (mm)."""
    try:
        inputs = to_core_inputs(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    geom = build_cross_section_geometry(section_inputs(inputs), data.beam_type)
    return GeometryOutput(
        beam_type=data.beam_type,
        polygons=[
            PolygonOutput(
                id=poly.id,
                points=[PointOutput(x=p.x, y=p.y) for p in poly.points],
            )
            for poly in geom.polygons
        ],
        bounds=BoundsOutput(
            min_x=geom.bounds.min_x,
            max_x=geom.bounds.max_x,
            min_y=geom.bounds.min_y,
            max_y=geom.bounds.max_y,
        ),
    )


@app.post("/api/section-properties", response_model=SectionPropertiesOutput)
def section_properties(data: BeamRequest) -> SectionPropertiesOutput:
    """Mesh the cross section and compare with the closed-form values."""
    try:
        inputs = to_core_inputs(data)
        geom = build_cross_section_geometry(section_inputs(inputs), data.beam_type)
        props = mesh_section_properties(geom)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=500, detail=f"Section property calculation failed: {e}"
        )

    closed = closed_form_section(inputs, data.beam_type)
    return SectionPropertiesOutput(
        **props,
        closed_form_area_mm2=closed.F * 1e2,
        closed_form_centroid_y_mm=closed.Yc * 10,
        closed_form_ixx_mm4=closed.Jx * 1e4,
    )


# ── Geometric balance ─────────────────────────────────────────


@app.post("/api/geometric-balance", response_model=list[BalanceItemOutput])
def geometric_balance(data: BeamRequest) -> list[BalanceItemOutput]:
    """Advisory proportion checks of the section against the span."""
    try:
        inputs = to_core_inputs(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    items = assess_geometric_balance(section_inputs(inputs), BeamType(data.beam_type))
    return [
        BalanceItemOutput(
            key=item.key,
            actual_cm=item.actual,
            minimum_cm=item.minimum,
            maximum_cm=item.maximum,
            status=item.status.value,
            adjustment_pct=round(item.adjustment_pct, 4),
        )
        for item in items
    ]


@app.get("/health")
def health() -> dict[str, str]:
    """Lightweight healthcheck for deployment platforms."""
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn; HOST and PORT come from the environment."""
    uvicorn.run(
        "api.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    run()
