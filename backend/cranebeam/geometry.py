"""Polygon geometry of the beam cross sections (mm, origin at the
bottom of the section on its vertical symmetry axis)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .inputs import BeamInputs, BeamType, VBeamInputs


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class CrossSectionPolygon:
    id: str
    points: tuple[Point, ...]


@dataclass(frozen=True)
class Bounds:
    min_x: float = 0.0
    max_x: float = 0.0
    min_y: float = 0.0
    max_y: float = 0.0

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class CrossSectionGeometry:
    polygons: tuple[CrossSectionPolygon, ...]
    bounds: Bounds

    def polygon(self, polygon_id: str) -> CrossSectionPolygon | None:
        for poly in self.polygons:
            if poly.id == polygon_id:
                return poly
        return None


@dataclass(frozen=True)
class VSectionOutline:
    """Key points of the right half of a V-section (mirrored for the left)."""

    junction_inner: Point    # central web top, inner face of the V-web
    junction_outer: Point
    web_top_inner: Point
    web_top_outer: Point
    apex_inner: Point
    apex_outer: Point
    roof_corner_outer: Point


# ── helpers ──────────────────────────────────────────────────────────────


def _finite(value: float | None, fallback: float = 0.0) -> float:
    if value is None or not math.isfinite(value):
        return fallback
    return value


def rectangle_points(x_left: float, y_bottom: float, width: float, height: float) -> tuple[Point, ...]:
    width = max(width, 0.0)
    height = max(height, 0.0)
    return (
        Point(x_left, y_bottom),
        Point(x_left + width, y_bottom),
        Point(x_left + width, y_bottom + height),
        Point(x_left, y_bottom + height),
    )


def mirror_points(points: tuple[Point, ...]) -> tuple[Point, ...]:
    """Mirror about x = 0, keeping the winding order."""
    return tuple(Point(-p.x, p.y) for p in reversed(points))


def compute_bounds(polygons: tuple[CrossSectionPolygon, ...] | list[CrossSectionPolygon]) -> Bounds:
    xs = [p.x for poly in polygons for p in poly.points]
    ys = [p.y for poly in polygons for p in poly.points]
    if not xs:
        return Bounds()
    values = (min(xs), max(xs), min(ys), max(ys))
    if not all(math.isfinite(v) for v in values):
        return Bounds()
    return Bounds(*values)


def v_section_outline(
    central_web_thickness: float,
    junction_y: float,
    web_length: float,
    web_thickness: float,
    roof_thickness: float,
    web_angle_deg: float = 30.0,
    roof_angle_deg: float = 10.0,
) -> VSectionOutline:
    """Corner points of the inclined web and roof plate (right-hand side).

    The web leaves the top of the central web at ``web_angle_deg`` from the
    vertical; its outer face is offset by the web thickness along the
    normal (cos θ, −sin θ). The roof runs from the web's top inner point up
    to the symmetry axis at ``roof_angle_deg``; the outer apex sits
    ``roof_thickness`` above the inner apex.
    """
    theta = math.radians(web_angle_deg)
    alpha = math.radians(roof_angle_deg)
    sin_w, cos_w = math.sin(theta), math.cos(theta)
    tan_w, tan_r = math.tan(theta), math.tan(alpha)

    x0 = central_web_thickness / 2
    junction_inner = Point(x0, junction_y)
    web_top_inner = Point(x0 + web_length * sin_w, junction_y + web_length * cos_w)

    apex_inner = Point(0.0, web_top_inner.y + tan_r * web_top_inner.x)
    apex_outer = Point(0.0, apex_inner.y + roof_thickness)

    nx, ny = cos_w, -sin_w
    junction_outer = Point(x0 + web_thickness * nx, junction_y + web_thickness * ny)
    web_top_outer = Point(
        web_top_inner.x + web_thickness * nx,
        web_top_inner.y + web_thickness * ny,
    )

    # Outer web line: y = web_top_outer.y + cot(θ)·(x − web_top_outer.x)
    # Outer roof line: y = apex_outer.y − tan(α)·x
    cot_w = 0.0 if tan_w == 0 else 1.0 / tan_w
    denom = cot_w + tan_r
    if denom == 0:
        x_int = web_top_outer.x
    else:
        x_int = (apex_outer.y - web_top_outer.y + cot_w * web_top_outer.x) / denom
    roof_corner_outer = Point(x_int, apex_outer.y - tan_r * x_int)

    return VSectionOutline(
        junction_inner=junction_inner,
        junction_outer=junction_outer,
        web_top_inner=web_top_inner,
        web_top_outer=web_top_outer,
        apex_inner=apex_inner,
        apex_outer=apex_outer,
        roof_corner_outer=roof_corner_outer,
    )


# ── builders ─────────────────────────────────────────────────────────────


def _standard_flanges(
    bottom_width: float,
    bottom_t: float,
    top_width: float,
    top_t: float,
    top_bottom_y: float,
) -> list[CrossSectionPolygon]:
    return [
        CrossSectionPolygon(
            "bottom-flange",
            rectangle_points(-bottom_width / 2, 0.0, bottom_width, bottom_t),
        ),
        CrossSectionPolygon(
            "top-flange",
            rectangle_points(-top_width / 2, top_bottom_y, top_width, top_t),
        ),
    ]


def _build_v_beam(v: VBeamInputs) -> list[CrossSectionPolygon]:
    b1 = max(_finite(v.b1), 0.0)
    t1 = max(_finite(v.t1), 0.0)
    t2 = max(_finite(v.t2), 0.0)
    h1 = max(_finite(v.h1), 0.0)
    t3 = max(_finite(v.t3), 0.0)
    h3 = max(_finite(v.h3), 0.0)
    t4 = max(_finite(v.t4), 0.0)

    polygons = [
        CrossSectionPolygon("bottom-flange", rectangle_points(-b1 / 2, 0.0, b1, t1)),
    ]
    if h1 > 0 and t2 > 0:
        polygons.append(
            CrossSectionPolygon("central-web", rectangle_points(-t2 / 2, t1, t2, h1))
        )

    o = v_section_outline(
        central_web_thickness=t2,
        junction_y=t1 + h1,
        web_length=h3,
        web_thickness=t3,
        roof_thickness=t4,
        web_angle_deg=_finite(v.web_angle_deg, 30.0),
        roof_angle_deg=_finite(v.roof_angle_deg, 10.0),
    )
    v_web_right = (o.junction_inner, o.web_top_inner, o.web_top_outer, o.junction_outer)
    roof_right = (o.web_top_inner, o.apex_inner, o.apex_outer, o.roof_corner_outer)
    polygons.extend([
        CrossSectionPolygon("v-web-right", v_web_right),
        CrossSectionPolygon("v-web-left", mirror_points(v_web_right)),
        CrossSectionPolygon("roof-right", roof_right),
        CrossSectionPolygon("roof-left", mirror_points(roof_right)),
    ])
    return polygons


def build_cross_section_geometry(
    inputs: BeamInputs | VBeamInputs,
    beam_type: BeamType | str | None,
) -> CrossSectionGeometry:
    """Build the tagged polygons of a cross section.

    Never raises: negative sizes are clamped and unknown beam types fall
    back to a single-web section.
    """
    try:
        beam_type = BeamType(beam_type)
    except ValueError:
        beam_type = None

    if isinstance(inputs, VBeamInputs):
        if beam_type is BeamType.V_BEAM:
            polygons = _build_v_beam(inputs)
            return CrossSectionGeometry(tuple(polygons), compute_bounds(polygons))
        inputs = inputs.beam

    b = _finite(inputs.b)
    top_width = _finite(inputs.b3, b)
    t_bottom = _finite(inputs.t1)
    t_top = _finite(inputs.t2)
    t_web = _finite(inputs.t3)
    gap = _finite(inputs.b1)
    total_h = _finite(inputs.h, t_bottom + t_top)

    web_h = max(total_h - t_bottom - t_top, 0.0)
    web_bottom_y = t_bottom
    top_bottom_y = max(total_h - t_top, web_bottom_y)

    polygons = _standard_flanges(b, t_bottom, top_width, t_top, top_bottom_y)

    if beam_type in (BeamType.SINGLE_GIRDER, BeamType.DOUBLE_GIRDER):
        half_gap = gap / 2
        polygons.append(CrossSectionPolygon(
            "left-web",
            rectangle_points(-(half_gap + t_web), web_bottom_y, t_web, web_h),
        ))
        polygons.append(CrossSectionPolygon(
            "right-web",
            rectangle_points(half_gap, web_bottom_y, t_web, web_h),
        ))
    elif beam_type is BeamType.V_BEAM:
        # V parameters missing: only the flanges can be drawn
        pass
    else:
        polygons.append(CrossSectionPolygon(
            "web",
            rectangle_points(-t_web / 2, web_bottom_y, t_web, web_h),
        ))

    return CrossSectionGeometry(tuple(polygons), compute_bounds(polygons))
