"""Cross-section properties.

The design path decomposes each section into closed-form primitives
(rectangles and rotated rectangles) and applies the parallel-axis theorem.
``mesh_section_properties`` re-derives the same quantities numerically from
the drawn polygons with sectionproperties, as an independent check.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from sectionproperties.analysis.section import Section
from sectionproperties.pre.geometry import Geometry
from shapely import Polygon

from .geometry import CrossSectionGeometry, v_section_outline
from .inputs import BeamInputs, VBeamInputs

MM_TO_CM = 0.1


# ── Primitives ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Primitive:
    """Plate element with its own centroidal second moments (cm units)."""

    role: str      # "top" | "bottom" | "webs"
    area: float    # cm²
    x: float       # cm, centroid, from the symmetry axis
    y: float       # cm, centroid, from the section bottom
    ix_own: float  # cm⁴
    iy_own: float  # cm⁴


def rect(role: str, b: float, h: float, x: float, y: float) -> Primitive:
    """Axis-aligned rectangle of width ``b`` and height ``h``."""
    b = max(b, 0.0)
    h = max(h, 0.0)
    return Primitive(
        role=role,
        area=b * h,
        x=x,
        y=y,
        ix_own=b * h**3 / 12,
        iy_own=h * b**3 / 12,
    )


def rotated_rect(role: str, b: float, h: float, theta: float, x: float, y: float) -> Primitive:
    """Rectangle ``b`` × ``h`` rotated by ``theta`` (rad) about its centroid.

    I = (b·h³/12)·cos²θ + (h·b³/12)·sin²θ
    """
    b = max(b, 0.0)
    h = max(h, 0.0)
    c2 = math.cos(theta) ** 2
    s2 = math.sin(theta) ** 2
    i_major = b * h**3 / 12
    i_minor = h * b**3 / 12
    return Primitive(
        role=role,
        area=b * h,
        x=x,
        y=y,
        ix_own=i_major * c2 + i_minor * s2,
        iy_own=i_minor * c2 + i_major * s2,
    )


# ── Composite section ────────────────────────────────────────────────────


@dataclass(frozen=True)
class SectionProperties:
    H: float    # cm, overall height
    F: float    # cm²
    Yc: float   # cm, from bottom
    Xc: float   # cm, from symmetry axis
    Jx: float   # cm⁴
    Jy: float   # cm⁴
    Wx: float   # cm³
    Wy: float   # cm³
    Jx_top: float = 0.0
    Jx_bottom: float = 0.0
    Jx_webs: float = 0.0
    Jy_top: float = 0.0
    Jy_bottom: float = 0.0
    Jy_webs: float = 0.0


def compose_section(
    primitives: list[Primitive],
    H: float,
    half_width: float,
) -> SectionProperties:
    """Area, centroid, second moments and moduli of a symmetric section."""
    F = sum(p.area for p in primitives)
    Yc = sum(p.area * p.y for p in primitives) / (F or 1)

    jx = {"top": 0.0, "bottom": 0.0, "webs": 0.0}
    jy = {"top": 0.0, "bottom": 0.0, "webs": 0.0}
    for p in primitives:
        jx[p.role] += p.ix_own + p.area * (p.y - Yc) ** 2
        jy[p.role] += p.iy_own + p.area * p.x**2

    Jx = sum(jx.values())
    Jy = sum(jy.values())
    c_max = max(Yc, H - Yc)
    Wx = Jx / c_max if c_max > 0 else 0.0
    Wy = Jy / half_width if half_width > 0 else 0.0

    return SectionProperties(
        H=H, F=F, Yc=Yc, Xc=0.0, Jx=Jx, Jy=Jy, Wx=Wx, Wy=Wy,
        Jx_top=jx["top"], Jx_bottom=jx["bottom"], Jx_webs=jx["webs"],
        Jy_top=jy["top"], Jy_bottom=jy["bottom"], Jy_webs=jy["webs"],
    )


def i_beam_section(inputs: BeamInputs) -> SectionProperties:
    """Rolled I-beam: equal flanges ``b × t1``, one central web."""
    H = inputs.h * MM_TO_CM
    b = inputs.b * MM_TO_CM
    tf = inputs.t1 * MM_TO_CM
    tw = inputs.t3 * MM_TO_CM
    hw = max(H - 2 * tf, 0.0)

    primitives = [
        rect("top", b, tf, 0.0, H - tf / 2),
        rect("bottom", b, tf, 0.0, tf / 2),
        rect("webs", tw, hw, 0.0, tf + hw / 2),
    ]
    return compose_section(primitives, H, b / 2)


def girder_section(inputs: BeamInputs) -> SectionProperties:
    """Welded box girder: two webs ``t3`` spaced ``b1`` apart."""
    H = inputs.h * MM_TO_CM
    b_bottom = inputs.b * MM_TO_CM
    b_top = inputs.top_width * MM_TO_CM
    t_bottom = inputs.t1 * MM_TO_CM
    t_top = inputs.t2 * MM_TO_CM
    tw = inputs.t3 * MM_TO_CM
    gap = inputs.b1 * MM_TO_CM
    hw = max(H - t_top - t_bottom, 0.0)

    x_web = gap / 2 + tw / 2
    y_web = t_bottom + hw / 2
    primitives = [
        rect("top", b_top, t_top, 0.0, H - t_top / 2),
        rect("bottom", b_bottom, t_bottom, 0.0, t_bottom / 2),
        rect("webs", tw, hw, -x_web, y_web),
        rect("webs", tw, hw, x_web, y_web),
    ]
    return compose_section(primitives, H, max(b_top, b_bottom) / 2)


def v_beam_section(v: VBeamInputs) -> SectionProperties:
    """V-section: bottom flange, central web, inclined webs and roof plates."""
    b1 = max(v.b1, 0.0) * MM_TO_CM
    t1 = max(v.t1, 0.0) * MM_TO_CM
    t2 = max(v.t2, 0.0) * MM_TO_CM
    h1 = max(v.h1, 0.0) * MM_TO_CM
    t3 = max(v.t3, 0.0) * MM_TO_CM
    h3 = max(v.h3, 0.0) * MM_TO_CM
    t4 = max(v.t4, 0.0) * MM_TO_CM
    theta = math.radians(v.web_angle_deg)
    alpha = math.radians(v.roof_angle_deg)

    o = v_section_outline(t2, t1 + h1, h3, t3, t4, v.web_angle_deg, v.roof_angle_deg)
    H = o.apex_outer.y

    # Inclined web: centre of the inner face plus half the thickness along
    # the outward normal (cos θ, −sin θ)
    web_x = (o.junction_inner.x + o.web_top_inner.x) / 2 + t3 / 2 * math.cos(theta)
    web_y = (o.junction_inner.y + o.web_top_inner.y) / 2 - t3 / 2 * math.sin(theta)

    # Roof plate: inner face from the web top to the apex, thickness upwards
    # along the normal (sin α, cos α)
    cos_a = math.cos(alpha)
    roof_len = o.web_top_inner.x / cos_a if cos_a > 0 else 0.0
    roof_x = o.web_top_inner.x / 2 + t4 / 2 * math.sin(alpha)
    roof_y = (o.web_top_inner.y + o.apex_inner.y) / 2 + t4 / 2 * math.cos(alpha)

    primitives = [
        rect("bottom", b1, t1, 0.0, t1 / 2),
        rect("webs", t2, h1, 0.0, t1 + h1 / 2),
        rotated_rect("webs", t3, h3, theta, web_x, web_y),
        rotated_rect("webs", t3, h3, theta, -web_x, web_y),
        rotated_rect("top", roof_len, t4, alpha, roof_x, roof_y),
        rotated_rect("top", roof_len, t4, alpha, -roof_x, roof_y),
    ]
    half_width = max(b1 / 2, o.roof_corner_outer.x, o.web_top_outer.x)
    return compose_section(primitives, H, half_width)


# ── Numerical cross-check ────────────────────────────────────────────────


def mesh_section_properties(geometry: CrossSectionGeometry) -> dict[str, Any]:
    """Mesh the drawn polygons and compute their properties (mm units)."""
    parts = []
    min_dim = math.inf
    for poly in geometry.polygons:
        if len({(p.x, p.y) for p in poly.points}) < 3:
            continue
        shape = Polygon([(p.x, p.y) for p in poly.points])
        if not shape.is_valid or shape.area <= 0:
            continue
        minx, miny, maxx, maxy = shape.bounds
        min_dim = min(min_dim, maxx - minx, maxy - miny)
        parts.append((poly.id, Geometry(geom=shape)))

    if not parts:
        raise ValueError("Cross section has no polygon with positive area")

    geom = None
    for _, g in parts:
        geom = g if geom is None else geom + g

    mesh_size = max(1.0, min_dim**2 / 2)
    geom.create_mesh(mesh_sizes=[mesh_size])

    section = Section(geometry=geom)
    section.calculate_geometric_properties()

    cx, cy = section.get_c()
    ixx, iyy, ixy = section.get_ic()
    return {
        "area_mm2": float(section.get_area()),
        "centroid_x_mm": float(cx),
        "centroid_y_mm": float(cy),
        "ixx_mm4": float(ixx),
        "iyy_mm4": float(iyy),
        "ixy_mm4": float(ixy),
        "polygon_ids": [pid for pid, _ in parts],
    }
