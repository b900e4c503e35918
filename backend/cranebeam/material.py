"""Structural steel grades used for crane girders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MaterialType(str, Enum):
    SS400 = "SS400"
    CT3 = "CT3"
    A36 = "A36"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class Material:
    """Elastic steel properties in kg/cm²."""

    name: str
    sigma_yield: float
    sigma_allow: float
    E: float
    nu: float


# ── Reference values (JIS G3101 / GOST 380 / ASTM A36) ──────────────────
MATERIAL_LIBRARY: dict[MaterialType, Material] = {
    MaterialType.SS400: Material("SS400", sigma_yield=2450, sigma_allow=1400, E=2.1e6, nu=0.3),
    MaterialType.CT3: Material("CT3", sigma_yield=2350, sigma_allow=1400, E=2.1e6, nu=0.3),
    MaterialType.A36: Material("A36", sigma_yield=2500, sigma_allow=1500, E=2.1e6, nu=0.3),
}


def get_material(name: MaterialType | str) -> Material:
    """Look up a named grade. CUSTOM has no fixed values."""
    key = name.upper() if isinstance(name, str) else name
    try:
        material = MaterialType(key)
    except ValueError:
        raise ValueError(
            f"Unknown material '{name}'. Use SS400/CT3/A36 or CUSTOM."
        ) from None
    if material is MaterialType.CUSTOM:
        raise ValueError("CUSTOM material has no library values; enter them directly.")
    return MATERIAL_LIBRARY[material]


def list_materials() -> list[Material]:
    return list(MATERIAL_LIBRARY.values())
