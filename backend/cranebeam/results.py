"""Calculation result records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .inputs import BeamType


class CheckStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"

    @classmethod
    def of(cls, factor: float) -> CheckStatus:
        """Safety factor >= 1 (including infinity) passes."""
        return cls.PASS if factor >= 1 else cls.FAIL


@dataclass(frozen=True)
class StiffenerRecommendation:
    """Transverse web stiffener layout (EN 1993-1-5 §5, §9)."""

    required: bool = False
    effective_web_height: float = 0.0  # mm
    epsilon: float = 0.0
    slenderness_ratio: float = 0.0     # h_w / t_w
    slenderness_limit: float = 0.0     # 72·ε/η
    spacing: float = 0.0               # mm
    count: int = 0
    width: float = 0.0                 # mm
    thickness: float = 0.0             # mm
    required_inertia: float = 0.0      # mm⁴, §9.3 minimum
    provided_inertia: float = 0.0      # mm⁴, plate b·t³/12
    positions: tuple[float, ...] = ()  # cm from the left support
    total_weight: float = 0.0          # kg

    @property
    def inertia_ok(self) -> bool:
        return self.provided_inertia >= self.required_inertia


@dataclass(frozen=True)
class TorsionResult:
    """St Venant torsion of one box girder under an eccentric rail load."""

    eccentricity: float = 0.0     # cm
    torque: float = 0.0           # kg·cm per girder
    enclosed_area: float = 0.0    # cm², area inside the wall mid-lines
    torsion_constant: float = 0.0  # cm⁴, Bredt
    shear_stress: float = 0.0     # kg/cm²


@dataclass(frozen=True)
class BucklingCheck:
    """Width/thickness ratio of the representative compression plate."""

    element: str            # "outstand" | "internal"
    width: float            # cm
    thickness: float        # cm
    ratio: float
    limit: float            # c/t limit (14ε or 42ε)


@dataclass(frozen=True)
class CalculationResults:
    beam_type: BeamType

    # Section (cm units)
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
    P: float                 # kg
    M_bt: float              # kg·cm, distributed load
    M_vn: float              # kg·cm, midspan point load
    M_x: float               # kg·cm
    M_y: float               # kg·cm
    beam_self_weight: float  # kg
    q: float                 # kg/cm

    # Stresses and deflection
    sigma_u: float              # kg/cm²
    sigma_compression: float    # kg/cm²
    sigma_tension: float        # kg/cm²
    f: float                    # cm
    f_allow: float              # cm

    # Safety factors
    K_sigma: float
    n_f: float
    K_buckling: float
    stress_check: CheckStatus
    deflection_check: CheckStatus
    buckling_check: CheckStatus

    buckling: BucklingCheck
    stiffener: StiffenerRecommendation
    torsion: TorsionResult = field(default_factory=TorsionResult)
    warnings: tuple[str, ...] = ()

    @property
    def all_pass(self) -> bool:
        return all(
            status is CheckStatus.PASS
            for status in (self.stress_check, self.deflection_check, self.buckling_check)
        )

    def print_summary(self) -> None:
        P = "PASS"
        F = "FAIL"

        def fmt(value: float) -> str:
            return "inf" if math.isinf(value) else f"{value:.3f}"

        print(f"\n{'='*64}")
        print(f"  Crane beam: {self.beam_type.value}")
        print(f"{'='*64}")
        print(f"  F  = {self.F:>10.2f} cm²    Yc = {self.Yc:>8.2f} cm")
        print(f"  Jx = {self.Jx:>10.0f} cm⁴    Wx = {self.Wx:>8.0f} cm³")
        print(f"  Jy = {self.Jy:>10.0f} cm⁴    Wy = {self.Wy:>8.0f} cm³")
        print(f"{'─'*64}")
        print(f"  P = {self.P:.0f} kg   q = {self.q:.4f} kg/cm   "
              f"self-weight = {self.beam_self_weight:.1f} kg")
        print(f"  Mx = {self.M_x:.0f} kg·cm   My = {self.M_y:.0f} kg·cm")
        print(f"{'─'*64}")
        print(f"  Stress        σu = {self.sigma_u:>8.1f} kg/cm²   "
              f"K = {fmt(self.K_sigma)}  {P if self.stress_check is CheckStatus.PASS else F}")
        print(f"  Deflection    f  = {self.f:>8.3f} cm  <= {self.f_allow:.3f} cm   "
              f"n = {fmt(self.n_f)}  {P if self.deflection_check is CheckStatus.PASS else F}")
        print(f"  Local buckling c/t = {self.buckling.ratio:.1f} "
              f"(limit {self.buckling.limit:.1f})   "
              f"K = {fmt(self.K_buckling)}  {P if self.buckling_check is CheckStatus.PASS else F}")
        s = self.stiffener
        if s.required:
            print(f"  Stiffeners    {s.count} × {s.width:.0f}×{s.thickness:.0f} mm "
                  f"@ {s.spacing:.0f} mm   {s.total_weight:.1f} kg")
        else:
            print("  Stiffeners    not required")
        for w in self.warnings:
            print(f"  ! {w}")
        print(f"{'─'*64}")
        print(f"  OVERALL: {P if self.all_pass else F}")
        print(f"{'='*64}")


@dataclass(frozen=True)
class DiagramPoint:
    x: float       # cm
    shear: float   # kg
    moment: float  # kg·cm
