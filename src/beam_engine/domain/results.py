from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from beam_engine.domain.units import m4_to_cm4


@dataclass(frozen=True)
class DiagramPoint:
    x_m: float
    moment_knm: float
    shear_kn: float
    deflection_mm: float


@dataclass(frozen=True)
class Reactions:
    """
    Simplemente apoyada: r1, r2 = reacciones verticales [kN].
    Voladizo: r1 = reacción vertical [kN], r2 = momento de empotramiento [kN·m].
    """
    r1: float
    r2: float


@dataclass(frozen=True)
class BeamResult:
    max_moment: float          # |M| máx [kN·m]
    max_shear: float           # |V| máx [kN]
    max_stress: float          # σ máx [MPa]
    max_deflection: float      # |y| máx [mm]
    moment_of_inertia: float   # I [m^4]
    reactions: Reactions
    diagram: Tuple[DiagramPoint, ...]
    max_moment_x_m: float = 0.0

    @property
    def moment_of_inertia_cm4(self) -> float:
        return m4_to_cm4(self.moment_of_inertia)
