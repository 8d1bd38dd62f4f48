from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class RectangularSection:
    """Sección rectangular maciza b x h (mm)."""
    width_mm: float
    height_mm: float


@dataclass(frozen=True)
class IBeamSection:
    """
    Doble T simétrica idealizada como rectángulo lleno menos el "hueco"
    a ambos lados del alma. Todas las dimensiones en mm.
    """
    width_mm: float              # ancho de alas
    height_mm: float             # altura total
    flange_thickness_mm: float   # espesor de ala
    web_thickness_mm: float      # espesor de alma


@dataclass(frozen=True)
class CustomSection:
    """Propiedades ingresadas directamente por el usuario."""
    moment_of_inertia_cm4: float
    distance_to_fiber_mm: float


CrossSection = Union[RectangularSection, IBeamSection, CustomSection]
