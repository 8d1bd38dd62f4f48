from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from beam_engine.domain.sections import CrossSection


class SupportType(str, Enum):
    SIMPLY_SUPPORTED = "simply-supported"
    CANTILEVER = "cantilever"            # empotrada en x=0, libre en x=L


class LoadType(str, Enum):
    POINT = "point-load"
    UDL = "udl"


@dataclass(frozen=True)
class BeamSpec:
    """
    Pedido de análisis (una viga de un solo tramo), en unidades de usuario:
      - span_m: luz L [m]
      - load_kn: P [kN] (puntual) o w [kN/m] (distribuida uniforme)
      - load_position_m: a [m], solo para carga puntual
      - elastic_modulus_gpa: E [GPa]
    """
    span_m: float
    support: SupportType
    load_type: LoadType
    load_kn: float
    section: CrossSection
    elastic_modulus_gpa: float
    load_position_m: Optional[float] = None
