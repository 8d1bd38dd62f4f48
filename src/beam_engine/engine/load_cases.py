from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from beam_engine.domain.beam import LoadType, SupportType
from beam_engine.domain.errors import InvalidGeometry, InvalidLoad, OutOfRangePosition


@dataclass(frozen=True)
class LoadCase(ABC):
    """
    Caso de carga resuelto: reacciones + funciones cerradas M(x), V(x), y(x).

    Convención interna (SI):
    - x [m] desde el apoyo izquierdo / empotramiento (x=0)
    - M [N·m], positivo = tracciona la fibra inferior (sagging)
    - V [N], positivo = reacción izquierda hacia arriba
    - y [m], positivo = hacia abajo

    r1, r2 se calculan una sola vez al construir el caso (ver build_load_case).
    """
    L: float
    EI: float
    r1: float
    r2: float

    def eval_M(self, x: float) -> float:
        return float(self.eval_M_array(np.asarray([x], dtype=float))[0])

    def eval_V(self, x: float) -> float:
        return float(self.eval_V_array(np.asarray([x], dtype=float))[0])

    def eval_y(self, x: float) -> float:
        return float(self.eval_y_array(np.asarray([x], dtype=float))[0])

    # -------------------------
    # Evaluadores vectorizados (cada variante)
    # -------------------------
    @abstractmethod
    def eval_M_array(self, x: np.ndarray) -> np.ndarray:
        ...

    @abstractmethod
    def eval_V_array(self, x: np.ndarray) -> np.ndarray:
        ...

    @abstractmethod
    def eval_y_array(self, x: np.ndarray) -> np.ndarray:
        ...

    # -------------------------
    # Extremos analíticos (no dependen del muestreo)
    # -------------------------
    @property
    @abstractmethod
    def peak_moment(self) -> float:
        """|M| máximo [N·m]."""

    @property
    @abstractmethod
    def peak_moment_x(self) -> float:
        ...

    @property
    @abstractmethod
    def peak_shear(self) -> float:
        """|V| máximo [N]."""


@dataclass(frozen=True)
class SimplySupportedPoint(LoadCase):
    P: float
    a: float

    @classmethod
    def build(cls, L: float, P: float, a: float, EI: float) -> "SimplySupportedPoint":
        b = L - a
        return cls(L=L, EI=EI, r1=P * b / L, r2=P * a / L, P=P, a=a)

    def eval_M_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x <= self.a, self.r1 * x, self.r1 * x - self.P * (x - self.a))

    def eval_V_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x < self.a, self.r1, self.r1 - self.P)

    def eval_y_array(self, x: np.ndarray) -> np.ndarray:
        L, P, a, EI = self.L, self.P, self.a, self.EI
        b = L - a
        u = L - x  # distancia desde el apoyo derecho
        left = (P * b * x) / (6.0 * EI * L) * (L * L - b * b - x * x)
        right = (P * a * u) / (6.0 * EI * L) * (L * L - a * a - u * u)
        return np.where(x <= a, left, right)

    @property
    def peak_moment(self) -> float:
        return abs(self.P * self.a * (self.L - self.a) / self.L)

    @property
    def peak_moment_x(self) -> float:
        return self.a

    @property
    def peak_shear(self) -> float:
        return max(abs(self.r1), abs(self.r2))


@dataclass(frozen=True)
class SimplySupportedUDL(LoadCase):
    w: float

    @classmethod
    def build(cls, L: float, w: float, a: Optional[float], EI: float) -> "SimplySupportedUDL":
        r = w * L / 2.0
        return cls(L=L, EI=EI, r1=r, r2=r, w=w)

    def eval_M_array(self, x: np.ndarray) -> np.ndarray:
        return self.r1 * x - self.w * x * x / 2.0

    def eval_V_array(self, x: np.ndarray) -> np.ndarray:
        return self.r1 - self.w * x

    def eval_y_array(self, x: np.ndarray) -> np.ndarray:
        L, w, EI = self.L, self.w, self.EI
        return (w * x) / (24.0 * EI) * (L * L * L - 2.0 * L * x * x + x * x * x)

    @property
    def peak_moment(self) -> float:
        return abs(self.w * self.L * self.L / 8.0)

    @property
    def peak_moment_x(self) -> float:
        return self.L / 2.0

    @property
    def peak_shear(self) -> float:
        return abs(self.r1)


@dataclass(frozen=True)
class CantileverPoint(LoadCase):
    """
    Voladizo empotrado en x=0 con carga puntual en x=a.
    r1 = reacción vertical, r2 = momento de empotramiento.

    Para x > a se toma M = V = 0 (exacto solo con la carga en la punta, a=L).
    """
    P: float
    a: float

    @classmethod
    def build(cls, L: float, P: float, a: float, EI: float) -> "CantileverPoint":
        return cls(L=L, EI=EI, r1=P, r2=-(P * a) + 0.0, P=P, a=a)

    def eval_M_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x < self.a, self.r2 + self.r1 * x, 0.0)

    def eval_V_array(self, x: np.ndarray) -> np.ndarray:
        return np.where(x < self.a, self.r1, 0.0)

    def eval_y_array(self, x: np.ndarray) -> np.ndarray:
        P, a, EI = self.P, self.a, self.EI
        inner = (P * x * x) / (6.0 * EI) * (3.0 * a - x)
        outer = (P * a * a) / (6.0 * EI) * (3.0 * x - a)
        return np.where(x <= a, inner, outer)

    @property
    def peak_moment(self) -> float:
        return abs(self.r2)

    @property
    def peak_moment_x(self) -> float:
        return 0.0

    @property
    def peak_shear(self) -> float:
        return abs(self.P)


@dataclass(frozen=True)
class CantileverUDL(LoadCase):
    w: float

    @classmethod
    def build(cls, L: float, w: float, a: Optional[float], EI: float) -> "CantileverUDL":
        return cls(L=L, EI=EI, r1=w * L, r2=-(w * L * L) / 2.0, w=w)

    def eval_M_array(self, x: np.ndarray) -> np.ndarray:
        return self.r2 + self.r1 * x - self.w * x * x / 2.0

    def eval_V_array(self, x: np.ndarray) -> np.ndarray:
        return self.r1 - self.w * x

    def eval_y_array(self, x: np.ndarray) -> np.ndarray:
        L, w, EI = self.L, self.w, self.EI
        return (w * x * x) / (24.0 * EI) * (x * x + 6.0 * L * L - 4.0 * L * x)

    @property
    def peak_moment(self) -> float:
        return abs(self.r2)

    @property
    def peak_moment_x(self) -> float:
        return 0.0

    @property
    def peak_shear(self) -> float:
        return abs(self.r1)


_Builder = Callable[[float, float, Optional[float], float], LoadCase]

LOAD_CASES: Dict[Tuple[SupportType, LoadType], _Builder] = {
    (SupportType.SIMPLY_SUPPORTED, LoadType.POINT): SimplySupportedPoint.build,
    (SupportType.SIMPLY_SUPPORTED, LoadType.UDL): SimplySupportedUDL.build,
    (SupportType.CANTILEVER, LoadType.POINT): CantileverPoint.build,
    (SupportType.CANTILEVER, LoadType.UDL): CantileverUDL.build,
}


def _positive(value: float, field: str, exc: type) -> float:
    v = float(value)
    if not math.isfinite(v) or v <= 0.0:
        raise exc(f"{field} debe ser > 0 (valor: {value!r}).", field=field)
    return v


def check_point_position(a: Optional[float], L: float) -> float:
    """0 <= a <= L, si no OutOfRangePosition."""
    if a is None:
        raise OutOfRangePosition("Falta la posición de la carga puntual.", field="load_position")
    a = float(a)
    if not math.isfinite(a) or a < 0.0 or a > L:
        raise OutOfRangePosition(
            f"Posición de carga a={a:g} m fuera de la viga [0, {L:g}] m.",
            field="load_position",
        )
    return a


def build_load_case(
    *,
    support: SupportType,
    load_type: LoadType,
    L: float,
    load: float,
    E: float,
    I: float,
    a: Optional[float] = None,
) -> LoadCase:
    """
    Arma el caso de carga (todo en SI):
      - L [m], load = P [N] o w [N/m], E [Pa], I [m^4], a [m] (solo puntual)

    Verifica precondiciones antes de evaluar nada.
    """
    L = _positive(L, "span", InvalidLoad)
    load = _positive(load, "load", InvalidLoad)
    E = _positive(E, "elastic_modulus", InvalidLoad)
    I = _positive(I, "moment_of_inertia", InvalidGeometry)

    load_type = LoadType(load_type)
    if load_type is LoadType.POINT:
        a = check_point_position(a, L)
    else:
        a = None

    builder = LOAD_CASES[(SupportType(support), load_type)]
    return builder(L, load, a, E * I)
