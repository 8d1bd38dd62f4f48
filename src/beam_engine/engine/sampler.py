from __future__ import annotations

from typing import Tuple

import numpy as np

from beam_engine.domain.results import DiagramPoint
from beam_engine.domain.units import n_to_kn, m_to_mm
from beam_engine.engine.load_cases import LoadCase

DIAGRAM_POINTS = 101


def sample_positions(L: float, n_points: int = DIAGRAM_POINTS) -> np.ndarray:
    """x_i = (L/(n-1))·i, con ambos extremos incluidos (el último es exactamente L)."""
    if n_points < 2:
        raise ValueError(f"n_points debe ser >= 2 (valor: {n_points}).")
    return np.linspace(0.0, float(L), int(n_points), endpoint=True, dtype=float)


def sample_diagram(load_case: LoadCase, n_points: int = DIAGRAM_POINTS) -> Tuple[DiagramPoint, ...]:
    """
    Discretiza la luz en `n_points` puntos equiespaciados y evalúa M, V, y.

    Salida en unidades de usuario:
    - M [kN·m] y V [kN] redondeados a 2 decimales
    - y [mm] sin redondear (el máximo se toma de estos valores)
    - x [m] sin redondear, para que la secuencia sea estrictamente creciente
    """
    x = sample_positions(load_case.L, n_points)
    # desbordes -> inf/nan; los rechaza aggregate()
    with np.errstate(over="ignore", invalid="ignore"):
        M = load_case.eval_M_array(x)
        V = load_case.eval_V_array(x)
        y = load_case.eval_y_array(x)

    return tuple(
        DiagramPoint(
            x_m=float(xi),
            moment_knm=round(n_to_kn(Mi), 2),
            shear_kn=round(n_to_kn(Vi), 2),
            deflection_mm=m_to_mm(yi),
        )
        for xi, Mi, Vi, yi in zip(x, M, V, y)
    )
