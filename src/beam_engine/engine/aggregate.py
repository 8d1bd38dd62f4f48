from __future__ import annotations

import math
from typing import Sequence

from beam_engine.domain.errors import InvalidLoad
from beam_engine.domain.results import BeamResult, DiagramPoint, Reactions
from beam_engine.domain.units import n_to_kn, pa_to_mpa
from beam_engine.engine.load_cases import LoadCase


def _finite(value: float, field: str) -> float:
    if not math.isfinite(value):
        raise InvalidLoad(f"Resultado no finito para {field} (desborde numérico).", field=field)
    return value


def aggregate(
    load_case: LoadCase,
    diagram: Sequence[DiagramPoint],
    I: float,
    c: float,
) -> BeamResult:
    """
    Junta extremos y tensión máxima.

    Los picos de M y V salen de las fórmulas cerradas del caso (no del muestreo),
    así no dependen de dónde caen los 101 puntos. La flecha máxima sí se toma
    del diagrama. σ = |M|·c/I, calculada en Pa y pasada a MPa al final.
    """
    if not diagram:
        raise ValueError("Diagrama vacío.")

    M_peak_Nm = load_case.peak_moment
    sigma_Pa = abs(M_peak_Nm) * c / I

    max_deflection = max(abs(p.deflection_mm) for p in diagram)

    result = BeamResult(
        max_moment=_finite(n_to_kn(M_peak_Nm), "max_moment"),
        max_shear=_finite(n_to_kn(load_case.peak_shear), "max_shear"),
        max_stress=_finite(pa_to_mpa(sigma_Pa), "max_stress"),
        max_deflection=_finite(max_deflection, "max_deflection"),
        moment_of_inertia=float(I),
        reactions=Reactions(
            r1=_finite(n_to_kn(load_case.r1), "r1"),
            r2=_finite(n_to_kn(load_case.r2), "r2"),
        ),
        diagram=tuple(diagram),
        max_moment_x_m=float(load_case.peak_moment_x),
    )

    for p in result.diagram:
        if not (math.isfinite(p.moment_knm) and math.isfinite(p.shear_kn) and math.isfinite(p.deflection_mm)):
            raise InvalidLoad(f"Diagrama no finito en x={p.x_m:g} m (desborde numérico).", field="diagram")

    return result
