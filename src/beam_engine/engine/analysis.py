from __future__ import annotations

import logging

from beam_engine.domain.beam import BeamSpec, LoadType
from beam_engine.domain.errors import BeamValidationError
from beam_engine.domain.results import BeamResult
from beam_engine.domain.units import kn_to_n, gpa_to_pa
from beam_engine.engine.aggregate import aggregate
from beam_engine.engine.load_cases import build_load_case
from beam_engine.engine.sampler import sample_diagram
from beam_engine.sections.resolver import resolve_section

logger = logging.getLogger(__name__)


def compute_beam_result(spec: BeamSpec) -> BeamResult:
    """
    Análisis completo de una viga: BeamSpec (unidades de usuario) -> BeamResult.

    Flujo:
      1) unidades de usuario -> SI
      2) sección -> (I, c)
      3) caso de carga (reacciones + M/V/y)
      4) diagrama de 101 puntos
      5) extremos y tensión

    Si alguna entrada no es válida lanza una subclase de BeamValidationError
    antes de evaluar el caso; nunca devuelve un resultado parcial.
    """
    logger.debug(
        "Análisis: %s / %s, L=%s m, carga=%s, a=%s, E=%s GPa, sección=%r",
        spec.support, spec.load_type, spec.span_m, spec.load_kn,
        spec.load_position_m, spec.elastic_modulus_gpa, spec.section,
    )
    try:
        # P [kN] -> N, o w [kN/m] -> N/m (mismo factor)
        load_si = kn_to_n(spec.load_kn)
        E_si = gpa_to_pa(spec.elastic_modulus_gpa)

        props = resolve_section(spec.section)
        load_case = build_load_case(
            support=spec.support,
            load_type=spec.load_type,
            L=spec.span_m,
            load=load_si,
            E=E_si,
            I=props.I_m4,
            a=spec.load_position_m if LoadType(spec.load_type) is LoadType.POINT else None,
        )
        diagram = sample_diagram(load_case)
        result = aggregate(load_case, diagram, props.I_m4, props.c_m)
    except BeamValidationError as exc:
        logger.warning("Entrada rechazada (%s): %s", type(exc).__name__, exc)
        raise

    logger.debug(
        "Resultado: Mmax=%.2f kN·m, Vmax=%.2f kN, σmax=%.2f MPa, ymax=%.3f mm",
        result.max_moment, result.max_shear, result.max_stress, result.max_deflection,
    )
    return result
