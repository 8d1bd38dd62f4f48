from __future__ import annotations

import math
from dataclasses import dataclass

from beam_engine.domain.errors import InvalidGeometry
from beam_engine.domain.sections import (
    CrossSection, RectangularSection, IBeamSection, CustomSection
)
from beam_engine.domain.units import mm_to_m, cm4_to_m4


def _rect_Ix_about_centroid(b: float, h: float) -> float:
    """Ix de un rectángulo b (ancho) x h (alto), respecto a su centroide (eje horizontal)."""
    return (b * h * h * h) / 12.0


def _require_positive(value: float, field: str) -> float:
    v = float(value)
    if not math.isfinite(v) or v <= 0.0:
        raise InvalidGeometry(f"{field} debe ser > 0 (valor: {value!r}).", field=field)
    return v


@dataclass(frozen=True)
class SectionProps:
    """Propiedades para flexión, en SI: I [m^4] y c (distancia a fibra extrema) [m]."""
    I_m4: float
    c_m: float


def _resolve_rectangular(s: RectangularSection) -> SectionProps:
    b = mm_to_m(_require_positive(s.width_mm, "width_mm"))
    h = mm_to_m(_require_positive(s.height_mm, "height_mm"))
    return SectionProps(I_m4=_rect_Ix_about_centroid(b, h), c_m=h / 2.0)


def _resolve_ibeam(s: IBeamSection) -> SectionProps:
    b = _require_positive(s.width_mm, "width_mm")
    h = _require_positive(s.height_mm, "height_mm")
    tf = _require_positive(s.flange_thickness_mm, "flange_thickness_mm")
    tw = _require_positive(s.web_thickness_mm, "web_thickness_mm")

    # el hueco (b - tw) x (h - 2tf) tiene que ser un rectángulo real
    if tw >= b:
        raise InvalidGeometry(
            f"Espesor de alma ({tw:g} mm) >= ancho de ala ({b:g} mm).",
            field="web_thickness_mm",
        )
    if 2.0 * tf >= h:
        raise InvalidGeometry(
            f"2 x espesor de ala ({2.0 * tf:g} mm) >= altura ({h:g} mm).",
            field="flange_thickness_mm",
        )

    b_m, h_m = mm_to_m(b), mm_to_m(h)
    tf_m, tw_m = mm_to_m(tf), mm_to_m(tw)

    I_full = _rect_Ix_about_centroid(b_m, h_m)
    I_void = _rect_Ix_about_centroid(b_m - tw_m, h_m - 2.0 * tf_m)
    return SectionProps(I_m4=I_full - I_void, c_m=h_m / 2.0)


def _resolve_custom(s: CustomSection) -> SectionProps:
    I_cm4 = _require_positive(s.moment_of_inertia_cm4, "moment_of_inertia_cm4")
    c_mm = _require_positive(s.distance_to_fiber_mm, "distance_to_fiber_mm")
    return SectionProps(I_m4=cm4_to_m4(I_cm4), c_m=mm_to_m(c_mm))


def resolve_section(section: CrossSection) -> SectionProps:
    """
    Devuelve (I, c) en SI para cualquiera de las tres secciones soportadas.
    Lanza InvalidGeometry si las dimensiones no forman una sección válida.
    """
    if isinstance(section, RectangularSection):
        return _resolve_rectangular(section)
    if isinstance(section, IBeamSection):
        return _resolve_ibeam(section)
    if isinstance(section, CustomSection):
        return _resolve_custom(section)
    raise InvalidGeometry(f"Tipo de sección no soportado: {type(section).__name__}", field="section")
