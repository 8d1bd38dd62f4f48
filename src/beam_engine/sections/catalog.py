from __future__ import annotations

from typing import Dict, List, Union

from beam_engine.domain.sections import IBeamSection, RectangularSection

# Perfiles IPE (mm): h, b, tw, tf
I_BEAM_SIZES: Dict[str, IBeamSection] = {
    "IPE 80": IBeamSection(width_mm=46.0, height_mm=80.0, flange_thickness_mm=5.2, web_thickness_mm=3.8),
    "IPE 100": IBeamSection(width_mm=55.0, height_mm=100.0, flange_thickness_mm=5.7, web_thickness_mm=4.1),
    "IPE 120": IBeamSection(width_mm=64.0, height_mm=120.0, flange_thickness_mm=6.3, web_thickness_mm=4.4),
    "IPE 140": IBeamSection(width_mm=73.0, height_mm=140.0, flange_thickness_mm=6.9, web_thickness_mm=4.7),
    "IPE 160": IBeamSection(width_mm=82.0, height_mm=160.0, flange_thickness_mm=7.4, web_thickness_mm=5.0),
}

RECTANGULAR_SIZES: Dict[str, RectangularSection] = {
    "150 x 300 mm": RectangularSection(width_mm=150.0, height_mm=300.0),
    "200 x 400 mm": RectangularSection(width_mm=200.0, height_mm=400.0),
    "250 x 500 mm": RectangularSection(width_mm=250.0, height_mm=500.0),
    "300 x 600 mm": RectangularSection(width_mm=300.0, height_mm=600.0),
}


def standard_section_names() -> List[str]:
    return list(I_BEAM_SIZES) + list(RECTANGULAR_SIZES)


def standard_section(name: str) -> Union[IBeamSection, RectangularSection]:
    key = (name or "").strip()
    if key in I_BEAM_SIZES:
        return I_BEAM_SIZES[key]
    if key in RECTANGULAR_SIZES:
        return RECTANGULAR_SIZES[key]
    raise KeyError(f"Sección estándar desconocida: {name!r}. Disponibles: {standard_section_names()}")
