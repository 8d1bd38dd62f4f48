from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional

from beam_engine.domain.beam import BeamSpec, LoadType, SupportType
from beam_engine.domain.results import BeamResult
from beam_engine.domain.sections import CustomSection, IBeamSection, RectangularSection

_SUPPORT_TITLES = {
    SupportType.SIMPLY_SUPPORTED: "Simply Supported",
    SupportType.CANTILEVER: "Cantilever",
}
_LOAD_TITLES = {
    LoadType.POINT: "Point Load",
    LoadType.UDL: "UDL",
}


def _fmt_plain(v: float, decimals: int = 6) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


@dataclass(frozen=True)
class ResultSummary:
    """
    Resumen de un análisis para el historial (que vive fuera del motor).
    Entradas y resultados ya formateados como texto, en el orden de carga.
    """
    title: str
    inputs: Dict[str, str] = field(default_factory=dict)
    results: Dict[str, str] = field(default_factory=dict)

    def as_text(self, timestamp: Optional[datetime] = None) -> str:
        ts = (timestamp or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
        lines = [f"Beam Load Analysis ({ts})", "Inputs:"]
        lines += [f"- {k}: {v}" for k, v in self.inputs.items()]
        lines += ["", "Results:"]
        lines += [f"- {k}: {v}" for k, v in self.results.items()]
        return "\n".join(lines)


def _section_inputs(spec: BeamSpec) -> Dict[str, str]:
    s = spec.section
    if isinstance(s, RectangularSection):
        return {"Section": f"rectangular ({_fmt_plain(s.width_mm)}x{_fmt_plain(s.height_mm)}mm)"}
    if isinstance(s, IBeamSection):
        return {"Section": f"i-beam ({_fmt_plain(s.width_mm)}x{_fmt_plain(s.height_mm)}mm)"}
    if isinstance(s, CustomSection):
        return {
            "I": f"{_fmt_plain(s.moment_of_inertia_cm4)} cm⁴",
            "c": f"{_fmt_plain(s.distance_to_fiber_mm)} mm",
        }
    return {}


def summarize(spec: BeamSpec, result: BeamResult) -> ResultSummary:
    support = SupportType(spec.support)
    load_type = LoadType(spec.load_type)

    inputs: Dict[str, str] = {
        "Type": f"{support.value}, {load_type.value}",
        "Length": f"{_fmt_plain(spec.span_m)}m",
        "Load": f"{_fmt_plain(spec.load_kn)}kN" + ("/m" if load_type is LoadType.UDL else ""),
    }
    if load_type is LoadType.POINT and spec.load_position_m is not None:
        inputs["Position"] = f"{_fmt_plain(spec.load_position_m)}m"
    inputs.update(_section_inputs(spec))
    inputs["Material"] = f"E = {_fmt_plain(spec.elastic_modulus_gpa)} GPa"

    results = {
        "Max Moment": f"{abs(result.max_moment):.2f} kNm",
        "Max Shear": f"{result.max_shear:.2f} kN",
        "Max Stress": f"{result.max_stress:.2f} MPa",
        "Max Deflection": f"{result.max_deflection:.2f} mm",
    }

    return ResultSummary(
        title=f"{_SUPPORT_TITLES[support]} Beam, {_LOAD_TITLES[load_type]}",
        inputs=inputs,
        results=results,
    )
