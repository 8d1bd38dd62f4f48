from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

MPA_PER_GPA = 1_000.0


@dataclass(frozen=True)
class Material:
    """
    Material elástico lineal para el análisis de vigas.

    Campo mínimo: id y E_gpa (módulo de elasticidad).
    family / notes son solo informativos.
    """
    id: str
    E_gpa: float
    family: str = ""
    notes: str = ""


class MaterialDB:
    def __init__(self, materials: List[Material]):
        self.materials: List[Material] = list(materials)
        self.by_id: Dict[str, Material] = {m.id.strip(): m for m in self.materials if m.id.strip()}

    def ids(self) -> List[str]:
        return [m.id for m in self.materials]

    def get(self, mat_id: str) -> Optional[Material]:
        return self.by_id.get((mat_id or "").strip())

    @staticmethod
    def _norm(s: str) -> str:
        return (s or "").strip()

    @classmethod
    def from_txt(cls, path: str | Path) -> "MaterialDB":
        p = Path(path)
        if not p.exists():
            raise FileNotFoundError(f"No existe el archivo de materiales: {p}")

        lines = p.read_text(encoding="utf-8", errors="replace").splitlines()
        rows: List[List[str]] = []
        for ln in lines:
            t = ln.strip()
            if not t:
                continue
            if t.startswith("#") or t.startswith("//"):
                continue
            rows.append([c.strip() for c in t.split(";")])

        if not rows:
            raise ValueError("Archivo de materiales vacío o sin filas válidas.")

        # Detectar header
        header = [h.strip() for h in rows[0]]
        has_header = any(x.lower() in {"id", "material", "e_gpa", "e_mpa"} for x in header)
        data_rows = rows[1:] if has_header else rows

        def idx(name: str) -> Optional[int]:
            if not has_header:
                return None
            name_l = name.lower()
            for i, h in enumerate(header):
                if h.lower() == name_l:
                    return i
            return None

        i_id = idx("id")
        if i_id is None:
            i_id = idx("material")
        i_e_gpa = idx("e_gpa")
        i_family = idx("family")
        i_notes = idx("notes")

        # compatibilidad: E en MPa
        i_e_mpa = idx("e_mpa")

        # sin header: id;E_gpa[;family[;notes]]
        if not has_header:
            i_id, i_e_gpa, i_family, i_notes = 0, 1, 2, 3

        def get_cell(row: List[str], i: Optional[int]) -> str:
            if i is None:
                return ""
            return row[i] if i < len(row) else ""

        def try_float(s: str) -> Optional[float]:
            t = (s or "").strip().replace(",", ".")
            if t == "":
                return None
            try:
                return float(t)
            except ValueError:
                return None

        mats: List[Material] = []
        for r in data_rows:
            mid = cls._norm(get_cell(r, i_id))
            if not mid:
                continue

            E_gpa = try_float(get_cell(r, i_e_gpa))
            if E_gpa is None:
                E_mpa = try_float(get_cell(r, i_e_mpa))
                if E_mpa is not None:
                    E_gpa = E_mpa / MPA_PER_GPA

            if E_gpa is None or E_gpa <= 0.0:
                # sin E el material no sirve para calcular flechas
                continue

            mats.append(Material(
                id=mid,
                E_gpa=float(E_gpa),
                family=cls._norm(get_cell(r, i_family)),
                notes=cls._norm(get_cell(r, i_notes)),
            ))

        if not mats:
            raise ValueError("No se pudieron cargar materiales: faltan columnas o valores de E.")

        return cls(mats)


def default_materials_path() -> Path:
    """
    Ruta del TXT incluido en el paquete:
      src/beam_engine/data/materials_gpa.txt
    """
    here = Path(__file__).resolve()
    return here.parents[1] / "data" / "materials_gpa.txt"


def load_default_materials() -> MaterialDB:
    return MaterialDB.from_txt(default_materials_path())
