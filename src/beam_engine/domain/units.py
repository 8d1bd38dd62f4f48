from __future__ import annotations

# Unidades base internas (SI): N, m, Pa, m^4.
# Unidades de usuario: kN, GPa, mm, cm^4 (y MPa para tensiones).

KN_TO_N = 1_000.0
GPA_TO_PA = 1e9
MM_PER_M = 1_000.0
CM4_PER_M4 = 1e8
PA_PER_MPA = 1e6


def kn_to_n(v_kn: float) -> float:
    """kN -> N (también kN/m -> N/m y kN·m -> N·m)."""
    return float(v_kn) * KN_TO_N


def n_to_kn(v_n: float) -> float:
    return float(v_n) / KN_TO_N


def gpa_to_pa(v_gpa: float) -> float:
    return float(v_gpa) * GPA_TO_PA


def pa_to_gpa(v_pa: float) -> float:
    return float(v_pa) / GPA_TO_PA


def mm_to_m(v_mm: float) -> float:
    return float(v_mm) / MM_PER_M


def m_to_mm(v_m: float) -> float:
    return float(v_m) * MM_PER_M


def cm4_to_m4(v_cm4: float) -> float:
    return float(v_cm4) / CM4_PER_M4


def m4_to_cm4(v_m4: float) -> float:
    return float(v_m4) * CM4_PER_M4


def pa_to_mpa(v_pa: float) -> float:
    return float(v_pa) / PA_PER_MPA
