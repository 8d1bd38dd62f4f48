import numpy as np
import pytest

from beam_engine.domain.beam import LoadType, SupportType
from beam_engine.domain.errors import InvalidGeometry, InvalidLoad, OutOfRangePosition
from beam_engine.engine.load_cases import (
    build_load_case, LoadCase, SimplySupportedPoint, SimplySupportedUDL, CantileverPoint, CantileverUDL
)

E = 200e9
I = 3.375e-4


def _case(support, load_type, L, load, a=None):
    return build_load_case(support=support, load_type=load_type, L=L, load=load, E=E, I=I, a=a)


def test_dispatch_table_picks_variant():
    assert isinstance(_case(SupportType.SIMPLY_SUPPORTED, LoadType.POINT, 10.0, 1e5, 5.0), SimplySupportedPoint)
    assert isinstance(_case(SupportType.SIMPLY_SUPPORTED, LoadType.UDL, 10.0, 1e5), SimplySupportedUDL)
    assert isinstance(_case(SupportType.CANTILEVER, LoadType.POINT, 10.0, 1e5, 5.0), CantileverPoint)
    assert isinstance(_case(SupportType.CANTILEVER, LoadType.UDL, 10.0, 1e5), CantileverUDL)
    # los valores str del Enum también sirven
    assert isinstance(_case("cantilever", "udl", 10.0, 1e5), CantileverUDL)


@pytest.mark.parametrize("L, P, a", [(10.0, 1e5, 5.0), (7.3, 12_345.0, 1.1), (3.0, 500.0, 0.0), (3.0, 500.0, 3.0)])
def test_simply_supported_point_equilibrium(L, P, a):
    lc = _case(SupportType.SIMPLY_SUPPORTED, LoadType.POINT, L, P, a)
    assert lc.r1 + lc.r2 == pytest.approx(P, rel=1e-9)
    # momento respecto del apoyo izquierdo
    assert lc.r2 * L == pytest.approx(P * a, rel=1e-9, abs=1e-9)


@pytest.mark.parametrize("L, w", [(10.0, 1e5), (4.2, 3_300.0)])
def test_udl_equilibrium(L, w):
    ss = _case(SupportType.SIMPLY_SUPPORTED, LoadType.UDL, L, w)
    assert ss.r1 + ss.r2 == pytest.approx(w * L, rel=1e-9)
    assert ss.r1 == ss.r2 == w * L / 2.0

    cl = _case(SupportType.CANTILEVER, LoadType.UDL, L, w)
    assert cl.r1 == pytest.approx(w * L, rel=1e-9)
    assert cl.r2 == pytest.approx(-w * L * L / 2.0, rel=1e-9)


def test_cantilever_point_reactions():
    lc = _case(SupportType.CANTILEVER, LoadType.POINT, 5.0, 50_000.0, 5.0)
    assert lc.r1 == 50_000.0
    assert lc.r2 == -250_000.0
    assert lc.peak_moment == 250_000.0
    assert lc.peak_shear == 50_000.0


def test_point_load_continuity_and_shear_jump():
    P, a = 1e5, 3.7
    lc = _case(SupportType.SIMPLY_SUPPORTED, LoadType.POINT, 10.0, P, a)
    eps = 1e-9
    assert lc.eval_M(a - eps) == pytest.approx(lc.eval_M(a), rel=1e-6)
    assert lc.eval_M(a + eps) == pytest.approx(lc.eval_M(a), rel=1e-6)
    assert lc.eval_M(a) == pytest.approx(lc.peak_moment, rel=1e-12)
    assert lc.eval_V(a - eps) - lc.eval_V(a) == pytest.approx(P, rel=1e-12)
    # flecha continua en a
    assert lc.eval_y(a - eps) == pytest.approx(lc.eval_y(a + eps), rel=1e-6)


def test_simply_supported_ends():
    for lc in (
        _case(SupportType.SIMPLY_SUPPORTED, LoadType.POINT, 10.0, 1e5, 2.0),
        _case(SupportType.SIMPLY_SUPPORTED, LoadType.UDL, 10.0, 1e5),
    ):
        assert lc.eval_M(0.0) == pytest.approx(0.0, abs=1e-6)
        assert lc.eval_M(10.0) == pytest.approx(0.0, abs=1e-6)
        assert lc.eval_y(0.0) == pytest.approx(0.0, abs=1e-15)
        assert lc.eval_y(10.0) == pytest.approx(0.0, abs=1e-15)


def test_udl_midspan():
    L, w = 10.0, 1e5
    lc = _case(SupportType.SIMPLY_SUPPORTED, LoadType.UDL, L, w)
    assert lc.eval_M(L / 2) == pytest.approx(w * L * L / 8.0, rel=1e-12)
    assert lc.eval_V(L / 2) == pytest.approx(0.0, abs=1e-6)
    assert lc.eval_y(L / 2) == pytest.approx(5 * w * L ** 4 / (384 * E * I), rel=1e-9)
    assert lc.peak_moment_x == L / 2


def test_cantilever_tip_values():
    L = 5.0
    pt = _case(SupportType.CANTILEVER, LoadType.POINT, L, 5e4, L)
    assert pt.eval_y(L) == pytest.approx(5e4 * L ** 3 / (3 * E * I), rel=1e-9)
    assert pt.eval_M(0.0) == pytest.approx(-5e4 * L)

    udl = _case(SupportType.CANTILEVER, LoadType.UDL, L, 2e4)
    assert udl.eval_y(L) == pytest.approx(2e4 * L ** 4 / (8 * E * I), rel=1e-9)
    assert udl.eval_M(L) == pytest.approx(0.0, abs=1e-6)
    assert udl.eval_V(L) == pytest.approx(0.0, abs=1e-9)


def test_cantilever_interior_point_is_zero_beyond_load():
    # aproximación conocida: M = V = 0 más allá de a
    P, a = 1e4, 2.0
    lc = _case(SupportType.CANTILEVER, LoadType.POINT, 5.0, P, a)
    assert lc.eval_M(3.0) == 0.0
    assert lc.eval_V(3.0) == 0.0
    assert lc.eval_M(1.0) == pytest.approx(-P * a + P * 1.0)
    # flecha lineal más allá de a
    slope = P * a * a / (2 * E * I)
    assert lc.eval_y(4.0) - lc.eval_y(3.0) == pytest.approx(slope, rel=1e-9)


@pytest.mark.parametrize("kwargs, exc, field", [
    (dict(L=0.0, load=1e5, E=E, I=I, a=0.0), InvalidLoad, "span"),
    (dict(L=10.0, load=-1.0, E=E, I=I, a=5.0), InvalidLoad, "load"),
    (dict(L=10.0, load=1e5, E=0.0, I=I, a=5.0), InvalidLoad, "elastic_modulus"),
    (dict(L=10.0, load=1e5, E=E, I=0.0, a=5.0), InvalidGeometry, "moment_of_inertia"),
    (dict(L=10.0, load=1e5, E=E, I=I, a=10.5), OutOfRangePosition, "load_position"),
    (dict(L=10.0, load=1e5, E=E, I=I, a=-0.1), OutOfRangePosition, "load_position"),
    (dict(L=10.0, load=1e5, E=E, I=I, a=None), OutOfRangePosition, "load_position"),
])
def test_preconditions(kwargs, exc, field):
    with pytest.raises(exc) as ei:
        build_load_case(support=SupportType.SIMPLY_SUPPORTED, load_type=LoadType.POINT, **kwargs)
    assert ei.value.field == field


def test_udl_ignores_position():
    lc = build_load_case(
        support=SupportType.CANTILEVER, load_type=LoadType.UDL, L=10.0, load=1e5, E=E, I=I, a=99.0
    )
    assert isinstance(lc, CantileverUDL)


def test_load_case_base_is_abstract():
    with pytest.raises(TypeError):
        LoadCase(L=1.0, EI=1.0, r1=0.0, r2=0.0)


def test_vectorised_evaluators_match_scalar():
    lc = _case(SupportType.SIMPLY_SUPPORTED, LoadType.POINT, 10.0, 1e5, 3.0)
    xs = np.array([0.0, 2.5, 3.0, 7.5, 10.0])
    assert list(lc.eval_M_array(xs)) == [lc.eval_M(x) for x in xs]
    assert list(lc.eval_V_array(xs)) == [lc.eval_V(x) for x in xs]
    assert list(lc.eval_y_array(xs)) == [lc.eval_y(x) for x in xs]
