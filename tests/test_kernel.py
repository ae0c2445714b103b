# tests/test_kernel.py

import math

import pytest

from calastro.core.config import SearchLimits
from calastro.core.errors import DomainError, SearchExhaustedError
from calastro.engines import angles as an
from calastro.engines.search import binary_search, final_index, invert_angular, next_index, poly
from calastro.engines.series import sigma


@pytest.mark.parametrize("x", [-3.5, 0.0, 1.0, 2.25, 1e6])
def test_poly_empty_and_constant(x):
    assert poly(x, []) == 0
    assert poly(x, [7.5]) == 7.5


def test_poly_horner():
    assert poly(2, [1, 2, 3]) == 17
    assert poly(-1, [1, 1, 1, 1]) == 0


def test_next_and_final_index():
    assert next_index(0, lambda i: i >= 5) == 5
    assert next_index(9, lambda i: i >= 5) == 9
    assert final_index(0, lambda i: i < 5) == 4
    assert final_index(7, lambda i: i < 5) == 6


def test_searches_are_bounded():
    small = SearchLimits(max_steps=10, max_bisections=5)
    with pytest.raises(SearchExhaustedError) as ei:
        next_index(0, lambda i: False, limits=small)
    assert ei.value.steps == 10
    with pytest.raises(SearchExhaustedError):
        final_index(0, lambda i: True, limits=small)
    with pytest.raises(SearchExhaustedError):
        binary_search(0.0, 1.0, lambda lo, hi: False, lambda x: True, limits=small)


def test_search_exhausted_is_runtime_error():
    with pytest.raises(RuntimeError):
        next_index(0, lambda i: False, limits=SearchLimits(max_steps=1))


def test_binary_search_sqrt2():
    x = binary_search(0.0, 2.0, lambda lo, hi: hi - lo < 1e-9, lambda t: t * t >= 2.0)
    assert x == pytest.approx(math.sqrt(2.0), abs=1e-8)


def test_binary_search_rejects_inverted_interval():
    with pytest.raises(DomainError):
        binary_search(1.0, 0.0, lambda lo, hi: True, lambda x: True)


@pytest.mark.parametrize("x0", [0.3, 1.7, 2.5, 4.9])
def test_invert_angular_recovers_argument(x0):
    f = lambda x: an.mod(30.0 * x + 350.0, 360.0)  # noqa: E731
    x = invert_angular(f, f(x0), 0.0, 5.0, epsilon=1e-6)
    assert x == pytest.approx(x0, abs=1e-5)


def test_invert_angular_rejects_unreachable_target():
    with pytest.raises(DomainError):
        invert_angular(lambda x: 10.0 * x, 200.0, 0.0, 1.0)
    with pytest.raises(DomainError):
        invert_angular(lambda x: x, 0.5, 0.0, 1.0, epsilon=0.0)


def test_sigma():
    assert sigma([[1, 2, 3], [4, 5, 6]], lambda a, b: a * b) == 32
    assert sigma([[], []], lambda a, b: a * b) == 0
    with pytest.raises(DomainError):
        sigma([[1, 2], [1]], lambda a, b: a + b)


def test_mod_and_mod3():
    assert an.mod(-1.0, 360.0) == 359.0
    assert an.mod(725.0, 360.0) == 5.0
    assert an.mod3(190.0, -180.0, 180.0) == -170.0
    assert an.mod3(5.0, 3.0, 3.0) == 5.0


def test_degree_trig():
    assert an.sin_degrees(30.0) == pytest.approx(0.5)
    assert an.cos_degrees(-60.0) == pytest.approx(0.5)
    assert an.arcsin_degrees(-0.5) == pytest.approx(330.0)
    assert an.arccos_degrees(0.0) == pytest.approx(90.0)


def test_arctan_degrees_quadrants():
    assert an.arctan_degrees(1.0, 1.0) == pytest.approx(45.0)
    assert an.arctan_degrees(1.0, -1.0) == pytest.approx(135.0)
    assert an.arctan_degrees(-1.0, -1.0) == pytest.approx(225.0)
    assert an.arctan_degrees(-1.0, 0.0) == pytest.approx(270.0)
    assert an.arctan_degrees(0.0, 0.0) is None


def test_units():
    assert an.angle(23, 26, 21.448) == pytest.approx(23.439291, abs=1e-6)
    assert an.hr(6) == 0.25
    assert an.mn(1440) == 1.0
    assert an.sec(86400) == 1.0
    assert an.arcmins(30) == 0.5
