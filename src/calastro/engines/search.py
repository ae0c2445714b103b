"""
calastro.engines.search
-----------------------
Search and inversion primitives shared by the solar, lunar and visibility
code. Every loop is bounded by a SearchLimits value; running out of steps
raises SearchExhaustedError instead of looping forever.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from ..core.config import SearchLimits, resolve
from ..core.errors import DomainError, SearchExhaustedError
from .angles import mod, mod3

IntPredicate = Callable[[int], bool]


def next_index(i: int, p: IntPredicate, *, limits: Optional[SearchLimits] = None) -> int:
    """Smallest integer k >= i such that p(k)."""
    lim = resolve(limits)
    k = i
    for _ in range(lim.max_steps):
        if p(k):
            return k
        k += 1
    raise SearchExhaustedError(f"next_index from {i}", lim.max_steps)


def final_index(i: int, p: IntPredicate, *, limits: Optional[SearchLimits] = None) -> int:
    """
    Last integer k >= i-1 such that p holds for every index in i..k.
    Returns i-1 when p(i) is already false.
    """
    lim = resolve(limits)
    k = i
    for _ in range(lim.max_steps):
        if not p(k):
            return k - 1
        k += 1
    raise SearchExhaustedError(f"final_index from {i}", lim.max_steps)


def binary_search(
    lo: float,
    hi: float,
    stop: Callable[[float, float], bool],
    go_left: Callable[[float], bool],
    *,
    limits: Optional[SearchLimits] = None,
) -> float:
    """
    Bisection on [lo, hi]. At each step x = (lo+hi)/2 is returned once
    stop(lo, hi) holds; otherwise the search continues in [lo, x] when
    go_left(x) and in [x, hi] otherwise.
    """
    if lo > hi:
        raise DomainError(f"binary_search needs lo <= hi, got [{lo}, {hi}]")
    lim = resolve(limits)
    for _ in range(lim.max_bisections):
        x = (lo + hi) / 2.0
        if stop(lo, hi):
            return x
        if go_left(x):
            hi = x
        else:
            lo = x
    raise SearchExhaustedError("binary_search", lim.max_bisections)


# A converged inversion further than this from its target means f did not
# pass through the target on [a, b].
_INVERSION_RESIDUAL_DEG = 1.0


def invert_angular(
    f: Callable[[float], float],
    y: float,
    a: float,
    b: float,
    epsilon: float = 1e-4,
    *,
    limits: Optional[SearchLimits] = None,
) -> float:
    """
    Find x in [a, b] with f(x) = y (mod 360) to within epsilon, by bisection.
    f must increase (mod 360) across [a, b].
    """
    if epsilon <= 0:
        raise DomainError(f"epsilon must be positive, got {epsilon}")
    x = binary_search(
        a,
        b,
        lambda lo, hi: hi - lo <= epsilon,
        lambda t: mod(f(t) - y, 360.0) < 180.0,
        limits=limits,
    )
    residual = mod3(f(x) - y, -180.0, 180.0)
    if abs(residual) > _INVERSION_RESIDUAL_DEG:
        raise DomainError(
            f"invert_angular: f does not reach {y} on [{a}, {b}] "
            f"(residual {residual:.4f} deg at {x}); is f increasing there?"
        )
    return x


def poly(x: float, coeffs: Sequence[float]) -> float:
    """Sum of coeffs[k] * x**k, by Horner's rule. poly(x, []) == 0."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc
