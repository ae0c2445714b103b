#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np

from calastro.reference import lunar


def new_moon_moments(n0: int, n1: int) -> np.ndarray:
    """nth_new_moon(n) for n in n0..n1 inclusive."""
    if n1 < n0:
        raise ValueError("n1 must be >= n0")
    return np.array([lunar.nth_new_moon(n) for n in range(n0, n1 + 1)], dtype=float)


def lunation_lengths(n0: int, n1: int) -> np.ndarray:
    """Lengths (days) of lunations n0..n1-1."""
    return np.diff(new_moon_moments(n0, n1))


def phase_residuals(n0: int, n1: int) -> np.ndarray:
    """Lunar phase at each new moon n0..n1, as a signed angle in [-180, 180)."""
    moments = new_moon_moments(n0, n1)
    phases = np.array([lunar.lunar_phase(t) for t in moments], dtype=float)
    return np.mod(phases + 180.0, 360.0) - 180.0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Lunation length and new-moon phase statistics.")
    p.add_argument("--n0", type=int, default=24724, help="first lunation index (24724 = Jan 2000)")
    p.add_argument("--count", type=int, default=120, help="number of lunations")
    args = p.parse_args(argv)

    if args.count < 1:
        raise SystemExit("--count must be >= 1")

    n1 = args.n0 + args.count
    lengths = lunation_lengths(args.n0, n1)
    resid = phase_residuals(args.n0, n1)

    print(f"lunations {args.n0}..{n1 - 1}")
    print(f"  mean length   = {lengths.mean():.6f} d (mean synodic month {lunar.MEAN_SYNODIC_MONTH})")
    print(f"  min / max     = {lengths.min():.4f} / {lengths.max():.4f} d")
    print(f"  phase at new moon: max |residual| = {np.abs(resid).max():.5f} deg")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
