#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import numpy as np

from calastro.core.time import fixed_from_gregorian
from calastro.reference import deltat as dt


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "calastro[diagnostics]"') from e


def boundary_jumps() -> List[Tuple[int, float]]:
    """
    (year, jump in days) at the start of every branch of the ephemeris
    correction: value on January 1 of `year` minus value on December 31
    of the year before.
    """
    out = []
    for first, _last in dt.BRANCHES:
        before = dt.ephemeris_correction(fixed_from_gregorian(first - 1, 12, 31))
        after = dt.ephemeris_correction(fixed_from_gregorian(first, 1, 1))
        out.append((first, after - before))
    # the last branch ends where the long-term parabola takes over again
    top = dt.BRANCHES[0][1] + 1
    out.append((top, dt.ephemeris_correction(fixed_from_gregorian(top, 1, 1))
                - dt.ephemeris_correction(fixed_from_gregorian(top - 1, 12, 31))))
    return sorted(out)


def correction_curve(y0: int, y1: int) -> Tuple[np.ndarray, np.ndarray]:
    """Years y0..y1 and the correction (seconds) on July 1 of each."""
    years = np.arange(y0, y1 + 1, dtype=int)
    secs = np.array(
        [dt.ephemeris_correction_seconds(fixed_from_gregorian(int(y), 7, 1)) for y in years],
        dtype=float,
    )
    return years, secs


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Ephemeris correction: jumps at branch boundaries.")
    p.add_argument("--plot", action="store_true", help="plot the correction curve")
    p.add_argument("--y0", type=int, default=-1000, help="start year for the curve")
    p.add_argument("--y1", type=int, default=2200, help="end year for the curve")
    p.add_argument("--out", default="ephemeris_correction.png", help="output image filename")
    args = p.parse_args(argv)

    if args.y1 < args.y0:
        raise SystemExit("--y1 must be >= --y0")

    print(f"{'year':>6}  {'jump (s)':>12}")
    for year, jump in boundary_jumps():
        print(f"{year:>6}  {jump * 86400.0:>12.4f}")

    if args.plot:
        plt = _need_matplotlib()
        years, secs = correction_curve(args.y0, args.y1)
        fig, ax = plt.subplots(figsize=(10, 5))
        ax.plot(years, secs, linewidth=1.5)
        for first, _last in dt.BRANCHES:
            ax.axvline(first, color="0.8", linewidth=0.8)
        ax.set_xlabel("Year")
        ax.set_ylabel("TT - UT (seconds)")
        ax.set_yscale("symlog")
        ax.set_title("Ephemeris correction")
        fig.tight_layout()
        fig.savefig(args.out, dpi=150)
        print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
