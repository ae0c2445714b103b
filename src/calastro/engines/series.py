"""
calastro.engines.series
-----------------------
Periodic-term tables and the generic sum over them.

A table is a tuple of rows; each row holds one value per named column.
`sigma` evaluates a body over the rows the way the classical series are
written (sum over i of body(a_i, b_i, ...)).
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ..core.errors import DomainError

Row = Tuple[float, ...]


def sigma(columns: Sequence[Sequence[float]], body: Callable[..., float]) -> float:
    """
    Sum of body(c0[i], c1[i], ...) over i.

    All columns must have the same length; an empty set of rows sums to 0.
    """
    if not columns:
        return 0.0
    n = len(columns[0])
    for col in columns:
        if len(col) != n:
            raise DomainError(f"sigma: ragged columns ({len(col)} vs {n})")
    total = 0.0
    for values in zip(*columns):
        total += body(*values)
    return total


@dataclass(frozen=True)
class PeriodicTable:
    """Named, read-only table of periodic-series coefficients."""
    name: str
    fields: Tuple[str, ...]
    rows: Tuple[Row, ...]

    def __post_init__(self):
        width = len(self.fields)
        for i, row in enumerate(self.rows):
            if len(row) != width:
                raise DomainError(f"{self.name}: row {i} has {len(row)} values, expected {width}")

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, field: str) -> Tuple[float, ...]:
        try:
            k = self.fields.index(field)
        except ValueError:
            raise KeyError(f"{self.name}: unknown column {field!r}. Available: {', '.join(self.fields)}") from None
        return tuple(row[k] for row in self.rows)

    @property
    def columns(self) -> Tuple[Tuple[float, ...], ...]:
        return tuple(self.column(f) for f in self.fields)

    def array(self, field: str) -> np.ndarray:
        return np.asarray(self.column(field), dtype=float)

    def evaluate(self, body: Callable[..., float]) -> float:
        return sigma(self.columns, body)

    # ------------------------------------------------------------
    # Vectorised path for tables laid out as
    # (amplitude, multiplier_1, ..., multiplier_k)
    # ------------------------------------------------------------

    @cached_property
    def _amplitudes(self) -> np.ndarray:
        return self.array(self.fields[0])

    @cached_property
    def _multipliers(self) -> np.ndarray:
        return np.array([row[1:] for row in self.rows], dtype=float)

    def _phases(self, arguments: Sequence[float]) -> np.ndarray:
        args = np.asarray(arguments, dtype=float)
        if args.shape != (len(self.fields) - 1,):
            raise DomainError(f"{self.name}: expected {len(self.fields) - 1} arguments, got {args.shape}")
        return np.radians(np.mod(self._multipliers @ args, 360.0))

    def _weights(self, factors: Optional[np.ndarray]) -> np.ndarray:
        if factors is None:
            return self._amplitudes
        return self._amplitudes * factors

    def sine_sum(self, arguments: Sequence[float], factors: Optional[np.ndarray] = None) -> float:
        """sum_i amplitude_i * factors_i * sin(sum_j multiplier_ij * arguments_j), angles in degrees."""
        return float(np.sum(self._weights(factors) * np.sin(self._phases(arguments))))

    def cosine_sum(self, arguments: Sequence[float], factors: Optional[np.ndarray] = None) -> float:
        return float(np.sum(self._weights(factors) * np.cos(self._phases(arguments))))

    def checksum(self, field: str) -> float:
        """Position-weighted sum of a column: sum((i+1) * v_i)."""
        col = self.array(field)
        return float(np.dot(np.arange(1, len(col) + 1), col))
