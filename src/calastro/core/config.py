from __future__ import annotations

import os
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Mapping, Optional

from .errors import ConfigError


@dataclass(frozen=True)
class SearchLimits:
    """
    Upper bounds for the iterative searches.

    The reference algorithms assume every search terminates; these bounds turn
    a non-terminating search into a SearchExhaustedError.

      max_steps                  integer forward scans (days, lunation indices)
      max_bisections             halvings in binary_search
      max_depression_iterations  fixed-point rounds in moment_of_depression
    """
    max_steps: int = 5000
    max_bisections: int = 200
    max_depression_iterations: int = 100

    def __post_init__(self) -> None:
        for name in ("max_steps", "max_bisections", "max_depression_iterations"):
            v = getattr(self, name)
            if not isinstance(v, int) or v <= 0:
                raise ConfigError(f"{name} must be a positive int, got {v!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchLimits":
        """
        Build limits from the environment:
          CALASTRO_MAX_STEPS, CALASTRO_MAX_BISECTIONS, CALASTRO_MAX_DEPRESSION_ITERATIONS
        Unset or empty variables keep the defaults.
        """
        env = os.environ if environ is None else environ
        out = cls()
        for var, field in _ENV_FIELDS.items():
            raw = env.get(var, "").strip()
            if not raw:
                continue
            try:
                value = int(raw)
            except ValueError as e:
                raise ConfigError(f"{var} must be an integer, got {raw!r}") from e
            out = replace(out, **{field: value})
        return out


_ENV_FIELDS = {
    "CALASTRO_MAX_STEPS": "max_steps",
    "CALASTRO_MAX_BISECTIONS": "max_bisections",
    "CALASTRO_MAX_DEPRESSION_ITERATIONS": "max_depression_iterations",
}


@lru_cache(maxsize=1)
def default_limits() -> SearchLimits:
    """Process-wide limits, read once from the environment."""
    return SearchLimits.from_env()


def resolve(limits: Optional[SearchLimits]) -> SearchLimits:
    return default_limits() if limits is None else limits
