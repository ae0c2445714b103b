from __future__ import annotations

import math
from typing import Optional

from ..core.types import Degrees


# ------------------------------------------------------------
# Modular arithmetic
# ------------------------------------------------------------

def mod(x: float, y: float) -> float:
    """x - y*floor(x/y); result has the sign of y."""
    return x - y * math.floor(x / y)

def mod3(x: float, a: float, b: float) -> float:
    """Reduce x into [a, b) (or return x unchanged when a == b)."""
    if a == b:
        return x
    return a + mod(x - a, b - a)

def sign(y: float) -> int:
    if y < 0:
        return -1
    if y > 0:
        return 1
    return 0

def wrap_deg(x_deg: float) -> Degrees:
    """Wrap degrees to [0,360)."""
    return mod(x_deg, 360.0)


# ------------------------------------------------------------
# Degree-based trigonometry
# Inverse functions return angles reduced to [0, 360).
# ------------------------------------------------------------

def degrees_from_radians(theta: float) -> Degrees:
    return mod(math.degrees(theta), 360.0)

def radians_from_degrees(theta: Degrees) -> float:
    return math.radians(mod(theta, 360.0))

def sin_degrees(theta: Degrees) -> float:
    return math.sin(radians_from_degrees(theta))

def cos_degrees(theta: Degrees) -> float:
    return math.cos(radians_from_degrees(theta))

def tan_degrees(theta: Degrees) -> float:
    return math.tan(radians_from_degrees(theta))

def arcsin_degrees(x: float) -> Degrees:
    return degrees_from_radians(math.asin(x))

def arccos_degrees(x: float) -> Degrees:
    return degrees_from_radians(math.acos(x))

def arctan_degrees(y: float, x: float) -> Optional[Degrees]:
    """
    Arctangent of y/x in degrees, quadrant-aware, in [0, 360).
    Returns None when x and y are both 0 (direction undefined).
    """
    if x == 0 and y == 0:
        return None
    if x == 0:
        return mod(sign(y) * 90.0, 360.0)
    alpha = degrees_from_radians(math.atan(y / x))
    if x >= 0:
        return alpha
    return mod(alpha + 180.0, 360.0)


# ------------------------------------------------------------
# Units
# ------------------------------------------------------------

def angle(d: float, m: float, s: float) -> Degrees:
    """d degrees, m arcminutes, s arcseconds."""
    return d + (m + s / 60.0) / 60.0

def arcmins(x: float) -> Degrees:
    return x / 60.0

def arcsecs(x: float) -> Degrees:
    return x / 3600.0

def hr(x: float) -> float:
    """x hours as a fraction of a day."""
    return x / 24.0

def mn(x: float) -> float:
    """x minutes as a fraction of a day."""
    return x / 1440.0

def sec(x: float) -> float:
    """x seconds as a fraction of a day."""
    return x / 86400.0
