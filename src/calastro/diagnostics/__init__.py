"""Diagnostics package.

Light-weight numerical checks of the astronomical models (numpy only;
plots need the `diagnostics` extra for matplotlib).
"""

__all__ = ["deltat_boundaries", "lunations"]
