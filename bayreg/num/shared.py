# bayreg/num/shared.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""Backend-independent helpers for bayreg.num."""

from typing import Any

ArrayLike = Any


def symmetrize(A: ArrayLike) -> ArrayLike:
    """Return (A + Aᵀ) / 2."""
    return 0.5 * (A + A.T)


def max_abs_diff(A: ArrayLike, B: ArrayLike) -> float:
    """Infinity-norm distance max |A_ij - B_ij| as a Python float."""
    import bayreg.num as bnp

    return float(bnp.max(bnp.abs(bnp.asarray(A) - bnp.asarray(B))))
