# bayreg/core/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Small utilities used across `bayreg.core` modules.

This file hosts:
- Shape/type validation & conversion helpers for (x, y, xt)
- Credible level to normal quantile conversion
- Credible band construction from predictive means and variances
"""
from typing import NamedTuple
import bayreg.num as bnp

# Quantiles used by the interactive views; other levels go through norm.ppf.
_Z_TABLE = {0.90: 1.645, 0.95: 1.96, 0.99: 2.576}


class CredibleBand(NamedTuple):
    lower: bnp.ndarray
    upper: bnp.ndarray
    mean: bnp.ndarray


def ensure_shapes_and_type(*, x=None, y=None, xt=None, convert: bool = True):
    """Validate and adjust shapes/types of input arrays.

    Parameters
    ----------
    x : array_like, optional
        Training inputs, (n,) or (n, 1).
    y : array_like, optional
        Training outputs, (n,) or (n, 1).
    xt : array_like, optional
        Evaluation grid, (m,) or (m, 1).
    convert : bool, optional
        Convert arrays to backend type (default True).

    Returns
    -------
    tuple
        (x, y, xt) as 1-D arrays (None entries are passed through).

    Notes
    -----
    The checks are plain asserts: they run in normal interpreter mode
    and vanish under ``python -O``.
    """

    def _flatten(name, a):
        if convert:
            a = bnp.asarray(a)
        if len(a.shape) == 2:
            assert a.shape[1] == 1, f"{name} should only have one column if it's a 2D array"
            a = a.reshape(-1)
        else:
            assert len(a.shape) == 1, f"{name} should be 1D or a 2D column array"
        return a

    if x is not None:
        x = _flatten("x", x)
    if y is not None:
        y = _flatten("y", y)
    if xt is not None:
        xt = _flatten("xt", xt)

    if x is not None and y is not None:
        assert x.shape[0] == y.shape[0], "x and y must have the same number of rows"

    return x, y, xt


def z_for_level(level: float) -> float:
    """Two-sided standard normal quantile for a credible level.

    Parameters
    ----------
    level : float
        Credible level in (0, 1), e.g. 0.95.

    Returns
    -------
    float
        1.645, 1.96 and 2.576 for 0.90, 0.95 and 0.99; otherwise
        Φ⁻¹((1 + level) / 2).
    """
    for known, z in _Z_TABLE.items():
        if abs(level - known) < 1e-12:
            return z
    if not 0.0 < level < 1.0:
        raise ValueError(f"credible level must lie in (0, 1), got {level}")
    return float(bnp.normal.ppf(0.5 * (1.0 + level)))


def credible_band(mean, variance, level: float = 0.95) -> CredibleBand:
    """Return mean ± z·sqrt(variance) as a CredibleBand."""
    z = z_for_level(level)
    mean = bnp.asarray(mean)
    half_width = z * bnp.sqrt(bnp.maximum(bnp.asarray(variance), 0.0))
    return CredibleBand(lower=mean - half_width, upper=mean + half_width, mean=mean)
