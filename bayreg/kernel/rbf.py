# bayreg/kernel/rbf.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import bayreg.num as bnp
from .base import StationaryKernel


def rbf_kernel(h):
    """Squared exponential (RBF) correlation.

    .. math::
        \\rho(h) = \\exp(-h^2 / 2)

    Parameters
    ----------
    h : bnp.array
        Distances scaled by the length scale.

    Returns
    -------
    bnp.array
        Correlation values.
    """
    with bnp.errstate(over="ignore"):
        return bnp.exp(-0.5 * bnp.square(h))


class RBFKernel(StationaryKernel):
    """RBF kernel k(x, x') = σ² exp(-(x - x')² / (2ℓ²)).

    Sample paths are infinitely differentiable.
    """

    name = "RBF"

    def correlation(self, h):
        return rbf_kernel(h)
