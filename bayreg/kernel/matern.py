# bayreg/kernel/matern.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from math import sqrt
import bayreg.num as bnp
from .base import StationaryKernel

_SQRT3 = sqrt(3.0)


def matern32_kernel(h):
    """Matérn 3/2 correlation.

    .. math::
        \\rho(h) = (1 + \\sqrt{3}\\,h) \\exp(-\\sqrt{3}\\,h)

    Parameters
    ----------
    h : bnp.array
        Distances scaled by the length scale.

    Returns
    -------
    bnp.array
        Correlation values.
    """
    t = _SQRT3 * bnp.inftobigf(bnp.asarray(h))
    return (1.0 + t) * bnp.exp(-t)


class Matern32Kernel(StationaryKernel):
    """Matérn 3/2 kernel k(x, x') = σ² (1 + √3 r/ℓ) exp(-√3 r/ℓ), r = |x - x'|.

    Sample paths are once differentiable, visibly rougher than with
    the RBF kernel.
    """

    name = "Matérn 3/2"

    def correlation(self, h):
        return matern32_kernel(h)


MaternKernel = Matern32Kernel
