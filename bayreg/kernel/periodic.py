# bayreg/kernel/periodic.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import bayreg.num as bnp
from .base import StationaryKernel


def periodic_kernel(h, length_scale):
    """Periodic (exp-sine-squared) correlation.

    .. math::
        \\rho(h) = \\exp(-2 \\sin^2(h) / \\ell^2)

    Parameters
    ----------
    h : bnp.array
        Distances scaled by period / π.
    length_scale : float

    Returns
    -------
    bnp.array
        Correlation values.
    """
    with bnp.errstate(over="ignore", divide="ignore", invalid="ignore"):
        sh = bnp.sin(h)
        s = bnp.where(sh == 0.0, 0.0, sh / length_scale)
        return bnp.exp(-2.0 * s * s)


class PeriodicKernel(StationaryKernel):
    """Periodic kernel k(x, x') = σ² exp(-2 sin²(π r / p) / ℓ²), r = |x - x'|.

    Functions repeat exactly with period p.
    """

    name = "Periodic"
    hyperparameter_names = ("length_scale", "signal_variance", "period")

    def __init__(self, length_scale=1.0, signal_variance=1.0, period=3.0):
        super().__init__(length_scale, signal_variance)
        self.period = period

    @property
    def distance_scale(self):
        return self.period / bnp.pi

    def correlation(self, h):
        return periodic_kernel(h, self.length_scale)
