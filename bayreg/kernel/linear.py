# bayreg/kernel/linear.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import bayreg.num as bnp
from .base import Kernel


class LinearKernel(Kernel):
    """Linear kernel k(x, x') = σ_b² + σ² (x - c)(x' - c).

    Sample paths are straight lines; a GP with this kernel is Bayesian
    linear regression with an isotropic Gaussian prior on the slope
    and intercept, expressed around the center c.
    """

    name = "Linear"
    hyperparameter_names = ("signal_variance", "bias_variance", "center")

    def __init__(self, signal_variance=0.5, bias_variance=1.0, center=5.0):
        self.signal_variance = signal_variance
        self.bias_variance = bias_variance
        self.center = center

    def _evaluate(self, x1, x2):
        return self.bias_variance + self.signal_variance * (x1 - self.center) * (
            x2 - self.center
        )

    def compute_matrix(self, X1, X2=None):
        X1 = bnp.asarray(X1).reshape(-1)
        X2 = X1 if X2 is None else bnp.asarray(X2).reshape(-1)
        return self.bias_variance + self.signal_variance * bnp.outer(
            X1 - self.center, X2 - self.center
        )
