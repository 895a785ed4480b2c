# bayreg/kernel/base.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Common interface of the covariance functions.

A kernel is a stateless, symmetric function k(x1, x2) of two scalar
inputs, parameterized by hyperparameters that are plain mutable
attributes. Changing an attribute changes every later evaluation;
nothing is cached here.
"""
import bayreg.num as bnp


class Kernel:
    """Base class of one-dimensional covariance functions.

    Subclasses set `name` and `hyperparameter_names` and implement
    `_evaluate(x1, x2)`, an elementwise (broadcasting) evaluation.

    Methods
    -------
    compute(x1, x2)
        Scalar covariance k(x1, x2).
    compute_matrix(X1, X2=None)
        Matrix [k(X1[i], X2[j])] of shape (len(X1), len(X2)).
    compute_diag(X)
        Vector [k(X[i], X[i])].
    profile(distances, reference=0.0)
        Vector [k(reference, reference + d)], the kernel shape as a
        function of the lag d.
    """

    name = "Kernel"
    hyperparameter_names = ()

    @property
    def parameters(self):
        return {p: getattr(self, p) for p in self.hyperparameter_names}

    def __repr__(self):
        args = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
        return f"{self.__class__.__name__}({args})"

    def _evaluate(self, x1, x2):
        raise NotImplementedError

    def compute(self, x1, x2):
        return float(self._evaluate(bnp.asarray(x1), bnp.asarray(x2)))

    def compute_matrix(self, X1, X2=None):
        X1 = bnp.asarray(X1).reshape(-1)
        X2 = X1 if X2 is None else bnp.asarray(X2).reshape(-1)
        return self._evaluate(X1[:, None], X2[None, :])

    def compute_diag(self, X):
        X = bnp.asarray(X).reshape(-1)
        return self._evaluate(X, X)

    def profile(self, distances, reference=0.0):
        d = bnp.asarray(distances)
        return self._evaluate(bnp.full(d.shape, reference), reference + d)

    def __call__(self, X1, X2=None):
        return self.compute_matrix(X1, X2)


class StationaryKernel(Kernel):
    """Kernels of the form k(x1, x2) = σ² ρ(|x1 - x2| / s).

    Subclasses provide the distance scale s (`distance_scale`) and the
    correlation ρ (`correlation`). Distances go through
    `bnp.scaled_distance`, so a vanishing scale sends off-diagonal
    distances to +inf and keeps the diagonal at 0.
    """

    hyperparameter_names = ("length_scale", "signal_variance")

    def __init__(self, length_scale=1.0, signal_variance=1.0):
        self.length_scale = length_scale
        self.signal_variance = signal_variance

    @property
    def distance_scale(self):
        return self.length_scale

    def correlation(self, h):
        raise NotImplementedError

    def _evaluate(self, x1, x2):
        d = bnp.abs(x1 - x2)
        with bnp.errstate(over="ignore", divide="ignore", invalid="ignore"):
            h = bnp.where(d == 0.0, 0.0, d / self.distance_scale)
        return self.signal_variance * self.correlation(h)

    def compute_matrix(self, X1, X2=None):
        X1 = bnp.asarray(X1).reshape(-1)
        X2 = X1 if X2 is None else bnp.asarray(X2).reshape(-1)
        h = bnp.scaled_distance(X1, X2, self.distance_scale)
        return self.signal_variance * self.correlation(h)

    def compute_diag(self, X):
        X = bnp.asarray(X).reshape(-1)
        h = bnp.scaled_distance_elementwise(X, None, self.distance_scale)
        return self.signal_variance * self.correlation(h)
