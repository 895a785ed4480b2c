# bayreg/core/blr.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Bayesian linear regression with a conjugate Gaussian prior.

Model
-----
    y = β₀ + β₁ x + ε,   ε ~ N(0, σ²),   σ² known
    β = [β₀, β₁]ᵀ ~ N(μ₀, Σ₀)          (intercept, slope)

Posterior
---------
    Σₙ = (Σ₀⁻¹ + σ⁻² XᵀX)⁻¹
    μₙ = Σₙ (Σ₀⁻¹ μ₀ + σ⁻² Xᵀy)

where X is the n x 2 design matrix with rows [1, xᵢ]. The parameter
vector is fixed at two entries.
"""
from typing import NamedTuple
import bayreg.num as bnp
from bayreg.config import get_logger

from . import utils
from .linalg import (
    matrix_add,
    matrix_inverse,
    matrix_multiply,
    matrix_scale,
    matrix_transpose,
    matrix_vector_multiply,
    gaussian_2d_pdf,
)
from .sampling import sample_multivariate_normal

_logger = get_logger()

PRIOR_PRESETS = {
    "uninformed": ([0.0, 0.0], [[10.0, 0.0], [0.0, 10.0]]),
    "informative": ([2.0, 1.5], [[1.0, 0.0], [0.0, 1.0]]),
    "wrong": ([-3.0, -2.0], [[1.0, 0.0], [0.0, 1.0]]),
}


class ContourData(NamedTuple):
    """Density grid; density[j, i] is the value at (x_grid[i], y_grid[j])."""

    x_grid: bnp.ndarray
    y_grid: bnp.ndarray
    density: bnp.ndarray


class OLSEstimate(NamedTuple):
    intercept: float
    slope: float


def design_matrix(x):
    """Rows [1, xᵢ]."""
    x = bnp.asarray(x).reshape(-1)
    return bnp.stack((bnp.ones(x.shape), x), axis=1)


class BayesianLinearRegression:
    """Bayesian linear regression on (intercept, slope).

    Attributes
    ----------
    prior_mean : ndarray, shape (2,)
        μ₀, ordered [intercept, slope].
    prior_cov : ndarray, shape (2, 2)
        Σ₀.
    noise_variance : float
        Known observation noise variance σ².
    posterior_mean : ndarray, shape (2,)
        μₙ; equal to μ₀ while the model has no data.
    posterior_cov : ndarray, shape (2, 2)
        Σₙ; equal to Σ₀ while the model has no data.
    x_train, y_train : ndarray, shape (n,)
        Training set of the last fit.

    Examples
    --------
    >>> from bayreg.misc.datasets import make_bayesian_linear_data
    >>> x, y = make_bayesian_linear_data(50, 1.5, 2.0, 1.5, seed=42)
    >>> blr = BayesianLinearRegression(noise_variance=1.5 ** 2)
    >>> blr.fit(x, y)
    >>> band = blr.get_credible_band(bnp.linspace(-3, 7, 61), level=0.95)
    """

    def __init__(self, prior_mean=None, prior_cov=None, noise_variance=1.0):
        default_mean, default_cov = PRIOR_PRESETS["uninformed"]
        self.prior_mean = None
        self.prior_cov = None
        self._set_prior(
            default_mean if prior_mean is None else prior_mean,
            default_cov if prior_cov is None else prior_cov,
        )
        self.noise_variance = noise_variance
        self.x_train = bnp.zeros((0,))
        self.y_train = bnp.zeros((0,))
        self.posterior_mean = self.prior_mean.copy()
        self.posterior_cov = self.prior_cov.copy()

    @classmethod
    def from_preset(cls, name, noise_variance=1.0):
        """Model with one of the named priors of PRIOR_PRESETS."""
        if name not in PRIOR_PRESETS:
            raise ValueError(
                f"Invalid prior preset {name!r}. "
                f"Supported presets are {tuple(PRIOR_PRESETS)}."
            )
        mean, cov = PRIOR_PRESETS[name]
        return cls(mean, cov, noise_variance)

    def __repr__(self):
        return str("<bayreg.core.BayesianLinearRegression object> " + hex(id(self)))

    def __str__(self):
        return (
            f"Bayesian linear regression:\n"
            f"  Prior mean: {self.prior_mean}\n"
            f"  Prior covariance: {self.prior_cov.tolist()}\n"
            f"  Noise variance: {self.noise_variance}\n"
            f"  Observations: {self.x_train.shape[0]}\n"
            f"  Posterior mean: {self.posterior_mean}"
        )

    @property
    def has_data(self):
        return self.x_train.shape[0] > 0

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def _set_prior(self, mean, cov):
        mean = bnp.array(mean).reshape(-1)
        cov = bnp.array(cov)
        assert mean.shape == (2,), "prior mean must have 2 entries (intercept, slope)"
        assert cov.shape == (2, 2), "prior covariance must be 2 x 2"
        self.prior_mean = mean
        self.prior_cov = cov

    def _update_posterior(self):
        if not self.has_data:
            self.posterior_mean = self.prior_mean.copy()
            self.posterior_cov = self.prior_cov.copy()
            return

        X = design_matrix(self.x_train)
        Xt = matrix_transpose(X)

        # Σ₀⁻¹
        prior_precision = matrix_inverse(self.prior_cov)

        # Σₙ = (Σ₀⁻¹ + σ⁻² XᵀX)⁻¹
        scaled_XtX = matrix_scale(matrix_multiply(Xt, X), 1.0 / self.noise_variance)
        self.posterior_cov = matrix_inverse(matrix_add(prior_precision, scaled_XtX))

        # μₙ = Σₙ (Σ₀⁻¹ μ₀ + σ⁻² Xᵀy)
        Xty = matrix_vector_multiply(Xt, self.y_train)
        combined = (
            matrix_vector_multiply(prior_precision, self.prior_mean)
            + Xty / self.noise_variance
        )
        self.posterior_mean = matrix_vector_multiply(self.posterior_cov, combined)

    def fit(self, x, y):
        """Compute the posterior given the data (x, y).

        The training set replaces any previous one. With no data the
        posterior is reset to the prior.

        Parameters
        ----------
        x : array_like, shape (n,)
        y : array_like, shape (n,)
        """
        x, y, _ = utils.ensure_shapes_and_type(x=x, y=y)
        self.x_train = bnp.copy(x)
        self.y_train = bnp.copy(y)
        self._update_posterior()
        _logger.debug(
            "BayesianLinearRegression.fit: n=%d, posterior mean=%s",
            self.x_train.shape[0],
            self.posterior_mean,
        )

    def set_prior(self, mean, cov):
        """Replace the prior; the posterior is recomputed from scratch."""
        self._set_prior(mean, cov)
        self._update_posterior()

    def set_noise(self, noise_variance):
        """Replace σ²; the posterior is recomputed from scratch."""
        self.noise_variance = noise_variance
        self._update_posterior()

    def reset(self):
        """Drop the training set and return to the prior."""
        self.x_train = bnp.zeros((0,))
        self.y_train = bnp.zeros((0,))
        self._update_posterior()

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def predict(self, x_new):
        """Posterior predictive mean and variance.

        Parameters
        ----------
        x_new : float or array_like, shape (m,)

        Returns
        -------
        mean : float or ndarray, shape (m,)
            μₙᵀ φ with φ = [1, x_new].
        variance : float or ndarray, shape (m,)
            φᵀ Σₙ φ + σ², i.e. the variance of a new observation, not
            of the regression line.
        """
        scalar_input = bnp.asarray(x_new).ndim == 0
        phi = design_matrix(x_new)
        mean = matrix_vector_multiply(phi, self.posterior_mean)
        param_variance = bnp.einsum("ij,jk,ik->i", phi, self.posterior_cov, phi)
        variance = param_variance + self.noise_variance
        if scalar_input:
            return float(mean[0]), float(variance[0])
        return mean, variance

    def get_credible_band(self, x_range, level=0.95):
        """Credible band of the posterior predictive over `x_range`.

        Returns
        -------
        CredibleBand
            (lower, upper, mean), aligned with `x_range`.
        """
        _, _, xt = utils.ensure_shapes_and_type(xt=bnp.asarray(x_range).reshape(-1))
        mean, variance = self.predict(xt)
        return utils.credible_band(mean, variance, level)

    # ------------------------------------------------------------------
    # Parameter space
    # ------------------------------------------------------------------
    def sample_posterior_weights(self, n_samples, rng=None):
        """Draw parameter vectors [intercept, slope] from the posterior.

        Parameters
        ----------
        n_samples : int
        rng : None, int or random stream, optional

        Returns
        -------
        ndarray, shape (n_samples, 2)
        """
        return sample_multivariate_normal(
            self.posterior_mean, self.posterior_cov, n_samples, rng
        )

    def sample_posterior_lines(self, x_range, n_samples, rng=None):
        """Regression lines β₀ + β₁ x drawn from the posterior.

        Returns
        -------
        ndarray, shape (n_samples, len(x_range))
        """
        x = bnp.asarray(x_range).reshape(-1)
        w = self.sample_posterior_weights(n_samples, rng)
        return w[:, 0:1] + w[:, 1:2] * x[None, :]

    def get_prior_contours(self, slope_range, intercept_range, resolution):
        """Prior density on a (slope, intercept) grid."""
        return self._compute_contours(
            self.prior_mean, self.prior_cov, slope_range, intercept_range, resolution
        )

    def get_posterior_contours(self, slope_range, intercept_range, resolution):
        """Posterior density on a (slope, intercept) grid."""
        return self._compute_contours(
            self.posterior_mean,
            self.posterior_cov,
            slope_range,
            intercept_range,
            resolution,
        )

    @staticmethod
    def _compute_contours(mean, cov, slope_range, intercept_range, resolution):
        x_grid = bnp.linspace(slope_range[0], slope_range[1], resolution)
        y_grid = bnp.linspace(intercept_range[0], intercept_range[1], resolution)

        # mean is [intercept, slope] but slope is shown on x, intercept on y
        mean2d = (mean[1], mean[0])
        cov2d = bnp.array([[cov[1, 1], cov[1, 0]], [cov[0, 1], cov[0, 0]]])

        xx, yy = bnp.meshgrid(x_grid, y_grid)
        density = gaussian_2d_pdf(xx, yy, mean2d, cov2d)
        return ContourData(x_grid=x_grid, y_grid=y_grid, density=density)

    # ------------------------------------------------------------------
    # Frequentist baseline
    # ------------------------------------------------------------------
    @staticmethod
    def ols_estimate(x, y):
        """Ordinary least squares fit of y = intercept + slope x.

        Coincides with the posterior mode under a flat prior.

        Returns
        -------
        OLSEstimate
            (0, 0) without data; slope 0 if x has no spread.
        """
        x, y, _ = utils.ensure_shapes_and_type(x=x, y=y)
        n = x.shape[0]
        if n == 0:
            return OLSEstimate(intercept=0.0, slope=0.0)
        mx = float(bnp.mean(x))
        my = float(bnp.mean(y))
        num = float(bnp.sum((x - mx) * (y - my)))
        den = float(bnp.sum((x - mx) ** 2))
        slope = 0.0 if den == 0.0 else num / den
        return OLSEstimate(intercept=my - slope * mx, slope=slope)
