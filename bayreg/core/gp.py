# bayreg/core/gp.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process regression on one-dimensional inputs.

Model
-----
    f ~ GP(0, k),   yᵢ = f(xᵢ) + εᵢ,   εᵢ ~ N(0, σₙ²)

Training factorizes K + σₙ² I = L Lᵀ once and solves for
α = Lᵀ \\ (L \\ y); K⁻¹ is never formed. Prediction and sampling only
read the cached (L, α). Any change of kernel or noise triggers a full
O(n³) refit.
"""
import bayreg.num as bnp
from bayreg.config import get_config, get_logger
from bayreg.kernel import RBFKernel

from . import utils
from .linalg import cholesky_decomposition, solve_lower, solve_lower_transpose
from .sampling import sample_from_factor

_logger = get_logger()


class GaussianProcess:
    """Zero-mean GP regression model with Gaussian observation noise.

    Attributes
    ----------
    kernel : bayreg.kernel.Kernel
        Covariance function. Its hyperparameters may be modified in
        place; call `set_kernel` (or `fit` again) afterwards so that
        the cached factorization follows.
    noise_variance : float
        Observation noise variance σₙ².
    x_train, y_train : ndarray, shape (n,)
        Training set of the last fit.

    Examples
    --------
    >>> from bayreg.kernel import RBFKernel
    >>> from bayreg.misc.datasets import make_sine_data
    >>> x, y = make_sine_data(15, 0.2, seed=42)
    >>> gp = GaussianProcess(RBFKernel(length_scale=1.0), noise_variance=0.1)
    >>> gp.fit(x, y)
    >>> xt = bnp.linspace(0.0, 10.0, 121)
    >>> zpm, zpv = gp.predict(xt)
    >>> paths = gp.sample_posterior(xt, 5, rng=42)
    """

    def __init__(self, kernel=None, noise_variance=0.1):
        self.kernel = RBFKernel() if kernel is None else kernel
        self.noise_variance = noise_variance
        self.x_train = bnp.zeros((0,))
        self.y_train = bnp.zeros((0,))
        # Cached Cholesky factor of K + σₙ² I and α = (K + σₙ² I)⁻¹ y
        self._L = None
        self._alpha = None

    def __repr__(self):
        return str("<bayreg.core.GaussianProcess object> " + hex(id(self)))

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Kernel: {self.kernel!r}\n"
            f"  Noise variance: {self.noise_variance}\n"
            f"  Observations: {self.x_train.shape[0]}"
        )

    @property
    def has_data(self):
        return self.x_train.shape[0] > 0

    # ------------------------------------------------------------------
    # Fitting
    # ------------------------------------------------------------------
    def fit(self, x, y):
        """Factorize the covariance of the observations.

        Parameters
        ----------
        x : array_like, shape (n,)
            Observation points.
        y : array_like, shape (n,)
            Observed values.

        Notes
        -----
        K = k(x, x) + (σₙ² + jitter) I with jitter =
        ``get_config().gp_jitter`` (1e-8), then K = L Lᵀ,
        L y' = y (forward substitution) and Lᵀ α = y' (back
        substitution). With no data the model returns to its prior.
        """
        x, y, _ = utils.ensure_shapes_and_type(x=x, y=y)
        self.x_train = bnp.copy(x)
        self.y_train = bnp.copy(y)
        self._L = None
        self._alpha = None

        n = self.x_train.shape[0]
        if n == 0:
            _logger.debug("GaussianProcess.fit: no data, prior only")
            return

        K = self.kernel.compute_matrix(self.x_train, self.x_train)
        K = K + (self.noise_variance + get_config().gp_jitter) * bnp.eye(n)

        self._L = cholesky_decomposition(K)
        self._alpha = solve_lower_transpose(self._L, solve_lower(self._L, self.y_train))
        _logger.debug(
            "GaussianProcess.fit: n=%d, kernel=%r, noise_variance=%g",
            n,
            self.kernel,
            self.noise_variance,
        )

    def _refit(self):
        if self.has_data:
            self.fit(self.x_train, self.y_train)

    def set_kernel(self, kernel):
        """Replace the kernel and refit from scratch."""
        self.kernel = kernel
        self._refit()

    def set_noise(self, noise_variance):
        """Replace σₙ² and refit from scratch."""
        self.noise_variance = noise_variance
        self._refit()

    def reset(self):
        """Drop the training set and the cached factorization."""
        self.x_train = bnp.zeros((0,))
        self.y_train = bnp.zeros((0,))
        self._L = None
        self._alpha = None

    # ------------------------------------------------------------------
    # Prediction
    # ------------------------------------------------------------------
    def predict(self, xt):
        """Posterior predictive mean and variance at xt.

        Parameters
        ----------
        xt : array_like, shape (m,)
            Prediction points.

        Returns
        -------
        zt_posterior_mean : ndarray, shape (m,)
            k(xt, x) α, or 0 without data.
        zt_posterior_variance : ndarray, shape (m,)
            k(xt, xt) - vᵀv + σₙ² with v = L \\ k(x, xt), floored at
            ``get_config().variance_floor``; k(xt, xt) + σₙ² without
            data. The noise term makes this the variance of a new
            observation.
        """
        _, _, xt = utils.ensure_shapes_and_type(xt=xt)
        floor = get_config().variance_floor
        kss = self.kernel.compute_diag(xt)

        if not self.has_data:
            zt_posterior_mean = bnp.zeros(xt.shape)
            zt_posterior_variance = bnp.maximum(kss + self.noise_variance, floor)
            return zt_posterior_mean, zt_posterior_variance

        Kst = self.kernel.compute_matrix(xt, self.x_train)  # (m, n)
        zt_posterior_mean = bnp.matmul(Kst, self._alpha)

        V = solve_lower(self._L, Kst.T)  # (n, m)
        vdot = bnp.sum(V * V, axis=0)
        zt_posterior_variance = bnp.maximum(kss - vdot + self.noise_variance, floor)
        return zt_posterior_mean, zt_posterior_variance

    def get_credible_band(self, x_range, level=0.95):
        """Credible band of the posterior predictive over `x_range`.

        Returns
        -------
        CredibleBand
            (lower, upper, mean), aligned with `x_range`.
        """
        mean, variance = self.predict(x_range)
        return utils.credible_band(mean, variance, level)

    def log_marginal_likelihood(self):
        """log p(y | x) of the current fit, 0 without data.

        .. math::
            -\\tfrac12 y^T \\alpha - \\sum_i \\log L_{ii} - \\tfrac{n}{2}\\log 2\\pi
        """
        if not self.has_data:
            return 0.0
        n = self.x_train.shape[0]
        return float(
            -0.5 * bnp.inner(self.y_train, self._alpha)
            - bnp.sum(bnp.log(bnp.diagonal(self._L)))
            - 0.5 * n * bnp.log(2.0 * bnp.pi)
        )

    # ------------------------------------------------------------------
    # Sample paths
    # ------------------------------------------------------------------
    def sample_prior(self, x_range, n_samples, rng=None):
        """Sample paths of the zero-mean prior GP(0, k) on x_range.

        Parameters
        ----------
        x_range : array_like, shape (m,)
        n_samples : int
        rng : None, int or random stream, optional

        Returns
        -------
        ndarray, shape (n_samples, m)
            Latent function values f = L z, with
            L Lᵀ = k(x_range, x_range) + 1e-6 I.
        """
        _, _, xt = utils.ensure_shapes_and_type(xt=x_range)
        m = xt.shape[0]
        K = self.kernel.compute_matrix(xt, xt) + get_config().prior_jitter * bnp.eye(m)
        L = cholesky_decomposition(K)
        return sample_from_factor(bnp.zeros((m,)), L, n_samples, rng)

    def sample_posterior(self, x_range, n_samples, rng=None):
        """Sample paths of the posterior GP on x_range.

        Parameters
        ----------
        x_range : array_like, shape (m,)
        n_samples : int
        rng : None, int or random stream, optional

        Returns
        -------
        ndarray, shape (n_samples, m)
            mean + L_post z, with L_post the Cholesky factor of the
            posterior covariance k(xt, xt) - VᵀV, V = L \\ k(x, xt).
            Without data, falls back to `sample_prior`. Non-finite
            values are replaced by the posterior mean.

        Notes
        -----
        The posterior covariance is that of the latent function, so
        the paths do not include observation noise.
        """
        if not self.has_data:
            return self.sample_prior(x_range, n_samples, rng)

        _, _, xt = utils.ensure_shapes_and_type(xt=x_range)
        zt_posterior_mean, _ = self.predict(xt)

        Kss = self.kernel.compute_matrix(xt, xt)
        Kst = self.kernel.compute_matrix(xt, self.x_train)
        V = solve_lower(self._L, Kst.T)  # (n, m)
        posterior_cov = bnp.symmetrize(Kss - bnp.matmul(V.T, V))

        m = xt.shape[0]
        diag_idx = bnp.arange(m)
        posterior_cov[diag_idx, diag_idx] = bnp.maximum(
            posterior_cov[diag_idx, diag_idx], get_config().variance_floor
        )

        L_post = cholesky_decomposition(posterior_cov)
        paths = sample_from_factor(zt_posterior_mean, L_post, n_samples, rng)
        return bnp.where(bnp.isfinite(paths), paths, zt_posterior_mean[None, :])
