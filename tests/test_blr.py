import unittest
import numpy as np
import bayreg as br
import bayreg.num as bnp
from bayreg.core import BayesianLinearRegression, PRIOR_PRESETS
from bayreg.core.linalg import gaussian_2d_pdf
from bayreg.misc.datasets import make_bayesian_linear_data

TRUE_SLOPE = 1.5
TRUE_INTERCEPT = 2.0
NOISE_STD = 1.5


def closed_form_posterior(x, y, mu0, S0, noise_variance):
    X = np.column_stack((np.ones_like(x), x))
    P0 = np.linalg.inv(S0)
    Sn = np.linalg.inv(P0 + X.T @ X / noise_variance)
    mun = Sn @ (P0 @ mu0 + X.T @ y / noise_variance)
    return mun, Sn


class TestPosterior(unittest.TestCase):
    def test_closed_form(self):
        x, y = make_bayesian_linear_data(30, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD, seed=3)
        mu0 = np.array([0.5, -1.0])
        S0 = np.array([[2.0, 0.3], [0.3, 1.0]])
        model = BayesianLinearRegression(mu0, S0, noise_variance=2.0)
        model.fit(x, y)
        mun, Sn = closed_form_posterior(x, y, mu0, S0, 2.0)
        self.assertTrue(np.allclose(model.posterior_mean, mun))
        self.assertTrue(np.allclose(model.posterior_cov, Sn))

    def test_empty_fit_is_prior(self):
        model = BayesianLinearRegression.from_preset("informative", noise_variance=0.5)
        model.fit([], [])
        self.assertFalse(model.has_data)
        self.assertTrue(np.array_equal(model.posterior_mean, model.prior_mean))
        self.assertTrue(np.array_equal(model.posterior_cov, model.prior_cov))

        xt = np.linspace(-3.0, 7.0, 11)
        mean, variance = model.predict(xt)
        phi = np.column_stack((np.ones_like(xt), xt))
        self.assertTrue(np.allclose(mean, phi @ np.array([2.0, 1.5])))
        self.assertTrue(np.allclose(variance, np.sum(phi * phi, axis=1) + 0.5))

    def test_convergence(self):
        model = BayesianLinearRegression(noise_variance=NOISE_STD**2)
        traces = []
        for n in [5, 10, 20, 50, 100, 200]:
            x, y = make_bayesian_linear_data(n, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD, seed=42)
            model.fit(x, y)
            traces.append(np.trace(model.posterior_cov))
        self.assertTrue(np.all(np.diff(traces) <= 1e-12))
        self.assertLess(abs(model.posterior_mean[0] - TRUE_INTERCEPT), 0.5)
        self.assertLess(abs(model.posterior_mean[1] - TRUE_SLOPE), 0.2)
        self.assertLess(traces[-1], 0.1 * traces[0])

    def test_fit_replaces_data(self):
        x, y = make_bayesian_linear_data(40, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD)
        model = BayesianLinearRegression()
        model.fit(x, y)
        model.fit(x[:5], y[:5])
        fresh = BayesianLinearRegression()
        fresh.fit(x[:5], y[:5])
        self.assertTrue(np.allclose(model.posterior_mean, fresh.posterior_mean))
        self.assertEqual(model.x_train.shape, (5,))

    def test_set_prior_and_noise_refit(self):
        x, y = make_bayesian_linear_data(10, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD)
        model = BayesianLinearRegression()
        model.fit(x, y)

        mean, cov = PRIOR_PRESETS["wrong"]
        model.set_prior(mean, cov)
        expected = BayesianLinearRegression(mean, cov)
        expected.fit(x, y)
        self.assertTrue(np.allclose(model.posterior_mean, expected.posterior_mean))

        model.set_noise(4.0)
        expected = BayesianLinearRegression(mean, cov, noise_variance=4.0)
        expected.fit(x, y)
        self.assertTrue(np.allclose(model.posterior_cov, expected.posterior_cov))

    def test_reset(self):
        x, y = make_bayesian_linear_data(10, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD)
        model = BayesianLinearRegression()
        model.fit(x, y)
        model.reset()
        self.assertFalse(model.has_data)
        self.assertTrue(np.array_equal(model.posterior_mean, model.prior_mean))

    def test_presets(self):
        for name, (mean, cov) in PRIOR_PRESETS.items():
            model = BayesianLinearRegression.from_preset(name)
            self.assertTrue(np.array_equal(model.prior_mean, mean))
            self.assertTrue(np.array_equal(model.prior_cov, cov))
        with self.assertRaises(ValueError):
            BayesianLinearRegression.from_preset("flat")


class TestPrediction(unittest.TestCase):
    def setUp(self):
        self.x, self.y = make_bayesian_linear_data(20, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD)
        self.model = BayesianLinearRegression(noise_variance=NOISE_STD**2)
        self.model.fit(self.x, self.y)

    def test_scalar_prediction(self):
        mean, variance = self.model.predict(2.0)
        self.assertIsInstance(mean, float)
        self.assertIsInstance(variance, float)
        m, v = self.model.predict(np.array([2.0]))
        self.assertAlmostEqual(mean, m[0])
        self.assertAlmostEqual(variance, v[0])
        self.assertGreater(variance, NOISE_STD**2)

    def test_band_ordering(self):
        xt = np.linspace(-10.0, 15.0, 50)
        for model in [self.model, BayesianLinearRegression()]:
            for level in [0.90, 0.95, 0.99, 0.5]:
                band = model.get_credible_band(xt, level)
                self.assertTrue(np.all(band.upper >= band.mean))
                self.assertTrue(np.all(band.mean >= band.lower))

    def test_band_width(self):
        xt = np.array([0.0, 4.0])
        band = self.model.get_credible_band(xt, 0.95)
        _, variance = self.model.predict(xt)
        self.assertTrue(np.allclose(band.upper - band.lower, 2.0 * 1.96 * np.sqrt(variance)))
        with self.assertRaises(ValueError):
            self.model.get_credible_band(xt, 1.5)

    def test_weights_are_reproducible(self):
        w1 = self.model.sample_posterior_weights(25, rng=7)
        w2 = self.model.sample_posterior_weights(25, rng=7)
        self.assertEqual(w1.shape, (25, 2))
        self.assertTrue(np.array_equal(w1, w2))
        w3 = self.model.sample_posterior_weights(25, rng=8)
        self.assertFalse(np.array_equal(w1, w3))

    def test_weights_moments(self):
        w = self.model.sample_posterior_weights(5000, rng=1)
        se = np.sqrt(np.diag(self.model.posterior_cov) / 5000)
        self.assertTrue(np.all(np.abs(np.mean(w, axis=0) - self.model.posterior_mean) < 4 * se))

    def test_lines(self):
        xt = np.linspace(-3.0, 7.0, 9)
        lines = self.model.sample_posterior_lines(xt, 4, rng=7)
        w = self.model.sample_posterior_weights(4, rng=7)
        self.assertEqual(lines.shape, (4, 9))
        self.assertTrue(np.allclose(lines, w[:, [0]] + w[:, [1]] * xt))


class TestContours(unittest.TestCase):
    def test_axes_are_slope_then_intercept(self):
        model = BayesianLinearRegression([2.0, 1.5], [[1.0, 0.0], [0.0, 4.0]])
        c = model.get_prior_contours((0.5, 2.5), (1.0, 5.0), 5)
        self.assertEqual(c.density.shape, (5, 5))
        j, i = np.unravel_index(np.argmax(c.density), c.density.shape)
        self.assertAlmostEqual(c.x_grid[i], 1.5)
        self.assertAlmostEqual(c.y_grid[j], 2.0)

    def test_density_values(self):
        cov = np.array([[1.0, 0.4], [0.4, 0.5]])
        model = BayesianLinearRegression([0.0, 1.0], cov)
        c = model.get_prior_contours((-1.0, 3.0), (-2.0, 2.0), 7)
        # point (slope, intercept) sees the covariance with swapped axes
        swapped = [[0.5, 0.4], [0.4, 1.0]]
        expected = gaussian_2d_pdf(c.x_grid[2], c.y_grid[5], (1.0, 0.0), swapped)
        self.assertAlmostEqual(c.density[5, 2], expected)

    def test_posterior_contours_concentrate(self):
        x, y = make_bayesian_linear_data(100, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD)
        model = BayesianLinearRegression(noise_variance=NOISE_STD**2)
        model.fit(x, y)
        prior = model.get_prior_contours((-2.0, 5.0), (-3.0, 7.0), 40)
        post = model.get_posterior_contours((-2.0, 5.0), (-3.0, 7.0), 40)
        self.assertGreater(post.density.max(), prior.density.max())
        self.assertTrue(np.all(np.isfinite(post.density)))

    def test_single_point_grid(self):
        c = BayesianLinearRegression().get_prior_contours((0.0, 1.0), (0.0, 1.0), 1)
        self.assertEqual(c.density.shape, (1, 1))


class TestOLS(unittest.TestCase):
    def test_exact_line(self):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        ols = BayesianLinearRegression.ols_estimate(x, 3.0 - 2.0 * x)
        self.assertAlmostEqual(ols.slope, -2.0)
        self.assertAlmostEqual(ols.intercept, 3.0)

    def test_degenerate(self):
        self.assertEqual(tuple(BayesianLinearRegression.ols_estimate([], [])), (0.0, 0.0))
        ols = BayesianLinearRegression.ols_estimate([1.0, 1.0, 1.0], [1.0, 2.0, 6.0])
        self.assertEqual(ols.slope, 0.0)
        self.assertAlmostEqual(ols.intercept, 3.0)

    def test_flat_prior_limit(self):
        x, y = make_bayesian_linear_data(30, TRUE_SLOPE, TRUE_INTERCEPT, NOISE_STD)
        model = BayesianLinearRegression([0.0, 0.0], 1e8 * np.eye(2), noise_variance=1.0)
        model.fit(x, y)
        ols = model.ols_estimate(x, y)
        self.assertTrue(np.allclose(model.posterior_mean, [ols.intercept, ols.slope], atol=1e-5))


if __name__ == "__main__":
    unittest.main()
