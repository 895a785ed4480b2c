## --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
## --------------------------------------------------------------
"""
Seeded synthetic data sets for the regression models.

Every generator draws from a `SeededStream`, one uniform for the
abscissa then one standard normal for the noise, point after point.
The same seed therefore always yields the same data set.
"""
import numpy as np
from bayreg.num import SeededStream


def _draw_points(n, seed, x_low, x_high, response, noise, reject=None):
    rng = SeededStream(seed)
    x = []
    y = []
    while len(x) < n:
        xi = x_low + rng.random() * (x_high - x_low)
        if reject is not None and reject(xi):
            continue
        x.append(xi)
        y.append(response(xi) + noise * rng.standard_normal())
    return np.array(x, dtype=float), np.array(y, dtype=float)


def make_bayesian_linear_data(n, true_slope, true_intercept, noise_std, seed=42):
    """
    Noisy observations of a straight line.

    Parameters
    ----------
    n : int
        Number of points.
    true_slope, true_intercept : float
        Line y = true_slope * x + true_intercept.
    noise_std : float
        Standard deviation of the Gaussian noise.
    seed : int, optional
        Seed of the random stream, default is 42.

    Returns
    -------
    x : numpy.ndarray, shape (n,)
        Abscissas, uniform on [-3, 7).
    y : numpy.ndarray, shape (n,)
        Noisy responses.
    """
    return _draw_points(
        n,
        seed,
        -3.0,
        7.0,
        lambda xi: true_slope * xi + true_intercept,
        noise_std,
    )


def make_sine_data(n, noise, seed=42):
    """
    Noisy observations of sin(x), x uniform on [0, 10).

    Parameters
    ----------
    n : int
    noise : float
        Standard deviation of the Gaussian noise.
    seed : int, optional

    Returns
    -------
    x, y : numpy.ndarray, shape (n,)
    """
    return _draw_points(n, seed, 0.0, 10.0, np.sin, noise)


def make_gap_data(n, gap_start=3.0, gap_end=7.0, seed=42):
    """
    Sine data with no observation in [gap_start, gap_end].

    Abscissas falling in the gap are redrawn; a rejected draw consumes
    a uniform but no normal. The noise standard deviation is 0.2.

    Parameters
    ----------
    n : int
    gap_start, gap_end : float, optional
        Bounds of the empty interval, default is [3, 7].
    seed : int, optional

    Returns
    -------
    x, y : numpy.ndarray, shape (n,)
    """
    return _draw_points(
        n,
        seed,
        0.0,
        10.0,
        np.sin,
        0.2,
        reject=lambda xi: gap_start <= xi <= gap_end,
    )


def make_linear_trend_data(n, noise, seed=42):
    """Noisy observations of 0.5 x - 1, x uniform on [0, 10)."""
    return _draw_points(n, seed, 0.0, 10.0, lambda xi: 0.5 * xi - 1.0, noise)


def regular_grid(start, stop, n):
    """n evenly spaced evaluation points from start to stop (inclusive)."""
    return np.linspace(start, stop, n)
