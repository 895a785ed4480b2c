# bayreg/core/sampling.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Multivariate normal sampling.

Draws are generated as mean + L z, with L a lower Cholesky factor of
the covariance and z a vector of independent standard normals taken
from an explicit random stream (see `bayreg.num.as_rng`). The normals
are consumed sample by sample, dimension by dimension, so a given seed
always yields the same draws.
"""
import bayreg.num as bnp
from .linalg import cholesky_decomposition


def sample_from_factor(mean, L, n_samples, rng=None):
    """Draw ``n_samples`` vectors mean + L z.

    Parameters
    ----------
    mean : array_like, shape (d,)
    L : array_like, shape (d, d)
        Lower-triangular factor of the covariance.
    n_samples : int
    rng : None, int or random stream, optional

    Returns
    -------
    ndarray, shape (n_samples, d)
    """
    rng = bnp.as_rng(rng)
    mean = bnp.asarray(mean).reshape(-1)
    L = bnp.asarray(L)
    d = mean.shape[0]
    z = bnp.asarray(rng.standard_normal((int(n_samples), d)))
    return mean + bnp.matmul(z, L.T)


def sample_multivariate_normal(mean, cov, n_samples, rng=None):
    """Draw ``n_samples`` i.i.d. vectors from N(mean, cov).

    Parameters
    ----------
    mean : array_like, shape (d,)
    cov : array_like, shape (d, d)
        Covariance matrix, factorized with the clamped Cholesky routine.
    n_samples : int
    rng : None, int or random stream, optional
        None uses the configured default seed.

    Returns
    -------
    ndarray, shape (n_samples, d)

    Examples
    --------
    >>> w = sample_multivariate_normal([0.0, 0.0], [[1.0, 0.5], [0.5, 2.0]], 5, rng=7)
    >>> w.shape
    (5, 2)
    """
    L = cholesky_decomposition(cov)
    return sample_from_factor(mean, L, n_samples, rng)
