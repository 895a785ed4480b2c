# bayreg/core/linalg.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Dense linear-algebra primitives shared by the regression models.

The factorization routines never raise on degenerate input. A
singular matrix is inverted to the identity and a non positive
Cholesky pivot is clamped, so that extreme hyperparameter values
always produce a defined (if degraded) result. Callers that want to
know about it can ask for the status flag (``return_status=True``) or
turn on ``bayreg.config.set_warn_on_degeneracy``.
"""
import warnings
import bayreg.num as bnp
from bayreg.config import get_config, get_logger

PIVOT_TOLERANCE = 1e-12
CHOLESKY_DIAGONAL_FLOOR = 1e-10
DETERMINANT_TOLERANCE = 1e-12


class DegeneracyWarning(RuntimeWarning):
    """A factorization hit a singular or non positive definite matrix."""


def _report_degeneracy(message):
    get_logger().debug(message)
    if get_config().warn_on_degeneracy:
        warnings.warn(message, DegeneracyWarning, stacklevel=3)


# --------------------------------------------------------------------------
# Elementary operations
# --------------------------------------------------------------------------
def matrix_multiply(A, B):
    return bnp.matmul(bnp.asarray(A), bnp.asarray(B))


def matrix_transpose(A):
    return bnp.asarray(A).T.copy()


def matrix_vector_multiply(A, v):
    return bnp.matmul(bnp.asarray(A), bnp.asarray(v))


def matrix_add(A, B):
    return bnp.asarray(A) + bnp.asarray(B)


def matrix_scale(A, s):
    return bnp.asarray(A) * s


def identity_matrix(n):
    return bnp.eye(n)


# --------------------------------------------------------------------------
# Inverse and factorization
# --------------------------------------------------------------------------
def matrix_inverse(A, return_status=False):
    """Inverse of a square matrix by Gauss-Jordan elimination.

    Parameters
    ----------
    A : array_like, shape (n, n)
    return_status : bool, optional
        If True, also return whether the singular fallback was taken.

    Returns
    -------
    Ainv : ndarray, shape (n, n)
        Inverse of A, or the identity if a pivot smaller than
        ``PIVOT_TOLERANCE`` in absolute value was met.
    degenerate : bool
        Only if `return_status` is True.

    Notes
    -----
    Elimination runs on the augmented matrix [A | I] with partial
    pivoting (the row holding the largest absolute entry of the
    current column is swapped in).
    """
    A = bnp.asarray(A)
    n = A.shape[0]
    aug = bnp.hstack((A.astype(bnp.float64), bnp.eye(n)))

    for col in range(n):
        pivot_row = col + int(bnp.argmax(bnp.abs(aug[col:, col])))
        if pivot_row != col:
            aug[[col, pivot_row]] = aug[[pivot_row, col]]

        pivot = aug[col, col]
        if abs(pivot) < PIVOT_TOLERANCE:
            _report_degeneracy(
                f"matrix_inverse: pivot {pivot:.3e} in column {col}, "
                "returning identity"
            )
            if return_status:
                return bnp.eye(n), True
            return bnp.eye(n)

        aug[col] = aug[col] / pivot
        factors = aug[:, col].copy()
        factors[col] = 0.0
        aug -= bnp.outer(factors, aug[col])

    Ainv = aug[:, n:]
    if return_status:
        return Ainv, False
    return Ainv


def cholesky_decomposition(A, return_status=False):
    """Lower-triangular Cholesky factor L with L Lᵀ ≈ A.

    Parameters
    ----------
    A : array_like, shape (n, n)
        Symmetric matrix. Only its lower triangle is read.
    return_status : bool, optional
        If True, also return whether a diagonal term was clamped.

    Returns
    -------
    L : ndarray, shape (n, n)
    degenerate : bool
        Only if `return_status` is True.

    Notes
    -----
    Column j is computed as

    .. math::
        L_{jj} = \\sqrt{\\max(A_{jj} - \\sum_{k<j} L_{jk}^2, 10^{-10})},
        \\quad
        L_{ij} = (A_{ij} - \\sum_{k<j} L_{ik} L_{jk}) / L_{jj}, \\ i > j.

    The floor keeps L finite for matrices that are only positive
    semi-definite up to rounding, at the cost of hiding true
    near-singularity.
    """
    A = bnp.asarray(A)
    n = A.shape[0]
    L = bnp.zeros((n, n))
    clamped = 0

    for j in range(n):
        Lj = L[j, :j]
        d = A[j, j] - bnp.inner(Lj, Lj)
        if not d >= CHOLESKY_DIAGONAL_FLOOR:
            clamped += 1
            d = CHOLESKY_DIAGONAL_FLOOR
        L[j, j] = bnp.sqrt(d)
        if j + 1 < n:
            L[j + 1 :, j] = (A[j + 1 :, j] - bnp.matmul(L[j + 1 :, :j], Lj)) / L[j, j]

    if clamped:
        _report_degeneracy(
            f"cholesky_decomposition: clamped {clamped} of {n} diagonal terms"
        )
    if return_status:
        return L, clamped > 0
    return L


def solve_lower(L, b):
    """Forward substitution: solve L x = b, L lower-triangular.

    `b` may be a vector (n,) or a matrix of right-hand sides (n, m).
    """
    return bnp.solve_triangular(L, b, lower=True, check_finite=False)


def solve_lower_transpose(L, b):
    """Back substitution: solve Lᵀ x = b, L lower-triangular."""
    return bnp.solve_triangular(L, b, lower=True, trans="T", check_finite=False)


# --------------------------------------------------------------------------
# Densities
# --------------------------------------------------------------------------
def gaussian_2d_pdf(x, y, mean, cov):
    """Bivariate normal density at (x, y).

    Uses the closed-form 2x2 determinant and inverse.

    Parameters
    ----------
    x, y : float or array_like
        Evaluation coordinates (broadcast against each other).
    mean : sequence of 2 floats
    cov : array_like, shape (2, 2)

    Returns
    -------
    float or ndarray
        Density values; 0 everywhere if ``|det(cov)| < 1e-12``.
    """
    cov = bnp.asarray(cov)
    det = cov[0, 0] * cov[1, 1] - cov[0, 1] * cov[1, 0]
    if abs(det) < DETERMINANT_TOLERANCE:
        return bnp.zeros(bnp.broadcast_shapes(bnp.shape(x), bnp.shape(y)))[()]

    inv_det = 1.0 / det
    dx = bnp.asarray(x) - mean[0]
    dy = bnp.asarray(y) - mean[1]
    exponent = -0.5 * (
        inv_det
        * (cov[1, 1] * dx * dx - 2.0 * cov[0, 1] * dx * dy + cov[0, 0] * dy * dy)
    )
    density = bnp.exp(exponent) / (2.0 * bnp.pi * bnp.sqrt(abs(det)))
    return density[()]
