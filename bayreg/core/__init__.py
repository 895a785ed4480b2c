# bayreg/core/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------

"""
Core components of the bayreg package.

This subpackage contains the dense linear algebra routines, Gaussian
sampling, and the two regression models built on them.

Public API
----------
GaussianProcess : class
    Zero-mean GP regression with Gaussian noise.
BayesianLinearRegression : class
    Conjugate Bayesian regression on (intercept, slope).
CredibleBand, ContourData, OLSEstimate : named tuples
    Results returned by the models.
"""

from .linalg import DegeneracyWarning
from .utils import CredibleBand
from .blr import BayesianLinearRegression, ContourData, OLSEstimate, PRIOR_PRESETS
from .gp import GaussianProcess

__all__ = [
    "GaussianProcess",
    "BayesianLinearRegression",
    "CredibleBand",
    "ContourData",
    "OLSEstimate",
    "PRIOR_PRESETS",
    "DegeneracyWarning",
]
