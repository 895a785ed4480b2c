# bayreg/kernel/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Covariance functions for one-dimensional Gaussian Process regression.

Modules
-------
base
    Kernel interface and the stationary kernel template.
rbf
    Squared exponential kernel.
matern
    Matérn 3/2 kernel.
periodic
    Exp-sine-squared kernel.
linear
    Dot-product kernel with bias.
utils
    Kernel factory.

Public API
-----------
- Kernels:
    Kernel, StationaryKernel, RBFKernel, Matern32Kernel (MaternKernel),
    PeriodicKernel, LinearKernel
- Correlation functions:
    rbf_kernel, matern32_kernel, periodic_kernel
- Factory:
    create_kernel, KERNEL_TYPES
"""

from .base import Kernel, StationaryKernel
from .rbf import RBFKernel, rbf_kernel
from .matern import Matern32Kernel, MaternKernel, matern32_kernel
from .periodic import PeriodicKernel, periodic_kernel
from .linear import LinearKernel
from .utils import create_kernel, KERNEL_TYPES

__all__ = [
    # Kernels
    "Kernel",
    "StationaryKernel",
    "RBFKernel",
    "Matern32Kernel",
    "MaternKernel",
    "PeriodicKernel",
    "LinearKernel",
    # Correlation functions
    "rbf_kernel",
    "matern32_kernel",
    "periodic_kernel",
    # Factory
    "create_kernel",
    "KERNEL_TYPES",
]
