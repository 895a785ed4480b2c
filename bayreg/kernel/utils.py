# bayreg/kernel/utils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
from .rbf import RBFKernel
from .matern import Matern32Kernel
from .periodic import PeriodicKernel
from .linear import LinearKernel

KERNEL_TYPES = ("rbf", "matern", "periodic", "linear")


def create_kernel(kernel_type, length_scale=1.0, signal_variance=1.0):
    """Build a kernel from its short name.

    Parameters
    ----------
    kernel_type : {'rbf', 'matern', 'periodic', 'linear'}
    length_scale : float, optional
        Ignored by the linear kernel.
    signal_variance : float, optional

    Returns
    -------
    Kernel
        The periodic kernel keeps its default period and the linear
        kernel its default bias variance and center.

    Raises
    ------
    ValueError
        If `kernel_type` is not one of KERNEL_TYPES.
    """
    if kernel_type == "rbf":
        return RBFKernel(length_scale, signal_variance)
    elif kernel_type == "matern":
        return Matern32Kernel(length_scale, signal_variance)
    elif kernel_type == "periodic":
        return PeriodicKernel(length_scale, signal_variance)
    elif kernel_type == "linear":
        return LinearKernel(signal_variance)
    raise ValueError(
        f"Invalid kernel type {kernel_type!r}. Supported types are {KERNEL_TYPES}."
    )
