# bayreg/num/numpy_backend.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""NumPy numerical backend for BayReg.

This module defines the NumPy implementation of the bayreg.num API,
including the seeded random streams used by every sampling routine.
"""

import builtins
from typing import Any, Optional, Tuple, Union
from bayreg.config import get_config, init_backend, get_logger

Scalar = Union[int, float]
ArrayLike = Any
SizeLike = Optional[Union[int, Tuple[int, ...]]]

_bayreg_backend_: str = init_backend()
_config = get_config()
_logger = get_logger()
_logger.debug("Using backend: %s", _bayreg_backend_)


# -----------------------------------------------------
#
#                      NUMPY
#
# -----------------------------------------------------

import numpy
from numpy.typing import NDArray

_np_dtype = numpy.float64

ndarray = NDArray[numpy.floating]
from numpy import (
    copy,
    reshape,
    where,
    any,
    isscalar,
    isnan,
    isinf,
    isfinite,
    allclose,
    hstack,
    vstack,
    stack,
    concatenate,
    empty_like,
    zeros_like,
    diag,
    diagonal,
    arange,
    meshgrid,
    outer,
    abs,
    sqrt,
    exp,
    log,
    sin,
    cos,
    square,
    sum,
    prod,
    mean,
    std,
    var,
    min,
    max,
    argmax,
    minimum,
    maximum,
    clip,
    einsum,
    matmul,
    trace,
    inner,
    all,
    errstate,
    shape,
    broadcast_shapes,
)
from numpy import pi, inf
from numpy import finfo, float64
from scipy.linalg import solve_triangular
from scipy.spatial.distance import cdist
from scipy.stats import norm as normal

# ..................................................

tiny = finfo(_np_dtype).tiny
fmax = numpy.finfo(_np_dtype).max

# ..................................................

def array(x, dtype=None):
    if dtype is not None:
        return numpy.array(x, dtype=dtype)
    out = numpy.array(x)
    if numpy.issubdtype(out.dtype, numpy.integer):
        return out.astype(_np_dtype)
    if numpy.issubdtype(out.dtype, numpy.floating):
        return out.astype(_np_dtype, copy=False)
    return out

def asarray(x, dtype=None):
    if dtype is not None:
        return numpy.asarray(x, dtype=dtype)
    if isinstance(x, numpy.ndarray):
        if numpy.issubdtype(x.dtype, numpy.floating):
            return x.astype(_np_dtype, copy=False)
        if numpy.issubdtype(x.dtype, numpy.integer):
            return x.astype(_np_dtype)
        return x
    out = numpy.asarray(x, dtype=_np_dtype)
    return out

def empty(shape, dtype=None):
    return numpy.empty(shape, dtype=_np_dtype if dtype is None else dtype)

def zeros(shape, dtype=None):
    return numpy.zeros(shape, dtype=_np_dtype if dtype is None else dtype)

def ones(shape, dtype=None):
    return numpy.ones(shape, dtype=_np_dtype if dtype is None else dtype)

def full(shape, fill_value, dtype=None):
    return numpy.full(
        shape, fill_value, dtype=_np_dtype if dtype is None else dtype
    )

def eye(n, m=None, k=0, dtype=None):
    return numpy.eye(n, M=m, k=k, dtype=_np_dtype if dtype is None else dtype)

def linspace(start, stop, num=50, endpoint=True, dtype=None):
    return numpy.linspace(
        start,
        stop,
        num=num,
        endpoint=endpoint,
        dtype=_np_dtype if dtype is None else dtype,
    )

def to_scalar(x):
    return x.item()

def inftobigf(a, bigf=fmax / 1000.0):
    a = where(numpy.isinf(a), numpy.full_like(a, bigf), a)
    return a

# ..................................................

def scaled_distance(x, y, scale):
    """Matrix of |x_i - y_j| / scale for 1-D inputs x (n,) and y (m,)."""
    d = cdist(x.reshape(-1, 1), y.reshape(-1, 1))
    with errstate(over="ignore", divide="ignore", invalid="ignore"):
        return where(d == 0.0, 0.0, d / scale)

def scaled_distance_elementwise(x, y, scale):
    """Vector of |x_i - y_i| / scale; zeros when y is x or None."""
    if x is y or y is None:
        return zeros((x.shape[0],))
    d = numpy.abs(x - y)
    with errstate(over="ignore", divide="ignore", invalid="ignore"):
        return where(d == 0.0, 0.0, d / scale)

# ..................................................
#
#     Seeded random streams
#
# A Park-Miller "minimal standard" linear congruential generator,
#     s <- 16807 s mod (2^31 - 1),   u = (s - 1) / (2^31 - 2),
# with Box-Muller normals (cosine branch, two uniforms per draw).
# The products s * 16807^k mod m are computed blockwise in int64:
# both factors are below 2^31 so their product stays below 2^62.

_LCG_MULTIPLIER = 16807
_LCG_MODULUS = 2147483647
_LCG_BLOCK = 4096


def _lcg_power_table(n: int) -> ArrayLike:
    table = numpy.empty(n, dtype=numpy.int64)
    p = 1
    for k in range(n):
        p = (p * _LCG_MULTIPLIER) % _LCG_MODULUS
        table[k] = p
    return table


_LCG_POWERS = _lcg_power_table(_LCG_BLOCK)


def _size_to_shape(size: SizeLike) -> Tuple[int, ...]:
    if size is None:
        return ()
    if isinstance(size, (int, numpy.integer)):
        return (int(size),)
    return tuple(int(s) for s in size)


class SeededStream:
    """Deterministic random stream.

    Two streams built from the same seed produce bit-identical draws,
    regardless of what other streams have been used in between.

    Parameters
    ----------
    seed : int
        Reduced modulo 2^31 - 1. A seed congruent to 0 is replaced by 1
        since the generator has 0 as a fixed point.

    Examples
    --------
    >>> rng = SeededStream(42)
    >>> z = rng.standard_normal((3, 2))
    """

    def __init__(self, seed: int = 42):
        self.seed = int(seed)
        s = self.seed % _LCG_MODULUS
        self._state = s if s != 0 else 1

    def __repr__(self):
        return f"SeededStream(seed={self.seed})"

    def _next_states(self, count: int) -> ArrayLike:
        out = numpy.empty(count, dtype=numpy.int64)
        s = self._state
        pos = 0
        while pos < count:
            m = builtins.min(_LCG_BLOCK, count - pos)
            block = (numpy.int64(s) * _LCG_POWERS[:m]) % _LCG_MODULUS
            out[pos : pos + m] = block
            s = int(block[-1])
            pos += m
        self._state = s
        return out

    def _uniforms(self, count: int) -> ArrayLike:
        states = self._next_states(count)
        return (states - 1).astype(_np_dtype) / float(_LCG_MODULUS - 1)

    def random(self, size: SizeLike = None):
        """Uniform draws on [0, 1)."""
        shape = _size_to_shape(size)
        u = self._uniforms(int(numpy.prod(shape, dtype=numpy.int64)))
        if size is None:
            return float(u[0])
        return u.reshape(shape)

    def standard_normal(self, size: SizeLike = None):
        """Standard normal draws, filled in row-major order."""
        shape = _size_to_shape(size)
        count = int(numpy.prod(shape, dtype=numpy.int64))
        u = self._uniforms(2 * count)
        u1 = numpy.maximum(u[0::2], tiny)
        u2 = u[1::2]
        z = numpy.sqrt(-2.0 * numpy.log(u1)) * numpy.cos(2.0 * pi * u2)
        if size is None:
            return float(z[0])
        return z.reshape(shape)

    def normal(self, loc: Scalar = 0.0, scale: Scalar = 1.0, size: SizeLike = None):
        return loc + scale * self.standard_normal(size)


def as_rng(rng=None):
    """Resolve a random-stream argument.

    Parameters
    ----------
    rng : None, int or stream
        None uses the configured default seed, an int is taken as a
        seed, and any object exposing ``standard_normal`` (a
        SeededStream or a numpy.random.Generator) is returned as-is.
    """
    if rng is None:
        return SeededStream(_config.seed)
    if isinstance(rng, (int, numpy.integer)):
        return SeededStream(int(rng))
    if hasattr(rng, "standard_normal"):
        return rng
    raise TypeError(
        f"rng must be None, an int seed or a random stream, got {type(rng).__name__}"
    )
