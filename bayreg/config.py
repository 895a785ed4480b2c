# bayreg/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

_SUPPORTED_BACKENDS = ("numpy",)


class _BayRegConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        self.dtype = float
        self.seed = 42
        # diagonal conditioning terms
        self.gp_jitter = 1e-8
        self.prior_jitter = 1e-6
        self.variance_floor = 1e-8
        self.warn_on_degeneracy = False
        # logger lives in config
        self.logger = logging.getLogger("bayreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"BayRegConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"gp_jitter={self.gp_jitter}, "
            f"prior_jitter={self.prior_jitter}, "
            f"warn_on_degeneracy={self.warn_on_degeneracy})"
        )

    def __repr__(self):
        return (
            f"<BayRegConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"seed={self.seed!r}, "
            f"warn_on_degeneracy={self.warn_on_degeneracy!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _BayRegConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("BAYREG_BACKEND")
    if env is None:
        return "numpy"
    if env not in _SUPPORTED_BACKENDS:
        raise ValueError(f"BAYREG_BACKEND must be one of {_SUPPORTED_BACKENDS}, got '{env}'")
    return env


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["BAYREG_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing bayreg.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"backend must be one of {_SUPPORTED_BACKENDS}")
    _config.backend = backend
    os.environ["BAYREG_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_seed(seed: int):
    """Default seed used by sampling routines called with ``rng=None``."""
    _config.seed = int(seed)


def set_warn_on_degeneracy(flag: bool = True):
    """Emit a DegeneracyWarning whenever a factorization falls back."""
    _config.warn_on_degeneracy = bool(flag)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
