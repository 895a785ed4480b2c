# bayreg/__init__.py

from . import config
from . import num
from . import core
from . import kernel
from . import misc
from .core import GaussianProcess, BayesianLinearRegression

__all__ = [
    "num",
    "kernel",
    "GaussianProcess",
    "BayesianLinearRegression",
    "__version__",
]

__version__ = config.get_config().version
