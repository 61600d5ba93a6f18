import logging as _logging
from importlib.metadata import PackageNotFoundError, version as _pkg_version

from . import combinatorics as _combinatorics
from . import matrix as _matrix
from .circle import Circle
from .combinatorics import combinations, factorial, permutation
from .config import LibraryConfig, get_config, reset_config, set_config
from .errors import (
    IndexOutOfBoundsError,
    InvalidArgumentError,
    MatrixError,
    RalgebError,
    ShapeMismatchError,
)
from .line import Line
from .logging_utils import apply_debug_logging
from .matrix import Matrix
from .point import Point
from .utils import delta_coord

__all__ = [
    'Point',
    'Line',
    'Circle',
    'delta_coord',
    'factorial',
    'permutation',
    'combinations',
    'Matrix',
    'RalgebError',
    'InvalidArgumentError',
    'MatrixError',
    'ShapeMismatchError',
    'IndexOutOfBoundsError',
    'LibraryConfig',
    'get_config',
    'set_config',
    'reset_config',
    'enable_verbose_logging',
]

try:
    __version__ = _pkg_version(__name__)
except PackageNotFoundError:  # running from a checkout
    __version__ = "0.0.0.dev0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())


def enable_verbose_logging() -> None:
    """Log every combinatorics and matrix call (arguments, result, errors) at DEBUG level."""

    for module in (_combinatorics, _matrix):
        apply_debug_logging(vars(module), logger=_logging.getLogger(module.__name__))
    # the package namespace holds references taken before wrapping
    for name in ('factorial', 'permutation', 'combinations'):
        globals()[name] = getattr(_combinatorics, name)
