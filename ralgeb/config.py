"""Configuration helpers for compatibility switches."""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Literal

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ColumnPadding = Literal["cols", "rows"]

_COLUMN_PADDING_CHOICES = ("cols", "rows")


@dataclass
class LibraryConfig:
    """Switches between the legacy permissive behaviour and stricter variants.

    ``strict_combinatorics`` makes :func:`ralgeb.permutation` and
    :func:`ralgeb.combinations` reject ``r > n`` and return the exact value
    for ``r == n`` instead of the legacy fallback of ``1``.

    ``column_padding`` selects the length of the zero vector returned by
    :meth:`ralgeb.Matrix.get_col` for an out-of-range column: ``"cols"``
    keeps the historical behaviour, ``"rows"`` matches the length of a real
    column.
    """

    strict_combinatorics: bool = False
    column_padding: ColumnPadding = "cols"


_LIBRARY_CONFIG = LibraryConfig()


def get_config() -> LibraryConfig:
    return copy.deepcopy(_LIBRARY_CONFIG)


def set_config(config: LibraryConfig) -> None:
    global _LIBRARY_CONFIG
    if config.column_padding not in _COLUMN_PADDING_CHOICES:
        raise InvalidArgumentError(
            f"column_padding must be one of {_COLUMN_PADDING_CHOICES}, got {config.column_padding!r}"
        )
    _LIBRARY_CONFIG = copy.deepcopy(config)
    logger.debug("Library configuration updated: %s", _LIBRARY_CONFIG)


def reset_config() -> None:
    set_config(LibraryConfig())


__all__ = [
    "ColumnPadding",
    "LibraryConfig",
    "get_config",
    "set_config",
    "reset_config",
]
