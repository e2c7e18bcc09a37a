"""Core utilities package"""

from .config import Settings, get_settings
from .logging import setup_logging, get_logger
from .errors import (
    MathKindError,
    UnknownKindError,
    DuplicateKindError,
    CatalogFrozenError,
    UnsupportedTypeError,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "MathKindError",
    "UnknownKindError",
    "DuplicateKindError",
    "CatalogFrozenError",
    "UnsupportedTypeError",
]
