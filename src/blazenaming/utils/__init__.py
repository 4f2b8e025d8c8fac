"""
Utility helpers shared across blazenaming packages.
"""

from .logging import configure_logging, get_logger
from .naming import camel_case, is_singular, pascal_case, pluralize, singularize, snake_case

__all__ = [
    "camel_case",
    "configure_logging",
    "get_logger",
    "is_singular",
    "pascal_case",
    "pluralize",
    "singularize",
    "snake_case",
]
