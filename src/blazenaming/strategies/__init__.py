"""
Naming strategy implementations.
"""

from .base import DefaultNamingStrategy, NamingStrategy
from .lenient import LenientNamingStrategy
from .strict import StrictNamingStrategy

__all__ = [
    "DefaultNamingStrategy",
    "LenientNamingStrategy",
    "NamingStrategy",
    "StrictNamingStrategy",
]
