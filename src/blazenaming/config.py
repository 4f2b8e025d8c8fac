"""
Naming strategy registry.

Hosts usually configure the strategy by name (``"strict"``), the same way a
dialect is picked by backend name. Instances are passed through untouched.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Union

from .errors import NamingConfigurationError
from .strategies import LenientNamingStrategy, NamingStrategy, StrictNamingStrategy
from .utils import get_logger

StrategyFactory = Callable[[], NamingStrategy]

DEFAULT_STRATEGY = "lenient"

_registry: Dict[str, StrategyFactory] = {
    "lenient": LenientNamingStrategy,
    "postgres": LenientNamingStrategy,
    "strict": StrictNamingStrategy,
    "snake": StrictNamingStrategy,
}

logger = get_logger("config")


def _normalize(name: str) -> str:
    return name.strip().lower()


def register_naming_strategy(name: str, factory: StrategyFactory) -> None:
    key = _normalize(name)
    if not key:
        raise NamingConfigurationError("Naming strategy name cannot be empty.")
    if key in _registry:
        logger.info("Replacing naming strategy registered as '%s'", key)
    _registry[key] = factory


def available_naming_strategies() -> List[str]:
    return sorted(_registry)


def get_naming_strategy(
    strategy: Optional[Union[str, NamingStrategy]] = None,
) -> NamingStrategy:
    """
    Resolve ``strategy`` to a naming strategy instance.

    ``None`` selects the lenient default; strings are looked up
    case-insensitively; anything else is assumed to already be a strategy.
    """
    if strategy is None:
        strategy = DEFAULT_STRATEGY
    if not isinstance(strategy, str):
        return strategy
    try:
        factory = _registry[_normalize(strategy)]
    except KeyError as exc:
        known = ", ".join(available_naming_strategies())
        raise NamingConfigurationError(
            f"Unknown naming strategy '{strategy}'. Expected one of: {known}"
        ) from exc
    return factory()
