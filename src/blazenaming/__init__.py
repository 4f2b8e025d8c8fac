"""
blazenaming public package initialization.

Naming strategies that keep ORM schemas on ``snake_case`` tables and
columns, with plural table names derived from singular entity classes.
"""

from .config import (  # noqa: F401
    available_naming_strategies,
    get_naming_strategy,
    register_naming_strategy,
)
from .errors import (  # noqa: F401
    ColumnNameMustBeSnakeCaseError,
    ManyToManyPropertyMustBePluralError,
    NamingConfigurationError,
    NamingConventionError,
    PropertyNameMustBeCamelCaseError,
    TableClassNameMustBePascalCaseError,
    TableClassNameMustBeSingularError,
    TableNameMustBePluralError,
    TableNameMustBeSnakeCaseError,
)
from .strategies import (  # noqa: F401
    DefaultNamingStrategy,
    LenientNamingStrategy,
    NamingStrategy,
    StrictNamingStrategy,
)

__all__ = [
    "NamingStrategy",
    "DefaultNamingStrategy",
    "LenientNamingStrategy",
    "StrictNamingStrategy",
    "get_naming_strategy",
    "register_naming_strategy",
    "available_naming_strategies",
    "NamingConventionError",
    "NamingConfigurationError",
    "TableNameMustBePluralError",
    "TableNameMustBeSnakeCaseError",
    "TableClassNameMustBeSingularError",
    "TableClassNameMustBePascalCaseError",
    "ColumnNameMustBeSnakeCaseError",
    "PropertyNameMustBeCamelCaseError",
    "ManyToManyPropertyMustBePluralError",
]
