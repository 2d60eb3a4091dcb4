"""
Dialect factory for database-specific SQL rendering.
"""
from functools import lru_cache

from entitysql.dialects.base import _DIALECT_REGISTRY
from entitysql.dialects.base import Dialect as Dialect
from entitysql.dialects.base import register_dialect as register_dialect
from entitysql.dialects.base import requires_not_null as requires_not_null
from entitysql.dialects.h2 import H2Dialect as H2Dialect
from entitysql.dialects.postgres import PostgresDialect as PostgresDialect


def _validate_dialect(dialect: str) -> None:
    """Raise ValueError if dialect is not registered."""
    if dialect not in _DIALECT_REGISTRY:
        available = list(_DIALECT_REGISTRY.keys())
        raise ValueError(f'Unsupported dialect: {dialect}. Available: {available}')


@lru_cache(maxsize=8)
def _get_dialect(dialect: str) -> Dialect:
    """Get cached dialect instance with its default type table."""
    _validate_dialect(dialect)
    return _DIALECT_REGISTRY[dialect]()


def get_dialect(dialect: str) -> Dialect:
    """Get the shared dialect instance for a dialect name.

    Dialects are immutable, so one instance per name serves every caller.
    """
    return _get_dialect(dialect)


def get_available_dialects() -> list[str]:
    """Return list of registered dialect names."""
    return list(_DIALECT_REGISTRY.keys())


def is_supported_dialect(dialect: str) -> bool:
    """Check if a dialect is supported."""
    return dialect in _DIALECT_REGISTRY


def get_dialect_class(dialect: str) -> type['Dialect']:
    """Get the dialect class for a name without instantiating."""
    _validate_dialect(dialect)
    return _DIALECT_REGISTRY[dialect]
