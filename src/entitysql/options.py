from dataclasses import dataclass

from entitysql.dialects import get_available_dialects, is_supported_dialect

from libb import ConfigOptions

__all__ = ['QueryOptions']


@dataclass
class QueryOptions(ConfigOptions):
    """Options

    supported dialect names: `h2`, `postgresql`

    Statement caching options:
    - cache_statements: Memoize create/drop/find-all statements in the Query (default: False)
    - cache_maxsize: Maximum cached statements per statement kind in each Query (default: 128)
    """
    dialect: str = 'h2'
    cache_statements: bool = False
    cache_maxsize: int = 128

    def __post_init__(self):
        if not is_supported_dialect(self.dialect):
            available = get_available_dialects()
            raise ValueError(f'dialect must be one of: {available}')
        if self.cache_maxsize <= 0:
            raise ValueError('cache_maxsize must be positive')
