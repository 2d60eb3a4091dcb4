"""
Query facade.

Single entry point exposing the five generation operations to the
persistence layer. A Query holds one generator of each kind bound to one
Dialect; swapping dialects means building a Query over another dialect.
"""
import logging
from dataclasses import fields
from typing import Any

from entitysql.cache import cacheable_statement, statement_caches
from entitysql.dialects import Dialect, get_dialect
from entitysql.entity import EntityData
from entitysql.options import QueryOptions
from entitysql.statements import CreateStatement, DropStatement
from entitysql.statements import FindAllStatement, FindByIdStatement
from entitysql.statements import InsertStatement

from libb import load_options

logger = logging.getLogger(__name__)


class Query:
    """Generates SQL statements for entities in one dialect.

    With `cache_statements`, create, drop and find-all statements are kept in
    this Query's own LRU caches of `cache_maxsize` entries each. They depend
    only on the entity metadata. Insert and find-by-id depend on call-time
    values and are always generated. A caching Query should not be shared
    across threads; without caching a Query holds no mutable state.
    """

    CACHED_STATEMENTS = ('create', 'drop', 'find_all')

    def __init__(self, dialect: Dialect | str = 'h2', cache_statements: bool = False,
                 cache_maxsize: int = 128) -> None:
        if isinstance(dialect, str):
            dialect = get_dialect(dialect)
        self.dialect = dialect
        self.cache_statements = cache_statements
        self.cache_maxsize = cache_maxsize
        self.caches = {}
        if cache_statements:
            self.caches = statement_caches(self.CACHED_STATEMENTS, cache_maxsize)
        self._create = CreateStatement(dialect)
        self._drop = DropStatement(dialect)
        self._insert = InsertStatement(dialect)
        self._find_all = FindAllStatement(dialect)
        self._find_by_id = FindByIdStatement(dialect)

    def clear_cache(self, table_name: str | None = None) -> None:
        """Drop cached statements, all of them or only those for one table.
        """
        for cache in self.caches.values():
            if table_name is None:
                cache.clear()
                continue
            for entity in [e for e in cache if e.table_name.lower() == table_name.lower()]:
                del cache[entity]

    @cacheable_statement('create')
    def create(self, entity: EntityData) -> str:
        return self._create(entity)

    @cacheable_statement('drop')
    def drop(self, entity: EntityData) -> str:
        return self._drop(entity)

    def insert(self, entity: EntityData, instance: Any) -> str:
        return self._insert(entity, instance)

    @cacheable_statement('find_all')
    def find_all(self, entity: EntityData) -> str:
        return self._find_all(entity)

    def find_by_id(self, entity: EntityData, id: Any) -> str:
        return self._find_by_id(entity, id)

    def __repr__(self) -> str:
        return f'Query(dialect={self.dialect.dialect_name!r})'


@load_options(cls=QueryOptions)
def get_query(options: QueryOptions | dict[str, Any] | str,
              config: Any | None = None, **kw: Any) -> Query:
    """Build a Query from options

    Args:
        options: Can be:
                - QueryOptions object
                - String name of a setting on the config object
                - Dictionary of options
                - Options specified as keyword arguments
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        Query bound to the configured dialect
    """
    if isinstance(options, QueryOptions):
        for field in fields(options):
            kw.pop(field.name, None)
    else:
        options_func = load_options(cls=QueryOptions)(lambda o, c: o)
        options = options_func(options, config, **kw)

    logger.debug(f'Building query for dialect {options.dialect}')
    return Query(get_dialect(options.dialect),
                 cache_statements=options.cache_statements,
                 cache_maxsize=options.cache_maxsize)
