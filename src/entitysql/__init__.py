"""
SQL statement generation from entity metadata, with H2 and PostgreSQL dialects.

Statements can be generated either through a Query facade:
- q = get_query({'dialect': 'h2'}); q.create(entity)

or through the module functions, which use the shared default-dialect Query:
- entitysql.create(entity)
"""
__version__ = '0.1.0'

from typing import Any

from entitysql.dialects import Dialect, H2Dialect, PostgresDialect, get_dialect
from entitysql.dialects import register_dialect
from entitysql.entity import EntityColumn, EntityData, FieldRef, GenerationType
from entitysql.exceptions import MalformedMetadataError, MappingError
from entitysql.exceptions import MissingPrimaryKeyError, UnsupportedTypeError
from entitysql.options import QueryOptions
from entitysql.query import Query, get_query
from entitysql.types import DbColumnType, TypeMappingTable

_default_query = Query()


def create(entity: EntityData) -> str:
    """Generate CREATE TABLE for an entity in the default dialect.
    """
    return _default_query.create(entity)


def drop(entity: EntityData) -> str:
    """Generate DROP TABLE for an entity in the default dialect.
    """
    return _default_query.drop(entity)


def insert(entity: EntityData, instance: Any) -> str:
    """Generate INSERT of an entity instance in the default dialect.
    """
    return _default_query.insert(entity, instance)


def find_all(entity: EntityData) -> str:
    """Generate SELECT of all rows in the default dialect.
    """
    return _default_query.find_all(entity)


def find_by_id(entity: EntityData, id: Any) -> str:
    """Generate SELECT of one row by id in the default dialect.
    """
    return _default_query.find_by_id(entity, id)


__all__ = [
    'DbColumnType',
    'Dialect',
    'EntityColumn',
    'EntityData',
    'FieldRef',
    'GenerationType',
    'H2Dialect',
    'MalformedMetadataError',
    'MappingError',
    'MissingPrimaryKeyError',
    'PostgresDialect',
    'Query',
    'QueryOptions',
    'TypeMappingTable',
    'UnsupportedTypeError',
    'create',
    'drop',
    'find_all',
    'find_by_id',
    'get_dialect',
    'get_query',
    'insert',
    'register_dialect',
]
