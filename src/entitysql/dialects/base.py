"""
Base dialect interface for SQL rendering.

Defines the abstract base class that all database-specific dialects must
inherit from. A dialect renders the two composable fragments the statement
generators need, the column clause and the primary key clause, and owns the
keyword and punctuation constants used to assemble full statements.

Dialects hold no mutable state after construction. The type mapping table is
an explicit value passed in (or built per instance), so several tables and
dialects can coexist.
"""
from abc import ABC, abstractmethod
from typing import Any

from entitysql.entity import EntityColumn
from entitysql.types import DbColumnType, TypeMappingTable

# Registry of dialect name -> dialect class
# Defined here to avoid circular imports (concrete dialects import from base)
_DIALECT_REGISTRY: dict[str, type['Dialect']] = {}


def register_dialect(name: str):
    """Decorator to register a dialect class under a name.

    Usage:
        @register_dialect('h2')
        class H2Dialect(Dialect):
            ...
    """
    def decorator(cls: type['Dialect']) -> type['Dialect']:
        _DIALECT_REGISTRY[name] = cls
        return cls
    return decorator


def requires_not_null(column: EntityColumn) -> bool:
    """Decide whether a column clause carries `not null`.

    True when the column is a manually assigned primary key, or when the
    field has an explicit non-nullable constraint. The two checks are
    independent: an auto-generated id gets `not null` only through the
    explicit constraint.
    """
    manual_id = column.is_id and not column.is_generated
    return manual_id or not column.nullable


def build_column_clause(dialect: 'Dialect', column: EntityColumn,
                        generation_clause: str) -> str:
    """Assemble a column clause from a dialect's fragments.

    Order is fixed: name, type (with size suffix), generation clause for
    generated ids, `not null` when required, then the trailing separator.
    """
    clause = column.name + dialect.SPACE + dialect.column_type(column)

    if column.is_id and column.is_generated:
        clause += dialect.SPACE + generation_clause

    if requires_not_null(column):
        clause += dialect.SPACE + dialect.NOT_NULL

    return clause + dialect.separator()


def build_primary_key_clause(dialect: 'Dialect', column: EntityColumn) -> str:
    return (dialect.PRIMARY_KEY + dialect.SPACE
            + dialect.OPEN_PARENTHESIS + column.name + dialect.CLOSE_PARENTHESIS)


class Dialect(ABC):
    """Base class for database-specific SQL rendering.
    """

    CREATE_TABLE = 'create table'
    DROP_TABLE = 'drop table'
    INSERT_INTO = 'insert into'
    VALUES = 'values'
    SELECT = 'select'
    FROM = 'from'
    WHERE = 'where'
    EQUALS = '='
    NOT_NULL = 'not null'
    PRIMARY_KEY = 'primary key'
    GENERATED_BY = 'generated by default as '

    SPACE = ' '
    COMMA = ','
    OPEN_PARENTHESIS = '('
    CLOSE_PARENTHESIS = ')'

    def __init__(self, type_table: TypeMappingTable | None = None) -> None:
        self.type_table = type_table if type_table is not None else self.default_type_table()

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Registered name of this dialect."""

    @classmethod
    @abstractmethod
    def default_type_table(cls) -> TypeMappingTable:
        """Build the type mapping table used when none is passed in."""

    @abstractmethod
    def column_clause(self, column: EntityColumn) -> str:
        """Render the create table fragment for one column.

        The fragment ends with a comma and a space so clauses concatenate
        directly into a column list.

        Args:
            column: Column metadata

        Returns
            Column clause, e.g. `name varchar(20) not null, `
        """

    @abstractmethod
    def primary_key_clause(self, column: EntityColumn) -> str:
        """Render the primary key declaration for the id column.

        Args:
            column: The entity's id column

        Returns
            Primary key clause, e.g. `primary key (id)`
        """

    def resolve(self, host_type: Any) -> DbColumnType:
        """Resolve a host type through this dialect's type table.
        """
        return self.type_table.resolve(host_type)

    def column_type(self, column: EntityColumn) -> str:
        """Render the column type, including the size suffix for variable-width types.
        """
        return self.resolve(column.host_type).render(column.field)

    def format_literal(self, column: EntityColumn, value: Any) -> str:
        """Render a value as a SQL literal according to the column's host type.
        """
        return self.resolve(column.host_type).format_literal(value)

    def separator(self) -> str:
        """Separator between items of a column or value list."""
        return self.COMMA + self.SPACE

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.type_table!r})'
