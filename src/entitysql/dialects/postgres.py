"""
PostgreSQL-specific dialect implementation.

PostgreSQL has one generated-key form, identity columns, so every
generation strategy renders as `generated by default as identity`.
"""
from entitysql.dialects.base import Dialect, build_column_clause
from entitysql.dialects.base import build_primary_key_clause, register_dialect
from entitysql.entity import EntityColumn
from entitysql.types import TypeMappingTable, postgres_type_table


@register_dialect('postgresql')
class PostgresDialect(Dialect):
    """PostgreSQL SQL rendering.

    Unlike H2, the generation clause does not echo the strategy name:
    PostgreSQL has no `generated ... as sequence` (or auto, table) form, so
    every generated id renders as an identity column.
    """

    IDENTITY = 'identity'

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for PostgreSQL."""
        return 'postgresql'

    @classmethod
    def default_type_table(cls) -> TypeMappingTable:
        return postgres_type_table()

    def column_clause(self, column: EntityColumn) -> str:
        return build_column_clause(self, column, self.GENERATED_BY + self.IDENTITY)

    def primary_key_clause(self, column: EntityColumn) -> str:
        return build_primary_key_clause(self, column)
