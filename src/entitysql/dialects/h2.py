"""
H2-specific dialect implementation.

Generated keys render as `generated by default as <strategy>`, using the
lowercased strategy name (identity, sequence, ...).
"""
from entitysql.dialects.base import Dialect, build_column_clause
from entitysql.dialects.base import build_primary_key_clause, register_dialect
from entitysql.entity import EntityColumn
from entitysql.types import TypeMappingTable, h2_type_table


@register_dialect('h2')
class H2Dialect(Dialect):
    """H2 database SQL rendering.
    """

    @property
    def dialect_name(self) -> str:
        """Return the dialect identifier for H2."""
        return 'h2'

    @classmethod
    def default_type_table(cls) -> TypeMappingTable:
        return h2_type_table()

    def column_clause(self, column: EntityColumn) -> str:
        generation = ''
        if column.is_generated:
            generation = self.GENERATED_BY + column.generation.name.lower()
        return build_column_clause(self, column, generation)

    def primary_key_clause(self, column: EntityColumn) -> str:
        return build_primary_key_clause(self, column)
