"""
Statement generators.

Each generator is bound to one Dialect and turns entity metadata (plus an
instance or id value where needed) into one complete SQL string. Generators
keep no state between calls and never execute SQL.

    CreateStatement   -> create table <table> (<column clauses><primary key clause>)
    DropStatement     -> drop table <table>
    InsertStatement   -> insert into <table> (<columns>) values (<literals>)
    FindAllStatement  -> select <columns> from <table>
    FindByIdStatement -> select <columns> from <table> where <id> = <literal>
"""
import logging
from abc import ABC, abstractmethod
from typing import Any

from entitysql.dialects import Dialect
from entitysql.entity import EntityData

logger = logging.getLogger(__name__)


class StatementGenerator(ABC):
    """Base class for statement generators.
    """

    kind: str = ''

    def __init__(self, dialect: Dialect) -> None:
        self.dialect = dialect

    def column_list(self, entity: EntityData) -> str:
        """Comma-joined column names in declaration order."""
        return self.dialect.separator().join(entity.column_names)

    def _select_from(self, entity: EntityData) -> str:
        d = self.dialect
        return (d.SELECT + d.SPACE + self.column_list(entity)
                + d.SPACE + d.FROM + d.SPACE + entity.table_name)

    @abstractmethod
    def generate(self, entity: EntityData, *args: Any) -> str:
        """Generate the SQL statement for an entity."""

    def __call__(self, entity: EntityData, *args: Any) -> str:
        sql = self.generate(entity, *args)
        logger.debug(f'Generated {self.kind} statement for {entity.table_name}')
        return sql


class CreateStatement(StatementGenerator):
    """CREATE TABLE with one clause per column followed by the primary key.
    """

    kind = 'create'

    def generate(self, entity: EntityData) -> str:
        d = self.dialect
        id_column = entity.id_column
        columns = ''.join(d.column_clause(column) for column in entity.columns)
        return (d.CREATE_TABLE + d.SPACE + entity.table_name + d.SPACE
                + d.OPEN_PARENTHESIS + columns + d.primary_key_clause(id_column)
                + d.CLOSE_PARENTHESIS)


class DropStatement(StatementGenerator):

    kind = 'drop'

    def generate(self, entity: EntityData) -> str:
        d = self.dialect
        return d.DROP_TABLE + d.SPACE + entity.table_name


class InsertStatement(StatementGenerator):
    """INSERT of every column, values read from an entity instance.

    Values are rendered as literals using each column's host type, in the
    same order as the column list.
    """

    kind = 'insert'

    def generate(self, entity: EntityData, instance: Any) -> str:
        d = self.dialect
        values = d.separator().join(
            d.format_literal(column, column.field.value_of(instance))
            for column in entity.columns)
        return (d.INSERT_INTO + d.SPACE + entity.table_name + d.SPACE
                + d.OPEN_PARENTHESIS + self.column_list(entity) + d.CLOSE_PARENTHESIS
                + d.SPACE + d.VALUES + d.SPACE
                + d.OPEN_PARENTHESIS + values + d.CLOSE_PARENTHESIS)


class FindAllStatement(StatementGenerator):

    kind = 'find_all'

    def generate(self, entity: EntityData) -> str:
        return self._select_from(entity)


class FindByIdStatement(StatementGenerator):
    """SELECT of one row by primary key.

    The id value is formatted according to the id column's host type.
    """

    kind = 'find_by_id'

    def generate(self, entity: EntityData, id: Any) -> str:
        d = self.dialect
        id_column = entity.id_column
        return (self._select_from(entity) + d.SPACE + d.WHERE + d.SPACE
                + id_column.name + d.SPACE + d.EQUALS + d.SPACE
                + d.format_literal(id_column, id))
