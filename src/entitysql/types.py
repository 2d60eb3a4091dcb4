"""
Type mapping tables from host (Python) types to database column types.

Each dialect owns one TypeMappingTable, an explicit value built from an
enumeration of DbColumnType entries. Tables are never mutated after
construction; `with_overrides` returns a new table.

The module also holds the literal formatters used to render values in
INSERT and WHERE clauses:

- textual and temporal values are single-quoted with embedded quotes doubled
- numeric values are rendered bare; NaN and infinities raise ValueError
- booleans render as `true` / `false`
- None renders as `null` regardless of type
"""
import datetime
import decimal
import logging
import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from entitysql.entity import FieldRef
from entitysql.exceptions import UnsupportedTypeError

logger = logging.getLogger(__name__)

NULL = 'null'


# Literal formatters

def quote_string(value: str) -> str:
    """Quote a string literal, doubling any embedded single quotes.
    """
    return "'" + value.replace("'", "''") + "'"


def text_literal(value: Any) -> str:
    return quote_string(str(value))


def numeric_literal(value: Any) -> str:
    """Render a number bare.

    Raises ValueError for NaN and infinities, which have no SQL literal.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f'Non-finite number has no SQL literal: {value!r}')
    if isinstance(value, decimal.Decimal) and not value.is_finite():
        raise ValueError(f'Non-finite number has no SQL literal: {value!r}')
    return str(value)


def boolean_literal(value: Any) -> str:
    return 'true' if value else 'false'


def date_literal(value: datetime.date | datetime.time) -> str:
    return quote_string(value.isoformat())


def datetime_literal(value: datetime.datetime) -> str:
    return quote_string(value.isoformat(sep=' '))


def hex_literal(value: bytes) -> str:
    """H2 / SQL standard binary string literal."""
    return f"X'{bytes(value).hex()}'"


def bytea_literal(value: bytes) -> str:
    """PostgreSQL bytea hex-format literal."""
    return f"'\\x{bytes(value).hex()}'"


def length_extra(field: FieldRef) -> str:
    """Render the declared size of a variable-width column, e.g. `(20)`.
    """
    return f'({field.length})'


@dataclass(frozen=True)
class DbColumnType:
    """Mapping of one host type to a database column type.

    `render_extra` is set only for variable-width types and renders the
    suffix appended after the type name from the field's size constraint.
    """
    host_type: Any
    db_type: str
    render_extra: Callable[[FieldRef], str] | None = None
    literal: Callable[[Any], str] = numeric_literal

    @property
    def is_variable_width(self) -> bool:
        return self.render_extra is not None

    def render(self, field: FieldRef) -> str:
        """Render the full column type for a field, including any size suffix.
        """
        if self.render_extra is None:
            return self.db_type
        return self.db_type + self.render_extra(field)

    def format_literal(self, value: Any) -> str:
        if value is None:
            return NULL
        return self.literal(value)


class TypeMappingTable:
    """Lookup from host type to DbColumnType for a single dialect.

    Lookup is by exact key: `bool` does not fall back to `int` and subclasses
    do not match their base type. Unknown host types raise
    UnsupportedTypeError rather than defaulting to some column type.
    """

    def __init__(self, entries: Iterable[DbColumnType], dialect: str | None = None) -> None:
        self.dialect = dialect
        self._entries: dict[Any, DbColumnType] = {}
        for entry in entries:
            self._entries[entry.host_type] = entry

    def resolve(self, host_type: Any) -> DbColumnType:
        """Resolve a host type to its database column type.

        Args:
            host_type: Host type identifier, usually a Python type

        Returns
            DbColumnType for the host type

        Raises
            UnsupportedTypeError: If the table has no entry for host_type
        """
        try:
            return self._entries[host_type]
        except (KeyError, TypeError):
            logger.debug(f'No {self.dialect or "database"} type mapping for {host_type!r}')
            raise UnsupportedTypeError(host_type, self.dialect) from None

    def with_overrides(self, *entries: DbColumnType) -> 'TypeMappingTable':
        """Return a new table with the given entries added or replaced.
        """
        return TypeMappingTable([*self._entries.values(), *entries], dialect=self.dialect)

    def host_types(self) -> list[Any]:
        return list(self._entries)

    def __contains__(self, host_type: Any) -> bool:
        try:
            return host_type in self._entries
        except TypeError:
            return False

    def __iter__(self) -> Iterator[DbColumnType]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'TypeMappingTable(dialect={self.dialect!r}, types={len(self)})'


def h2_type_table() -> TypeMappingTable:
    """Default H2 type mapping table.
    """
    return TypeMappingTable([
        DbColumnType(int, 'bigint'),
        DbColumnType(str, 'varchar', length_extra, text_literal),
        DbColumnType(float, 'double'),
        DbColumnType(bool, 'boolean', literal=boolean_literal),
        DbColumnType(decimal.Decimal, 'decimal'),
        DbColumnType(datetime.date, 'date', literal=date_literal),
        DbColumnType(datetime.datetime, 'timestamp', literal=datetime_literal),
        DbColumnType(datetime.time, 'time', literal=date_literal),
        DbColumnType(bytes, 'varbinary', length_extra, hex_literal),
    ], dialect='h2')


def postgres_type_table() -> TypeMappingTable:
    """Default PostgreSQL type mapping table.
    """
    return TypeMappingTable([
        DbColumnType(int, 'bigint'),
        DbColumnType(str, 'varchar', length_extra, text_literal),
        DbColumnType(float, 'double precision'),
        DbColumnType(bool, 'boolean', literal=boolean_literal),
        DbColumnType(decimal.Decimal, 'numeric'),
        DbColumnType(datetime.date, 'date', literal=date_literal),
        DbColumnType(datetime.datetime, 'timestamp', literal=datetime_literal),
        DbColumnType(datetime.time, 'time', literal=date_literal),
        DbColumnType(bytes, 'bytea', literal=bytea_literal),
    ], dialect='postgresql')
