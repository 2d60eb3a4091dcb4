"""
Entity metadata model.

Passive, precomputed descriptions of a mapped type and its columns. The
introspection layer builds these once per entity at registration time;
statement generation only ever reads them.
"""
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from entitysql.exceptions import MalformedMetadataError, MissingPrimaryKeyError

DEFAULT_LENGTH = 255


class GenerationType(Enum):
    """Primary key generation strategies.
    """
    AUTO = 'auto'
    IDENTITY = 'identity'
    SEQUENCE = 'sequence'
    TABLE = 'table'


@dataclass(frozen=True)
class FieldRef:
    """Descriptor of the underlying entity field.

    Values are read by key from mappings and by attribute from anything else,
    unless an explicit accessor is given.
    """
    name: str
    length: int = DEFAULT_LENGTH
    accessor: Callable[[Any], Any] | None = field(default=None, compare=False)

    def value_of(self, instance: Any) -> Any:
        """Extract this field's value from an entity instance.
        """
        if self.accessor is not None:
            return self.accessor(instance)
        if isinstance(instance, Mapping):
            return instance[self.name]
        return getattr(instance, self.name)


@dataclass(frozen=True)
class EntityColumn:
    """One mapped field of an entity.
    """
    field: FieldRef
    host_type: Any
    column_name: str | None = None
    is_id: bool = False
    generation: GenerationType | None = None
    nullable: bool = True

    @property
    def name(self) -> str:
        return self.column_name or self.field.name

    @property
    def is_generated(self) -> bool:
        return self.generation is not None

    @property
    def length(self) -> int:
        return self.field.length


@dataclass(frozen=True)
class EntityData:
    """One mapped entity: a table name and its columns in declaration order.

    Raises MalformedMetadataError on construction if the table name is empty,
    there are no columns, or column names repeat.
    """
    table_name: str
    columns: tuple[EntityColumn, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, 'columns', tuple(self.columns))
        if not self.table_name:
            raise MalformedMetadataError('Entity table name must not be empty')
        if not self.columns:
            raise MalformedMetadataError(f'Entity {self.table_name} has no columns')
        seen = set()
        for column in self.columns:
            if column.name in seen:
                raise MalformedMetadataError(
                    f'Duplicate column name in {self.table_name}: {column.name}')
            seen.add(column.name)

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]

    @property
    def id_column(self) -> EntityColumn:
        """The single primary key column.

        Raises MissingPrimaryKeyError unless exactly one column is marked as id.
        """
        ids = [column for column in self.columns if column.is_id]
        if len(ids) != 1:
            raise MissingPrimaryKeyError(self.table_name, len(ids))
        return ids[0]
