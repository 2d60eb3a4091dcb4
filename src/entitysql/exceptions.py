"""
Entity mapping exception classes.
"""


class MappingError(Exception):
    """Base class for all entity mapping errors.
    """


class UnsupportedTypeError(MappingError):
    """Host type has no entry in the dialect's type mapping table.
    """

    def __init__(self, host_type, dialect: str | None = None) -> None:
        self.host_type = host_type
        self.dialect = dialect
        name = getattr(host_type, '__name__', repr(host_type))
        if dialect:
            super().__init__(f'Unsupported host type for {dialect}: {name}')
        else:
            super().__init__(f'Unsupported host type: {name}')


class MissingPrimaryKeyError(MappingError):
    """Entity metadata has zero or more than one id column.
    """

    def __init__(self, table: str, found: int) -> None:
        self.table = table
        self.found = found
        super().__init__(f'Entity {table} must have exactly one id column, found {found}')


class MalformedMetadataError(MappingError):
    """Structurally invalid entity metadata.
    """
