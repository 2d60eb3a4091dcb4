"""
Unit tests for type mapping tables and literal formatting.
"""
import datetime
import decimal

import pytest
from entitysql.entity import FieldRef
from entitysql.exceptions import UnsupportedTypeError
from entitysql.types import DbColumnType, TypeMappingTable, h2_type_table
from entitysql.types import postgres_type_table

HOST_TYPES = [int, str, float, bool, decimal.Decimal, datetime.date,
              datetime.datetime, datetime.time, bytes]


@pytest.mark.parametrize('table_factory', [h2_type_table, postgres_type_table])
@pytest.mark.parametrize('host_type', HOST_TYPES)
def test_every_supported_type_resolves(table_factory, host_type):
    entry = table_factory().resolve(host_type)
    assert entry.host_type is host_type
    assert entry.db_type


@pytest.mark.parametrize('table_factory', [h2_type_table, postgres_type_table])
def test_tables_cover_same_types(table_factory):
    table = table_factory()
    assert len(table) == len(HOST_TYPES)
    assert set(table.host_types()) == set(HOST_TYPES)


@pytest.mark.parametrize(('host_type', 'expected'), [
    (int, 'bigint'),
    (float, 'double'),
    (bool, 'boolean'),
    (decimal.Decimal, 'decimal'),
    (datetime.date, 'date'),
    (datetime.datetime, 'timestamp'),
    (datetime.time, 'time'),
])
def test_h2_fixed_width_types(host_type, expected):
    assert h2_type_table().resolve(host_type).render(FieldRef('x', length=20)) == expected


@pytest.mark.parametrize(('host_type', 'expected'), [
    (float, 'double precision'),
    (decimal.Decimal, 'numeric'),
    (bytes, 'bytea'),
])
def test_postgres_types(host_type, expected):
    assert postgres_type_table().resolve(host_type).render(FieldRef('x')) == expected


def test_variable_width_render():
    table = h2_type_table()
    assert table.resolve(str).is_variable_width
    assert table.resolve(str).render(FieldRef('name', length=20)) == 'varchar(20)'
    assert table.resolve(str).render(FieldRef('name')) == 'varchar(255)'
    assert table.resolve(bytes).render(FieldRef('data', length=16)) == 'varbinary(16)'
    assert not table.resolve(int).is_variable_width


@pytest.mark.parametrize('host_type', [list, dict, object, 'int', ['unhashable']])
def test_unsupported_type(host_type):
    table = h2_type_table()
    with pytest.raises(UnsupportedTypeError) as exc_info:
        table.resolve(host_type)
    assert exc_info.value.dialect == 'h2'
    assert host_type not in table


def test_lookup_is_exact():
    """bool and int are distinct entries and subclasses do not match"""
    table = TypeMappingTable([DbColumnType(int, 'bigint')])
    with pytest.raises(UnsupportedTypeError):
        table.resolve(bool)


def test_with_overrides_returns_new_table():
    table = h2_type_table()
    custom = table.with_overrides(DbColumnType(str, 'text'), DbColumnType(list, 'json'))
    assert custom.resolve(str).render(FieldRef('name')) == 'text'
    assert custom.resolve(list).db_type == 'json'
    assert custom.dialect == 'h2'
    assert table.resolve(str).db_type == 'varchar'
    assert list not in table


def test_tables_are_independent():
    assert h2_type_table() is not h2_type_table()


class TestLiterals:
    """Tests for literal formatting by host type"""

    @pytest.mark.parametrize(('host_type', 'value', 'expected'), [
        (int, 5, '5'),
        (int, -12, '-12'),
        (float, 1.5, '1.5'),
        (decimal.Decimal, decimal.Decimal('1.50'), '1.50'),
        (bool, True, 'true'),
        (bool, False, 'false'),
        (str, 'Ann', "'Ann'"),
        (str, "O'Brien", "'O''Brien'"),
        (str, '', "''"),
        (datetime.date, datetime.date(2024, 1, 2), "'2024-01-02'"),
        (datetime.datetime, datetime.datetime(2024, 1, 2, 3, 4, 5), "'2024-01-02 03:04:05'"),
        (datetime.time, datetime.time(13, 30), "'13:30:00'"),
        (bytes, b'\x01\xff', "X'01ff'"),
    ])
    def test_h2_literal(self, host_type, value, expected):
        assert h2_type_table().resolve(host_type).format_literal(value) == expected

    @pytest.mark.parametrize('host_type', HOST_TYPES)
    def test_null_literal(self, host_type):
        assert h2_type_table().resolve(host_type).format_literal(None) == 'null'

    @pytest.mark.parametrize(('host_type', 'value'), [
        (float, float('nan')),
        (float, float('inf')),
        (float, float('-inf')),
        (decimal.Decimal, decimal.Decimal('NaN')),
        (decimal.Decimal, decimal.Decimal('Infinity')),
    ])
    def test_non_finite_numbers_rejected(self, host_type, value):
        with pytest.raises(ValueError, match='Non-finite'):
            h2_type_table().resolve(host_type).format_literal(value)

    def test_postgres_bytea_literal(self):
        assert postgres_type_table().resolve(bytes).format_literal(b'\x01\xff') == "'\\x01ff'"
