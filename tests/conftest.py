import datetime
import decimal
import pathlib
import site
from dataclasses import dataclass

import pytest
from entitysql.entity import EntityColumn, EntityData, FieldRef, GenerationType

HERE = pathlib.Path(pathlib.Path(__file__).resolve()).parent
site.addsitedir(HERE)


@dataclass
class User:
    id: int | None
    name: str


@pytest.fixture
def users():
    """Entity with a generated bigint id and a non-null varchar(20) name"""
    return EntityData('users', (
        EntityColumn(FieldRef('id'), int, is_id=True, generation=GenerationType.IDENTITY),
        EntityColumn(FieldRef('name', length=20), str, nullable=False),
    ))


@pytest.fixture
def accounts():
    """Entity with a manually assigned text id and assorted column types"""
    return EntityData('accounts', (
        EntityColumn(FieldRef('code', length=8), str, is_id=True),
        EntityColumn(FieldRef('balance'), decimal.Decimal),
        EntityColumn(FieldRef('active'), bool, column_name='is_active'),
        EntityColumn(FieldRef('opened'), datetime.date),
        EntityColumn(FieldRef('updated'), datetime.datetime),
    ))


@pytest.fixture
def user():
    return User(id=5, name='Ann')
