import pytest
from entitysql.options import QueryOptions


def test_init_defaults():
    """Test default initialization"""
    options = QueryOptions()

    assert options.dialect == 'h2'
    assert options.cache_statements is False
    assert options.cache_maxsize == 128


def test_postgres_options():
    options = QueryOptions(dialect='postgresql', cache_statements=False, cache_maxsize=10)
    assert options.dialect == 'postgresql'
    assert options.cache_statements is False
    assert options.cache_maxsize == 10


def test_validation():
    """Test validation rules"""
    with pytest.raises(ValueError, match='dialect must be one of'):
        QueryOptions(dialect='invalid')

    with pytest.raises(ValueError, match='cache_maxsize'):
        QueryOptions(cache_maxsize=0)


if __name__ == '__main__':
    pytest.main([__file__])
