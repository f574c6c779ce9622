import pytest

from minorm.core import ScalarType
from minorm.dialects import BaseDialect, H2Dialect, PostgresDialect, get_dialect
from minorm.errors import UnsupportedType


def test_h2_leaves_plain_identifiers_bare():
    dialect = H2Dialect()
    assert dialect.quote_identifier("entity1") == "entity1"
    assert dialect.quote_identifier("nick_name") == "nick_name"


def test_h2_quotes_reserved_and_irregular_identifiers():
    dialect = H2Dialect()
    assert dialect.quote_identifier("user") == '"user"'
    assert dialect.quote_identifier("first name") == '"first name"'


def test_h2_type_mapping_is_total():
    dialect = H2Dialect()
    assert [dialect.column_type(scalar_type, 60) for scalar_type in ScalarType] == [
        "BIGINT",
        "INT",
        "VARCHAR(60)",
        "DOUBLE",
        "BOOLEAN",
    ]


def test_unmapped_type_is_unsupported():
    class PartialDialect(BaseDialect):
        name = "partial"
        type_names = {ScalarType.INTEGER: "INT"}

    with pytest.raises(UnsupportedType):
        PartialDialect().column_type(ScalarType.STRING, 10)


def test_get_dialect_returns_shared_instances():
    assert isinstance(get_dialect("h2"), H2Dialect)
    assert get_dialect("postgres") is get_dialect("PostgreSQL")
    assert isinstance(get_dialect("postgres"), PostgresDialect)
    with pytest.raises(ValueError):
        get_dialect("oracle")
