from minorm.core import ScalarType
from minorm.core.fields import GenerationType
from minorm.definition import ColumnDefinition
from minorm.dialects import MySQLDialect


def test_mysql_dialect_quotes_with_backticks():
    dialect = MySQLDialect()
    assert dialect.quote_identifier("user") == "`user`"
    assert dialect.quote_identifier("we`ird") == "`we``ird`"
    assert dialect.format_table("shop.orders") == "`shop`.`orders`"


def test_mysql_dialect_auto_increment():
    dialect = MySQLDialect()
    column = ColumnDefinition(
        name="id",
        attribute="id",
        scalar_type=ScalarType.BIG_INTEGER,
        identifier=True,
        generation=GenerationType.IDENTITY,
    )
    assert dialect.render_column_definition(column) == "`id` BIGINT AUTO_INCREMENT"


def test_mysql_dialect_placeholder_and_empty_insert():
    dialect = MySQLDialect()
    assert dialect.parameter_placeholder() == "%s"
    assert dialect.default_values_clause() == "() VALUES ()"
    assert dialect.column_type(ScalarType.INTEGER) == "INT"
