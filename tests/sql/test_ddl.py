from minorm.core import AutoField, BigIntegerField, IntegerField, Model, StringField
from minorm.definition import resolve_table
from minorm.dialects import H2Dialect, MySQLDialect, PostgresDialect, SQLiteDialect
from minorm.sql import create_table_sql, drop_table_sql


class Entity1(Model):
    id = BigIntegerField(primary_key=True)
    age = IntegerField()


class Entity2(Model):
    id = BigIntegerField(primary_key=True)
    name = StringField(db_column="nick_name", max_length=60, nullable=False)


class Ticket(Model):
    id = AutoField()
    title = StringField(max_length=80)


def test_create_table_for_h2():
    sql = create_table_sql(resolve_table(Entity1), H2Dialect())
    assert sql == "CREATE TABLE entity1 (id BIGINT, age INT, PRIMARY KEY (id));"


def test_create_table_with_column_constraints():
    sql = create_table_sql(resolve_table(Entity2), H2Dialect())
    assert sql == (
        "CREATE TABLE entity2 (id BIGINT, nick_name VARCHAR(60) NOT NULL, PRIMARY KEY (id));"
    )


def test_create_table_with_generated_identifier_per_dialect():
    table = resolve_table(Ticket)
    assert create_table_sql(table, H2Dialect()) == (
        "CREATE TABLE ticket (id BIGINT AUTO_INCREMENT, title VARCHAR(80), PRIMARY KEY (id));"
    )
    assert create_table_sql(table, SQLiteDialect()) == (
        'CREATE TABLE "ticket" ("id" INTEGER, "title" VARCHAR(80), PRIMARY KEY ("id"));'
    )
    assert create_table_sql(table, PostgresDialect()) == (
        'CREATE TABLE "ticket" ("id" BIGINT GENERATED BY DEFAULT AS IDENTITY, '
        '"title" VARCHAR(80), PRIMARY KEY ("id"));'
    )
    assert create_table_sql(table, MySQLDialect()) == (
        "CREATE TABLE `ticket` (`id` BIGINT AUTO_INCREMENT, `title` VARCHAR(80), PRIMARY KEY (`id`));"
    )


def test_create_table_is_deterministic():
    table = resolve_table(Entity2)
    dialect = PostgresDialect()
    assert create_table_sql(table, dialect) == create_table_sql(table, dialect)


def test_drop_table():
    assert drop_table_sql(resolve_table(Entity1), H2Dialect()) == "DROP TABLE entity1;"
    assert drop_table_sql(resolve_table(Entity1), MySQLDialect()) == "DROP TABLE `entity1`;"
