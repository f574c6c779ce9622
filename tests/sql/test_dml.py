from minorm.core import AutoField, BigIntegerField, IntegerField, Model, StringField
from minorm.definition import resolve_table
from minorm.dialects import H2Dialect, MySQLDialect, PostgresDialect, SQLiteDialect
from minorm.sql import insert_sql, select_by_key_sql


class Entity1(Model):
    id = BigIntegerField(primary_key=True)
    age = IntegerField()


class Ticket(Model):
    id = AutoField()
    title = StringField()
    priority = IntegerField()


def test_select_by_key():
    table = resolve_table(Entity1)
    assert select_by_key_sql(table, H2Dialect()) == "SELECT * FROM entity1 WHERE id = ?;"
    assert (
        select_by_key_sql(table, PostgresDialect())
        == 'SELECT * FROM "entity1" WHERE "id" = %s;'
    )


def test_insert_binds_values_in_column_order():
    table = resolve_table(Entity1)
    sql, params = insert_sql(table, H2Dialect(), {"age": 30, "id": 1})
    assert sql == "INSERT INTO entity1 (id, age) VALUES (?, ?);"
    assert params == [1, 30]


def test_insert_omits_generated_identifier_and_absent_columns():
    table = resolve_table(Ticket)
    sql, params = insert_sql(table, SQLiteDialect(), {"id": 9, "title": "Fix"})
    assert sql == 'INSERT INTO "ticket" ("title") VALUES (?);'
    assert params == ["Fix"]


def test_insert_never_inlines_values():
    table = resolve_table(Ticket)
    sql, params = insert_sql(table, H2Dialect(), {"title": "x'); DROP TABLE ticket; --"})
    assert "DROP" not in sql
    assert params == ["x'); DROP TABLE ticket; --"]


def test_insert_with_nothing_to_bind_uses_default_values():
    table = resolve_table(Ticket)
    assert insert_sql(table, H2Dialect(), {}) == ("INSERT INTO ticket DEFAULT VALUES;", [])
    assert insert_sql(table, MySQLDialect(), {}) == ("INSERT INTO `ticket` () VALUES ();", [])
