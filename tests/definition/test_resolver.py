import pytest

from minorm.core import (
    AutoField,
    BigIntegerField,
    Field,
    IntegerField,
    Model,
    ScalarType,
    StringField,
)
from minorm.core.fields import GenerationType
from minorm.definition import ColumnDefinition, MetadataResolver, TableDefinition
from minorm.errors import InvalidMapping, UnsupportedType


class Entity1(Model):
    id = BigIntegerField(primary_key=True)
    age = IntegerField()


class Entity2(Model):
    id = BigIntegerField(primary_key=True)
    name = StringField(db_column="nick_name", max_length=60, nullable=False)


class OrderLine(Model):
    id = AutoField()
    note = StringField()


@pytest.fixture
def resolver():
    return MetadataResolver()


def test_resolves_columns_in_declaration_order(resolver):
    table = resolver.resolve(Entity1)
    assert table.name == "entity1"
    assert [column.name for column in table.columns] == ["id", "age"]
    assert table.id_column.name == "id"
    assert table.columns[0].scalar_type is ScalarType.BIG_INTEGER
    assert table.columns[1].scalar_type is ScalarType.INTEGER


def test_column_name_override_and_constraints(resolver):
    table = resolver.resolve(Entity2)
    name_column = table.column("nick_name")
    assert name_column.attribute == "name"
    assert name_column.length == 60
    assert name_column.nullable is False


def test_string_length_defaults_to_255(resolver):
    table = resolver.resolve(OrderLine)
    assert table.name == "order_line"
    assert table.column("note").length == 255
    assert table.id_column.generation is GenerationType.IDENTITY


def test_table_name_override(resolver):
    class Tagged(Model):
        id = BigIntegerField(primary_key=True)

        class Meta:
            table = "tags"

    assert resolver.resolve(Tagged).name == "tags"


def test_definition_is_cached_per_type(resolver):
    assert resolver.resolve(Entity1) is resolver.resolve(Entity1)
    first = resolver.resolve(Entity1)
    resolver.clear()
    assert resolver.resolve(Entity1) is not first


def test_zero_identifiers_is_invalid(resolver):
    class NoKey(Model):
        name = StringField()

    with pytest.raises(InvalidMapping):
        resolver.resolve(NoKey)


def test_multiple_identifiers_is_invalid(resolver):
    class TwoKeys(Model):
        a = BigIntegerField(primary_key=True)
        b = BigIntegerField(primary_key=True)

    with pytest.raises(InvalidMapping):
        resolver.resolve(TwoKeys)


def test_generation_on_non_identifier_is_invalid(resolver):
    class Misplaced(Model):
        id = BigIntegerField(primary_key=True)
        seq = BigIntegerField(generation=GenerationType.IDENTITY)

    with pytest.raises(InvalidMapping):
        resolver.resolve(Misplaced)


def test_generated_string_identifier_is_invalid(resolver):
    class Coded(Model):
        code = StringField(primary_key=True, generation=GenerationType.IDENTITY)

    with pytest.raises(InvalidMapping):
        resolver.resolve(Coded)


def test_duplicate_column_names_are_invalid(resolver):
    class Clash(Model):
        id = BigIntegerField(primary_key=True)
        a = StringField(db_column="value")
        b = StringField(db_column="value")

    with pytest.raises(InvalidMapping):
        resolver.resolve(Clash)


def test_field_without_scalar_type_is_unsupported(resolver):
    class Blob(Model):
        id = BigIntegerField(primary_key=True)
        payload = Field()

    with pytest.raises(UnsupportedType):
        resolver.resolve(Blob)


def test_non_model_is_rejected(resolver):
    class Plain:
        pass

    with pytest.raises(InvalidMapping):
        resolver.resolve(Plain)


def test_table_definition_requires_single_identifier():
    column = ColumnDefinition(name="age", attribute="age", scalar_type=ScalarType.INTEGER)
    with pytest.raises(InvalidMapping):
        TableDefinition(model=Entity1, name="entity1", columns=(column,))


def test_present_values_skip_unset_fields(resolver):
    table = resolver.resolve(Entity2)
    assert table.present_values(Entity2(id=5)) == {"id": 5}
    assert table.present_values(Entity2(id=5, name="Jo")) == {"id": 5, "nick_name": "Jo"}
