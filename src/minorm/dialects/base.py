"""
Dialect strategy interface and the shared rendering logic behind it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Mapping, Protocol

from ..core.fields import DEFAULT_STRING_LENGTH, ScalarType
from ..errors import UnsupportedType

if TYPE_CHECKING:
    from ..definition.table import ColumnDefinition


class Dialect(Protocol):
    """
    Strategy interface consumed by the SQL builders.

    Every piece of SQL text that differs between databases is produced by
    one of these methods.
    """

    @property
    def name(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def column_type(self, scalar_type: ScalarType, length: int | None = None) -> str: ...

    def render_constraints(self, column: "ColumnDefinition") -> str: ...

    def render_column_definition(self, column: "ColumnDefinition") -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def default_values_clause(self) -> str: ...


class BaseDialect:
    """
    Rendering shared by the bundled dialects.

    Subclasses supply ``type_names`` (``{length}`` is substituted for
    sized types), identifier quoting and the identity clause.
    """

    name: ClassVar[str] = "generic"
    type_names: ClassVar[Mapping[ScalarType, str]] = {}
    identity_clause: ClassVar[str] = ""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def column_type(self, scalar_type: ScalarType, length: int | None = None) -> str:
        try:
            template = self.type_names[scalar_type]
        except KeyError as exc:
            raise UnsupportedType(
                f"Dialect '{self.name}' has no SQL type for {scalar_type!r}"
            ) from exc
        return template.format(length=length or DEFAULT_STRING_LENGTH)

    def render_constraints(self, column: "ColumnDefinition") -> str:
        parts: list[str] = []
        if not column.nullable:
            parts.append("NOT NULL")
        if column.is_generated and self.identity_clause:
            parts.append(self.identity_clause)
        return " ".join(parts)

    def render_column_definition(self, column: "ColumnDefinition") -> str:
        rendered = (
            f"{self.quote_identifier(column.name)} "
            f"{self.column_type(column.scalar_type, column.length)}"
        )
        constraints = self.render_constraints(column)
        if constraints:
            rendered = f"{rendered} {constraints}"
        return rendered

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "?"

    def default_values_clause(self) -> str:
        return "DEFAULT VALUES"
