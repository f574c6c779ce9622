"""
Immutable column and table definitions derived from model metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from ..core.fields import GenerationType, ScalarType
from ..errors import InvalidMapping

if TYPE_CHECKING:
    from ..core.model import Model


@dataclass(frozen=True)
class ColumnDefinition:
    name: str
    attribute: str
    scalar_type: ScalarType
    nullable: bool = True
    length: Optional[int] = None
    identifier: bool = False
    generation: Optional[GenerationType] = None

    @property
    def is_generated(self) -> bool:
        return self.generation is not None


@dataclass(frozen=True)
class TableDefinition:
    """
    Table name plus ordered columns for one model type.

    Carries no session state, so a single instance is shared by every unit
    of work that touches the model.
    """

    model: type["Model"]
    name: str
    columns: tuple[ColumnDefinition, ...]

    def __post_init__(self) -> None:
        identifiers = [column for column in self.columns if column.identifier]
        if len(identifiers) != 1:
            raise InvalidMapping(
                f"Table '{self.name}' must have exactly one identifier column, "
                f"found {len(identifiers)}"
            )

    def __iter__(self) -> Iterator[ColumnDefinition]:
        return iter(self.columns)

    @property
    def id_column(self) -> ColumnDefinition:
        return next(column for column in self.columns if column.identifier)

    def column(self, name: str) -> ColumnDefinition:
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Table '{self.name}' has no column '{name}'")

    def present_values(self, instance: "Model") -> Dict[str, Any]:
        """
        Map column name to value for every field assigned on ``instance``.

        Order follows the column order.
        """
        return {
            column.name: getattr(instance, column.attribute)
            for column in self.columns
            if instance.is_set(column.attribute)
        }

    def identifier_of(self, instance: "Model") -> Any:
        return getattr(instance, self.id_column.attribute)
