"""
Field descriptors declaring how model attributes map onto columns.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, cast

if TYPE_CHECKING:
    from .model import Model


DEFAULT_STRING_LENGTH = 255


class ScalarType(str, Enum):
    """Portable scalar types a field can declare."""

    BIG_INTEGER = "big_integer"
    INTEGER = "integer"
    STRING = "string"
    FLOAT = "float"
    BOOLEAN = "boolean"


class GenerationType(str, Enum):
    """How the database assigns identifier values."""

    IDENTITY = "identity"


class FieldError(Exception):
    """Internal exception for field configuration issues."""


class Field:
    """
    Base class for model field descriptors.

    Fields store values on the instance's ``_field_values`` mapping. A field
    whose name is absent from that mapping has never been assigned, which is
    how the persister tells "unset" apart from an explicit ``None``.
    """

    scalar_type: Optional[ScalarType] = None
    _creation_counter = 0

    def __init__(
        self,
        *,
        primary_key: bool = False,
        nullable: bool = True,
        default: Any = None,
        db_column: Optional[str] = None,
        generation: Optional[GenerationType] = None,
    ) -> None:
        self.primary_key = primary_key
        self.nullable = nullable
        self.default = default
        self.db_column = db_column
        self.generation = generation

        self.model: type["Model"] | None = None
        self.name: str | None = None
        self.creation_counter = Field._creation_counter
        Field._creation_counter += 1

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name or '?'}>"

    # Descriptor protocol -------------------------------------------------
    def __get__(self, instance: object | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        model_instance = cast("Model", instance)
        return model_instance._field_values.get(self.require_name())

    def __set__(self, instance: object, value: Any) -> None:
        model_instance = cast("Model", instance)
        name = self.require_name()
        if value is None:
            if not self.nullable and not self.primary_key:
                raise ValueError(f"Field '{name}' cannot be None")
            model_instance._field_values[name] = None
            return
        model_instance._field_values[name] = self.to_python(value)

    # Metadata helpers ----------------------------------------------------
    def contribute_to_class(self, model: type["Model"], name: str) -> None:
        self.model = model
        self.name = name
        setattr(model, name, self)

    def require_name(self) -> str:
        if self.name is None:
            raise FieldError("Field name is not set.")
        return self.name

    def column_name(self) -> str:
        return self.db_column or self.require_name()

    @property
    def length(self) -> Optional[int]:
        return None

    @property
    def has_default(self) -> bool:
        return self.default is not None

    def get_default(self) -> Any:
        if callable(self.default):
            return self.default()
        return self.default

    def to_python(self, value: Any) -> Any:
        return value


def _coerce_integer(value: Any, *, bits: int, label: str) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Invalid {label} value {value!r}: fractional part would be lost")
    try:
        result = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid {label} value {value!r}") from exc
    bound = 1 << (bits - 1)
    if not -bound <= result < bound:
        raise ValueError(f"Value {result} is out of range for a {bits}-bit {label}")
    return result


class BigIntegerField(Field):
    scalar_type = ScalarType.BIG_INTEGER

    def to_python(self, value: Any) -> int:
        return _coerce_integer(value, bits=64, label="big integer")


class IntegerField(Field):
    scalar_type = ScalarType.INTEGER

    def to_python(self, value: Any) -> int:
        return _coerce_integer(value, bits=32, label="integer")


class AutoField(BigIntegerField):
    """
    Identifier whose value the database assigns on insert.
    """

    def __init__(self, *, db_column: Optional[str] = None) -> None:
        super().__init__(
            primary_key=True,
            db_column=db_column,
            generation=GenerationType.IDENTITY,
        )


class FloatField(Field):
    scalar_type = ScalarType.FLOAT

    def to_python(self, value: Any) -> float:
        if isinstance(value, (str, bytes)) and not value.strip():
            raise ValueError("Invalid float value: empty string")
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid float value {value!r}") from exc


class BooleanField(Field):
    scalar_type = ScalarType.BOOLEAN

    def to_python(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "t", "1"}:
                return True
            if lowered in {"false", "f", "0"}:
                return False
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        raise ValueError(f"Invalid boolean value {value!r}")


class StringField(Field):
    scalar_type = ScalarType.STRING

    def __init__(self, *, max_length: int = DEFAULT_STRING_LENGTH, **kwargs: Any) -> None:
        if max_length <= 0:
            raise FieldError("max_length must be positive")
        super().__init__(**kwargs)
        self.max_length = max_length

    @property
    def length(self) -> Optional[int]:
        return self.max_length

    def to_python(self, value: Any) -> str:
        if isinstance(value, bytes):
            try:
                value = value.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ValueError(f"Field '{self.name}' received undecodable bytes") from exc
        result = str(value)
        if len(result) > self.max_length:
            raise ValueError(
                f"Value for field '{self.require_name()}' exceeds max_length {self.max_length}"
            )
        return result
