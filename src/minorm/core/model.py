"""
Model base class and the metaclass that records declared fields.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Type

from .fields import Field


@dataclass
class ModelOptions:
    """
    Declared mapping metadata gathered by :class:`ModelMeta`.

    Validation is deferred to :mod:`minorm.definition`, which turns these
    options into a table definition.
    """

    model: Type["Model"]
    table_override: Optional[str] = None
    fields: "OrderedDict[str, Field]" = field(default_factory=OrderedDict)

    @property
    def primary_keys(self) -> list[Field]:
        return [field_obj for field_obj in self.fields.values() if field_obj.primary_key]

    def get_field(self, name: str) -> Field:
        try:
            return self.fields[name]
        except KeyError as exc:
            raise KeyError(f"Unknown field '{name}' on model '{self.model.__name__}'") from exc

    def get_fields(self) -> Iterable[Field]:
        return self.fields.values()


class ModelMeta(type):
    """
    Metaclass collecting field descriptors in declaration order.
    """

    def __new__(mcls, name: str, bases: tuple[type, ...], attrs: Dict[str, Any]) -> "ModelMeta":
        if not any(isinstance(base, ModelMeta) for base in bases):
            return super().__new__(mcls, name, bases, attrs)

        declared_fields: Dict[str, Field] = {}
        for attr_name, value in list(attrs.items()):
            if isinstance(value, Field):
                declared_fields[attr_name] = attrs.pop(attr_name)

        cls = super().__new__(mcls, name, bases, attrs)

        meta = attrs.get("Meta")
        table_override = getattr(meta, "table", None) if meta else None
        cls._meta = ModelOptions(model=cls, table_override=table_override)

        # Inherited fields come first, in the order the parents declared them.
        for base in reversed(cls.__mro__[1:]):
            base_meta = base.__dict__.get("_meta")
            if isinstance(base_meta, ModelOptions):
                cls._meta.fields.update(base_meta.fields)

        sorted_fields = sorted(declared_fields.items(), key=lambda item: item[1].creation_counter)
        for attr_name, field_obj in sorted_fields:
            field_obj.contribute_to_class(cls, attr_name)
            cls._meta.fields[attr_name] = field_obj

        return cls


class Model(metaclass=ModelMeta):
    """
    Plain data container whose attributes are backed by field descriptors.

    Calling the class with no arguments is the default construction path
    used when materializing rows.
    """

    _meta: ModelOptions

    def __init__(self, **kwargs: Any) -> None:
        self._field_values: Dict[str, Any] = {}

        unknown = set(kwargs) - set(self._meta.fields)
        if unknown:
            raise TypeError(
                f"{self.__class__.__name__}() got unexpected field(s): {', '.join(sorted(unknown))}"
            )

        for field_obj in self._meta.get_fields():
            if field_obj.name in kwargs:
                setattr(self, field_obj.name, kwargs[field_obj.name])
            elif field_obj.has_default:
                setattr(self, field_obj.name, field_obj.get_default())

    def __repr__(self) -> str:
        field_parts = ", ".join(
            f"{name}={value!r}" for name, value in self._field_values.items()
        )
        return f"<{self.__class__.__name__} {field_parts}>"

    def is_set(self, name: str) -> bool:
        """Return whether the field ``name`` has been assigned on this instance."""
        return name in self._field_values

    def to_dict(self) -> Dict[str, Any]:
        return {field_obj.name: getattr(self, field_obj.name) for field_obj in self._meta.get_fields()}
