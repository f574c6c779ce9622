"""
Core building blocks for declaring mapped models.
"""

from .fields import (
    DEFAULT_STRING_LENGTH,
    AutoField,
    BigIntegerField,
    BooleanField,
    Field,
    FloatField,
    GenerationType,
    IntegerField,
    ScalarType,
    StringField,
)
from .model import Model, ModelMeta, ModelOptions

__all__ = [
    "DEFAULT_STRING_LENGTH",
    "AutoField",
    "BigIntegerField",
    "BooleanField",
    "Field",
    "FloatField",
    "GenerationType",
    "IntegerField",
    "Model",
    "ModelMeta",
    "ModelOptions",
    "ScalarType",
    "StringField",
]
