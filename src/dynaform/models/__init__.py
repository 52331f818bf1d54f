"""
Modelos de datos de dynaform.

- schema: documento de formulario (pydantic)
- values: valores de campo como unión etiquetada
- registration: identidad del usuario
"""

from dynaform.models.schema import (
    FieldType,
    FieldKind,
    FieldOption,
    FieldValidation,
    FieldDef,
    Section,
    FormSchema,
    FormDocument,
    STRING_LENGTH_KINDS,
)
from dynaform.models.values import (
    TextValue,
    ChoicesValue,
    FlagValue,
    FieldValue,
    empty_value,
    check_value_shape,
    value_from_plain,
    value_type_for,
)
from dynaform.models.registration import UserRegistration

__all__ = [
    # Esquema
    "FieldType",
    "FieldKind",
    "FieldOption",
    "FieldValidation",
    "FieldDef",
    "Section",
    "FormSchema",
    "FormDocument",
    "STRING_LENGTH_KINDS",
    # Valores
    "TextValue",
    "ChoicesValue",
    "FlagValue",
    "FieldValue",
    "empty_value",
    "check_value_shape",
    "value_from_plain",
    "value_type_for",
    # Registro
    "UserRegistration",
]
