"""
Validación de campos y secciones.

Los errores de validación son datos: nunca se lanzan, se devuelven como
mensaje (o None) y se acumulan en un ErrorMap.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, assert_never

from dynaform.engine.store import ValueStore
from dynaform.models import (
    FieldDef,
    FieldKind,
    FieldValue,
    FormSchema,
    Section,
    check_value_shape,
)

ErrorMap = dict[str, Optional[str]]

REQUIRED_MESSAGE = "This field is required"
MIN_LENGTH_MESSAGE = "Minimum length is {n} characters"
MAX_LENGTH_MESSAGE = "Maximum length is {n} characters"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_PHONE_MESSAGE = "Please enter a valid 10-digit phone number"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_DIGITS = 10
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def _check_length(field: FieldDef, text: str) -> Optional[str]:
    # Un límite 0 o ausente no se aplica
    if field.min_length and len(text) < field.min_length:
        return MIN_LENGTH_MESSAGE.format(n=field.min_length)
    if field.max_length and len(text) > field.max_length:
        return MAX_LENGTH_MESSAGE.format(n=field.max_length)
    return None


def _check_email(text: str) -> Optional[str]:
    if text and not EMAIL_PATTERN.match(text):
        return INVALID_EMAIL_MESSAGE
    return None


def _check_phone(text: str) -> Optional[str]:
    if text:
        # Solo dígitos ASCII
        digits = NON_DIGIT_PATTERN.sub("", text)
        if len(digits) != PHONE_DIGITS:
            return INVALID_PHONE_MESSAGE
    return None


def validate_field(field: FieldDef, value: FieldValue) -> Optional[str]:
    """
    Valida un valor contra la definición de su campo.

    Reglas en orden (gana el primer fallo):
    1. Requerido: el vacío del tipo falla. El mensaje del esquema
       (validation.message) reemplaza al genérico solo en este caso.
    2. Longitud (text, email, tel, textarea): minLength antes que maxLength.
    3. Formato, solo con valor no vacío: email y teléfono de 10 dígitos.

    Args:
        field: Definición del campo
        value: Valor etiquetado; debe tener la forma del campo

    Returns:
        Mensaje de error o None si es válido

    Raises:
        ValueShapeError: si el valor no corresponde al tipo del campo
    """
    check_value_shape(field, value)

    if field.required and value.is_empty():
        return field.validation_message or REQUIRED_MESSAGE

    kind = field.kind
    match kind:
        case FieldKind.TEXT | FieldKind.TEXTAREA:
            return _check_length(field, value.text)
        case FieldKind.EMAIL:
            return _check_length(field, value.text) or _check_email(value.text)
        case FieldKind.TEL:
            return _check_length(field, value.text) or _check_phone(value.text)
        case (FieldKind.DATE | FieldKind.DROPDOWN | FieldKind.RADIO
              | FieldKind.CHECKBOX_SINGLE | FieldKind.CHECKBOX_MULTI):
            return None
        case _:
            assert_never(kind)


@dataclass(frozen=True)
class SectionValidation:
    """Resultado de validar una sección."""
    errors: ErrorMap
    is_valid: bool

    def invalid_fields(self) -> list[str]:
        return [key for key, msg in self.errors.items() if msg is not None]


def validate_section(section: Section, store: ValueStore) -> SectionValidation:
    """
    Valida todos los campos de una sección.

    El ErrorMap cubre exactamente los campos de la sección; los corregidos
    quedan como None explícito.
    """
    errors: ErrorMap = {}
    for fld in section.fields:
        errors[fld.field_id] = validate_field(fld, store.get(fld))
    is_valid = all(msg is None for msg in errors.values())
    return SectionValidation(errors=errors, is_valid=is_valid)


@dataclass(frozen=True)
class FormValidation:
    """Resultado de validar todas las secciones."""
    sections: list[SectionValidation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return all(s.is_valid for s in self.sections)

    @property
    def errors(self) -> ErrorMap:
        merged: ErrorMap = {}
        for s in self.sections:
            merged.update(s.errors)
        return merged

    def first_invalid_section(self) -> Optional[int]:
        for idx, s in enumerate(self.sections):
            if not s.is_valid:
                return idx
        return None


def validate_form(schema: FormSchema, store: ValueStore) -> FormValidation:
    """Valida cada sección del formulario."""
    return FormValidation(sections=[validate_section(s, store) for s in schema.sections])
