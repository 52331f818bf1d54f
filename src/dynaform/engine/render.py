"""
Selector de widget por tipo de campo.

Describe qué entrada necesita cada campo y cómo la interacción del usuario
se convierte en valor. La presentación queda a cargo del front-end.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, assert_never

from dynaform.models import (
    ChoicesValue,
    FieldDef,
    FieldKind,
    FieldOption,
    FieldValue,
    FlagValue,
    TextValue,
    check_value_shape,
)


class WidgetKind(str, Enum):
    """Tipos de entrada."""
    INPUT = "input"
    TEXTAREA = "textarea"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX_GROUP = "checkbox_group"
    CHECKBOX = "checkbox"


class ValueShape(str, Enum):
    """Forma del valor que produce la entrada."""
    STRING = "string"
    STRING_LIST = "string_list"
    BOOLEAN = "boolean"


TEXTAREA_ROWS = 4


@dataclass(frozen=True)
class WidgetSpec:
    """Descripción de la entrada de un campo."""
    widget: WidgetKind
    value_shape: ValueShape
    input_type: Optional[str] = None  # Tipo HTML para INPUT (text, email, tel, date)
    options: tuple[FieldOption, ...] = ()
    placeholder: Optional[str] = None
    rows: int = 1

    @property
    def multiline(self) -> bool:
        return self.rows > 1


def select_widget(field: FieldDef) -> WidgetSpec:
    """Widget y forma de valor para un campo."""
    options = tuple(field.options or ())
    kind = field.kind
    match kind:
        case FieldKind.TEXT | FieldKind.EMAIL | FieldKind.TEL | FieldKind.DATE:
            return WidgetSpec(
                WidgetKind.INPUT, ValueShape.STRING,
                input_type=field.type.value, placeholder=field.placeholder,
            )
        case FieldKind.TEXTAREA:
            return WidgetSpec(
                WidgetKind.TEXTAREA, ValueShape.STRING,
                placeholder=field.placeholder, rows=TEXTAREA_ROWS,
            )
        case FieldKind.DROPDOWN:
            return WidgetSpec(WidgetKind.SELECT, ValueShape.STRING, options=options)
        case FieldKind.RADIO:
            return WidgetSpec(WidgetKind.RADIO, ValueShape.STRING, options=options)
        case FieldKind.CHECKBOX_MULTI:
            return WidgetSpec(WidgetKind.CHECKBOX_GROUP, ValueShape.STRING_LIST, options=options)
        case FieldKind.CHECKBOX_SINGLE:
            return WidgetSpec(WidgetKind.CHECKBOX, ValueShape.BOOLEAN)
        case _:
            assert_never(kind)


def _require_option(field: FieldDef, raw: str, allow_blank: bool) -> None:
    if allow_blank and raw == "":
        return
    if raw not in field.option_values():
        raise ValueError(f"'{raw}' no es una opción de '{field.field_id}'")


def apply_input(
    field: FieldDef,
    current: FieldValue,
    raw: Optional[str] = None,
    checked: Optional[bool] = None,
) -> FieldValue:
    """
    Calcula el nuevo valor de un campo a partir de una interacción.

    - Texto, fecha, dropdown y radio: reemplazo del texto por ``raw``.
    - Checkbox con opciones: ``raw`` es la opción tocada y ``checked`` su
      nuevo estado; se agrega al final al marcar y se quita al desmarcar,
      conservando el orden del resto.
    - Checkbox simple: reemplazo por ``checked``.

    Args:
        field: Definición del campo
        current: Valor actual (forma del campo)
        raw: Texto ingresado u opción tocada
        checked: Estado de la casilla (solo checkbox)

    Returns:
        Nuevo FieldValue completo, listo para set_value
    """
    check_value_shape(field, current)
    kind = field.kind
    match kind:
        case FieldKind.TEXT | FieldKind.EMAIL | FieldKind.TEL | FieldKind.DATE | FieldKind.TEXTAREA:
            return TextValue(raw or "")
        case FieldKind.DROPDOWN | FieldKind.RADIO:
            text = raw or ""
            # El dropdown admite la opción vacía "Select an option"
            _require_option(field, text, allow_blank=kind == FieldKind.DROPDOWN)
            return TextValue(text)
        case FieldKind.CHECKBOX_MULTI:
            if raw is None or checked is None:
                raise ValueError("Checkbox múltiple requiere opción y estado (raw, checked)")
            _require_option(field, raw, allow_blank=False)
            if checked:
                return current.with_item(raw)
            return current.without_item(raw)
        case FieldKind.CHECKBOX_SINGLE:
            if checked is None:
                raise ValueError("Checkbox simple requiere estado (checked)")
            return FlagValue(checked)
        case _:
            assert_never(kind)


def display_value(field: FieldDef, value: FieldValue) -> str:
    """Formatea un valor para mostrar (usa etiquetas de opciones)."""
    check_value_shape(field, value)
    if isinstance(value, FlagValue):
        return "Sí" if value.checked else "No"
    if isinstance(value, ChoicesValue):
        if value.is_empty():
            return "-"
        return ", ".join(field.option_label(v) for v in value.items)
    if value.is_empty():
        return "-"
    if field.kind in (FieldKind.DROPDOWN, FieldKind.RADIO):
        return field.option_label(value.text)
    return value.text
