"""
Valores de campo como unión etiquetada explícita.

Cada valor lleva su propia forma (texto, lista de opciones o bandera), de
modo que nunca se lee una lista donde se guardó un texto.
"""

from dataclasses import dataclass
from typing import Any, Union, assert_never

from dynaform.errors import ValueShapeError
from dynaform.models.schema import FieldDef, FieldKind


@dataclass(frozen=True)
class TextValue:
    """Valor de texto (text, email, tel, date, textarea, dropdown, radio)."""
    text: str = ""

    def is_empty(self) -> bool:
        return self.text == ""

    def to_plain(self) -> str:
        return self.text


@dataclass(frozen=True)
class ChoicesValue:
    """Selección múltiple ordenada, sin repetidos."""
    items: tuple[str, ...] = ()

    def __post_init__(self):
        # dict.fromkeys conserva el orden de primera aparición
        object.__setattr__(self, "items", tuple(dict.fromkeys(self.items)))

    def is_empty(self) -> bool:
        return len(self.items) == 0

    def to_plain(self) -> list[str]:
        return list(self.items)

    def with_item(self, value: str) -> "ChoicesValue":
        """Agrega una opción al final (si no estaba)."""
        if value in self.items:
            return self
        return ChoicesValue(self.items + (value,))

    def without_item(self, value: str) -> "ChoicesValue":
        """Quita una opción conservando el orden del resto."""
        return ChoicesValue(tuple(v for v in self.items if v != value))


@dataclass(frozen=True)
class FlagValue:
    """Checkbox simple."""
    checked: bool = False

    def is_empty(self) -> bool:
        return not self.checked

    def to_plain(self) -> bool:
        return self.checked


FieldValue = Union[TextValue, ChoicesValue, FlagValue]


def value_type_for(field: FieldDef) -> type:
    """Clase de valor que corresponde a la variante del campo."""
    kind = field.kind
    match kind:
        case (FieldKind.TEXT | FieldKind.EMAIL | FieldKind.TEL | FieldKind.DATE
              | FieldKind.TEXTAREA | FieldKind.DROPDOWN | FieldKind.RADIO):
            return TextValue
        case FieldKind.CHECKBOX_MULTI:
            return ChoicesValue
        case FieldKind.CHECKBOX_SINGLE:
            return FlagValue
        case _:
            assert_never(kind)


def empty_value(field: FieldDef) -> FieldValue:
    """Valor vacío por defecto: texto vacío, lista vacía o no marcado."""
    return value_type_for(field)()


def check_value_shape(field: FieldDef, value: Any) -> None:
    """Lanza ValueShapeError si el valor no corresponde al campo."""
    expected = value_type_for(field)
    if not isinstance(value, expected):
        raise ValueShapeError(
            f"El campo '{field.field_id}' espera {expected.__name__}, "
            f"recibió {type(value).__name__}"
        )


def value_from_plain(field: FieldDef, raw: Any) -> FieldValue:
    """
    Convierte un valor JSON (str, list[str], bool) al valor etiquetado.

    Args:
        field: Definición del campo
        raw: Valor tal como vendría de un payload JSON

    Returns:
        FieldValue de la forma que corresponde al campo

    Raises:
        ValueShapeError: si el valor JSON no tiene la forma esperada
    """
    expected = value_type_for(field)
    if expected is TextValue and isinstance(raw, str):
        return TextValue(raw)
    if expected is ChoicesValue and isinstance(raw, (list, tuple)) and all(isinstance(v, str) for v in raw):
        return ChoicesValue(tuple(raw))
    if expected is FlagValue and isinstance(raw, bool):
        return FlagValue(raw)
    raise ValueShapeError(
        f"El campo '{field.field_id}' espera {expected.__name__}, valor recibido: {raw!r}"
    )
