"""
Almacén de valores del formulario (fieldId -> FieldValue).
"""

from typing import Iterator, Mapping, Optional

from dynaform.models import FieldDef, FieldValue, check_value_shape, empty_value


class ValueStore:
    """
    Mapa inmutable de valores por fieldId.

    Las entradas se crean al primer cambio; leer un campo sin entrada
    devuelve el vacío de su tipo. La navegación nunca borra entradas.
    """

    def __init__(self, entries: Optional[Mapping[str, FieldValue]] = None):
        self._entries: dict[str, FieldValue] = dict(entries or {})

    def get(self, field: FieldDef) -> FieldValue:
        """Valor actual del campo, o su vacío si no fue editado."""
        value = self._entries.get(field.field_id)
        if value is None:
            return empty_value(field)
        return value

    def with_value(self, field: FieldDef, value: FieldValue) -> "ValueStore":
        """Nuevo almacén con el valor del campo reemplazado por completo."""
        check_value_shape(field, value)
        entries = dict(self._entries)
        entries[field.field_id] = value
        return ValueStore(entries)

    def entries(self) -> dict[str, FieldValue]:
        return dict(self._entries)

    def as_payload(self) -> dict:
        """Contenido en forma JSON (str, list[str], bool) por fieldId."""
        return {key: value.to_plain() for key, value in self._entries.items()}

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueStore):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"ValueStore({self._entries!r})"
