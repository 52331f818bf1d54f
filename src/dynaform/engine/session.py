"""
Sesión de formulario: dueña única del estado (valores, errores, navegación).
"""

from typing import Optional

from dynaform.engine.progress import Progress, progress
from dynaform.engine.render import apply_input
from dynaform.engine.state import (
    Advance,
    FormEvent,
    FormState,
    NavigationState,
    Retreat,
    SetValue,
    Submit,
    TransitionResult,
    initial_state,
    transition,
)
from dynaform.engine.store import ValueStore
from dynaform.engine.validators import ErrorMap
from dynaform.models import FieldDef, FieldValue, FormDocument, FormSchema, Section


class FormSession:
    """
    Controlador de un formulario por secciones.

    No es seguro para uso concurrente: las llamadas sobre una misma sesión
    deben serializarse.

    Ejemplo:
        session = FormSession(schema)
        session.set_value("name", TextValue("Alice"))
        if session.advance():
            ...
        payload = session.submit()
    """

    def __init__(
        self,
        schema: FormSchema,
        revalidate_all_on_submit: bool = False,
        state: Optional[FormState] = None,
    ):
        self.schema = schema
        self.revalidate_all_on_submit = revalidate_all_on_submit
        self.state = state or initial_state()

    @classmethod
    def from_document(cls, document: FormDocument, **kwargs) -> "FormSession":
        return cls(document.form, **kwargs)

    # -- Consultas ---------------------------------------------------------

    @property
    def navigation(self) -> NavigationState:
        return self.state.navigation

    @property
    def current_section_index(self) -> int:
        return self.state.navigation.current_section_index

    @property
    def current_section(self) -> Section:
        return self.schema.sections[self.current_section_index]

    @property
    def section_count(self) -> int:
        return self.schema.section_count

    @property
    def is_first_section(self) -> bool:
        return self.current_section_index == 0

    @property
    def is_last_section(self) -> bool:
        return self.current_section_index == self.section_count - 1

    @property
    def submitted(self) -> bool:
        return self.state.navigation.submitted

    @property
    def values(self) -> ValueStore:
        return self.state.values

    @property
    def errors(self) -> ErrorMap:
        return dict(self.state.errors)

    def field(self, field_id: str) -> FieldDef:
        fld = self.schema.get_field(field_id)
        if fld is None:
            raise KeyError(field_id)
        return fld

    def get_value(self, field_id: str) -> FieldValue:
        return self.state.values.get(self.field(field_id))

    def error_for(self, field_id: str) -> Optional[str]:
        return self.state.errors.get(field_id)

    def progress(self) -> Progress:
        return progress(self.schema, self.state.navigation)

    @property
    def payload(self) -> dict:
        """Valores actuales en forma JSON."""
        return self.state.values.as_payload()

    # -- Transiciones ------------------------------------------------------

    def dispatch(self, event: FormEvent) -> TransitionResult:
        """Aplica un evento y guarda el nuevo estado."""
        result = transition(self.schema, self.state, event)
        self.state = result.state
        return result

    def set_value(self, field_id: str, value: FieldValue) -> None:
        """Reemplaza el valor del campo y limpia su error si lo tenía."""
        self.dispatch(SetValue(field_id, value))

    def set_input(self, field_id: str, raw: Optional[str] = None, checked: Optional[bool] = None) -> FieldValue:
        """Aplica una interacción de usuario según el widget del campo."""
        fld = self.field(field_id)
        value = apply_input(fld, self.state.values.get(fld), raw=raw, checked=checked)
        self.set_value(field_id, value)
        return value

    def advance(self) -> bool:
        """Valida la sección actual y avanza si es válida."""
        return self.dispatch(Advance()).moved

    def retreat(self) -> None:
        """Vuelve a la sección anterior sin validar."""
        self.dispatch(Retreat())

    def submit(self) -> Optional[dict]:
        """
        Valida y envía desde la última sección.

        Returns:
            Payload completo (fieldId -> valor JSON) o None si hay errores
        """
        result = self.dispatch(Submit(revalidate_all=self.revalidate_all_on_submit))
        if not result.moved:
            return None
        return self.payload
