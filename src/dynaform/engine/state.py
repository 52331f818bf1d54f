"""
Máquina de estados de navegación entre secciones.

Estados: Section(i) para i en [0, N) y Submitted. Las transiciones son
funciones puras ``(schema, state, event) -> TransitionResult``; el objeto
FormSession es quien guarda el estado vigente.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Union, assert_never

from dynaform.engine.store import ValueStore
from dynaform.engine.validators import ErrorMap, validate_form, validate_section
from dynaform.errors import FormContractError
from dynaform.models import FieldValue, FormSchema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationState:
    """Sección visible y si el formulario ya fue enviado."""
    current_section_index: int = 0
    submitted: bool = False


@dataclass(frozen=True)
class FormState:
    """
    Estado completo de una sesión de formulario.

    Se compara por valor pero no es hashable: errors es un dict.
    """
    navigation: NavigationState = field(default_factory=NavigationState)
    values: ValueStore = field(default_factory=ValueStore)
    errors: ErrorMap = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Representación serializable (para depuración y pruebas de replay)."""
        return {
            "current_section_index": self.navigation.current_section_index,
            "submitted": self.navigation.submitted,
            "values": self.values.as_payload(),
            "errors": dict(self.errors),
        }


# Eventos

@dataclass(frozen=True)
class SetValue:
    field_id: str
    value: FieldValue


@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class Retreat:
    pass


@dataclass(frozen=True)
class Submit:
    # Si True, valida todas las secciones y no solo la última
    revalidate_all: bool = False


FormEvent = Union[SetValue, Advance, Retreat, Submit]


@dataclass(frozen=True)
class TransitionResult:
    """Nuevo estado y si la transición avanzó (o envió)."""
    state: FormState
    moved: bool
    errors: ErrorMap = field(default_factory=dict)


def initial_state() -> FormState:
    """Sección 0, valores vacíos, sin errores."""
    return FormState()


def _require_not_submitted(state: FormState, action: str) -> None:
    if state.navigation.submitted:
        raise FormContractError(f"No se puede {action}: el formulario ya fue enviado")


def _set_value(schema: FormSchema, state: FormState, event: SetValue) -> TransitionResult:
    _require_not_submitted(state, "modificar valores")
    fld = schema.get_field(event.field_id)
    if fld is None:
        raise KeyError(event.field_id)

    values = state.values.with_value(fld, event.value)
    errors = state.errors
    # Limpieza optimista: se revalida recién en el próximo avance/envío
    if errors.get(event.field_id) is not None:
        errors = {**errors, event.field_id: None}
    return TransitionResult(state=replace(state, values=values, errors=errors), moved=False)


def _advance(schema: FormSchema, state: FormState) -> TransitionResult:
    _require_not_submitted(state, "avanzar")
    idx = state.navigation.current_section_index
    if idx >= schema.section_count - 1:
        raise FormContractError(
            f"advance() no disponible en la última sección ({idx}); usar submit()"
        )

    result = validate_section(schema.sections[idx], state.values)
    errors = {**state.errors, **result.errors}
    if not result.is_valid:
        logger.debug("Sección %d inválida: %s", idx, result.invalid_fields())
        return TransitionResult(state=replace(state, errors=errors), moved=False, errors=result.errors)

    navigation = replace(state.navigation, current_section_index=idx + 1)
    logger.debug("Avance de sección %d a %d", idx, idx + 1)
    return TransitionResult(
        state=replace(state, navigation=navigation, errors=errors),
        moved=True,
        errors=result.errors,
    )


def _retreat(schema: FormSchema, state: FormState) -> TransitionResult:
    _require_not_submitted(state, "retroceder")
    idx = state.navigation.current_section_index
    if idx <= 0:
        raise FormContractError("retreat() no disponible en la primera sección")

    navigation = replace(state.navigation, current_section_index=idx - 1)
    logger.debug("Retroceso de sección %d a %d", idx, idx - 1)
    return TransitionResult(state=replace(state, navigation=navigation), moved=True)


def _submit(schema: FormSchema, state: FormState, event: Submit) -> TransitionResult:
    _require_not_submitted(state, "enviar")
    idx = state.navigation.current_section_index
    last = schema.section_count - 1
    if idx != last:
        raise FormContractError(
            f"submit() solo está disponible en la última sección ({last}), actual: {idx}"
        )

    if event.revalidate_all:
        validation = validate_form(schema, state.values)
        section_errors = validation.errors
        first_invalid: Optional[int] = validation.first_invalid_section()
    else:
        result = validate_section(schema.sections[idx], state.values)
        section_errors = result.errors
        first_invalid = None if result.is_valid else idx

    errors = {**state.errors, **section_errors}
    if first_invalid is not None:
        # Con revalidación completa se vuelve a la primera sección con errores
        navigation = replace(state.navigation, current_section_index=first_invalid)
        logger.debug("Envío rechazado, errores en sección %d", first_invalid)
        return TransitionResult(
            state=replace(state, navigation=navigation, errors=errors),
            moved=False,
            errors=section_errors,
        )

    navigation = replace(state.navigation, submitted=True)
    logger.info("Formulario enviado con %d valores", len(state.values))
    return TransitionResult(
        state=replace(state, navigation=navigation, errors=errors),
        moved=True,
        errors=section_errors,
    )


def transition(schema: FormSchema, state: FormState, event: FormEvent) -> TransitionResult:
    """
    Aplica un evento al estado.

    Raises:
        FormContractError: si el evento no está permitido en el estado actual
        KeyError: si SetValue refiere a un campo inexistente
        ValueShapeError: si el valor no corresponde al tipo del campo
    """
    match event:
        case SetValue():
            return _set_value(schema, state, event)
        case Advance():
            return _advance(schema, state)
        case Retreat():
            return _retreat(schema, state)
        case Submit():
            return _submit(schema, state, event)
        case _:
            assert_never(event)


def replay(schema: FormSchema, events: list[FormEvent], state: Optional[FormState] = None) -> FormState:
    """Aplica una secuencia de eventos desde el estado inicial (o el dado)."""
    current = state or initial_state()
    for event in events:
        current = transition(schema, current, event).state
    return current
