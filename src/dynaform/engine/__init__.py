"""
Motor de formularios por secciones.

- store: ValueStore
- validators: validación de campo, sección y formulario
- render: selector de widget y conversión de entradas
- state: estado y transiciones puras
- progress: indicador de progreso
- session: FormSession, dueño del estado
"""

from dynaform.engine.store import ValueStore
from dynaform.engine.validators import (
    ErrorMap,
    SectionValidation,
    FormValidation,
    validate_field,
    validate_section,
    validate_form,
)
from dynaform.engine.render import (
    WidgetKind,
    ValueShape,
    WidgetSpec,
    select_widget,
    apply_input,
    display_value,
)
from dynaform.engine.state import (
    NavigationState,
    FormState,
    SetValue,
    Advance,
    Retreat,
    Submit,
    TransitionResult,
    initial_state,
    transition,
    replay,
)
from dynaform.engine.progress import Progress, StepMark, StepStatus, progress
from dynaform.engine.session import FormSession

__all__ = [
    "ValueStore",
    "ErrorMap",
    "SectionValidation",
    "FormValidation",
    "validate_field",
    "validate_section",
    "validate_form",
    "WidgetKind",
    "ValueShape",
    "WidgetSpec",
    "select_widget",
    "apply_input",
    "display_value",
    "NavigationState",
    "FormState",
    "SetValue",
    "Advance",
    "Retreat",
    "Submit",
    "TransitionResult",
    "initial_state",
    "transition",
    "replay",
    "Progress",
    "StepMark",
    "StepStatus",
    "progress",
    "FormSession",
]
