"""
Prompts interactivos por tipo de widget.

Cada prompt devuelve el nuevo FieldValue completo, o None si el usuario
canceló (Ctrl+C).
"""

from enum import Enum
from typing import Optional

import questionary

from dynaform.cli.styles import get_prompt_style
from dynaform.engine import WidgetKind, apply_input, select_widget
from dynaform.models import ChoicesValue, FieldDef, FieldValue

BLANK_OPTION_LABEL = "Select an option"


class SectionAction(str, Enum):
    """Acciones del menú de sección."""
    FILL = "fill"
    EDIT = "edit"
    NEXT = "next"
    SUBMIT = "submit"
    BACK = "back"
    CANCEL = "cancel"


ACTION_LABELS = {
    SectionAction.FILL: "Completar campos",
    SectionAction.EDIT: "Editar un campo",
    SectionAction.NEXT: "Siguiente sección >>",
    SectionAction.SUBMIT: "Enviar formulario",
    SectionAction.BACK: "<< Sección anterior",
    SectionAction.CANCEL: "Cancelar",
}


def _question(field: FieldDef, error: Optional[str]) -> str:
    label = field.label or field.field_id
    if field.required:
        label += " *"
    if error:
        label += f"  ({error})"
    return label + ":"


def _toggle_choices(field: FieldDef, current: ChoicesValue, selected: list[str]) -> FieldValue:
    """Aplica como clics individuales: primero desmarcar, luego marcar."""
    value: FieldValue = current
    for item in current.items:
        if item not in selected:
            value = apply_input(field, value, raw=item, checked=False)
    for item in selected:
        if item not in current.items:
            value = apply_input(field, value, raw=item, checked=True)
    return value


def prompt_field(field: FieldDef, current: FieldValue, error: Optional[str] = None) -> Optional[FieldValue]:
    """
    Pide al usuario el valor de un campo según su widget.

    Args:
        field: Definición del campo
        current: Valor actual (se ofrece como default)
        error: Error vigente para mostrar junto a la etiqueta

    Returns:
        Nuevo valor o None si se canceló
    """
    spec = select_widget(field)
    style = get_prompt_style()
    message = _question(field, error)

    if spec.widget in (WidgetKind.INPUT, WidgetKind.TEXTAREA):
        answer = questionary.text(
            message,
            default=current.text,
            multiline=spec.multiline,
            instruction=spec.placeholder,
            style=style,
        ).ask()
        if answer is None:
            return None
        return apply_input(field, current, raw=answer)

    if spec.widget in (WidgetKind.SELECT, WidgetKind.RADIO):
        choices = [questionary.Choice(title=opt.label, value=opt.value) for opt in spec.options]
        if spec.widget == WidgetKind.SELECT:
            choices.insert(0, questionary.Choice(title=BLANK_OPTION_LABEL, value=""))
        default = current.text if current.text in {c.value for c in choices} else None
        answer = questionary.select(message, choices=choices, default=default, style=style).ask()
        if answer is None:
            return None
        return apply_input(field, current, raw=answer)

    if spec.widget == WidgetKind.CHECKBOX_GROUP:
        choices = [
            questionary.Choice(title=opt.label, value=opt.value, checked=opt.value in current.items)
            for opt in spec.options
        ]
        answer = questionary.checkbox(message, choices=choices, style=style).ask()
        if answer is None:
            return None
        return _toggle_choices(field, current, answer)

    answer = questionary.confirm(message, default=current.checked, style=style).ask()
    if answer is None:
        return None
    return apply_input(field, current, checked=answer)


def prompt_action(is_first: bool, is_last: bool) -> SectionAction:
    """Menú de acciones de la sección; Ctrl+C equivale a cancelar."""
    actions = [SectionAction.FILL, SectionAction.EDIT]
    actions.append(SectionAction.SUBMIT if is_last else SectionAction.NEXT)
    if not is_first:
        actions.append(SectionAction.BACK)
    actions.append(SectionAction.CANCEL)

    answer = questionary.select(
        "¿Qué deseas hacer?",
        choices=[questionary.Choice(title=ACTION_LABELS[a], value=a) for a in actions],
        style=get_prompt_style(),
    ).ask()
    return answer or SectionAction.CANCEL


def prompt_field_choice(fields: list[FieldDef]) -> Optional[str]:
    """Selecciona un campo de la sección por su etiqueta."""
    return questionary.select(
        "Campo a editar:",
        choices=[questionary.Choice(title=f.label or f.field_id, value=f.field_id) for f in fields],
        style=get_prompt_style(),
    ).ask()


def prompt_registration() -> Optional[tuple[str, str]]:
    """Pide número de matrícula y nombre."""
    style = get_prompt_style()
    roll_number = questionary.text("Roll Number:", style=style).ask()
    if roll_number is None:
        return None
    name = questionary.text("Name:", style=style).ask()
    if name is None:
        return None
    return roll_number, name


__all__ = [
    "SectionAction",
    "prompt_field",
    "prompt_action",
    "prompt_field_choice",
    "prompt_registration",
]
