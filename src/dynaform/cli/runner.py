"""
Ejecución interactiva de un formulario, sección por sección.
"""

from typing import Optional

from dynaform.cli.prompts import (
    SectionAction,
    prompt_action,
    prompt_field,
    prompt_field_choice,
)
from dynaform.cli.theme import (
    print_header,
    print_info,
    print_section,
    print_section_fields,
    print_step,
    print_success,
    print_warning,
)
from dynaform.engine import FormSession


class FormRunner:
    """Controlador de navegación interactiva sobre una FormSession."""

    def __init__(self, session: FormSession):
        self.session = session

    def run(self) -> Optional[dict]:
        """
        Recorre el formulario hasta enviarlo o cancelarlo.

        Returns:
            Payload final o None si el usuario canceló
        """
        schema = self.session.schema
        print_header(schema.form_title, f"Form ID: {schema.form_id} | Version: {schema.version}")

        while not self.session.submitted:
            print_step(self.session.progress())
            print_section(self.session.current_section)
            print_section_fields(self.session)

            action = prompt_action(self.session.is_first_section, self.session.is_last_section)

            if action == SectionAction.FILL:
                self._fill_section()
            elif action == SectionAction.EDIT:
                field_id = prompt_field_choice(self.session.current_section.fields)
                if field_id is not None:
                    self._edit_field(field_id)
            elif action == SectionAction.NEXT:
                if not self.session.advance():
                    print_warning("Corrige los campos marcados para continuar")
            elif action == SectionAction.BACK:
                self.session.retreat()
                print_info("<< Volviendo a la sección anterior...")
            elif action == SectionAction.SUBMIT:
                payload = self.session.submit()
                if payload is not None:
                    print_success("Formulario enviado")
                    return payload
                print_warning("El formulario tiene errores, corrígelos antes de enviar")
            elif action == SectionAction.CANCEL:
                print_warning("Formulario cancelado")
                return None

        return self.session.payload

    def _edit_field(self, field_id: str) -> bool:
        """Pide un campo; False si el usuario canceló el prompt."""
        fld = self.session.field(field_id)
        value = prompt_field(fld, self.session.values.get(fld), self.session.error_for(field_id))
        if value is None:
            return False
        self.session.set_value(field_id, value)
        return True

    def _fill_section(self) -> None:
        """Pide todos los campos de la sección en orden."""
        for fld in self.session.current_section.fields:
            if not self._edit_field(fld.field_id):
                return
