"""
Funciones que imprimen directamente a la consola.
"""

import json
from typing import Mapping, Optional

from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_console, get_palette
from dynaform.cli.theme.styled import (
    styled_header, styled_success, styled_warning, styled_error,
    styled_info, styled_muted, styled_field_label,
)
from dynaform.engine import FormSession, Progress, StepStatus, display_value
from dynaform.models import Section


def print_header(text: str, subtitle: Optional[str] = None) -> None:
    console = get_console()
    console.print(styled_header(text, subtitle))


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    get_console().print(styled_error(text))


def print_info(text: str) -> None:
    get_console().print(styled_info(text))


def print_step(prog: Progress) -> None:
    """Imprime "Sección i de N" con barra de progreso y marcas por sección."""
    console = get_console()
    p = get_palette()

    bar_width = 30
    filled_width = int((prog.current_step / prog.total_steps) * bar_width)

    progress_line = Text()
    progress_line.append("█" * filled_width, style=p.primary)
    progress_line.append("░" * (bar_width - filled_width), style=p.muted)
    progress_line.append(f"  {prog.percentage}%", style=p.muted)

    # Una marca por sección: completada, actual o pendiente
    marks = Text()
    for i, step in enumerate(prog.steps):
        if i > 0:
            marks.append("  ")
        if step.status == StepStatus.COMPLETED:
            marks.append(f"● {step.title}", style=p.step_done)
        elif step.status == StepStatus.CURRENT:
            marks.append(f"◉ {step.title}", style=f"bold {p.step_current}")
        else:
            marks.append(f"○ {step.title}", style=p.muted)

    content = Text()
    content.append(progress_line)
    content.append("\n")
    content.append(marks)

    panel = Panel(
        content,
        title=Text(f" Sección {prog.current_step} de {prog.total_steps}", style=f"bold {p.secondary}"),
        title_align="left",
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 1),
    )

    console.print()
    console.print(panel)


def print_section(section: Section) -> None:
    """Título y descripción de la sección."""
    console = get_console()
    p = get_palette()
    console.print(Text(section.title, style=f"bold {p.primary}"))
    if section.description:
        console.print(styled_muted(section.description))


def print_section_fields(session: FormSession) -> None:
    """Tabla con los campos de la sección actual, sus valores y errores."""
    console = get_console()
    p = get_palette()

    table = Table(box=box.SIMPLE, show_header=True, header_style=f"bold {p.primary}")
    table.add_column("Campo")
    table.add_column("Valor", style=f"bold {p.value}")
    table.add_column("Error", style=p.error)

    for fld in session.current_section.fields:
        value = session.values.get(fld)
        table.add_row(
            styled_field_label(fld.label or fld.field_id, fld.required),
            display_value(fld, value),
            session.error_for(fld.field_id) or "",
        )
    console.print(table)


def print_errors_table(errors: Mapping[str, Optional[str]], title: str = "Errores") -> None:
    """Lista de errores por campo (omite los None)."""
    console = get_console()
    p = get_palette()

    table = Table(title=title, box=box.SIMPLE, header_style=f"bold {p.primary}")
    table.add_column("fieldId", style=p.label)
    table.add_column("Mensaje", style=p.error)
    for field_id, message in errors.items():
        if message is not None:
            table.add_row(field_id, message)
    console.print(table)


def print_payload(payload: dict) -> None:
    """Imprime el payload final como JSON resaltado."""
    console = get_console()
    console.print(JSON(json.dumps(payload, ensure_ascii=False)))
