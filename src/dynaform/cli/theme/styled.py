"""
Funciones para crear objetos Text estilizados (no imprimen directamente).
"""

from typing import Optional

from rich.panel import Panel
from rich.text import Text
from rich import box

from dynaform.cli.theme.palette import get_palette


def styled_header(text: str, subtitle: Optional[str] = None) -> Panel:
    """Crea un encabezado estilizado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)

    return Panel(
        content,
        border_style=p.border,
        box=box.ROUNDED,
        padding=(0, 2),
    )


def styled_success(text: str) -> Text:
    p = get_palette()
    return Text(f"[+] {text}", style=p.success)


def styled_warning(text: str) -> Text:
    p = get_palette()
    return Text(f"[!] {text}", style=p.warning)


def styled_error(text: str) -> Text:
    p = get_palette()
    return Text(f"[x] {text}", style=p.error)


def styled_info(text: str) -> Text:
    p = get_palette()
    return Text(f"[i] {text}", style=p.info)


def styled_muted(text: str) -> Text:
    p = get_palette()
    return Text(text, style=p.muted)


def styled_field_label(label: str, required: bool) -> Text:
    """Etiqueta de campo, con asterisco si es requerido."""
    p = get_palette()
    text = Text(label, style=p.label)
    if required:
        text.append(" *", style=f"bold {p.accent}")
    return text
