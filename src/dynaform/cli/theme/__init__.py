"""
Sistema de temas para la interfaz CLI de dynaform.

- palette: paletas y gestión de temas (CLITheme, ColorPalette)
- styled: funciones que retornan objetos Text estilizados
- printing: funciones que imprimen directamente a consola
"""

from dynaform.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)
from dynaform.cli.theme.styled import (
    styled_header,
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    styled_muted,
    styled_field_label,
)
from dynaform.cli.theme.printing import (
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_step,
    print_section,
    print_section_fields,
    print_errors_table,
    print_payload,
)

__all__ = [
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "styled_header",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "styled_muted",
    "styled_field_label",
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_step",
    "print_section",
    "print_section_fields",
    "print_errors_table",
    "print_payload",
]
