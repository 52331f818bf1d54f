"""
CLI de dynaform.

Comandos:
- register: registra un usuario en el servicio
- fill: completa un formulario de forma interactiva
- check: verifica un esquema y, opcionalmente, valores
"""

from typing import Annotated

import typer

from dynaform.cli.commands import check, fill, register
from dynaform.cli.common import setup_logging
from dynaform.cli.theme import CLITheme, ThemeName

app = typer.Typer(
    name="dynaform",
    help="Formularios por secciones definidos por el servidor.",
    no_args_is_help=True,
)

app.command("register")(register)
app.command("fill")(fill)
app.command("check")(check)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", help="Mostrar log de depuración")] = False,
    theme: Annotated[ThemeName, typer.Option(help="Tema de colores")] = ThemeName.DEFAULT,
):
    """
    dynaform - Registro, descarga y llenado de formularios dinámicos.
    """
    CLITheme.set_theme(theme)
    setup_logging(verbose)


__all__ = ["app"]
