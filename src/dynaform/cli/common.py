"""
Utilidades comunes para los comandos CLI.
"""

import logging

from rich.logging import RichHandler

from dynaform.cli.theme import get_console

PACKAGE_LOGGER = "dynaform"


def setup_logging(verbose: bool = False) -> None:
    """Envía el log del paquete a la consola del tema (reemplaza handlers previos)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=get_console(), show_path=False, show_time=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
