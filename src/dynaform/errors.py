"""
Excepciones de dynaform.

Los errores de validación de campos NO son excepciones: se devuelven como
datos (ErrorMap). Aquí solo viven las fallas de frontera y de contrato.
"""


class DynaformError(Exception):
    """Error base de dynaform."""


class SchemaUnavailableError(DynaformError):
    """No se pudo obtener un esquema de formulario utilizable (reintentable)."""

    DEFAULT_MESSAGE = "Failed to fetch form data. Please try again."

    def __init__(self, message: str = DEFAULT_MESSAGE, cause: str = ""):
        super().__init__(message)
        self.cause = cause


class RegistrationError(DynaformError):
    """El servicio de registro rechazó al usuario."""


class FormContractError(DynaformError, AssertionError):
    """Transición invocada desde un estado que no la admite."""


class ValueShapeError(DynaformError, TypeError):
    """El valor no corresponde al tipo declarado del campo."""
