"""
dynaform - Motor de formularios por secciones definidos por el servidor.

Uso básico:
    from dynaform import FormSession, load_form_file

    session = FormSession.from_document(load_form_file("form.json"))
"""

__version__ = "0.1.0"

from dynaform.errors import (
    DynaformError,
    SchemaUnavailableError,
    RegistrationError,
    FormContractError,
    ValueShapeError,
)
from dynaform.engine import FormSession, validate_field, validate_section
from dynaform.api import FormApiClient, load_form_document, load_form_file

__all__ = [
    "__version__",
    "DynaformError",
    "SchemaUnavailableError",
    "RegistrationError",
    "FormContractError",
    "ValueShapeError",
    "FormSession",
    "validate_field",
    "validate_section",
    "FormApiClient",
    "load_form_document",
    "load_form_file",
]
