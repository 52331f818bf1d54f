"""
Cliente HTTP para los servicios de registro y de formularios.

Es la frontera asíncrona del sistema: cualquier falla de red, respuesta
vacía o con forma desconocida se convierte en SchemaUnavailableError, y
nunca se devuelve un esquema parcial.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from dynaform.config import ClientConfig
from dynaform.errors import RegistrationError, SchemaUnavailableError
from dynaform.models import FormDocument, UserRegistration

logger = logging.getLogger(__name__)

CREATE_USER_PATH = "/create-user"
GET_FORM_PATH = "/get-form"


def _server_message(response: httpx.Response) -> Optional[str]:
    """Campo ``message`` del cuerpo JSON, si existe."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None


def load_form_document(payload: Any) -> FormDocument:
    """
    Convierte un payload JSON en FormDocument.

    Raises:
        SchemaUnavailableError: si el payload está vacío o no tiene la forma
            ``{"form": {...}}``
    """
    if not payload:
        logger.warning("Respuesta de formulario vacía")
        raise SchemaUnavailableError(cause="empty response")
    try:
        return FormDocument.model_validate(payload)
    except ValidationError as e:
        logger.warning("Documento de formulario inválido: %s", e)
        raise SchemaUnavailableError(cause=str(e)) from e


def load_form_file(path: Path) -> FormDocument:
    """Lee un documento de formulario desde un archivo JSON local."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("No se pudo leer el formulario %s: %s", path, e)
        raise SchemaUnavailableError(cause=str(e)) from e
    return load_form_document(payload)


class FormApiClient:
    """
    Cliente de los servicios remotos.

    Ejemplo:
        with FormApiClient(ClientConfig.from_env()) as client:
            client.create_user(UserRegistration(rollNumber="42", name="Ana"))
            document = client.get_form("42")
    """

    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[httpx.BaseTransport] = None):
        self.config = config or ClientConfig()
        self._client = httpx.Client(
            base_url=self.config.api_base_url,
            timeout=self.config.timeout_s,
            transport=transport,
        )

    def __enter__(self) -> "FormApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def create_user(self, registration: UserRegistration) -> str:
        """
        Registra al usuario.

        Returns:
            Mensaje del servidor

        Raises:
            RegistrationError: si el servidor rechaza el registro o falla la red
        """
        logger.debug("Registrando usuario %s", registration.roll_number)
        try:
            response = self._client.post(CREATE_USER_PATH, json=registration.to_payload())
        except httpx.HTTPError as e:
            logger.warning("Registro fallido: %s", e)
            raise RegistrationError(str(e)) from e

        message = _server_message(response)
        if response.is_error:
            logger.warning("Registro rechazado (%s): %s", response.status_code, message)
            raise RegistrationError(message or "Failed to create user")
        return message or "User created successfully"

    def get_form(self, roll_number: str) -> FormDocument:
        """
        Obtiene el documento de formulario para un usuario.

        Raises:
            SchemaUnavailableError: ante cualquier falla (red, HTTP, forma)
        """
        logger.debug("Solicitando formulario para %s", roll_number)
        try:
            response = self._client.get(GET_FORM_PATH, params={"rollNumber": roll_number})
        except httpx.HTTPError as e:
            logger.warning("Error de red al obtener formulario: %s", e)
            raise SchemaUnavailableError(cause=str(e)) from e

        if response.is_error:
            detail = _server_message(response) or "Failed to fetch form"
            logger.warning("Error al obtener formulario (%s): %s", response.status_code, detail)
            raise SchemaUnavailableError(cause=detail)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Respuesta de formulario no es JSON")
            raise SchemaUnavailableError(cause="invalid JSON") from e
        return load_form_document(payload)
