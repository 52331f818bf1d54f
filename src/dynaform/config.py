"""Configuración del cliente de servicios remotos."""

import os

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://dynamic-form-generator-9rl7.onrender.com"
DEFAULT_TIMEOUT_S = 10.0

ENV_API_URL = "DYNAFORM_API_URL"
ENV_TIMEOUT = "DYNAFORM_TIMEOUT"


class ClientConfig(BaseModel):
    """Parámetros de conexión con los servicios de registro y formularios."""
    api_base_url: str = Field(default=DEFAULT_API_URL, description="URL base del servicio")
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0, description="Timeout por request (s)")

    @field_validator("api_base_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL inválida: {v}")
        return v.rstrip("/")

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """
        Crea la configuración desde variables de entorno.

        Los overrides con valor None se ignoran, de modo que las opciones
        CLI no indicadas no pisan el entorno.
        """
        values: dict = {}
        if os.environ.get(ENV_API_URL):
            values["api_base_url"] = os.environ[ENV_API_URL]
        if os.environ.get(ENV_TIMEOUT):
            values["timeout_s"] = os.environ[ENV_TIMEOUT]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
