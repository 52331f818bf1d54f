"""
Registro de usuario previo a la obtención del formulario.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRegistration(BaseModel):
    """Identidad del usuario; el rollNumber es la clave para pedir el esquema."""
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    roll_number: str = Field(..., alias="rollNumber", min_length=1)
    name: str = Field(..., min_length=1)

    def to_payload(self) -> dict:
        """Cuerpo JSON para el servicio de registro."""
        return self.model_dump(by_alias=True)
