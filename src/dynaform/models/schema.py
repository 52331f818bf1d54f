"""
Modelo del documento de formulario entregado por el servidor.

El documento llega envuelto en una clave ``form``::

    {"form": {"formId": ..., "formTitle": ..., "version": ..., "sections": [...]}}

Los alias JSON son camelCase; los atributos Python son snake_case.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class FieldType(str, Enum):
    """Tipos de campo declarados por el esquema."""
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"
    TEXTAREA = "textarea"
    DROPDOWN = "dropdown"
    RADIO = "radio"
    CHECKBOX = "checkbox"


class FieldKind(str, Enum):
    """
    Variante cerrada de campo usada por el motor.

    Se diferencia de FieldType en que separa el checkbox simple (booleano)
    del checkbox con opciones (selección múltiple).
    """
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"
    TEXTAREA = "textarea"
    DROPDOWN = "dropdown"
    RADIO = "radio"
    CHECKBOX_SINGLE = "checkbox_single"
    CHECKBOX_MULTI = "checkbox_multi"


# Tipos cuyo valor es texto libre (aplican restricciones de longitud)
STRING_LENGTH_KINDS = frozenset({
    FieldKind.TEXT,
    FieldKind.EMAIL,
    FieldKind.TEL,
    FieldKind.TEXTAREA,
})

# Tipos que exigen lista de opciones
OPTION_TYPES = frozenset({FieldType.DROPDOWN, FieldType.RADIO})


class SchemaModel(BaseModel):
    """Base para los modelos del esquema (acepta alias y nombres Python)."""
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class FieldOption(SchemaModel):
    """Opción de un dropdown, radio o checkbox múltiple."""
    value: str
    label: str
    data_test_id: Optional[str] = Field(None, alias="dataTestId")


class FieldValidation(SchemaModel):
    """Bloque ``validation`` de un campo."""
    message: Optional[str] = None


class FieldDef(SchemaModel):
    """Definición de un campo del formulario."""
    field_id: str = Field(..., alias="fieldId", min_length=1)
    type: FieldType
    label: str = ""
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[list[FieldOption]] = None
    min_length: Optional[int] = Field(None, alias="minLength", ge=0)
    max_length: Optional[int] = Field(None, alias="maxLength", ge=0)
    validation: Optional[FieldValidation] = None
    data_test_id: Optional[str] = Field(None, alias="dataTestId")

    @model_validator(mode="before")
    @classmethod
    def _accept_flat_message(cls, data: Any) -> Any:
        # Algunos servidores envían validationMessage en lugar de validation.message
        if isinstance(data, dict) and "validationMessage" in data and "validation" not in data:
            data = dict(data)
            data["validation"] = {"message": data.pop("validationMessage")}
        return data

    @model_validator(mode="after")
    def _check_options(self) -> "FieldDef":
        if self.type in OPTION_TYPES and not self.options:
            raise ValueError(f"El campo '{self.field_id}' ({self.type.value}) requiere opciones")
        if self.options is not None and self.type not in OPTION_TYPES and self.type != FieldType.CHECKBOX:
            raise ValueError(f"El campo '{self.field_id}' ({self.type.value}) no admite opciones")
        return self

    @property
    def kind(self) -> FieldKind:
        """Variante del campo, resuelta a partir de tipo y opciones."""
        if self.type == FieldType.CHECKBOX:
            if self.options is not None:
                return FieldKind.CHECKBOX_MULTI
            return FieldKind.CHECKBOX_SINGLE
        return FieldKind(self.type.value)

    @property
    def validation_message(self) -> Optional[str]:
        """Mensaje de 'requerido' definido por el esquema, si existe."""
        if self.validation is None:
            return None
        return self.validation.message

    def option_values(self) -> list[str]:
        return [opt.value for opt in self.options or []]

    def option_label(self, value: str) -> str:
        """Etiqueta de una opción, o el valor mismo si no se encuentra."""
        for opt in self.options or []:
            if opt.value == value:
                return opt.label
        return value


class Section(SchemaModel):
    """Grupo de campos que se presenta y valida en conjunto."""
    title: str
    description: str = ""
    fields: list[FieldDef] = Field(..., min_length=1)

    @field_validator("fields")
    @classmethod
    def _unique_field_ids(cls, fields: list[FieldDef]) -> list[FieldDef]:
        seen = set()
        for fld in fields:
            if fld.field_id in seen:
                raise ValueError(f"fieldId duplicado en la sección: '{fld.field_id}'")
            seen.add(fld.field_id)
        return fields

    def get_field(self, field_id: str) -> Optional[FieldDef]:
        for fld in self.fields:
            if fld.field_id == field_id:
                return fld
        return None

    def field_ids(self) -> list[str]:
        return [fld.field_id for fld in self.fields]


class FormSchema(SchemaModel):
    """Formulario completo: metadatos y secciones ordenadas."""
    form_id: str = Field(..., alias="formId")
    form_title: str = Field(..., alias="formTitle")
    version: str = ""
    sections: list[Section] = Field(..., min_length=1)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    def iter_fields(self):
        """Itera todos los campos en orden de sección."""
        for section in self.sections:
            yield from section.fields

    def field_ids(self) -> list[str]:
        return [fld.field_id for fld in self.iter_fields()]

    def get_field(self, field_id: str) -> Optional[FieldDef]:
        """
        Busca un campo en todo el formulario.

        Asume fieldId único globalmente; si hay duplicados entre secciones
        retorna el primero.
        """
        for fld in self.iter_fields():
            if fld.field_id == field_id:
                return fld
        return None

    def duplicate_field_ids(self) -> list[str]:
        """fieldIds que aparecen en más de una sección."""
        seen: set[str] = set()
        duplicates: list[str] = []
        for field_id in self.field_ids():
            if field_id in seen and field_id not in duplicates:
                duplicates.append(field_id)
            seen.add(field_id)
        return duplicates


class FormDocument(SchemaModel):
    """Envoltura ``{"form": ...}`` tal como la devuelve el servidor."""
    form: FormSchema
