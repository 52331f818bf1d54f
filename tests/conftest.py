"""Configuración de pytest para tests de dynaform."""

import json

import pytest

from dynaform.models import FormDocument, FormSchema


@pytest.fixture
def two_section_payload():
    """Formulario mínimo de dos secciones: nombre y aceptación."""
    return {
        "form": {
            "formId": "F-001",
            "formTitle": "Registro",
            "version": "1.0",
            "sections": [
                {
                    "title": "Datos",
                    "description": "Datos personales",
                    "fields": [
                        {"fieldId": "name", "type": "text", "label": "Name", "required": True},
                    ],
                },
                {
                    "title": "Confirmación",
                    "description": "",
                    "fields": [
                        {"fieldId": "agree", "type": "checkbox", "label": "I agree", "required": True},
                    ],
                },
            ],
        }
    }


@pytest.fixture
def two_section_schema(two_section_payload) -> FormSchema:
    return FormDocument.model_validate(two_section_payload).form


@pytest.fixture
def full_payload():
    """Formulario con todos los tipos de campo."""
    return {
        "form": {
            "formId": "F-ALL",
            "formTitle": "Todos los tipos",
            "version": 2,
            "sections": [
                {
                    "title": "Contacto",
                    "description": "Cómo contactarte",
                    "fields": [
                        {
                            "fieldId": "fullName", "type": "text", "label": "Full Name",
                            "required": True, "minLength": 3, "maxLength": 10,
                            "validation": {"message": "Name is mandatory"},
                            "dataTestId": "full-name",
                        },
                        {"fieldId": "email", "type": "email", "label": "Email", "required": False},
                        {"fieldId": "phone", "type": "tel", "label": "Phone", "required": True},
                        {"fieldId": "birth", "type": "date", "label": "Birth date"},
                    ],
                },
                {
                    "title": "Preferencias",
                    "description": "",
                    "fields": [
                        {"fieldId": "bio", "type": "textarea", "label": "Bio", "maxLength": 20},
                        {
                            "fieldId": "country", "type": "dropdown", "label": "Country", "required": True,
                            "options": [
                                {"value": "uy", "label": "Uruguay"},
                                {"value": "ar", "label": "Argentina"},
                            ],
                        },
                        {
                            "fieldId": "gender", "type": "radio", "label": "Gender",
                            "options": [
                                {"value": "f", "label": "Female"},
                                {"value": "m", "label": "Male"},
                            ],
                        },
                        {
                            "fieldId": "skills", "type": "checkbox", "label": "Skills", "required": True,
                            "options": [
                                {"value": "py", "label": "Python"},
                                {"value": "js", "label": "JavaScript"},
                                {"value": "go", "label": "Go"},
                            ],
                        },
                        {"fieldId": "terms", "type": "checkbox", "label": "Accept terms", "required": True},
                    ],
                },
            ],
        }
    }


@pytest.fixture
def full_schema(full_payload) -> FormSchema:
    return FormDocument.model_validate(full_payload).form


@pytest.fixture
def schema_file(tmp_path, two_section_payload):
    """Archivo JSON con el formulario de dos secciones."""
    path = tmp_path / "form.json"
    path.write_text(json.dumps(two_section_payload), encoding="utf-8")
    return path
