"""Tests para el modelo de esquema de formulario."""

import pytest
from pydantic import ValidationError

from dynaform.models import (
    ChoicesValue,
    FieldDef,
    FieldKind,
    FieldType,
    FlagValue,
    FormDocument,
    Section,
    TextValue,
    UserRegistration,
    empty_value,
    value_from_plain,
)
from dynaform.errors import ValueShapeError


class TestFieldDef:
    """Tests para FieldDef."""

    def test_aliases_camel_case(self, full_schema):
        """Test que los alias camelCase se mapean a atributos."""
        fld = full_schema.get_field("fullName")
        assert fld.field_id == "fullName"
        assert fld.min_length == 3
        assert fld.max_length == 10
        assert fld.data_test_id == "full-name"
        assert fld.validation_message == "Name is mandatory"

    def test_flat_validation_message(self):
        """Test que acepta validationMessage plano."""
        fld = FieldDef.model_validate(
            {"fieldId": "a", "type": "text", "required": True, "validationMessage": "Falta"}
        )
        assert fld.validation_message == "Falta"

    def test_kind_checkbox_variants(self, full_schema):
        """Test que el checkbox se separa en simple y múltiple."""
        assert full_schema.get_field("skills").kind == FieldKind.CHECKBOX_MULTI
        assert full_schema.get_field("terms").kind == FieldKind.CHECKBOX_SINGLE
        assert full_schema.get_field("email").kind == FieldKind.EMAIL

    def test_dropdown_requires_options(self):
        """Test dropdown sin opciones es inválido."""
        with pytest.raises(ValidationError):
            FieldDef.model_validate({"fieldId": "c", "type": "dropdown"})

    def test_text_rejects_options(self):
        """Test texto con opciones es inválido."""
        with pytest.raises(ValidationError):
            FieldDef.model_validate(
                {"fieldId": "c", "type": "text", "options": [{"value": "a", "label": "A"}]}
            )

    def test_unknown_type(self):
        """Test tipo desconocido."""
        with pytest.raises(ValidationError):
            FieldDef.model_validate({"fieldId": "c", "type": "slider"})

    def test_option_label(self, full_schema):
        """Test etiqueta de opción y fallback al valor."""
        country = full_schema.get_field("country")
        assert country.option_label("uy") == "Uruguay"
        assert country.option_label("zz") == "zz"


class TestSectionAndSchema:
    """Tests para Section y FormSchema."""

    def test_version_number_coerced(self, full_schema):
        """Test que la versión numérica se convierte a texto."""
        assert full_schema.version == "2"

    def test_empty_sections_rejected(self):
        """Test formulario sin secciones."""
        with pytest.raises(ValidationError):
            FormDocument.model_validate(
                {"form": {"formId": "x", "formTitle": "X", "version": "1", "sections": []}}
            )

    def test_empty_fields_rejected(self):
        """Test sección sin campos."""
        with pytest.raises(ValidationError):
            Section.model_validate({"title": "S", "fields": []})

    def test_duplicate_in_section_rejected(self):
        """Test fieldId repetido dentro de una sección."""
        with pytest.raises(ValidationError):
            Section.model_validate({
                "title": "S",
                "fields": [
                    {"fieldId": "a", "type": "text"},
                    {"fieldId": "a", "type": "email"},
                ],
            })

    def test_duplicate_across_sections_reported(self, two_section_payload):
        """Test duplicados entre secciones se reportan pero no se rechazan."""
        two_section_payload["form"]["sections"][1]["fields"].append(
            {"fieldId": "name", "type": "text"}
        )
        schema = FormDocument.model_validate(two_section_payload).form
        assert schema.duplicate_field_ids() == ["name"]

    def test_field_lookup(self, full_schema):
        """Test búsqueda de campos en todo el formulario."""
        assert full_schema.section_count == 2
        assert full_schema.get_field("terms").type == FieldType.CHECKBOX
        assert full_schema.get_field("missing") is None
        assert full_schema.field_ids()[0] == "fullName"


class TestFieldValues:
    """Tests para valores etiquetados."""

    def test_empty_defaults(self, full_schema):
        """Test vacío por tipo."""
        assert empty_value(full_schema.get_field("email")) == TextValue("")
        assert empty_value(full_schema.get_field("skills")) == ChoicesValue(())
        assert empty_value(full_schema.get_field("terms")) == FlagValue(False)

    def test_choices_no_duplicates(self):
        """Test que ChoicesValue elimina repetidos conservando orden."""
        assert ChoicesValue(("b", "a", "b")).items == ("b", "a")

    def test_value_from_plain(self, full_schema):
        """Test conversión desde JSON."""
        assert value_from_plain(full_schema.get_field("skills"), ["py"]) == ChoicesValue(("py",))
        assert value_from_plain(full_schema.get_field("terms"), True) == FlagValue(True)

    def test_value_from_plain_wrong_shape(self, full_schema):
        """Test forma incorrecta."""
        with pytest.raises(ValueShapeError):
            value_from_plain(full_schema.get_field("terms"), "yes")


class TestUserRegistration:
    """Tests para UserRegistration."""

    def test_payload_aliases(self):
        reg = UserRegistration(roll_number=" 42 ", name="Ana")
        assert reg.to_payload() == {"rollNumber": "42", "name": "Ana"}

    def test_blank_rejected(self):
        with pytest.raises(ValidationError):
            UserRegistration(roll_number="   ", name="Ana")
