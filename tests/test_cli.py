"""
Tests para los comandos CLI y el runner interactivo.

Usa typer.testing.CliRunner y parchea los prompts de questionary.
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from dynaform.cli import app
from dynaform.cli.common import PACKAGE_LOGGER
from dynaform.cli.prompts import BLANK_OPTION_LABEL, SectionAction, prompt_field
from dynaform.cli.runner import FormRunner
from dynaform.engine import FormSession
from dynaform.errors import SchemaUnavailableError
from dynaform.models import ChoicesValue, FlagValue, TextValue


runner = CliRunner()


def scripted(actions):
    """Devuelve un side_effect que entrega acciones en orden."""
    iterator = iter(actions)
    return lambda is_first, is_last: next(iterator)


def answering(answer):
    """Reemplazo de questionary.<prompt> cuyo .ask() devuelve answer."""
    question = MagicMock()
    question.ask.return_value = answer
    return MagicMock(return_value=question)


class TestPromptField:
    """Tests para prompt_field con questionary simulado."""

    def test_text(self, full_schema):
        prompt = answering("Ana")
        with patch("dynaform.cli.prompts.questionary.text", prompt):
            value = prompt_field(full_schema.get_field("fullName"), TextValue("An"))
        assert value == TextValue("Ana")
        kwargs = prompt.call_args.kwargs
        assert kwargs["default"] == "An"
        assert kwargs["multiline"] is False

    def test_textarea_multiline(self, full_schema):
        prompt = answering("Hola\nmundo")
        with patch("dynaform.cli.prompts.questionary.text", prompt):
            value = prompt_field(full_schema.get_field("bio"), TextValue(""))
        assert value == TextValue("Hola\nmundo")
        assert prompt.call_args.kwargs["multiline"] is True

    def test_dropdown_blank_option(self, full_schema):
        """Test el dropdown ofrece la opción vacía primero y la acepta."""
        prompt = answering("")
        with patch("dynaform.cli.prompts.questionary.select", prompt):
            value = prompt_field(full_schema.get_field("country"), TextValue("uy"))
        assert value == TextValue("")
        kwargs = prompt.call_args.kwargs
        assert [c.value for c in kwargs["choices"]] == ["", "uy", "ar"]
        assert kwargs["choices"][0].title == BLANK_OPTION_LABEL
        assert kwargs["default"] == "uy"

    def test_radio_without_blank(self, full_schema):
        prompt = answering("m")
        with patch("dynaform.cli.prompts.questionary.select", prompt):
            value = prompt_field(full_schema.get_field("gender"), TextValue(""))
        assert value == TextValue("m")
        kwargs = prompt.call_args.kwargs
        assert [c.value for c in kwargs["choices"]] == ["f", "m"]
        assert kwargs["default"] is None

    def test_checkbox_group_toggles(self, full_schema):
        """Test desmarcar py y marcar go conserva el orden de los clics."""
        prompt = answering(["js", "go"])
        with patch("dynaform.cli.prompts.questionary.checkbox", prompt):
            value = prompt_field(full_schema.get_field("skills"), ChoicesValue(("py", "js")))
        assert value == ChoicesValue(("js", "go"))
        assert [c.checked for c in prompt.call_args.kwargs["choices"]] == [True, True, False]

    def test_single_checkbox(self, full_schema):
        prompt = answering(True)
        with patch("dynaform.cli.prompts.questionary.confirm", prompt):
            value = prompt_field(full_schema.get_field("terms"), FlagValue(False))
        assert value == FlagValue(True)
        assert prompt.call_args.kwargs["default"] is False

    @pytest.mark.parametrize("field_id,current,target", [
        ("fullName", TextValue(""), "text"),
        ("country", TextValue(""), "select"),
        ("skills", ChoicesValue(("py",)), "checkbox"),
        ("terms", FlagValue(False), "confirm"),
    ])
    def test_cancelled(self, full_schema, field_id, current, target):
        """Test Ctrl+C (ask() devuelve None) no produce valor."""
        with patch(f"dynaform.cli.prompts.questionary.{target}", answering(None)):
            assert prompt_field(full_schema.get_field(field_id), current) is None


class TestFormRunner:
    """Tests para FormRunner."""

    def test_fill_and_submit(self, two_section_schema):
        """Test recorrido completo con prompts simulados."""
        session = FormSession(two_section_schema)
        answers = {"name": TextValue("Alice"), "agree": FlagValue(True)}

        with patch("dynaform.cli.runner.prompt_action", side_effect=scripted([
            SectionAction.NEXT,    # falla: nombre vacío
            SectionAction.FILL,
            SectionAction.NEXT,
            SectionAction.FILL,
            SectionAction.SUBMIT,
        ])), patch(
            "dynaform.cli.runner.prompt_field",
            side_effect=lambda fld, current, error: answers[fld.field_id],
        ):
            payload = FormRunner(session).run()

        assert payload == {"name": "Alice", "agree": True}
        assert session.submitted

    def test_back_keeps_values(self, two_section_schema):
        session = FormSession(two_section_schema)
        session.set_value("name", TextValue("Alice"))

        with patch("dynaform.cli.runner.prompt_action", side_effect=scripted([
            SectionAction.NEXT,
            SectionAction.BACK,
            SectionAction.CANCEL,
        ])):
            assert FormRunner(session).run() is None

        assert session.current_section_index == 0
        assert session.get_value("name") == TextValue("Alice")

    def test_edit_single_field(self, two_section_schema):
        session = FormSession(two_section_schema)
        with patch("dynaform.cli.runner.prompt_action", side_effect=scripted([
            SectionAction.EDIT,
            SectionAction.CANCEL,
        ])), patch(
            "dynaform.cli.runner.prompt_field_choice", return_value="name",
        ), patch(
            "dynaform.cli.runner.prompt_field", return_value=TextValue("Bob"),
        ):
            FormRunner(session).run()
        assert session.get_value("name") == TextValue("Bob")

    def test_cancelled_prompt_stops_fill(self, two_section_schema):
        session = FormSession(two_section_schema)
        with patch("dynaform.cli.runner.prompt_action", side_effect=scripted([
            SectionAction.FILL,
            SectionAction.CANCEL,
        ])), patch("dynaform.cli.runner.prompt_field", return_value=None):
            FormRunner(session).run()
        assert "name" not in session.values


class TestCheckCommand:
    """Tests para dynaform check."""

    def test_valid_schema(self, schema_file):
        result = runner.invoke(app, ["check", str(schema_file)])
        assert result.exit_code == 0
        assert "Registro" in result.output

    def test_invalid_schema(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"nope": 1}), encoding="utf-8")
        result = runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert SchemaUnavailableError.DEFAULT_MESSAGE in result.output

    def test_values_valid(self, schema_file, tmp_path):
        values = tmp_path / "values.json"
        values.write_text(json.dumps({"name": "Alice", "agree": True}), encoding="utf-8")
        result = runner.invoke(app, ["check", str(schema_file), "--values", str(values)])
        assert result.exit_code == 0
        assert "válidos" in result.output

    def test_values_invalid(self, schema_file, tmp_path):
        values = tmp_path / "values.json"
        values.write_text(json.dumps({"name": "", "agree": False}), encoding="utf-8")
        result = runner.invoke(app, ["check", str(schema_file), "--values", str(values)])
        assert result.exit_code == 1
        assert "This field is required" in result.output

    def test_values_wrong_shape(self, schema_file, tmp_path):
        values = tmp_path / "values.json"
        values.write_text(json.dumps({"agree": "yes"}), encoding="utf-8")
        result = runner.invoke(app, ["check", str(schema_file), "--values", str(values)])
        assert result.exit_code == 1


class TestFillCommand:
    """Tests para dynaform fill."""

    def test_fill_from_file(self, schema_file, tmp_path):
        output = tmp_path / "out.json"
        with patch("dynaform.cli.commands.FormRunner.run", return_value={"name": "Alice", "agree": True}):
            result = runner.invoke(app, ["fill", "--schema", str(schema_file), "--output", str(output)])
        assert result.exit_code == 0
        assert json.loads(output.read_text(encoding="utf-8")) == {"name": "Alice", "agree": True}

    def test_fill_cancelled(self, schema_file):
        with patch("dynaform.cli.commands.FormRunner.run", return_value=None):
            result = runner.invoke(app, ["fill", "--schema", str(schema_file)])
        assert result.exit_code == 1

    def test_fill_remote_unavailable(self):
        with patch(
            "dynaform.cli.commands.FormApiClient.create_user", return_value="ok",
        ), patch(
            "dynaform.cli.commands.FormApiClient.get_form", side_effect=SchemaUnavailableError(),
        ):
            result = runner.invoke(app, ["fill", "-r", "42", "-n", "Ana"])
        assert result.exit_code == 1
        assert "Please try again" in result.output

    def test_blank_registration(self):
        result = runner.invoke(app, ["fill", "-r", " ", "-n", "Ana"])
        assert result.exit_code == 1
        assert "Roll Number and Name are required" in result.output


class TestRegisterCommand:
    """Tests para dynaform register."""

    def test_register(self):
        with patch("dynaform.cli.commands.FormApiClient.create_user", return_value="User created"):
            result = runner.invoke(app, ["register", "-r", "42", "-n", "Ana"])
        assert result.exit_code == 0
        assert "User created" in result.output

    @pytest.mark.parametrize("args", [["--api-url", "not-a-url"], ["--timeout", "0"]])
    def test_invalid_config(self, args):
        result = runner.invoke(app, ["register", "-r", "42", "-n", "Ana", *args])
        assert result.exit_code == 1


class TestGlobalOptions:
    """Tests para opciones globales."""

    def test_minimal_theme(self, schema_file):
        from dynaform.cli.theme import CLITheme, THEME_DEFAULT, THEME_MINIMAL

        try:
            result = runner.invoke(app, ["--theme", "minimal", "check", str(schema_file)])
            assert result.exit_code == 0
            assert CLITheme.get_palette() is THEME_MINIMAL
        finally:
            CLITheme._palette = THEME_DEFAULT
            CLITheme._console = None

    @pytest.mark.parametrize("args", [
        ["fill", "--schema", "{schema}", "--verbose"],
        ["--verbose", "fill", "--schema", "{schema}"],
    ])
    def test_verbose(self, schema_file, args):
        """Test --verbose se acepta antes o después del comando."""
        args = [a.format(schema=schema_file) for a in args]
        logger = logging.getLogger(PACKAGE_LOGGER)
        try:
            with patch("dynaform.cli.commands.FormRunner.run", return_value={"name": "Alice", "agree": True}):
                result = runner.invoke(app, args)
            assert result.exit_code == 0
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(logging.WARNING)

    def test_default_log_level(self, schema_file):
        result = runner.invoke(app, ["check", str(schema_file)])
        assert result.exit_code == 0
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING
