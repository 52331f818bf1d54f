"""
Comandos CLI: registro, llenado interactivo y verificación de esquemas.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from dynaform.api import FormApiClient, load_form_file
from dynaform.cli.common import setup_logging
from dynaform.cli.prompts import prompt_registration
from dynaform.cli.runner import FormRunner
from dynaform.cli.theme import (
    print_error,
    print_errors_table,
    print_info,
    print_payload,
    print_success,
    print_warning,
)
from dynaform.config import ClientConfig
from dynaform.engine import FormSession, ValueStore, validate_form
from dynaform.errors import DynaformError, SchemaUnavailableError
from dynaform.models import FormDocument, UserRegistration, value_from_plain

REGISTRATION_REQUIRED = "Roll Number and Name are required"


def _build_registration(roll_number: Optional[str], name: Optional[str]) -> UserRegistration:
    if roll_number is None or name is None:
        answers = prompt_registration()
        if answers is None:
            raise typer.Exit(1)
        roll_number, name = answers
    try:
        return UserRegistration(roll_number=roll_number, name=name)
    except ValidationError:
        print_error(REGISTRATION_REQUIRED)
        raise typer.Exit(1)


def _load_config(api_url: Optional[str], timeout: Optional[float]) -> ClientConfig:
    try:
        return ClientConfig.from_env(api_base_url=api_url, timeout_s=timeout)
    except ValidationError as e:
        print_error(f"Configuración inválida: {e.errors()[0]['msg']}")
        raise typer.Exit(1)


def _report_failure(error: DynaformError) -> None:
    print_error(str(error))
    if isinstance(error, SchemaUnavailableError) and error.cause:
        print_info(f"Detalle: {error.cause}")


def register(
    roll_number: Annotated[Optional[str], typer.Option("--roll-number", "-r", help="Número de matrícula")] = None,
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="Nombre del usuario")] = None,
    api_url: Annotated[Optional[str], typer.Option(help="URL base del servicio")] = None,
    timeout: Annotated[Optional[float], typer.Option(help="Timeout por request (s)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Mostrar log de depuración")] = False,
):
    """
    Registra un usuario en el servicio de formularios.

    Ejemplo:
        dynaform register -r 42 -n "Ana"
    """
    if verbose:
        setup_logging(verbose=True)
    registration = _build_registration(roll_number, name)
    config = _load_config(api_url, timeout)
    try:
        with FormApiClient(config) as client:
            message = client.create_user(registration)
    except DynaformError as e:
        _report_failure(e)
        raise typer.Exit(1)
    print_success(message)


def _obtain_document(
    schema: Optional[Path],
    roll_number: Optional[str],
    name: Optional[str],
    config: ClientConfig,
) -> FormDocument:
    if schema is not None:
        return load_form_file(schema)

    registration = _build_registration(roll_number, name)
    with FormApiClient(config) as client:
        client.create_user(registration)
        return client.get_form(registration.roll_number)


def fill(
    schema: Annotated[Optional[Path], typer.Option("--schema", "-s", help="Archivo JSON con el formulario")] = None,
    roll_number: Annotated[Optional[str], typer.Option("--roll-number", "-r", help="Número de matrícula")] = None,
    name: Annotated[Optional[str], typer.Option("--name", "-n", help="Nombre del usuario")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Guardar payload en JSON")] = None,
    revalidate_all: Annotated[bool, typer.Option("--revalidate-all", help="Validar todas las secciones al enviar")] = False,
    api_url: Annotated[Optional[str], typer.Option(help="URL base del servicio")] = None,
    timeout: Annotated[Optional[float], typer.Option(help="Timeout por request (s)")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Mostrar log de depuración")] = False,
):
    """
    Completa un formulario de forma interactiva.

    Sin --schema, registra al usuario y descarga su formulario.

    Ejemplo:
        dynaform fill --schema form.json
        dynaform fill -r 42 -n "Ana" -o respuesta.json
    """
    if verbose:
        setup_logging(verbose=True)
    config = _load_config(api_url, timeout)
    try:
        document = _obtain_document(schema, roll_number, name, config)
    except DynaformError as e:
        _report_failure(e)
        raise typer.Exit(1)

    session = FormSession.from_document(document, revalidate_all_on_submit=revalidate_all)
    payload = FormRunner(session).run()
    if payload is None:
        raise typer.Exit(1)

    print_payload(payload)
    if output is not None:
        output.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        print_success(f"Payload guardado en {output}")


def check(
    schema: Annotated[Path, typer.Argument(help="Archivo JSON con el formulario")],
    values: Annotated[Optional[Path], typer.Option("--values", help="Archivo JSON con valores a validar")] = None,
):
    """
    Verifica un esquema de formulario y, opcionalmente, un conjunto de valores.

    Ejemplo:
        dynaform check form.json
        dynaform check form.json --values respuesta.json
    """
    try:
        document = load_form_file(schema)
    except SchemaUnavailableError as e:
        _report_failure(e)
        raise typer.Exit(1)

    form = document.form
    n_fields = len(form.field_ids())
    print_success(f"Esquema válido: {form.form_title} ({form.section_count} secciones, {n_fields} campos)")

    duplicates = form.duplicate_field_ids()
    if duplicates:
        print_warning(f"fieldId repetidos entre secciones: {', '.join(duplicates)}")

    if values is None:
        return

    try:
        payload = json.loads(values.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print_error(f"No se pudo leer {values}: {e}")
        raise typer.Exit(1)
    if not isinstance(payload, dict):
        print_error("Los valores deben ser un objeto JSON {fieldId: valor}")
        raise typer.Exit(1)

    store = ValueStore()
    for field_id, raw in payload.items():
        fld = form.get_field(field_id)
        if fld is None:
            print_warning(f"Campo desconocido ignorado: {field_id}")
            continue
        try:
            store = store.with_value(fld, value_from_plain(fld, raw))
        except DynaformError as e:
            print_error(str(e))
            raise typer.Exit(1)

    validation = validate_form(form, store)
    if validation.is_valid:
        print_success("Todos los valores son válidos")
        return
    print_errors_table(validation.errors)
    raise typer.Exit(1)
