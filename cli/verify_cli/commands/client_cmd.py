from __future__ import annotations

import typer

from verify_sdk import ClientDescriptor, ConfigurationError, MalformedSerializedFormError

from .. import console
from ..config import load_config
from ..runtime import RuntimeContext, make_builder

app = typer.Typer(help="Build and inspect serialized client descriptors.")


def _emit(descriptor: ClientDescriptor, *, json_output: bool) -> None:
    if json_output:
        data = descriptor.to_dict()
        data["text"] = descriptor.to_text()
        console.print_json(data)
        return
    console.print(descriptor.to_text(), soft_wrap=True, markup=False)


def _decode(text: str) -> ClientDescriptor:
    try:
        return ClientDescriptor.from_text(text, RuntimeContext())
    except MalformedSerializedFormError as exc:
        console.err(f"Cannot decode descriptor: {exc}")
        raise typer.Exit(code=2)


@app.command("build")
def build_descriptor(
        application_id: str | None = typer.Option(None, "--application-id", help="Override application id."),
        shared_secret_key: str | None = typer.Option(None, "--shared-secret-key", help="Override secret key."),
        environment: str | None = typer.Option(
            None,
            "--environment",
            help="Override environment: production, sandbox or a literal endpoint URL.",
        ),
        registration_token: str | None = typer.Option(None, "--registration-token", help="Push registration token."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON."),
):
    builder = make_builder(
        load_config(),
        application_id=application_id,
        shared_secret_key=shared_secret_key,
        environment=environment,
        registration_token=registration_token,
    )
    try:
        descriptor = builder.finalize()
    except ConfigurationError as exc:
        console.err(str(exc))
        for name in exc.missing:
            console.info(f"missing: {name}")
        raise typer.Exit(code=2)
    _emit(descriptor, json_output=json_output)


@app.command("inspect")
def inspect_descriptor(
        text: str = typer.Argument(..., help="Descriptor in vsdk:// text form."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON."),
        show_secret: bool = typer.Option(False, "--show-secret", help="Include the shared secret key."),
):
    descriptor = _decode(text)
    if json_output:
        console.print_json(descriptor.to_dict(include_secret=show_secret))
        return
    if show_secret:
        console.print(descriptor.describe(), soft_wrap=True, markup=False)
        return
    for key, value in descriptor.to_dict().items():
        console.print(f"{key}={value if value is not None else ''}", soft_wrap=True, markup=False)


@app.command("rotate-token")
def rotate_token(
        text: str = typer.Argument(..., help="Descriptor in vsdk:// text form."),
        token: str = typer.Argument(..., help="New push registration token."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON."),
):
    descriptor = _decode(text)
    descriptor.set_registration_token(token or None)
    _emit(descriptor, json_output=json_output)
