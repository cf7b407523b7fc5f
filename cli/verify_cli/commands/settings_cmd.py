from __future__ import annotations

import typer

from .. import console
from ..config import SETTING_KEYS, load_config, normalize_environment, save_config

app = typer.Typer(help="Manage local SDK settings (~/.config/verify-sdk/config.toml).")


def _state(value: str | None) -> str:
    return "(set)" if (value or "").strip() else "(empty)"


@app.command("show")
def show_settings():
    client = load_config().client
    console.print(
        f"application_id={client.application_id or '-'} shared_secret_key={_state(client.shared_secret_key)} "
        f"environment={client.environment} registration_token={_state(client.registration_token)}",
        markup=False,
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help=f"Setting key ({', '.join(SETTING_KEYS)})."),
):
    client = load_config().client
    k = key.strip().lower()
    if k not in SETTING_KEYS:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    console.print(getattr(client, k) or "", markup=False)


@app.command("set")
def set_setting(
        application_id: str | None = typer.Option(None, "--application-id", help="Set application id."),
        shared_secret_key: str | None = typer.Option(None, "--shared-secret-key", help="Set pre-shared secret key."),
        environment: str | None = typer.Option(
            None,
            "--environment",
            help="Set environment: production, sandbox or a literal endpoint URL.",
        ),
        registration_token: str | None = typer.Option(
            None,
            "--registration-token",
            help="Set push registration token (empty string clears it).",
        ),
):
    cfg = load_config()
    if application_id is not None:
        cfg.client.application_id = application_id.strip()
    if shared_secret_key is not None:
        cfg.client.shared_secret_key = shared_secret_key.strip()
    if environment is not None:
        normalized = normalize_environment(environment)
        if not normalized:
            console.err("Environment cannot be empty.")
            raise typer.Exit(code=2)
        cfg.client.environment = normalized
    if registration_token is not None:
        cfg.client.registration_token = registration_token.strip() or None
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
