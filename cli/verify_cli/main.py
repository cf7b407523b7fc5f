from __future__ import annotations

import typer

from verify_sdk import get_version

from . import console
from .commands import client_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="verify-sdk",
        help="verify-sdk developer tool",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")
    app.add_typer(client_cmd.app, name="client")

    @app.command("version")
    def version():
        console.print(get_version())

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
