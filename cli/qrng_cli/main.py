from __future__ import annotations

import typer

from .commands import random_cmd, settings_cmd
from .http import cli_version
from .logging_ import setup_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(cli_version())
        raise typer.Exit()


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="qrng",
        help="Quantum random numbers from the ANU QRNG service.",
        no_args_is_help=True,
    )

    app.command("bits")(random_cmd.bits)
    app.command("uint8")(random_cmd.uint8)
    app.command("uint16")(random_cmd.uint16)
    app.command("hex")(random_cmd.hex_blocks)
    app.command("number")(random_cmd.number)
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            version: bool = typer.Option(
                False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
            ),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
