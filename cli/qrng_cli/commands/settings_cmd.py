from __future__ import annotations

import os

import typer
from qrng_client.config_types import AuthMode

from .. import console
from ..config import (
    config_path,
    default_config,
    effective_endpoint,
    load_config,
    normalize_endpoint,
    parse_mode,
    save_config,
)

app = typer.Typer(help="Manage local settings (~/.config/qrng/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        api_key: str = typer.Option(
            "",
            "--api-key",
            prompt="API key (leave empty for the legacy endpoint)",
            hide_input=True,
            help="API key for the authenticated endpoint.",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.api_key = api_key.strip()
    if cfg.api_key:
        cfg.mode = AuthMode.API_KEY
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    key_state = "(set)" if cfg.api_key.strip() else "(empty)"
    console.console.print(
        f"mode={cfg.mode.value} endpoint={effective_endpoint(cfg)} api_key={key_state} timeout_s={cfg.timeout_s}"
    )


@app.command("get")
def get_setting(
        key: str = typer.Argument(..., help="Setting key (mode, endpoint, api_key, timeout_s)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "mode":
        console.console.print(cfg.mode.value)
        return
    if k == "endpoint":
        console.console.print(effective_endpoint(cfg))
        return
    if k == "api_key":
        console.console.print("(set)" if cfg.api_key.strip() else "(empty)")
        return
    if k == "timeout_s":
        console.console.print(str(cfg.timeout_s))
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_setting(
        mode: str | None = typer.Option(None, "--mode", help="legacy or api_key."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Endpoint URL (empty resets to default)."),
        api_key: str | None = typer.Option(None, "--api-key", help="API key."),
        timeout_s: float | None = typer.Option(None, "--timeout", min=0.1, help="Request timeout in seconds."),
):
    cfg = load_config()
    if mode is not None:
        try:
            cfg.mode = parse_mode(mode)
        except ValueError as e:
            console.err(str(e))
            raise typer.Exit(code=2)
    if endpoint is not None:
        cfg.endpoint = normalize_endpoint(endpoint)
    if api_key is not None:
        cfg.api_key = api_key.strip()
    if timeout_s is not None:
        cfg.timeout_s = timeout_s
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
