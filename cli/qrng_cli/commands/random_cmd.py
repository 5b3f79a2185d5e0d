from __future__ import annotations

from typing import Any, Callable

import typer
from qrng_client import ConfigError, QRNGClient, QRNGError, TransportError, ValidationError

from .. import console
from ..config import load_config
from ..http import make_client

API_KEY_OPTION = typer.Option(None, "--api-key", help="API key (implies the authenticated endpoint).")
LEGACY_OPTION = typer.Option(False, "--legacy", help="Force the unauthenticated legacy endpoint.")
ENDPOINT_OPTION = typer.Option(None, "--endpoint", help="Override endpoint URL.")
TIMEOUT_OPTION = typer.Option(None, "--timeout", min=0.1, help="Request timeout in seconds.")
JSON_OPTION = typer.Option(False, "--json", help="Print raw JSON.")


def _call(
        fetch: Callable[[QRNGClient], Any],
        *,
        api_key: str | None,
        legacy: bool,
        endpoint: str | None,
        timeout: float | None,
) -> Any:
    cfg = load_config()
    client = make_client(
        cfg,
        api_key_override=api_key,
        legacy=legacy,
        endpoint_override=endpoint,
        timeout_s=timeout,
    )
    try:
        return fetch(client)
    except ConfigError as e:
        console.err(f"{e}. Pass --api-key, set QRNG_API_KEY or run `qrng settings set --api-key ...`.")
        raise typer.Exit(code=2)
    except ValidationError as e:
        console.err(f"Invalid argument: {e}")
        raise typer.Exit(code=2)
    except TransportError as e:
        console.err(f"Request failed: {e}")
        raise typer.Exit(code=2)
    except QRNGError as e:
        console.err(f"Bad response: {e}")
        raise typer.Exit(code=2)
    finally:
        client.close()


def _emit(values: list, *, json_out: bool, sep: str = " ") -> None:
    if json_out:
        console.print_json(values)
        return
    console.console.print(sep.join(str(v) for v in values), soft_wrap=True)


def bits(
        count: int = typer.Argument(..., help="Number of bits (1-8192)."),
        api_key: str | None = API_KEY_OPTION,
        legacy: bool = LEGACY_OPTION,
        endpoint: str | None = ENDPOINT_OPTION,
        timeout: float | None = TIMEOUT_OPTION,
        json_out: bool = JSON_OPTION,
):
    """Print random bits, most significant first."""
    values = _call(lambda c: c.get_random_bits(count), api_key=api_key, legacy=legacy, endpoint=endpoint,
                   timeout=timeout)
    _emit(values, json_out=json_out, sep="")


def uint8(
        count: int = typer.Argument(..., help="Number of bytes (1-1024)."),
        api_key: str | None = API_KEY_OPTION,
        legacy: bool = LEGACY_OPTION,
        endpoint: str | None = ENDPOINT_OPTION,
        timeout: float | None = TIMEOUT_OPTION,
        json_out: bool = JSON_OPTION,
):
    """Print random bytes (0-255)."""
    values = _call(lambda c: c.get_random_uint8(count), api_key=api_key, legacy=legacy, endpoint=endpoint,
                   timeout=timeout)
    _emit(values, json_out=json_out)


def uint16(
        count: int = typer.Argument(..., help="Number of 16-bit words (1-1024)."),
        api_key: str | None = API_KEY_OPTION,
        legacy: bool = LEGACY_OPTION,
        endpoint: str | None = ENDPOINT_OPTION,
        timeout: float | None = TIMEOUT_OPTION,
        json_out: bool = JSON_OPTION,
):
    """Print random 16-bit words (0-65535)."""
    values = _call(lambda c: c.get_random_uint16(count), api_key=api_key, legacy=legacy, endpoint=endpoint,
                   timeout=timeout)
    _emit(values, json_out=json_out)


def hex_blocks(
        count: int = typer.Argument(..., help="Number of hex blocks (1-1024)."),
        size: int = typer.Option(1, "--size", help="Block size in bytes for hex8 (1-10)."),
        hex_type: str = typer.Option("hex16", "--type", help="hex8 or hex16."),
        api_key: str | None = API_KEY_OPTION,
        legacy: bool = LEGACY_OPTION,
        endpoint: str | None = ENDPOINT_OPTION,
        timeout: float | None = TIMEOUT_OPTION,
        json_out: bool = JSON_OPTION,
):
    """Print random lowercase hex blocks."""
    values = _call(lambda c: c.get_random_hex(count, size, hex_type.strip().lower()), api_key=api_key,
                   legacy=legacy, endpoint=endpoint, timeout=timeout)
    _emit(values, json_out=json_out, sep="\n")


def number(
        min_value: int = typer.Argument(..., metavar="MIN", help="Inclusive lower bound."),
        max_value: int = typer.Argument(..., metavar="MAX", help="Inclusive upper bound."),
        api_key: str | None = API_KEY_OPTION,
        legacy: bool = LEGACY_OPTION,
        endpoint: str | None = ENDPOINT_OPTION,
        timeout: float | None = TIMEOUT_OPTION,
        json_out: bool = JSON_OPTION,
):
    """Print a uniformly distributed integer in [MIN, MAX]."""
    value = _call(lambda c: c.get_random_number(min_value, max_value), api_key=api_key, legacy=legacy,
                  endpoint=endpoint, timeout=timeout)
    if json_out:
        console.print_json({"min": min_value, "max": max_value, "value": value})
        return
    console.console.print(str(value))
