from __future__ import annotations

import logging
import os

ENV_LOG_LEVEL = "QRNG_LOG_LEVEL"


def resolve_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    name = os.getenv(ENV_LOG_LEVEL, "").strip().upper()
    level = logging.getLevelName(name) if name else None
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(verbose: bool) -> None:
    level = resolve_level(verbose)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # request and sampler records come from the library loggers
    logging.getLogger("qrng_client").setLevel(level)

    # httpx logs every request at INFO; keep it quiet unless debugging
    transport_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(transport_level)
    logging.getLogger("httpcore").setLevel(transport_level)
