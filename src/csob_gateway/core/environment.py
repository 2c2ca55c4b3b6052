"""
Resolution of ``CSOB_*`` settings from the process environment, a ``.env``
file and explicit overrides.

Only keys carrying the ``CSOB_`` prefix are picked up. Values are stripped and
unquoted, and settings that end up blank are dropped so that
:meth:`csob_gateway.core.config.GatewayConfig.from_mapping` applies its
defaults to them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

__all__ = ["ENV_PREFIX", "gateway_settings"]

ENV_PREFIX = "CSOB_"


def _clean(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        value = value[1:-1]
    return value


def _select(values: Mapping[str, str]) -> Dict[str, str]:
    return {
        key.strip(): _clean(value)
        for key, value in values.items()
        if key.strip().startswith(ENV_PREFIX) and value is not None
    }


def _read_env_file(path: Path) -> Dict[str, str]:
    """
    Parse ``KEY=VALUE`` lines, tolerating ``export`` prefixes and comments.

    A missing file yields no settings; the process environment and overrides
    may still provide everything.
    """
    if not path.is_file():
        logging.debug("No env file at %s, using the environment only", path)
        return {}

    pairs: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        pairs[key] = value
    return _select(pairs)


def gateway_settings(
    *,
    env_file: Optional[str] = ".env",
    base: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, str]] = None,
) -> Dict[str, str]:
    """
    Layer the ``CSOB_*`` settings: ``overrides`` beat ``base`` (defaulting to
    :data:`os.environ`), which beats ``env_file``.

    A blank override clears a value set by a lower layer.
    """
    settings = _read_env_file(Path(env_file)) if env_file is not None else {}
    settings.update(_select(os.environ if base is None else base))
    settings.update(_select(overrides or {}))
    return {key: value for key, value in settings.items() if value}
