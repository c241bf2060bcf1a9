"""Layered settings resolution for the client.

Plain settings merge key by key, last layer wins. Credential keys are resolved
as one group: they all come from the highest layer that supplies any of them,
so an explicit ``bearer_token`` is never mixed with ``X_API_KEY`` from the
environment.
"""

import json
import os
from pathlib import Path
from typing import Any

from ._logging import get_logger, redact_config

LOGGER = get_logger("config")

CREDENTIAL_KEYS = ("bearer_token", "api_key", "api_key_secret", "access_token", "access_token_secret")


def _env_layer(prefix: str | None) -> dict[str, Any]:
    """Collect <PREFIX>_* environment variables as lower-case setting names."""
    if not prefix:
        return {}
    prefix_token = f"{prefix.upper()}_"
    return {
        key.removeprefix(prefix_token).lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix_token)
    }


def _file_layer(file_path: str | None) -> dict[str, Any]:
    if not file_path:
        return {}

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object at the root")
    return data


def _supplies_credentials(layer: dict[str, Any]) -> bool:
    return any(layer.get(key) not in (None, "") for key in CREDENTIAL_KEYS)


def load_client_config(
    config: dict[str, Any] | None = None,
    *,
    file_path: str | None = None,
    env_prefix: str | None = None,
    defaults: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resolve client settings from defaults, file, env, config, and non-None overrides."""
    layers = [
        ("defaults", defaults or {}),
        ("file", _file_layer(file_path)),
        ("env", _env_layer(env_prefix)),
        ("config", config or {}),
        ("overrides", {key: value for key, value in (overrides or {}).items() if value is not None}),
    ]

    merged: dict[str, Any] = {}
    for _, layer in layers:
        merged.update({key: value for key, value in layer.items() if key not in CREDENTIAL_KEYS})

    credential_source = next((name for name, layer in reversed(layers) if _supplies_credentials(layer)), None)
    if credential_source is not None:
        source_layer = dict(layers)[credential_source]
        merged.update({key: source_layer[key] for key in CREDENTIAL_KEYS if key in source_layer})

    LOGGER.debug("Client config resolved (credentials from %s): %s", credential_source, redact_config(merged))
    return merged
