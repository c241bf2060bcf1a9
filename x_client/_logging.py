import logging
import os
from threading import Lock
from typing import Any, Mapping

_SETUP_LOCK = Lock()
_SETUP_DONE = False
_SENSITIVE_KEYS = {
    "bearer_token",
    "api_key",
    "api_key_secret",
    "access_token",
    "access_token_secret",
    "token",
    "secret",
    "authorization",
    "proxy_authorization",
}


def _resolve_log_level() -> int:
    level_name = os.getenv("X_CLIENT_LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _setup_default_logging() -> None:
    global _SETUP_DONE
    if _SETUP_DONE:
        return

    with _SETUP_LOCK:
        if _SETUP_DONE:
            return

        root_logger = logging.getLogger()
        if not root_logger.handlers:
            logging.basicConfig(
                level=_resolve_log_level(),
                format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            )

        _SETUP_DONE = True


def get_logger(name: str) -> logging.Logger:
    _setup_default_logging()
    return logging.getLogger(f"x_client.{name}")


def _is_sensitive(key: str) -> bool:
    return key.lower().replace("-", "_") in _SENSITIVE_KEYS


def redact_config(values: Mapping[str, Any]) -> dict[str, Any]:
    redacted: dict[str, Any] = {}
    for key, value in values.items():
        if _is_sensitive(key) and value is not None:
            redacted[key] = "***"
        else:
            redacted[key] = value
    return redacted


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    return {key: "***" if _is_sensitive(key) else value for key, value in headers.items()}
