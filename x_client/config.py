from typing import Any, Callable, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ._version import __version__
from ._config import load_client_config
from ._logging import get_logger
from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.twitter.com/2/"
DEFAULT_MAX_REDIRECTS = 5
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_USER_AGENT = f"x-client/{__version__}"

_OAUTH_FIELDS = ("api_key", "api_key_secret", "access_token", "access_token_secret")

logger = get_logger("config")


class BearerToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1)


class OAuthKeys(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    api_key_secret: str = Field(min_length=1)
    access_token: str = Field(min_length=1)
    access_token_secret: str = Field(min_length=1)


Credentials = Union[BearerToken, OAuthKeys]


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    base_url: str = DEFAULT_BASE_URL
    credentials: Credentials
    max_redirects: int = Field(default=DEFAULT_MAX_REDIRECTS, ge=0)
    default_object_shape: Callable[..., Any] = dict
    default_array_shape: Callable[..., Any] = list
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    proxy_url: str | None = None

    @field_validator("base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        normalized = value.strip()
        parts = urlsplit(normalized)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"base_url must be an absolute http(s) URL, got {value!r}")
        return normalized.rstrip("/") + "/"


def _present(value: Any) -> bool:
    return value is not None and value != ""


def build_credentials(values: dict[str, Any]) -> Credentials:
    """Pick the single active credential variant from resolved config values."""
    has_bearer = _present(values.get("bearer_token"))
    oauth_given = [name for name in _OAUTH_FIELDS if _present(values.get(name))]

    if has_bearer:
        if oauth_given:
            raise ConfigurationError(
                "bearer_token cannot be combined with OAuth credentials: " + ", ".join(oauth_given)
            )
        return BearerToken(token=values["bearer_token"])

    missing = [name for name in _OAUTH_FIELDS if name not in oauth_given]
    if missing:
        raise ConfigurationError("Missing OAuth credentials: " + ", ".join(missing))
    return OAuthKeys(**{name: values[name] for name in _OAUTH_FIELDS})


def build_client_config(
    *,
    config: dict[str, Any] | None = None,
    file_path: str | None = None,
    env_prefix: str | None = "X",
    **overrides: Any,
) -> ClientConfig:
    """Resolve layered settings into a frozen ClientConfig."""
    merged = load_client_config(
        config,
        file_path=file_path,
        env_prefix=env_prefix,
        defaults={
            "base_url": DEFAULT_BASE_URL,
            "max_redirects": DEFAULT_MAX_REDIRECTS,
            "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
            "user_agent": DEFAULT_USER_AGENT,
        },
        overrides=overrides,
    )

    try:
        credentials = build_credentials(merged)
        client_config = ClientConfig.model_validate({**merged, "credentials": credentials})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid client configuration: {exc}") from exc

    logger.info(
        "Client configured for %s using %s auth",
        client_config.base_url,
        "bearer" if isinstance(credentials, BearerToken) else "oauth",
    )
    return client_config
