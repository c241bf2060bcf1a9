"""Client for the X API v2 with bearer and OAuth 1.0a authentication."""

from ._version import __version__
from .client import Client
from .config import DEFAULT_BASE_URL, BearerToken, ClientConfig, OAuthKeys
from .errors import (
    AuthenticationError,
    BadGatewayError,
    BadRequestError,
    ConfigurationError,
    DecodeError,
    ForbiddenError,
    GatewayTimeoutError,
    HTTPError,
    InternalServerError,
    MalformedRedirectError,
    NotAcceptableError,
    NotFoundError,
    PayloadTooLargeError,
    RedirectError,
    ServerError,
    ServiceUnavailableError,
    TooManyRedirectsError,
    TooManyRequestsError,
    UnexpectedResponseError,
    UnsupportedMethodError,
    XClientError,
)
from .response_decoder import recast

__all__ = [
    "__version__",
    "Client",
    "ClientConfig",
    "BearerToken",
    "OAuthKeys",
    "DEFAULT_BASE_URL",
    "recast",
    "XClientError",
    "ConfigurationError",
    "UnsupportedMethodError",
    "RedirectError",
    "MalformedRedirectError",
    "TooManyRedirectsError",
    "DecodeError",
    "HTTPError",
    "AuthenticationError",
    "ServerError",
    "InternalServerError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "GatewayTimeoutError",
    "UnexpectedResponseError",
    "BadRequestError",
    "ForbiddenError",
    "NotFoundError",
    "NotAcceptableError",
    "PayloadTooLargeError",
    "TooManyRequestsError",
]
