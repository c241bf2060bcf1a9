"""Exception hierarchy raised by the X API client."""

import json
from datetime import datetime, timezone

from .data_contract import RawResponse


class XClientError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(XClientError, ValueError):
    pass


class UnsupportedMethodError(XClientError, ValueError):
    def __init__(self, method: str):
        super().__init__(f"Unsupported HTTP method: {method}")
        self.method = method


class RedirectError(XClientError):
    pass


class MalformedRedirectError(RedirectError):
    def __init__(self, response: RawResponse):
        super().__init__(f"Redirect response {response.status_code} from {response.url} has no Location header")
        self.response = response


class TooManyRedirectsError(RedirectError):
    def __init__(self, max_redirects: int):
        super().__init__(f"Too many redirects (max_redirects={max_redirects})")
        self.max_redirects = max_redirects


class DecodeError(XClientError, ValueError):
    def __init__(self, message: str, response: RawResponse):
        super().__init__(message)
        self.response = response


def _api_error_detail(response: RawResponse) -> str | None:
    """Pull a human readable error out of a JSON error body, if there is one."""
    try:
        payload = json.loads(response.body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None

    if isinstance(payload.get("error"), str):
        return payload["error"]
    errors = payload.get("errors")
    if isinstance(errors, list):
        messages = [item["message"] for item in errors if isinstance(item, dict) and item.get("message")]
        if messages:
            return ", ".join(messages)
    for key in ("detail", "title"):
        if isinstance(payload.get(key), str):
            return payload[key]
    return None


class HTTPError(XClientError):
    """A terminal response that was not a success."""

    default_message = "Unexpected response"

    def __init__(self, response: RawResponse, message: str | None = None):
        detail = _api_error_detail(response)
        text = message or f"{self.default_message}: {response.status_code} {response.reason}".rstrip()
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)
        self.response = response
        self.status_code = response.status_code
        self.reason = response.reason
        self.detail = detail


class AuthenticationError(HTTPError):
    default_message = "Authentication failed. Please check your credentials"


class ServerError(HTTPError):
    default_message = "An internal server error occurred"


class InternalServerError(ServerError):
    pass


class BadGatewayError(ServerError):
    pass


class ServiceUnavailableError(ServerError):
    pass


class GatewayTimeoutError(ServerError):
    pass


class UnexpectedResponseError(HTTPError):
    pass


class BadRequestError(UnexpectedResponseError):
    pass


class ForbiddenError(UnexpectedResponseError):
    pass


class NotFoundError(UnexpectedResponseError):
    pass


class NotAcceptableError(UnexpectedResponseError):
    pass


class PayloadTooLargeError(UnexpectedResponseError):
    pass


class TooManyRequestsError(UnexpectedResponseError):
    """429 response. Only reports the rate limit headers, never waits on them."""

    def _int_header(self, name: str) -> int | None:
        value = self.response.header(name)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def limit(self) -> int | None:
        return self._int_header("x-rate-limit-limit")

    @property
    def remaining(self) -> int | None:
        return self._int_header("x-rate-limit-remaining")

    @property
    def reset_at(self) -> datetime | None:
        reset = self._int_header("x-rate-limit-reset")
        if reset is None:
            return None
        return datetime.fromtimestamp(reset, tz=timezone.utc)


STATUS_ERRORS: dict[int, type[HTTPError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    406: NotAcceptableError,
    413: PayloadTooLargeError,
    429: TooManyRequestsError,
    500: InternalServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
    504: GatewayTimeoutError,
}


def error_for_response(response: RawResponse) -> HTTPError:
    """Map a non-success terminal response to its error instance."""
    error_class = STATUS_ERRORS.get(response.status_code)
    if error_class is None:
        error_class = ServerError if 500 <= response.status_code < 600 else UnexpectedResponseError
    return error_class(response)
