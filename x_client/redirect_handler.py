"""Redirect-following loop that re-authorizes every hop."""

from ._logging import get_logger, redact_headers
from .auth import Authenticator
from .data_contract import RawResponse, TransportRequest
from .errors import MalformedRedirectError, TooManyRedirectsError
from .request_builder import RequestBuilder, resolve_url
from .transport import Transport

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})
SEE_OTHER = 303

logger = get_logger("redirect_handler")


class RedirectHandler:
    def __init__(
        self,
        transport: Transport,
        request_builder: RequestBuilder,
        authenticator: Authenticator,
        max_redirects: int,
    ):
        self.transport = transport
        self.request_builder = request_builder
        self.authenticator = authenticator
        self.max_redirects = max_redirects

    def follow(self, request: TransportRequest, caller_headers: dict[str, str] | None = None) -> RawResponse:
        """Send the request and keep following redirects until a terminal response arrives."""
        hops = 0
        response = self._send(request)
        while response.status_code in REDIRECT_STATUSES:
            if hops >= self.max_redirects:
                raise TooManyRedirectsError(self.max_redirects)
            request = self._next_request(request, response, caller_headers)
            hops += 1
            response = self._send(request)
        return response

    def _next_request(
        self,
        request: TransportRequest,
        response: RawResponse,
        caller_headers: dict[str, str] | None,
    ) -> TransportRequest:
        location = response.header("Location")
        if not location:
            raise MalformedRedirectError(response)

        url = resolve_url(request.url, location)
        method, body = request.method, request.body
        headers = dict(caller_headers or {})
        if response.status_code == SEE_OTHER:
            method, body = "GET", None
            headers = {key: value for key, value in headers.items() if key.lower() != "content-type"}

        logger.debug("Following %s redirect %s %s -> %s", response.status_code, request.method, request.url, url)
        return self.request_builder.build(self.authenticator, method, url, headers, body)

    def _send(self, request: TransportRequest) -> RawResponse:
        logger.debug("%s %s headers=%s", request.method, request.url, redact_headers(request.headers))
        response = self.transport.send(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        return response
