"""Authorization header producers for bearer and OAuth 1.0a credentials."""

from typing import Protocol

from oauthlib.oauth1 import SIGNATURE_HMAC, SIGNATURE_TYPE_AUTH_HEADER
from oauthlib.oauth1 import Client as OAuth1Client

from .config import BearerToken, Credentials, OAuthKeys
from .data_contract import TransportRequest

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Authenticator(Protocol):
    def sign(self, request: TransportRequest) -> str:
        """Return the Authorization header value for this exact request."""
        ...


class BearerAuthenticator:
    def __init__(self, credentials: BearerToken):
        self._header_value = f"Bearer {credentials.token}"

    def sign(self, request: TransportRequest) -> str:
        return self._header_value


class OAuthAuthenticator:
    """Signs each request with HMAC-SHA1 over its method, absolute URL and a fresh nonce."""

    def __init__(self, credentials: OAuthKeys, *, nonce: str | None = None, timestamp: str | None = None):
        self._client = OAuth1Client(
            credentials.api_key,
            client_secret=credentials.api_key_secret,
            resource_owner_key=credentials.access_token,
            resource_owner_secret=credentials.access_token_secret,
            signature_method=SIGNATURE_HMAC,
            signature_type=SIGNATURE_TYPE_AUTH_HEADER,
            nonce=nonce,
            timestamp=timestamp,
        )

    def sign(self, request: TransportRequest) -> str:
        content_type = request.header("Content-Type") or ""
        # Only form bodies are signature parameters.
        if request.body is not None and content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE:
            _, headers, _ = self._client.sign(
                request.url,
                http_method=request.method,
                body=request.body,
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
        else:
            _, headers, _ = self._client.sign(request.url, http_method=request.method)
        return headers["Authorization"]


def build_authenticator(credentials: Credentials) -> Authenticator:
    if isinstance(credentials, BearerToken):
        return BearerAuthenticator(credentials)
    return OAuthAuthenticator(credentials)
