from urllib.parse import urljoin

from .auth import Authenticator
from .data_contract import TransportRequest
from .errors import UnsupportedMethodError

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})


def normalize_method(method: str) -> str:
    normalized = str(method).strip().upper()
    if normalized not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method)
    return normalized


def resolve_url(base_url: str, path: str) -> str:
    """Resolve a path or redirect target against a base or current URL."""
    return urljoin(base_url, path)


def _merge_headers(base: dict[str, str], extra: dict[str, str] | None) -> dict[str, str]:
    merged = dict(base)
    if not extra:
        return merged
    for key, value in extra.items():
        # Replace case-insensitively so a caller "user-agent" wins over the default.
        for existing in [name for name in merged if name.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


class RequestBuilder:
    def __init__(self, user_agent: str):
        self.user_agent = user_agent

    def build(
        self,
        authenticator: Authenticator,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> TransportRequest:
        """Build a signed transport request. Authorization is applied last and always wins."""
        http_method = normalize_method(method)
        attached_body = body if body is not None and http_method != "GET" else None

        default_headers = {"User-Agent": self.user_agent}
        if attached_body is not None:
            default_headers["Content-Type"] = "application/json"

        request_headers = _merge_headers(default_headers, headers)
        request_headers = {key: value for key, value in request_headers.items() if key.lower() != "authorization"}
        unsigned = TransportRequest(method=http_method, url=url, headers=request_headers, body=attached_body)

        request_headers["Authorization"] = authenticator.sign(unsigned)
        return unsigned.model_copy(update={"headers": request_headers})
