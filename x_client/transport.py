from typing import Protocol

import requests

from .data_contract import RawResponse, TransportRequest


class Transport(Protocol):
    def send(self, request: TransportRequest) -> RawResponse:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """Sends one request per call over requests and never follows redirects itself.

    The transport creates its session lazily and closes it in ``close``. A session passed
    in by the caller stays open. Connection and TLS failures surface as the original
    requests exceptions.
    """

    def __init__(
        self,
        timeout_seconds: float = 60.0,
        proxy_url: str | None = None,
        *,
        session: requests.Session | None = None,
    ):
        self.timeout_seconds = timeout_seconds
        self.proxies = {"http": proxy_url, "https": proxy_url} if proxy_url else None
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def send(self, request: TransportRequest) -> RawResponse:
        response = self.session.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            data=request.body,
            timeout=self.timeout_seconds,
            proxies=self.proxies,
            allow_redirects=False,
        )
        return RawResponse(
            status_code=response.status_code,
            reason=response.reason or "",
            headers=dict(response.headers),
            body=response.content or b"",
            url=request.url,
        )

    def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
