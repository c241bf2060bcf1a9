"""Synchronous client for the X API v2."""

from typing import Any

from .auth import build_authenticator
from .config import ClientConfig, build_client_config
from .data_contract import LogicalRequest
from .redirect_handler import RedirectHandler
from .request_builder import RequestBuilder, resolve_url
from .response_decoder import ArrayShape, ObjectShape, decode
from .transport import RequestsTransport, Transport


class Client:
    def __init__(
        self,
        bearer_token: str | None = None,
        api_key: str | None = None,
        api_key_secret: str | None = None,
        access_token: str | None = None,
        access_token_secret: str | None = None,
        base_url: str | None = None,
        max_redirects: int | None = None,
        default_object_shape: ObjectShape | None = None,
        default_array_shape: ArrayShape | None = None,
        *,
        timeout_seconds: float | None = None,
        user_agent: str | None = None,
        proxy_url: str | None = None,
        transport: Transport | None = None,
        config: dict | None = None,
        file_path: str | None = None,
        env_prefix: str | None = "X",
    ):
        self.config: ClientConfig = build_client_config(
            config=config,
            file_path=file_path,
            env_prefix=env_prefix,
            bearer_token=bearer_token,
            api_key=api_key,
            api_key_secret=api_key_secret,
            access_token=access_token,
            access_token_secret=access_token_secret,
            base_url=base_url,
            max_redirects=max_redirects,
            default_object_shape=default_object_shape,
            default_array_shape=default_array_shape,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            proxy_url=proxy_url,
        )
        self.authenticator = build_authenticator(self.config.credentials)
        self.request_builder = RequestBuilder(self.config.user_agent)
        self._owns_transport = transport is None
        self.transport: Transport = transport or RequestsTransport(
            self.config.timeout_seconds,
            self.config.proxy_url,
        )
        self.redirect_handler = RedirectHandler(
            self.transport,
            self.request_builder,
            self.authenticator,
            self.config.max_redirects,
        )

    def get(self, path: str, *, headers: dict[str, str] | None = None, object_class=None, array_class=None) -> Any:
        return self.request("GET", path, headers=headers, object_class=object_class, array_class=array_class)

    def post(
        self,
        path: str,
        body: str | bytes | None = None,
        *,
        headers: dict[str, str] | None = None,
        object_class=None,
        array_class=None,
    ) -> Any:
        return self.request("POST", path, body, headers=headers, object_class=object_class, array_class=array_class)

    def put(
        self,
        path: str,
        body: str | bytes | None = None,
        *,
        headers: dict[str, str] | None = None,
        object_class=None,
        array_class=None,
    ) -> Any:
        return self.request("PUT", path, body, headers=headers, object_class=object_class, array_class=array_class)

    def delete(self, path: str, *, headers: dict[str, str] | None = None, object_class=None, array_class=None) -> Any:
        return self.request("DELETE", path, headers=headers, object_class=object_class, array_class=array_class)

    def request(
        self,
        method: str,
        path: str,
        body: str | bytes | None = None,
        *,
        headers: dict[str, str] | None = None,
        object_class: ObjectShape | None = None,
        array_class: ArrayShape | None = None,
    ) -> Any:
        """Send one logical request, follow redirects, and decode the terminal response."""
        logical = LogicalRequest(method=method, path=path, headers=headers or {}, body=body)
        request = self.request_builder.build(
            self.authenticator,
            logical.method,
            resolve_url(self.config.base_url, logical.path),
            logical.headers,
            logical.body,
        )
        response = self.redirect_handler.follow(request, logical.headers)
        return decode(
            response,
            object_class or self.config.default_object_shape,
            array_class or self.config.default_array_shape,
        )

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
