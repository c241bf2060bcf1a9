from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field


def lookup_header(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup over a plain dict."""
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


class _HasHeaders(BaseModel):
    model_config = ConfigDict(frozen=True)

    headers: dict[str, str] = Field(default_factory=dict)

    def header(self, name: str) -> str | None:
        return lookup_header(self.headers, name)


class LogicalRequest(BaseModel):
    """What the caller asked for, before URL resolution and authorization."""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | bytes | None = None


class TransportRequest(_HasHeaders):
    method: str
    url: str
    body: str | bytes | None = None


class RawResponse(_HasHeaders):
    status_code: int
    reason: str = ""
    body: bytes = b""
    url: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
