"""Turns terminal responses into decoded values or typed errors."""

import json
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel

from .data_contract import RawResponse
from .errors import DecodeError, error_for_response

ObjectShape = Callable[..., Any]
ArrayShape = Callable[..., Any]


def _apply_object_shape(shape: ObjectShape, values: dict[str, Any]) -> Any:
    if isinstance(shape, type):
        if issubclass(shape, Mapping):
            return shape(values)
        if issubclass(shape, BaseModel):
            return shape.model_validate(values)
    return shape(**values)


def recast(tree: Any, object_shape: ObjectShape = dict, array_shape: ArrayShape = list) -> Any:
    """Deep-convert a parsed JSON tree, children first, into the requested containers."""
    if isinstance(tree, dict):
        values = {key: recast(value, object_shape, array_shape) for key, value in tree.items()}
        return _apply_object_shape(object_shape, values)
    if isinstance(tree, list):
        return array_shape([recast(item, object_shape, array_shape) for item in tree])
    return tree


def parse_body(response: RawResponse) -> Any:
    if not response.body.strip():
        return None
    try:
        return json.loads(response.body)
    except ValueError as exc:
        raise DecodeError(f"Failed to decode JSON response body from {response.url}: {exc}", response) from exc


def decode(response: RawResponse, object_shape: ObjectShape = dict, array_shape: ArrayShape = list) -> Any:
    """Decode a terminal response.

    Set-like array shapes need hashable elements; an array of objects only fits them when the
    object shape is hashable too, otherwise DecodeError names the shapes involved.
    """
    if not response.is_success:
        raise error_for_response(response)

    tree = parse_body(response)
    try:
        return recast(tree, object_shape, array_shape)
    except TypeError as exc:
        raise DecodeError(
            f"Cannot recast response from {response.url} with object shape "
            f"{getattr(object_shape, '__name__', object_shape)!s} and array shape "
            f"{getattr(array_shape, '__name__', array_shape)!s}: {exc}",
            response,
        ) from exc
