"""JSON encoding and decoding of API payloads.

Every outgoing payload goes through the same dump options: fields still at
their default value are left out, and pydantic's JSON mode renders ``date``
and ``datetime`` values as ISO-8601 strings. Models declare the type's
natural default (``0``, ``""``, ``False``, ``None``, empty list) so that an
omitted field decodes back to the same value.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from assembla_connector.api.exceptions import DecodeError

T = TypeVar("T")

SERIALIZER_OPTIONS = MappingProxyType(
    {
        "by_alias": True,
        "exclude_defaults": True,
    }
)


@lru_cache(maxsize=None)
def _adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def encode(value: Any) -> str:
    """Serialize ``value`` to JSON text."""
    if isinstance(value, BaseModel):
        return value.model_dump_json(**SERIALIZER_OPTIONS)
    return _adapter(type(value)).dump_json(value, **SERIALIZER_OPTIONS).decode("utf-8")


def decode(content: bytes | str, result_type: type[T]) -> T:
    """Parse JSON ``content`` into an instance of ``result_type``.

    Raises:
        DecodeError: If the content is not valid JSON or does not match
            the shape of ``result_type``.
    """
    try:
        return _adapter(result_type).validate_json(content)
    except ValidationError as e:
        name = getattr(result_type, "__name__", repr(result_type))
        raise DecodeError(f"Could not decode response as {name}: {e}", result_type) from e
