"""
JSON codec used by the models in app.models.

Models never talk to pydantic's JSON layer directly. They go through
`load_from_json` / `convert_to_json` below, which accept an injected codec
and fall back to the process-wide default one.
"""

from typing import Optional, Protocol, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

import app.core.logging_config  # noqa: F401  (centralized logging)
from app.core.config import settings


M = TypeVar("M", bound=BaseModel)

JSONInput = Union[bytes, bytearray, str]


class CodecError(ValueError):
    """Base class for codec failures."""


class DecodeError(CodecError):
    """Input is not valid JSON or does not match the target shape."""


class EncodeError(CodecError):
    """The value could not be serialized."""


class JSONCodec(Protocol):
    def encode(self, obj: BaseModel) -> str: ...

    def decode(self, model_cls: Type[M], data: JSONInput) -> M: ...


class PydanticJSONCodec:
    """
    Default codec backed by pydantic's JSON serializer.
    Output uses field aliases (camelCase wire names).
    """

    def __init__(self, indent: Optional[int] = None):
        self.indent = indent

    def encode(self, obj: BaseModel) -> str:
        try:
            return obj.model_dump_json(by_alias=True, indent=self.indent)
        except PydanticSerializationError as e:
            raise EncodeError(f"Cannot encode {type(obj).__name__}: {e}") from e

    def decode(self, model_cls: Type[M], data: JSONInput) -> M:
        try:
            return model_cls.model_validate_json(data)
        except ValidationError as e:
            raise DecodeError(f"Cannot decode {model_cls.__name__}: {e}") from e


_default_codec: Optional[JSONCodec] = None


def get_default_codec() -> JSONCodec:
    global _default_codec
    if _default_codec is None:
        _default_codec = PydanticJSONCodec(indent=settings.JSON_INDENT)
    return _default_codec


def load_from_json(target: BaseModel, data: JSONInput, codec: Optional[JSONCodec] = None) -> None:
    """
    Update `target` in place from a JSON document.

    Only the keys present in the document overwrite fields on `target`.
    Decoding happens before any assignment, so on DecodeError the target
    is left untouched.
    """
    codec = codec or get_default_codec()
    decoded = codec.decode(type(target), data)

    for name in decoded.model_fields_set:
        setattr(target, name, getattr(decoded, name))


def convert_to_json(target: BaseModel, codec: Optional[JSONCodec] = None) -> str:
    codec = codec or get_default_codec()
    return codec.encode(target)
