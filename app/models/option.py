import re
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from sqlmodel import Field, SQLModel

from app.core.codec import JSONCodec, JSONInput, convert_to_json, load_from_json

# Full date, time and offset; date-only or zone-less strings are rejected
RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


class Option(SQLModel):
    """
    A single configuration key/value pair.
    `value` is always text; callers interpret numbers or flags themselves.
    """

    model_config = ConfigDict(populate_by_name=True, strict=True)

    # None = not persisted / absent
    id: Optional[int] = Field(default=None)
    uuid: str = Field(default="")
    key: str = Field(default="")
    value: str = Field(default="")

    # Set by whatever store owns the record
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @field_validator("id")
    @classmethod
    def zero_id_is_absent(cls, value: Optional[int]) -> Optional[int]:
        # Legacy payloads use 0 for "no id"
        if value == 0:
            return None
        return value

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def timestamp_is_rfc3339(cls, value: Any) -> Any:
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, str) and RFC3339_PATTERN.match(value):
            return value
        raise ValueError(f"expected an RFC 3339 timestamp, got {value!r}")

    def load_from_json(self, data: JSONInput, codec: Optional[JSONCodec] = None) -> None:
        load_from_json(self, data, codec)

    def convert_to_json(self, codec: Optional[JSONCodec] = None) -> str:
        return convert_to_json(self, codec)

    def is_nil(self) -> bool:
        return self.id is None


class Options(BaseModel):
    """
    Envelope for bulk transfer: {"options": [...]}.
    `None` and `[]` are kept apart and serialize as null and [] respectively.
    """

    model_config = ConfigDict(strict=True)

    options: Optional[List[Option]] = None

    def load_from_json(self, data: JSONInput, codec: Optional[JSONCodec] = None) -> None:
        load_from_json(self, data, codec)

    def convert_to_json(self, codec: Optional[JSONCodec] = None) -> str:
        return convert_to_json(self, codec)
