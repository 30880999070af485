"""Shared schema building blocks."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every request/response body.

    Responses are rendered with camelCase keys; requests accept either
    camelCase or snake_case.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
    )


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are taken as UTC already."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def not_blank(value: Optional[str]) -> Optional[str]:
    """Reject empty or whitespace-only strings and strip the rest."""
    if value is None:
        return value
    if not value.strip():
        raise ValueError("must not be empty or whitespace-only")
    return value.strip()


class MessageResponse(CamelModel):
    message: str


class StrictCamelModel(CamelModel):
    """CamelModel that rejects unknown keys."""
    model_config = ConfigDict(extra="forbid")
