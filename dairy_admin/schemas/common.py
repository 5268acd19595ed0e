from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, Field


def id_field():
    # Upstream documents use Mongo-style "_id"; both spellings are accepted
    return Field(default=None, validation_alias=AliasChoices("_id", "id"))


def coerce_reference(value: Any) -> Any:
    """Turn a bare id into the populated-document shape."""
    if isinstance(value, str):
        return {"_id": value}
    return value


class Reference(BaseModel):
    id: Optional[str] = id_field()
    name: Optional[str] = None


class MessageResponse(BaseModel):
    success: bool
    message: str
