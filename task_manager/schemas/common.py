"""
Shared response helpers.
"""
from datetime import datetime
from typing import Any
from pydantic import BaseModel, Field


def is_blank(value: Any) -> bool:
    """Missing, null or the empty string."""
    return value is None or value == ""


def success(msg: str, **payload) -> dict:
    """Build the ``{"status": true, "msg": ...}`` envelope around a payload."""
    return {"status": True, "msg": msg, **payload}


class DocumentOut(BaseModel):
    """Base for serialized records: ``_id`` plus camelCase timestamps"""
    id: str = Field(..., serialization_alias="_id", description="Record ID")
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")

    class Config:
        from_attributes = True

    @classmethod
    def dump(cls, obj) -> dict:
        return cls.model_validate(obj).model_dump(by_alias=True, mode="json")


class MessageResponse(BaseModel):
    status: bool = Field(..., description="Whether the request succeeded")
    msg: str = Field(..., description="Human readable outcome")
