"""Shared base model for records returned by the backend."""

from typing import Any

from pydantic import BaseModel, field_validator, model_validator


class BackendRecord(BaseModel):
    """A record carrying a backend identifier.

    Some backend routes return ``_id`` instead of ``id`` and numeric
    identifiers; both are normalised to a string ``id``.
    """

    id: str

    model_config = {
        "from_attributes": True,
        "extra": "ignore",
    }

    @model_validator(mode="before")
    @classmethod
    def _map_mongo_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and "id" not in data and "_id" in data:
            data = dict(data)
            data["id"] = data["_id"]
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> Any:
        if isinstance(v, int):
            return str(v)
        return v
