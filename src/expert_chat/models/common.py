"""Shared base for API payload models."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for backend payloads.

    The backend speaks camelCase JSON. Models accept both the JSON names and
    the Python field names, and keep any field they do not declare.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready request body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_payload(payload: ApiModel | dict[str, Any] | None) -> dict[str, Any] | None:
    """Turn a model or plain dict into a request body."""
    if payload is None:
        return None
    if isinstance(payload, ApiModel):
        return payload.to_payload()
    return dict(payload)
