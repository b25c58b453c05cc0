"""
Shared base model for API payloads.

The public API speaks camelCase JSON (``orderId``, ``createdAt``) while
the Python side keeps snake_case attributes.  Models derived from
``CamelModel`` accept both spellings on input and serialise with the
camelCase aliases, which FastAPI uses for ``response_model`` output.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Body of every non‑2xx response."""

    error: str
