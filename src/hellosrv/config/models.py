"""Code-baked defaults: the listen address and the fixed response.

Nothing here is read from disk or the environment.  The only value an
operator can change is the port, validated by :data:`Port`.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 10005
MIN_PORT = 1
MAX_PORT = 65535

Port = Annotated[int, Field(ge=MIN_PORT, le=MAX_PORT)]


class FixedResponse(BaseModel):
    """The one response the server ever sends."""

    model_config = {"frozen": True}

    status: int = 200
    body: bytes = b"Hello, World!"
    content_type: str = "text/plain; charset=utf-8"


HELLO_RESPONSE = FixedResponse()
