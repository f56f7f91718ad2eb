"""Raw transport envelope carried on composite objects returned by CRUD calls."""

from typing import Optional

from pydantic import BaseModel, Field


class ServerResponse(BaseModel):
    http_status_code: int = 0
    header: dict[str, list[str]] = Field(default_factory=dict)
    body: Optional[bytes] = None
