from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class Message(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ExchangeRequest(BaseModel):
    questions: str | None = ""

    # Any JSON value is forwarded as text; null becomes an empty prompt.
    @field_validator("questions", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class ExchangeResponse(BaseModel):
    response: str
