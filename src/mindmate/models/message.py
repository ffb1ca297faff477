"""
Chat message model. Messages are frozen once created.
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


class Sender(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    text: str
    sender: Sender
    timestamp: datetime = Field(default_factory=_utcnow)

    model_config = {"frozen": True}

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(text=text, sender=Sender.USER)

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(text=text, sender=Sender.ASSISTANT)
