"""
Session snapshot models.
"""

from enum import Enum

from pydantic import BaseModel

from mindmate.models.emotion import EmotionLabel
from mindmate.models.message import Message


class SessionPhase(str, Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class SessionState(BaseModel):
    """Read-only view of a session, as handed to a UI layer."""
    messages: tuple[Message, ...] = ()
    current_emotion: EmotionLabel = EmotionLabel.NEUTRAL
    awaiting_reply: bool = False

    model_config = {"frozen": True}

    @property
    def phase(self) -> SessionPhase:
        return SessionPhase.AWAITING_REPLY if self.awaiting_reply else SessionPhase.IDLE
