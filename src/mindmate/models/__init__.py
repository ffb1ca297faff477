from mindmate.models.emotion import EmotionLabel
from mindmate.models.message import Message, Sender
from mindmate.models.session import SessionPhase, SessionState
from mindmate.models.envelope import GenerationRequest, GenerationResponse

__all__ = [
    "EmotionLabel",
    "Message",
    "Sender",
    "SessionPhase",
    "SessionState",
    "GenerationRequest",
    "GenerationResponse",
]
