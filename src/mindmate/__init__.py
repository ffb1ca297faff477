"""
mindmate — conversational session engine for the MindMate X companion.

Keyword emotion detection, one remote generation call per turn and a
canned reply whenever that call fails.
"""

from mindmate.client import MindMate, AsyncMindMate
from mindmate.config import Settings, load_settings
from mindmate.emotion import classify
from mindmate.fallback import fallback_reply
from mindmate.gateway import ResponseGateway
from mindmate.session import SessionController
from mindmate.store import MessageStore
from mindmate.errors import MindMateError, TransportError, ConfigError, SessionError
from mindmate.models import EmotionLabel, Message, Sender, SessionPhase, SessionState

__version__ = "0.1.0"
__all__ = [
    "MindMate",
    "AsyncMindMate",
    "Settings",
    "load_settings",
    "classify",
    "fallback_reply",
    "ResponseGateway",
    "SessionController",
    "MessageStore",
    "MindMateError",
    "TransportError",
    "ConfigError",
    "SessionError",
    "EmotionLabel",
    "Message",
    "Sender",
    "SessionPhase",
    "SessionState",
]
