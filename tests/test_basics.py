"""Basic unit tests for the mindmate package."""

from mindmate import (
    AsyncMindMate,
    MindMate,
    MindMateError,
    TransportError,
    ConfigError,
    SessionError,
    EmotionLabel,
    Sender,
    SessionPhase,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert MindMate is not None
    assert AsyncMindMate is not None


def test_error_hierarchy():
    assert issubclass(TransportError, MindMateError)
    assert issubclass(ConfigError, MindMateError)
    assert issubclass(SessionError, MindMateError)


def test_error_attributes():
    err = MindMateError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    transport = TransportError("HTTP 502: bad gateway", status_code=502)
    assert transport.code == "transport_error"
    assert transport.status_code == 502

    session_err = SessionError("closed", details={"id": "123"})
    assert session_err.code == "session_error"
    assert session_err.details == {"id": "123"}


def test_enum_constants():
    assert [label.value for label in EmotionLabel] == ["happy", "sad", "angry", "anxious", "calm", "neutral"]
    assert EmotionLabel.ANXIOUS == "anxious"
    assert str(EmotionLabel.CALM) == "calm"
    assert Sender.ASSISTANT == "assistant"
    assert SessionPhase.AWAITING_REPLY == "awaiting_reply"
