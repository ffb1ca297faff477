"""
Static configuration: endpoint, persona and pacing.

Values come from defaults, then ~/.mindmate/config.json, then MINDMATE_*
environment variables, then explicit keyword overrides.
"""

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from mindmate.errors import ConfigError

CONFIG_FILE = Path.home() / ".mindmate" / "config.json"
ENV_PREFIX = "MINDMATE_"

DEFAULT_ENDPOINT = "https://ai.potential.com/chatbot/"
DEFAULT_SYSTEM_PROMPT = (
    "You are an empathetic mental health assistant that provides supportive, thoughtful responses."
)
DEFAULT_ASSISTANT_NAME = "Ameen"
DEFAULT_PROMPT_TEMPLATE = (
    'Generate a thoughtful response as a mental health assistant to this message: "{message}". '
    "The user appears to be feeling {emotion}."
)
DEFAULT_GREETING = "Welcome to MindMate X! I'm your AI mental health assistant. How can I help you today?"
DEFAULT_REPLY_DELAY_S = 1.0
DEFAULT_TIMEOUT_S = 30.0


class Settings(BaseModel):
    endpoint: str = DEFAULT_ENDPOINT
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    assistant_name: str = DEFAULT_ASSISTANT_NAME
    prompt_template: str = DEFAULT_PROMPT_TEMPLATE
    greeting: str = DEFAULT_GREETING
    reply_delay: float = Field(default=DEFAULT_REPLY_DELAY_S, ge=0)
    timeout: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("prompt_template")
    @classmethod
    def check_template(cls, value: str) -> str:
        try:
            value.format(message="", emotion="neutral")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ValueError(f"prompt_template may only use {{message}} and {{emotion}}: {e!r}")
        return value


def _load_file(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_env(environ: Mapping[str, str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    return values


def load_settings(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> Settings:
    values = _load_file(path or CONFIG_FILE)
    values.update(_load_env(os.environ if environ is None else environ))
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings.model_validate(values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", details={"errors": e.errors()})


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    target = path or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(settings.model_dump(), indent=2))
    return target
