import json

import pytest

from mindmate.config import DEFAULT_ENDPOINT, Settings, load_settings, save_settings
from mindmate.errors import ConfigError


def test_defaults(tmp_path):
    settings = load_settings(tmp_path / "missing.json", environ={})
    assert settings == Settings()
    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.assistant_name == "Ameen"
    assert settings.reply_delay == 1.0


def test_file_then_env_then_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"endpoint": "https://file.test/", "assistant_name": "Sam", "timeout": 5}))

    settings = load_settings(path, environ={"MINDMATE_ASSISTANT_NAME": "Kai", "MINDMATE_REPLY_DELAY": "0.25"})
    assert settings.endpoint == "https://file.test/"
    assert settings.assistant_name == "Kai"
    assert settings.reply_delay == 0.25
    assert settings.timeout == 5

    settings = load_settings(path, environ={}, endpoint="https://override.test/", timeout=None)
    assert settings.endpoint == "https://override.test/"
    assert settings.timeout == 5


def test_malformed_file_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_settings(path, environ={}) == Settings()


def test_invalid_values_raise(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        load_settings(tmp_path / "missing.json", environ={"MINDMATE_TIMEOUT": "-1"})
    assert exc_info.value.code == "config_error"


def test_save_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.json"
    save_settings(Settings(endpoint="https://saved.test/"), path)
    assert load_settings(path, environ={}).endpoint == "https://saved.test/"


@pytest.mark.parametrize("template", ["{user}: {message}", "{0} {message}", "unbalanced {message", "{message.missing}"])
def test_prompt_template_placeholders_checked(tmp_path, template):
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "missing.json", environ={"MINDMATE_PROMPT_TEMPLATE": template})


def test_prompt_template_from_file_checked(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"prompt_template": "{user} says {message}"}))
    with pytest.raises(ConfigError):
        load_settings(path, environ={})


def test_prompt_template_may_omit_placeholders(tmp_path):
    settings = load_settings(tmp_path / "missing.json", environ={"MINDMATE_PROMPT_TEMPLATE": "{emotion} only"})
    assert settings.prompt_template == "{emotion} only"
