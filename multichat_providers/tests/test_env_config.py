"""Configuration layering and credential helpers."""
from __future__ import annotations

import json

import pytest

from multichat_providers.base.models import ProviderConfig
from multichat_providers.config import get_model, get_provider_config, load_provider_config, reset_config_cache
from multichat_providers.config.env import (
    get_env_var_candidates,
    get_env_var_name,
    is_key_configured,
    is_placeholder,
    placeholder_key,
    resolve_provider_key,
)


@pytest.mark.parametrize(
    "value",
    ["YOUR_OPENAI_API_KEY", "your_grok_api_key", "YOUR_API_KEY", "placeholder", "changeme-123", "test_abc"],
)
def test_placeholder_detection(value):
    assert is_placeholder(value)  # nosec B101
    assert not is_key_configured(value)  # nosec B101


@pytest.mark.parametrize("value", [None, "", "   "])
def test_empty_keys_are_not_configured(value):
    assert not is_key_configured(value)  # nosec B101


def test_real_looking_key_is_configured():
    assert is_key_configured("sk-proj-abc123")  # nosec B101
    assert placeholder_key("openrouter") == "YOUR_OPENROUTER_API_KEY"  # nosec B101


def test_env_var_names_and_aliases(monkeypatch):
    assert get_env_var_name("grok") == "XAI_API_KEY"  # nosec B101
    assert list(get_env_var_candidates("qwen")) == ["DASHSCOPE_API_KEY", "QWEN_API_KEY"]  # nosec B101
    assert get_env_var_name("ollama") is None  # nosec B101
    monkeypatch.setenv("GROK_API_KEY", "xai-secret")
    assert resolve_provider_key("grok") == ("xai-secret", "GROK_API_KEY")  # nosec B101


def test_defaults_only():
    cfg = get_provider_config("openai")
    assert cfg == {"model": "gpt-4o", "base_url": "https://api.openai.com/v1"}  # nosec B101
    assert get_model("ollama") == "llama3.2"  # nosec B101


def test_env_overrides_defaults(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4o-mini")
    monkeypatch.setenv("OLLAMA_BASE_URL", "http://gpu:11434")
    assert get_provider_config("openai")["api_key"] == "sk-env"  # nosec B101
    assert get_provider_config("OpenAI")["model"] == "gpt-4o-mini"  # nosec B101
    assert get_provider_config("ollama")["base_url"] == "http://gpu:11434"  # nosec B101


def test_yaml_config_file_then_env_then_overrides(monkeypatch, tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text("mistral:\n  model: mistral-large-latest\n  api_key: from-file\n", encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_provider_config("mistral")["model"] == "mistral-large-latest"  # nosec B101
    monkeypatch.setenv("MISTRAL_API_KEY", "from-env")
    assert get_provider_config("mistral")["api_key"] == "from-env"  # nosec B101
    merged = get_provider_config("mistral", {"model": "codestral", "base_url": None})
    assert merged["model"] == "codestral"  # nosec B101
    assert merged["base_url"] == "https://api.mistral.ai/v1"  # nosec B101


def test_json_config_file(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"together": {"model": "mixtral"}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_model("together") == "mixtral"  # nosec B101


def test_dotenv_file_is_loaded_once(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nDEEPSEEK_API_KEY='sk-dotenv'\n\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)
    try:
        assert get_provider_config("deepseek")["api_key"] == "sk-dotenv"  # nosec B101
    finally:
        monkeypatch.delenv("DEEPSEEK_API_KEY", raising=False)


def test_load_provider_config_returns_dataclass(monkeypatch):
    monkeypatch.setenv("TOGETHER_API_KEY", "tg-key")
    cfg = load_provider_config("together")
    assert isinstance(cfg, ProviderConfig)  # nosec B101
    assert cfg.provider == "together" and cfg.api_key == "tg-key"  # nosec B101
    assert cfg.model == "meta-llama/Meta-Llama-3.1-70B-Instruct-Turbo"  # nosec B101
