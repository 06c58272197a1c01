"""multichat_providers.config.defaults
===================================

Central place for small, stable default values: provider endpoints, default
models, sampling defaults and attribution headers. These can be overridden via
environment variables, an external config file or the settings store, but
provide sensible fallbacks for local development and tests.

This module intentionally imports nothing from the rest of the package so it
can be used from any layer without circular imports.
"""

from __future__ import annotations

# ---- Sampling defaults applied when a chat call gives none ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 4096

# ---- Attribution headers required by OpenRouter ----
APP_REFERER = "https://steroidchat.app"
APP_TITLE = "SteroidChat"

# Provider selected when the settings store has no preference.
DEFAULT_PROVIDER = "ollama"

# ---- Hosted, OpenAI-compatible providers ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-4o"

GROK_DEFAULT_BASE_URL = "https://api.x.ai/v1"
GROK_DEFAULT_MODEL = "grok-2-1212"

OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_DEFAULT_MODEL = "openai/gpt-4o-mini"

QWEN_DEFAULT_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
QWEN_DEFAULT_MODEL = "qwen-turbo"

DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"

MISTRAL_DEFAULT_BASE_URL = "https://api.mistral.ai/v1"
MISTRAL_DEFAULT_MODEL = "mistral-small-latest"

TOGETHER_DEFAULT_BASE_URL = "https://api.together.xyz/v1"
TOGETHER_DEFAULT_MODEL = "meta-llama/Meta-Llama-3.1-70B-Instruct-Turbo"

# ---- Local model servers ----
OLLAMA_DEFAULT_HOST = "http://localhost:11434"
OLLAMA_DEFAULT_MODEL = "llama3.2"

LMSTUDIO_DEFAULT_BASE_URL = "http://localhost:1234/v1"
LMSTUDIO_DEFAULT_MODEL = "llama-3.3-70b-instruct"


__all__ = [
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "APP_REFERER",
    "APP_TITLE",
    "DEFAULT_PROVIDER",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "GROK_DEFAULT_BASE_URL",
    "GROK_DEFAULT_MODEL",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OPENROUTER_DEFAULT_MODEL",
    "QWEN_DEFAULT_BASE_URL",
    "QWEN_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "MISTRAL_DEFAULT_BASE_URL",
    "MISTRAL_DEFAULT_MODEL",
    "TOGETHER_DEFAULT_BASE_URL",
    "TOGETHER_DEFAULT_MODEL",
    "OLLAMA_DEFAULT_HOST",
    "OLLAMA_DEFAULT_MODEL",
    "LMSTUDIO_DEFAULT_BASE_URL",
    "LMSTUDIO_DEFAULT_MODEL",
]
