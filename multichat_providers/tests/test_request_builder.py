"""Request construction per provider dialect."""
from __future__ import annotations

from multichat_providers.base.models import Attachment, Message, ProviderConfig
from multichat_providers.base.request_builder import build_request


def _msgs():
    return [
        Message(role="system", content="be brief"),
        Message(
            role="user",
            content="hi",
            attachments=(Attachment(name="a.txt", kind="text", content="zzz", mime_type="text/plain", size=3),),
        ),
    ]


def test_openai_request_shape():
    cfg = ProviderConfig(provider="openai", api_key="sk-live-1")
    req = build_request("openai", cfg, _msgs(), stream=True)
    assert req.url == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert req.headers == {"Content-Type": "application/json", "Authorization": "Bearer sk-live-1"}  # nosec B101
    assert req.body == {  # nosec B101
        "messages": [{"role": "system", "content": "be brief"}, {"role": "user", "content": "hi"}],
        "model": "gpt-4o",
        "temperature": 0.7,
        "max_tokens": 4096,
        "stream": True,
    }


def test_ollama_omits_auth_and_sampling_params():
    req = build_request("ollama", ProviderConfig(provider="ollama"), _msgs())
    assert req.url == "http://localhost:11434/api/chat"  # nosec B101
    assert "Authorization" not in req.headers  # nosec B101
    assert "temperature" not in req.body and "max_tokens" not in req.body  # nosec B101
    assert req.body["stream"] is False  # nosec B101


def test_lmstudio_keeps_sampling_params_but_no_auth():
    req = build_request("lmstudio", None, _msgs(), temperature=0.2, max_tokens=10)
    assert "Authorization" not in req.headers  # nosec B101
    assert (req.body["temperature"], req.body["max_tokens"]) == (0.2, 10)  # nosec B101
    assert req.url == "http://localhost:1234/v1/chat/completions"  # nosec B101


def test_openrouter_attribution_headers_present():
    req = build_request("openrouter", ProviderConfig(provider="openrouter", api_key="k"), _msgs())
    assert req.headers["HTTP-Referer"] == "https://steroidchat.app"  # nosec B101
    assert req.headers["X-Title"] == "SteroidChat"  # nosec B101


def test_model_resolution_order():
    cfg = ProviderConfig(provider="mistral", api_key="k", model="mistral-large-latest")
    assert build_request("mistral", cfg, []).model == "mistral-large-latest"  # nosec B101
    assert build_request("mistral", cfg, [], model="open-mixtral").model == "open-mixtral"  # nosec B101
    assert build_request("mistral", ProviderConfig(provider="mistral"), []).model == "mistral-small-latest"  # nosec B101


def test_base_url_override_trailing_slash_stripped():
    cfg = ProviderConfig(provider="ollama", base_url="http://gpu-box:11434/")
    assert build_request("ollama", cfg, []).url == "http://gpu-box:11434/api/chat"  # nosec B101


def test_mapping_messages_are_accepted_and_inputs_untouched():
    msgs = [{"role": "user", "content": "yo", "extra": 1}]
    req = build_request("qwen", ProviderConfig(provider="qwen", api_key="k"), msgs)
    assert req.body["messages"] == [{"role": "user", "content": "yo"}]  # nosec B101
    assert msgs == [{"role": "user", "content": "yo", "extra": 1}]  # nosec B101


def test_mapping_message_with_null_content_sends_empty_text():
    req = build_request("ollama", ProviderConfig(provider="ollama"), [{"role": "assistant", "content": None}])
    assert req.body["messages"] == [{"role": "assistant", "content": ""}]  # nosec B101
