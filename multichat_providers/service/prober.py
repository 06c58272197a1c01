"""Connection probing and model listing.

Used by settings validation: ``probe`` answers "can I reach this provider
with this configuration?" and never raises, ``list_models`` fetches the
provider's model ids and surfaces failures as :class:`ProviderError`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..base.errors import (
    configuration_error,
    decode_error,
    failure_from_exception,
    http_error,
)
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import ProviderConfig
from ..base.registry import DialectLike, ProviderDialect, UnknownProviderError, resolve_dialect
from ..base.timeouts import TimeoutConfig, get_timeout_config
from ..config.env import is_key_configured

_ID_KEYS = ("id", "model", "name")


def extract_model_ids(payload: Any) -> List[str]:
    """Pull model ids out of a listing response.

    Shapes tried in order: ``{"data": [...]}`` (OpenAI-compatible), a bare
    list, ``{"models": [...]}`` (Ollama tags). Each item contributes its
    first non-empty ``id``, ``model`` or ``name``; plain strings are taken
    as ids.
    """
    if isinstance(payload, dict) and isinstance(payload.get("data"), list):
        items = payload["data"]
    elif isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict) and isinstance(payload.get("models"), list):
        items = payload["models"]
    else:
        return []
    ids: List[str] = []
    for item in items:
        if isinstance(item, str):
            if item:
                ids.append(item)
            continue
        if not isinstance(item, dict):
            continue
        for key in _ID_KEYS:
            value = item.get(key)
            if isinstance(value, str) and value:
                ids.append(value)
                break
    return ids


class ConnectionProber:
    """Reachability checks and model listing over the pooled HTTP client."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        *,
        timeouts: Optional[TimeoutConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._client = client
        self._timeouts = timeouts
        self._logger = logger or get_logger("providers.probe")

    @property
    def client(self) -> httpx.Client:
        return self._client or get_httpx_client("probe")

    def _timeout(self) -> httpx.Timeout:
        return (self._timeouts or get_timeout_config()).request_timeout()

    @staticmethod
    def _headers(dialect: ProviderDialect, config: ProviderConfig) -> Dict[str, str]:
        if dialect.requires_auth:
            return {"Authorization": f"Bearer {config.api_key}"}
        return {}

    def probe(self, provider: DialectLike, config: ProviderConfig) -> bool:
        """Return True when the provider answers its probe path with 2xx."""
        try:
            dialect = resolve_dialect(provider)
        except UnknownProviderError:
            return False
        base_url = dialect.resolve_base_url(config.base_url)
        ctx = LogContext(provider=dialect.name)
        try:
            response = self.client.get(
                base_url + dialect.probe_path,
                headers=self._headers(dialect, config),
                timeout=self._timeout(),
            )
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            log_event(self._logger, "probe.unreachable", ctx, base_url=base_url, error=str(exc))
            return False
        ok = response.is_success
        log_event(self._logger, "probe.result", ctx, status=response.status_code, ok=ok)
        return ok

    def list_models(self, provider: DialectLike, config: ProviderConfig) -> List[str]:
        """Return the provider's model ids.

        Raises:
            ProviderError: ``configuration`` for a missing key on hosted
                providers; transport, timeout, HTTP and decode failures.
        """
        dialect = resolve_dialect(provider)
        if dialect.requires_auth and not is_key_configured(config.api_key):
            raise configuration_error(dialect)
        base_url = dialect.resolve_base_url(config.base_url)
        try:
            response = self.client.get(
                base_url + dialect.models_path,
                headers=self._headers(dialect, config),
                timeout=self._timeout(),
            )
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as exc:
            raise failure_from_exception(dialect, base_url, exc) from exc
        if not response.is_success:
            raise http_error(dialect, response.status_code, response.text)
        try:
            payload = response.json()
        except ValueError as exc:
            raise decode_error(dialect, exc) from exc
        models = extract_model_ids(payload)
        log_event(self._logger, "probe.models", LogContext(provider=dialect.name), count=len(models))
        return models


__all__ = ["ConnectionProber", "extract_model_ids"]
