"""Chat orchestration: one provider call from request to :class:`AIResponse`.

Flow
----
1. Resolve the dialect and configuration (explicit or from the settings store).
2. Reject hosted providers without a real credential before any I/O.
3. POST the prepared request through the pooled ``httpx.Client``.
4. Non-2xx: classify and raise before reading any stream.
5. Streamed replies: bytes -> :class:`FrameDecoder` -> :func:`extract_delta`
   -> ``on_chunk(fragment)``, in arrival order, on the caller's thread.
   Complete replies: parse the body once.

Failure semantics
-----------------
Every failure surfaces as :class:`ProviderError` (see ``base.errors``).
Malformed streamed fragments are absorbed by the decoders. Nothing is
retried. Cancellation is reported as ``cancelled`` and logged at INFO as
``chat.cancelled`` rather than ``chat.error``.

Cancellation
------------
The token is checked before sending, between chunks and before every
callback. Cancelling also closes the live response, which aborts a read
that is blocked waiting for the next chunk.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Optional, Tuple
from uuid import uuid4

import httpx

from ..base.cancellation import CancellationToken
from ..base.errors import (
    ErrorCode,
    ProviderError,
    cancelled_error,
    configuration_error,
    decode_error,
    failure_from_exception,
    http_error,
)
from ..base.http import get_httpx_client
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import AIResponse, ProviderConfig
from ..base.registry import ProviderDialect, UnknownProviderError, get_dialect, list_providers
from ..base.request_builder import MessageLike, build_request, resolve_model
from ..base.streaming import FrameDecoder, StreamState, extract_delta, extract_full_response
from ..base.timeouts import TimeoutConfig, get_timeout_config
from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..config.env import is_key_configured
from ..persistence.interfaces import SettingsStore
from .prober import ConnectionProber

ChunkCallback = Callable[[str], Any]


class ChatService:
    """Inbound facade used by UIs and scripts.

    Parameters
    ----------
    settings:
        Store consulted when a call passes no explicit configuration.
    client:
        Shared ``httpx.Client``; defaults to the pooled "chat" client.
    prober:
        Connection prober; built over the same client when omitted.
    timeouts:
        Timeout values; defaults to :func:`get_timeout_config`.
    """

    def __init__(
        self,
        settings: SettingsStore,
        *,
        client: Optional[httpx.Client] = None,
        prober: Optional[ConnectionProber] = None,
        timeouts: Optional[TimeoutConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._timeouts = timeouts
        self._logger = logger or get_logger("providers.chat")
        self._stream_logger = get_logger("providers.streaming")
        self._prober = prober or ConnectionProber(client, timeouts=timeouts)

    @property
    def client(self) -> httpx.Client:
        return self._client or get_httpx_client("chat")

    @property
    def settings(self) -> SettingsStore:
        return self._settings

    def _timeout_config(self) -> TimeoutConfig:
        return self._timeouts or get_timeout_config()

    def _config_for(self, dialect: ProviderDialect, config: Optional[ProviderConfig]) -> ProviderConfig:
        return config if config is not None else self._settings.get_provider_config(dialect.name)

    # ------------------------------------------------------------------ chat

    def chat(
        self,
        provider: str,
        config: Optional[ProviderConfig],
        messages: Iterable[MessageLike],
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = DEFAULT_TEMPERATURE,
        max_tokens: Optional[int] = DEFAULT_MAX_TOKENS,
        stream: bool = False,
        on_chunk: Optional[ChunkCallback] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> AIResponse:
        """Send ``messages`` to ``provider`` and return the assistant reply.

        ``config=None`` reads the saved configuration from the settings store.
        With ``stream=True`` each non-empty text fragment is passed to
        ``on_chunk`` as it arrives; the returned content is their
        concatenation.

        Raises:
            ProviderError: on configuration, transport, timeout, HTTP,
                decode or cancellation failures.
            UnknownProviderError: for an unregistered provider id.
        """
        dialect = get_dialect(provider)
        config = self._config_for(dialect, config)
        model_name = resolve_model(dialect, config, model)
        ctx = LogContext(provider=dialect.name, model=model_name, request_id=uuid4().hex)
        try:
            result = self._run(
                dialect,
                config,
                list(messages),
                model_name=model_name,
                temperature=temperature,
                max_tokens=max_tokens,
                stream=stream,
                on_chunk=on_chunk,
                token=cancellation_token,
                ctx=ctx,
            )
        except ProviderError as err:
            self._log_failure(err, ctx, stream=stream)
            raise
        normalized_log_event(
            self._logger,
            "chat.finalize",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=bool(result.content),
            tokens=result.usage,
            stream=stream,
            response_model=result.model,
            content_length=len(result.content),
        )
        return result

    def _run(
        self,
        dialect: ProviderDialect,
        config: ProviderConfig,
        messages: List[MessageLike],
        *,
        model_name: str,
        temperature: Optional[float],
        max_tokens: Optional[int],
        stream: bool,
        on_chunk: Optional[ChunkCallback],
        token: Optional[CancellationToken],
        ctx: LogContext,
    ) -> AIResponse:
        if dialect.requires_auth and not is_key_configured(config.api_key):
            raise configuration_error(dialect, model_name)
        self._raise_if_cancelled(token, dialect, model_name)

        prepared = build_request(
            dialect,
            config,
            messages,
            model=model_name,
            temperature=temperature,
            max_tokens=max_tokens,
            stream=stream,
        )
        base_url = dialect.resolve_base_url(config.base_url)
        timeouts = self._timeout_config()
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            attempt=1,
            emitted=False,
            tokens=None,
            stream=stream,
            messages=len(messages),
            url=prepared.url,
        )

        try:
            with self.client.stream(
                "POST",
                prepared.url,
                headers=prepared.headers,
                json=prepared.body,
                timeout=timeouts.stream_timeout() if stream else timeouts.request_timeout(),
            ) as response:
                remove = token.add_callback(response.close) if token is not None else None
                try:
                    if not response.is_success:
                        response.read()
                        raise http_error(dialect, response.status_code, response.text, model_name)
                    if stream:
                        return self._consume_stream(response, dialect, model_name, ctx, on_chunk, token)
                    return self._consume_body(response, dialect, model_name, token)
                finally:
                    if remove is not None:
                        remove()
        except ProviderError:
            raise
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, OSError) as exc:
            if token is not None and token.cancelled:
                raise cancelled_error(dialect, exc, model_name) from exc
            raise failure_from_exception(dialect, base_url, exc, model_name) from exc
        except Exception as exc:
            # A response closed from another thread can fail with arbitrary errors.
            if token is not None and token.cancelled:
                raise cancelled_error(dialect, exc, model_name) from exc
            raise

    def _consume_body(
        self,
        response: httpx.Response,
        dialect: ProviderDialect,
        model_name: str,
        token: Optional[CancellationToken],
    ) -> AIResponse:
        response.read()
        self._raise_if_cancelled(token, dialect, model_name)
        try:
            payload = response.json()
        except ValueError as exc:
            raise decode_error(dialect, exc, model_name) from exc
        full = extract_full_response(payload, dialect)
        return AIResponse(
            content=full.text,
            provider=dialect.name,
            model=full.model_name or model_name,
            usage=full.usage,
        )

    def _consume_stream(
        self,
        response: httpx.Response,
        dialect: ProviderDialect,
        model_name: str,
        ctx: LogContext,
        on_chunk: Optional[ChunkCallback],
        token: Optional[CancellationToken],
    ) -> AIResponse:
        state = StreamState(
            decoder=FrameDecoder(dialect.framing, ctx=ctx, logger=self._stream_logger),
            model_name=model_name,
        )
        for chunk in response.iter_bytes():
            self._raise_if_cancelled(token, dialect, model_name)
            self._dispatch(state.decoder.feed(chunk), state, dialect, on_chunk, token)
        self._raise_if_cancelled(token, dialect, model_name)
        self._dispatch(state.decoder.close(), state, dialect, on_chunk, token)
        return AIResponse(
            content=state.content,
            provider=dialect.name,
            model=state.model_name,
            usage=state.usage,
        )

    def _dispatch(
        self,
        objects: List[Any],
        state: StreamState,
        dialect: ProviderDialect,
        on_chunk: Optional[ChunkCallback],
        token: Optional[CancellationToken],
    ) -> None:
        for obj in objects:
            fragment = state.apply(extract_delta(obj, dialect))
            if fragment and on_chunk is not None:
                self._raise_if_cancelled(token, dialect, state.model_name)
                on_chunk(fragment)

    @staticmethod
    def _raise_if_cancelled(
        token: Optional[CancellationToken],
        dialect: ProviderDialect,
        model_name: Optional[str],
    ) -> None:
        if token is not None and token.cancelled:
            raise cancelled_error(dialect, model=model_name)

    def _log_failure(self, err: ProviderError, ctx: LogContext, *, stream: bool) -> None:
        if err.code is ErrorCode.CANCELLED:
            normalized_log_event(
                self._logger,
                "chat.cancelled",
                ctx,
                phase="finalize",
                attempt=1,
                error_code=err.code.value,
                emitted=None,
                tokens=None,
                stream=stream,
            )
            return
        normalized_log_event(
            self._logger,
            "chat.error",
            ctx,
            phase="finalize",
            attempt=1,
            error_code=err.code.value,
            emitted=None,
            tokens=None,
            level=logging.ERROR,
            stream=stream,
            status_code=err.status_code,
            retryable=err.retryable,
            message=err.message,
        )

    # ------------------------------------------------------- probe & listing

    def test_connection(self, provider: str, config: Optional[ProviderConfig] = None) -> bool:
        """True when the provider is reachable with ``config``; never raises."""
        try:
            dialect = get_dialect(provider)
        except UnknownProviderError:
            return False
        return self._prober.probe(dialect, self._config_for(dialect, config))

    def get_provider_models(self, provider: str, config: Optional[ProviderConfig] = None) -> List[str]:
        """Model ids offered by ``provider``.

        Raises:
            ProviderError: see :meth:`ConnectionProber.list_models`.
        """
        dialect = get_dialect(provider)
        return self._prober.list_models(dialect, self._config_for(dialect, config))

    # -------------------------------------------------------------- registry

    @staticmethod
    def get_provider_display_name(provider: str) -> str:
        """Human label for ``provider``; unknown ids are returned unchanged."""
        try:
            return get_dialect(provider).display_name
        except UnknownProviderError:
            return provider

    @staticmethod
    def list_providers() -> Tuple[str, ...]:
        return list_providers()


__all__ = ["ChatService", "ChunkCallback"]
