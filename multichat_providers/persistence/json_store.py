"""JSON file settings store.

Persists the :class:`AppSettingsDTO` document to a single file, rewriting it
atomically (temp file + replace) after every change. A missing file starts
from defaults; a corrupt one is logged and replaced by defaults on the next
write.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ..base.logging import get_logger, log_event
from .memory_store import InMemorySettingsStore
from .settings_dto import AppSettingsDTO, default_settings


class JsonFileSettingsStore(InMemorySettingsStore):
    """File-backed settings store."""

    def __init__(self, path: Union[str, os.PathLike], *, logger: Optional[logging.Logger] = None) -> None:
        self.path = Path(path).expanduser()
        self._logger = logger or get_logger("providers.persistence")
        super().__init__(self._load())

    def _load(self) -> AppSettingsDTO:
        if not self.path.exists():
            return default_settings()
        try:
            raw = self.path.read_text(encoding="utf-8")
            return AppSettingsDTO.model_validate_json(raw).with_defaults()
        except (OSError, ValidationError, ValueError) as exc:
            log_event(
                self._logger,
                "settings.load_failed",
                level=logging.WARNING,
                path=str(self.path),
                error=str(exc),
            )
            return default_settings()

    def _changed(self) -> None:
        self._write(self._settings)

    def _write(self, settings: AppSettingsDTO) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = json.dumps(settings.model_dump(mode="json"), indent=2)
        fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), prefix=".settings-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(data)
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def save(self) -> None:
        """Write the current document even when nothing changed."""
        with self._lock:
            self._write(self._settings)


__all__ = ["JsonFileSettingsStore"]
