"""Observability helpers for structured diagnostic logging."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from profilesync.settings import Settings, get_settings

_LOGGER = logging.getLogger("profilesync.observability")
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class Observability:
    """Emit structured diagnostic events for a component."""

    def __init__(
        self,
        *,
        settings: Settings,
        component: str | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings
        self.component = component or "core"
        self._logger = logger or _LOGGER
        self._structured_logging = bool(settings.observability.structured_logging)
        self._enabled = bool(settings.records.log_dropped_records)

    @property
    def enabled(self) -> bool:
        """bool: True when diagnostic events should be written."""

        return self._enabled and self._logger.isEnabledFor(logging.DEBUG)

    def emit_event(self, event: str, **fields: Any) -> None:
        """Emit a structured debug log if enabled."""

        if not self.enabled:
            return
        payload = {
            "event": event,
            "component": self.component,
            "service": self.settings.observability.service_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **_sanitize_dict(fields),
        }
        if self._structured_logging:
            message = json.dumps(payload, default=_serialize)
            self._logger.debug(message)
        else:
            self._logger.debug("%s | %s", event, payload)


def get_observability(*, component: str | None = None, settings: Settings | None = None) -> Observability:
    """Return an :class:`Observability` instance for the requested component."""

    resolved = settings or get_settings()
    return Observability(settings=resolved, component=component, logger=_LOGGER)


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""

    resolved = settings or get_settings()
    level = getattr(logging, resolved.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=_LOG_FORMAT)


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------


def _serialize(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_serialize(item) for item in value)
    if isinstance(value, dict):
        return {str(key): _serialize(val) for key, val in value.items()}
    return str(value)


def _sanitize_dict(payload: Mapping[str, Any]) -> Mapping[str, Any]:
    sanitized: dict[str, Any] = {}
    for key, value in payload.items():
        if isinstance(value, Mapping):
            sanitized[str(key)] = _sanitize_dict(value)
        else:
            sanitized[str(key)] = value
    return sanitized


__all__ = ["Observability", "configure_logging", "get_observability"]
