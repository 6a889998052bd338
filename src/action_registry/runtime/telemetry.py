"""Structured logging and profiling for the registry, backed by telelog.

Configuration comes from ``ACTION_REGISTRY_*`` environment variables the first
time a logger is requested; call ``configure`` to swap it out.
"""

from __future__ import annotations

import os
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "ACTION_REGISTRY_"

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    return value if isinstance(value, str) else repr(value)


def build_config() -> Any:
    """Build a ``telelog.Config`` from the environment.

    ``LOG_LEVEL`` (default ``INFO``), ``LOG_FILE``, ``DISABLE_CONSOLE`` and
    ``NO_COLOR`` are honoured. Profiling is always on so spans get timed.
    """

    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())

    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))

    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)

    config.with_profiling(True)
    return config


def configure(config: Optional[Any] = None) -> None:
    global _CONFIG
    _CONFIG = build_config() if config is None else config
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or _env("LOGGER") or "action_registry"
    if logger_name not in _LOGGERS:
        if _CONFIG is None:
            configure()
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    with_data = getattr(logger, f"{level}_with", None)
    if with_data is not None:
        with_data(message, [(key, _stringify(value)) for key, value in payload.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Lets the body of a ``span`` attach metadata reported on failure."""

    logger: Any
    name: str
    component: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.name, **self.metadata}
        if self.component:
            payload["component"] = self.component
        payload["reason"] = reason
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, tracking it under ``component`` when given.

    ``metadata`` is pushed as logger context while the block runs. Errors are
    logged as ``span::fail`` and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log, name=name, component=component, metadata=dict(context)
    )
    tracking = log.track_component(component) if component else nullcontext()
    try:
        with tracking, log.profile(name):
            yield handle
    except Exception as exc:
        handle.fail(str(exc))
        raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
