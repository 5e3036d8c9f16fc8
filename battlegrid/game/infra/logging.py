"""Logging pipeline: text/JSON console output plus an optional JSON-lines run log."""

from __future__ import annotations

import json
import logging
import os
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from battlegrid.game.infra.app_data import resolve_logs_dir

__all__ = ["JsonFormatter", "LoggingConfig", "build_logging_config", "configure_logging", "setup_logging"]

_QUEUE_LISTENER: QueueListener | None = None

_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
    }
)


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration; the run log file is always JSON lines."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None


class JsonFormatter(logging.Formatter):
    """JSON formatter for ``event key=value ...`` game log lines.

    The leading bare word of a message becomes ``event`` so run logs can be
    filtered by game event (``session_created``, ``attack_rejected``, ...).
    Extra record attributes are kept under ``fields``.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": message,
        }
        head = message.split(" ", 1)[0]
        if head and "=" not in head:
            payload["event"] = head
        extras = {k: v for k, v in record.__dict__.items() if k not in _STANDARD_RECORD_FIELDS}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging with optional async file streaming."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        _QUEUE_LISTENER = None

    level = getattr(logging, config.level_name.upper(), logging.INFO)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_console_formatter(config.console_format))
    handlers: list[logging.Handler] = [console_handler]

    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, mode="a", encoding="utf-8", delay=True)
        file_handler.setFormatter(JsonFormatter())
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def build_logging_config() -> LoggingConfig:
    """Build logging configuration from env vars."""
    level_name = os.getenv("BATTLEGRID_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    console_format = os.getenv("LOG_FORMAT", "text").strip().lower()
    return LoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
    )


def setup_logging() -> None:
    """Configure application logging from env vars."""
    config = build_logging_config()
    configure_logging(config)
    logging.getLogger(__name__).info("logging_configured level=%s file=%s", config.level_name, config.file_path)


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"battlegrid_run_{stamp}.jsonl")


def _console_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
