from __future__ import annotations

import json
import logging
import os
from logging.config import dictConfig
from traceback import format_exception
from typing import Optional

from .env import pick


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for prod and CI logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, object] = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "pid": record.process,
            "message": record.getMessage(),
        }

        # Document context (only when passed via extra=...)
        doc_ctx = {
            k: v for k, v in {
                "kind": getattr(record, "doc_kind", None),
                "index": getattr(record, "doc_index", None),
            }.items() if v is not None
        }
        if doc_ctx:
            payload["document"] = doc_ctx

        if record.exc_info:
            exc_type = record.exc_info[0].__name__ if record.exc_info[0] else None
            exc_message = str(record.exc_info[1]) if record.exc_info[1] else None
            stack = "".join(format_exception(*record.exc_info))

            err_obj: dict[str, object] = {}
            if exc_type:
                err_obj["type"] = exc_type
            if exc_message:
                err_obj["message"] = exc_message

            max_stack = int(os.getenv("LOG_STACK_LIMIT", "4000"))
            err_obj["stack"] = stack[:max_stack] + ("...(truncated)" if len(stack) > max_stack else "")

            payload["error"] = err_obj

        return json.dumps(payload, ensure_ascii=False)


def _read_level(explicit: Optional[str] = None) -> str:
    level = explicit or os.getenv("LOG_LEVEL")
    if not level:
        return pick(prod="INFO", nonprod="DEBUG")
    level = level.strip().upper()
    # getLevelName maps known names to ints and anything else to "Level <x>"
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level '{level.lower()}'")
    return level


def _read_format(explicit: Optional[str] = None) -> str:
    fmt = explicit or os.getenv("LOG_FORMAT")
    if fmt:
        return fmt.lower()
    return pick(prod="json", nonprod="plain")


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    level = _read_level(level)
    formatter_name = "json" if _read_format(fmt) == "json" else "plain"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "plain": {
                    "format": "%(asctime)s %(levelname)-5s [pid:%(process)d] %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                },
            },
            "handlers": {
                "stream": {
                    # stderr keeps catalog output on stdout clean
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "level": level,
                    "formatter": formatter_name,
                }
            },
            "root": {
                "level": level,
                "handlers": ["stream"],
            },
        }
    )
