"""structlog setup for the gateway.

Every handler logs one line per request: ``info`` on success, ``error`` on
each failure branch of the error classifier. The renderer is picked from
``LOG_FORMAT`` ("json" for log shipping, anything else for a readable console).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def _service_context(service_name: str) -> Processor:
    def add_service_name(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return add_service_name


def build_processors(service_name: str, log_format: str = "console") -> list[Processor]:
    processors: list[Processor] = [
        merge_contextvars,
        _service_context(service_name),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if log_format.lower() == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ]
    return processors


def configure_logging(service_name: str, log_level: str = "INFO", log_format: str = "console") -> None:
    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper(), logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=build_processors(service_name, log_format),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_logger(name: str | None = None) -> Any:
    # lazy proxy: picks up configure_logging() even when created at import time
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
