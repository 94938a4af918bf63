"""Настройка структурированного логирования (structlog)."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import structlog

from .config import BookifySettings, LogFormat, get_settings


def _add_service_context(service_name: str, environment: str) -> Callable[..., Any]:
    """Процессор, добавляющий в запись имя сервиса и окружение."""

    def processor(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
        event_dict["service"] = service_name
        event_dict["environment"] = environment
        return event_dict

    return processor


def configure_logging(settings: Optional[BookifySettings] = None) -> None:
    """Настраивает structlog по параметрам приложения."""
    settings = settings or get_settings()
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_service_context(settings.service_name, settings.environment),
    ]
    if settings.log_format == LogFormat.JSON:
        processors.extend(
            [
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ]
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.value, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
