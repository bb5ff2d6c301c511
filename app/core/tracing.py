import logging
from typing import Callable

from fastapi import Request

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Receives (attribute name, attribute value) for the active request span
SpanAttributeHook = Callable[[str, str], None]


def noop_span_hook(key: str, value: str) -> None:
    return None


def log_span_hook(key: str, value: str) -> None:
    logger.debug("span attribute %s=%s", key, value)


def build_span_hook(settings: Settings) -> SpanAttributeHook:
    """
    Tracing counts as active only when both a service name and a collector
    endpoint are configured. An external tracer replaces the hook on
    ``app.state.span_attribute_hook``.
    """
    if settings.tracing_enabled:
        return log_span_hook
    return noop_span_hook


def get_span_hook(request: Request) -> SpanAttributeHook:
    return getattr(request.app.state, "span_attribute_hook", noop_span_hook)
