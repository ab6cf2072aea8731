"""structlog configuration for the datematch CLI.

Log lines go to stderr so stdout carries only match results. Every event
carries the zone the matchers were built against (``tz``), and date, time
and zone values in an event are rendered as ISO-8601 text / IANA keys so
the console and JSON renderers agree.

Library modules log through stdlib loggers under ``datematch``; the
ProcessorFormatter installed here renders them alongside structlog events.
"""

from __future__ import annotations

import logging
import sys
from datetime import date, time, tzinfo

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

LOCAL_ZONE = "local"


def render_temporal_values(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Replace date/time/zone values with stable text."""
    for key, value in event_dict.items():
        if isinstance(value, (date, time)):
            event_dict[key] = value.isoformat()
        elif isinstance(value, tzinfo):
            event_dict[key] = getattr(value, "key", None) or str(value)
    return event_dict


def _processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        render_temporal_values,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(log_json: bool, shared: list[Processor]) -> logging.Handler:
    renderer: Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    zone_name: str | None = None,
) -> None:
    """Route structlog and ``datematch`` stdlib loggers to stderr.

    Args:
        verbose: Show the ``datematch`` DEBUG events (matcher construction).
        log_json: One JSON object per line instead of console rendering.
        zone_name: IANA name bound as ``tz`` on every event; ``"local"``
            when the system zone is in use.
    """
    shared = _processors()
    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(tz=zone_name or LOCAL_ZONE)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json, shared))
    root_logger.setLevel(logging.WARNING)
    logging.getLogger("datematch").setLevel(logging.DEBUG if verbose else logging.WARNING)
