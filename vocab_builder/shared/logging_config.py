# vocab_builder\shared\logging_config.py
import sys
import logging
import structlog
from vocab_builder.shared.config import settings
from vocab_builder.shared.observability import current_span_ids

def add_open_telemetry_spans(_, __, event_dict):
    """
    Stamps trace_id/span_id on every entry, so the lines of one import or
    collection run can be grouped by its span.
    """
    event_dict["trace_id"], event_dict["span_id"] = current_span_ids()
    return event_dict

def add_app_context(_, __, event_dict):
    event_dict.setdefault("app", settings.APP_NAME)
    event_dict.setdefault("env", settings.APP_ENV.value)
    return event_dict

def _renderer(log_format: str):
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()

def configure_logging(log_format: str = None, log_level: str = None):
    """
    Configures structlog for the acquisition core: JSON lines for hosts that
    ship logs, colored console output for local runs.

    Arguments override LOG_FORMAT / LOG_LEVEL. DEBUG=true forces debug level.
    """
    log_format = log_format or settings.LOG_FORMAT
    if log_level is None and settings.DEBUG:
        log_level = "DEBUG"
    log_level = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            add_app_context,
            add_open_telemetry_spans,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level)),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # google SDK and tenacity log through the standard library
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level)
