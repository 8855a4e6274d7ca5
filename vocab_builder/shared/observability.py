# vocab_builder\shared\observability.py
from contextlib import contextmanager
from typing import Optional, Tuple
from opentelemetry import trace

def get_tracer(name: str):
    """Tracer for use-case spans. Spans stay no-ops until the host installs an SDK provider."""
    return trace.get_tracer(name)

def current_span_ids() -> Tuple[Optional[str], Optional[str]]:
    """(trace_id, span_id) of the recording span as hex strings, or (None, None)."""
    span = trace.get_current_span()
    if not span.is_recording():
        return None, None
    ctx = span.get_span_context()
    return format(ctx.trace_id, "032x"), format(ctx.span_id, "016x")

def current_trace_id() -> Optional[str]:
    return current_span_ids()[0]

@contextmanager
def use_case_span(tracer, name: str, **attributes):
    """
    Opens a `use_case.<name>` span and records the attributes under the
    `app.` prefix. None values are skipped.

    Usage:
        with use_case_span(tracer, "import_vocabulary", vocab_kind="word") as span:
            ...
    """
    with tracer.start_as_current_span(f"use_case.{name}") as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(f"app.{key}", value)
        yield span
