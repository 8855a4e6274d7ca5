# vocab_builder\shared\__init__.py
"""
Cross-cutting pieces of the acquisition core.

`config` holds the settings, `logging_config` and `observability` set up
structlog and OpenTelemetry spans, `resilience` has the retry policy for
Gemini calls, and `container` assembles adapters and use cases.
"""
