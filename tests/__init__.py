# tests\__init__.py
"""
Test Suite for the Vocabulary Builder core.

Organization:
- `core`: Use Cases and Domain Models with in-memory or mocked ports.
- `adapters`: Stores, Gemini adapters, credentials and the event bus.
- `shared`: Configuration and container wiring.
"""
