# vocab_builder\adapters\__init__.py
"""
Infrastructure Adapters.

This package contains the concrete implementations of the Ports defined in
`vocab_builder.core.ports`:
- `persistence`: Vocabulary stores (JSON file, in-memory).
- `llm_adapter`: The Google Gemini client.
- `generation`: The batch generator built on top of the LLM port.
- `credentials`: Where the user's API key is read from.
- `messaging`: The in-process event bus.

In Hexagonal Architecture, dependencies point INWARD. These modules depend
on `vocab_builder.core`, but `vocab_builder.core` never imports from here.
"""
