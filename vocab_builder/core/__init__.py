# vocab_builder\core\__init__.py
"""
Core Domain Layer.

This package contains the pure business logic and entities of the
vocabulary acquisition pipeline. It follows the Hexagonal Architecture
(Ports & Adapters) pattern:
- No dependencies on a UI framework or the host application.
- No dependencies on infrastructure (Gemini, FileSystem).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
