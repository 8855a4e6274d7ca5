# vocab_builder\adapters\persistence\__init__.py
"""
Persistence Adapters.

This package implements the Vocabulary Store port defined in the Core Domain.
It handles the translation between VocabularyEntry entities and the
underlying storage mechanism.

Components:
- FileSystemVocabularyStore: JSON document on local disk.
- InMemoryVocabularyStore: process-local dictionary.
"""

from .filesystem_repo import FileSystemVocabularyStore
from .memory_repo import InMemoryVocabularyStore

__all__ = [
    "FileSystemVocabularyStore",
    "InMemoryVocabularyStore",
]
