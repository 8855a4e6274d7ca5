"""
Domain entities, events and exceptions of the vocabulary acquisition core.
"""

from .exceptions import (
    BusyError,
    DomainError,
    GenerationError,
    NotReadyError,
    StoreError,
    ValidationError,
)
from .models import (
    ALL_CATEGORIES,
    ALL_LEVELS,
    CollectionRun,
    GenerationFilter,
    ImportResult,
    VocabType,
    VocabTypeFilter,
    VocabularyEntry,
)
from .readiness import InitializationState, Readiness, evaluate_readiness

__all__ = [
    "ALL_CATEGORIES",
    "ALL_LEVELS",
    "BusyError",
    "CollectionRun",
    "DomainError",
    "GenerationError",
    "GenerationFilter",
    "ImportResult",
    "InitializationState",
    "NotReadyError",
    "Readiness",
    "StoreError",
    "ValidationError",
    "VocabType",
    "VocabTypeFilter",
    "VocabularyEntry",
    "evaluate_readiness",
]
