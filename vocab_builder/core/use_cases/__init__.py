# vocab_builder\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

This package contains the "Interactors" of the system. They orchestrate
the flow of data between the Domain Entities and the Infrastructure Ports.
Each use case represents a user action on the home screen:
1. Checking which features are available.
2. Importing a JSON file of words or idioms.
3. Collecting new vocabulary from the AI generator in batches.
"""

from .check_readiness import CheckReadiness
from .collect_batches import CollectVocabularyBatches
from .import_vocabulary import ImportVocabulary

__all__ = [
    "CheckReadiness",
    "CollectVocabularyBatches",
    "ImportVocabulary",
]
