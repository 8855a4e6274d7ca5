"""
Generation Adapters.

Implementations of the Generation Client port.
"""

from .gemini_generator import GeminiVocabularyGenerator

__all__ = [
    "GeminiVocabularyGenerator",
]
