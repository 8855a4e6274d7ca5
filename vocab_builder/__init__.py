# vocab_builder\__init__.py
"""
Vocabulary Builder - Deduplicated vocabulary acquisition core.

This package contains the acquisition pipeline behind the study app's home
screen (JSON import and batched AI collection), laid out following
Hexagonal Architecture (Ports & Adapters).
"""

__version__ = "1.0.0"
