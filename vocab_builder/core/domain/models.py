# vocab_builder\core\domain\models.py
import re
import uuid
from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# --- Enums ---

class VocabType(str, Enum):
    """The record kind of a vocabulary entry."""
    WORD = "word"
    IDIOM = "idiom"

class VocabTypeFilter(str, Enum):
    """Record kinds a generation batch may ask for."""
    WORD = "word"
    IDIOM = "idiom"
    ALL = "all"

# Wildcards accepted by the generator for level and category.
ALL_LEVELS = "All Levels"
ALL_CATEGORIES = "All Categories"

_WHITESPACE = re.compile(r"\s+")
_LEADING_INT = re.compile(r"\s*[-+]?\d+")

# --- Entities ---

class VocabularyEntry(BaseModel):
    """
    A single word or idiom in the user's dataset.

    Only `term` and `kind` are interpreted. Every other field (definition,
    examples, level, ...) is kept as an opaque payload.
    """
    model_config = ConfigDict(extra="allow")

    term: str = Field(..., description="The word or idiom text")
    kind: VocabType = VocabType.WORD

    @field_validator("term")
    @classmethod
    def _term_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("term must not be blank")
        return value

    @property
    def identity(self) -> str:
        """Deduplication key: kind plus the case-folded, whitespace-collapsed term."""
        normalized = _WHITESPACE.sub(" ", self.term).casefold()
        return f"{self.kind.value}:{normalized}"

    @property
    def payload(self) -> Dict[str, Any]:
        """The pass-through fields, without term and kind."""
        return dict(self.model_extra or {})

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], kind: VocabType) -> "VocabularyEntry":
        """
        Builds an entry from an externally authored object.

        The text is read from `term` or, for older exports, `word`. Any
        `kind`/`type` key in the raw object is discarded: the caller decides
        the kind.
        """
        data = dict(raw)
        data.pop("kind", None)
        data.pop("type", None)
        term = data.pop("term", None)
        legacy = data.pop("word", None)
        if term is None:
            term = legacy
        if not isinstance(term, str):
            raise ValueError("entry has no 'term' (or 'word') text")
        return cls(term=term, kind=kind, **data)

class GenerationFilter(BaseModel):
    """
    Selection passed through to the generation service.
    The core never interprets these values.
    """
    model_config = ConfigDict(frozen=True)

    level: str = ALL_LEVELS
    category: str = ALL_CATEGORIES
    vocab_type: VocabTypeFilter = VocabTypeFilter.WORD

class ImportResult(BaseModel):
    """Outcome of one JSON import."""
    kind: VocabType
    added_count: int
    total_count: int

    @property
    def duplicate_count(self) -> int:
        return self.total_count - self.added_count

    @property
    def summary(self) -> str:
        return (
            f"Imported {self.added_count} new {self.kind.value}s. "
            f"{self.duplicate_count} duplicates were skipped."
        )

class CollectionRun(BaseModel):
    """
    Ephemeral state of one batched AI collection. Never persisted.
    `total_added` only grows while the run is active.
    """
    run_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    filter: GenerationFilter
    batch_count: int
    current_batch_index: int = 0
    batches_completed: int = 0
    total_added: int = 0
    status_message: str = ""
    is_active: bool = False
    stop_requested: bool = False
    last_error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.last_error is not None

# --- Helpers ---

def normalize_batch_count(value: Any) -> int:
    """
    Coerces user input to a batch count >= 1.
    Numbers are truncated. Strings are read up to their first non-digit
    ("12abc" -> 12, "2.9" -> 2). Anything else and values below one become 1.
    """
    if isinstance(value, bool):
        return 1
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return 1
        count = int(match.group())
    else:
        try:
            count = int(value)
        except (TypeError, ValueError, OverflowError):
            return 1
    return max(1, count)

def requested_item_count(batch_count: Any, items_per_batch: int) -> int:
    """Number of items the host advertises for a run ("Generate N New Items")."""
    return normalize_batch_count(batch_count) * items_per_batch
