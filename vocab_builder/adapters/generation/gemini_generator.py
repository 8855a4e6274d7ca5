# vocab_builder/adapters/generation/gemini_generator.py
import json
from typing import Any, Dict, List, Optional
import structlog

from vocab_builder.core.domain.models import (
    ALL_CATEGORIES,
    ALL_LEVELS,
    GenerationFilter,
    VocabType,
    VocabTypeFilter,
    VocabularyEntry,
)
from vocab_builder.core.domain.exceptions import GenerationError
from vocab_builder.core.ports.llm_port import ILanguageModel
from vocab_builder.core.ports.vocabulary_store import IVocabularyStore

logger = structlog.get_logger()

# How many stored terms are listed in the prompt as "do not repeat".
EXCLUSION_SAMPLE_SIZE = 150

PROMPT_TEMPLATE = """
Act as an expert TOEIC vocabulary coach.

TASK: Create {count} NEW English {what} that TOEIC learners should know.

CONSTRAINTS:
- Level: {level}
- Category: {category}
- Do NOT include any of these existing terms: {exclude}

OUTPUT SCHEMA (Strict JSON, no commentary):
{{
  "vocabulary": [
    {{
      "term": "the word or idiom",
      "type": "word" or "idiom",
      "definition": "short English definition",
      "example": "one example sentence in a business context",
      "level": "the level",
      "category": "the category"
    }}
  ]
}}
"""

def _clean_json_response(response_text: str) -> str:
    """
    Helper to extract raw JSON from potential markdown wrapping.
    """
    clean_text = (response_text or "").strip()

    if clean_text.startswith("```"):
        first_newline = clean_text.find("\n")
        if first_newline != -1:
            clean_text = clean_text[first_newline + 1:]
        if clean_text.endswith("```"):
            clean_text = clean_text[:-3]

    return clean_text.strip()

class GeminiVocabularyGenerator:
    """
    Generation Client backed by the LLM port.

    One `generate` call asks the model for one batch, keeps the usable items,
    stores them through the deduplicating store, and returns how many were new.
    """

    def __init__(self, llm: ILanguageModel, store: IVocabularyStore, items_per_batch: int = 75):
        self.llm = llm
        self.store = store
        self.items_per_batch = items_per_batch

    async def generate(self, selection: GenerationFilter) -> int:
        prompt = await self._build_prompt(selection)
        raw_text = await self.llm.generate_text(prompt)

        items = self._parse_items(raw_text)
        entries = self._to_entries(items, selection)
        if items and not entries:
            raise GenerationError("The AI response contained no usable vocabulary items.")

        added = await self.store.insert_if_new(entries)
        logger.info(
            "generation_batch_stored",
            received=len(items),
            usable=len(entries),
            added=added,
            vocab_type=selection.vocab_type.value,
        )
        return added

    async def _build_prompt(self, selection: GenerationFilter) -> str:
        kind = self._fixed_kind(selection)
        existing = await self.store.list_entries(kind)
        exclude = [e.term for e in existing[-EXCLUSION_SAMPLE_SIZE:]]

        if kind is VocabType.WORD:
            what = "words"
        elif kind is VocabType.IDIOM:
            what = "idioms and set phrases"
        else:
            what = "words and idioms (mixed)"

        return PROMPT_TEMPLATE.format(
            count=self.items_per_batch,
            what=what,
            level="any level" if selection.level == ALL_LEVELS else selection.level,
            category="any business category" if selection.category == ALL_CATEGORIES else selection.category,
            exclude=", ".join(exclude) if exclude else "(none)",
        )

    @staticmethod
    def _fixed_kind(selection: GenerationFilter) -> Optional[VocabType]:
        if selection.vocab_type == VocabTypeFilter.ALL:
            return None
        return VocabType(selection.vocab_type.value)

    def _parse_items(self, raw_text: str) -> List[Any]:
        try:
            data = json.loads(_clean_json_response(raw_text))
        except ValueError:
            logger.warning("generation_response_unparseable", preview=(raw_text or "")[:80])
            raise GenerationError("The AI returned a malformed response (not valid JSON).")

        if isinstance(data, dict):
            data = data.get("vocabulary")
        if not isinstance(data, list):
            raise GenerationError("The AI returned a malformed response (no vocabulary list).")
        return data

    def _to_entries(self, items: List[Any], selection: GenerationFilter) -> List[VocabularyEntry]:
        fixed_kind = self._fixed_kind(selection)
        entries = []
        skipped = 0

        for raw in items:
            if not isinstance(raw, dict):
                skipped += 1
                continue
            kind = fixed_kind or self._kind_of(raw)
            data: Dict[str, Any] = dict(raw)
            if selection.level != ALL_LEVELS:
                data.setdefault("level", selection.level)
            if selection.category != ALL_CATEGORIES:
                data.setdefault("category", selection.category)
            try:
                entries.append(VocabularyEntry.from_raw(data, kind))
            except ValueError:
                skipped += 1

        if skipped:
            logger.warning("generation_items_skipped", skipped=skipped)
        return entries

    @staticmethod
    def _kind_of(raw: Dict[str, Any]) -> VocabType:
        declared = str(raw.get("type") or raw.get("kind") or "").strip().lower()
        if declared == VocabType.IDIOM.value:
            return VocabType.IDIOM
        return VocabType.WORD
