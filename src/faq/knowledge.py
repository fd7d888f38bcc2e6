"""Curated FAQ knowledge base.

Entries are validated once when the knowledge base is built and are never
mutated afterwards, so a single ``KnowledgeBase`` can back any number of
matchers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from jsonschema import Draft7Validator

logger = logging.getLogger(__name__)

KNOWLEDGE_BASE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "array",
    "items": {
        "type": "object",
        "required": ["id", "question", "answer"],
        "properties": {
            "id": {"type": "string", "minLength": 1},
            "question": {"type": "string", "minLength": 1},
            "keywords": {"type": "array", "items": {"type": "string"}},
            "answer": {"type": "string", "minLength": 1},
        },
        "additionalProperties": False,
    },
}

_validator = Draft7Validator(KNOWLEDGE_BASE_SCHEMA)


class KnowledgeBaseError(ValueError):
    """Raised when knowledge base data is malformed at load time."""


@dataclass(frozen=True)
class KnowledgeEntry:
    id: str
    question: str
    keywords: Tuple[str, ...]
    answer: str

    def __post_init__(self) -> None:
        if isinstance(self.keywords, str):
            raise KnowledgeBaseError(
                f"entry {self.id!r} keywords must be a sequence of strings, not a string"
            )
        object.__setattr__(self, "keywords", tuple(self.keywords))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeEntry":
        return cls(
            id=data["id"],
            question=data["question"],
            keywords=tuple(data.get("keywords", ())),
            answer=data["answer"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "question": self.question,
            "keywords": list(self.keywords),
            "answer": self.answer,
        }


class KnowledgeBase:
    """Ordered, read-only collection of ``KnowledgeEntry`` records.

    Declaration order matters: the matcher breaks score ties in favour of
    the entry declared first.
    """

    def __init__(self, entries: Iterable[KnowledgeEntry]) -> None:
        self._entries: Tuple[KnowledgeEntry, ...] = tuple(entries)
        self._by_id: Dict[str, KnowledgeEntry] = {}
        self._validate()

    def _validate(self) -> None:
        for position, entry in enumerate(self._entries):
            if not isinstance(entry, KnowledgeEntry):
                raise KnowledgeBaseError(
                    f"entry {position} is not a KnowledgeEntry: {entry!r}"
                )
            if not isinstance(entry.id, str) or not entry.id.strip():
                raise KnowledgeBaseError(f"entry {position} has an empty id")
            if entry.id in self._by_id:
                raise KnowledgeBaseError(f"duplicate entry id: {entry.id!r}")
            if not isinstance(entry.question, str) or not entry.question.strip():
                raise KnowledgeBaseError(f"entry {entry.id!r} has an empty question")
            if not isinstance(entry.answer, str) or not entry.answer.strip():
                raise KnowledgeBaseError(f"entry {entry.id!r} has an empty answer")
            if any(not isinstance(keyword, str) for keyword in entry.keywords):
                raise KnowledgeBaseError(f"entry {entry.id!r} has a non-string keyword")
            self._by_id[entry.id] = entry

    def __iter__(self) -> Iterator[KnowledgeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> KnowledgeEntry:
        return self._entries[index]

    @property
    def entries(self) -> Tuple[KnowledgeEntry, ...]:
        return self._entries

    def get(self, entry_id: str) -> Optional[KnowledgeEntry]:
        return self._by_id.get(entry_id)

    def ids(self) -> List[str]:
        return [entry.id for entry in self._entries]

    @classmethod
    def from_records(cls, records: Any) -> "KnowledgeBase":
        """Build from plain JSON-like records, validating their shape first."""
        errors = sorted(_validator.iter_errors(records), key=lambda e: list(e.path))
        if errors:
            messages = ", ".join(error.message for error in errors)
            raise KnowledgeBaseError(f"knowledge base validation failed: {messages}")
        return cls(KnowledgeEntry.from_dict(record) for record in records)


def load_knowledge_base(path: Path | str) -> KnowledgeBase:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        try:
            records = json.load(handle)
        except json.JSONDecodeError as exc:
            raise KnowledgeBaseError(f"{path} is not valid JSON: {exc}") from exc
    kb = KnowledgeBase.from_records(records)
    logger.info("Loaded %d knowledge base entries from %s", len(kb), path)
    return kb
