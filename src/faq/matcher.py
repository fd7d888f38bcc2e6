"""Lexical FAQ matcher.

Scoring is additive per entry:

  exact question match   +8
  each keyword contained +3
  each shared token      +1  (repeated user tokens count every time)

The highest-scoring entry wins; ties go to the entry declared first.
Anything below the confidence threshold falls back to a topic hint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from .catalog import FALLBACK_TEXT
from .knowledge import KnowledgeBase, KnowledgeEntry
from .normalize import normalize, tokenize

EXACT_MATCH_POINTS = 8
KEYWORD_POINTS = 3
TOKEN_POINTS = 1

MATCH_THRESHOLD = 4

MATCHED_PREFIX = "Matched FAQ: "
FALLBACK_PROVENANCE = "Suggested topics"


@dataclass(frozen=True)
class MatchResult:
    text: str
    provenance: str
    score: int
    entry_id: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.entry_id is not None


def score(user_text: Any, entry: KnowledgeEntry) -> int:
    normalized = normalize(user_text)
    if not normalized:
        return 0

    total = 0

    question = normalize(entry.question)
    if normalized == question:
        total += EXACT_MATCH_POINTS

    for keyword in entry.keywords:
        needle = normalize(keyword)
        if needle and needle in normalized:
            total += KEYWORD_POINTS

    question_tokens = set(tokenize(question))
    for token in tokenize(normalized):
        if token in question_tokens:
            total += TOKEN_POINTS

    return total


def fallback_result(fallback_text: str = FALLBACK_TEXT) -> MatchResult:
    return MatchResult(text=fallback_text, provenance=FALLBACK_PROVENANCE, score=0)


def answer(
    user_text: Any,
    kb: Iterable[KnowledgeEntry],
    threshold: int = MATCH_THRESHOLD,
    fallback_text: str = FALLBACK_TEXT,
) -> MatchResult:
    best: Optional[KnowledgeEntry] = None
    best_score = 0

    for entry in kb:
        current = score(user_text, entry)
        if current > best_score:
            best_score = current
            best = entry

    if best is not None and best_score >= threshold:
        return MatchResult(
            text=best.answer,
            provenance=MATCHED_PREFIX + best.question,
            score=best_score,
            entry_id=best.id,
        )
    return fallback_result(fallback_text)


class FaqMatcher:
    """Binds a knowledge base and threshold policy behind ``answer``.

    Holds no per-query state; one instance can serve concurrent callers.
    """

    def __init__(
        self,
        kb: KnowledgeBase,
        threshold: int = MATCH_THRESHOLD,
        fallback_text: str = FALLBACK_TEXT,
    ) -> None:
        if threshold < 1:
            raise ValueError(f"match threshold must be positive, got {threshold}")
        self._kb = kb
        self._threshold = threshold
        self._fallback_text = fallback_text

    @property
    def knowledge_base(self) -> KnowledgeBase:
        return self._kb

    @property
    def threshold(self) -> int:
        return self._threshold

    def answer(self, user_text: Any) -> MatchResult:
        return answer(
            user_text,
            self._kb,
            threshold=self._threshold,
            fallback_text=self._fallback_text,
        )

    def rank(
        self, user_text: Any, limit: Optional[int] = None
    ) -> List[Tuple[KnowledgeEntry, int]]:
        """Entries with a non-zero score, best first; ties keep KB order.

        Diagnostic view only. Display decisions go through ``answer``.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"rank limit must not be negative, got {limit}")
        scored = [(entry, score(user_text, entry)) for entry in self._kb]
        ranked = sorted(
            (pair for pair in scored if pair[1] > 0),
            key=lambda pair: pair[1],
            reverse=True,
        )
        return ranked if limit is None else ranked[:limit]
