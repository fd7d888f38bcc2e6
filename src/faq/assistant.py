#!/usr/bin/env python3
"""
Sentinel FAQ Assistant — Chat Session

Thin conversational shell around the matcher:

  reset()   → clear transcript, post the welcome message
  ask(text) → record the question, answer it, record the reply
  suggestions() → default topic chips offered after every exchange

The matcher decides what to say. This module only keeps the transcript.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .catalog import DEFAULT_SUGGESTIONS, WELCOME_TEXT
from .matcher import FaqMatcher, MatchResult
from .observability import MatchLogRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    """One line of the assistant transcript."""
    role: str  # "user" or "bot"
    text: str
    meta: str  # "You", "Assistant", or the answer's provenance
    sent_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


class AssistantSession:
    """
    Per-visitor chat session.

    Each exchange is independent: the transcript is display history only and
    never influences matching.
    """

    def __init__(
        self,
        matcher: FaqMatcher,
        max_messages: int = 50,
        decision_log: bool = True,
        suggestions: Tuple[str, ...] = DEFAULT_SUGGESTIONS,
    ):
        if max_messages < 1:
            raise ValueError(f"max_messages must be positive, got {max_messages}")
        self.matcher = matcher
        self.max_messages = max_messages
        self.decision_log = decision_log
        self._suggestions = tuple(suggestions)
        self.transcript: List[ChatMessage] = []

    def reset(self) -> Tuple[str, ...]:
        """Clear the transcript and greet the visitor again."""
        self.transcript = []
        self._append(ChatMessage(role="bot", text=WELCOME_TEXT, meta="Assistant"))
        return self.suggestions()

    def ask(self, text: Optional[str]) -> Optional[MatchResult]:
        """
        Answer one question and record both sides of the exchange.
        Blank input is ignored and returns None.
        """
        question = str(text or "").strip()
        if not question:
            return None

        self._append(ChatMessage(role="user", text=question, meta="You"))

        started = time.perf_counter()
        result = self.matcher.answer(question)
        latency_ms = (time.perf_counter() - started) * 1000

        self._append(ChatMessage(role="bot", text=result.text, meta=result.provenance))

        if self.decision_log:
            record = MatchLogRecord.from_result(
                uuid.uuid4().hex, question, result, latency_ms
            )
            logger.info("faq match %s", record.to_dict())

        return result

    def suggestions(self) -> Tuple[str, ...]:
        return self._suggestions

    # ── Private methods ──

    def _append(self, message: ChatMessage) -> None:
        self.transcript.append(message)
        # Cap at max_messages
        self.transcript = self.transcript[-self.max_messages:]
