"""Text canonicalisation shared by the scorer and the knowledge base."""

from __future__ import annotations

import re
from typing import Any, List

_NON_WORD = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Any) -> str:
    """Lower-case ``text`` and reduce it to ``[a-z0-9 ]`` with single spaces.

    Missing values (``None``, empty string) normalize to ``""``.
    """
    lowered = str(text or "").lower()
    lowered = _NON_WORD.sub(" ", lowered)
    return _WHITESPACE.sub(" ", lowered).strip()


def tokenize(text: Any) -> List[str]:
    return [token for token in normalize(text).split(" ") if token]
