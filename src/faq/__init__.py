"""
Sentinel FAQ Assistant
Deterministic keyword and token-overlap matching over a curated knowledge base
"""

from .knowledge import KnowledgeBase, KnowledgeBaseError, KnowledgeEntry
from .matcher import FaqMatcher, MatchResult

__all__ = ['FaqMatcher', 'KnowledgeBase', 'KnowledgeBaseError', 'KnowledgeEntry', 'MatchResult']
