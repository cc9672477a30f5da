"""wwt core types and matching."""

from wwt.core.search import rank, similarity, tokenize
from wwt.core.types import Match, Record

__all__ = ["Match", "Record", "rank", "similarity", "tokenize"]
