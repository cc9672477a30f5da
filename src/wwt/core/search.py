"""Token-overlap matching of free-text queries against record descriptions."""

from __future__ import annotations

import string
from collections.abc import Iterable

from wwt.core.types import Match, Record

_STRIP = string.punctuation


def tokenize(text: str) -> list[str]:
    """Split *text* into lowercase whitespace-delimited tokens.

    Surrounding punctuation is stripped from each token, so ``"server?"``
    and ``"(server)"`` both become ``"server"``. Tokens that are pure
    punctuation are dropped.
    """
    tokens = []
    for raw in text.lower().split():
        token = raw.strip(_STRIP)
        if token:
            tokens.append(token)
    return tokens


def similarity(query: str, description: str, *, min_substring_len: int = 3) -> float:
    """Return the fraction of distinct query tokens found in *description*.

    A query token counts when it equals a description token, or when it is
    at least *min_substring_len* characters long and occurs inside one.
    Returns ``0.0`` for a query with no tokens.
    """
    wanted = list(dict.fromkeys(tokenize(query)))
    if not wanted:
        return 0.0
    have = set(tokenize(description))
    if not have:
        return 0.0

    hits = 0
    for token in wanted:
        if token in have:
            hits += 1
        elif len(token) >= min_substring_len and any(token in h for h in have):
            hits += 1
    return hits / len(wanted)


def rank(
    query: str,
    records: Iterable[Record],
    *,
    min_score: float = 0.0,
    min_substring_len: int = 3,
    limit: int | None = None,
) -> list[Match]:
    """Rank *records* by how well their description matches *query*.

    Records scoring zero or below *min_score* are left out. The sort is
    stable, so equal scores keep the order the records were given in.
    """
    results: list[Match] = []
    for record in records:
        score = similarity(query, record.description, min_substring_len=min_substring_len)
        if score <= 0.0 or score < min_score:
            continue
        results.append(Match(record=record, score=score))
    results.sort(key=lambda m: m.score, reverse=True)
    if limit is not None:
        return results[:limit]
    return results
