"""
Result ranking for gram-overlap queries.

Both index representations reduce a query to a mapping of key -> number of
shared grams. This module turns that mapping into an ordered result list.
"""

import itertools
from typing import Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

K = TypeVar("K", bound=Hashable)

# Types whose instances are totally ordered among each other
_NUMERIC_TYPES = frozenset({bool, int, float})
_TEXT_TYPES = (frozenset({str}), frozenset({bytes}))


def _fallback_key(key: Hashable) -> Tuple[str, str]:
    return type(key).__qualname__, repr(key)


def order_ties(keys: Iterable[K]) -> List[K]:
    """
    Order keys that share the same count.

    Keys are sorted naturally only when the whole group is numeric, all
    ``str`` or all ``bytes``. Any other group (frozensets, tuples, mixed
    types, custom objects) is sorted by (type name, repr).

    Args:
        keys: Keys with equal scores.

    Returns:
        The keys in a deterministic order.
    """
    keys = list(keys)
    types = frozenset(type(key) for key in keys)
    if types <= _NUMERIC_TYPES or types in _TEXT_TYPES:
        return sorted(keys)
    return sorted(keys, key=_fallback_key)


def rank(counts: Dict[K, int], limit: Optional[int] = None) -> List[Tuple[K, int]]:
    """
    Rank keys by overlap count.

    Keys with a zero count are dropped. Equal counts are ordered by
    order_ties(), so the result never depends on insertion order.

    Args:
        counts: Mapping of key to number of matching grams.
        limit: Maximum number of results to return. If None, returns all.

    Returns:
        List of (key, count) tuples sorted by count descending.
    """
    scored = sorted(((key, count) for key, count in counts.items() if count > 0),
                    key=lambda item: -item[1])
    ranked = []
    for count, group in itertools.groupby(scored, key=lambda item: item[1]):
        ranked.extend((key, count) for key in order_ties(key for key, _ in group))
    if limit is not None:
        ranked = ranked[:max(0, limit)]
    return ranked


def keys_only(ranked: List[Tuple[K, int]]) -> List[K]:
    return [key for key, _ in ranked]
