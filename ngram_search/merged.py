"""
Merged (forward) n-gram index.

Each key maps to the union of all grams ever inserted under it, so a key's
represented text can be built up across several insert() calls.
"""

import logging
from typing import Dict, FrozenSet, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from .grams import DEFAULT_DEPTH, generate, wrap
from .ranker import keys_only, rank

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class MergedIndex(Generic[K]):
    """Key -> grams index scored by set intersection."""

    def __init__(self, depth: int = DEFAULT_DEPTH):
        self._depth = depth
        self._index: Dict[K, Set[str]] = {}

    @property
    def depth(self) -> int:
        return self._depth

    def insert(self, key: K, text: str) -> None:
        """
        Merge the grams of ``text`` into the gram set stored for ``key``.

        Args:
            key: Hashable identifier returned by later queries.
            text: Text to index under the key.
        """
        self.add_grams(key, generate(text, self._depth))

    def insert_bounded(self, key: K, text: str) -> None:
        self.insert(key, wrap(text))

    def add_grams(self, key: K, grams: Iterable[str]) -> None:
        existing = self._index.get(key)
        if existing is None:
            self._index[key] = set(grams)
        else:
            existing.update(grams)
        logger.debug("Merged grams for %r: %d total", key, len(self._index[key]))

    def query_scored(self, text: str, limit: Optional[int] = None) -> List[Tuple[K, int]]:
        """
        Rank keys by the size of the intersection between their gram set and
        the grams of ``text``.

        Args:
            text: Query text.
            limit: Maximum number of results. If None, returns all matches.

        Returns:
            List of (key, intersection size) tuples, best match first.
        """
        query_grams = generate(text, self._depth)
        if not query_grams:
            return []
        counts = {key: len(grams & query_grams) for key, grams in self._index.items()}
        return rank(counts, limit=limit)

    def query_bounded_scored(self, text: str, limit: Optional[int] = None) -> List[Tuple[K, int]]:
        return self.query_scored(wrap(text), limit=limit)

    def query(self, text: str, limit: Optional[int] = None) -> List[K]:
        return keys_only(self.query_scored(text, limit=limit))

    def query_bounded(self, text: str, limit: Optional[int] = None) -> List[K]:
        return keys_only(self.query_bounded_scored(text, limit=limit))

    def grams(self, key: K) -> FrozenSet[str]:
        """Return the grams stored for ``key`` (empty if the key is unknown)."""
        return frozenset(self._index.get(key, ()))

    def items(self) -> Iterator[Tuple[K, FrozenSet[str]]]:
        for key, grams in self._index.items():
            yield key, frozenset(grams)

    def keys(self) -> Set[K]:
        return set(self._index)

    def pairs(self) -> Iterator[Tuple[K, str]]:
        """Yield the (key, gram) relation stored by the index."""
        for key, grams in self._index.items():
            for gram in grams:
                yield key, gram

    def stats(self) -> Dict[str, int]:
        distinct = set()
        for grams in self._index.values():
            distinct.update(grams)
        return {
            "depth": self._depth,
            "num_grams": len(distinct),
            "num_keys": len(self._index),
            "num_postings": sum(len(grams) for grams in self._index.values()),
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:
        return f"MergedIndex(depth={self._depth}, keys={len(self._index)})"
