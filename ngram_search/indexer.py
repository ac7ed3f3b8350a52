"""
Inverted n-gram index construction and querying.

This module maps each gram to the set of keys whose text produced it (the
gram's posting list). A query scores every key by how many of the query's
grams list it.
"""

import logging
from collections import Counter, defaultdict
from typing import Dict, FrozenSet, Generic, Hashable, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from .grams import DEFAULT_DEPTH, generate, wrap
from .ranker import keys_only, rank

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


class InvertedIndex(Generic[K]):
    """Gram -> keys inverted index."""

    def __init__(self, depth: int = DEFAULT_DEPTH):
        """
        Initialize an empty index.

        Args:
            depth: Maximum gram length minus one, fixed for the index lifetime.
        """
        self._depth = depth
        self._index: Dict[str, Set[K]] = defaultdict(set)

    @property
    def depth(self) -> int:
        return self._depth

    def insert(self, key: K, text: str) -> None:
        """
        Add ``key`` to the posting list of every gram of ``text``.

        Reinserting the same text under the same key changes nothing.

        Args:
            key: Hashable identifier returned by later queries.
            text: Text to index under the key.
        """
        self.add_grams(key, generate(text, self._depth))

    def insert_bounded(self, key: K, text: str) -> None:
        self.insert(key, wrap(text))

    def add_grams(self, key: K, grams: Iterable[str]) -> None:
        """Add ``key`` to the posting list of each gram in ``grams``."""
        added = 0
        for gram in grams:
            postings = self._index[gram]
            if key not in postings:
                postings.add(key)
                added += 1
        logger.debug("Indexed %r: %d new postings", key, added)

    def _counts(self, grams: Set[str]) -> Counter:
        counts = Counter()
        for gram in grams:
            postings = self._index.get(gram)
            if postings:
                counts.update(postings)
        return counts

    def query_scored(self, text: str, limit: Optional[int] = None) -> List[Tuple[K, int]]:
        """
        Rank keys by the number of distinct query grams whose posting list
        contains them.

        Args:
            text: Query text.
            limit: Maximum number of results. If None, returns all matches.

        Returns:
            List of (key, matching gram count) tuples, best match first.
            Ties are broken by the keys' natural order.
        """
        return rank(self._counts(generate(text, self._depth)), limit=limit)

    def query_bounded_scored(self, text: str, limit: Optional[int] = None) -> List[Tuple[K, int]]:
        return self.query_scored(wrap(text), limit=limit)

    def query(self, text: str, limit: Optional[int] = None) -> List[K]:
        return keys_only(self.query_scored(text, limit=limit))

    def query_bounded(self, text: str, limit: Optional[int] = None) -> List[K]:
        return keys_only(self.query_bounded_scored(text, limit=limit))

    def postings(self, gram: str) -> FrozenSet[K]:
        """Return the keys listed under ``gram`` (empty if the gram is unknown)."""
        return frozenset(self._index.get(gram, ()))

    def items(self) -> Iterator[Tuple[str, FrozenSet[K]]]:
        for gram, keys in self._index.items():
            yield gram, frozenset(keys)

    def keys(self) -> Set[K]:
        """Return every key that appears in at least one posting list."""
        found = set()
        for postings in self._index.values():
            found.update(postings)
        return found

    def pairs(self) -> Iterator[Tuple[K, str]]:
        """Yield the (key, gram) relation stored by the index."""
        for gram, postings in self._index.items():
            for key in postings:
                yield key, gram

    def stats(self) -> Dict[str, int]:
        """
        Summarize the index.

        Returns:
            Dictionary with gram, key and total posting counts.
        """
        return {
            "depth": self._depth,
            "num_grams": len(self._index),
            "num_keys": len(self.keys()),
            "num_postings": sum(len(postings) for postings in self._index.values()),
        }

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, gram: object) -> bool:
        return gram in self._index

    def __repr__(self) -> str:
        return f"InvertedIndex(depth={self._depth}, grams={len(self._index)})"
