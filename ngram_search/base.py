"""
Full-text capability interfaces shared by both index representations.

- Queryable: read side (query, query_bounded and their scored variants)
- Indexable: Queryable plus the write side (insert, insert_bounded, add_grams)

Code that only reads can be written against Queryable and accept either an
InvertedIndex or a MergedIndex.
"""

from typing import Hashable, Iterable, List, Optional, Protocol, Tuple, TypeVar, runtime_checkable

K = TypeVar("K", bound=Hashable)


@runtime_checkable
class Queryable(Protocol[K]):
    """Read-only access to an n-gram index."""

    @property
    def depth(self) -> int:
        ...

    def query(self, text: str, limit: Optional[int] = None) -> List[K]:
        """
        Rank known keys by the number of grams they share with ``text``.

        Args:
            text: Query text.
            limit: Maximum number of keys to return. If None, returns all.

        Returns:
            Keys with at least one shared gram, best match first.
        """
        ...

    def query_bounded(self, text: str, limit: Optional[int] = None) -> List[K]:
        """Same as query() with ``text`` wrapped in boundary markers."""
        ...

    def query_scored(self, text: str, limit: Optional[int] = None) -> List[Tuple[K, int]]:
        ...

    def query_bounded_scored(self, text: str, limit: Optional[int] = None) -> List[Tuple[K, int]]:
        ...


@runtime_checkable
class Indexable(Queryable[K], Protocol[K]):
    """An index that can also be written to."""

    def insert(self, key: K, text: str) -> None:
        """
        Associate every gram of ``text`` with ``key``.

        Args:
            key: Hashable identifier returned by later queries.
            text: Text to index under the key.
        """
        ...

    def insert_bounded(self, key: K, text: str) -> None:
        ...

    def add_grams(self, key: K, grams: Iterable[str]) -> None:
        ...
