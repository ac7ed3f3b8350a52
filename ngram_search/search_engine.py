"""
Main FuzzySearchEngine class that ties records, index and output together.

This module contains the FuzzySearchEngine class which loads (key, text)
records, builds an n-gram index of the configured representation and
answers fuzzy queries against it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Hashable, List, Optional, Tuple

from .convert import to_inverted, to_merged
from .indexer import InvertedIndex
from .merged import MergedIndex
from .utils import RecordLoader, ResultFormatter
import config

logger = logging.getLogger(__name__)

INDEX_TYPES = {
    "inverted": InvertedIndex,
    "merged": MergedIndex,
}

RECORD_TEXT_SEPARATOR = "; "


class FuzzySearchEngine:
    """
    Search engine that provides a unified interface for fuzzy record lookup.

    The engine owns one index (inverted or merged) and the record texts used
    for display. All ranking is delegated to the index.
    """

    def __init__(self, corpus_file: Optional[str] = None, config_dict: Optional[Dict] = None):
        """
        Initialize the FuzzySearchEngine.

        Args:
            corpus_file: Path to the records file. If None, uses config default.
            config_dict: Optional configuration dictionary to override defaults.
        """
        self.config = self._load_config(config_dict)
        self.corpus_file = Path(corpus_file) if corpus_file else Path(self.config.CORPUS_FILE)

        if self.config.INDEX_TYPE not in INDEX_TYPES:
            raise ValueError(
                f"Unknown index type {self.config.INDEX_TYPE!r}; expected one of {sorted(INDEX_TYPES)}"
            )

        self.loader = RecordLoader(self.config)
        self.result_formatter = ResultFormatter(self.config)

        self.index_type = self.config.INDEX_TYPE
        self.records: Dict[Hashable, str] = {}
        self.index = INDEX_TYPES[self.index_type](depth=self.config.NGRAM_DEPTH)
        self._index_built = False

    def _load_config(self, config_dict: Optional[Dict]) -> Any:
        """Load configuration from config module, overridden by a dictionary."""
        if config_dict:
            class Config:
                def __init__(self, overrides):
                    for key in dir(config):
                        if key.isupper():
                            setattr(self, key, getattr(config, key))
                    for key, value in overrides.items():
                        setattr(self, key, value)
            return Config(config_dict)
        return config

    def add(self, key: Hashable, text: str) -> None:
        """
        Index one record.

        Args:
            key: Record key.
            text: Record text. Texts for a repeated key accumulate in the
                index and are joined with "; " for display.
        """
        if self.config.BOUNDED:
            self.index.insert_bounded(key, text)
        else:
            self.index.insert(key, text)
        previous = self.records.get(key)
        if previous is None:
            self.records[key] = text
        elif text not in previous.split(RECORD_TEXT_SEPARATOR):
            self.records[key] = previous + RECORD_TEXT_SEPARATOR + text

    def load_records(self) -> List[Tuple[str, str]]:
        """Read every record from the corpus file."""
        return self.loader.load_records(self.corpus_file)

    def build_index(self, force_rebuild: bool = False) -> None:
        """
        Build the index from the corpus file.

        Args:
            force_rebuild: If True, rebuild index even if already built.
        """
        if self._index_built and not force_rebuild:
            logger.info("Index already built. Use force_rebuild=True to rebuild.")
            return

        self.records = {}
        self.index = INDEX_TYPES[self.index_type](depth=self.config.NGRAM_DEPTH)
        pairs = self.load_records()
        for key, text in pairs:
            self.add(key, text)

        self._index_built = True
        logger.info("Built %r from %d records", self.index, len(pairs))

    def search(self, query: str, top_k: Optional[int] = None) -> List[Tuple[Hashable, int]]:
        """
        Search for records matching the given query.

        Args:
            query: Search query string.
            top_k: Number of results to return. If None, uses config default.

        Returns:
            List of (key, score) tuples sorted by relevance.
        """
        if not self._index_built and not self.records:
            raise RuntimeError("Index not built. Call build_index() first.")

        if top_k is None:
            top_k = self.config.TOP_K_RESULTS

        if self.config.BOUNDED:
            return self.index.query_bounded_scored(query, limit=top_k)
        return self.index.query_scored(query, limit=top_k)

    def convert(self) -> None:
        """
        Swap the live index to the other representation.

        Later rebuilds keep the converted representation.
        """
        if isinstance(self.index, InvertedIndex):
            self.index = to_merged(self.index)
            self.index_type = "merged"
        else:
            self.index = to_inverted(self.index)
            self.index_type = "inverted"
        logger.info("Converted index to %r", self.index)

    def interactive_search(self) -> None:
        """
        Start an interactive search session.

        Type 'exit' or 'quit' to end the session.
        """
        if not self._index_built and not self.records:
            print("Building index first...")
            self.build_index()

        print("\n=== Interactive Search ===")
        print("Type 'exit' or 'quit' to quit.")

        while True:
            try:
                query = input("Enter search query: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nExiting.")
                break

            if not query:
                continue
            if query.lower() in ("exit", "quit"):
                print("Goodbye!")
                break

            results = self.search(query)
            self.result_formatter.print_results_table(results, self.records, query)

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the built index.

        Returns:
            Dictionary containing various statistics.
        """
        if not self._index_built and not self.records:
            return {"error": "Index not built"}

        stats = {
            "index_type": type(self.index).__name__,
            "representation": self.index_type,
            "bounded": self.config.BOUNDED,
            "num_records": len(self.records),
        }
        stats.update(self.index.stats())
        return stats
