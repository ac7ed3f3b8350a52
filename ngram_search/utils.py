"""
Utility classes for record loading and result formatting.

This module contains helpers used around the indexes: reading (key, text)
records from a delimited file and rendering ranked results to the console.
"""

import logging
from pathlib import Path
from typing import Dict, Hashable, List, Tuple

from rapidfuzz.distance import Levenshtein

from .grams import normalize

logger = logging.getLogger(__name__)


class RecordLoader:
    """Reads (key, text) records from a delimited text file."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def parse_line(self, line: str) -> Tuple[str, str]:
        """
        Split one record line into key and text.

        Args:
            line: A single line without its trailing newline.

        Returns:
            Tuple of (key, text). A line without the delimiter is its own key.
        """
        key, sep, text = line.partition(self.config.RECORD_DELIMITER)
        if not sep:
            return line, line
        return key.strip(), text.strip()

    def load_records(self, path) -> List[Tuple[str, str]]:
        """
        Load records from a file, skipping blank lines.

        Repeated keys are kept as separate records so their texts can
        accumulate in the index.

        Args:
            path: Path to the records file.

        Returns:
            List of (key, text) tuples in file order.
        """
        path = Path(path)
        records = []
        with open(path, "r", encoding=self.config.RECORD_ENCODING) as f:
            for line in f:
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                records.append(self.parse_line(line))
        logger.info("Loaded %d records from %s", len(records), path)
        return records


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def edit_distance(self, query: str, text: str) -> int:
        """Levenshtein distance between the normalized query and text."""
        return Levenshtein.distance(normalize(query), normalize(text))

    def clip(self, text: str, max_chars: int = None) -> str:
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS
        text = text.replace("\n", " ")
        if len(text) <= max_chars:
            return text
        return text[: max(0, max_chars - 1)] + "…"

    def build_rows(self, ranked: List[Tuple[Hashable, int]], records: Dict[Hashable, str],
                   query: str) -> Tuple[List[str], List[List[str]]]:
        """
        Build table headers and rows for ranked results.

        Args:
            ranked: List of (key, score) tuples.
            records: Dictionary mapping key to record text.
            query: The query that produced the results.

        Returns:
            Tuple of (headers, rows).
        """
        headers = ["#", "Key"]
        if self.config.SHOW_SCORES:
            headers.append("Score")
        if self.config.SHOW_DISTANCE:
            headers.append("Dist")
        headers.append("Text")

        rows = []
        for rank, (key, score) in enumerate(ranked, start=1):
            text = records.get(key, "")
            row = [str(rank), self.clip(str(key), self.config.KEY_CHARS)]
            if self.config.SHOW_SCORES:
                row.append(str(score))
            if self.config.SHOW_DISTANCE:
                row.append(str(self.edit_distance(query, text)))
            row.append(self.clip(text))
            rows.append(row)
        return headers, rows

    def render_table(self, headers: List[str], rows: List[List[str]]) -> List[str]:
        """Lay out headers and rows as aligned ASCII lines."""
        widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

        def join(cells):
            return " | ".join(cell.ljust(width) for cell, width in zip(cells, widths))

        lines = [join(headers), "-+-".join("-" * width for width in widths)]
        lines.extend(join(row) for row in rows)
        return lines

    def print_results_table(self, ranked: List[Tuple[Hashable, int]], records: Dict[Hashable, str],
                            query: str) -> None:
        """
        Render ranked results as a clean ASCII table.

        Args:
            ranked: List of (key, score) tuples.
            records: Dictionary mapping key to record text.
            query: The query that produced the results.
        """
        if not ranked:
            print("No matching records found.")
            return

        headers, rows = self.build_rows(ranked, records, query)
        print("\n=== Top Results ===")
        print("\n".join(self.render_table(headers, rows)))
        print()
