#!/usr/bin/env python3
"""
Example usage of the n-gram fuzzy search engine.

This script demonstrates how to use the indexes and the engine
programmatically.
"""

import sys
import time
from pathlib import Path

# Add parent directory to path to import ngram_search
sys.path.append(str(Path(__file__).parent.parent))

from ngram_search import FuzzySearchEngine, InvertedIndex, MergedIndex, Queryable, to_merged


def basic_search_example():
    """Index a few strings and run fuzzy queries."""
    print("=== Basic Search Example ===")

    index = InvertedIndex()
    for key, text in [(1, "apple pie"), (2, "apple tart"), (3, "pineapple"), (4, "maple syrup")]:
        index.insert(key, text)

    for query in ["aple", "pie", "sirup"]:
        print(f"'{query}': {index.query_scored(query)}")


def boundary_example():
    """Show how boundary markers favour prefix matches."""
    print("\n=== Boundary Example ===")

    index = InvertedIndex()
    index.insert_bounded("pleased", "bar")
    index.insert_bounded("blazed", "foobar")

    print(f"query('bar'):         {index.query_scored('bar')}")
    print(f"query_bounded('bar'): {index.query_bounded_scored('bar')}")


def accumulation_example():
    """Build up one key's text across several inserts."""
    print("\n=== Merged Index Example ===")

    index = MergedIndex()
    index.insert("for example", "lorem ipsum")
    index.insert("for example", "dolor sit amet")
    print(f"'ipsum': {index.query('ipsum')}")
    print(f"'amet':  {index.query('amet')}")


def show_top(index: Queryable, query: str) -> None:
    """Works with either representation."""
    print(f"{type(index).__name__}: {index.query(query, limit=3)}")


def conversion_example():
    """Convert an inverted index and compare results."""
    print("\n=== Conversion Example ===")

    inverted = InvertedIndex()
    for key, text in [("a", "Renée"), ("b", "Rene"), ("c", "Irene")]:
        inverted.insert(key, text)
    merged = to_merged(inverted)
    show_top(inverted, "RENEE")
    show_top(merged, "RENEE")


def engine_example():
    """Search the bundled records file and time the queries."""
    print("\n=== Engine Example ===")

    engine = FuzzySearchEngine()
    engine.build_index()
    for key, value in engine.get_stats().items():
        print(f"  {key}: {value}")

    for query in ["jon smth", "zoe", "renee francois"]:
        start_time = time.time()
        results = engine.search(query, top_k=3)
        elapsed = time.time() - start_time
        print(f"'{query}': {results} in {elapsed:.4f}s")


def main():
    """Run all examples."""
    print("N-gram Fuzzy Search - Example Usage")
    print("=" * 50)

    try:
        basic_search_example()
        boundary_example()
        accumulation_example()
        conversion_example()
        engine_example()

        print("\n" + "=" * 50)
        print("All examples completed successfully!")

    except Exception as e:
        print(f"Error running examples: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
