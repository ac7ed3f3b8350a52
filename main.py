#!/usr/bin/env python3
"""
Main entry point for the n-gram fuzzy search engine.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from ngram_search import FuzzySearchEngine
import config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fuzzy record lookup over character n-gram indexes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Start interactive search
  python main.py --corpus-file ./names.tsv         # Use custom records file
  python main.py --query "jon smth"                # Single query mode
  python main.py --index-type merged --stats       # Merged index, show statistics
        """
    )

    parser.add_argument(
        "--corpus-file",
        type=str,
        default=None,
        help="File of key<TAB>text records (default: data/records.tsv)"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of results to return (default: 10)"
    )

    parser.add_argument(
        "--depth",
        type=int,
        default=None,
        help="Maximum gram length minus one (default: 6)"
    )

    parser.add_argument(
        "--index-type",
        choices=["inverted", "merged"],
        default=None,
        help="Index representation (default: inverted)"
    )

    parser.add_argument(
        "--no-bounds",
        action="store_true",
        help="Do not wrap records and queries in start/end markers"
    )

    parser.add_argument(
        "--build-only",
        action="store_true",
        help="Only build the index, don't start interactive search"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    return parser


def main(argv=None):
    """Main entry point for the search engine."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    overrides = {}
    if args.depth is not None:
        overrides["NGRAM_DEPTH"] = args.depth
    if args.index_type is not None:
        overrides["INDEX_TYPE"] = args.index_type
    if args.no_bounds:
        overrides["BOUNDED"] = False

    try:
        engine = FuzzySearchEngine(corpus_file=args.corpus_file, config_dict=overrides)
    except Exception as e:
        print(f"Error initializing search engine: {e}")
        sys.exit(1)

    try:
        engine.build_index()
    except Exception as e:
        print(f"Error building index: {e}")
        sys.exit(1)

    if args.stats:
        stats = engine.get_stats()
        print("\n=== Index Statistics ===")
        for key, value in stats.items():
            print(f"{key}: {value}")

    if args.build_only:
        print("Index building complete. Exiting.")
        return

    if args.query is not None:
        try:
            results = engine.search(args.query, top_k=args.top_k)
            engine.result_formatter.print_results_table(results, engine.records, args.query)
        except Exception as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
    else:
        try:
            engine.interactive_search()
        except KeyboardInterrupt:
            print("\nExiting.")
        except Exception as e:
            print(f"Error in interactive mode: {e}")
            sys.exit(1)


if __name__ == "__main__":
    main()
