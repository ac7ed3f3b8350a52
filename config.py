"""
Configuration settings for the n-gram fuzzy search engine.

This module contains all configurable parameters for the search engine.
Modify these values to customize the behavior of the system.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent
DATA_DIR = PROJECT_ROOT / "data"
CORPUS_FILE = DATA_DIR / "records.tsv"

# Corpus settings
RECORD_DELIMITER = "\t"  # Separates key from text; lines without it use the line as both
RECORD_ENCODING = "utf-8"

# Index settings
NGRAM_DEPTH = 6  # Maximum gram length minus one
INDEX_TYPE = "inverted"  # Index representation: "inverted" or "merged"
BOUNDED = True  # Wrap indexed text and queries in start/end markers

# Search settings
TOP_K_RESULTS = 10  # Number of results to return

# Result formatting
SNIPPET_CHARS = 60  # Maximum characters of record text shown per result
KEY_CHARS = 30  # Maximum characters of the key column
SHOW_SCORES = True  # Show gram-overlap scores in results
SHOW_DISTANCE = True  # Show edit distance between query and record text

# Logging settings
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
