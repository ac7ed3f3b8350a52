"""
N-gram Fuzzy Search

An in-memory approximate full-text matching engine based on overlapping
character n-grams.

Main components:
- generate / wrap: Gram generation and boundary markers
- InvertedIndex: gram -> keys index
- MergedIndex: key -> grams index
- to_inverted / to_merged: Conversion between the two representations
- Queryable / Indexable: Capability protocols both indexes satisfy
- FuzzySearchEngine: Record-file search engine built on either index
"""

from .grams import DEFAULT_DEPTH, END_MARKER, START_MARKER, generate, normalize, wrap
from .base import Indexable, Queryable
from .indexer import InvertedIndex
from .merged import MergedIndex
from .convert import to_inverted, to_merged
from .ranker import rank
from .search_engine import FuzzySearchEngine
from .utils import RecordLoader, ResultFormatter

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_DEPTH",
    "START_MARKER",
    "END_MARKER",
    "generate",
    "normalize",
    "wrap",
    "Queryable",
    "Indexable",
    "InvertedIndex",
    "MergedIndex",
    "to_inverted",
    "to_merged",
    "rank",
    "FuzzySearchEngine",
    "RecordLoader",
    "ResultFormatter",
]
