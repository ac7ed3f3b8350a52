"""
Conversion between the inverted and merged index representations.

Both indexes store the same key <-> gram relation, so each can be rebuilt
from the other without loss. The target never shares storage with the source.
"""

import logging
from collections import defaultdict
from typing import Dict, Set

from .indexer import InvertedIndex
from .merged import MergedIndex

logger = logging.getLogger(__name__)


def to_inverted(index: MergedIndex) -> InvertedIndex:
    """
    Build an InvertedIndex holding the same relation as a MergedIndex.

    Args:
        index: Source merged index.

    Returns:
        New inverted index with the source's depth.
    """
    inverted = InvertedIndex(depth=index.depth)
    for key, grams in index.items():
        inverted.add_grams(key, grams)
    logger.debug("Converted %d keys to %d grams", len(index), len(inverted))
    return inverted


def to_merged(index: InvertedIndex) -> MergedIndex:
    """
    Build a MergedIndex holding the same relation as an InvertedIndex.

    Args:
        index: Source inverted index.

    Returns:
        New merged index with the source's depth.
    """
    grams_by_key: Dict[object, Set[str]] = defaultdict(set)
    for key, gram in index.pairs():
        grams_by_key[key].add(gram)

    merged = MergedIndex(depth=index.depth)
    for key, grams in grams_by_key.items():
        merged.add_grams(key, grams)
    logger.debug("Converted %d grams to %d keys", len(index), len(merged))
    return merged
