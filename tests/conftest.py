import sys
from pathlib import Path

import pytest

# Ensure project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ngram_search import InvertedIndex, MergedIndex

CORPUS = [
    ("apple", "apple pie"),
    ("tart", "apple tart"),
    ("pine", "Pineapple"),
    ("maple", "maple syrup"),
    ("renee", "Renée François"),
    ("rene", "RENE"),
    ("zoe", "Zoë"),
]

QUERIES = ["aple", "pie", "SIRUP", "renee", "zoe", "", "x", "pineapple tart"]


@pytest.fixture
def corpus():
    return list(CORPUS)


@pytest.fixture
def queries():
    return list(QUERIES)


@pytest.fixture(params=[InvertedIndex, MergedIndex], ids=["inverted", "merged"])
def index_cls(request):
    return request.param


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / "records.tsv"
    path.write_text(
        "pleased\tpleased\n"
        "blazed\tblazed\n"
        "\n"
        "foobar\tfoobar\n"
        "just a line\n"
        "renee\tRenée François\n",
        encoding="utf-8",
    )
    return path
