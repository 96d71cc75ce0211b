"""
Shared fixtures: a small in-memory lexicon so expected scores can be worked
out by hand.
"""
import os
import sys
from typing import List

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from prose_vader.core.analyzer import VaderAnalyzer  # noqa: E402
from prose_vader.core.models import Token  # noqa: E402
from prose_vader.core.resources import ResourceTables  # noqa: E402

LEXICON = [
    ("good", 1.9),
    ("bad", -2.5),
    ("great", 3.1),
    ("love", 3.2),
    ("hate", -2.7),
    ("nice", 1.8),
    ("kind", 2.4),
    ("sort", 0.5),
]

IDIOMS = [
    ("good riddance", -1.0),
    ("yeah right", -2.0),
]


def toks(text: str) -> List[Token]:
    """Whitespace tokenizer for tests; punctuation must be space separated."""
    return [Token(w, "") for w in text.split()]


@pytest.fixture
def tables() -> ResourceTables:
    return ResourceTables.build(LEXICON, IDIOMS)


@pytest.fixture
def analyzer(tables) -> VaderAnalyzer:
    return VaderAnalyzer(tables)


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "vader_lexicon.txt"
    rows = [f"{w}\t{v}\t0.5\t[1, 2]" for w, v in LEXICON]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def idioms_file(tmp_path):
    path = tmp_path / "vader_idioms.txt"
    path.write_text("\n".join(f"{p},{v}" for p, v in IDIOMS) + "\n", encoding="utf-8")
    return path
