"""
prose_vader: VADER sentiment scoring for book-length prose, sentence by sentence.
"""

from prose_vader.core import (
    ResourceMissing,
    ResourceTables,
    SentenceResult,
    Token,
    VaderAnalyzer,
    VScore,
    load_resources,
)

__version__ = "1.0.0"

__all__ = [
    "ResourceMissing", "ResourceTables", "SentenceResult", "Token",
    "VaderAnalyzer", "VScore", "load_resources",
]
