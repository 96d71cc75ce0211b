"""
Core scoring components.

Contains the resource tables, the token/score models and the VADER analyzer.
"""

from prose_vader.core.models import SentenceResult, Token, VScore
from prose_vader.core.resources import ResourceMissing, ResourceTables, load_resources
from prose_vader.core.analyzer import VaderAnalyzer

__all__ = [
    "SentenceResult", "Token", "VScore",
    "ResourceMissing", "ResourceTables", "load_resources",
    "VaderAnalyzer",
]
