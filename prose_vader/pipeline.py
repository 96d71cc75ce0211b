"""
Text → per-sentence VADER scores.

Wires the NLTK parser to the analyzer; both are built lazily once per
process and shared, since neither holds per-call state.
"""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from prose_vader import config
from prose_vader.core.analyzer import VaderAnalyzer
from prose_vader.core.models import SentenceResult
from prose_vader.core.resources import load_resources
from prose_vader.utils.nlp import ProseParser


@lru_cache
def get_analyzer() -> VaderAnalyzer:
    return VaderAnalyzer(load_resources(config.LEXICON_PATH, config.IDIOMS_PATH))


@lru_cache
def get_parser() -> ProseParser:
    return ProseParser(download=config.NLTK_DOWNLOAD)


def analyse_text(text: str,
                 analyzer: Optional[VaderAnalyzer] = None,
                 parser: Optional[ProseParser] = None) -> List[SentenceResult]:
    """Split `text` into sentences and score each of them, in text order."""
    analyzer = analyzer or get_analyzer()
    parser = parser or get_parser()
    sentences = parser.parse(text) or []
    return [analyzer.analyse(sentence) for sentence in sentences]


def mean_compound(results: List[SentenceResult]) -> float:
    if not results:
        return 0.0
    return sum(r.score.compound for r in results) / len(results)
