"""
Sentence splitting, tokenization and POS tagging with NLTK.

    parser = ProseParser()
    parser.parse("It was good. It wasn't great!")
    # → [[It:PRP, was:VBD, good:JJ, .:.], [It:PRP, was:VBD, n't:RB, great:JJ, !:.]]

Punctuation comes back as separate tokens and case is preserved, which the
analyzer relies on for "!"/"?" emphasis, "but" weighting and ALLCAPS.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import nltk

from prose_vader.core.models import Token

logger = logging.getLogger(__name__)

# (nltk.data path, download package)
NLTK_RESOURCES = [
    ("tokenizers/punkt_tab", "punkt_tab"),
    ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng"),
]


class TokenizationError(ValueError):
    """The tokenizer / tagger broke its contract, e.g. mismatched word and tag counts."""


def ensure_nltk_data(download: bool = True) -> None:
    """Make sure the punkt and tagger models are available, fetching them if allowed."""
    for path, package in NLTK_RESOURCES:
        try:
            nltk.data.find(path)
        except LookupError:
            if not download:
                raise
            logger.info("NLTK: downloading %s", package)
            nltk.download(package, quiet=True)


class ProseParser:
    """Splits raw text into sentences of POS-tagged tokens."""

    def __init__(self, language: str = "english", download: bool = True):
        self.language = language
        ensure_nltk_data(download)

    def get_sentences(self, text: str) -> List[str]:
        return nltk.sent_tokenize(text, language=self.language)

    def get_tokens(self, sentence: str) -> List[str]:
        return nltk.word_tokenize(sentence, language=self.language, preserve_line=True)

    def get_tags(self, words: List[str]) -> List[str]:
        return [tag for _, tag in nltk.pos_tag(words)]

    def parse(self, text: Optional[str]) -> Optional[List[List[Token]]]:
        """
        Convert text to a list of sentences, each a list of tokens with POS tags.

        Returns None for None text. Raises TokenizationError when the tagger
        does not return one tag per word.
        """
        if text is None:
            return None

        sentences: List[List[Token]] = []
        for sentence_str in self.get_sentences(text):
            words = self.get_tokens(sentence_str)
            tags = self.get_tags(words)
            if len(words) != len(tags):
                raise TokenizationError(
                    f"unmatched words / posTags in nlp-parser ({len(words)} != {len(tags)})"
                )
            sentences.append([Token(w, t) for w, t in zip(words, tags)])
        return sentences
