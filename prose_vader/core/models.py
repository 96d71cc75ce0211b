"""
Value objects passed between the tokenizer, the analyzer and the reporters.

    Token        : one word or punctuation mark with its POS tag
    VScore       : neg / neu / pos ratios + normalized compound for a sentence
    SentenceResult: a scored sentence with its per-word valences
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Token:
    """A single token of a sentence, usually a word, with its Penn-tree POS tag."""

    value: str
    pos_tag: str = ""

    def __str__(self) -> str:
        return f"{self.value}:{self.pos_tag}"

    @staticmethod
    def list_to_string(tokens: Optional[List["Token"]]) -> str:
        """Crude readable form of a sentence, one space after every token."""
        if tokens is None:
            return ""
        return "".join(f"{t.value} " for t in tokens)


@dataclass(frozen=True)
class VScore:
    positive: float = 0.0
    neutral: float = 0.0
    negative: float = 0.0
    compound: float = 0.0

    def __str__(self) -> str:
        d = self.to_dict()
        return (
            f"{{'neg': {d['neg']:.3f}, 'neu': {d['neu']:.3f}, "
            f"'pos': {d['pos']:.3f}, 'compound': {d['compound']:.4f}}}"
        )

    def to_dict(self) -> Dict[str, float]:
        # + 0.0 turns a rounded -0.0 into 0.0
        return {
            "neg": round(self.negative, 3) + 0.0,
            "neu": round(self.neutral, 3) + 0.0,
            "pos": round(self.positive, 3) + 0.0,
            "compound": round(self.compound, 4) + 0.0,
        }


@dataclass
class SentenceResult:
    """
    A scored sentence.

    `words` are the tokens left after punctuation filtering and `word_scores`
    is parallel to it (valence before "but" reweighting).
    """

    tokens: List[Token]
    words: List[Token] = field(default_factory=list)
    word_scores: List[float] = field(default_factory=list)
    score: VScore = field(default_factory=VScore)

    @property
    def text(self) -> str:
        return Token.list_to_string(self.tokens).strip()
