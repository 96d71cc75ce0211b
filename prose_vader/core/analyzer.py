"""
VADER: rule-based sentiment intensity for English prose, sentence by sentence.

Follows Hutto & Gilbert (2014):
  - lexicon valence per word, ALL-CAPS emphasis when only some words are caps
  - booster / dampener scalars from up to 3 preceding words (×1, ×0.95, ×0.9)
  - negation scope over the 2nd and 3rd preceding words, "never so/this" amplifiers
  - idiom overrides, "least" negation
  - "but" contrastive weighting (×0.5 before, ×1.5 after)
  - "!" and "?" emphasis, alpha-normalized compound

Public API:
    analyzer = VaderAnalyzer(load_resources())
    score    = analyzer.analyse_sentence([Token("Good"), Token(".")])
    str(score)
    # → {'neg': 0.000, 'neu': 0.000, 'pos': 1.000, 'compound': 0.4404}

The analyzer holds no per-sentence state; one instance may score sentences
from any number of threads.
"""
from __future__ import annotations

import math
from typing import List, Optional, Sequence

from prose_vader.core.models import SentenceResult, Token, VScore
from prose_vader.core.resources import B_DECR, ResourceTables

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Empirically derived mean sentiment intensity rating increase for ALLCAPS emphasis
C_INCR = 0.733

# Negation scalar
N_SCALAR = -0.74

# Alpha normalization value, approximates the max expected raw sum
ALPHA = 15.0

# Booster weights for the 2nd and 3rd preceding words
DIST2_WEIGHT = 0.95
DIST3_WEIGHT = 0.9

# "never so good" / "never this good" amplify instead of negating
NEVER_DIST2_SCALAR = 1.5
NEVER_DIST3_SCALAR = 1.25

IDIOM_MAX_SIZE = 5

# Exclamation points (max 4) and question marks (2-3 scaled, 4+ capped)
EP_INCR = 0.292
EP_MAX = 4
QM_INCR = 0.18
QM_MAX = 0.96

BUT_BEFORE = 0.5
BUT_AFTER = 1.5

# "don't know", "can't feel" ... are not negations of what follows
NEGATION_EXCEPTIONS = frozenset({"know", "take", "feel", "like", "want", "wanna"})


# ---------------------------------------------------------------------------
# Token stream helpers
# ---------------------------------------------------------------------------

def filter_punctuation(sentence: Optional[Sequence[Token]]) -> Optional[List[Token]]:
    """
    Drop every token of length <= 1. This removes punctuation but also the
    one-letter words "a" and "I", which carry no sentiment anyway.
    """
    if sentence is None:
        return None
    return [t for t in sentence if len(t.value) > 1]


def is_upper(word: Optional[str]) -> bool:
    """True if the word has no a-z characters (digits and punctuation pass)."""
    if word is None:
        return False
    return not any("a" <= ch <= "z" for ch in word)


def is_all_cap_differential(sentence: Optional[Sequence[Token]]) -> bool:
    """True if some, but not all, tokens of the sentence are in caps."""
    if not sentence:
        return False
    caps_count = sum(1 for t in sentence if is_upper(t.value))
    differential = len(sentence) - caps_count
    return 0 < differential < len(sentence)


def _word_equals(words: Sequence[str], index: int, word: str) -> bool:
    if 0 <= index < len(words):
        return words[index].lower() == word
    return False


def _lcase_word_at(words: Sequence[str], index: int) -> str:
    if 0 <= index < len(words):
        return words[index].lower()
    return ""


# ---------------------------------------------------------------------------
# Context modifiers / negation
# ---------------------------------------------------------------------------

def scalar_inc_dec(word: str, valence: float, is_caps_differential: bool,
                   tables: ResourceTables) -> float:
    """
    Booster / dampener scalar contributed by `word` to a sentiment word of
    the given (currently accumulated) valence. 0.0 for non-booster words.
    """
    scalar = tables.boosters.get(word.lower())
    if scalar is None:
        return 0.0
    if valence < 0:
        scalar = -scalar
    # booster/dampener in ALLCAPS while others aren't
    if is_upper(word) and is_caps_differential:
        scalar += C_INCR if valence > 0.0 else -C_INCR
    return scalar


def negated(words: Sequence[str], index: int, tables: ResourceTables) -> bool:
    """True if the word at `index` negates what follows it."""
    word = words[index].lower()

    if word in tables.negations:
        if index + 1 < len(words) and words[index + 1].lower() in NEGATION_EXCEPTIONS:
            return False
        return True

    # any unlisted "couldn't" style contraction
    if "n't" in word:
        return True

    # "at least"
    if word == "least" and index > 0 and _word_equals(words, index - 1, "at"):
        return True

    return False


# ---------------------------------------------------------------------------
# Per-token valence
# ---------------------------------------------------------------------------

def token_valence(words: Sequence[str], i: int, tables: ResourceTables,
                  is_caps_differential: bool) -> float:
    """
    Valence of the word at position `i` of a punctuation-filtered sentence,
    given up to 3 preceding words of context and up to 5 words of idiom
    look-ahead. Returns 0.0 for boosters and non-lexicon words.
    """
    item = words[i]
    lcase = item.lower()
    lexicon = tables.lexicon

    # "kind of" and booster words carry no sentiment of their own
    if (i + 1 < len(words) and lcase == "kind" and _word_equals(words, i + 1, "of")) \
            or lcase in tables.boosters:
        return 0.0

    if lcase not in lexicon:
        return 0.0

    def in_lexicon(index: int) -> bool:
        return 0 <= index < len(words) and words[index].lower() in lexicon

    v = lexicon[lcase]

    if is_caps_differential and is_upper(item):
        v = v + C_INCR if v > 0.0 else v - C_INCR

    if i > 0 and not in_lexicon(i - 1):
        v += scalar_inc_dec(words[i - 1], v, is_caps_differential, tables)

    if i > 1 and not in_lexicon(i - 2):
        v += scalar_inc_dec(words[i - 2], v, is_caps_differential, tables) * DIST2_WEIGHT

        if _word_equals(words, i - 2, "never") and \
                (_word_equals(words, i - 1, "so") or _word_equals(words, i - 1, "this")):
            v *= NEVER_DIST2_SCALAR
        elif negated(words, i - 2, tables):
            v *= N_SCALAR

    if i > 2 and not in_lexicon(i - 3):
        v += scalar_inc_dec(words[i - 3], v, is_caps_differential, tables) * DIST3_WEIGHT

        if _word_equals(words, i - 3, "never") and \
                (_word_equals(words, i - 2, "so") or _word_equals(words, i - 2, "this")
                 or _word_equals(words, i - 1, "so") or _word_equals(words, i - 1, "this")):
            v *= NEVER_DIST3_SCALAR
        elif negated(words, i - 3, tables):
            v *= N_SCALAR

        # Idioms grow forward from the current word, not from the window start.
        # Past the end of the sentence the words are empty, leaving trailing
        # spaces in the phrase.
        idiom = ""
        for index in range(min(IDIOM_MAX_SIZE, len(words))):
            idiom += _lcase_word_at(words, index + i)
            if idiom in tables.idioms:
                v = tables.idioms[idiom]
            if idiom in tables.boosters:
                v += B_DECR
            idiom += " "

    # "least" negation, except "at least" / "very least"
    if i > 1 and not in_lexicon(i - 1) and _word_equals(words, i - 1, "least"):
        if not _word_equals(words, i - 2, "at") and not _word_equals(words, i - 2, "very"):
            v *= N_SCALAR
    elif i > 0 and not in_lexicon(i - 1) and _word_equals(words, i - 1, "least"):
        v *= N_SCALAR

    return v


# ---------------------------------------------------------------------------
# Sentence aggregation
# ---------------------------------------------------------------------------

def normalize(score: float, alpha: float = ALPHA) -> float:
    return score / math.sqrt(score * score + alpha)


def but_check(sentence: Sequence[Token], sentiments: List[float]) -> List[float]:
    """
    Weight sentiments before the first "but" by 0.5 and after it by 1.5.

    The index of "but" is taken from the unfiltered sentence and applied to
    the filtered sentiment list as is.
    """
    but_index = -1
    for j, t in enumerate(sentence):
        if t.value == "but" or t.value == "BUT":
            but_index = j
            break
    if but_index < 0:
        return sentiments

    result = []
    for j, s in enumerate(sentiments):
        if j < but_index:
            result.append(s * BUT_BEFORE)
        elif j > but_index:
            result.append(s * BUT_AFTER)
        else:
            result.append(s)
    return result


def _exclamation_amplifier(sentence: Sequence[Token]) -> float:
    ep_count = sum(1 for t in sentence if t.value == "!")
    return min(ep_count, EP_MAX) * EP_INCR


def _question_amplifier(sentence: Sequence[Token]) -> float:
    qm_count = sum(1 for t in sentence if t.value == "?")
    if qm_count <= 1:
        return 0.0
    if qm_count <= 3:
        return qm_count * QM_INCR
    return QM_MAX


def _emphasise(total: float, amplifier: float) -> float:
    if total > 0.0:
        return total + amplifier
    if total < 0.0:
        return total - amplifier
    return total


def aggregate(sentence: Sequence[Token], sentiments: List[float]) -> VScore:
    """
    Turn the per-word valences of a sentence into a VScore.

    `sentence` is the unfiltered sentence, used for punctuation counts and
    the position of "but".
    """
    sentiments = but_check(sentence, sentiments)

    sum_s = sum(sentiments)

    em_amplifier = _exclamation_amplifier(sentence)
    sum_s = _emphasise(sum_s, em_amplifier)

    qm_amplifier = _question_amplifier(sentence)
    sum_s = _emphasise(sum_s, qm_amplifier)

    compound = normalize(sum_s)

    pos_sum = 0.0
    neg_sum = 0.0
    neu_count = 0.0
    for s in sentiments:
        if s > 0.0:
            pos_sum += s + 1.0  # compensates for neutrals, which count as 1
        if s < 0.0:
            neg_sum += s - 1.0
        if s == 0.0:
            neu_count += 1

    if pos_sum > abs(neg_sum):
        pos_sum += qm_amplifier + em_amplifier
    elif pos_sum < abs(neg_sum):
        neg_sum -= qm_amplifier + em_amplifier

    total = pos_sum + abs(neg_sum) + neu_count
    if total > 0.0:
        return VScore(
            positive=abs(pos_sum / total),
            neutral=abs(neu_count / total),
            negative=abs(neg_sum / total),
            compound=compound,
        )
    return VScore(compound=compound)


# ---------------------------------------------------------------------------
# Public analyzer
# ---------------------------------------------------------------------------

class VaderAnalyzer:
    """
    Sentence-level VADER scorer over pre-tokenized sentences.

    Args:
        tables: lexicon, idiom, booster and negation tables, see
                prose_vader.core.resources.load_resources().
    """

    def __init__(self, tables: ResourceTables):
        self.tables = tables

    def score_words(self, sentence: Optional[Sequence[Token]]) -> List[float]:
        """Valence of every token left after punctuation filtering, in order."""
        if sentence is None:
            return []
        caps_diff = is_all_cap_differential(sentence)
        words = [t.value for t in filter_punctuation(sentence)]
        return [token_valence(words, i, self.tables, caps_diff) for i in range(len(words))]

    def analyse_sentence(self, sentence: Optional[Sequence[Token]]) -> VScore:
        if not sentence:
            return VScore()
        return aggregate(sentence, self.score_words(sentence))

    def analyse(self, sentence: Optional[Sequence[Token]]) -> SentenceResult:
        """Score a sentence, keeping the filtered words and their valences."""
        tokens = list(sentence or [])
        if not tokens:
            return SentenceResult(tokens=tokens)
        word_scores = self.score_words(tokens)
        return SentenceResult(
            tokens=tokens,
            words=filter_punctuation(tokens),
            word_scores=word_scores,
            score=aggregate(tokens, word_scores),
        )
