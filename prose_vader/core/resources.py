"""
Resource tables for the VADER analyzer.

    Lexicon    : word → mean human-rated valence (vader_lexicon.txt, TAB separated)
    IdiomMap   : phrase → override valence (vader_idioms.txt, comma separated)
    BoosterMap : intensifier / dampener → ±B_INCR (fixed word lists below)
    NegationSet: negation trigger words (fixed word list below)

All tables are built once and are read-only afterwards, so a single
ResourceTables instance can be shared by any number of concurrent scorers.
"""
from __future__ import annotations

import importlib.util
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Empirically derived mean sentiment intensity rating increase for booster words
B_INCR = 0.293
B_DECR = -0.293

LEXICON_FILE = "vader_lexicon.txt"
IDIOMS_FILE = "vader_idioms.txt"

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# ---------------------------------------------------------------------------
# Fixed word lists
# ---------------------------------------------------------------------------
NEGATE = [
    "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
    "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
    "dont", "hadnt", "hasnt", "havent", "mightnt", "mustnt", "neither",
    "don't", "hadn't", "hasn't", "haven't", "isn't", "isnt", "mightn't", "mustn't",
    "neednt", "needn't", "never", "none", "nope", "nor", "not", "nothing", "nowhere",
    "oughtnt", "shant", "shouldnt", "uhuh", "wasnt", "werent",
    "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
    "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom", "despite",
]

BOOSTER_INCREMENTS = [
    "absolutely", "amazingly", "awfully", "completely", "considerably",
    "decidedly", "deeply", "effing", "enormously",
    "entirely", "especially", "exceptionally", "extremely",
    "fabulously", "flipping", "flippin",
    "fricking", "frickin", "frigging", "friggin", "fully", "fucking",
    "greatly", "hella", "highly", "hugely", "incredibly",
    "intensely", "majorly", "more", "most", "particularly",
    "purely", "quite", "really", "remarkably",
    "so", "substantially",
    "thoroughly", "totally", "tremendously",
    "uber", "unbelievably", "unusually", "utterly",
    "very",
]

BOOSTER_DECREMENTS = [
    "almost", "barely", "hardly", "just enough",
    "kind of", "kinda", "kindof", "kind-of",
    "less", "little", "marginally", "occasionally", "partly",
    "scarcely", "slightly", "somewhat",
    "sort of", "sorta", "sortof", "sort-of",
]


class ResourceMissing(FileNotFoundError):
    """A required lexicon or idiom resource could not be located."""


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ResourceTables:
    lexicon: Mapping[str, float]
    idioms: Mapping[str, float]
    boosters: Mapping[str, float]
    negations: FrozenSet[str]

    @classmethod
    def build(cls,
              lexicon_entries: Iterable[Tuple[str, float]],
              idiom_entries: Iterable[Tuple[str, float]] = ()) -> "ResourceTables":
        """Build the four tables from already-parsed lexicon and idiom pairs."""
        return cls(
            lexicon=MappingProxyType(dict(lexicon_entries)),
            idioms=MappingProxyType(dict(idiom_entries)),
            boosters=BOOSTER_MAP,
            negations=NEGATION_SET,
        )


def _build_booster_map() -> Mapping[str, float]:
    boosters = {}
    for word in BOOSTER_INCREMENTS:
        boosters[word] = B_INCR
    for word in BOOSTER_DECREMENTS:
        boosters[word] = B_DECR
    return MappingProxyType(boosters)


BOOSTER_MAP: Mapping[str, float] = _build_booster_map()
NEGATION_SET: FrozenSet[str] = frozenset(NEGATE)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_lexicon_lines(lines: Iterable[str]) -> List[Tuple[str, float]]:
    """
    Parse `word<TAB>mean<TAB>stddev<TAB>...` rows into (word, mean) pairs.

    Rows with fewer than three fields, or with a mean that is not a number,
    are logged and skipped.
    """
    entries: List[Tuple[str, float]] = []
    for line in lines:
        items = line.rstrip("\n").split("\t")
        if len(items) < 3:
            logger.debug("skipping invalid Vader line: %s", line.rstrip())
            continue
        try:
            entries.append((items[0].strip(), float(items[1].strip())))
        except ValueError:
            logger.debug("skipping invalid Vader line: %s", line.rstrip())
    return entries


def parse_idiom_lines(lines: Iterable[str]) -> List[Tuple[str, float]]:
    """Parse `phrase,valence` rows; anything else is skipped silently."""
    entries: List[Tuple[str, float]] = []
    for line in lines:
        items = line.rstrip("\n").split(",")
        if len(items) != 2:
            continue
        try:
            entries.append((items[0].strip(), float(items[1].strip())))
        except ValueError:
            continue
    return entries


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def default_lexicon_path() -> Optional[Path]:
    """Location of the lexicon shipped with the vaderSentiment distribution."""
    spec = importlib.util.find_spec("vaderSentiment")
    if spec is None or not spec.submodule_search_locations:
        return None
    return Path(list(spec.submodule_search_locations)[0]) / LEXICON_FILE


def default_idioms_path() -> Path:
    return _DATA_DIR / IDIOMS_FILE


def _read_lines(path: Optional[Path], name: str) -> List[str]:
    if path is None or not path.is_file():
        raise ResourceMissing(f"{name} not found" + (f" at {path}" if path else ""))
    with open(path, encoding="utf-8") as f:
        return f.read().split("\n")


def load_resources(lexicon_path: Union[str, Path, None] = None,
                   idioms_path: Union[str, Path, None] = None) -> ResourceTables:
    """
    Load the lexicon and idiom files and build the resource tables.

    Raises ResourceMissing when either file cannot be found; scoring cannot
    proceed without them.
    """
    lex_path = Path(lexicon_path) if lexicon_path else default_lexicon_path()
    idm_path = Path(idioms_path) if idioms_path else default_idioms_path()

    logger.debug("Vader: init lexicon(%s)", lex_path)
    lexicon = parse_lexicon_lines(_read_lines(lex_path, LEXICON_FILE))

    logger.debug("Vader: init idioms(%s)", idm_path)
    idioms = parse_idiom_lines(_read_lines(idm_path, IDIOMS_FILE))

    logger.info("Vader: loaded %d lexicon entries, %d idioms", len(lexicon), len(idioms))
    return ResourceTables.build(lexicon, idioms)
