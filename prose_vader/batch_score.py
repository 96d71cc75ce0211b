"""
Batch VADER scorer for a text file (e.g. a whole book).

Reads the file, splits it into sentences, scores every sentence and logs
each sentence with its score. Optionally writes all scores to a CSV so they
can be graphed / analysed.

Usage:
    prose-vader --file book.txt [options]
    python -m prose_vader.batch_score --file book.txt [options]

Options:
    --file PATH      Input text file to analyse (required)
    --csv PATH       Write per-sentence scores to this CSV
    --lexicon PATH   Lexicon file (default: VADER_LEXICON_PATH or vaderSentiment's)
    --idioms PATH    Idiom file (default: VADER_IDIOMS_PATH or the bundled list)
    --log-level STR  Logging level (default: VADER_LOG_LEVEL or INFO)
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from prose_vader import config
from prose_vader.core.analyzer import VaderAnalyzer
from prose_vader.core.models import Token
from prose_vader.core.resources import ResourceMissing, load_resources
from prose_vader.pipeline import analyse_text, mean_compound
from prose_vader.utils.nlp import ProseParser
from prose_vader.utils.report import write_csv

logger = logging.getLogger("prose_vader.batch")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vader sentiment scoring of a text file, per sentence")
    parser.add_argument("--file",      type=str, default=None,
                        help="input text-file to read and analyse using Vader")
    parser.add_argument("--csv",       type=str, default=None,
                        help="write per-sentence scores to this CSV file")
    parser.add_argument("--lexicon",   type=str, default=config.LEXICON_PATH)
    parser.add_argument("--idioms",    type=str, default=config.IDIOMS_PATH)
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = build_parser()
    args = arg_parser.parse_args(argv)
    config.configure_logging(args.log_level.upper())

    if args.file is None:
        arg_parser.print_help()
        return 1
    input_file = Path(args.file)
    if not input_file.is_file():
        logger.error("file does not exist: %s", input_file)
        return 1

    print("[Vader] Sentence scorer starting...")
    print(f"  File:     {input_file}")
    print(f"  CSV:      {args.csv or '-'}")

    try:
        file_text = input_file.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.error("cannot read %s: %s", input_file, e)
        return 1

    try:
        analyzer = VaderAnalyzer(load_resources(args.lexicon, args.idioms))
    except ResourceMissing as e:
        logger.error("cannot load Vader resources: %s", e)
        return 1

    try:
        nlp = ProseParser(download=config.NLTK_DOWNLOAD)
    except LookupError as e:
        logger.error("NLTK models unavailable: %s", e)
        return 1

    results = analyse_text(file_text, analyzer=analyzer, parser=nlp)
    for result in results:
        logger.info("sentence: %s", Token.list_to_string(result.tokens))
        logger.info("Vader score: %s", result.score)

    if args.csv:
        out = write_csv(results, args.csv)
        print(f"[Vader] Wrote {len(results)} rows to {out}")

    print(f"[Vader] Complete. Sentences: {len(results)}, mean compound: {mean_compound(results):.4f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
