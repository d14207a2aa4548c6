"""
Score texts from the command line.

Usage:
    trend-vader "The movie was good." "Not bad at all!"
    trend-vader /TEXT="I love it"            # legacy argument form
    trend-vader --file posts.txt --json

Options:
    --file PATH      One text per line (blank lines skipped)
    --lexicon PATH   Lexicon file (default: TREND_VADER_LEXICON or bundled)
    --json           One JSON object per line instead of a table
    --log-level LVL  loguru level (default: TREND_VADER_LOG_LEVEL)
"""
import argparse
import json
import sys
from typing import List, Optional

from loguru import logger
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trend_vader import config
from trend_vader.utils.sentiment import score_to_label
from trend_vader.utils.vader import SentimentIntensityAnalyzer

LEGACY_TEXT_PREFIX = "/TEXT="

LABEL_COLORS = {
    "Negative": "red",
    "Somewhat-Negative": "magenta",
    "Neutral": "white",
    "Somewhat-Positive": "cyan",
    "Positive": "green",
}


def _strip_legacy_prefix(arg: str) -> str:
    """'/text=foo' → 'foo' (prefix matched case-insensitively); other args unchanged."""
    n = len(LEGACY_TEXT_PREFIX)
    if len(arg) > n and arg[:n].upper() == LEGACY_TEXT_PREFIX:
        return arg[n:]
    return arg


def collect_texts(args: argparse.Namespace) -> List[str]:
    texts = [_strip_legacy_prefix(a).strip() for a in args.texts]
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            texts.extend(line.strip() for line in f)
    return [t for t in texts if t]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trend-vader", description="Rule-based VADER sentiment scorer")
    parser.add_argument("texts", nargs="*", help="Texts to score (also accepts /TEXT=...)")
    parser.add_argument("--file", type=str, default=None)
    parser.add_argument("--lexicon", type=str, default=None)
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    return parser


def render_table(rows: List[dict], console: Console) -> None:
    table = Table(box=box.SIMPLE_HEAVY, border_style="blue", header_style="bold")
    table.add_column("Text")
    table.add_column("neg", justify="right")
    table.add_column("neu", justify="right")
    table.add_column("pos", justify="right")
    table.add_column("compound", justify="right")
    table.add_column("Label", justify="center", no_wrap=True)

    for row in rows:
        color = LABEL_COLORS.get(row["label"], "white")
        table.add_row(
            escape(row["text"]),
            f"{row['neg']:.3f}",
            f"{row['neu']:.3f}",
            f"{row['pos']:.3f}",
            f"[{color}]{row['compound']:+.4f}[/{color}]",
            f"[{color}]{row['label']}[/{color}]",
        )
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)

    try:
        texts = collect_texts(args)
    except OSError as e:
        logger.error(f"Could not read {args.file!r}: {e}")
        return 1
    if not texts:
        logger.error("No text given; pass texts as arguments or use --file")
        return 1

    analyzer = SentimentIntensityAnalyzer(lexicon_file=args.lexicon)
    if not analyzer.lexicon:
        logger.error("Lexicon is empty; refusing to score")
        return 1

    rows = []
    for text in texts:
        scores = analyzer.score(text)
        rows.append({"text": text, **scores._asdict(), "label": score_to_label(scores.compound)})
    logger.debug(f"Scored {len(rows)} text(s)")

    if args.json:
        for row in rows:
            sys.stdout.write(json.dumps(row, ensure_ascii=False) + "\n")
    else:
        render_table(rows, Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
