"""
Lexicon loading

Reads VADER-format lexicon files (``token<TAB>mean<TAB>...``) into read-only
token → valence mappings, and caches them per file so analyzers built
repeatedly share one parsed copy.
"""
import math
import os
import threading
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from loguru import logger

from trend_vader import config

EMPTY_LEXICON: Mapping[str, float] = MappingProxyType({})


def parse_lexicon(lines: Iterable[str]) -> Dict[str, float]:
    """
    Parse lexicon lines into a dict.

    - surrounding whitespace is trimmed
    - lines with fewer than 2 tab-separated fields are skipped
    - lines whose score is not a float (or is nan/inf) are skipped
    - the first occurrence of a duplicate token wins
    """
    lexicon: Dict[str, float] = {}
    skipped = 0
    for lineno, line in enumerate(lines, 1):
        fields = line.strip().split("\t")
        if len(fields) < 2:
            skipped += 1
            continue
        word, measure = fields[0], fields[1]
        try:
            value = float(measure)
        except ValueError:
            logger.debug(f"Lexicon line {lineno}: bad score {measure!r} for {word!r}, skipped")
            skipped += 1
            continue
        if not math.isfinite(value):
            logger.debug(f"Lexicon line {lineno}: non-finite score {measure!r} for {word!r}, skipped")
            skipped += 1
            continue
        if word not in lexicon:
            lexicon[word] = value
    if skipped:
        logger.debug(f"Lexicon parse: {len(lexicon)} entries, {skipped} lines skipped")
    return lexicon


def load_lexicon(path: str) -> Mapping[str, float]:
    """Load a lexicon file. Missing or unreadable file → empty mapping (logged)."""
    try:
        with open(path, encoding="utf-8") as f:
            lexicon = parse_lexicon(f)
    except OSError as e:
        logger.warning(f"Lexicon file {path!r} could not be read ({e}); using an empty lexicon")
        return EMPTY_LEXICON
    except UnicodeDecodeError as e:
        logger.warning(f"Lexicon file {path!r} is not valid UTF-8 ({e}); using an empty lexicon")
        return EMPTY_LEXICON

    logger.info(f"Loaded {len(lexicon)} lexicon entries from {path}")
    return MappingProxyType(lexicon)


class LexiconManager:
    """Process-wide cache of loaded lexicons, keyed by absolute path."""

    def __init__(self, default_path: Optional[str] = None):
        self.default_path = default_path
        self._cache: Dict[str, Mapping[str, float]] = {}
        self._lock = threading.Lock()

    def get(self, path: Optional[str] = None) -> Mapping[str, float]:
        """Return the lexicon at `path` (default: config.LEXICON_PATH), loading it once."""
        path = path or self.default_path or config.LEXICON_PATH
        key = os.path.abspath(path)
        with self._lock:
            if key not in self._cache:
                self._cache[key] = load_lexicon(key)
            return self._cache[key]

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


lexicon_manager = LexiconManager()
