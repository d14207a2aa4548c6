# coding: utf-8
"""
Tokenizer: sentiment-relevant string-level properties of input text.

Splits on whitespace, keeps emoticons, peels known punctuation marks off
words ("good." → "good", "!!wow" → "wow") and detects mixed ALL-CAPS emphasis.
"""
from __future__ import annotations

import unicodedata
from typing import FrozenSet, List, Optional

from trend_vader.utils.vader_tables import PUNC_MAX_LEN, PUNC_SET


def strip_punctuation(text: str) -> str:
    """Remove every Unicode punctuation character (categories P*)."""
    return "".join(ch for ch in text if not unicodedata.category(ch).startswith("P"))


def is_all_caps(token: str) -> bool:
    """True when every character of the token is an upper-case letter."""
    return token.isalpha() and token.isupper()


def _words_only(text: str) -> FrozenSet[str]:
    """Punctuation-free words longer than one char (loses emoticons & contractions)."""
    return frozenset(w for w in strip_punctuation(text).split() if len(w) > 1)


def _peel(token: str, clean_words: FrozenSet[str]) -> Optional[str]:
    """
    Return the bare word when `token` is `mark+word` or `word+mark`.

    Marks are at most PUNC_MAX_LEN characters, so only that many prefix/suffix
    cuts need checking.
    """
    limit = min(PUNC_MAX_LEN, len(token) - 1)
    for k in range(1, limit + 1):
        head, rest = token[:k], token[k:]
        if head in PUNC_SET and rest in clean_words:
            return rest
        rest, tail = token[:-k], token[-k:]
        if tail in PUNC_SET and rest in clean_words:
            return rest
    return None


def has_allcaps_differential(tokens: List[str]) -> bool:
    """True if some, but not all, tokens are ALL CAPS."""
    allcap_count = sum(1 for t in tokens if is_all_caps(t))
    return 0 < allcap_count < len(tokens)


class SentimentText:
    """
    Tokenized view of one input text.

    Attributes:
        text:                the raw input
        words_and_emoticons: ordered tokens, original case, len > 1
        is_cap_diff:         mixed ALL-CAPS emphasis present
    """

    __slots__ = ("text", "words_and_emoticons", "is_cap_diff")

    def __init__(self, text: str):
        self.text = text or ""
        self.words_and_emoticons = self._words_and_emoticons()
        self.is_cap_diff = has_allcaps_differential(self.words_and_emoticons)

    def _words_and_emoticons(self) -> List[str]:
        # Single-letter tokens ("a", "I", stray ".") are dropped here
        filtered = [t for t in self.text.split() if len(t) > 1]
        clean_words = _words_only(self.text)

        tokens: List[str] = []
        for tok in filtered:
            if tok in clean_words:
                tokens.append(tok)
                continue
            bare = _peel(tok, clean_words)
            tokens.append(bare if bare is not None else tok)
        return tokens

    def __repr__(self) -> str:
        return f"SentimentText(tokens={self.words_and_emoticons!r}, is_cap_diff={self.is_cap_diff})"
