# coding: utf-8
"""
VADER: Valence Aware Dictionary and sEntiment Reasoner
=======================================================
Rule-based sentiment analysis for short English text (sentences, posts).

Pipeline:
  1. SentimentText          → tokens + ALL-CAPS differential flag
  2. _compute_valences()    → one valence per token (lexicon lookup adjusted by
                              boosters, negation, idioms, caps, positional decay)
  3. _but_check()           → contrastive conjunction reweighting
  4. _score_valence()       → (neg, neu, pos, compound)

Public API:
    analyzer = SentimentIntensityAnalyzer()
    analyzer.score("The movie was GREAT!!")
    # → SentimentScores(neg=0.0, neu=0.4, pos=0.6, compound=0.7...)
    analyzer.polarity_scores("The movie was GREAT!!")
    # → {"neg": 0.0, "neu": 0.4, "pos": 0.6, "compound": 0.7...}

    compound  ∈ [-1.0, +1.0]: normalized weighted composite
    pos/neg/neu ∈ [0.0, 1.0]: proportion ratios (sum ≈ 1.0)

Notes:
  - Rule tables live in vader_tables and are shared read-only
  - An analyzer holds no per-call state; one instance can serve many threads
"""
from __future__ import annotations

import math
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence

from loguru import logger

from trend_vader.core.lexicon import lexicon_manager
from trend_vader.utils.sentiment_text import SentimentText, is_all_caps
from trend_vader.utils.vader_tables import (
    ALPHA,
    BOOSTER_DICT,
    BUT_AFTER,
    BUT_BEFORE,
    C_INCR,
    DECAY_D2,
    DECAY_D3,
    EP_INCR,
    EP_MAX,
    N_SCALAR,
    NEGATE,
    NT_FRAGMENT,
    QM_INCR,
    QM_MAX,
    SPECIAL_CASE_IDIOMS,
)

_NEVER_INTENSIFIERS = ("so", "this")
_LEAST_EXEMPT = ("at", "very")


class SentimentScores(NamedTuple):
    neg: float
    neu: float
    pos: float
    compound: float


EMPTY_SCORES = SentimentScores(0.0, 0.0, 0.0, 0.0)


# ---------------------------------------------------------------------------
# Window / lookup helpers
# ---------------------------------------------------------------------------

def _window(tokens_lower: Sequence[str], start: int, end: int) -> Optional[str]:
    """Space-joined tokens[start..end] (inclusive), None if the span leaves the sequence."""
    if start < 0 or end >= len(tokens_lower):
        return None
    return " ".join(tokens_lower[start:end + 1])


def _is_negated(word_lower: str) -> bool:
    return word_lower in NEGATE or word_lower == NT_FRAGMENT


def _scalar_inc_dec(word: str, word_lower: str, valence: float, is_cap_diff: bool) -> float:
    """
    Booster/dampener scalar contributed by a neighbouring word.

    Sign follows the valence of the sentiment word being modified; an ALL-CAPS
    booster gets the caps increment on top.
    """
    if word_lower not in BOOSTER_DICT:
        return 0.0
    scalar = BOOSTER_DICT[word_lower]
    if valence < 0:
        scalar *= -1
    if is_all_caps(word) and is_cap_diff:
        scalar += C_INCR if valence > 0 else -C_INCR
    return scalar


# ---------------------------------------------------------------------------
# Context rules
# ---------------------------------------------------------------------------

def _negation_check(valence: float, tokens_lower: Sequence[str], distance: int, i: int) -> float:
    if distance == 1:
        if _is_negated(tokens_lower[i - 1]):
            valence *= N_SCALAR

    elif distance == 2:
        before, prev = tokens_lower[i - 2], tokens_lower[i - 1]
        if before == "never" and prev in _NEVER_INTENSIFIERS:
            valence *= 1.25
        elif not (before == "without" and prev == "doubt") and _is_negated(before):
            valence *= N_SCALAR

    elif distance == 3:
        third, before, prev = tokens_lower[i - 3], tokens_lower[i - 2], tokens_lower[i - 1]
        # "so"/"this" right before the word intensifies even without "never"
        if (third == "never" and before in _NEVER_INTENSIFIERS) or prev in _NEVER_INTENSIFIERS:
            valence *= 1.25
        elif not (third == "without" and "doubt" in (before, prev)) and _is_negated(third):
            valence *= N_SCALAR

    return valence


def _special_idioms_check(valence: float, tokens_lower: Sequence[str], i: int) -> float:
    """
    Replace the valence when an idiom spans the word (requires i >= 3).

    Lookback windows are tried in fixed order and the first hit wins; the two
    lookahead windows may override it again. Multi-word boosters ending just
    before the word are then added.
    """
    onezero = _window(tokens_lower, i - 1, i)
    twoonezero = _window(tokens_lower, i - 2, i)
    twoone = _window(tokens_lower, i - 2, i - 1)
    threetwoone = _window(tokens_lower, i - 3, i - 1)
    threetwo = _window(tokens_lower, i - 3, i - 2)

    for seq in (onezero, twoonezero, twoone, threetwoone, threetwo):
        if seq is not None and seq in SPECIAL_CASE_IDIOMS:
            valence = SPECIAL_CASE_IDIOMS[seq]
            break

    for seq in (_window(tokens_lower, i, i + 1), _window(tokens_lower, i, i + 2)):
        if seq is not None and seq in SPECIAL_CASE_IDIOMS:
            valence = SPECIAL_CASE_IDIOMS[seq]

    for n_gram in (threetwoone, threetwo, twoone):
        if n_gram is not None and n_gram in BOOSTER_DICT:
            valence += BOOSTER_DICT[n_gram]

    return valence


def _least_check(valence: float, tokens_lower: Sequence[str], i: int,
                 lexicon: Mapping[str, float]) -> float:
    """'least X' negates X, except in 'at least X' / 'very least X'."""
    if i == 0:
        return valence
    prev = tokens_lower[i - 1]
    if prev != "least" or prev in lexicon:
        return valence
    if i == 1 or tokens_lower[i - 2] not in _LEAST_EXEMPT:
        valence *= N_SCALAR
    return valence


# ---------------------------------------------------------------------------
# Core valence computation per token
# ---------------------------------------------------------------------------

def _sentiment_valence(i: int, tokens: Sequence[str], tokens_lower: Sequence[str],
                       is_cap_diff: bool, lexicon: Mapping[str, float]) -> float:
    item_lower = tokens_lower[i]
    if item_lower not in lexicon:
        return 0.0

    valence = lexicon[item_lower]

    # ALL CAPS amplification (only when other words are not shouting)
    if is_all_caps(tokens[i]) and is_cap_diff:
        valence += C_INCR if valence > 0 else -C_INCR

    # Modifiers from up to 3 preceding non-lexicon tokens
    for distance in (1, 2, 3):
        if i < distance:
            break
        k = i - distance
        if tokens_lower[k] in lexicon:
            continue
        s = _scalar_inc_dec(tokens[k], tokens_lower[k], valence, is_cap_diff)
        if distance == 2:
            s *= DECAY_D2
        elif distance == 3:
            s *= DECAY_D3
        valence += s

        valence = _negation_check(valence, tokens_lower, distance, i)
        if distance == 3:
            valence = _special_idioms_check(valence, tokens_lower, i)

    return _least_check(valence, tokens_lower, i, lexicon)


def _compute_valences(sentitext: SentimentText, lexicon: Mapping[str, float]) -> List[float]:
    """
    One valence per token. Booster words and the "kind" of "kind of" store 0:
    they act on their neighbours, not on their own.
    """
    tokens = sentitext.words_and_emoticons
    tokens_lower = [t.lower() for t in tokens]
    n = len(tokens)

    sentiments: List[float] = []
    for i, item_lower in enumerate(tokens_lower):
        if item_lower in BOOSTER_DICT:
            sentiments.append(0.0)
        elif item_lower == "kind" and i + 1 < n and tokens_lower[i + 1] == "of":
            sentiments.append(0.0)
        else:
            sentiments.append(
                _sentiment_valence(i, tokens, tokens_lower, sentitext.is_cap_diff, lexicon)
            )
    return sentiments


# ---------------------------------------------------------------------------
# "but": contrastive conjunction weighting
# ---------------------------------------------------------------------------

def _but_check(tokens: Sequence[str], sentiments: List[float]) -> List[float]:
    """Halve sentiment before the first 'but' (or 'BUT'), boost sentiment after it ×1.5."""
    if "but" in tokens:
        bi = tokens.index("but")
    elif "BUT" in tokens:
        bi = tokens.index("BUT")
    else:
        return sentiments

    result = list(sentiments)
    for si, s in enumerate(sentiments):
        if si < bi:
            result[si] = s * BUT_BEFORE
        elif si > bi:
            result[si] = s * BUT_AFTER
    return result


# ---------------------------------------------------------------------------
# Punctuation amplifier
# ---------------------------------------------------------------------------

def _amplify_ep(text: str) -> float:
    # up to 4 exclamation points
    return min(text.count("!"), EP_MAX) * EP_INCR


def _amplify_qm(text: str) -> float:
    qm_count = text.count("?")
    if qm_count <= 1:
        return 0.0
    if qm_count <= 3:
        return qm_count * QM_INCR
    return QM_MAX


def _punctuation_emphasis(text: str) -> float:
    return _amplify_ep(text) + _amplify_qm(text)


# ---------------------------------------------------------------------------
# Normalize / sift / score
# ---------------------------------------------------------------------------

def _normalize(score: float, alpha: float = ALPHA) -> float:
    """Normalize score to [-1, 1]: score / sqrt(score² + alpha)."""
    norm_score = score / math.sqrt(score * score + alpha)
    return max(-1.0, min(1.0, norm_score))


def _sift_sentiment_scores(sentiments: Sequence[float]):
    pos_sum = 0.0
    neg_sum = 0.0
    neu_count = 0
    for s in sentiments:
        if s > 0:
            pos_sum += s + 1  # compensates for neutral words that are counted as 1
        elif s < 0:
            neg_sum += s - 1  # when used with abs(), compensates for neutrals
        else:
            neu_count += 1
    return pos_sum, neg_sum, neu_count


def _score_valence(sentiments: Sequence[float], text: str) -> SentimentScores:
    if not sentiments:
        return EMPTY_SCORES

    sum_s = float(sum(sentiments))
    punct = _punctuation_emphasis(text)
    if sum_s > 0:
        sum_s += punct
    elif sum_s < 0:
        sum_s -= punct

    compound = _normalize(sum_s)

    pos_sum, neg_sum, neu_count = _sift_sentiment_scores(sentiments)
    if pos_sum > abs(neg_sum):
        pos_sum += punct
    elif pos_sum < abs(neg_sum):
        neg_sum -= punct

    total = pos_sum + abs(neg_sum) + neu_count
    if total == 0:
        return SentimentScores(0.0, 0.0, 0.0, round(compound, 4))

    return SentimentScores(
        neg=round(abs(neg_sum / total), 3),
        neu=round(abs(neu_count / total), 3),
        pos=round(abs(pos_sum / total), 3),
        compound=round(compound, 4),
    )


# ---------------------------------------------------------------------------
# Public analyzer
# ---------------------------------------------------------------------------

class SentimentIntensityAnalyzer:
    """
    Lexicon + rule based sentiment analyzer.

    Usage:
        analyzer = SentimentIntensityAnalyzer()
        neg, neu, pos, compound = analyzer.score("Not bad at all!")

    Args:
        lexicon:      already-parsed token → valence mapping. Used as is
                      (not copied); callers must not mutate it afterwards.
        lexicon_file: path of a tab-separated lexicon file, loaded through
                      the shared LexiconManager cache. Ignored when
                      `lexicon` is given; defaults to config.LEXICON_PATH.
    """

    def __init__(self, lexicon: Optional[Mapping[str, float]] = None,
                 lexicon_file: Optional[str] = None):
        if lexicon is None:
            lexicon = lexicon_manager.get(lexicon_file)
        self.lexicon = lexicon
        if not self.lexicon:
            logger.warning("SentimentIntensityAnalyzer built with an empty lexicon; all texts will score neutral")

    def score(self, text: str) -> SentimentScores:
        """Return (neg, neu, pos, compound) for `text`."""
        sentitext = SentimentText(text or "")
        sentiments = _compute_valences(sentitext, self.lexicon)
        sentiments = _but_check(sentitext.words_and_emoticons, sentiments)
        return _score_valence(sentiments, sentitext.text)

    def polarity_scores(self, text: str) -> Dict[str, float]:
        """
        Same numbers as score(), keyed "neg", "neu", "pos", "compound".

        compound ∈ [-1.0, +1.0]: overall sentiment
        pos/neg/neu ∈ [0.0, 1.0]: proportions (sum ≈ 1.0)
        """
        return dict(self.score(text)._asdict())

    def token_valences(self, text: str) -> List[float]:
        """Per-token valences after the 'but' reweighting, aligned with SentimentText tokens."""
        sentitext = SentimentText(text or "")
        return _but_check(sentitext.words_and_emoticons,
                          _compute_valences(sentitext, self.lexicon))


# ---------------------------------------------------------------------------
# Module-level default analyzer (built on first use)
# ---------------------------------------------------------------------------
_default_analyzer: Optional[SentimentIntensityAnalyzer] = None


def get_default_analyzer() -> SentimentIntensityAnalyzer:
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = SentimentIntensityAnalyzer()
    return _default_analyzer


def score(text: str) -> SentimentScores:
    """Module-level convenience function using the default analyzer."""
    return get_default_analyzer().score(text)


def polarity_scores(text: str) -> Dict[str, float]:
    """Module-level convenience function using the default analyzer."""
    return get_default_analyzer().polarity_scores(text)
