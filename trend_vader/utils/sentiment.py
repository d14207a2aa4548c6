"""
Sentiment labels on top of the VADER compound score.

Public API:
    get_sentiment(text: str) -> Tuple[float, str]
"""
from __future__ import annotations

from typing import Optional, Tuple

from trend_vader import config
from trend_vader.utils.vader import SentimentIntensityAnalyzer, get_default_analyzer

LABELS = ("Negative", "Somewhat-Negative", "Neutral", "Somewhat-Positive", "Positive")


def score_to_label(compound: float) -> str:
    if compound <= -config.LABEL_STRONG:
        return "Negative"
    elif compound <= -config.LABEL_WEAK:
        return "Somewhat-Negative"
    elif compound < config.LABEL_WEAK:
        return "Neutral"
    elif compound < config.LABEL_STRONG:
        return "Somewhat-Positive"
    else:
        return "Positive"


def get_sentiment(text: str,
                  analyzer: Optional[SentimentIntensityAnalyzer] = None) -> Tuple[float, str]:
    """Returns (compound, label) with compound in [-1.0, 1.0]."""
    if not text:
        return 0.0, "Neutral"
    analyzer = analyzer or get_default_analyzer()
    compound = analyzer.score(text).compound
    return compound, score_to_label(compound)
