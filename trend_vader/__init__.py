"""
TrendVader: rule-based, lexicon-driven sentiment scoring for short English text.
"""

from trend_vader.utils.vader import (
    SentimentIntensityAnalyzer,
    SentimentScores,
    polarity_scores,
    score,
)
from trend_vader.utils.sentiment import get_sentiment, score_to_label

__all__ = [
    "SentimentIntensityAnalyzer",
    "SentimentScores",
    "polarity_scores",
    "score",
    "get_sentiment",
    "score_to_label",
]
