"""
Tests for trend_vader/utils/sentiment.py: label bands.
"""
import pytest

from trend_vader.utils.sentiment import LABELS, get_sentiment, score_to_label


class TestScoreToLabel:
    @pytest.mark.parametrize("compound,label", [
        (-1.0, "Negative"),
        (-0.35, "Negative"),
        (-0.3412, "Somewhat-Negative"),
        (-0.15, "Somewhat-Negative"),
        (-0.1, "Neutral"),
        (0.0, "Neutral"),
        (0.1499, "Neutral"),
        (0.15, "Somewhat-Positive"),
        (0.3499, "Somewhat-Positive"),
        (0.35, "Positive"),
        (1.0, "Positive"),
    ])
    def test_bands(self, compound, label):
        assert score_to_label(compound) == label

    def test_labels_are_known(self):
        for c in (-0.9, -0.2, 0.0, 0.2, 0.9):
            assert score_to_label(c) in LABELS


class TestGetSentiment:
    def test_empty_text(self, analyzer):
        assert get_sentiment("", analyzer) == (0.0, "Neutral")

    def test_positive(self, analyzer):
        assert get_sentiment("The movie was good.", analyzer) == (0.4404, "Positive")

    def test_negated(self, analyzer):
        assert get_sentiment("not good", analyzer) == (-0.3412, "Somewhat-Negative")
