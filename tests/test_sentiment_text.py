"""
Tests for trend_vader/utils/sentiment_text.py

    pytest tests/test_sentiment_text.py -v
"""
from trend_vader.utils.sentiment_text import (
    SentimentText,
    has_allcaps_differential,
    is_all_caps,
    strip_punctuation,
)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------
class TestTokens:
    def test_trailing_period_is_peeled(self):
        st = SentimentText("The movie was good.")
        assert st.words_and_emoticons == ["The", "movie", "was", "good"]

    def test_multi_char_marks_are_peeled(self):
        st = SentimentText("Wow!!! This is great?!?")
        assert st.words_and_emoticons == ["Wow", "This", "is", "great"]

    def test_leading_mark_is_peeled(self):
        st = SentimentText("'good -bad")
        assert st.words_and_emoticons == ["good", "bad"]

    def test_single_letters_are_dropped(self):
        st = SentimentText("I am a happy person")
        assert st.words_and_emoticons == ["am", "happy", "person"]

    def test_emoticons_survive(self):
        st = SentimentText("so happy :) <3")
        assert st.words_and_emoticons == ["so", "happy", ":)", "<3"]

    def test_contractions_are_kept_whole(self):
        st = SentimentText("It can't be")
        assert st.words_and_emoticons == ["It", "can't", "be"]

    def test_unlisted_mark_is_not_peeled(self):
        # ".." and "!!!!" are not in the mark list
        st = SentimentText("good.. great!!!!")
        assert st.words_and_emoticons == ["good..", "great!!!!"]

    def test_mark_on_one_letter_word_is_kept(self):
        # "I" never makes it into the clean-word set, so "I!" is not recombined
        st = SentimentText("I! love it")
        assert st.words_and_emoticons == ["I!", "love", "it"]

    def test_marks_on_both_sides_are_not_peeled(self):
        st = SentimentText('"quoted" text')
        assert st.words_and_emoticons == ['"quoted"', "text"]

    def test_whitespace_runs_and_empty_text(self):
        assert SentimentText("  good \t\n  day  ").words_and_emoticons == ["good", "day"]
        assert SentimentText("").words_and_emoticons == []
        assert SentimentText(None).words_and_emoticons == []

    def test_unicode_punctuation_is_stripped_for_clean_words(self):
        assert strip_punctuation("good… «bad»") == "good bad"
        st = SentimentText("really good…")
        # "…" is not one of the peelable marks
        assert st.words_and_emoticons == ["really", "good…"]


# ---------------------------------------------------------------------------
# Caps differential
# ---------------------------------------------------------------------------
class TestCapsDifferential:
    def test_is_all_caps(self):
        assert is_all_caps("GREAT")
        assert not is_all_caps("Great")
        assert not is_all_caps("GREAT!")
        assert not is_all_caps(":D")

    def test_some_caps(self):
        assert SentimentText("This is GREAT").is_cap_diff is True

    def test_all_caps(self):
        assert SentimentText("THIS IS GREAT").is_cap_diff is False

    def test_no_caps(self):
        assert SentimentText("this is great").is_cap_diff is False

    def test_emoticon_counts_as_not_caps(self):
        assert has_allcaps_differential(["OK", ":)"]) is True

    def test_empty(self):
        assert has_allcaps_differential([]) is False
