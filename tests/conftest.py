import os
import sys

import pytest

# ---------------------------------------------------------------------------
# Path setup: allow `import trend_vader` without installing the package
# ---------------------------------------------------------------------------
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from trend_vader.utils.vader import SentimentIntensityAnalyzer  # noqa: E402

# Small fixed lexicon (values as in the published VADER lexicon) so expected
# numbers do not depend on the bundled data file.
TEST_LEXICON = {
    "good": 1.9,
    "great": 3.1,
    "bad": -2.5,
    "love": 3.2,
    "like": 2.0,
    "happy": 2.7,
    "sad": -2.1,
    "doubt": -1.5,
    "kiss": 1.8,
    "death": -2.9,
    "bomb": -2.2,
    "kind": 2.4,
    "no": -1.2,
    "yeah": 1.2,
    ":)": 2.0,
}


@pytest.fixture
def lexicon():
    return dict(TEST_LEXICON)


@pytest.fixture
def analyzer(lexicon):
    return SentimentIntensityAnalyzer(lexicon=lexicon)
