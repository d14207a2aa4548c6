# coding: utf-8
"""
Static rule tables for the VADER scorer.

Everything here is built once at import and exposed read-only
(MappingProxyType / frozenset); analyzers share these objects by reference.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Constants (empirically derived mean sentiment intensity ratings)
# ---------------------------------------------------------------------------

# Booster additive increment/decrement
B_INCR = 0.293
B_DECR = -0.293

# ALL CAPS amplification increment
C_INCR = 0.733

# Negation scalar
N_SCALAR = -0.74

# Normalize alpha: approximates max expected raw sum
ALPHA = 15.0

# Positional decay for booster scalars at lookback distance 2 and 3
DECAY_D2 = 0.95
DECAY_D3 = 0.90

# Contrastive conjunction weights
BUT_BEFORE = 0.5
BUT_AFTER = 1.5

# Punctuation emphasis
EP_INCR = 0.292   # per '!' (max 4)
EP_MAX = 4
QM_INCR = 0.18    # per '?' when 2-3 of them
QM_MAX = 0.96     # flat, 4 or more '?'

# Marks that get peeled off a word during tokenization (longest is 4 chars)
PUNC_LIST = (
    ".", "!", "?", ",", ";", ":", "-", "'", "\"",
    "!!", "!!!", "??", "???", "?!?", "!?!", "?!?!", "!?!?",
)
PUNC_SET = frozenset(PUNC_LIST)
PUNC_MAX_LEN = max(len(p) for p in PUNC_LIST)

# ---------------------------------------------------------------------------
# Negation words
# ---------------------------------------------------------------------------
NEGATE = frozenset([
    "aint", "arent", "cannot", "cant", "couldnt", "darent", "didnt", "doesnt",
    "ain't", "aren't", "can't", "couldn't", "daren't", "didn't", "doesn't",
    "dont", "hadnt", "hasnt", "havent", "isnt", "mightnt", "mustnt", "neither",
    "don't", "hadn't", "hasn't", "haven't", "isn't", "mightn't", "mustn't",
    "neednt", "needn't", "never", "none", "nope", "nor", "not", "nothing", "nowhere",
    "oughtnt", "shant", "shouldnt", "uhuh", "wasnt", "werent",
    "oughtn't", "shan't", "shouldn't", "uh-uh", "wasn't", "weren't",
    "without", "wont", "wouldnt", "won't", "wouldn't", "rarely", "seldom", "despite",
])

# Bare contraction fragment, e.g. from "do n't" style tokenization
NT_FRAGMENT = "n't"

# ---------------------------------------------------------------------------
# Booster / dampener dictionary ("degree adverbs")
# ---------------------------------------------------------------------------
_BOOSTERS = [
    "absolutely", "amazingly", "awfully", "completely", "considerably",
    "decidedly", "deeply", "effing", "enormously", "entirely", "especially",
    "exceptionally", "extremely", "fabulously", "flipping", "flippin",
    "fricking", "frickin", "frigging", "friggin", "fully", "fucking",
    "greatly", "hella", "highly", "hugely", "incredibly", "intensely",
    "majorly", "more", "most", "particularly", "purely", "quite", "really",
    "remarkably", "so", "substantially", "thoroughly", "totally",
    "tremendously", "uber", "unbelievably", "unusually", "utterly", "very",
]
_DAMPENERS = [
    "almost", "barely", "hardly", "just enough", "kind of", "kinda", "kindof",
    "kind-of", "less", "little", "marginally", "occasionally", "partly",
    "scarcely", "slightly", "somewhat", "sort of", "sorta", "sortof", "sort-of",
]

_booster_dict = {w: B_INCR for w in _BOOSTERS}
_booster_dict.update({w: B_DECR for w in _DAMPENERS})
BOOSTER_DICT: Mapping[str, float] = MappingProxyType(_booster_dict)

# ---------------------------------------------------------------------------
# Special-case idioms: override, not add to, the computed valence
# ---------------------------------------------------------------------------
SPECIAL_CASE_IDIOMS: Mapping[str, float] = MappingProxyType({
    "the shit": 3.0,
    "the bomb": 3.0,
    "bad ass": 1.5,
    "yeah right": -2.0,
    "cut the mustard": 2.0,
    "kiss of death": -1.5,
    "hand to mouth": -2.0,
})
