"""
Core components: lexicon loading and caching.
"""

from trend_vader.core.lexicon import LexiconManager, lexicon_manager, load_lexicon, parse_lexicon

__all__ = ["LexiconManager", "lexicon_manager", "load_lexicon", "parse_lexicon"]
