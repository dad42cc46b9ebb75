"""Data structures and text tools: an E++ compiler, word counts, substring search, stemming, a trie and a min-heap."""

__version__ = "0.1.0"