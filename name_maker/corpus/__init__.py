"""Bundled name lists used as the sampling universe."""

from .loader import NameCorpus, get_bundled_corpus, load_corpus

__all__ = ["NameCorpus", "get_bundled_corpus", "load_corpus"]
