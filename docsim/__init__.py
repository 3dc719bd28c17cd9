"""docsim - substring-based pairwise similarity for document corpora."""

__version__ = "1.0.0"
