"""Query understanding and relevance ranking engine for a photography assistant."""

__version__ = "0.1.0"
