"""Client-side search index generation for rendered documentation sites."""

__version__ = "0.1.0"
