"""Convert a Markdown document into an EPUB e-book."""

__version__ = "0.1.0"
