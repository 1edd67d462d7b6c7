"""Convert GitHub issues, pull requests and discussions to Markdown."""

__version__ = "0.1.0"
