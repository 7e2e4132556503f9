"""GoPages — Go vanity import redirect pages, generated and published."""

__version__ = "1.0.0"
