"""notepane - a local note keeper with a toggleable rich-text formatter."""

__version__ = "0.1.0"
