"""clipfmt: reformat clipboard text on paste."""

__version__ = "1.0.0"
