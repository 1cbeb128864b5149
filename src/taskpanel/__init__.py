"""taskpanel: a small personal task tracker backed by a JSON file."""

__version__ = "0.3.0"
