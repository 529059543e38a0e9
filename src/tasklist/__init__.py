"""tasklist: a small command-line task list manager backed by a JSON file."""

__version__ = "0.1.0"
