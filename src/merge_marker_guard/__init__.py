"""Pull request guard that fails CI when unresolved merge-conflict markers are committed."""

__version__ = "1.0.0"
