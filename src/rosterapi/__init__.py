"""In-memory REST API for a roster of players."""

__version__ = "0.1.0"
