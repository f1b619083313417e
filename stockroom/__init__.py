"""Identity-keyed entity repositories with an optional JSON file mirror."""

__version__ = "0.1.0"
