"""Service helpers: error aggregation, checksums, signing, rate limiting and logging aids."""

__version__ = "0.1.0"