"""String and value helpers: characters, hashing, trimming, padding, comparing, searching, transforming and type checks."""

__version__ = "0.1.0"