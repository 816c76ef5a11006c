"""typomatch: typo-tolerant completion matching."""

__version__ = "0.1.0"
