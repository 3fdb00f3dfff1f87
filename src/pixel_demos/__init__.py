"""Frame and scroll animation core with sample sprite demos."""

__version__ = "0.1.0"
