"""Electric-vehicle performance estimation engine."""

__version__ = "1.0.0"
