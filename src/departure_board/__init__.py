"""Train station departure board simulation."""

__version__ = "0.1.0"
