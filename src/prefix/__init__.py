"""prefix: a managed git hook runner."""

__version__ = "0.1.0"
