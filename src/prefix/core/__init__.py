"""Core helpers: settings, git context and utilities."""
