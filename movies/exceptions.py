"""Exceptions raised at the configuration boundary of the movies package."""

from __future__ import annotations


class MoviesError(Exception):
    """Base class for all movies package errors."""


class ConfigError(MoviesError):
    """Raised when a configuration file cannot be loaded or validated."""
