"""In-memory manager of recently added movies."""

from .manager import DEFAULT_LIMIT, MoviesManager

__all__ = ["DEFAULT_LIMIT", "MoviesManager"]
