"""Bounded, insertion-ordered storage of movie titles."""

from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


class MoviesManager:
    """Keep added movies in order and report the most recent ones.

    Parameters
    ----------
    limit:
        Maximum number of movies returned by :meth:`find_last`. The value
        is not validated: zero or a negative number simply makes
        :meth:`find_last` return an empty list.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit <= 0:
            logger.warning("MoviesManager created with non-positive limit %d", limit)
        self._limit = limit
        self._movies: List[str] = []

    @property
    def limit(self) -> int:
        return self._limit

    def __len__(self) -> int:
        return len(self._movies)

    def add(self, movie: str) -> None:
        """Append ``movie`` to the end of the collection."""
        self._movies.append(movie)
        logger.debug("Added movie %r (total=%d)", movie, len(self._movies))

    def find_all(self) -> List[str]:
        """Return a copy of every movie in insertion order."""
        return list(self._movies)

    def find_last(self) -> List[str]:
        """Return up to ``limit`` most recently added movies, newest first."""
        count = min(max(self._limit, 0), len(self._movies))
        if count == 0:
            return []
        result = self._movies[-count:][::-1]
        logger.debug("find_last returned %d of %d movies", count, len(self._movies))
        return result
