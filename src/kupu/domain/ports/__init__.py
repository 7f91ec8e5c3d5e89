"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import Found, NotFound, Repository, WordLookup, WordRepository
from .unit_of_work import RepositoryCollection, UnitOfWork, WordRepositories, WordUnitOfWork

__all__ = [
    "Found",
    "NotFound",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
    "WordLookup",
    "WordRepositories",
    "WordRepository",
    "WordUnitOfWork",
]
