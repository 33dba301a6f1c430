"""Repository layer - data access abstractions and implementations."""

from portfolio_tracker.repositories.protocols import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
