"""Repository protocol definitions (interfaces)."""

from portfolio_tracker.repositories.protocols.kv_repo import KeyValueRepository

__all__ = [
    "KeyValueRepository",
]
