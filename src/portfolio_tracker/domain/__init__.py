"""Domain layer - pure business models with no external dependencies."""

from portfolio_tracker.domain.models import Holding

__all__ = [
    "Holding",
]
