"""Domain models package."""

from portfolio_tracker.domain.models.holding import Holding, create_holding, new_holding_id

__all__ = [
    "Holding",
    "create_holding",
    "new_holding_id",
]
