"""Core utilities and shared functionality."""

from portfolio_tracker.core.timezone import (
    now_eastern,
    to_eastern,
    to_epoch_millis,
    EASTERN_TZ,
)
from portfolio_tracker.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    InvalidRequestError,
    UpstreamUnavailableError,
    FetchFailedError,
    ImportMalformedError,
)

__all__ = [
    "now_eastern",
    "to_eastern",
    "to_epoch_millis",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "InvalidRequestError",
    "UpstreamUnavailableError",
    "FetchFailedError",
    "ImportMalformedError",
]
