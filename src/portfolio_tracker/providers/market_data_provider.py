"""Quote provider protocol and base types."""

from typing import Any, Protocol

# Raw upstream record: loosely keyed by ticker, every field optional.
RawQuote = dict[str, Any]


class QuoteProvider(Protocol):
    """
    Protocol for upstream quote providers.

    Implementations perform exactly one batch lookup per call and return
    the raw records as the upstream shaped them. Failures are raised as
    UpstreamUnavailableError (non-success status) or FetchFailedError
    (transport failure, timeout, unparsable body).
    """

    async def fetch_quotes(self, symbols: list[str]) -> list[RawQuote]:
        """
        Fetch raw quote records for multiple symbols in one round trip.

        Symbols missing upstream are simply absent from the result.
        """
        ...
