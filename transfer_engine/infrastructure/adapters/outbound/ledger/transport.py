"""Ledger transport interface."""

from typing import Any, Optional, Protocol


class LedgerTransport(Protocol):
    """
    Carries one request to the ledger and returns the raw response body.

    The embedding application supplies the implementation (HTTP client,
    test double, message bus bridge). Implementations raise on transport
    failure; the gateway maps any such error to ``LedgerServerError``.
    """

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[dict[str, Any]] = None,
    ) -> bytes:
        """
        Send a request.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Endpoint path relative to the ledger base URL
            params: Query parameters
            json: JSON body

        Returns:
            Raw response body, possibly empty
        """
        ...
