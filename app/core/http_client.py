# app/core/http_client.py
"""
Global HTTP client manager for connection reuse.
The relay shares a single httpx.AsyncClient instance across requests.
"""

import httpx


class HttpClientManager:
    """
    Singleton HTTP client manager that provides a shared AsyncClient.

    The outbound lookup runs to completion or failure on its own, so the
    client is built without a timeout and without extra headers.
    Redirects are followed, as a browser fetch would.
    """
    _client: httpx.AsyncClient | None = None

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        """Get or create the shared HTTP client instance."""
        if cls._client is None or cls._client.is_closed:
            cls._client = httpx.AsyncClient(timeout=None, follow_redirects=True)
        return cls._client

    @classmethod
    async def close(cls) -> None:
        """Close the shared client. Call on app shutdown."""
        if cls._client is not None and not cls._client.is_closed:
            await cls._client.aclose()
            cls._client = None
