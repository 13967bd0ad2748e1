import logging
import urllib.parse
from typing import Optional

import httpx

from app.core.config import get_settings
from app.core.http_client import HttpClientManager
from app.schemas.models import LookupRequest, LyricsResult

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves untouched besides alphanumerics
_UNRESERVED = "-_.!~*'()"


class LyricsNotFoundError(Exception):
    """Raised when LRCLIB answers with a non-success status."""


def encode_component(value: str) -> str:
    return urllib.parse.quote(value, safe=_UNRESERVED)


class LrcLibProvider:
    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or get_settings().lrclib_base_url).rstrip("/")
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        """Injected client if any, otherwise the shared one."""
        if self._client is not None:
            return self._client
        return HttpClientManager.get_client()

    def build_url(self, request: LookupRequest) -> str:
        """
        Build the /api/get lookup URL.
        album_name is only appended when an album was given.
        """
        url = (
            f"{self.base_url}/api/get"
            f"?artist_name={encode_component(request.artist)}"
            f"&track_name={encode_component(request.song)}"
        )
        if request.album:
            url += f"&album_name={encode_component(request.album)}"
        return url

    async def get_lyrics(self, request: LookupRequest) -> LyricsResult:
        url = self.build_url(request)
        logger.debug(f"LRCLIB lookup: {url}")

        response = await self.client.get(url)
        if not response.is_success:
            logger.info(f"LRCLIB returned {response.status_code} for {request.artist} - {request.song}")
            raise LyricsNotFoundError("Lyrics not found")

        data = response.json()
        # Bodies that are not JSON objects carry no lyric fields
        return LyricsResult.model_validate(data if isinstance(data, dict) else {})
