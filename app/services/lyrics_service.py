import logging
from typing import Optional

from app.schemas.models import LookupRequest, LyricsResult
from app.services.providers.lrclib import LrcLibProvider

logger = logging.getLogger(__name__)


class MissingParametersError(Exception):
    """Raised when artist or song is missing from a lookup."""


class LyricsService:
    """
    High-level service behind the relay endpoint.
    Validates the lookup and delegates the single outbound call to LRCLIB.
    """

    def __init__(self, provider: Optional[LrcLibProvider] = None):
        self.provider = provider or LrcLibProvider()

    async def lookup(self, request: LookupRequest) -> LyricsResult:
        if not request.is_valid:
            raise MissingParametersError("Artist and song parameters are required")

        logger.info(f"Looking up lyrics for: {request.song} - {request.artist}")
        return await self.provider.get_lyrics(request)
