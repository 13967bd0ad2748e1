from typing import Optional
from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse
from app.schemas.models import ErrorResponse, LookupRequest
from app.services.lyrics_service import LyricsService, MissingParametersError
from app.services.providers.lrclib import LyricsNotFoundError
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}

# Service lookup: app.state.lyrics_service when set, a fresh one otherwise
def get_lyrics_service(request: Request) -> LyricsService:
    service = getattr(request.app.state, "lyrics_service", None)
    return service or LyricsService()

def first_param(request: Request, name: str) -> Optional[str]:
    """First value of a query parameter, like URLSearchParams.get."""
    values = request.query_params.getlist(name)
    return values[0] if values else None

def error_message(exc: Exception) -> str:
    """Diagnostic text of a failure, falling back to its type name."""
    return str(exc) or type(exc).__name__

def _json(payload: dict, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=payload, status_code=status_code, headers=CORS_HEADERS)

def _error(message: str, status_code: int) -> JSONResponse:
    return _json(ErrorResponse(error=message).model_dump(), status_code)

async def relay_lyrics(request: Request) -> Response:
    """
    Looks up lyrics for the artist/song in the query string.
    OPTIONS requests are answered as CORS pre-flights.
    """
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)

    lookup = LookupRequest(
        trackId=first_param(request, "trackId"),
        artist=first_param(request, "artist"),
        song=first_param(request, "song"),
        album=first_param(request, "album"),
    )
    service = get_lyrics_service(request)

    try:
        result = await service.lookup(lookup)
    except MissingParametersError as e:
        logger.warning(f"Rejected lookup: {e}")
        return _error(str(e), 400)
    except LyricsNotFoundError:
        return _error("Lyrics not found", 404)
    except Exception as e:
        logger.exception(f"Lyrics lookup failed for {lookup.song} - {lookup.artist}")
        return _error(error_message(e), 500)

    return _json(result.model_dump(by_alias=True))

# No method filter: every method on every path reaches the relay
router.add_route("/{path:path}", relay_lyrics, include_in_schema=False)
