from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class LookupRequest(BaseModel):
    track_id: Optional[str] = Field(None, alias="trackId") # Accepted, not forwarded
    artist: Optional[str] = None
    song: Optional[str] = None
    album: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)

    @property
    def is_valid(self) -> bool:
        return bool(self.artist) and bool(self.song)

class LyricsResult(BaseModel):
    synced_lyrics: Optional[str] = Field(None, alias="syncedLyrics")
    plain_lyrics: Optional[str] = Field(None, alias="plainLyrics")

    model_config = ConfigDict(populate_by_name=True, extra='ignore')

    @field_validator("synced_lyrics", "plain_lyrics", mode="before")
    @classmethod
    def _only_strings(cls, value: Any) -> Optional[str]: # Non-strings become None
        return value if isinstance(value, str) else None

class ErrorResponse(BaseModel):
    error: str
