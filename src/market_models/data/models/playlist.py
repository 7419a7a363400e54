"""
Playlist (watchlist) models.
"""

from typing import List, Optional

from pydantic import Field, StrictBool, field_validator

from .base import SchemaModel, PartialUpdateModel
from .ticker import Ticker


class Playlist(SchemaModel):
    """User-owned named list of ticker symbols."""
    id: str = Field(..., description="Unique identifier")
    user_id: str = Field(..., description="Owner user ID")
    name: str = Field(..., description="Playlist name")
    symbols: List[str] = Field(..., description="Ticker symbols in the playlist")
    is_default: StrictBool = Field(..., description="Whether this is the user's default playlist")
    created_at: str = Field(..., description="Creation timestamp")
    updated_at: str = Field(..., description="Last update timestamp")


class PlaylistWithTickers(Playlist):
    """Playlist optionally hydrated with full ticker records for display."""
    tickers: Optional[List[Ticker]] = Field(None, description="Expanded ticker data (when loaded)")

    @property
    def is_hydrated(self) -> bool:
        return self.tickers is not None


class CreatePlaylistRequest(SchemaModel):
    """Payload for creating a playlist."""
    name: str
    symbols: Optional[List[str]] = None


class UpdatePlaylistRequest(PartialUpdateModel):
    """Partial update of a playlist."""
    name: Optional[str] = None
    symbols: Optional[List[str]] = None
    is_default: Optional[StrictBool] = None

    @field_validator("name", "symbols", "is_default")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null; omit it to leave it unchanged")
        return v


class AddSymbolRequest(SchemaModel):
    """Payload for adding one symbol to a playlist."""
    symbol: str
