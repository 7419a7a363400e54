"""Shared market data models used by both frontend and backend services."""

from .base import SchemaModel, PartialUpdateModel
from .ticker import TickerType, Ticker, TickerSearchResult, TickerQuote
from .option import (
    OptionType, OptionGreeks, OptionContract, OptionsChain,
    ExpirationChain, OptionsSnapshot
)
from .strategy import (
    UNLIMITED, StrategyType, LegType, LegAction, RiskLimit,
    StrategyLegInput, StrategyLeg, Strategy, StrategyAnalysis,
    CreateStrategyRequest, UpdateStrategyRequest
)
from .playlist import (
    Playlist, PlaylistWithTickers, CreatePlaylistRequest,
    UpdatePlaylistRequest, AddSymbolRequest
)
from .registry import MODEL_REGISTRY, get_model, list_models

__all__ = [
    # Base
    "SchemaModel", "PartialUpdateModel",

    # Ticker models
    "TickerType", "Ticker", "TickerSearchResult", "TickerQuote",

    # Option models
    "OptionType", "OptionGreeks", "OptionContract", "OptionsChain",
    "ExpirationChain", "OptionsSnapshot",

    # Strategy models
    "UNLIMITED", "StrategyType", "LegType", "LegAction", "RiskLimit",
    "StrategyLegInput", "StrategyLeg", "Strategy", "StrategyAnalysis",
    "CreateStrategyRequest", "UpdateStrategyRequest",

    # Playlist models
    "Playlist", "PlaylistWithTickers", "CreatePlaylistRequest",
    "UpdatePlaylistRequest", "AddSymbolRequest",

    # Registry
    "MODEL_REGISTRY", "get_model", "list_models"
]
