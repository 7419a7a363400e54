"""
Name-keyed registry of every transfer shape in the package.
"""

from typing import Dict, List, Type

from .base import SchemaModel
from .ticker import Ticker, TickerSearchResult, TickerQuote
from .option import OptionGreeks, OptionContract, OptionsChain, ExpirationChain, OptionsSnapshot
from .strategy import (
    StrategyLegInput, StrategyLeg, Strategy, StrategyAnalysis,
    CreateStrategyRequest, UpdateStrategyRequest
)
from .playlist import (
    Playlist, PlaylistWithTickers, CreatePlaylistRequest,
    UpdatePlaylistRequest, AddSymbolRequest
)
from ...infrastructure.error_handling import UnknownModelError

_MODELS: List[Type[SchemaModel]] = [
    # Ticker
    Ticker, TickerSearchResult, TickerQuote,
    # Option
    OptionGreeks, OptionContract, OptionsChain, ExpirationChain, OptionsSnapshot,
    # Strategy
    StrategyLeg, StrategyLegInput, Strategy, StrategyAnalysis,
    CreateStrategyRequest, UpdateStrategyRequest,
    # Playlist
    Playlist, PlaylistWithTickers, CreatePlaylistRequest, UpdatePlaylistRequest, AddSymbolRequest,
]

MODEL_REGISTRY: Dict[str, Type[SchemaModel]] = {model.model_name(): model for model in _MODELS}


def list_models() -> List[str]:
    """Registered model names in declaration order."""
    return list(MODEL_REGISTRY)


def get_model(name: str) -> Type[SchemaModel]:
    """Look up a model class by its contract name."""
    try:
        return MODEL_REGISTRY[name]
    except KeyError:
        raise UnknownModelError(
            f"Unknown model: {name}",
            model_name=name,
            available=list_models(),
        ) from None
