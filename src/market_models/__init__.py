"""
market-models - shared data models for tickers, options chains, strategies
and playlists.

The package is organized into layers:

- data: the transfer shapes, their registry and payload validation
- infrastructure: error handling and structured logging
- application: configuration and the JSON Schema export use case
- presentation: the ``market-models`` command line interface
"""

__version__ = "0.1.0"
__title__ = "market-models"
__description__ = "Shared market data models for frontend and backend services"
__license__ = "MIT"

VERSION = tuple(map(int, __version__.split('.')))

from .data.models import *  # noqa: E402,F401,F403
from .data.models import __all__ as _models_all  # noqa: E402
from .infrastructure.error_handling import (  # noqa: E402
    MarketModelsError,
    ValidationError,
    PayloadValidationError,
    UnknownModelError
)

__all__ = [
    "__version__",
    "VERSION",
    "MarketModelsError",
    "ValidationError",
    "PayloadValidationError",
    "UnknownModelError",
] + list(_models_all)
