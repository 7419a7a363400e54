"""
pytest configuration for the market-models tests.
Provides shared payload fixtures and isolates global logging/env state.
"""

import copy
import logging
import os

import pytest

from market_models.infrastructure.monitoring import (
    ColorLevelFormatter,
    JsonLineFormatter,
    PlainFileFormatter,
    configure_structlog,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep MARKET_MODELS_* variables from the host out of every test."""
    for key in list(os.environ):
        if key.startswith("MARKET_MODELS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_logging():
    """Remove handlers installed by setup_logging and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, (ColorLevelFormatter, PlainFileFormatter, JsonLineFormatter)):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    configure_structlog()


# Payload fixtures (wire format, camelCase)
@pytest.fixture
def ticker_payload():
    return {
        "symbol": "AAPL",
        "name": "Apple Inc.",
        "exchange": "NASDAQ",
        "type": "stock",
        "price": 189.84,
        "change": 1.27,
        "changePercent": 0.67,
        "volume": 52164500,
    }


@pytest.fixture
def full_ticker_payload(ticker_payload):
    payload = copy.deepcopy(ticker_payload)
    payload.update({
        "marketCap": 2950000000000,
        "high52Week": 199.62,
        "low52Week": 164.08,
        "previousClose": 188.57,
        "dayHigh": 190.32,
        "dayLow": 188.19,
    })
    return payload


@pytest.fixture
def greeks_payload():
    return {"delta": 0.52, "gamma": 0.04, "theta": -0.09, "vega": 0.21, "rho": 0.05}


@pytest.fixture
def option_contract_payload():
    return {
        "contractId": "AAPL240621C00150000",
        "symbol": "AAPL",
        "type": "call",
        "strike": 150,
        "expiration": "2024-06-21",
        "bid": 40.1,
        "ask": 40.45,
        "last": 40.3,
        "volume": 312,
        "openInterest": 10452,
        "impliedVolatility": 0.27,
    }


@pytest.fixture
def put_contract_payload(option_contract_payload):
    payload = copy.deepcopy(option_contract_payload)
    payload.update({
        "contractId": "AAPL240621P00150000",
        "type": "put",
        "bid": 0.41,
        "ask": 0.44,
        "last": 0.42,
    })
    return payload


@pytest.fixture
def options_chain_payload(option_contract_payload, put_contract_payload):
    return {
        "symbol": "AAPL",
        "underlyingPrice": 189.84,
        "expirations": ["2024-06-21"],
        "chains": [
            {
                "expiration": "2024-06-21",
                "daysToExpiration": 30,
                "calls": [option_contract_payload],
                "puts": [put_contract_payload],
            }
        ],
    }


@pytest.fixture
def strategy_payload():
    return {
        "id": "s1",
        "userId": "u1",
        "name": "AAPL bull call spread",
        "symbol": "AAPL",
        "type": "spread",
        "legs": [
            {
                "type": "call",
                "action": "buy",
                "strike": 150,
                "expiration": "2024-06-21",
                "quantity": 1,
                "price": 40.3,
                "contractId": "AAPL240621C00150000",
            },
            {
                "type": "call",
                "action": "sell",
                "strike": 160,
                "expiration": "2024-06-21",
                "quantity": 1,
                "price": 31.2,
            },
        ],
        "createdAt": "2024-05-20T14:30:00Z",
        "updatedAt": "2024-05-20T14:30:00Z",
    }


@pytest.fixture
def analysis_payload():
    return {
        "maxProfit": "unlimited",
        "maxLoss": -500,
        "breakeven": [155.0],
        "netPremium": -500,
    }


@pytest.fixture
def playlist_payload():
    return {
        "id": "p1",
        "userId": "u1",
        "name": "Tech",
        "symbols": ["AAPL", "MSFT"],
        "isDefault": True,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-01-01T00:00:00Z",
    }
