"""
Unit tests for strategy models and the RiskLimit variant.
"""

import math

import pytest

from market_models.data.models import (
    UNLIMITED,
    CreateStrategyRequest,
    LegAction,
    LegType,
    RiskLimit,
    Strategy,
    StrategyAnalysis,
    StrategyLeg,
    StrategyLegInput,
    StrategyType,
    UpdateStrategyRequest,
)
from market_models.infrastructure.error_handling import PayloadValidationError


class TestRiskLimit:
    """Test the bounded/unbounded variant."""

    def test_bounded(self):
        limit = RiskLimit.bounded(-500)

        assert not limit.is_unbounded
        assert limit.kind == "bounded"
        assert limit.value == -500
        assert limit.to_wire() == -500

    def test_unbounded(self):
        limit = RiskLimit.unbounded()

        assert limit.is_unbounded
        assert limit.kind == "unbounded"
        assert limit.value is None
        assert limit.to_wire() == UNLIMITED

    def test_parse(self):
        assert RiskLimit.parse("unlimited") == RiskLimit.unbounded()
        assert RiskLimit.parse(250.5) == RiskLimit.bounded(250.5)
        assert RiskLimit.parse(0) == RiskLimit.bounded(0)

    def test_zero_is_not_unbounded(self):
        assert RiskLimit.bounded(0) != RiskLimit.unbounded()

    @pytest.mark.parametrize("raw", [True, False, "Unlimited", "500", None, math.inf, -math.inf, math.nan, [1]])
    def test_parse_rejects(self, raw):
        with pytest.raises(ValueError):
            RiskLimit.parse(raw)

    def test_hashable_and_repr(self):
        assert len({RiskLimit.bounded(1), RiskLimit.bounded(1), RiskLimit.unbounded()}) == 2
        assert repr(RiskLimit.unbounded()) == "RiskLimit.unbounded()"
        assert repr(RiskLimit.bounded(-500)) == "RiskLimit.bounded(-500)"


class TestStrategyAnalysis:
    """Test StrategyAnalysis model."""

    def test_unlimited_profit_and_bounded_loss(self, analysis_payload):
        analysis = StrategyAnalysis.from_dict(analysis_payload)

        assert analysis.max_profit.is_unbounded
        assert analysis.max_loss == RiskLimit.bounded(-500)
        assert analysis.probability_of_profit is None

    def test_round_trip(self, analysis_payload):
        analysis = StrategyAnalysis.from_dict(analysis_payload)
        data = analysis.to_dict()

        assert data == analysis_payload
        assert data["maxProfit"] == "unlimited"
        assert data["maxLoss"] == -500
        assert "probabilityOfProfit" not in data
        assert StrategyAnalysis.from_json(analysis.to_json()) == analysis

    def test_construct_with_python_values(self):
        analysis = StrategyAnalysis(
            max_profit=RiskLimit.bounded(1200),
            max_loss="unlimited",
            breakeven=[95.0, 105.0],
            net_premium=1200,
            probability_of_profit=0.64,
        )

        assert analysis.max_loss.is_unbounded
        assert analysis.to_dict()["probabilityOfProfit"] == 0.64

    @pytest.mark.parametrize("bad", [True, "infinite", None, float("inf")])
    def test_invalid_limits_rejected(self, analysis_payload, bad):
        analysis_payload["maxLoss"] = bad

        with pytest.raises(PayloadValidationError) as exc_info:
            StrategyAnalysis.from_dict(analysis_payload)

        assert exc_info.value.issues[0]["field"] == "maxLoss"

    def test_number_fields_are_not_coerced(self, analysis_payload):
        analysis_payload.update({"netPremium": True, "breakeven": ["152.5"]})

        with pytest.raises(PayloadValidationError) as exc_info:
            StrategyAnalysis.from_dict(analysis_payload)

        fields = {issue["field"] for issue in exc_info.value.issues}
        assert fields == {"netPremium", "breakeven[0]"}

    def test_assignment_is_validated(self, analysis_payload):
        analysis = StrategyAnalysis.from_dict(analysis_payload)
        analysis.max_profit = 800

        assert analysis.max_profit == RiskLimit.bounded(800)


class TestStrategy:
    """Test Strategy and leg models."""

    def test_round_trip(self, strategy_payload):
        strategy = Strategy.from_dict(strategy_payload)

        assert strategy.strategy_type is StrategyType.SPREAD
        assert strategy.notes is None
        assert strategy.to_dict() == strategy_payload

    def test_leg_order_preserved(self, strategy_payload):
        strategy = Strategy.from_dict(strategy_payload)

        assert [leg.action for leg in strategy.legs] == [LegAction.BUY, LegAction.SELL]
        assert [leg.strike for leg in strategy.legs] == [150, 160]
        assert strategy.legs[0].contract_id == "AAPL240621C00150000"
        assert strategy.legs[1].contract_id is None

    def test_stock_leg_without_option_fields(self):
        leg = StrategyLeg.from_dict({"type": "stock", "action": "buy", "quantity": 100})

        assert leg.leg_type is LegType.STOCK
        assert leg.strike is None
        assert leg.expiration is None
        assert leg.price is None
        assert leg.to_dict() == {"type": "stock", "action": "buy", "quantity": 100}

    def test_notes_populated(self, strategy_payload):
        strategy_payload["notes"] = "Roll before earnings"

        strategy = Strategy.from_dict(strategy_payload)

        assert strategy.notes == "Roll before earnings"
        assert strategy.to_dict() == strategy_payload

    @pytest.mark.parametrize("strategy_type", [t.value for t in StrategyType])
    def test_every_strategy_type_accepted(self, strategy_payload, strategy_type):
        strategy_payload["type"] = strategy_type

        assert Strategy.from_dict(strategy_payload).strategy_type.value == strategy_type

    def test_unknown_strategy_type_rejected(self, strategy_payload):
        strategy_payload["type"] = "jade_lizard"

        with pytest.raises(PayloadValidationError):
            Strategy.from_dict(strategy_payload)

    def test_unknown_leg_action_rejected(self, strategy_payload):
        strategy_payload["legs"][1]["action"] = "short"

        with pytest.raises(PayloadValidationError) as exc_info:
            Strategy.from_dict(strategy_payload)

        assert exc_info.value.issues[0]["field"] == "legs[1].action"


class TestStrategyRequests:
    """Test create and update request shapes."""

    def test_create_request_minimal(self):
        request = CreateStrategyRequest.from_dict({
            "name": "Covered call",
            "symbol": "MSFT",
            "type": "covered_call",
            "legs": [
                {"type": "stock", "action": "buy", "quantity": 100},
                {"type": "call", "action": "sell", "strike": 440, "expiration": "2024-07-19", "quantity": 1},
            ],
        })

        assert request.strategy_type is StrategyType.COVERED_CALL
        assert request.notes is None
        assert all(isinstance(leg, StrategyLegInput) for leg in request.legs)

    def test_create_request_drops_contract_id(self):
        request = CreateStrategyRequest.from_dict({
            "name": "Long call",
            "symbol": "AAPL",
            "type": "single",
            "legs": [{"type": "call", "action": "buy", "quantity": 1, "contractId": "AAPL240621C00150000"}],
        })

        assert "contractId" not in request.to_dict()["legs"][0]
        assert not hasattr(request.legs[0], "contract_id")

    def test_update_request_tracks_supplied_fields(self):
        request = UpdateStrategyRequest.from_dict({"name": "Renamed"})

        assert request.changes() == {"name": "Renamed"}
        assert request.to_dict() == {"name": "Renamed"}
        assert request.legs is None

    def test_update_request_explicit_null_notes(self):
        request = UpdateStrategyRequest.from_dict({"notes": None})

        assert request.changes() == {"notes": None}
        assert request.to_dict() == {"notes": None}
        assert not request.is_empty()

    def test_update_request_empty(self):
        request = UpdateStrategyRequest.from_dict({})

        assert request.is_empty()
        assert request.changes() == {}
        assert request.to_dict() == {}

    @pytest.mark.parametrize("field_name", ["name", "legs"])
    def test_update_request_rejects_null(self, field_name):
        with pytest.raises(PayloadValidationError) as exc_info:
            UpdateStrategyRequest.from_dict({field_name: None})

        assert exc_info.value.issues[0]["field"] == field_name

    def test_update_request_legs(self):
        request = UpdateStrategyRequest.from_dict({
            "legs": [{"type": "put", "action": "sell", "strike": 95, "quantity": 2}]
        })

        assert list(request.changes()) == ["legs"]
        assert request.to_dict() == {
            "legs": [{"type": "put", "action": "sell", "strike": 95, "quantity": 2}]
        }

    def test_update_request_legs_omit_null_optionals(self):
        request = UpdateStrategyRequest.from_dict({
            "legs": [{"type": "stock", "action": "buy", "quantity": 1, "strike": None}]
        })

        assert request.to_dict() == {"legs": [{"type": "stock", "action": "buy", "quantity": 1}]}
        assert request.changes() == {"legs": [{"leg_type": "stock", "action": "buy", "quantity": 1}]}
