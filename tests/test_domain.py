"""
Unit Tests for domain entities
Tests for: number formatting, resource display, state reconciliation
"""
import math

import pytest

from carbon_tracker.domain import (
    AppState,
    DAYS,
    Resource,
    empty_week,
    format_number,
    parse_float,
)


class TestNumberFormatting:
    """Test number text conversion"""

    @pytest.mark.parametrize("value, expected", [
        (12.5, "12.5"),
        (12.0, "12"),
        (0.0, "0"),
        (-3.0, "-3"),
        (0.1, "0.1"),
    ])
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_format_non_finite(self):
        assert format_number(math.inf) == "inf"
        assert format_number(math.nan) == "nan"

    def test_parse_float_allows_surrounding_whitespace(self):
        assert parse_float("  4.25 ") == 4.25

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "1_000", "1,5"])
    def test_parse_float_rejects(self, raw):
        with pytest.raises(ValueError):
            parse_float(raw)


class TestResource:
    """Test resource entity"""

    def test_display_line(self):
        r = Resource(id="R1", type="Solar Panel", impact=12.5)
        assert str(r) == "ID: R1, Type: Solar Panel, Environmental Impact (CO2e): 12.5"

    def test_matches_id_ignores_case(self):
        r = Resource(id="Wind-7", type="Turbine", impact=1.0)
        assert r.matches_id("wind-7")
        assert r.matches_id("WIND-7")
        assert not r.matches_id("wind-8")


class TestAppState:
    """Test application state"""

    def test_week_has_seven_days(self):
        assert len(DAYS) == 7
        assert DAYS[0] == "Monday" and DAYS[-1] == "Sunday"
        assert empty_week() == [0.0] * 7

    def test_has_accounts(self):
        state = AppState()
        assert not state.has_accounts()
        state.admin_accounts["root"] = "pw"
        assert state.has_accounts()

    def test_reconcile_adds_missing_logs_only(self):
        state = AppState(
            user_accounts={"alice": "a", "bob": "b"},
            user_logs={"alice": [1.0] * 7},
        )
        added = state.reconcile_logs()

        assert added == ["bob"]
        assert state.user_logs["alice"] == [1.0] * 7
        assert state.user_logs["bob"] == [0.0] * 7

    def test_reconcile_keeps_orphan_logs(self):
        state = AppState(user_logs={"ghost": [2.0] * 7})
        state.reconcile_logs()
        assert "ghost" in state.user_logs
