"""Tests for field and record validation."""

from __future__ import annotations

from datetime import date

import pytest

from shipyard_app.services.validation import (
    check_field,
    is_crew_size_valid,
    is_prod_date_valid,
    is_ship_valid,
    is_speed_valid,
    is_string_valid,
    validate_ship,
)


class TestPredicates:
    def test_string_bounds(self):
        assert is_string_valid("a")
        assert is_string_valid("x" * 50)
        assert not is_string_valid("")
        assert not is_string_valid("x" * 51)
        assert not is_string_valid(None)

    @pytest.mark.parametrize("year, valid", [(2800, False), (2801, True), (3018, True), (3019, False)])
    def test_prod_year_bounds_are_exclusive(self, year, valid):
        assert is_prod_date_valid(date(year, 6, 15)) is valid

    def test_prod_date_missing(self):
        assert not is_prod_date_valid(None)

    def test_speed_bounds_are_inclusive(self):
        assert is_speed_valid(0.01)
        assert is_speed_valid(0.99)
        assert not is_speed_valid(0.0)
        assert not is_speed_valid(1.0)
        assert not is_speed_valid(None)

    def test_crew_size_bounds_are_inclusive(self):
        assert is_crew_size_valid(1)
        assert is_crew_size_valid(9999)
        assert not is_crew_size_valid(0)
        assert not is_crew_size_valid(10000)
        assert not is_crew_size_valid(None)


class TestShipValidity:
    def test_valid_ship(self, sample_ship):
        assert is_ship_valid(sample_ship)

    def test_none_is_invalid(self):
        assert not is_ship_valid(None)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("name", ""),
            ("planet", "p" * 51),
            ("prod_date", date(3019, 1, 1)),
            ("speed", 1.5),
            ("crew_size", 0),
        ],
    )
    def test_each_checked_field(self, sample_ship, field, value):
        setattr(sample_ship, field, value)
        assert not is_ship_valid(sample_ship)

    def test_type_and_used_not_range_checked(self, sample_ship):
        sample_ship.ship_type = None
        sample_ship.is_used = None
        assert is_ship_valid(sample_ship)


class TestValidateShip:
    def test_collects_every_issue(self, sample_ship):
        sample_ship.name = ""
        sample_ship.speed = 0.0
        sample_ship.ship_type = None
        result = validate_ship(sample_ship)
        assert not result.valid
        assert result.fields == ["name", "speed", "ship_type"]

    def test_valid_record(self, sample_ship):
        assert validate_ship(sample_ship).valid

    def test_check_field_without_rule(self):
        assert check_field("is_used", None) is None

    def test_check_field_reports_value(self):
        issue = check_field("crew_size", 10000)
        assert issue.field == "crew_size"
        assert issue.value == 10000
