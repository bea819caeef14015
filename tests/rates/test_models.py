"""Tests for rate data models."""

import dataclasses

import pytest
from pydantic import ValidationError

from spotrate.rates.models import IncomingRates, ParkingTimesRequest, RateDetail, WeekdayRule


class TestRateDetail:
    def test_parses_seed_shape(self):
        detail = RateDetail.model_validate(
            {"days": "mon,tues", "times": "0900-2100", "tz": "America/Chicago", "price": 1500}
        )
        assert detail.days == "mon,tues"
        assert detail.price == 1500

    def test_rejects_negative_price(self):
        with pytest.raises(ValidationError):
            RateDetail(days="mon", times="0900-2100", tz="UTC", price=-1)

    def test_rejects_fractional_price(self):
        with pytest.raises(ValidationError):
            RateDetail.model_validate(
                {"days": "mon", "times": "0900-2100", "tz": "UTC", "price": 15.5}
            )

    def test_requires_all_fields(self):
        with pytest.raises(ValidationError):
            RateDetail.model_validate({"days": "mon", "price": 100})


class TestIncomingRates:
    def test_rates_default_to_empty(self):
        assert IncomingRates.model_validate({}).rates == []

    def test_from_json(self):
        batch = IncomingRates.model_validate_json(
            '{"rates": [{"days": "wed", "times": "0600-1800", "tz": "America/Chicago", '
            '"price": 1750}]}'
        )
        assert len(batch.rates) == 1
        assert batch.rates[0].tz == "America/Chicago"


class TestParkingTimesRequest:
    def test_parses_offsets(self):
        req = ParkingTimesRequest.model_validate(
            {"start_time": "2015-07-01T07:20:00-05:00", "end_time": "2015-07-01T08:00:00-05:00"}
        )
        assert req.start_time.utcoffset().total_seconds() == -5 * 3600

    def test_rejects_naive_timestamps(self):
        with pytest.raises(ValidationError):
            ParkingTimesRequest.model_validate(
                {"start_time": "2015-07-01T07:20:00", "end_time": "2015-07-01T08:00:00"}
            )

    def test_requires_both_times(self):
        with pytest.raises(ValidationError):
            ParkingTimesRequest.model_validate({"start_time": "2015-07-01T07:20:00Z"})

    def test_rejects_times_past_utc_range(self):
        with pytest.raises(ValidationError, match="out of range"):
            ParkingTimesRequest.model_validate(
                {"start_time": "9999-12-31T22:00:00-05:00", "end_time": "9999-12-31T23:00:00-05:00"}
            )

    def test_accepts_last_representable_utc_day(self):
        req = ParkingTimesRequest.model_validate(
            {"start_time": "9999-12-31T22:00:00Z", "end_time": "9999-12-31T23:00:00Z"}
        )
        assert req.end_time.year == 9999


class TestWeekdayRule:
    def _rule(self) -> WeekdayRule:
        return WeekdayRule(
            weekday="Monday",
            start_clock=1400.0,
            end_clock=2600.0,
            price=1500,
            source_timezone="America/Chicago",
        )

    def test_is_immutable(self):
        rule = self._rule()
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.price = 1  # type: ignore[misc]

    def test_contains_inner_window(self):
        assert self._rule().contains(1430.0, 1930.0)

    def test_contains_is_inclusive(self):
        assert self._rule().contains(1400.0, 2600.0)

    @pytest.mark.parametrize(("start", "end"), [(1300.0, 1500.0), (2500.0, 2601.0), (100, 200)])
    def test_does_not_contain_outside_window(self, start, end):
        assert not self._rule().contains(start, end)
