from __future__ import annotations

import dataclasses
import re
from datetime import date, datetime, timezone

import pytest

from datebuilder import DateBuilder, DateParts

ISO_OUT_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z")


def test_cannot_instantiate_directly() -> None:
    with pytest.raises(TypeError):
        DateBuilder(datetime(2024, 1, 1, tzinfo=timezone.utc))


def test_is_immutable() -> None:
    d = DateBuilder.from_input("2024-01-01")
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.moment = datetime(2000, 1, 1, tzinfo=timezone.utc)  # type: ignore[misc]


def test_equality_by_moment() -> None:
    assert DateBuilder.from_input("2024-10-10") == DateBuilder.from_input(1728518400)
    assert len({DateBuilder.from_input("2024-10-10"), DateBuilder.from_input(1728518400000)}) == 1


def test_to_iso() -> None:
    assert DateBuilder.from_input("2024-11-30").to_iso() == "2024-11-30T00:00:00.000Z"
    assert DateBuilder.from_input("2021-10-12T13:45:30.250Z").to_iso() == "2021-10-12T13:45:30.250Z"
    assert DateBuilder.from_input({"day": 2, "month": 1, "year": 33}).to_iso() == "0033-01-02T00:00:00.000Z"


@pytest.mark.parametrize("value", ["2024-02-29", 0, -1, 1728518400123, datetime(2030, 6, 1, 12), "1970-01-01T00:00:01Z"])
def test_to_iso_shape(value: object) -> None:
    assert ISO_OUT_RE.fullmatch(DateBuilder.from_input(value).to_iso())


def test_unix_conversions() -> None:
    assert DateBuilder.from_input("1970-01-01T00:00:01.000Z").to_unix() == 1
    d = DateBuilder.from_input("2024-11-30")
    assert d.to_unix() == 1732924800
    assert d.to_unix_ms() == 1732924800000


def test_unix_floor_division() -> None:
    assert DateBuilder.from_input(1999).to_unix_ms() == 1999000
    assert DateBuilder.from_input(1728518400999).to_unix() == 1728518400
    assert DateBuilder.from_input(-0.5).to_unix_ms() == -500
    assert DateBuilder.from_input(-0.5).to_unix() == -1


def test_native_input_is_midnight_utc() -> None:
    d = DateBuilder.from_input(datetime(2024, 10, 10, 18, 30))
    assert d.to_unix_ms() == 1728518400000


def test_to_date_is_independent_copy() -> None:
    d = DateBuilder.from_input("2021-10-12T13:45:30.250Z")
    copy = d.to_date()
    assert copy == d.moment
    assert copy is not d.moment
    assert copy.tzinfo is timezone.utc

    copy = copy.replace(year=1999)
    assert d.to_iso() == "2021-10-12T13:45:30.250Z"


def test_to_object_round_trips(utc_host) -> None:
    for day, month, year in [(1, 3, 2004), (29, 2, 2024), (31, 12, 1999), (1, 1, 1970)]:
        obj = DateBuilder.from_input({"day": day, "month": month, "year": year}).to_object()
        assert obj == DateParts(day=day, month=month, year=year)
        assert obj.as_dict() == {"day": day, "month": month, "year": year}


def test_to_object_reads_local_fields(host_tz) -> None:
    # five hours west of UTC, UTC midnight is still the previous evening
    host_tz("EST+5")
    d = DateBuilder.from_input("2024-03-01")
    assert d.format("yyyy-MM-dd") == "2024-03-01"
    assert d.to_object() == DateParts(day=29, month=2, year=2024)


def test_from_now_is_current(utc_host) -> None:
    before = datetime.now(timezone.utc).replace(microsecond=0)
    d = DateBuilder.from_now()
    assert d.moment >= before
    assert d.moment.microsecond % 1000 == 0
    assert d.to_object().year >= 2024
    assert isinstance(d.to_date().date(), date)


def test_local_views_clamp_at_range_edges(host_tz) -> None:
    host_tz("EST+5")
    first = DateBuilder.from_input({"day": 1, "month": 1, "year": 1})
    assert first.to_object() == DateParts(day=1, month=1, year=1)
    assert first.to_locale("en-US") == "1/1/1"

    host_tz("XYZ-5")
    last = DateBuilder.from_input("9999-12-31T23:00:00.000Z")
    assert last.to_object() == DateParts(day=31, month=12, year=9999)
