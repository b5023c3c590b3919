from datetime import UTC, datetime

import pytest

from app.services.time_slot_parser import ParsedTimeSlot, TimeSlotParseFailure, TimeSlotParser


def _parser(year: int = 2024) -> TimeSlotParser:
    return TimeSlotParser(now=lambda: datetime(year, 6, 1, 9, 30, tzinfo=UTC))


def test_parser_resolves_label_against_current_year() -> None:
    result = _parser().parse("Monday, Dec 16 - 10:00 AM")

    assert isinstance(result, ParsedTimeSlot)
    assert result.label == "Monday, Dec 16 - 10:00 AM"
    assert result.starts_at == datetime(2024, 12, 16, 10, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    ("label", "expected_hour"),
    [
        ("Monday, Dec 16 - 10:00 AM", 10),
        ("Monday, Dec 16 - 2:00 PM", 14),
        ("Monday, Dec 16 - 12:00 AM", 0),
        ("Monday, Dec 16 - 12:00 PM", 12),
        ("Monday, Dec 16 - 1:00 AM", 1),
        ("Monday, Dec 16 - 11:00 PM", 23),
    ],
)
def test_parser_converts_twelve_hour_clock(label: str, expected_hour: int) -> None:
    result = _parser().parse(label)

    assert isinstance(result, ParsedTimeSlot)
    assert result.starts_at.hour == expected_hour


def test_parser_keeps_minutes() -> None:
    result = _parser().parse("Friday, Mar 7 - 4:45 PM")

    assert isinstance(result, ParsedTimeSlot)
    assert (result.starts_at.month, result.starts_at.day) == (3, 7)
    assert (result.starts_at.hour, result.starts_at.minute) == (16, 45)


def test_parser_does_not_check_weekday_against_date() -> None:
    result = _parser().parse("Sunday, Jan 2 - 9:00 AM")

    assert isinstance(result, ParsedTimeSlot)
    assert result.starts_at == datetime(2024, 1, 2, 9, 0, tzinfo=UTC)


def test_parser_uses_current_year_even_for_next_year_slots() -> None:
    result = _parser(year=2025).parse("Thursday, Jan 2 - 9:00 AM")

    assert isinstance(result, ParsedTimeSlot)
    assert result.starts_at.year == 2025


def test_parser_ignores_surrounding_whitespace() -> None:
    result = _parser().parse("  Tuesday, Dec 17 - 3:00 PM ")

    assert isinstance(result, ParsedTimeSlot)
    assert result.starts_at.hour == 15


@pytest.mark.parametrize(
    "label",
    [
        "Monday Dec 16 - 10:00 AM",
        "Monday, Dec 16 10:00 AM",
        "Monday, Dec 16 / 10:00 AM",
        "Monday, Dec 16 - 10:00",
        "Monday, Dec 16 - 10 AM",
        "Monday, Dec 16 - 10:00 am",
        "Monday, Dec - 10:00 AM",
        "Xyz 5 - 1:00 AM",
        "Monday, Dec ١٦ - ١٠:٠٠ AM",
        "",
    ],
)
def test_parser_rejects_malformed_labels(label: str) -> None:
    result = _parser().parse(label)

    assert isinstance(result, TimeSlotParseFailure)
    assert result.reason == "format"


def test_parser_rejects_unknown_month() -> None:
    result = _parser().parse("Monday, Xyz 5 - 1:00 AM")

    assert isinstance(result, TimeSlotParseFailure)
    assert result.reason == "month"


@pytest.mark.parametrize(
    ("label", "reason"),
    [
        ("Monday, Dec 16 - 13:00 PM", "hour"),
        ("Monday, Dec 16 - 0:00 AM", "hour"),
        ("Monday, Dec 16 - 10:75 AM", "minute"),
        ("Monday, Feb 30 - 10:00 AM", "date"),
        ("Monday, Dec 0 - 10:00 AM", "date"),
    ],
)
def test_parser_rejects_out_of_range_values(label: str, reason: str) -> None:
    result = _parser().parse(label)

    assert isinstance(result, TimeSlotParseFailure)
    assert result.reason == reason
    assert result.label == label
