"""Stay date parsing and night enumeration."""

from __future__ import annotations

from datetime import date

import pytest

from romeiro.services import availability_service


def test_parse_stay_date_is_strict() -> None:
    assert availability_service.parse_stay_date("2024-08-01") == date(2024, 8, 1)
    for bad in ("2024-8-1", "01/08/2024", "2024-02-30", ""):
        with pytest.raises(ValueError):
            availability_service.parse_stay_date(bad)


def test_validate_stay_rejects_empty_and_inverted_ranges() -> None:
    with pytest.raises(ValueError):
        availability_service.validate_stay(date(2024, 8, 2), date(2024, 8, 2))
    with pytest.raises(ValueError):
        availability_service.validate_stay(date(2024, 8, 3), date(2024, 8, 2))
    availability_service.validate_stay(date(2024, 8, 1), date(2024, 8, 2))


def test_iter_nights_excludes_checkout_day() -> None:
    nights = list(availability_service.iter_nights(date(2024, 12, 30), date(2025, 1, 2)))
    assert nights == [date(2024, 12, 30), date(2024, 12, 31), date(2025, 1, 1)]


@pytest.mark.parametrize("value", ["2024-W32-6", "2024-223", "20240810", "2024-08-10T00"])
def test_parse_stay_date_rejects_other_iso_forms(value: str) -> None:
    with pytest.raises(ValueError):
        availability_service.parse_stay_date(value)
