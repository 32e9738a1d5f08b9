from datetime import date, datetime, timedelta

from ncmcheck.extraction.validity import is_valid
from ncmcheck.models.schema import ClassificationRecord


def rec(start=None, end=None):
    return ClassificationRecord(code="84713019", start_raw=start, end_raw=end)


def test_no_bounds_always_valid():
    assert is_valid(rec(), date(1900, 1, 1))
    assert is_valid(rec(), date(2999, 1, 1))


def test_start_bound_monotonic():
    r = rec(start="2022-01-01")
    assert not is_valid(r, date(2021, 12, 31))
    assert is_valid(r, date(2022, 1, 1))
    assert is_valid(r, date(2030, 6, 1))


def test_end_bound_inclusive():
    r = rec(start="01/04/2022", end="31/12/2023")
    assert is_valid(r, date(2023, 12, 31))
    assert not is_valid(r, date(2024, 1, 1))


def test_not_yet_effective():
    assert not is_valid(rec(start="2099-01-01"))


def test_superseded():
    yesterday = date.today() - timedelta(days=1)
    assert not is_valid(rec(end=yesterday.isoformat()))


def test_unparseable_bounds_are_open():
    assert is_valid(rec(start="amanhã", end="??"), date(2020, 1, 1))


def test_inverted_interval_does_not_raise():
    r = rec(start="2024-01-01", end="2023-01-01")
    assert not is_valid(r, date(2023, 6, 1))


def test_datetime_reference():
    r = rec(end="2023-12-31")
    assert is_valid(r, datetime(2023, 12, 31, 23, 59))


def test_from_raw_field_variants():
    r = ClassificationRecord.from_raw({"data_inicio": "2022-01-01", "DataFim": "2022-12-31"}, "01")
    assert r.effective_from == date(2022, 1, 1)
    assert r.effective_to == date(2022, 12, 31)
    assert is_valid(r, date(2022, 6, 1))
    assert not is_valid(r, date(2023, 1, 1))
