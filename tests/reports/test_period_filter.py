from __future__ import annotations

from datetime import date

import pytest

from attendance_tracker.core.enums import ReportPeriod
from attendance_tracker.core.exceptions import ValidationError
from attendance_tracker.reports.filters import ReportFilter, apply_filter, filter_by_period


def _dates(records):
    return sorted(r.work_date for r in records)


def test_week_runs_sunday_through_saturday(make_record):
    records = [make_record(i, 1, date(2024, 3, d)) for i, d in enumerate(range(9, 18), start=1)]

    kept = filter_by_period(records, ReportPeriod.WEEK, date(2024, 3, 14))

    assert _dates(kept) == [date(2024, 3, d) for d in range(10, 17)]


def test_week_on_sunday_starts_that_day(make_record):
    records = [make_record(1, 1, date(2024, 3, 9)), make_record(2, 1, date(2024, 3, 10))]

    kept = filter_by_period(records, ReportPeriod.WEEK, date(2024, 3, 10))

    assert _dates(kept) == [date(2024, 3, 10)]


def test_week_crosses_month_boundary(make_record):
    records = [make_record(1, 1, date(2024, 2, 25)), make_record(2, 1, date(2024, 3, 2)), make_record(3, 1, date(2024, 3, 3))]

    kept = filter_by_period(records, ReportPeriod.WEEK, date(2024, 2, 29))

    assert _dates(kept) == [date(2024, 2, 25), date(2024, 3, 2)]


def test_month_matches_year_month_prefix(make_record):
    records = [make_record(1, 1, date(2024, 3, 31)), make_record(2, 1, date(2024, 4, 1)), make_record(3, 1, date(2023, 3, 15))]

    kept = filter_by_period(records, ReportPeriod.MONTH, date(2024, 3, 1))

    assert _dates(kept) == [date(2024, 3, 31)]


def test_day_and_year(make_record):
    records = [make_record(1, 1, date(2024, 3, 14)), make_record(2, 1, date(2024, 12, 31)), make_record(3, 1, date(2025, 1, 1))]

    assert _dates(filter_by_period(records, ReportPeriod.DAY, date(2024, 3, 14))) == [date(2024, 3, 14)]
    assert _dates(filter_by_period(records, ReportPeriod.YEAR, date(2024, 6, 1))) == [date(2024, 3, 14), date(2024, 12, 31)]


def test_empty_input_is_safe():
    for period in ReportPeriod:
        assert filter_by_period([], period, date(2024, 3, 14)) == []


def test_employee_and_department_substrings_are_case_insensitive(make_record, employees):
    day = date(2024, 3, 14)
    records = [make_record(1, 1, day), make_record(2, 2, day), make_record(3, 3, day)]

    by_name = apply_filter(records, ReportFilter(period=ReportPeriod.DAY, employee="ALI", reference_date=day), employees)
    assert [r.employee_id for r in by_name] == [1, 3]

    by_dept = apply_filter(records, ReportFilter(period=ReportPeriod.DAY, department="it", reference_date=day), employees)
    assert [r.employee_id for r in by_dept] == [1, 3]

    both = apply_filter(
        records,
        ReportFilter(period=ReportPeriod.DAY, employee="alina", department="support", reference_date=day),
        employees,
    )
    assert [r.employee_id for r in both] == [3]


def test_missing_employee_matches_as_unknown(make_record, employees):
    day = date(2024, 3, 14)
    records = [make_record(1, 1, day), make_record(2, 99, day)]

    kept = apply_filter(records, ReportFilter(period=ReportPeriod.DAY, employee="unk", reference_date=day), employees)
    assert [r.employee_id for r in kept] == [99]

    kept = apply_filter(records, ReportFilter(period=ReportPeriod.DAY, department="UNKNOWN", reference_date=day), employees)
    assert [r.employee_id for r in kept] == [99]


def test_filter_from_mapping_defaults_to_week_and_today():
    f = ReportFilter.from_mapping({}, today=date(2024, 3, 14))

    assert f.period == ReportPeriod.WEEK
    assert f.reference_date == date(2024, 3, 14)
    assert f.employee == "" and f.department == ""


def test_filter_from_mapping_parses_fields():
    f = ReportFilter.from_mapping({"period": "Month", "date": "2024-03-01", "employee": " bao ", "department": "HR"})

    assert f.period == ReportPeriod.MONTH
    assert f.reference_date == date(2024, 3, 1)
    assert f.employee == "bao"
    assert f.department == "HR"


@pytest.mark.parametrize("args", [{"period": "quarter"}, {"date": "14/03/2024"}])
def test_filter_from_mapping_rejects_bad_input(args):
    with pytest.raises(ValidationError):
        ReportFilter.from_mapping(args)
