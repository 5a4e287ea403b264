from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..attendance.model import AttendanceReportRow
from ..core.constants import CSV_HEADERS, DATE_FORMAT, EXPORT_FILENAME_TEMPLATE


def write_report_csv(rows: Iterable[AttendanceReportRow]) -> str:
    """Every value double-quoted, rows separated by a bare newline."""
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        writer.writerow([row.employee_name, row.department, row.work_date, row.punch_in, row.punch_out, row.status])
    return out.getvalue().rstrip("\n")


def export_filename(today: date) -> str:
    return EXPORT_FILENAME_TEMPLATE.format(date=today.strftime(DATE_FORMAT))
