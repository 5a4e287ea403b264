"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

EMPLOYEES_SLOT = "employees"
ATTENDANCE_SLOT = "attendance"

UNKNOWN_LABEL = "Unknown"
EMPTY_PUNCH = "-"

DATE_FORMAT = "%Y-%m-%d"
PUNCH_FORMAT = "%H:%M"

CSV_HEADERS = ("Employee Name", "Department", "Date", "Punch In", "Punch Out", "Status")
EXPORT_FILENAME_TEMPLATE = "Attendance_Report_{date}.csv"
