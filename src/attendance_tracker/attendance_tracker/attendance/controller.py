from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..storage.serialization import record_to_dict


def register(app: Flask, container: Container) -> None:
    def _command_result(employee_id: int, matched: int, status: str):
        return jsonify({
            "success": True,
            "employeeId": employee_id,
            "status": status,
            "updated": matched,
        })

    @app.route("/api/attendance/today", methods=["GET"], endpoint="todays_attendance")
    def todays_attendance():
        records = container.attendance_service.todays_records()
        return jsonify([record_to_dict(r) for r in records])

    @app.route("/api/attendance/<int:employee_id>/absent", methods=["POST"], endpoint="mark_absent")
    def mark_absent(employee_id: int):
        matched = container.attendance_service.mark_absent(employee_id)
        return _command_result(employee_id, matched, "absent")

    @app.route("/api/attendance/<int:employee_id>/half-day", methods=["POST"], endpoint="mark_half_day")
    def mark_half_day(employee_id: int):
        matched = container.attendance_service.mark_half_day(employee_id)
        return _command_result(employee_id, matched, "half-day")

    @app.route("/api/attendance/<int:employee_id>/present", methods=["POST"], endpoint="mark_present")
    def mark_present(employee_id: int):
        matched = container.attendance_service.mark_present(employee_id)
        return _command_result(employee_id, matched, "present")
