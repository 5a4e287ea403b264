from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from ..storage.serialization import employee_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_employees()
        return jsonify([employee_to_dict(e) for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"success": False, "message": "Request body must be a JSON object"}), 400
        try:
            employee = container.employee_service.add_employee(
                name=data.get("name", ""),
                position=data.get("position", ""),
                department=data.get("department", ""),
                join_date=data.get("joinDate") or data.get("join_date") or "",
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True, "employee": employee_to_dict(employee)}), 201

    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        return jsonify(container.employee_service.departments())
