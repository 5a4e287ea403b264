from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..container import Container
from ..core.exceptions import ValidationError
from .export import export_filename
from .filters import ReportFilter


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports", methods=["GET"], endpoint="report")
    def report():
        try:
            report_filter = ReportFilter.from_mapping(request.args)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        data = container.report_service.build_report(report_filter)
        body = data.as_dict()
        body["filter"] = {
            "period": report_filter.period.value,
            "employee": report_filter.employee,
            "department": report_filter.department,
            "date": report_filter.reference_date.isoformat(),
        }
        return jsonify(body)

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="report_csv")
    def report_csv():
        csv_text = container.report_service.export_csv()
        filename = export_filename(now_local().date())
        return app.response_class(
            csv_text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
