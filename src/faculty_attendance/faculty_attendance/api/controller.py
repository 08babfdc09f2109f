from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.log import get_logger
from ..core.enums import ExportKind
from ..core.exceptions import ValidationError
from ..container import Container
from ..ingest.source import WorkbookRowSource, bytes_loader
from ..reports.export import export_filename, rows_to_xlsx

logger = get_logger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    def uploaded_rows():
        """Rows of the optional `workbook` upload; failures degrade to no rows."""
        upload = request.files.get("workbook")
        if not upload:
            return [], None
        source = WorkbookRowSource(bytes_loader(upload.read()))
        return source.rows(), source.error

    def request_text(field: str) -> str:
        if request.mimetype == "text/plain":
            text = request.get_data(as_text=True)
        else:
            text = request.form.get(field, "")
        if not text or not text.strip():
            raise ValidationError(f"{field} text is required")
        return text

    def filtered_punches():
        punches = container.dashboard_service.current().punches
        return punches.filter(
            department=request.args.get("dept") or None,
            search=request.args.get("q") or None,
            date_from=request.args.get("from") or None,
            date_to=request.args.get("to") or None,
        )

    @app.errorhandler(ValidationError)
    def validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"success": True, "ingestionError": container.dashboard_service.ingestion_error})

    @app.route("/api/departments", methods=["GET"], endpoint="departments")
    def departments():
        org = container.dashboard_service.current()
        data = org.to_dict()
        data["ingestionError"] = container.dashboard_service.ingestion_error
        return jsonify(data)

    @app.route("/api/departments", methods=["POST"], endpoint="departments_from_roster")
    def departments_from_roster():
        roster = request_text("roster")
        rows, error = uploaded_rows()
        org = container.organization_service.build(roster, rows)
        data = org.to_dict()
        data["ingestionError"] = error
        return jsonify(data)

    @app.route("/api/departments/csv", methods=["POST"], endpoint="departments_from_csv")
    def departments_from_csv():
        csv_text = request_text("csv")
        rows, error = uploaded_rows()
        org = container.organization_service.build_from_csv(csv_text, rows)
        data = org.to_dict()
        data["ingestionError"] = error
        return jsonify(data)

    @app.route("/api/departments/people", endpoint="department_people")
    def department_people():
        punches = container.dashboard_service.current().punches
        people = punches.department_people(filtered_punches())
        return jsonify([p.to_dict() for p in people])

    @app.route("/api/punches", endpoint="punches")
    def punches():
        index = container.dashboard_service.current().punches
        rows = filtered_punches()
        return jsonify({"departments": index.departments(), "rows": [r.to_dict() for r in rows]})

    @app.route("/api/punches/<path:name>", endpoint="punches_for_person")
    def punches_for_person(name: str):
        rows = container.dashboard_service.current().punches.rows_for(name)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/summary", endpoint="summary")
    def summary():
        report = container.report_service.summary(filtered_punches())
        return jsonify(report.to_dict())

    @app.route("/export/<kind>.xlsx", endpoint="export")
    def export(kind: str):
        try:
            export_kind = ExportKind(kind)
        except ValueError:
            raise ValidationError(f"unknown export: {kind}") from None

        reports = container.report_service
        rows = filtered_punches()
        if export_kind == ExportKind.DETAILED:
            table = reports.detailed_rows(rows)
        elif export_kind == ExportKind.CUMULATIVE:
            table = reports.cumulative_rows(rows)
        elif export_kind == ExportKind.DURATION:
            table = reports.duration_rows(rows)
        else:
            people = container.dashboard_service.current().punches.department_people(rows)
            table = reports.people_rows(people)

        logger.info("export %s: %d rows", export_kind.value, len(table))
        return send_file(
            io.BytesIO(rows_to_xlsx(table, export_kind)),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=export_filename(export_kind),
        )
