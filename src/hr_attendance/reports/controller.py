from __future__ import annotations

from datetime import date
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date_or_none
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.overtime_report_service

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except AuthorizationError as e:
                return jsonify({"error": str(e)}), 403
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404

        return wrapper

    def _current_user():
        # Identity comes from the host application; here it is only a viewer hint.
        user_id = request.args.get("user_id")
        if not user_id:
            return None
        user = container.records.get_employee(user_id)
        if not user:
            raise NotFoundError(f"Employee {user_id} not found")
        return user

    def _year_month():
        today = date.today()
        return request.args.get("year", today.year), request.args.get("month", today.month)

    def _day_arg(name, default=None):
        raw = request.args.get(name)
        if not raw:
            if default is None:
                raise ValidationError(f"{name} is required")
            return default
        day = parse_iso_date_or_none(raw)
        if day is None:
            raise ValidationError(f"{name} must be YYYY-MM-DD")
        return day

    @app.route("/api/reports/overtime", methods=["GET"], endpoint="overtime_report")
    @json_errors
    def overtime_report():
        year, month = _year_month()
        records = service.monthly_report(
            year=year,
            month=month,
            current_user=_current_user(),
            departments=request.args.getlist("department"),
        )
        return jsonify({"rows": [r.to_dict() for r in records]})

    @app.route("/api/reports/departments", methods=["GET"], endpoint="department_review")
    @json_errors
    def department_review():
        year, month = _year_month()
        summary = service.department_review(year=year, month=month, current_user=_current_user())
        return jsonify({"rows": [s.to_dict() for s in summary]})

    @app.route("/api/reports/yearly", methods=["GET"], endpoint="yearly_summary")
    @json_errors
    def yearly_summary():
        year = request.args.get("year", date.today().year)
        rows = service.yearly_summary(
            year=year,
            current_user=_current_user(),
            departments=request.args.getlist("department"),
        )
        return jsonify({"rows": [r.to_dict() for r in rows]})

    @app.route("/api/reports/attendance/<employee_id>", methods=["GET"], endpoint="attendance_sheet")
    @json_errors
    def attendance_sheet(employee_id: str):
        year, month = _year_month()
        sheet = service.attendance_sheet(
            employee_id=employee_id,
            year=year,
            month=month,
            current_user=_current_user(),
        )
        return jsonify(sheet.to_dict())

    @app.route("/api/leaves/conflicts", methods=["GET"], endpoint="leave_conflicts")
    @json_errors
    def leave_conflicts():
        return jsonify({"rows": [o.to_dict() for o in service.leave_conflicts()]})

    @app.route("/api/shifts", methods=["GET"], endpoint="shifts")
    @json_errors
    def shifts():
        items = container.shift_service.list_for_department(request.args.get("department") or None)
        return jsonify(
            {
                "rows": [
                    {
                        "id": s.shift_id,
                        "name": s.name,
                        "start_time": s.start_time,
                        "end_time": s.end_time,
                        "department": s.department,
                        "hours": container.shift_service.shift_hours(s),
                    }
                    for s in items
                ]
            }
        )

    @app.route("/api/shifts/<shift_id>/prefill", methods=["GET"], endpoint="shift_prefill")
    @json_errors
    def shift_prefill(shift_id: str):
        shift = container.shift_service.get(shift_id)
        log = container.shift_service.prefill_time_log(
            shift,
            employee_id=request.args.get("employee_id", ""),
            work_date=_day_arg("date"),
        )
        return jsonify(
            {
                "employee_id": log.employee_id,
                "date": log.work_date.isoformat(),
                "clock_in": log.clock_in,
                "clock_out": log.clock_out,
                "shift_id": log.shift_id,
                "hours": container.shift_service.shift_hours(shift),
            }
        )

    @app.route("/api/leaves/on-leave", methods=["GET"], endpoint="on_leave")
    @json_errors
    def on_leave():
        leaves = service.on_leave(_day_arg("date", default=date.today()), current_user=_current_user())
        return jsonify(
            {
                "rows": [
                    {
                        "id": lr.request_id,
                        "employee_id": lr.employee_id,
                        "leave_type": lr.leave_type,
                        "start_date": lr.start_date.isoformat(),
                        "end_date": lr.end_date.isoformat(),
                    }
                    for lr in leaves
                ]
            }
        )

    @app.route("/api/leaves/validate", methods=["GET"], endpoint="validate_leaves")
    @json_errors
    def validate_leaves():
        service.validate_leaves(employee_id=request.args.get("employee_id") or None)
        return jsonify({"valid": True})
