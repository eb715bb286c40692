from __future__ import annotations

from datetime import date

import pytest
from helpers import JAN_HOLIDAYS, work_days_of

from hr_attendance.core.enums import Role
from hr_attendance.employees.model import Employee
from hr_attendance.main import create_app
from hr_attendance.records.memory_repository import InMemoryHRDataRepository
from hr_attendance.shifts.model import Shift


@pytest.fixture
def client(monkeypatch, jan_holidays, make_logs, make_leave):
    monkeypatch.setenv("APP_ENV", "testing")
    work_days = work_days_of(date(2025, 1, 1), date(2025, 1, 31), JAN_HOLIDAYS)
    records = InMemoryHRDataRepository(
        employees=(
            Employee("e1", "Alice", "IT", "101", Role.ADMIN),
            Employee("e2", "Bob", "HR", "102", Role.EMPLOYEE),
        ),
        time_logs=make_logs("e1", work_days, "07:00", "14:42"),
        shifts=(Shift("s1", "Night", "22:00", "06:00", "IT"),),
        holidays=jan_holidays,
        leave_requests=[
            make_leave("e2", date(2025, 1, 5), date(2025, 1, 9), request_id="a"),
            make_leave("e2", date(2025, 1, 8), date(2025, 1, 12), request_id="b"),
        ],
    )
    app = create_app(records=records)
    return app.test_client()


def test_overtime_report(client):
    resp = client.get("/api/reports/overtime?year=2025&month=1")

    assert resp.status_code == 200
    rows = {r["employee_id"]: r for r in resp.get_json()["rows"]}
    assert rows["e1"]["compensatory_days_due"] == 2
    assert rows["e1"]["total_overtime_hours"] == 14
    assert "e2" in rows


def test_overtime_report_for_employee_viewer(client):
    resp = client.get("/api/reports/overtime?year=2025&month=1&user_id=e2&department=IT")

    assert [r["employee_id"] for r in resp.get_json()["rows"]] == ["e2"]


def test_department_and_yearly_reports(client):
    departments = client.get("/api/reports/departments?year=2025&month=1").get_json()["rows"]
    yearly = client.get("/api/reports/yearly?year=2025&department=IT").get_json()["rows"]

    assert {d["department"] for d in departments} == {"IT", "HR"}
    assert yearly[0]["monthly_days"][0] == 2
    assert yearly[0]["total_yearly_days"] == 2


def test_attendance_sheet(client):
    resp = client.get("/api/reports/attendance/e1?year=2025&month=1")

    body = resp.get_json()
    assert resp.status_code == 200
    assert len(body["rows"]) == 31
    assert body["total_actual_hours"] == 154


def test_errors_map_to_status_codes(client):
    assert client.get("/api/reports/overtime?year=2025&month=13").status_code == 400
    assert client.get("/api/reports/attendance/zzz?year=2025&month=1").status_code == 404
    assert client.get("/api/reports/attendance/e1?year=2025&month=1&user_id=e2").status_code == 403
    assert client.get("/api/reports/overtime?user_id=ghost").status_code == 404


def test_leave_conflicts_and_shifts(client):
    conflicts = client.get("/api/leaves/conflicts").get_json()["rows"]
    shifts = client.get("/api/shifts?department=IT").get_json()["rows"]

    assert conflicts[0]["overlap_start"] == "2025-01-08"
    assert shifts == [
        {"id": "s1", "name": "Night", "start_time": "22:00", "end_time": "06:00", "department": "IT", "hours": 8.0}
    ]


def test_shift_prefill(client):
    resp = client.get("/api/shifts/s1/prefill?employee_id=e1&date=2025-01-05")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "employee_id": "e1",
        "date": "2025-01-05",
        "clock_in": "22:00",
        "clock_out": "06:00",
        "shift_id": "s1",
        "hours": 8.0,
    }
    assert client.get("/api/shifts/nope/prefill?employee_id=e1&date=2025-01-05").status_code == 404
    assert client.get("/api/shifts/s1/prefill?employee_id=e1&date=05/01/2025").status_code == 400
    assert client.get("/api/shifts/s1/prefill?date=2025-01-05").status_code == 400


def test_on_leave(client):
    rows = client.get("/api/leaves/on-leave?date=2025-01-08").get_json()["rows"]

    assert [r["id"] for r in rows] == ["a", "b"]
    assert rows[0] == {
        "id": "a",
        "employee_id": "e2",
        "leave_type": "Annual",
        "start_date": "2025-01-05",
        "end_date": "2025-01-09",
    }
    assert client.get("/api/leaves/on-leave?date=2025-01-20").get_json()["rows"] == []


def test_validate_leaves(client):
    overlapping = client.get("/api/leaves/validate")

    assert overlapping.status_code == 400
    assert "overlapping approved leave" in overlapping.get_json()["error"]
    assert client.get("/api/leaves/validate?employee_id=e1").get_json() == {"valid": True}
