import json
from datetime import date

from hr_attendance.core.enums import LeaveStatus, Role
from hr_attendance.records.memory_repository import InMemoryHRDataRepository

PAYLOAD = {
    "employees": [
        {"id": "e1", "name": "Alice", "department": "IT", "employeeNumber": "101", "role": "Admin"},
        {"id": "e2", "name": "Bob", "department": "HR", "role": "Intern"},
    ],
    "timeLogs": [
        {"id": "t1", "employeeId": "e1", "date": "2025-01-05", "clockIn": "08:00", "clockOut": "15:00", "shiftId": "s1"},
        {"id": "t2", "employeeId": "e1", "date": "not-a-date", "clockIn": "08:00", "clockOut": "15:00"},
        {"id": "t3", "employeeId": "e2", "date": "2025-02-01", "clockIn": "08:00"},
    ],
    "shifts": [
        {"id": "s1", "name": "Morning", "startTime": "08:00", "endTime": "15:00", "department": "IT", "color": "#fff"},
        {"id": "s2", "name": "Night", "startTime": "22:00", "endTime": "06:00", "department": "HR"},
    ],
    "publicHolidays": [{"id": "h1", "name": "New Year", "date": "2025-01-01"}],
    "leaveRequests": [
        {"id": "l1", "employeeId": "e1", "leaveType": "Annual", "startDate": "2025-01-06", "endDate": "2025-01-08", "status": "Approved"},
    ],
    "ramadanDates": {"2025": {"start": "2025-03-01", "end": "2025-03-29"}, "bogus": {}},
}


def test_from_payload_maps_document_fields():
    repo = InMemoryHRDataRepository.from_payload(PAYLOAD)

    alice = repo.get_employee("e1")
    assert alice.role == Role.ADMIN
    assert alice.employee_number == "101"
    assert repo.get_employee("e2").role is None
    assert repo.get_employee("missing") is None

    assert repo.list_holidays()[0].holiday_date == date(2025, 1, 1)
    assert repo.list_leave_requests(employee_id="e1")[0].status == LeaveStatus.APPROVED
    assert list(repo.get_ramadan_ranges()) == [2025]
    assert repo.get_ramadan_ranges()[2025].end == date(2025, 3, 29)


def test_time_logs_with_broken_dates_are_never_listed():
    repo = InMemoryHRDataRepository.from_payload(PAYLOAD)

    logs = repo.list_time_logs(start=date(2025, 1, 1), end=date(2025, 12, 31))
    assert [t.log_id for t in logs] == ["t1", "t3"]
    assert logs[1].clock_out == ""
    assert repo.list_time_logs(start=date(2025, 1, 1), end=date(2025, 1, 31), employee_id="e2") == ()


def test_shifts_by_department():
    repo = InMemoryHRDataRepository.from_payload(PAYLOAD)

    assert [s.shift_id for s in repo.list_shifts(department="HR")] == ["s2"]
    assert len(repo.list_shifts()) == 2


def test_load_json(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(PAYLOAD), encoding="utf-8")

    repo = InMemoryHRDataRepository.load_json(path)

    assert len(repo.list_employees()) == 2
