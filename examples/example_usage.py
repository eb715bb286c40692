"""Example: run the overtime reports through the service layer (no Flask).

Controllers are only a thin layer; the computation lives in the services.
"""

import importlib
import json

from hr_attendance.config import get_settings_module
from hr_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE, tie_break=settings.LEAVE_TIE_BREAK)
    svc = container.overtime_report_service

    for record in svc.monthly_report(year=2025, month=3):
        print(json.dumps(record.to_dict(), ensure_ascii=False))
    for summary in svc.department_review(year=2025, month=3):
        print(json.dumps(summary.to_dict(), ensure_ascii=False))


if __name__ == "__main__":
    main()
