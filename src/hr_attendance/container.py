from __future__ import annotations

from dataclasses import dataclass

from .core.enums import LeaveTieBreak
from .leaves.factory import LeaveSelectionStrategyFactory
from .overtime.service import OvertimeReportService
from .records.memory_repository import InMemoryHRDataRepository
from .records.repository import HRDataRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    records: HRDataRepository

    overtime_report_service: OvertimeReportService
    shift_service: ShiftService


def build_container(*, data_file: str = "", tie_break: str = LeaveTieBreak.FIRST_MATCH.value, records=None) -> Container:
    if records is None:
        records = InMemoryHRDataRepository.load_json(data_file) if data_file else InMemoryHRDataRepository()

    overtime_report_service = OvertimeReportService(
        records,
        tie_break=tie_break,
        strategy_factory=LeaveSelectionStrategyFactory(),
    )
    shift_service = ShiftService(records)

    return Container(
        records=records,
        overtime_report_service=overtime_report_service,
        shift_service=shift_service,
    )
