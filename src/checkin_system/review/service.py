from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from ..checkins.model import AttendanceRecord, CheckinConfig
from ..checkins.repository import RecordStore
from ..common.datetime_utils import now_local
from ..core.constants import PROFESSOR_ACTOR
from .export import ExportFile, build_export
from .query import ReviewQuery, apply_view

logger = logging.getLogger(__name__)


class ReviewService:
    """Use cases of the professor panel: view, gate, delete, export."""

    def __init__(self, store: RecordStore):
        self._store = store

    def current_config(self) -> CheckinConfig:
        return self._store.get_config()

    def list_view(self, query: ReviewQuery) -> list[AttendanceRecord]:
        return apply_view(self._store.list_records(), query)

    def toggle_gate(self, enabled: bool, *, now: Optional[datetime] = None) -> CheckinConfig:
        config = CheckinConfig(enabled=bool(enabled), updated_at=now or now_local(), updated_by=PROFESSOR_ACTOR)
        self._store.save_config(config)
        logger.info("Check-in gate %s by %s", "enabled" if config.enabled else "disabled", config.updated_by)
        return config

    @staticmethod
    def delete_prompt(display_name: str) -> str:
        return f"Tem certeza que deseja apagar o registro de {display_name}?"

    def delete_record(self, record_id: str, display_name: str, *, confirm: Callable[[str], bool]) -> bool:
        """Delete after an explicit confirmation. Returns False when the user declines."""
        if not confirm(self.delete_prompt(display_name)):
            return False
        self._store.delete_record(record_id)
        logger.info("Deleted record %s (%s)", record_id, display_name)
        return True

    def find_record(self, record_id: str) -> Optional[AttendanceRecord]:
        for r in self._store.list_records():
            if r.record_id == record_id:
                return r
        return None

    def export_current_view(self, query: ReviewQuery, *, today: Optional[date] = None) -> Optional[ExportFile]:
        return build_export(self.list_view(query), mode=query.mode, today=today or now_local().date())
