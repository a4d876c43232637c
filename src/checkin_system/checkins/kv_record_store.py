from __future__ import annotations

import json
import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.constants import CONFIG_KEY, RECORDS_KEY
from ..core.exceptions import PersistenceError, StorageCorruptedError
from ..storage.kv_store import KeyValueStore
from .model import AttendanceRecord, CheckinConfig
from .repository import RecordStore

logger = logging.getLogger(__name__)


class KeyValueRecordStore(RecordStore):
    """Record store kept under two keys of a key-value backend.

    The record collection is read and written whole on every call; there is
    no caching and no locking (single writer).

    Unreadable data: reads behave as if nothing was stored. A write over an
    unreadable collection copies the raw value to a ``.corrupt.<ts>`` key
    first, then starts a fresh collection.
    """

    def __init__(self, kv: KeyValueStore, *, clock: Callable = now_local):
        self._kv = kv
        self._clock = clock

    def _read_records(self) -> list[AttendanceRecord]:
        raw = self._kv.get(RECORDS_KEY)
        if raw is None:
            return []
        try:
            payload = json.loads(raw)
            if not isinstance(payload, list):
                raise TypeError("records payload must be a list")
            return [AttendanceRecord.from_dict(item) for item in payload]
        except (ValueError, KeyError, TypeError) as e:
            raise StorageCorruptedError(RECORDS_KEY, raw) from e

    def _write_records(self, records: list[AttendanceRecord]) -> None:
        self._kv.set(RECORDS_KEY, json.dumps([r.to_dict() for r in records], ensure_ascii=False))

    def _quarantine(self, err: StorageCorruptedError) -> None:
        backup_key = f"{err.key}.corrupt.{self._clock():%Y%m%d%H%M%S}"
        self._kv.set(backup_key, err.raw)
        self._write_records([])
        logger.error("Unreadable data under %s moved to %s; started a fresh collection", err.key, backup_key)

    def _load_for_write(self) -> list[AttendanceRecord]:
        try:
            return self._read_records()
        except StorageCorruptedError as e:
            self._quarantine(e)
            return []

    def list_records(self) -> list[AttendanceRecord]:
        try:
            return self._read_records()
        except PersistenceError as e:
            logger.warning("Treating records as empty: %s", e)
            return []

    def save_record(self, record: AttendanceRecord) -> None:
        records = self._load_for_write()
        records.append(record)
        self._write_records(records)

    def delete_record(self, record_id: str) -> None:
        records = self._load_for_write()
        remaining = [r for r in records if r.record_id != record_id]
        if len(remaining) == len(records):
            return
        self._write_records(remaining)

    def get_config(self) -> CheckinConfig:
        try:
            raw = self._kv.get(CONFIG_KEY)
        except PersistenceError as e:
            logger.warning("Using default check-in config: %s", e)
            raw = None
        if raw is None:
            return CheckinConfig.default(self._clock())
        try:
            return CheckinConfig.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError):
            logger.warning("Unreadable check-in config under %s; using default", CONFIG_KEY)
            return CheckinConfig.default(self._clock())

    def save_config(self, config: CheckinConfig) -> None:
        self._kv.set(CONFIG_KEY, json.dumps(config.to_dict(), ensure_ascii=False))

    def find_todays_record(self, enrollment_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        today_key = (today or self._clock().date()).isoformat()
        for r in self.list_records():
            if r.enrollment_id == enrollment_id and r.date_key == today_key:
                return r
        return None
