from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import date_key_of, display_date, now_local, time_label_of
from ..common.validators import require_enrollment_id, require_full_name
from ..core.enums import RecordStatus
from ..core.exceptions import CheckinDisabled, DuplicateToday, PersistenceError
from .model import AttendanceRecord, ClientMetadata
from .repository import RecordStore

logger = logging.getLogger(__name__)


class CheckinService:
    """Use case: a student registers presence for today."""

    def __init__(self, store: RecordStore):
        self._store = store

    def is_enabled(self) -> bool:
        return self._store.get_config().enabled

    def submit(
        self,
        full_name: Optional[str],
        enrollment_id: Optional[str],
        *,
        enabled: bool,
        client: Optional[ClientMetadata] = None,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        if not enabled:
            logger.info("Check-in rejected: gate closed")
            raise CheckinDisabled("Registro de presença indisponível no momento. Procure o professor.")

        full_name = require_full_name(full_name)
        enrollment_id = require_enrollment_id(enrollment_id)

        now = now or now_local()
        existing = self._store.find_todays_record(enrollment_id, today=now.date())
        if existing:
            logger.info("Check-in rejected: enrollment %s already registered at %s", enrollment_id, existing.time_label)
            raise DuplicateToday(
                f"Já existe um registro para esta matrícula hoje às {existing.time_label}.",
                existing_time=existing.time_label,
            )

        record = AttendanceRecord(
            record_id=str(uuid.uuid4()),
            full_name=full_name,
            enrollment_id=enrollment_id,
            timestamp=now,
            date_key=date_key_of(now),
            time_label=time_label_of(now),
            client=client or ClientMetadata(),
            status=RecordStatus.REGISTERED,
        )

        try:
            self._store.save_record(record)
        except Exception as e:
            logger.exception("Could not persist check-in for enrollment %s", enrollment_id)
            raise PersistenceError(
                "Não foi possível registrar agora. Tente novamente ou contate o professor."
            ) from e

        logger.info("Check-in registered: enrollment=%s date=%s time=%s", enrollment_id, record.date_key, record.time_label)
        return record

    @staticmethod
    def success_message(record: AttendanceRecord) -> str:
        return f"Presença registrada com sucesso em {display_date(record.date_key)} às {record.time_label}."
