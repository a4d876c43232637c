from __future__ import annotations

from datetime import datetime

import pytest

from checkin_system.checkins.kv_record_store import KeyValueRecordStore
from checkin_system.checkins.model import CheckinConfig, ClientMetadata
from checkin_system.checkins.service import CheckinService
from checkin_system.core.enums import RecordStatus
from checkin_system.core.exceptions import (
    CheckinDisabled,
    DuplicateToday,
    InvalidName,
    MissingEnrollmentId,
    PersistenceError,
)
from checkin_system.storage.memory_kv_store import InMemoryKeyValueStore

DAY_1 = datetime(2024, 3, 1, 8, 5, 0)
DAY_1_LATER = datetime(2024, 3, 1, 10, 40, 0)
DAY_2 = datetime(2024, 3, 2, 8, 1, 0)


def _service():
    store = KeyValueRecordStore(InMemoryKeyValueStore(), clock=lambda: DAY_1)
    return CheckinService(store), store


class FailingStore:
    def find_todays_record(self, enrollment_id, *, today=None):
        return None

    def save_record(self, record):
        raise OSError("read-only filesystem")


def test_successful_submission_builds_full_record():
    svc, store = _service()
    client = ClientMetadata(client_origin="10.0.0.7", user_agent="pytest", device_hint="Linux / N/A")

    record = svc.submit("  João Silva ", " 123 ", enabled=True, client=client, now=DAY_1)

    assert record.full_name == "João Silva"
    assert record.enrollment_id == "123"
    assert record.date_key == "2024-03-01"
    assert record.time_label == "08:05"
    assert record.status == RecordStatus.REGISTERED
    assert record.client == client
    assert record.record_id
    assert store.list_records() == [record]


def test_same_day_duplicate_rejected_next_day_accepted():
    svc, store = _service()
    svc.submit("João Silva", "123", enabled=True, now=DAY_1)

    with pytest.raises(DuplicateToday) as exc:
        svc.submit("João Silva", "123", enabled=True, now=DAY_1_LATER)
    assert exc.value.existing_time == "08:05"
    assert "08:05" in str(exc.value)

    svc.submit("João Silva", "123", enabled=True, now=DAY_2)
    assert [r.date_key for r in store.list_records() if r.enrollment_id == "123"] == ["2024-03-01", "2024-03-02"]


def test_duplicate_check_uses_trimmed_enrollment():
    svc, _ = _service()
    svc.submit("João Silva", "123", enabled=True, now=DAY_1)

    with pytest.raises(DuplicateToday):
        svc.submit("Maria Souza", " 123 ", enabled=True, now=DAY_1_LATER)


@pytest.mark.parametrize("name", ["", "   ", "João", "  Maria  "])
def test_single_word_names_rejected(name):
    svc, store = _service()

    with pytest.raises(InvalidName):
        svc.submit(name, "123", enabled=True, now=DAY_1)
    assert store.list_records() == []


@pytest.mark.parametrize("enrollment", ["", "   "])
def test_missing_enrollment_rejected(enrollment):
    svc, store = _service()

    with pytest.raises(MissingEnrollmentId):
        svc.submit("João Silva", enrollment, enabled=True, now=DAY_1)
    assert store.list_records() == []


@pytest.mark.parametrize("name,enrollment", [("João Silva", "123"), ("João", ""), ("", "")])
def test_gate_closed_rejects_everything(name, enrollment):
    svc, store = _service()

    with pytest.raises(CheckinDisabled):
        svc.submit(name, enrollment, enabled=False, now=DAY_1)
    assert store.list_records() == []


def test_gate_checked_before_duplicate():
    svc, _ = _service()
    svc.submit("João Silva", "123", enabled=True, now=DAY_1)

    with pytest.raises(CheckinDisabled):
        svc.submit("João Silva", "123", enabled=False, now=DAY_1_LATER)


def test_storage_failure_surfaces_as_persistence_error():
    svc = CheckinService(FailingStore())

    with pytest.raises(PersistenceError):
        svc.submit("João Silva", "123", enabled=True, now=DAY_1)


def test_success_message_uses_display_date():
    svc, _ = _service()
    record = svc.submit("João Silva", "123", enabled=True, now=DAY_1)

    assert svc.success_message(record) == "Presença registrada com sucesso em 01/03/2024 às 08:05."


def test_is_enabled_reads_store_config():
    svc, store = _service()
    assert svc.is_enabled() is True

    store.save_config(CheckinConfig(enabled=False, updated_at=DAY_1, updated_by="professor"))
    assert svc.is_enabled() is False
