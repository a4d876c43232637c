from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .auth.service import ProfessorAuthService
from .checkins.kv_record_store import KeyValueRecordStore
from .checkins.service import CheckinService
from .core.enums import StorageBackend
from .review.service import ReviewService
from .storage.connection import DBConfig, DatabaseConnection
from .storage.file_kv_store import JsonFileKeyValueStore
from .storage.kv_store import KeyValueStore
from .storage.memory_kv_store import InMemoryKeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    kv_store: KeyValueStore
    record_store: KeyValueRecordStore

    checkin_service: CheckinService
    review_service: ReviewService
    auth_service: ProfessorAuthService


def build_kv_store(backend: StorageBackend, *, data_file: str = "", db_config: Optional[dict] = None) -> KeyValueStore:
    if backend == StorageBackend.MEMORY:
        return InMemoryKeyValueStore()
    if backend == StorageBackend.FILE:
        if not data_file:
            raise ValueError("DATA_FILE is required for the file storage backend")
        return JsonFileKeyValueStore(data_file)
    if backend == StorageBackend.MYSQL:
        return MySQLKeyValueStore(DatabaseConnection(DBConfig.from_dict(db_config or {})))
    raise ValueError(f"Unsupported storage backend: {backend!r}")


def build_container(*, settings: ModuleType) -> Container:
    kv_store = build_kv_store(
        StorageBackend(getattr(settings, "STORAGE_BACKEND", StorageBackend.FILE.value)),
        data_file=getattr(settings, "DATA_FILE", ""),
        db_config=getattr(settings, "DB_CONFIG", None),
    )
    record_store = KeyValueRecordStore(kv_store)

    auth_service = ProfessorAuthService(
        getattr(settings, "PROFESSOR_USERNAME", "professor"),
        password=getattr(settings, "PROFESSOR_PASSWORD", None),
        password_hash=getattr(settings, "PROFESSOR_PASSWORD_HASH", "") or None,
    )

    return Container(
        kv_store=kv_store,
        record_store=record_store,
        checkin_service=CheckinService(record_store),
        review_service=ReviewService(record_store),
        auth_service=auth_service,
    )
