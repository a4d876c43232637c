from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from ..core.constants import CLIENT_ORIGIN_PLACEHOLDER, SYSTEM_ACTOR
from ..core.enums import RecordStatus


@dataclass(frozen=True)
class ClientMetadata:
    """Audit-only strings captured at submission. Never parsed."""

    client_origin: str = CLIENT_ORIGIN_PLACEHOLDER
    user_agent: str = ""
    device_hint: str = "N/A / N/A"


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's check-in for one calendar day."""

    record_id: str
    full_name: str
    enrollment_id: str
    timestamp: datetime
    date_key: str
    time_label: str
    client: ClientMetadata = field(default_factory=ClientMetadata)
    status: RecordStatus = RecordStatus.REGISTERED

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.record_id,
            "full_name": self.full_name,
            "enrollment_id": self.enrollment_id,
            "timestamp": self.timestamp.isoformat(),
            "date_key": self.date_key,
            "time_label": self.time_label,
            "client_origin": self.client.client_origin,
            "user_agent": self.client.user_agent,
            "device_hint": self.client.device_hint,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        """Raises KeyError/ValueError/TypeError on malformed input."""
        return cls(
            record_id=str(data["id"]),
            full_name=str(data["full_name"]),
            enrollment_id=str(data["enrollment_id"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            date_key=str(data["date_key"]),
            time_label=str(data["time_label"]),
            client=ClientMetadata(
                client_origin=str(data.get("client_origin", CLIENT_ORIGIN_PLACEHOLDER)),
                user_agent=str(data.get("user_agent", "")),
                device_hint=str(data.get("device_hint", "")),
            ),
            status=RecordStatus(data.get("status", RecordStatus.REGISTERED.value)),
        )


@dataclass(frozen=True)
class CheckinConfig:
    """Singleton gate controlling whether new check-ins are accepted."""

    enabled: bool
    updated_at: datetime
    updated_by: str = SYSTEM_ACTOR

    @classmethod
    def default(cls, now: datetime) -> "CheckinConfig":
        return cls(enabled=True, updated_at=now, updated_by=SYSTEM_ACTOR)

    def to_dict(self) -> dict[str, Any]:
        return {
            "checkin_enabled": self.enabled,
            "updated_at": self.updated_at.isoformat(),
            "updated_by": self.updated_by,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CheckinConfig":
        enabled = data["checkin_enabled"]
        if not isinstance(enabled, bool):
            raise TypeError(f"checkin_enabled must be a bool, got {type(enabled)!r}")
        return cls(
            enabled=enabled,
            updated_at=datetime.fromisoformat(data["updated_at"]),
            updated_by=str(data.get("updated_by", SYSTEM_ACTOR)),
        )
