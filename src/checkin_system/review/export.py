from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..checkins.model import AttendanceRecord
from ..core.constants import EXPORT_FILENAME_PREFIX, EXPORT_HEADER
from ..core.enums import ViewMode


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str

    def as_bytes(self) -> bytes:
        # BOM so spreadsheet tools detect UTF-8 accents.
        return self.content.encode("utf-8-sig")


def export_row(r: AttendanceRecord) -> list[str]:
    return [
        r.date_key,
        r.time_label,
        r.full_name,
        r.enrollment_id,
        r.status.value,
        r.client.client_origin,
        r.client.device_hint,
    ]


def export_filename(mode: ViewMode, today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}_{mode.value}_{today.isoformat()}.csv"


def build_export(records: Sequence[AttendanceRecord], *, mode: ViewMode, today: date) -> Optional[ExportFile]:
    """CSV of exactly the given records, in order. None when there is nothing to export."""
    if not records:
        return None

    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for r in records:
        writer.writerow(export_row(r))
    return ExportFile(filename=export_filename(mode, today), content=out.getvalue())
