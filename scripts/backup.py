"""Backup check-in data.

Note: Reads through the configured storage backend (file or mysql), so the
dump has the same JSON shape regardless of where the data lives.
"""

from __future__ import annotations

import importlib
import json
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from checkin_system.config import get_settings_module
from checkin_system.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    store = container.record_store

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"checkins_{ts}.json"

    records = store.list_records()
    payload = {
        "config": store.get_config().to_dict(),
        "records": [r.to_dict() for r in records],
    }
    out_file.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(records)} records)")


if __name__ == "__main__":
    main()
