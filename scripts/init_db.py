from __future__ import annotations

import importlib

from dotenv import load_dotenv

from checkin_system.config import get_settings_module
from checkin_system.storage.bootstrap import apply_schema, list_tables
from checkin_system.storage.connection import DBConfig, describe


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    print(f"OK: Applied key-value schema -> {describe(DBConfig.from_dict(db_config))} (tables={len(tables)})")


if __name__ == "__main__":
    main()
