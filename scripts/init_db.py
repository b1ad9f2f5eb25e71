"""Create the pointage database and apply database/schema.sql.

Usage: APP_ENV=development python scripts/init_db.py
"""
from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.pointage.pointage.common.logging_setup import LOG_FORMAT
from src.pointage.pointage.database.bootstrap import apply_schema, list_tables
from src.pointage.pointage.database.connection import DBConfig, DatabaseConnection

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection(DBConfig.from_dict(settings.DB_CONFIG))

    apply_schema(conn, schema_path=REPO_ROOT / "database" / "schema.sql")
    cfg = conn.config
    logger.info(
        "schema applied to %s@%s:%s/%s (tables=%d)",
        cfg.user,
        cfg.host,
        cfg.port,
        cfg.database,
        len(list_tables(conn)),
    )


if __name__ == "__main__":
    main()
