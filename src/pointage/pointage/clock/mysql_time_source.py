from __future__ import annotations

from ..common.datetime_utils import normalize_clock
from ..core.exceptions import StoreUnavailableError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import ServerTime


class MySQLTimeSource:
    """Reads the database server's clock, shared by every app instance."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def now(self) -> ServerTime:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT CURDATE() AS server_date, CURTIME() AS server_time")
            r = fetchone(cur)
        if not r:
            raise StoreUnavailableError("Unable to read the server time")
        return ServerTime(work_date=r["server_date"], clock=normalize_clock(r["server_time"]))
