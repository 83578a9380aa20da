# ==============================================
# MySQLRecordStorage
# ==============================================
#
# PURPOSE:
#   Manages a MySQL connection and keeps the vault's collection
#   in a single table, one row per record.
#
# WHY THIS CLASS EXISTS:
#   Some deployments already run MySQL and would rather not add
#   MongoDB just for the vault. The table schema is fixed and
#   created on connect.
#
# CLASS: MySQLRecordStorage
# -------------------------
#   Stateful — holds connection to MySQL.
#
#   Constructor:
#   ------------
#   - __init__(host, port, user, password, database, table="records",
#              connect_factory=None)
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() -> None
#       Establish connection. Create database and table if they don't exist.
#
#   - disconnect() -> None
#       Close connection cleanly.
#
#   - read_all() -> list[Record]
#       SELECT ordered by `position` (insertion order).
#
#   - write_all(records) -> None
#       DELETE + batched INSERT inside one transaction.
#       Rolled back on any error, so nothing partial is committed.
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MySQLRecordStorage(...) as db:` usage.
#
# TABLE:
# ------
#   position       INT PRIMARY KEY        → stored order
#   id             BIGINT NOT NULL UNIQUE
#   name           TEXT NOT NULL
#   value          TEXT NOT NULL
#   created_date   VARCHAR(32) NULL       → ISO-8601 UTC
#   modified_date  VARCHAR(32) NULL
#
# ==============================================

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, cast

import pymysql
import pymysql.cursors

from record_vault.errors import StorageUnavailable, StorageWriteRejected
from record_vault.records.record import Record, format_timestamp
from record_vault.storage.base import RecordStorage

logger = logging.getLogger(__name__)


class MySQLRecordStorage(RecordStorage):
    def __init__(
        self,
        host: str = "localhost",
        port: int = 3306,
        user: str = "root",
        password: str = "root",
        database: str = "vaultdb",
        table: str = "records",
        connect_factory: Optional[Callable[..., Any]] = None
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.database = database
        self.table = table
        self._connect_factory = connect_factory or pymysql.connect
        self.connection = None

    def connect(self) -> None:
        # Establish connection to MySQL, create database and table if they don't exist
        if self.connection is not None:
            return
        try:
            connection = self._connect_factory(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
            )
        except pymysql.MySQLError as e:
            logger.error("Could not connect to MySQL: %s", e)
            raise StorageUnavailable(f"Could not connect to MySQL: {e}") from e
        try:
            cursor = connection.cursor()
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS {self.database}")
            cursor.execute(f"USE {self.database}")
            cursor.execute(
                f"CREATE TABLE IF NOT EXISTS {self.table} ("
                "position INT NOT NULL PRIMARY KEY, "
                "id BIGINT NOT NULL UNIQUE, "
                "name TEXT NOT NULL, "
                "value TEXT NOT NULL, "
                "created_date VARCHAR(32) NULL, "
                "modified_date VARCHAR(32) NULL)"
            )
            connection.commit()
            cursor.close()
        except pymysql.MySQLError as e:
            connection.close()
            logger.error("Could not prepare MySQL database '%s': %s", self.database, e)
            raise StorageUnavailable(f"Could not prepare MySQL database '{self.database}': {e}") from e
        self.connection = connection
        logger.info("Connected to MySQL database '%s'.", self.database)

    def disconnect(self) -> None:
        # Close connection cleanly
        if self.connection:
            self.connection.close()
            self.connection = None
            logger.info("Disconnected from MySQL.")

    def read_all(self) -> List[Record]:
        if self.connection is None:
            self.connect()
        cursor = self.connection.cursor(pymysql.cursors.DictCursor)
        try:
            cursor.execute(
                f"SELECT id, name, value, created_date, modified_date "
                f"FROM {self.table} ORDER BY position"
            )
            rows = cast(List[Dict[str, Any]], cursor.fetchall())
        except pymysql.MySQLError as e:
            logger.error("Error reading from MySQL: %s", e)
            raise StorageUnavailable(f"Error reading from MySQL: {e}") from e
        finally:
            cursor.close()
        return [
            Record.from_dict({
                "id": row["id"],
                "name": row["name"],
                "value": row["value"],
                "createdDate": row.get("created_date"),
                "modifiedDate": row.get("modified_date"),
            })
            for row in rows
        ]

    def write_all(self, records: Sequence[Record]) -> None:
        if self.connection is None:
            self.connect()
        rows = [
            (
                position,
                record.id,
                record.name,
                record.value,
                format_timestamp(record.created_date) if record.created_date else None,
                format_timestamp(record.modified_date) if record.modified_date else None,
            )
            for position, record in enumerate(records)
        ]
        cursor = self.connection.cursor()
        try:
            cursor.execute(f"DELETE FROM {self.table}")
            if rows:
                cursor.executemany(
                    f"INSERT INTO {self.table} "
                    "(position, id, name, value, created_date, modified_date) "
                    "VALUES (%s, %s, %s, %s, %s, %s)",
                    rows
                )
            self.connection.commit()
        except pymysql.err.OperationalError as e:
            self.connection.rollback()
            logger.error("Lost MySQL connection during write: %s", e)
            raise StorageUnavailable(f"Lost MySQL connection during write: {e}") from e
        except pymysql.MySQLError as e:
            self.connection.rollback()
            logger.error("MySQL rejected write: %s", e)
            raise StorageWriteRejected(f"MySQL rejected write: {e}") from e
        finally:
            cursor.close()
