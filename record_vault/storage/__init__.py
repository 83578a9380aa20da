# ==============================================
# TOPIC 2: STORAGE (Persistence Port + Backends)
# ==============================================
#
# This package holds the read-all / write-all persistence
# contract and every backend that satisfies it.
#
# Modules:
# --------
# - base.py          → RecordStorage abstract base class
# - mongo_client.py  → MongoDB backend (default)
# - mysql_client.py  → MySQL backend
# - json_storage.py  → Single JSON file backend
# - memory.py        → In-memory backend (tests, throwaway sessions)
#
# FUNCTION:
# ---------
# - create_storage(config: VaultConfig) -> RecordStorage
#     Pick a backend from config.storage_backend.
#
# ==============================================

from record_vault.config import VaultConfig
from record_vault.errors import ConfigurationError

from .base import RecordStorage
from .json_storage import JsonFileStorage
from .memory import InMemoryStorage
from .mongo_client import MongoRecordStorage
from .mysql_client import MySQLRecordStorage


def create_storage(config: VaultConfig) -> RecordStorage:
    """Build the backend named by config.storage_backend. Does not connect."""
    backend = config.storage_backend.strip().lower()
    if backend in ("mongodb", "mongo"):
        return MongoRecordStorage(
            host=config.mongo.host,
            port=config.mongo.port,
            database=config.mongo.database,
            collection=config.mongo.collection,
            user=config.mongo.user,
            password=config.mongo.password,
            uri=config.mongo.uri
        )
    if backend == "mysql":
        return MySQLRecordStorage(
            host=config.mysql.host,
            port=config.mysql.port,
            user=config.mysql.user,
            password=config.mysql.password,
            database=config.mysql.database,
            table=config.mysql.table
        )
    if backend == "json":
        return JsonFileStorage(config.data_file)
    if backend == "memory":
        return InMemoryStorage()
    raise ConfigurationError(
        f"Unknown storage backend {config.storage_backend!r}. "
        "Expected one of: mongodb, mysql, json, memory."
    )


__all__ = [
    "RecordStorage",
    "MongoRecordStorage",
    "MySQLRecordStorage",
    "JsonFileStorage",
    "InMemoryStorage",
    "create_storage",
]
