# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - MongoConfig (dataclass)
#     uri: str | None    (default None, overrides host/port when set)
#     host: str          (default "localhost")
#     port: int          (default 27017)
#     user: str | None   (default None)
#     password: str | None (default None)
#     database: str      (default "vaultdb")
#     collection: str    (default "records")
#
# - MySQLConfig (dataclass)
#     host: str          (default "localhost")
#     port: int          (default 3306)
#     user: str          (default "root")
#     password: str      (default "root")
#     database: str      (default "vaultdb")
#     table: str         (default "records")
#
# - VaultConfig (dataclass)
#     mongo: MongoConfig
#     mysql: MySQLConfig
#     storage_backend: str   (default "mongodb")
#     data_file: str         (default "vault.json")
#     backup_dir: str        (default "backups/")
#     export_path: str       (default "export.txt")
#     log_level: str         (default "INFO")
#
# FUNCTIONS:
# ----------
# - get_config() -> VaultConfig
#     Load .env using python-dotenv, construct VaultConfig.
#     Returns the same singleton on repeated calls.
#
# - configure_logging(level: str) -> None
#     Set up root logging once for the CLI.
#
# USAGE:
# ------
#   from record_vault.config import get_config
#   config = get_config()
#   print(config.mongo.database)
#   print(config.backup_dir)
#
# ==============================================

import logging
import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class MongoConfig:
    """MongoDB database configuration."""
    uri: Optional[str] = None
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = "vaultdb"
    collection: str = "records"


@dataclass
class MySQLConfig:
    """MySQL database configuration."""
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = "root"
    database: str = "vaultdb"
    table: str = "records"


@dataclass
class VaultConfig:
    """Main application configuration."""
    mongo: MongoConfig = field(default_factory=MongoConfig)
    mysql: MySQLConfig = field(default_factory=MySQLConfig)
    storage_backend: str = "mongodb"
    data_file: str = "vault.json"
    backup_dir: str = "backups/"
    export_path: str = "export.txt"
    log_level: str = "INFO"


# Singleton instance
_config_instance: Optional[VaultConfig] = None


def get_config() -> VaultConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        VaultConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    # Build MongoDB configuration (MONGODB_URI kept for older .env files)
    mongo_config = MongoConfig(
        uri=os.getenv("MONGO_URI") or os.getenv("MONGODB_URI") or None,
        host=os.getenv("MONGO_HOST", "localhost"),
        port=int(os.getenv("MONGO_PORT", "27017")),
        user=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        database=os.getenv("MONGO_DATABASE", "vaultdb"),
        collection=os.getenv("MONGO_COLLECTION", "records")
    )

    # Build MySQL configuration
    mysql_config = MySQLConfig(
        host=os.getenv("MYSQL_HOST", "localhost"),
        port=int(os.getenv("MYSQL_PORT", "3306")),
        user=os.getenv("MYSQL_USER", "root"),
        password=os.getenv("MYSQL_PASSWORD", "root"),
        database=os.getenv("MYSQL_DATABASE", "vaultdb"),
        table=os.getenv("MYSQL_TABLE", "records")
    )

    # Build main application configuration
    _config_instance = VaultConfig(
        mongo=mongo_config,
        mysql=mysql_config,
        storage_backend=os.getenv("STORAGE_BACKEND", "mongodb").strip().lower(),
        data_file=os.getenv("DATA_FILE", "vault.json"),
        backup_dir=os.getenv("BACKUP_DIR", "backups/"),
        export_path=os.getenv("EXPORT_PATH", "export.txt"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper()
    )

    return _config_instance


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the interactive front-end."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
