# ==============================================
# TOPIC 3: PERSISTENCE (Backup snapshots)
# ==============================================
#
# This package writes point-in-time snapshots of the whole
# vault after every add and delete.
#
# Modules:
# --------
# - backup_writer.py  → Timestamped, write-once JSON snapshots
#
# ==============================================

from .backup_writer import BackupWriter

__all__ = ["BackupWriter"]
