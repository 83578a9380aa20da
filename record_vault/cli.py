# ==============================================
# CLI — Interactive Menu Entry Point
# ==============================================
#
# PURPOSE:
#   A thin text menu over RecordStore. It parses keyboard input,
#   calls one store operation and prints the result. No vault
#   logic lives here.
#
# USAGE:
# ------
#   python -m record_vault.cli
#
#   ===== Record Vault =====
#   1. Add Record
#   2. List Records
#   3. Update Record
#   4. Delete Record
#   5. Search Records
#   6. Sort Records
#   7. Export Data
#   8. View Vault Statistics
#   9. Exit
#
# IMPLEMENTATION:
# ---------------
# - build_store(config) wires storage, backups, notifier and event logger
# - VaultMenu runs the loop; input/output callables are injectable
# - Every action catches VaultError and prints it, then shows the menu again
#
# ==============================================

import sys
from typing import Callable, Optional

from record_vault.config import VaultConfig, configure_logging, get_config
from record_vault.errors import VaultError
from record_vault.events import EventLogger, EventNotifier
from record_vault.export.formatter import render_statistics
from record_vault.persistence.backup_writer import BackupWriter
from record_vault.record_store import RecordStore
from record_vault.records.record import Record
from record_vault.storage import create_storage

MENU = """
===== Record Vault =====
1. Add Record
2. List Records
3. Update Record
4. Delete Record
5. Search Records
6. Sort Records
7. Export Data
8. View Vault Statistics
9. Exit
========================
"""


def build_store(config: VaultConfig) -> RecordStore:
    """Wire a RecordStore from configuration. Does not connect."""
    notifier = EventNotifier()
    EventLogger().attach(notifier)
    return RecordStore(
        storage=create_storage(config),
        backup_writer=BackupWriter(config.backup_dir),
        notifier=notifier,
        export_path=config.export_path
    )


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _day(record: Record) -> str:
    return record.created_date.strftime("%Y-%m-%d") if record.created_date else "N/A"


class VaultMenu:
    def __init__(
        self,
        store: RecordStore,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        self.store = store
        self._input = input_func
        self._print = output_func
        self._actions = {
            "1": self.add_record,
            "2": self.list_records,
            "3": self.update_record,
            "4": self.delete_record,
            "5": self.search_records,
            "6": self.sort_records,
            "7": self.export_data,
            "8": self.show_statistics,
        }

    def run(self) -> None:
        while True:
            self._print(MENU)
            try:
                choice = self._input("Choose option: ").strip()
            except EOFError:
                choice = "9"
            if choice == "9":
                self._print("Exiting Record Vault...")
                return
            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid option.")
                continue
            try:
                action()
            except VaultError as e:
                self._print(f"❌ Error: {e}")

    # ------------------------------------------
    # Menu actions
    # ------------------------------------------

    def add_record(self) -> None:
        name = self._input("Enter name: ")
        value = self._input("Enter value: ")
        record = self.store.add(name, value)
        self._print(f"✅ Record added successfully! (ID: {record.id})")
        self._report_backup()

    def _report_backup(self) -> None:
        if self.store.last_backup:
            self._print(f"Backup created: {self.store.last_backup}")

    def list_records(self) -> None:
        records = self.store.list_records()
        if not records:
            self._print("No records found.")
            return
        for r in records:
            self._print(f"ID: {r.id} | Name: {r.name} | Value: {r.value}")

    def update_record(self) -> None:
        record_id = _parse_id(self._input("Enter record ID to update: "))
        name = self._input("New name: ")
        value = self._input("New value: ")
        updated = self.store.update(record_id, name, value) if record_id is not None else None
        self._print("✅ Record updated!" if updated else "❌ Record not found.")

    def delete_record(self) -> None:
        record_id = _parse_id(self._input("Enter record ID to delete: "))
        deleted = self.store.delete(record_id) if record_id is not None else None
        self._print("🗑️ Record deleted!" if deleted else "❌ Record not found.")
        if deleted:
            self._report_backup()

    def search_records(self) -> None:
        results = self.store.search(self._input("Enter search keyword: "))
        if not results:
            self._print("No records found.")
            return
        self._print(f"Found {len(results)} matching record(s):")
        for index, r in enumerate(results, start=1):
            self._print(f"{index}. ID: {r.id} | Name: {r.name} | Created: {_day(r)}")

    def sort_records(self) -> None:
        field = self._input("Choose field to sort by (Name/Creation Date): ")
        order = self._input("Choose order (Ascending/Descending): ")
        records = self.store.sort(field, order)
        if not records:
            self._print("No records to sort.")
            return
        self._print("\nSorted Records:")
        for index, r in enumerate(records, start=1):
            self._print(f"{index}. ID: {r.id} | Name: {r.name}")

    def export_data(self) -> None:
        path = self.store.export_to_file()
        self._print(f"✅ Data exported successfully to {path}")

    def show_statistics(self) -> None:
        self._print(render_statistics(self.store.statistics()))


def main() -> int:
    config = get_config()
    configure_logging(config.log_level)
    try:
        store = build_store(config)
        store.open()
    except VaultError as e:
        print(f"❌ Failed to connect to storage: {e}")
        print("Exiting...")
        return 1
    try:
        VaultMenu(store).run()
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
