# ==============================================
# JsonFileStorage
# ==============================================
#
# PURPOSE:
#   Keep the whole vault in one JSON file on disk. Handy for a
#   single-user setup with no database server.
#
# CLASS: JsonFileStorage
# ----------------------
#   Stateful — holds the path of the data file.
#
#   Constructor:
#   ------------
#   - __init__(data_file: str = "vault.json")
#
#   Methods:
#   --------
#   - read_all() -> list[Record]
#       Empty list if the file doesn't exist yet.
#
#   - write_all(records) -> None
#       Write to a temp file next to the target, then os.replace()
#       it over the data file so readers never see half a file.
#
# FILE STRUCTURE:
# ---------------
#   vault.json → [{"id": ..., "name": ..., "value": ..., "createdDate": ...}, ...]
#
# ==============================================

import json
import logging
import os
from pathlib import Path
from typing import List, Sequence

from record_vault.errors import StorageUnavailable, StorageWriteRejected
from record_vault.records.record import Record
from record_vault.storage.base import RecordStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(RecordStorage):
    def __init__(self, data_file: str = "vault.json"):
        self.data_file = Path(data_file)

    def connect(self) -> None:
        self.data_file.parent.mkdir(parents=True, exist_ok=True)

    def disconnect(self) -> None:
        pass

    def read_all(self) -> List[Record]:
        if not self.data_file.exists():
            return []
        try:
            with open(self.data_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read vault file %s: %s", self.data_file, e)
            raise StorageUnavailable(f"Could not read vault file {self.data_file}: {e}") from e
        if not isinstance(data, list):
            raise StorageUnavailable(f"Vault file {self.data_file} does not hold a record list")
        return [Record.from_dict(item) for item in data]

    def write_all(self, records: Sequence[Record]) -> None:
        payload = [record.to_dict() for record in records]
        tmp_file = self.data_file.with_name(self.data_file.name + ".tmp")
        try:
            self.data_file.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_file, 'w', encoding='utf-8') as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_file, self.data_file)
        except OSError as e:
            logger.error("Could not write vault file %s: %s", self.data_file, e)
            raise StorageWriteRejected(f"Could not write vault file {self.data_file}: {e}") from e
