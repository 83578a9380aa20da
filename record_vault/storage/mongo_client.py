# ==============================================
# MongoRecordStorage
# ==============================================
#
# PURPOSE:
#   Manages the MongoDB connection and keeps the vault's
#   collection in a single MongoDB collection, one document
#   per record.
#
# WHY THIS CLASS EXISTS:
#   MongoDB is the default vault backend. Documents carry the
#   record's JSON shape as-is, so the stored data stays readable
#   with any MongoDB tool.
#
# CLASS: MongoRecordStorage
# -------------------------
#   Stateful — holds connection to MongoDB.
#
#   Constructor:
#   ------------
#   - __init__(host, port, database, collection="records",
#              user=None, password=None, uri=None, client_factory=None)
#       Store connection params. Don't connect yet.
#
#   Methods:
#   --------
#   - connect() -> None
#       Establish connection and ping the server.
#
#   - disconnect() -> None
#       Close connection.
#
#   - read_all() -> list[Record]
#       find({}) in natural order, "_id" stripped.
#
#   - write_all(records) -> None
#       insert_many into "<collection>_staging", then rename it over
#       the live collection (dropTarget=True). An empty collection is
#       written as delete_many({}).
#
#   Context Manager:
#   ----------------
#   - __enter__ / __exit__ for `with MongoRecordStorage(...) as db:` usage.
#
# ==============================================

import logging
from typing import Callable, List, Optional, Sequence

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import ConnectionFailure, OperationFailure, PyMongoError

from record_vault.errors import StorageUnavailable, StorageWriteRejected
from record_vault.records.record import Record
from record_vault.storage.base import RecordStorage

logger = logging.getLogger(__name__)


class MongoRecordStorage(RecordStorage):
    def __init__(
        self,
        host: str = "localhost",
        port: int = 27017,
        database: str = "vaultdb",
        collection: str = "records",
        user: Optional[str] = None,
        password: Optional[str] = None,
        uri: Optional[str] = None,
        client_factory: Optional[Callable[[str], PyMongoClient]] = None
    ):
        # Store connection params. Don't connect yet.
        self.host = host
        self.port = port
        self.database = database
        self.collection_name = collection
        self.staging_name = f"{collection}_staging"
        self.user = user
        self.password = password
        self.uri = uri
        self._client_factory = client_factory or PyMongoClient
        self.client = None  # Will hold the actual MongoDB client connection

    def _build_uri(self) -> str:
        if self.uri:
            return self.uri
        if self.user and self.password:
            return f"mongodb://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"
        return f"mongodb://{self.host}:{self.port}/{self.database}"

    def connect(self) -> None:
        # Establish connection to MongoDB.
        if self.client is not None:
            return
        try:
            client = self._client_factory(self._build_uri())
        except PyMongoError as e:
            raise StorageUnavailable(f"Invalid MongoDB connection settings: {e}") from e
        try:
            # Test connection
            client.admin.command('ping')
        except (ConnectionFailure, OperationFailure) as e:
            client.close()
            logger.error("Could not connect to MongoDB: %s", e)
            raise StorageUnavailable(f"Could not connect to MongoDB: {e}") from e
        self.client = client
        logger.info("Connected to MongoDB database '%s'.", self.database)

    def disconnect(self) -> None:
        # Close connection.
        if self.client:
            self.client.close()
            self.client = None
            logger.info("Disconnected from MongoDB.")

    def _database(self):
        if self.client is None:
            self.connect()
        return self.client[self.database]

    def _collection(self):
        return self._database()[self.collection_name]

    def read_all(self) -> List[Record]:
        collection = self._collection()
        try:
            documents = list(collection.find({}))
        except PyMongoError as e:
            logger.error("Error reading from MongoDB: %s", e)
            raise StorageUnavailable(f"Error reading from MongoDB: {e}") from e
        # Remove MongoDB's _id so records come back in the stored shape
        return [Record.from_dict({k: v for k, v in doc.items() if k != "_id"}) for doc in documents]

    def write_all(self, records: Sequence[Record]) -> None:
        db = self._database()
        documents = [record.to_dict() for record in records]
        try:
            if not documents:
                db[self.collection_name].delete_many({})
                return
            # Fill a staging collection, then swap it in with one rename
            staging = db[self.staging_name]
            staging.drop()
            staging.insert_many(documents)
            staging.rename(self.collection_name, dropTarget=True)
        except ConnectionFailure as e:
            logger.error("Lost MongoDB connection during write: %s", e)
            raise StorageUnavailable(f"Lost MongoDB connection during write: {e}") from e
        except PyMongoError as e:
            logger.error("Error writing to MongoDB: %s", e)
            raise StorageWriteRejected(f"Error writing to MongoDB: {e}") from e
