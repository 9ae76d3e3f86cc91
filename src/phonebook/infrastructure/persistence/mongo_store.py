"""MongoDB implementation of ContactStore.
One document per contact in a single collection:
{_id: ObjectId, firstName, lastName?, phone, address?}. Empty fields are not stored.
"""

import logging
from collections.abc import Mapping

from bson import ObjectId
from bson.errors import BSONError
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from phonebook.config import Settings
from phonebook.domain import Contact, StoreError

logger = logging.getLogger(__name__)


def _object_id_filter(contact_id: str) -> dict:
    return {"_id": ObjectId(contact_id)}


class MongoContactStore:
    """Stores contacts in a MongoDB collection. The client is owned by the caller."""

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @classmethod
    def from_settings(cls, client: MongoClient, settings: Settings) -> "MongoContactStore":
        collection = client[settings.mongo_db_name][settings.mongo_collection_name]
        return cls(collection)

    def find(
        self, filter: Mapping[str, str], *, skip: int = 0, limit: int = 0
    ) -> list[Contact]:
        query = dict(filter)
        if "_id" in query and ObjectId.is_valid(query["_id"]):
            query["_id"] = ObjectId(query["_id"])
        try:
            with self._collection.find(query, skip=skip, limit=limit) as cursor:
                return [Contact.from_document(document) for document in cursor]
        except (PyMongoError, BSONError) as e:
            logger.error("Contact find failed: %s", e)
            raise StoreError(str(e)) from e

    def insert(self, contact: Contact) -> str:
        try:
            result = self._collection.insert_one(contact.to_document())
        except (PyMongoError, BSONError) as e:
            logger.error("Contact insert failed: %s", e)
            raise StoreError(str(e)) from e
        return str(result.inserted_id)

    def update(self, contact_id: str, fields: Mapping[str, str]) -> int:
        try:
            result = self._collection.update_one(
                _object_id_filter(contact_id), {"$set": dict(fields)}
            )
        except (PyMongoError, BSONError) as e:
            logger.error("Contact update failed for %s: %s", contact_id, e)
            raise StoreError(str(e)) from e
        return result.modified_count

    def delete(self, contact_id: str) -> int:
        try:
            result = self._collection.delete_one(_object_id_filter(contact_id))
        except (PyMongoError, BSONError) as e:
            logger.error("Contact delete failed for %s: %s", contact_id, e)
            raise StoreError(str(e)) from e
        return result.deleted_count
