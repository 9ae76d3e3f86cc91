"""Integration tests for MongoContactStore. Require Docker (testcontainers); skipped without it."""

import pytest
from bson import ObjectId
from bson.errors import InvalidDocument
from pymongo.errors import ServerSelectionTimeoutError

from phonebook.application import PhoneBookService
from phonebook.config import Settings
from phonebook.domain import Contact, StoreError
from phonebook.infrastructure import MongoContactStore


@pytest.fixture(scope="session")
def mongo_client():
    mongodb = pytest.importorskip("testcontainers.mongodb")
    try:
        container = mongodb.MongoDbContainer("mongo:7.0")
        container.start()
    except Exception as e:  # Docker missing or unreachable
        pytest.skip(f"MongoDB container unavailable: {e}")
    client = container.get_connection_client()
    try:
        yield client
    finally:
        client.close()
        container.stop()


@pytest.fixture
def store(mongo_client):
    """Drop the collection before each test so tests are independent."""
    settings = Settings(mongo_db_name="phoneBookTest")
    mongo_client[settings.mongo_db_name].drop_collection(settings.mongo_collection_name)
    return MongoContactStore.from_settings(mongo_client, settings)


def test_insert_and_find(store):
    contact_id = store.insert(Contact(first_name="jojo", last_name="levi", phone="0501111111"))
    assert ObjectId.is_valid(contact_id)

    [found] = store.find({"firstName": "jojo"})
    assert found == Contact(id=contact_id, first_name="jojo", last_name="levi", phone="0501111111")


def test_empty_fields_not_stored(store, mongo_client):
    contact_id = store.insert(Contact(first_name="momo", phone="123"))
    document = mongo_client["phoneBookTest"]["contacts"].find_one({"_id": ObjectId(contact_id)})
    assert set(document) == {"_id", "firstName", "phone"}


def test_find_by_id_string(store):
    contact_id = store.insert(Contact(first_name="momo", phone="123"))
    assert [c.id for c in store.find({"_id": contact_id})] == [contact_id]


def test_pagination_through_service(store):
    service = PhoneBookService(store, limit_per_page=10)
    for i in range(12):
        service.add_contact(Contact(first_name="momo", phone=str(i)))

    assert len(service.get_contacts_with_pagination(["1"])) == 10
    assert len(service.get_contacts_with_pagination(["2"])) == 2
    assert service.get_contacts_with_pagination(["3"]) == []


def test_update_sets_fields_and_reports_modified_count(store):
    contact_id = store.insert(Contact(first_name="momo", phone="123", address="Tel Aviv"))

    assert store.update(contact_id, {"address": "Haifa"}) == 1
    # Same value again: matched but not modified.
    assert store.update(contact_id, {"address": "Haifa"}) == 0
    assert store.update(str(ObjectId()), {"address": "Haifa"}) == 0

    [found] = store.find({"_id": contact_id})
    assert found.address == "Haifa"
    assert found.first_name == "momo"


def test_delete(store):
    contact_id = store.insert(Contact(first_name="momo", phone="123"))
    assert store.delete(contact_id) == 1
    assert store.delete(contact_id) == 0
    assert store.find({}) == []


def test_driver_failure_raises_store_error():
    from pymongo import MongoClient

    client = MongoClient("mongodb://127.0.0.1:1", serverSelectionTimeoutMS=100)
    try:
        store = MongoContactStore.from_settings(client, Settings())
        with pytest.raises(StoreError) as exc_info:
            store.find({})
        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)
    finally:
        client.close()


class _UnencodableCollection:
    """Collection stand-in whose queries fail while encoding to BSON."""

    def find(self, *args, **kwargs):
        raise InvalidDocument("Key names must not contain the NULL byte")

    def insert_one(self, document):
        raise InvalidDocument("cannot encode object")


def test_bson_encoding_failure_raises_store_error():
    store = MongoContactStore(_UnencodableCollection())
    with pytest.raises(StoreError) as exc_info:
        store.find({"first\x00Name": "x"})
    assert isinstance(exc_info.value.__cause__, InvalidDocument)
    with pytest.raises(StoreError):
        store.insert(Contact(first_name="momo", phone="123"))


def test_nul_key_against_real_server_raises_store_error(store):
    with pytest.raises(StoreError):
        store.find({"first\x00Name": "x"})
