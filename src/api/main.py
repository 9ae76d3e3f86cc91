"""
FastAPI backend: phonebook REST API over MongoDB.
Run with uvicorn: uvicorn api.main:app --reload (or python -m api)
"""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pymongo import MongoClient

from phonebook.application import PhoneBook, PhoneBookService
from phonebook.config import Settings
from phonebook.domain import (
    Contact,
    ContactTooLarge,
    ErrorKind,
    PhoneBookError,
    validate_field_size,
)
from phonebook.infrastructure import MongoContactStore

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

_STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.INTERNAL_SERVER_ERROR: 500,
}


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def _create_client(settings: Settings) -> MongoClient:
    return MongoClient(
        settings.mongo_uri, serverSelectionTimeoutMS=settings.mongo_timeout_ms
    )


def get_phone_book(request: Request) -> PhoneBook:
    app = request.app
    if getattr(app.state, "phone_book", None) is None:
        settings = get_settings()
        if getattr(app.state, "client", None) is None:
            app.state.client = _create_client(settings)
        store = MongoContactStore.from_settings(app.state.client, settings)
        app.state.phone_book = PhoneBookService(
            store, limit_per_page=settings.limit_per_page
        )
    return app.state.phone_book


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    app.state.client = None
    app.state.phone_book = None
    logger.info(
        "Phonebook API using %s/%s.%s (page size %d)",
        settings.mongo_uri,
        settings.mongo_db_name,
        settings.mongo_collection_name,
        settings.limit_per_page,
    )
    try:
        app.state.client = _create_client(settings)
        yield
    finally:
        if getattr(app.state, "client", None) is not None:
            logger.info("Disconnecting MongoDB client")
            app.state.client.close()


app = FastAPI(title="Phonebook API", lifespan=lifespan)


@app.exception_handler(PhoneBookError)
async def phone_book_error_handler(_: Request, exc: PhoneBookError) -> JSONResponse:
    logger.error("%s: %s", exc.kind.value, exc)
    return JSONResponse(content=str(exc), status_code=_STATUS_BY_KIND[exc.kind])


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    _: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = "; ".join(
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.error("Invalid request: %s", errors)
    return JSONResponse(content=f"invalid request: {errors}", status_code=400)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: contacts ---


class ContactBody(BaseModel):
    """Contact JSON as sent by clients. Unknown keys, including "_id", are ignored."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    phone: str | None = None
    address: str | None = None

    def to_contact(self) -> Contact:
        return Contact(
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            phone=self.phone or "",
            address=self.address or "",
        )


def _decode_contact(body: ContactBody | None, settings: Settings) -> Contact:
    contact = body.to_contact() if body is not None else None
    if not validate_field_size(contact, settings.max_field_length):
        raise ContactTooLarge()
    return contact


@app.get("/contact")
def get_contacts_with_pagination(
    request: Request,
    phone_book: PhoneBook = Depends(get_phone_book),
):
    contacts = phone_book.get_contacts_with_pagination(
        request.query_params.getlist("page")
    )
    return [c.to_dict() for c in contacts]


@app.post("/contact")
def add_contact(
    body: ContactBody | None = Body(None),
    phone_book: PhoneBook = Depends(get_phone_book),
    settings: Settings = Depends(get_settings),
):
    contact = _decode_contact(body, settings)
    return phone_book.add_contact(contact)


@app.put("/contact/edit/{contact_id}")
def update_contact(
    contact_id: str,
    body: ContactBody | None = Body(None),
    phone_book: PhoneBook = Depends(get_phone_book),
    settings: Settings = Depends(get_settings),
):
    contact = _decode_contact(body, settings)
    updated_count = phone_book.update_contact(contact_id, contact)
    if updated_count == 0:
        return "not found document to edit"
    return f"edited {updated_count} document successfully"


@app.delete("/contact/delete/{contact_id}")
def delete_contact(
    contact_id: str,
    phone_book: PhoneBook = Depends(get_phone_book),
):
    deleted_count = phone_book.delete_contact(contact_id)
    if deleted_count == 0:
        return "not found document to delete"
    return f"deleted {deleted_count} document successfully"


@app.get("/contact/search")
def search_contacts(
    request: Request,
    phone_book: PhoneBook = Depends(get_phone_book),
):
    params = request.query_params
    query = {key: params.getlist(key) for key in params.keys()}
    contacts = phone_book.search_contacts(query)
    return [c.to_dict() for c in contacts]
