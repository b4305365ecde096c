import itertools
import logging
import threading
from contextlib import nullcontext
from typing import Dict, List, Optional, Protocol

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, select, func

from core.config import Settings
from database import build_engine, create_db_and_tables
from models.contact import ContactMessage, utc_now
from schemas.contact import ContactMessageCreate

logger = logging.getLogger(__name__)


class ContactStoreError(Exception):
    """The backing store could not complete the operation."""


class ContactStore(Protocol):
    def init_schema(self) -> None: ...

    def create(self, data: ContactMessageCreate) -> ContactMessage: ...

    def get(self, message_id: int) -> Optional[ContactMessage]: ...

    def list_all(self) -> List[ContactMessage]: ...

    def count(self) -> int: ...


class SQLContactStore:
    """Contact messages persisted through SQLModel.

    Ids come from the table's primary key sequence, so the database
    serializes id assignment for concurrent inserts. When the engine hands
    every session the same connection (StaticPool), reads take the write
    lock as well.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        # SQLite allows a single writer per database
        self._write_lock = threading.Lock()
        self._read_lock = self._write_lock if isinstance(engine.pool, StaticPool) else nullcontext()

    def init_schema(self) -> None:
        try:
            create_db_and_tables(self.engine)
        except SQLAlchemyError as e:
            raise ContactStoreError("Failed to initialize contact storage") from e

    def create(self, data: ContactMessageCreate) -> ContactMessage:
        record = ContactMessage(**data.model_dump())
        try:
            with self._write_lock, Session(self.engine) as session:
                session.add(record)
                session.commit()
                session.refresh(record)
        except SQLAlchemyError as e:
            raise ContactStoreError("Failed to store contact message") from e
        return record

    def get(self, message_id: int) -> Optional[ContactMessage]:
        try:
            with self._read_lock, Session(self.engine) as session:
                return session.get(ContactMessage, message_id)
        except SQLAlchemyError as e:
            raise ContactStoreError("Failed to read contact message") from e

    def list_all(self) -> List[ContactMessage]:
        try:
            with self._read_lock, Session(self.engine) as session:
                return list(session.exec(select(ContactMessage).order_by(ContactMessage.id)).all())
        except SQLAlchemyError as e:
            raise ContactStoreError("Failed to list contact messages") from e

    def count(self) -> int:
        try:
            with self._read_lock, Session(self.engine) as session:
                return session.exec(select(func.count(ContactMessage.id))).one()
        except SQLAlchemyError as e:
            raise ContactStoreError("Failed to count contact messages") from e


class InMemoryContactStore:
    """Process-local store. Contents are lost on restart."""

    def __init__(self):
        # rows are kept as plain dicts; every read builds a fresh record
        self._rows: Dict[int, dict] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def init_schema(self) -> None:
        pass

    def create(self, data: ContactMessageCreate) -> ContactMessage:
        with self._lock:
            message_id = next(self._ids)
            row = {"id": message_id, "created_at": utc_now(), **data.model_dump()}
            self._rows[message_id] = row
        return ContactMessage(**row)

    def get(self, message_id: int) -> Optional[ContactMessage]:
        with self._lock:
            row = self._rows.get(message_id)
        return ContactMessage(**row) if row else None

    def list_all(self) -> List[ContactMessage]:
        with self._lock:
            rows = [self._rows[k] for k in sorted(self._rows)]
        return [ContactMessage(**row) for row in rows]

    def count(self) -> int:
        with self._lock:
            return len(self._rows)


def build_contact_store(settings: Settings) -> ContactStore:
    if settings.CONTACT_STORE_BACKEND == "memory":
        logger.info("Using in-memory contact store")
        return InMemoryContactStore()
    logger.info("Using SQL contact store")
    return SQLContactStore(build_engine(settings))
