# backend/models/contact.py
from typing import Optional
from sqlmodel import Field, SQLModel
from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ContactMessageBase(SQLModel):
    name: str = Field(max_length=100)
    email: str = Field(max_length=254)
    subject: str = Field(max_length=200)
    message: str = Field(max_length=5000)


class ContactMessage(ContactMessageBase, table=True):
    __tablename__ = "contact_messages"

    # Rows are write-once; there is no update/delete path.
    id: Optional[int] = Field(default=None, primary_key=True, index=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
