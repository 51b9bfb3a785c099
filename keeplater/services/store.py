from __future__ import annotations

from typing import Protocol

from sqlalchemy.orm import Session

from keeplater.models import Entry


class EntryStore(Protocol):
    def find_by_url(self, url: str) -> list[Entry]: ...

    def insert(self, url: str) -> Entry: ...

    def list_all(self) -> list[Entry]: ...


class SqlEntryStore:
    """Entry persistence over a SQLAlchemy session.

    Every method is a single statement. Nothing here wraps a lookup and an
    insert in one transaction, so callers get no atomic check-then-insert.
    """

    def __init__(self, session: Session):
        self.session = session

    def find_by_url(self, url: str) -> list[Entry]:
        return (
            self.session.query(Entry)
            .filter(Entry.url == url)
            .order_by(Entry.created_at.asc())
            .all()
        )

    def insert(self, url: str) -> Entry:
        entry = Entry(url=url)
        self.session.add(entry)
        self.session.commit()
        return entry

    def list_all(self) -> list[Entry]:
        return self.session.query(Entry).order_by(Entry.created_at.asc()).all()
