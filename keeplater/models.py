import uuid
from datetime import datetime, timezone

from keeplater.extensions import db


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_entry_id() -> str:
    return str(uuid.uuid4())


class Entry(db.Model):
    __tablename__ = "entries"

    id = db.Column(db.String(36), primary_key=True, default=new_entry_id)
    # Not unique: duplicates are filtered before insert, see services.share.
    url = db.Column(db.Text, nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def as_dict(self):
        created_at = self.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; stored values are always UTC.
            created_at = created_at.replace(tzinfo=timezone.utc)
        return {
            "id": self.id,
            "url": self.url,
            "createdAt": created_at.isoformat(),
        }

    def __repr__(self) -> str:
        return f"<Entry {self.id} {self.url!r}>"
