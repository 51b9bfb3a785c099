from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property

from keeplater.models import Entry
from keeplater.services.common import extract_url
from keeplater.services.store import EntryStore

STATUS_NEW = "new"
STATUS_DUPLICATE = "duplicate"

REASON_NO_URL_FOUND = "no_url_found"


@dataclass(frozen=True)
class ShareQuery:
    url: str | None = None
    text: str | None = None
    title: str | None = None

    @classmethod
    def from_args(cls, args: Mapping[str, str]) -> ShareQuery:
        return cls(url=args.get("url"), text=args.get("text"), title=args.get("title"))

    @cached_property
    def extracted_url(self) -> str | None:
        return extract_url(self.url, self.text, self.title)


@dataclass(frozen=True)
class DuplicateCheck:
    status: str
    existing: Entry | None = None

    @property
    def is_duplicate(self) -> bool:
        return self.status == STATUS_DUPLICATE


@dataclass(frozen=True)
class Rejected:
    reason: str


@dataclass(frozen=True)
class AlreadySaved:
    entry: Entry


@dataclass(frozen=True)
class Saved:
    entry: Entry


IngestOutcome = Rejected | AlreadySaved | Saved


def classify(candidate_url: str, store: EntryStore) -> DuplicateCheck:
    # Exact, case-sensitive match. No URL normalization.
    matches = store.find_by_url(candidate_url)
    if matches:
        return DuplicateCheck(status=STATUS_DUPLICATE, existing=matches[0])
    return DuplicateCheck(status=STATUS_NEW)


def ingest(query: ShareQuery, store: EntryStore) -> IngestOutcome:
    """Turn one share request into a stored entry.

    The duplicate lookup and the insert are separate statements. Two
    concurrent requests for the same URL can both pass the lookup and both
    insert, so one row per URL is best effort only. Store errors propagate
    unchanged.
    """
    url = query.extracted_url
    if url is None:
        return Rejected(reason=REASON_NO_URL_FOUND)

    check = classify(url, store)
    if check.is_duplicate:
        return AlreadySaved(entry=check.existing)

    return Saved(entry=store.insert(url))


def list_entries(store: EntryStore) -> list[Entry]:
    return store.list_all()
