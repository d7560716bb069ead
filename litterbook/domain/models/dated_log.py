from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Generic, Iterable, Iterator, Protocol, TypeVar
from uuid import UUID, uuid4


class DatedEntry(Protocol):
    @property
    def id(self) -> UUID | None: ...

    @property
    def date(self) -> date: ...


EntryT = TypeVar("EntryT", bound=DatedEntry)


class DatedEntryLog(Generic[EntryT]):
    """Chronological observations kept newest first.

    Entries are frozen dataclasses. There is no update-in-place; a correction
    is a `remove` followed by an `append`.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[EntryT] = ()) -> None:
        self._entries: list[EntryT] = []
        for entry in entries:
            self._entries.append(self._with_id(entry))
        self._sort()

    @staticmethod
    def _with_id(entry: EntryT) -> EntryT:
        if entry.id is None:
            return replace(entry, id=uuid4())
        return entry

    def _sort(self) -> None:
        # Stable: entries sharing a date keep their insertion order.
        self._entries.sort(key=lambda e: e.date, reverse=True)

    def append(self, entry: EntryT) -> EntryT:
        stored = self._with_id(entry)
        self._entries.append(stored)
        self._sort()
        return stored

    def remove(self, entry_id: UUID) -> bool:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        return len(self._entries) != before

    def get(self, entry_id: UUID) -> EntryT | None:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def on(self, day: date) -> list[EntryT]:
        return [e for e in self._entries if e.date == day]

    def replace_on(self, day: date, entry: EntryT) -> EntryT:
        """Drop every entry recorded on `day`, then append `entry`."""
        self._entries = [e for e in self._entries if e.date != day]
        return self.append(entry)

    @property
    def entries(self) -> list[EntryT]:
        return list(self._entries)

    def latest(self) -> EntryT | None:
        return self._entries[0] if self._entries else None

    def __iter__(self) -> Iterator[EntryT]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DatedEntryLog):
            return self._entries == other._entries
        return NotImplemented

    def __repr__(self) -> str:
        return f"DatedEntryLog({self._entries!r})"


def weight_changes(log: DatedEntryLog) -> list[tuple[DatedEntry, float | None]]:
    """Pair each weighing with the change since the next older one."""
    entries = log.entries
    result: list[tuple[DatedEntry, float | None]] = []
    for index, entry in enumerate(entries):
        if index + 1 < len(entries):
            result.append((entry, entry.weight - entries[index + 1].weight))
        else:
            result.append((entry, None))
    return result
