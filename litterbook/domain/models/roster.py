from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable
from uuid import UUID

from litterbook.domain.models.kitten import ROSTER_FIELDS, Kitten
from litterbook.domain.value_objects.kitten_status import KittenStatus


class DuplicateKittenId(ValueError):
    pass


@dataclass(slots=True)
class KittenDraft:
    """One row of a roster save. `id` is None for kittens not yet stored."""

    id: UUID | None = None
    name: str | None = None
    gender: str | None = None
    color: str | None = None
    ems_code: str | None = None
    status: str = KittenStatus.AVAILABLE.value
    reserved_by: str | None = None
    notes: str | None = None
    birth_weight: float | None = None
    complication_type: str | None = None

    @classmethod
    def from_kitten(cls, kitten: Kitten) -> KittenDraft:
        return cls(id=kitten.id, **kitten.roster_fields())

    def fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in ROSTER_FIELDS}


@dataclass(slots=True)
class RosterPlan:
    roster: list[Kitten] = field(default_factory=list)
    to_insert: list[Kitten] = field(default_factory=list)
    to_update: list[Kitten] = field(default_factory=list)
    to_delete: list[UUID] = field(default_factory=list)


def reconcile_roster(
    litter_id: UUID,
    existing: Iterable[Kitten],
    target: Iterable[KittenDraft],
) -> RosterPlan:
    """Plan a full-roster replace.

    Drafts whose id is stored are updated with every roster field they carry,
    drafts without a known id become new kittens with fresh ids, and stored
    kittens missing from `target` are deleted.
    """
    stored = {kitten.id: kitten for kitten in existing}
    drafts = list(target)
    seen: set[UUID] = set()
    for draft in drafts:
        if draft.id is None:
            continue
        if draft.id in seen:
            raise DuplicateKittenId(f"Kitten {draft.id} appears more than once")
        seen.add(draft.id)

    plan = RosterPlan()
    for draft in drafts:
        current = stored.get(draft.id) if draft.id is not None else None
        if current is not None:
            current.apply_changes(draft.fields())
            plan.to_update.append(current)
            plan.roster.append(current)
        else:
            created = Kitten.create(litter_id=litter_id, **draft.fields())
            plan.to_insert.append(created)
            plan.roster.append(created)
    kept = {kitten.id for kitten in plan.to_update}
    plan.to_delete = [kitten_id for kitten_id in stored if kitten_id not in kept]
    return plan
