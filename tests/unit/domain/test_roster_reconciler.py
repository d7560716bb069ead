from __future__ import annotations

from uuid import uuid4

import pytest

from litterbook.domain.models.kitten import Kitten
from litterbook.domain.models.roster import DuplicateKittenId, KittenDraft, reconcile_roster


def _roster(litter_id, count: int) -> list[Kitten]:
    return [
        Kitten.create(litter_id=litter_id, name=f"K{i}", color="black", birth_weight=90 + i)
        for i in range(count)
    ]


def test_full_drafts_keep_every_kitten_and_their_fields():
    litter_id = uuid4()
    existing = _roster(litter_id, 3)
    drafts = [KittenDraft.from_kitten(k) for k in existing]
    drafts[1].status = "reserved"
    drafts[1].reserved_by = "Ann"

    plan = reconcile_roster(litter_id, existing, drafts)

    assert plan.to_delete == []
    assert plan.to_insert == []
    assert [k.id for k in plan.roster] == [k.id for k in existing]
    assert plan.roster[0].name == "K0"
    assert plan.roster[0].birth_weight == 90
    assert plan.roster[1].status == "reserved"
    assert plan.roster[1].reserved_by == "Ann"


def test_partial_roster_deletes_the_kittens_left_out():
    litter_id = uuid4()
    existing = _roster(litter_id, 4)
    kept = existing[:2]

    plan = reconcile_roster(litter_id, existing, [KittenDraft.from_kitten(k) for k in kept])

    assert len(plan.to_delete) == 2
    assert set(plan.to_delete) == {existing[2].id, existing[3].id}
    assert [k.id for k in plan.roster] == [k.id for k in kept]


def test_draft_fields_overwrite_stored_values_even_when_none():
    litter_id = uuid4()
    existing = _roster(litter_id, 1)

    plan = reconcile_roster(litter_id, existing, [KittenDraft(id=existing[0].id, name="Renamed")])

    assert plan.roster[0].name == "Renamed"
    assert plan.roster[0].color is None
    assert plan.roster[0].birth_weight is None


def test_unknown_ids_become_new_kittens_with_fresh_ids():
    litter_id = uuid4()
    foreign_id = uuid4()

    plan = reconcile_roster(
        litter_id, [], [KittenDraft(name="New"), KittenDraft(id=foreign_id, name="Stray")]
    )

    assert len(plan.to_insert) == 2
    assert all(k.litter_id == litter_id for k in plan.roster)
    assert foreign_id not in {k.id for k in plan.roster}


def test_duplicate_ids_are_rejected_before_any_kitten_changes():
    litter_id = uuid4()
    existing = _roster(litter_id, 1)
    kitten_id = existing[0].id
    with pytest.raises(DuplicateKittenId):
        reconcile_roster(
            litter_id,
            existing,
            [KittenDraft(id=kitten_id, name="Renamed"), KittenDraft(id=kitten_id)],
        )
    assert existing[0].name == "K0"
    assert existing[0].color == "black"
    assert existing[0].birth_weight == 90


def test_empty_target_deletes_everything():
    litter_id = uuid4()
    existing = _roster(litter_id, 2)
    plan = reconcile_roster(litter_id, existing, [])
    assert plan.roster == []
    assert len(plan.to_delete) == 2


def test_birth_weight_only_drafts_for_some_kittens_reset_the_rest_and_delete_omitted():
    litter_id = uuid4()
    existing = _roster(litter_id, 4)
    for kitten in existing:
        kitten.apply_changes({"status": "reserved", "reserved_by": "Ann", "gender": "female"})
    sent = existing[:2]

    plan = reconcile_roster(
        litter_id, existing, [KittenDraft(id=k.id, birth_weight=120) for k in sent]
    )

    assert set(plan.to_delete) == {existing[2].id, existing[3].id}
    assert [k.id for k in plan.roster] == [k.id for k in sent]
    for kitten in plan.roster:
        assert kitten.birth_weight == 120
        assert kitten.name is None
        assert kitten.color is None
        assert kitten.gender is None
        assert kitten.reserved_by is None
        assert kitten.status == "available"


def test_full_drafts_keep_complication_type():
    litter_id = uuid4()
    existing = _roster(litter_id, 2)
    existing[1].apply_changes({"complication_type": "stillborn"})

    plan = reconcile_roster(litter_id, existing, [KittenDraft.from_kitten(k) for k in existing])

    assert plan.roster[1].complication_type == "stillborn"
    assert plan.roster[0].complication_type is None
