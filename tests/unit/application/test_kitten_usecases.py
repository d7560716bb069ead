from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.use_cases.kittens import (
    list_kittens,
    record_weights,
    remove_weight,
    replace_roster,
    update_birth_weights,
    update_kitten,
)
from litterbook.application.use_cases.reports import build_weight_chart
from litterbook.domain.models.litter import Litter
from litterbook.domain.models.roster import KittenDraft


async def _litter_with_kittens(uow, count=3):
    litter = Litter.create(name="Roster")
    await uow.litters.add(litter)
    roster = await replace_roster.execute(
        uow,
        litter.id,
        [KittenDraft(name=f"K{i}", color="cream", birth_weight=95 + i) for i in range(count)],
    )
    return litter, roster


@pytest.mark.asyncio
async def test_replace_roster_inserts_new_kittens(uow):
    litter, roster = await _litter_with_kittens(uow)
    assert len(roster) == 3
    assert len(await list_kittens.execute(uow, litter.id)) == 3
    assert uow.state.commits == 1


@pytest.mark.asyncio
async def test_replace_roster_with_subset_deletes_the_rest(uow):
    litter, roster = await _litter_with_kittens(uow, count=4)
    kept = [KittenDraft.from_kitten(k) for k in roster[:2]]

    result = await replace_roster.execute(uow, litter.id, kept)

    assert [k.id for k in result] == [k.id for k in roster[:2]]
    assert set(uow.kittens.deleted) == {roster[2].id, roster[3].id}
    stored = await list_kittens.execute(uow, litter.id)
    assert len(stored) == 2


@pytest.mark.asyncio
async def test_replace_roster_rejects_duplicates_and_bad_fields(uow):
    litter, roster = await _litter_with_kittens(uow, count=1)
    draft = KittenDraft.from_kitten(roster[0])
    with pytest.raises(ValidationError):
        await replace_roster.execute(uow, litter.id, [draft, draft])
    with pytest.raises(ValidationError):
        await replace_roster.execute(uow, litter.id, [KittenDraft(gender="tom")])
    with pytest.raises(ValidationError):
        await replace_roster.execute(uow, litter.id, [KittenDraft(status="lost")])
    assert len(await list_kittens.execute(uow, litter.id)) == 1


@pytest.mark.asyncio
async def test_replace_roster_rolls_back_when_store_fails(uow):
    litter, _ = await _litter_with_kittens(uow, count=1)
    uow.kittens.fail_on_add = True
    with pytest.raises(RuntimeError):
        await replace_roster.execute(uow, litter.id, [KittenDraft(name="New")])
    assert uow.state.rollbacks == 1


@pytest.mark.asyncio
async def test_replace_roster_unknown_litter(uow):
    with pytest.raises(NotFound):
        await replace_roster.execute(uow, uuid4(), [])


@pytest.mark.asyncio
async def test_update_kitten_changes_only_given_fields(uow):
    _, roster = await _litter_with_kittens(uow)
    target = roster[1]

    updated = await update_kitten.execute(uow, target.id, {"status": "reserved"})

    assert updated.status == "reserved"
    assert updated.name == "K1"
    assert updated.birth_weight == 96
    assert uow.kittens.items[roster[0].id].status == "available"


@pytest.mark.asyncio
async def test_update_kitten_rejects_unknown_fields(uow):
    _, roster = await _litter_with_kittens(uow, count=1)
    with pytest.raises(ValidationError):
        await update_kitten.execute(uow, roster[0].id, {"litter_id": uuid4()})


@pytest.mark.asyncio
async def test_birth_weights_keep_other_fields_and_siblings(uow):
    litter, roster = await _litter_with_kittens(uow)
    await update_kitten.execute(uow, roster[0].id, {"reserved_by": "Ann", "status": "reserved"})

    result = await update_birth_weights.execute(uow, litter.id, {roster[0].id: 101.5})

    assert len(result) == 3
    first = uow.kittens.items[roster[0].id]
    assert first.birth_weight == 101.5
    assert first.reserved_by == "Ann"
    assert first.status == "reserved"
    assert uow.kittens.items[roster[2].id].birth_weight == 97
    assert uow.kittens.deleted == []


@pytest.mark.asyncio
async def test_birth_weights_for_foreign_kitten(uow):
    litter, _ = await _litter_with_kittens(uow)
    with pytest.raises(ValidationError):
        await update_birth_weights.execute(uow, litter.id, {uuid4(): 100})


@pytest.mark.asyncio
async def test_record_weights_replaces_same_day_entry(uow):
    litter, roster = await _litter_with_kittens(uow, count=2)
    day = date(2024, 3, 2)
    await record_weights.execute(uow, litter.id, day, {roster[0].id: 110})
    await record_weights.execute(uow, litter.id, day, {roster[0].id: 112})

    log = uow.kittens.items[roster[0].id].weight_log
    assert [e.weight for e in log] == [112]
    assert len(uow.kittens.items[roster[1].id].weight_log) == 0


@pytest.mark.asyncio
async def test_record_weights_requires_values(uow):
    litter, _ = await _litter_with_kittens(uow, count=1)
    with pytest.raises(ValidationError):
        await record_weights.execute(uow, litter.id, date(2024, 3, 2), {})


@pytest.mark.asyncio
async def test_record_weights_rejects_non_positive(uow):
    litter, roster = await _litter_with_kittens(uow, count=1)
    with pytest.raises(ValidationError):
        await record_weights.execute(uow, litter.id, date(2024, 3, 2), {roster[0].id: 0})


@pytest.mark.asyncio
async def test_remove_weight_entry(uow):
    litter, roster = await _litter_with_kittens(uow, count=1)
    await record_weights.execute(uow, litter.id, date(2024, 3, 2), {roster[0].id: 110})
    await record_weights.execute(uow, litter.id, date(2024, 3, 3), {roster[0].id: 118})
    entry = uow.kittens.items[roster[0].id].weight_log.latest()

    kitten = await remove_weight.execute(uow, roster[0].id, entry.id)

    assert [e.weight for e in kitten.weight_log] == [110]
    again = await remove_weight.execute(uow, roster[0].id, entry.id)
    assert len(again.weight_log) == 1


@pytest.mark.asyncio
async def test_weight_chart_requires_birth_date(uow):
    litter, _ = await _litter_with_kittens(uow)
    with pytest.raises(ValidationError):
        await build_weight_chart.execute(uow, litter.id)

    uow.litters.items[litter.id].birth_date = date(2024, 3, 1)
    name, chart = await build_weight_chart.execute(uow, litter.id)
    assert name == "Roster"
    assert chart.kitten_labels == ["K0", "K1", "K2"]
    assert chart.column_count == 14


@pytest.mark.asyncio
async def test_complication_type_is_set_validated_and_kept_by_birth_weights(uow):
    litter, roster = await _litter_with_kittens(uow, count=2)
    with pytest.raises(ValidationError):
        await update_kitten.execute(uow, roster[0].id, {"complication_type": "sick"})

    tagged = await update_kitten.execute(uow, roster[0].id, {"complication_type": "deceased"})
    assert tagged.complication_type == "deceased"

    await update_birth_weights.execute(uow, litter.id, {roster[1].id: 88})
    assert uow.kittens.items[roster[0].id].complication_type == "deceased"
    assert uow.kittens.items[roster[1].id].complication_type is None
