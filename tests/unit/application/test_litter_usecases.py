from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.use_cases.litters import (
    add_mother_weight,
    add_pregnancy_note,
    calculate_expected_date,
    create_litter,
    delete_litter,
    get_pregnancy_progress,
    list_deadlines,
    list_litters,
    remove_pregnancy_note,
    set_phase,
    update_litter,
    update_mating_dates,
)
from litterbook.domain.value_objects.litter_phase import LitterPhase


async def _create(uow, name="Spring"):
    return await create_litter.execute(uow, create_litter.CreateLitterInput(name=name))


@pytest.mark.asyncio
async def test_create_litter_strips_name_and_starts_planned(uow):
    litter = await _create(uow, name="  Spring  ")
    assert litter.name == "Spring"
    assert litter.phase is LitterPhase.PLANNED
    assert uow.state.commits == 1


@pytest.mark.asyncio
async def test_create_litter_requires_name(uow):
    with pytest.raises(ValidationError):
        await _create(uow, name="   ")
    assert uow.litters.items == {}
    assert uow.state.commits == 0


@pytest.mark.asyncio
async def test_create_litter_rejects_coefficient_out_of_range(uow):
    with pytest.raises(ValidationError):
        await create_litter.execute(
            uow, create_litter.CreateLitterInput(name="X", inbreeding_coefficient=120)
        )


@pytest.mark.asyncio
async def test_update_writes_only_supplied_fields(uow):
    litter = await _create(uow)
    updated = await update_litter.execute(uow, litter.id, {"kitten_count": 5})
    assert updated.kitten_count == 5
    assert uow.litters.written_fields[-1] == {"kitten_count", "version", "updated_at"}


@pytest.mark.asyncio
async def test_update_mating_from_mirrors_legacy_date_and_keeps_expected(uow):
    litter = await _create(uow)
    await update_litter.execute(uow, litter.id, {"mating_date_from": date(2024, 1, 10)})
    calculated = await calculate_expected_date.execute(uow, litter.id)
    assert calculated.expected_date == date(2024, 3, 15)

    moved = await update_litter.execute(uow, litter.id, {"mating_date_from": date(2024, 1, 20)})

    assert moved.mating_date == date(2024, 1, 20)
    assert moved.expected_date == date(2024, 3, 15)
    assert "expected_date" not in uow.litters.written_fields[-1]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "changes",
    [
        {"phase": "active"},
        {"name": ""},
        {"kitten_count": -1},
        {"mating_date_from": date(2024, 1, 10), "mating_date_to": date(2024, 1, 5)},
    ],
)
async def test_update_rejects_invalid_changes_before_writing(uow, changes):
    litter = await _create(uow)
    with pytest.raises(ValidationError):
        await update_litter.execute(uow, litter.id, changes)
    assert uow.litters.written_fields == []


@pytest.mark.asyncio
async def test_update_missing_litter(uow):
    with pytest.raises(NotFound):
        await update_litter.execute(uow, uuid4(), {"notes": "x"})


@pytest.mark.asyncio
async def test_calculate_expected_date_without_mating_date(uow):
    litter = await _create(uow)
    with pytest.raises(ValidationError):
        await calculate_expected_date.execute(uow, litter.id)


@pytest.mark.asyncio
async def test_update_mating_dates_stores_window(uow):
    litter = await _create(uow)
    updated = await update_mating_dates.execute(
        uow,
        litter.id,
        update_mating_dates.UpdateMatingDatesInput(
            date_from=date(2024, 1, 10), date_to=date(2024, 1, 12)
        ),
    )
    assert updated.mating_date_from == date(2024, 1, 10)
    assert updated.mating_date_to == date(2024, 1, 12)
    assert updated.mating_date == date(2024, 1, 10)
    assert updated.expected_date is None


@pytest.mark.asyncio
async def test_set_phase_is_permissive_by_default(uow):
    litter = await _create(uow)
    await set_phase.execute(uow, litter.id, "completed")
    back = await set_phase.execute(uow, litter.id, "planned")
    assert back.phase == LitterPhase.PLANNED


@pytest.mark.asyncio
async def test_set_phase_strict_rejects_moving_back(uow):
    litter = await _create(uow)
    await set_phase.execute(uow, litter.id, "active", strict=True)
    with pytest.raises(ValidationError):
        await set_phase.execute(uow, litter.id, "pending", strict=True)


@pytest.mark.asyncio
async def test_set_phase_rejects_unknown_value(uow):
    litter = await _create(uow)
    with pytest.raises(ValidationError):
        await set_phase.execute(uow, litter.id, "born")


@pytest.mark.asyncio
async def test_list_litters_groups_by_phase(uow):
    planned = await _create(uow, name="One")
    active = await _create(uow, name="Two")
    await set_phase.execute(uow, active.id, "active")

    grouped = await list_litters.execute(uow)

    assert [item.id for item in grouped.planned] == [planned.id]
    assert [item.id for item in grouped.active] == [active.id]
    assert grouped.pending == [] and grouped.completed == []
    assert len(grouped.all) == 2


@pytest.mark.asyncio
async def test_pregnancy_notes_add_and_remove(uow):
    litter = await _create(uow)
    entry = await add_pregnancy_note.execute(
        uow,
        litter.id,
        add_pregnancy_note.AddPregnancyNoteInput(date=date(2024, 1, 25), note="Pink nipples"),
    )
    assert entry.id is not None
    assert len(uow.litters.items[litter.id].pregnancy_notes_log) == 1

    unchanged = await remove_pregnancy_note.execute(uow, litter.id, uuid4())
    assert len(unchanged.pregnancy_notes_log) == 1

    removed = await remove_pregnancy_note.execute(uow, litter.id, entry.id)
    assert len(removed.pregnancy_notes_log) == 0


@pytest.mark.asyncio
async def test_pregnancy_note_requires_text(uow):
    litter = await _create(uow)
    with pytest.raises(ValidationError):
        await add_pregnancy_note.execute(
            uow, litter.id, add_pregnancy_note.AddPregnancyNoteInput(date=date(2024, 1, 25), note=" ")
        )


@pytest.mark.asyncio
async def test_mother_weight_must_be_positive(uow):
    litter = await _create(uow)
    with pytest.raises(ValidationError):
        await add_mother_weight.execute(
            uow, litter.id, add_mother_weight.AddMotherWeightInput(date=date(2024, 2, 1), weight=0)
        )
    entry = await add_mother_weight.execute(
        uow, litter.id, add_mother_weight.AddMotherWeightInput(date=date(2024, 2, 1), weight=4.3)
    )
    assert entry.weight == 4.3


@pytest.mark.asyncio
async def test_progress_and_deadlines_need_their_anchor_dates(uow):
    litter = await _create(uow)
    with pytest.raises(ValidationError):
        await get_pregnancy_progress.execute(uow, litter.id, date(2024, 2, 1))
    with pytest.raises(ValidationError):
        await list_deadlines.execute(uow, litter.id, date(2024, 2, 1))

    await update_litter.execute(
        uow,
        litter.id,
        {"mating_date_from": date(2024, 1, 10), "birth_date": date(2024, 3, 14)},
    )
    progress = await get_pregnancy_progress.execute(uow, litter.id, date(2024, 2, 10))
    assert progress.days_pregnant == 31
    assert progress.actual_gestation_days == 64
    deadlines = await list_deadlines.execute(uow, litter.id, date(2024, 3, 14))
    assert deadlines[0].due_on == date(2024, 3, 14)


@pytest.mark.asyncio
async def test_delete_litter(uow):
    litter = await _create(uow)
    await delete_litter.execute(uow, litter.id)
    with pytest.raises(NotFound):
        await delete_litter.execute(uow, litter.id)


@pytest.mark.asyncio
async def test_update_mating_dates_keeps_expected_date_unless_replaced(uow):
    litter = await _create(uow)
    await update_mating_dates.execute(
        uow, litter.id, update_mating_dates.UpdateMatingDatesInput(date_from=date(2024, 1, 10))
    )
    await calculate_expected_date.execute(uow, litter.id)

    moved = await update_mating_dates.execute(
        uow, litter.id, update_mating_dates.UpdateMatingDatesInput(date_from=date(2024, 1, 20))
    )
    assert moved.expected_date == date(2024, 3, 15)
    assert "expected_date" not in uow.litters.written_fields[-1]

    cleared = await update_mating_dates.execute(
        uow,
        litter.id,
        update_mating_dates.UpdateMatingDatesInput(
            date_from=date(2024, 1, 20), expected_date=None, replace_expected_date=True
        ),
    )
    assert cleared.expected_date is None
