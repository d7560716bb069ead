from __future__ import annotations

from datetime import date as DtDate
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic.alias_generators import to_camel

from litterbook.application.use_cases.litters import (
    add_mother_weight,
    add_pregnancy_note,
    calculate_expected_date,
    create_litter,
    delete_litter,
    get_litter,
    get_pregnancy_progress,
    list_deadlines,
    list_litters,
    remove_mother_weight,
    remove_pregnancy_note,
    set_phase,
    update_litter,
    update_mating_dates,
)
from litterbook.config.settings import Settings
from litterbook.domain.policies.phase_consistency import consistency_issues
from litterbook.domain.value_objects.litter_phase import (
    PHASE_DESCRIPTIONS,
    LitterPhase,
    applicable_fields,
)
from litterbook.interfaces.http.deps import get_app_settings, get_today, get_uow
from litterbook.interfaces.http.schemas.litters import (
    ApplicableFieldsResponse,
    ConsistencyResponse,
    DeadlineResponse,
    GroupedLittersResponse,
    LitterCreate,
    LitterResponse,
    LitterUpdate,
    MatingDatesUpdate,
    MotherWeightCreate,
    MotherWeightResponse,
    PhaseIssueResponse,
    PhaseUpdate,
    PregnancyNoteCreate,
    PregnancyNoteResponse,
    PregnancyProgressResponse,
)

router = APIRouter(prefix="/litters", tags=["litters"])


@router.post("", response_model=LitterResponse, status_code=status.HTTP_201_CREATED)
async def create_litter_endpoint(payload: LitterCreate, uow=Depends(get_uow)):
    input_data = create_litter.CreateLitterInput(**payload.model_dump())
    return await create_litter.execute(uow, input_data)


@router.get("", response_model=GroupedLittersResponse)
async def list_litters_endpoint(uow=Depends(get_uow)):
    return await list_litters.execute(uow)


@router.get("/{litter_id}", response_model=LitterResponse)
async def get_litter_endpoint(litter_id: UUID, uow=Depends(get_uow)):
    return await get_litter.execute(uow, litter_id)


@router.patch("/{litter_id}", response_model=LitterResponse)
async def update_litter_endpoint(litter_id: UUID, payload: LitterUpdate, uow=Depends(get_uow)):
    changes = payload.model_dump(exclude_unset=True)
    return await update_litter.execute(uow, litter_id, changes)


@router.delete("/{litter_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_litter_endpoint(litter_id: UUID, uow=Depends(get_uow)) -> None:
    await delete_litter.execute(uow, litter_id)


@router.put("/{litter_id}/phase", response_model=LitterResponse)
async def set_phase_endpoint(
    litter_id: UUID,
    payload: PhaseUpdate,
    settings: Settings = Depends(get_app_settings),
    uow=Depends(get_uow),
):
    return await set_phase.execute(
        uow, litter_id, payload.phase, strict=settings.strict_phase_transitions
    )


@router.put("/{litter_id}/mating-dates", response_model=LitterResponse)
async def update_mating_dates_endpoint(
    litter_id: UUID, payload: MatingDatesUpdate, uow=Depends(get_uow)
):
    input_data = update_mating_dates.UpdateMatingDatesInput(
        date_from=payload.date_from,
        date_to=payload.date_to,
        expected_date=payload.expected_date,
        replace_expected_date="expected_date" in payload.model_fields_set,
    )
    return await update_mating_dates.execute(uow, litter_id, input_data)


@router.post("/{litter_id}/expected-date", response_model=LitterResponse)
async def calculate_expected_date_endpoint(litter_id: UUID, uow=Depends(get_uow)):
    return await calculate_expected_date.execute(uow, litter_id)


@router.get("/{litter_id}/consistency", response_model=ConsistencyResponse)
async def consistency_endpoint(litter_id: UUID, uow=Depends(get_uow)):
    litter = await get_litter.execute(uow, litter_id)
    issues = [PhaseIssueResponse.model_validate(issue) for issue in consistency_issues(litter)]
    return ConsistencyResponse(phase=LitterPhase(litter.phase).value, issues=issues)


@router.get("/{litter_id}/fields", response_model=ApplicableFieldsResponse)
async def applicable_fields_endpoint(litter_id: UUID, uow=Depends(get_uow)):
    litter = await get_litter.execute(uow, litter_id)
    phase = LitterPhase(litter.phase)
    return ApplicableFieldsResponse(
        phase=phase.value,
        description=PHASE_DESCRIPTIONS[phase],
        fields=[to_camel(name) for name in applicable_fields(phase)],
    )


@router.post(
    "/{litter_id}/pregnancy-notes",
    response_model=PregnancyNoteResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_pregnancy_note_endpoint(
    litter_id: UUID, payload: PregnancyNoteCreate, uow=Depends(get_uow)
):
    input_data = add_pregnancy_note.AddPregnancyNoteInput(date=payload.date, note=payload.note)
    return await add_pregnancy_note.execute(uow, litter_id, input_data)


@router.delete("/{litter_id}/pregnancy-notes/{entry_id}", response_model=LitterResponse)
async def remove_pregnancy_note_endpoint(litter_id: UUID, entry_id: UUID, uow=Depends(get_uow)):
    return await remove_pregnancy_note.execute(uow, litter_id, entry_id)


@router.post(
    "/{litter_id}/mother-weights",
    response_model=MotherWeightResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_mother_weight_endpoint(
    litter_id: UUID, payload: MotherWeightCreate, uow=Depends(get_uow)
):
    input_data = add_mother_weight.AddMotherWeightInput(
        date=payload.date, weight=payload.weight, notes=payload.notes
    )
    return await add_mother_weight.execute(uow, litter_id, input_data)


@router.delete("/{litter_id}/mother-weights/{entry_id}", response_model=LitterResponse)
async def remove_mother_weight_endpoint(litter_id: UUID, entry_id: UUID, uow=Depends(get_uow)):
    return await remove_mother_weight.execute(uow, litter_id, entry_id)


@router.get("/{litter_id}/progress", response_model=PregnancyProgressResponse)
async def pregnancy_progress_endpoint(
    litter_id: UUID,
    today: DtDate = Depends(get_today),
    uow=Depends(get_uow),
):
    return await get_pregnancy_progress.execute(uow, litter_id, today)


@router.get("/{litter_id}/deadlines", response_model=list[DeadlineResponse])
async def list_deadlines_endpoint(
    litter_id: UUID,
    today: DtDate = Depends(get_today),
    uow=Depends(get_uow),
):
    deadlines = await list_deadlines.execute(uow, litter_id, today)
    return [
        DeadlineResponse(
            key=item.definition.key,
            task=item.definition.task,
            type=item.definition.type.value,
            category=item.definition.category,
            days_after_birth=item.definition.days_after_birth,
            due_on=item.due_on,
            days_remaining=item.days_remaining,
            status=item.status.value,
        )
        for item in deadlines
    ]
