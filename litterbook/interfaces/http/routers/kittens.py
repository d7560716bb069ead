from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from litterbook.application.use_cases.kittens import (
    list_kittens,
    record_weights,
    remove_weight,
    replace_roster,
    update_birth_weights,
    update_kitten,
)
from litterbook.domain.models.roster import KittenDraft
from litterbook.interfaces.http.deps import get_uow
from litterbook.interfaces.http.schemas.kittens import (
    BirthWeightsUpdate,
    DailyWeightsUpdate,
    KittenResponse,
    KittenUpdate,
    RosterReplace,
)

router = APIRouter(tags=["kittens"])


@router.get("/litters/{litter_id}/kittens", response_model=list[KittenResponse])
async def list_kittens_endpoint(litter_id: UUID, uow=Depends(get_uow)):
    return await list_kittens.execute(uow, litter_id)


@router.put("/litters/{litter_id}/kittens", response_model=list[KittenResponse])
async def replace_roster_endpoint(litter_id: UUID, payload: RosterReplace, uow=Depends(get_uow)):
    """Full replace: kittens left out of the body are deleted."""
    drafts = [KittenDraft(**item.model_dump()) for item in payload.kittens]
    return await replace_roster.execute(uow, litter_id, drafts)


@router.put("/litters/{litter_id}/kittens/birth-weights", response_model=list[KittenResponse])
async def update_birth_weights_endpoint(
    litter_id: UUID, payload: BirthWeightsUpdate, uow=Depends(get_uow)
):
    return await update_birth_weights.execute(uow, litter_id, payload.weights)


@router.put("/litters/{litter_id}/kittens/weights", response_model=list[KittenResponse])
async def record_weights_endpoint(
    litter_id: UUID, payload: DailyWeightsUpdate, uow=Depends(get_uow)
):
    return await record_weights.execute(uow, litter_id, payload.date, payload.weights)


@router.patch("/kittens/{kitten_id}", response_model=KittenResponse)
async def update_kitten_endpoint(kitten_id: UUID, payload: KittenUpdate, uow=Depends(get_uow)):
    return await update_kitten.execute(uow, kitten_id, payload.model_dump(exclude_unset=True))


@router.delete("/kittens/{kitten_id}/weights/{entry_id}", response_model=KittenResponse)
async def remove_weight_endpoint(kitten_id: UUID, entry_id: UUID, uow=Depends(get_uow)):
    return await remove_weight.execute(uow, kitten_id, entry_id)
