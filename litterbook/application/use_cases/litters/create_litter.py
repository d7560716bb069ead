from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from litterbook.application.errors import ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.litter import Litter


@dataclass(slots=True)
class CreateLitterInput:
    name: str
    mother_id: UUID | None = None
    father_id: UUID | None = None
    external_father_name: str | None = None
    external_father_pedigree_url: str | None = None
    reasoning: str | None = None
    inbreeding_coefficient: float | None = None
    blood_type_notes: str | None = None
    alternative_combinations: str | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, payload: CreateLitterInput) -> Litter:
    name = (payload.name or "").strip()
    if not name:
        raise ValidationError("Litter name is required")
    if payload.inbreeding_coefficient is not None and not 0 <= payload.inbreeding_coefficient <= 100:
        raise ValidationError("inbreeding_coefficient must be between 0 and 100")
    litter = Litter.create(
        name=name,
        mother_id=payload.mother_id,
        father_id=payload.father_id,
        external_father_name=payload.external_father_name,
        external_father_pedigree_url=payload.external_father_pedigree_url,
        reasoning=payload.reasoning,
        inbreeding_coefficient=payload.inbreeding_coefficient,
        blood_type_notes=payload.blood_type_notes,
        alternative_combinations=payload.alternative_combinations,
        notes=payload.notes,
    )
    created = await uow.litters.add(litter)
    await uow.commit()
    return created
