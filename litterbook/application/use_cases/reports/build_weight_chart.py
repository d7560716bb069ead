from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.weight_chart import WeightChart, build_weight_chart


async def execute(uow: UnitOfWork, litter_id: UUID) -> tuple[str, WeightChart]:
    """Return the litter name and its blank weight chart."""
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    if litter.birth_date is None:
        raise ValidationError("A birth date is required to print the weight chart")
    kittens = await uow.kittens.list_by_litter(litter_id)
    return litter.name, build_weight_chart(litter.birth_date, kittens)
