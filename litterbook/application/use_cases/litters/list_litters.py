from __future__ import annotations

from dataclasses import dataclass, field

from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.domain.models.litter import Litter
from litterbook.domain.value_objects.litter_phase import LitterPhase


@dataclass(slots=True)
class GroupedLitters:
    planned: list[Litter] = field(default_factory=list)
    pending: list[Litter] = field(default_factory=list)
    active: list[Litter] = field(default_factory=list)
    completed: list[Litter] = field(default_factory=list)
    all: list[Litter] = field(default_factory=list)


async def execute(uow: UnitOfWork) -> GroupedLitters:
    litters = await uow.litters.list()
    grouped = GroupedLitters(all=list(litters))
    for litter in litters:
        getattr(grouped, LitterPhase(litter.phase).value).append(litter)
    return grouped
