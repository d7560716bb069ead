from __future__ import annotations

from uuid import UUID

from litterbook.application.errors import NotFound, ValidationError
from litterbook.application.interfaces.unit_of_work import UnitOfWork
from litterbook.application.use_cases.litters.update_litter import persist_fields
from litterbook.domain.models.litter import Litter
from litterbook.domain.policies.phase_consistency import check_transition
from litterbook.domain.value_objects.litter_phase import LitterPhase


async def execute(
    uow: UnitOfWork,
    litter_id: UUID,
    phase: str,
    *,
    strict: bool = False,
) -> Litter:
    """Set the caller-declared phase.

    Any phase is accepted unless `strict` is on, in which case moving back
    to an earlier phase is rejected.
    """
    valid = {p.value for p in LitterPhase}
    if phase not in valid:
        raise ValidationError(f"Invalid phase. Must be one of: {', '.join(sorted(valid))}")
    litter = await uow.litters.get(litter_id)
    if not litter:
        raise NotFound(f"Litter {litter_id} not found")
    issue = check_transition(LitterPhase(litter.phase), LitterPhase(phase), strict=strict)
    if issue:
        raise ValidationError(issue.message, details={"code": issue.code})
    litter.set_phase(phase)
    updated = await persist_fields(uow, litter, ["phase"])
    await uow.commit()
    return updated
