"""Optional checks layered on top of the permissive litter record.

Nothing here is enforced by the model or by storage. Callers decide whether
to surface the issues as warnings or to reject a transition.
"""

from __future__ import annotations

from dataclasses import dataclass

from litterbook.domain.models.litter import Litter
from litterbook.domain.value_objects.litter_phase import LitterPhase, is_forward_transition


@dataclass(frozen=True, slots=True)
class PhaseIssue:
    code: str
    message: str


def consistency_issues(litter: Litter) -> list[PhaseIssue]:
    phase = LitterPhase(litter.phase)
    issues: list[PhaseIssue] = []
    if phase.is_at_least(LitterPhase.PENDING) and litter.effective_mating_date is None:
        issues.append(PhaseIssue("missing_mating_date", f"{phase.value} litter has no mating date"))
    if phase.is_at_least(LitterPhase.ACTIVE) and litter.birth_date is None:
        issues.append(PhaseIssue("missing_birth_date", f"{phase.value} litter has no birth date"))
    if phase is LitterPhase.COMPLETED and litter.completion_date is None:
        issues.append(PhaseIssue("missing_completion_date", "completed litter has no completion date"))
    if litter.birth_date is not None and not phase.is_at_least(LitterPhase.ACTIVE):
        issues.append(
            PhaseIssue("birth_date_before_active", f"birth date set while litter is {phase.value}")
        )
    if litter.completion_date is not None and phase is not LitterPhase.COMPLETED:
        issues.append(
            PhaseIssue(
                "completion_date_before_completed",
                f"completion date set while litter is {phase.value}",
            )
        )
    if litter.father_id is not None and litter.external_father_name:
        issues.append(
            PhaseIssue("ambiguous_father", "both a catalog father and an external father are set")
        )
    return issues


def check_transition(current: LitterPhase, target: LitterPhase, *, strict: bool) -> PhaseIssue | None:
    """Return an issue for a backward move when `strict` is on."""
    if strict and not is_forward_transition(current, target):
        return PhaseIssue(
            "backward_transition",
            f"cannot move litter from {LitterPhase(current).value} back to {LitterPhase(target).value}",
        )
    return None
