"""Row mapping for the `litters` table.

Every domain attribute maps to exactly one column. Rows produced here always
carry every column key; missing values are written as None (SQL NULL).
"""

from __future__ import annotations

from typing import Any, Mapping

from litterbook.domain.models.litter import Litter
from litterbook.domain.value_objects.litter_phase import LitterPhase
from litterbook.infrastructure.mappers.dated_logs import (
    log_to_json,
    mother_weights_from_json,
    pregnancy_notes_from_json,
)

# domain attribute -> column name
LITTER_COLUMNS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "phase": "status",
    "mother_id": "mother_id",
    "father_id": "father_id",
    "external_father_name": "external_father_name",
    "external_father_pedigree_url": "external_father_pedigree_url",
    "mating_date": "mating_date",
    "mating_date_from": "mating_date_from",
    "mating_date_to": "mating_date_to",
    "expected_date": "expected_date",
    "birth_date": "birth_date",
    "completion_date": "completion_date",
    "reasoning": "reasoning",
    "inbreeding_coefficient": "inbreeding_coefficient",
    "blood_type_notes": "blood_type_notes",
    "alternative_combinations": "alternative_combinations",
    "mating_notes": "mating_notes",
    "pregnancy_notes": "pregnancy_notes",
    "pregnancy_notes_log": "pregnancy_notes_log",
    "mother_weight_log": "mother_weight_log",
    "kitten_count": "kitten_count",
    "birth_notes": "birth_notes",
    "nrr_registered": "nrr_registered",
    "evaluation": "evaluation",
    "buyers_info": "buyers_info",
    "notes": "notes",
    "created_at": "created_at",
    "updated_at": "updated_at",
    "version": "version",
}
ATTRIBUTES_BY_COLUMN: dict[str, str] = {column: attr for attr, column in LITTER_COLUMNS.items()}

_LOG_ATTRIBUTES = {"pregnancy_notes_log", "mother_weight_log"}


def _to_column_value(attr: str, value: Any) -> Any:
    if attr == "phase":
        return LitterPhase(value).value if value is not None else LitterPhase.PLANNED.value
    if attr in _LOG_ATTRIBUTES:
        return log_to_json(value) if value is not None else []
    if attr == "nrr_registered":
        return bool(value)
    return value


def litter_fields_to_row(data: Mapping[str, Any]) -> dict[str, Any]:
    """Translate a partial attribute set into column values."""
    row: dict[str, Any] = {}
    for attr, value in data.items():
        column = LITTER_COLUMNS.get(attr)
        if column is None:
            raise KeyError(f"Unknown litter attribute: {attr}")
        row[column] = _to_column_value(attr, value)
    return row


def litter_to_row(litter: Litter) -> dict[str, Any]:
    return litter_fields_to_row({attr: getattr(litter, attr) for attr in LITTER_COLUMNS})


def litter_from_row(row: Mapping[str, Any]) -> Litter:
    values = {attr: row.get(column) for column, attr in ATTRIBUTES_BY_COLUMN.items()}
    values["phase"] = LitterPhase(values["phase"] or LitterPhase.PLANNED.value)
    values["pregnancy_notes_log"] = pregnancy_notes_from_json(values["pregnancy_notes_log"])
    values["mother_weight_log"] = mother_weights_from_json(values["mother_weight_log"])
    values["nrr_registered"] = bool(values["nrr_registered"])
    values["version"] = values["version"] or 1
    for stamp in ("created_at", "updated_at"):
        if values[stamp] is None:
            values.pop(stamp)
    return Litter(**values)
