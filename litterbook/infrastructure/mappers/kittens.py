from __future__ import annotations

from typing import Any, Mapping

from litterbook.domain.models.kitten import Kitten
from litterbook.domain.value_objects.kitten_status import KittenStatus
from litterbook.infrastructure.mappers.dated_logs import log_to_json, weights_from_json

KITTEN_COLUMNS: dict[str, str] = {
    "id": "id",
    "litter_id": "litter_id",
    "name": "name",
    "gender": "gender",
    "color": "color",
    "ems_code": "ems_code",
    "status": "status",
    "reserved_by": "reserved_by",
    "notes": "notes",
    "birth_weight": "birth_weight",
    "complication_type": "complication_type",
    "weight_log": "weight_log",
    "created_at": "created_at",
    "updated_at": "updated_at",
}


def kitten_fields_to_row(data: Mapping[str, Any]) -> dict[str, Any]:
    row: dict[str, Any] = {}
    for attr, value in data.items():
        column = KITTEN_COLUMNS.get(attr)
        if column is None:
            raise KeyError(f"Unknown kitten attribute: {attr}")
        if attr == "weight_log":
            value = log_to_json(value) if value is not None else []
        elif attr == "status":
            value = value or KittenStatus.AVAILABLE.value
        row[column] = value
    return row


def kitten_to_row(kitten: Kitten) -> dict[str, Any]:
    return kitten_fields_to_row({attr: getattr(kitten, attr) for attr in KITTEN_COLUMNS})


def kitten_from_row(row: Mapping[str, Any]) -> Kitten:
    values = {attr: row.get(column) for attr, column in KITTEN_COLUMNS.items()}
    values["status"] = values["status"] or KittenStatus.AVAILABLE.value
    values["weight_log"] = weights_from_json(values["weight_log"])
    for stamp in ("created_at", "updated_at"):
        if values[stamp] is None:
            values.pop(stamp)
    return Kitten(**values)
