from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from litterbook.domain.models.kitten import Kitten
from litterbook.domain.models.litter import Litter
from litterbook.domain.value_objects.litter_phase import LitterPhase
from litterbook.infrastructure.mappers.dated_logs import pregnancy_notes_from_json
from litterbook.infrastructure.mappers.kittens import KITTEN_COLUMNS, kitten_from_row, kitten_to_row
from litterbook.infrastructure.mappers.litters import (
    LITTER_COLUMNS,
    litter_fields_to_row,
    litter_from_row,
    litter_to_row,
)


def test_litter_row_always_carries_every_column():
    row = litter_to_row(Litter.create(name="Nulls"))
    assert set(row) == set(LITTER_COLUMNS.values())
    assert row["status"] == "planned"
    assert row["birth_date"] is None
    assert row["pregnancy_notes_log"] == []


def test_litter_nulls_round_trip():
    litter = Litter.create(name="Nulls")
    restored = litter_from_row(litter_to_row(litter))
    for attr in LITTER_COLUMNS:
        if attr in ("pregnancy_notes_log", "mother_weight_log"):
            continue
        assert getattr(restored, attr) == getattr(litter, attr), attr


def test_litter_logs_round_trip_through_json():
    litter = Litter.create(name="Logs")
    litter.set_phase(LitterPhase.PENDING)
    litter.add_pregnancy_note(date(2024, 1, 20), "Nesting")
    litter.add_mother_weight(date(2024, 1, 21), 4.1, notes=None)

    row = litter_to_row(litter)
    assert row["status"] == "pending"
    assert row["mother_weight_log"][0]["date"] == "2024-01-21"

    restored = litter_from_row(row)
    assert restored.pregnancy_notes_log == litter.pregnancy_notes_log
    assert restored.mother_weight_log == litter.mother_weight_log
    assert restored.phase is LitterPhase.PENDING


def test_partial_row_rejects_unknown_attributes():
    assert litter_fields_to_row({"phase": "active"}) == {"status": "active"}
    with pytest.raises(KeyError):
        litter_fields_to_row({"status": "active"})


def test_missing_or_malformed_logs_read_as_empty():
    assert len(pregnancy_notes_from_json(None)) == 0
    assert len(pregnancy_notes_from_json({"date": "2024-01-01"})) == 0
    log = pregnancy_notes_from_json([{"date": "2024-01-01T00:00:00Z", "note": "x"}, "junk"])
    assert len(log) == 1
    assert log.latest().date == date(2024, 1, 1)
    assert log.latest().id is not None


def test_kitten_row_round_trip():
    kitten = Kitten.create(litter_id=uuid4(), name="Milo", birth_weight=98.5)
    kitten.record_weight(date(2024, 3, 2), 104)
    row = kitten_to_row(kitten)
    assert set(row) == set(KITTEN_COLUMNS.values())
    restored = kitten_from_row(row)
    assert restored.weight_log == kitten.weight_log
    assert restored.roster_fields() == kitten.roster_fields()
    assert restored.gender is None
