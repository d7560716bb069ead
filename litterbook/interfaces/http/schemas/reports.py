from __future__ import annotations

from datetime import date as DtDate

from litterbook.interfaces.http.schemas.base import CamelModel


class WeightChartRowResponse(CamelModel):
    day: int
    date: DtDate
    day_label: str
    date_label: str
    cells: list[str]


class WeightChartResponse(CamelModel):
    litter_name: str
    birth_date: DtDate
    kitten_labels: list[str]
    columns: list[str]
    rows: list[WeightChartRowResponse]
