from __future__ import annotations

import re
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from litterbook.application.use_cases.reports import build_weight_chart
from litterbook.infrastructure.reports.pdf_generator import PDFGenerator
from litterbook.interfaces.http.deps import get_pdf_generator, get_uow
from litterbook.interfaces.http.schemas.reports import WeightChartResponse, WeightChartRowResponse

router = APIRouter(prefix="/litters", tags=["reports"])


def _filename(litter_name: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", litter_name).strip("-").lower() or "litter"
    return f"weight-chart-{slug}.pdf"


@router.get("/{litter_id}/weight-chart", response_model=WeightChartResponse)
async def weight_chart_endpoint(litter_id: UUID, uow=Depends(get_uow)):
    litter_name, chart = await build_weight_chart.execute(uow, litter_id)
    return WeightChartResponse(
        litter_name=litter_name,
        birth_date=chart.birth_date,
        kitten_labels=chart.kitten_labels,
        columns=chart.columns,
        rows=[
            WeightChartRowResponse(
                day=row.day,
                date=row.date,
                day_label=row.day_label,
                date_label=row.date_label,
                cells=list(row.cells),
            )
            for row in chart.rows
        ],
    )


@router.get("/{litter_id}/weight-chart.pdf")
async def weight_chart_pdf_endpoint(
    litter_id: UUID,
    uow=Depends(get_uow),
    pdf_generator: PDFGenerator = Depends(get_pdf_generator),
):
    litter_name, chart = await build_weight_chart.execute(uow, litter_id)
    pdf = pdf_generator.generate_weight_chart(litter_name, chart)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{_filename(litter_name)}"'},
    )
