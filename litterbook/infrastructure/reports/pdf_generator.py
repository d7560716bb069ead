from __future__ import annotations

import io
import logging

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from litterbook.domain.models.weight_chart import (
    CHART_DAYS,
    LEADING_COLUMNS,
    SLOT_LABELS,
    SLOTS_PER_DAY,
    WeightChart,
)

logger = logging.getLogger(__name__)

DAY_COLUMN_WIDTH = 24 * mm
DATE_COLUMN_WIDTH = 14 * mm


class PDFGenerator:
    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Setup custom paragraph styles"""
        self.styles.add(
            ParagraphStyle(
                name="ChartTitle",
                parent=self.styles["Heading1"],
                fontSize=14,
                spaceAfter=4,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="ChartInfo",
                parent=self.styles["Normal"],
                fontSize=9,
                textColor=colors.HexColor("#555555"),
                spaceAfter=8,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="KittenName",
                parent=self.styles["Normal"],
                fontName="Helvetica-Bold",
                fontSize=8,
                leading=9,
                alignment=1,  # Center
            )
        )

    def create_header(self, litter_name: str, chart: WeightChart) -> list:
        birth = chart.birth_date.strftime("%d %B %Y")
        return [
            Paragraph(f"Weight chart (grams) - {litter_name}", self.styles["ChartTitle"]),
            Paragraph(
                f"Birth date: {birth} | Period: Day 0–{CHART_DAYS} (4 weeks)",
                self.styles["ChartInfo"],
            ),
            Spacer(1, 4),
        ]

    def create_weight_grid(self, chart: WeightChart, available_width: float) -> Table:
        """Two heading rows (kitten names, slot labels) followed by one row per day."""
        kitten_count = len(chart.kitten_labels)
        name_row: list = list(LEADING_COLUMNS)
        slot_row: list = ["", ""]
        for label in chart.kitten_labels:
            name_row.append(Paragraph(label, self.styles["KittenName"]))
            name_row.extend([""] * (SLOTS_PER_DAY - 1))
            slot_row.extend(SLOT_LABELS)

        table_data = [name_row, slot_row]
        table_data.extend(row.as_list() for row in chart.rows)

        slot_width = (available_width - DAY_COLUMN_WIDTH - DATE_COLUMN_WIDTH) / (
            SLOTS_PER_DAY * kitten_count
        )
        col_widths = [DAY_COLUMN_WIDTH, DATE_COLUMN_WIDTH] + [slot_width] * (
            SLOTS_PER_DAY * kitten_count
        )

        commands = [
            ("SPAN", (0, 0), (0, 1)),
            ("SPAN", (1, 0), (1, 1)),
            ("BACKGROUND", (0, 0), (-1, 1), colors.HexColor("#f0f0f0")),
            ("BACKGROUND", (0, 2), (0, -1), colors.HexColor("#e8e8e8")),
            ("FONTNAME", (0, 0), (-1, 1), "Helvetica-Bold"),
            ("FONTNAME", (0, 2), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 7),
            ("FONTSIZE", (2, 1), (-1, 1), 6),
            ("TEXTCOLOR", (2, 1), (-1, 1), colors.HexColor("#666666")),
            ("ALIGN", (1, 0), (-1, -1), "CENTER"),
            ("ALIGN", (0, 2), (0, -1), "LEFT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#999999")),
            ("TOPPADDING", (0, 0), (-1, -1), 1),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
        ]
        for index in range(kitten_count):
            first = len(LEADING_COLUMNS) + index * SLOTS_PER_DAY
            commands.append(("SPAN", (first, 0), (first + SLOTS_PER_DAY - 1, 0)))
            if index > 0:
                # Thicker rule between kitten groups
                commands.append(
                    ("LINEBEFORE", (first, 0), (first, -1), 1.5, colors.HexColor("#333333"))
                )

        table = Table(table_data, colWidths=col_widths, repeatRows=2)
        table.setStyle(TableStyle(commands))
        return table

    def generate_weight_chart(self, litter_name: str, chart: WeightChart) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=landscape(A4),
            leftMargin=8 * mm,
            rightMargin=8 * mm,
            topMargin=8 * mm,
            bottomMargin=8 * mm,
            title=f"Weight chart - {litter_name}",
        )
        elements = self.create_header(litter_name, chart)
        elements.append(self.create_weight_grid(chart, doc.width))
        doc.build(elements)
        pdf = buffer.getvalue()
        buffer.close()
        logger.debug(
            "Weight chart rendered for %s: %d kittens, %d bytes",
            litter_name,
            len(chart.kitten_labels),
            len(pdf),
        )
        return pdf
