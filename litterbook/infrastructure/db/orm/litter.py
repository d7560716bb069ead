from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Boolean, Date, DateTime, Float, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from litterbook.infrastructure.db.base import Base


class LitterORM(Base):
    __tablename__ = "litters"
    __table_args__ = (
        Index("ix_litters_status_created", "status", "created_at"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(16), server_default="planned", nullable=False)

    mother_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    father_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    external_father_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    external_father_pedigree_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    mating_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    mating_date_from: Mapped[date | None] = mapped_column(Date, nullable=True)
    mating_date_to: Mapped[date | None] = mapped_column(Date, nullable=True)
    expected_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    completion_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    reasoning: Mapped[str | None] = mapped_column(Text, nullable=True)
    inbreeding_coefficient: Mapped[float | None] = mapped_column(Float, nullable=True)
    blood_type_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    alternative_combinations: Mapped[str | None] = mapped_column(Text, nullable=True)

    mating_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    pregnancy_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    pregnancy_notes_log: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    mother_weight_log: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    kitten_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    birth_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    nrr_registered: Mapped[bool] = mapped_column(Boolean, server_default="false", nullable=False)
    evaluation: Mapped[str | None] = mapped_column(Text, nullable=True)
    buyers_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
