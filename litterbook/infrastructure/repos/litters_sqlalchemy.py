from __future__ import annotations

from typing import Any, Mapping
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from litterbook.domain.models.litter import Litter
from litterbook.infrastructure.db.orm.litter import LitterORM
from litterbook.infrastructure.mappers.litters import (
    litter_fields_to_row,
    litter_from_row,
    litter_to_row,
)


def _row(orm: LitterORM) -> dict[str, Any]:
    return {column.key: getattr(orm, column.key) for column in LitterORM.__table__.columns}


class LittersSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: LitterORM) -> Litter:
        return litter_from_row(_row(orm))

    async def add(self, litter: Litter) -> Litter:
        orm = LitterORM(**litter_to_row(litter))
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, litter_id: UUID) -> Litter | None:
        stmt = select(LitterORM).where(LitterORM.id == litter_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, phase: str | None = None) -> list[Litter]:
        stmt = select(LitterORM)
        if phase:
            stmt = stmt.where(LitterORM.status == phase)
        stmt = stmt.order_by(LitterORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, litter: Litter) -> Litter:
        orm = await self.session.get(LitterORM, litter.id)
        if not orm:
            raise ValueError(f"Litter {litter.id} not found")
        for column, value in litter_to_row(litter).items():
            if column != "id":
                setattr(orm, column, value)
        await self.session.flush()
        return self._to_domain(orm)

    async def update_fields(self, litter_id: UUID, data: Mapping[str, Any]) -> Litter | None:
        orm = await self.session.get(LitterORM, litter_id)
        if not orm:
            return None
        for column, value in litter_fields_to_row(data).items():
            setattr(orm, column, value)
        await self.session.flush()
        return self._to_domain(orm)

    async def delete(self, litter_id: UUID) -> bool:
        orm = await self.session.get(LitterORM, litter_id)
        if not orm:
            return False
        await self.session.delete(orm)
        await self.session.flush()
        return True
