from __future__ import annotations

from typing import Any, Iterable, Mapping
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from litterbook.application.errors import ConflictError
from litterbook.domain.models.kitten import Kitten
from litterbook.infrastructure.db.orm.kitten import KittenORM
from litterbook.infrastructure.mappers.kittens import (
    kitten_fields_to_row,
    kitten_from_row,
    kitten_to_row,
)


def _row(orm: KittenORM) -> dict[str, Any]:
    return {column.key: getattr(orm, column.key) for column in KittenORM.__table__.columns}


class KittensSQLAlchemyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: KittenORM) -> Kitten:
        return kitten_from_row(_row(orm))

    async def list_by_litter(self, litter_id: UUID) -> list[Kitten]:
        stmt = (
            select(KittenORM)
            .where(KittenORM.litter_id == litter_id)
            .order_by(KittenORM.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def get(self, kitten_id: UUID) -> Kitten | None:
        orm = await self.session.get(KittenORM, kitten_id)
        return self._to_domain(orm) if orm else None

    async def add(self, kitten: Kitten) -> Kitten:
        orm = KittenORM(**kitten_to_row(kitten))
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Kitten could not be stored for this litter") from exc
        return self._to_domain(orm)

    async def update(self, kitten: Kitten) -> Kitten:
        orm = await self.session.get(KittenORM, kitten.id)
        if not orm:
            raise ValueError(f"Kitten {kitten.id} not found")
        for column, value in kitten_to_row(kitten).items():
            if column not in ("id", "litter_id", "created_at"):
                setattr(orm, column, value)
        await self.session.flush()
        return self._to_domain(orm)

    async def update_fields(self, kitten_id: UUID, data: Mapping[str, Any]) -> Kitten | None:
        orm = await self.session.get(KittenORM, kitten_id)
        if not orm:
            return None
        for column, value in kitten_fields_to_row(data).items():
            setattr(orm, column, value)
        await self.session.flush()
        return self._to_domain(orm)

    async def delete_many(self, kitten_ids: Iterable[UUID]) -> int:
        ids = list(kitten_ids)
        if not ids:
            return 0
        stmt = delete(KittenORM).where(KittenORM.id.in_(ids))
        result = await self.session.execute(stmt, execution_options={"synchronize_session": False})
        return int(result.rowcount or 0)
