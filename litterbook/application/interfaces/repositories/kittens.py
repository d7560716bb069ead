from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol
from uuid import UUID

from litterbook.domain.models.kitten import Kitten


class KittensRepository(Protocol):
    async def list_by_litter(self, litter_id: UUID) -> list[Kitten]: ...

    async def get(self, kitten_id: UUID) -> Kitten | None: ...

    async def add(self, kitten: Kitten) -> Kitten: ...

    async def update(self, kitten: Kitten) -> Kitten: ...

    async def update_fields(self, kitten_id: UUID, data: Mapping[str, Any]) -> Kitten | None: ...

    async def delete_many(self, kitten_ids: Iterable[UUID]) -> int: ...
