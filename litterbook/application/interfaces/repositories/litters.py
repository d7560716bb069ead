from __future__ import annotations

from typing import Any, Mapping, Protocol
from uuid import UUID

from litterbook.domain.models.litter import Litter


class LittersRepository(Protocol):
    async def add(self, litter: Litter) -> Litter: ...

    async def get(self, litter_id: UUID) -> Litter | None: ...

    async def list(self, phase: str | None = None) -> list[Litter]: ...

    async def update(self, litter: Litter) -> Litter: ...

    async def update_fields(self, litter_id: UUID, data: Mapping[str, Any]) -> Litter | None: ...

    async def delete(self, litter_id: UUID) -> bool: ...
