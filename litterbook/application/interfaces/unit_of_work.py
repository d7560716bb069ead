from __future__ import annotations

from typing import Protocol

from litterbook.application.interfaces.repositories.kittens import KittensRepository
from litterbook.application.interfaces.repositories.litters import LittersRepository


class UnitOfWork(Protocol):
    litters: LittersRepository
    kittens: KittensRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
