from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace

import pytest


class StubLittersRepo:
    def __init__(self) -> None:
        self.items = {}
        self.written_fields: list[set[str]] = []

    async def add(self, litter):
        self.items[litter.id] = litter
        return litter

    async def get(self, litter_id):
        litter = self.items.get(litter_id)
        return replace(litter) if litter else None

    async def list(self, phase=None):
        return [
            litter for litter in self.items.values() if phase is None or litter.phase == phase
        ]

    async def update(self, litter):
        self.items[litter.id] = litter
        return litter

    async def update_fields(self, litter_id, data):
        stored = self.items.get(litter_id)
        if stored is None:
            return None
        self.written_fields.append(set(data))
        for name, value in data.items():
            setattr(stored, name, value)
        return stored

    async def delete(self, litter_id):
        return self.items.pop(litter_id, None) is not None


class StubKittensRepo:
    def __init__(self) -> None:
        self.items = {}
        self.deleted: list = []
        self.fail_on_add = False

    async def list_by_litter(self, litter_id):
        return [replace(k) for k in self.items.values() if k.litter_id == litter_id]

    async def get(self, kitten_id):
        kitten = self.items.get(kitten_id)
        return replace(kitten) if kitten else None

    async def add(self, kitten):
        if self.fail_on_add:
            raise RuntimeError("store unavailable")
        self.items[kitten.id] = kitten
        return kitten

    async def update(self, kitten):
        self.items[kitten.id] = kitten
        return kitten

    async def update_fields(self, kitten_id, data):
        stored = self.items.get(kitten_id)
        if stored is None:
            return None
        for name, value in data.items():
            setattr(stored, name, value)
        return stored

    async def delete_many(self, kitten_ids):
        count = 0
        for kitten_id in kitten_ids:
            if self.items.pop(kitten_id, None) is not None:
                self.deleted.append(kitten_id)
                count += 1
        return count


def make_uow(litters=None, kittens=None):
    state = SimpleNamespace(commits=0, rollbacks=0)

    async def commit():
        state.commits += 1

    async def rollback():
        state.rollbacks += 1

    return SimpleNamespace(
        litters=litters or StubLittersRepo(),
        kittens=kittens or StubKittensRepo(),
        commit=commit,
        rollback=rollback,
        state=state,
    )


@pytest.fixture()
def uow():
    return make_uow()
