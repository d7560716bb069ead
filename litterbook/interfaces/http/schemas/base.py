from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def log_as_list(value):
    """Dated logs are iterable containers; responses want plain lists."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return value
    return list(value)
