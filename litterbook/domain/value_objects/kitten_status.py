from __future__ import annotations

from enum import Enum


class KittenStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"
    KEEPING = "keeping"


class KittenGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class KittenComplication(str, Enum):
    STILLBORN = "stillborn"
    DECEASED = "deceased"
    COMPLICATIONS = "complications"
