from enum import Enum
from typing import Optional


class ExtendedEnum(Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value_lower = value.strip().casefold()
            for member in cls:
                if member.name.casefold() == value_lower:
                    return member
        return None

    @classmethod
    def name_list(cls, string_method: str = "casefold"):
        return list(map(lambda c: getattr(c.name, string_method)(), cls))

    @classmethod
    def value_list(cls, string_method: str = "casefold"):
        return list(map(lambda c: getattr(c.value, string_method)(), cls))

    @classmethod
    def get_member(cls, value) -> Optional["ExtendedEnum"]:
        try:
            return cls(value)
        except ValueError:
            return None
