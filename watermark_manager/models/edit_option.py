from __future__ import annotations
from enum import Enum
from typing import FrozenSet, Iterable, List

from ..exceptions import ValidationError


class EditOption(Enum):
    """
    Pixel edits a user can pick. Values are the labels shown in the session.
    """
    BRIGHTEN = "make image brighter"
    CONTRAST = "increase contrast"
    GRAYSCALE = "make image b&w"
    INVERT = "invert image"
    NONE = "do nothing"

    @property
    def short_name(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: "EditOption | str") -> "EditOption":
        """Accept a member, its label or its short name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for option in cls:
            if key in (option.value, option.short_name):
                return option
        raise ValidationError(f"Unknown edit option: {value!r}")

    @classmethod
    def parse_many(cls, values: Iterable["EditOption | str"]) -> FrozenSet["EditOption"]:
        return frozenset(cls.parse(v) for v in values)


# Edits are always applied in this order, whatever order they were picked in.
CANONICAL_ORDER = (
    EditOption.BRIGHTEN,
    EditOption.CONTRAST,
    EditOption.GRAYSCALE,
    EditOption.INVERT,
)


def in_canonical_order(options: Iterable[EditOption]) -> List[EditOption]:
    """Selected edits sorted canonically; NONE is dropped."""
    selected = set(options)
    return [option for option in CANONICAL_ORDER if option in selected]
