"""Character gender values.

The API reports gender as free-form strings ("Male", "Female",
"Genderless", "unknown"). Normalizing them here keeps the adapters and the
CLI agreeing on a single closed set of values.
"""

from __future__ import annotations

from enum import Enum


class CharacterGender(str, Enum):
    """Closed set of genders a character can have."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    GENDERLESS = "GENDERLESS"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: object) -> "CharacterGender":
        """Map an API string to a gender, falling back to ``UNKNOWN``."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN

    def label(self) -> str:
        """Human readable label for tables and panels."""

        return self.value.capitalize()
