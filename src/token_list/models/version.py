# models/version.py
from functools import total_ordering
from typing import Tuple

from pydantic import ConfigDict, Field, StrictInt

from .base import WireModel

MAX_COMPONENT: int = 2**64 - 1


@total_ordering
class Version(WireModel):
    """Semantic version of a token list.

    On the wire a version is an object with three integer members,
    ``{"major": 1, "minor": 0, "patch": 2}``, never the dotted string form.
    Pre-release and build metadata are not supported.
    """

    model_config = ConfigDict(frozen=True)

    major: StrictInt = Field(ge=0, le=MAX_COMPONENT, description="Incremented when tokens are removed")
    minor: StrictInt = Field(ge=0, le=MAX_COMPONENT, description="Incremented when tokens are added")
    patch: StrictInt = Field(ge=0, le=MAX_COMPONENT, description="Incremented when token details change")

    @classmethod
    def parse(cls, value: str) -> "Version":
        """Create a Version from its dotted string form.

        This is a convenience for building versions in code; the dotted form
        is not accepted on the wire.

        Raises:
            ValueError: If the string is not three dot separated integers
        """
        parts = value.strip().split(".")
        if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
            raise ValueError(f"Invalid version string: {value!r}")

        major, minor, patch = (int(part) for part in parts)
        return cls(major=major, minor=minor, patch=patch)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
