# models/extension.py
from enum import Enum
from typing import Any, Optional, Union

from pydantic import ConfigDict, RootModel, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator

MIN_INTEGER: int = -(2**63)
MAX_INTEGER: int = 2**63 - 1


class ExtensionKind(str, Enum):
    """Variants an extension value can take"""
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"


class ExtensionValue(RootModel[Union[StrictBool, StrictInt, StrictFloat, StrictStr]]):
    """Value of a vendor specific token extension.

    The wire format carries no type tag, so the variant is inferred from the
    JSON value itself:
        - strings become STRING
        - booleans become BOOLEAN
        - numbers without a fractional part that fit in a signed 64-bit
          integer become INTEGER, every other number becomes FLOAT

    Arrays and objects are rejected. A JSON null is not an ExtensionValue;
    it is stored as None in the extensions mapping.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root", mode="before")
    @classmethod
    def classify(cls, v: Any) -> Any:
        """Resolve the raw JSON value to one of the supported variants."""
        if isinstance(v, (bool, str, float)):
            return v
        if isinstance(v, int):
            if MIN_INTEGER <= v <= MAX_INTEGER:
                return v
            try:
                return float(v)
            except OverflowError:
                raise ValueError("Number is out of range for a 64-bit float")
        raise ValueError(
            f"Extension value must be a string, number or boolean, got {type(v).__name__}"
        )

    @property
    def kind(self) -> ExtensionKind:
        if isinstance(self.root, bool):
            return ExtensionKind.BOOLEAN
        if isinstance(self.root, int):
            return ExtensionKind.INTEGER
        if isinstance(self.root, float):
            return ExtensionKind.FLOAT
        return ExtensionKind.STRING

    @property
    def value(self) -> Union[bool, int, float, str]:
        return self.root

    def as_str(self) -> Optional[str]:
        return self.root if self.kind is ExtensionKind.STRING else None

    def as_bool(self) -> Optional[bool]:
        return self.root if self.kind is ExtensionKind.BOOLEAN else None

    def as_i64(self) -> Optional[int]:
        return self.root if self.kind is ExtensionKind.INTEGER else None

    def as_f64(self) -> Optional[float]:
        return self.root if self.kind is ExtensionKind.FLOAT else None

    def __eq__(self, other: object) -> bool:
        # 1 == 1.0 == True in Python, the variants must still differ
        if not isinstance(other, ExtensionValue):
            return NotImplemented
        return self.kind is other.kind and self.root == other.root

    def __hash__(self) -> int:
        return hash((self.kind, self.root))

    def __str__(self) -> str:
        return str(self.root)
