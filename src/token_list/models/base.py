# models/base.py
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
)

from token_list.errors import DecodeError


def to_camel(name: str) -> str:
    return "".join(word.capitalize() if i else word for i, word in enumerate(name.split("_")))


class WireModel(BaseModel):
    """Base model for all token list entities.

    Attributes use snake_case in Python and lowerCamelCase on the wire. Fields
    listed in ``OMIT_WHEN_EMPTY`` are left out of the encoded object when they
    are None or an empty collection.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )

    OMIT_WHEN_EMPTY: ClassVar[Tuple[str, ...]] = ()

    @model_serializer(mode="wrap")
    def omit_empty_fields(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for name in self.OMIT_WHEN_EMPTY:
            field = type(self).model_fields[name]
            for key in (name, field.alias):
                if key in data and data[key] in (None, [], {}):
                    del data[key]
        return data

    @classmethod
    def from_json(cls, data: Union[str, bytes]):
        """Decode an instance from its JSON wire form.

        Raises:
            DecodeError: If the JSON is malformed or does not match the schema
        """
        try:
            return cls.model_validate_json(data, by_alias=True, by_name=False)
        except ValidationError as e:
            raise DecodeError.from_validation_error(e) from e

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Decode an instance from an already parsed JSON tree."""
        try:
            return cls.model_validate(data, by_alias=True, by_name=False)
        except ValidationError as e:
            raise DecodeError.from_validation_error(e) from e

    def to_dict(self) -> Dict[str, Any]:
        """Encode to a JSON compatible tree using wire field names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """Encode to the JSON wire form."""
        return self.model_dump_json(by_alias=True, indent=indent)
