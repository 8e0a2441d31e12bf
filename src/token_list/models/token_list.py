# models/token_list.py
import re
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from pydantic import AnyUrl, AwareDatetime, Field, StrictStr, field_serializer, field_validator

from .base import WireModel
from .token import Tag, Token
from .version import Version

RFC3339_DATE_TIME = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})", re.ASCII
)


class TokenList(WireModel):
    """A list of token metadata conforming to the token list schema.

    See https://uniswap.org/tokenlist.schema.json. The order of ``tokens`` is
    kept exactly as given.

    Timestamps hold microsecond precision; finer fractional seconds are
    truncated on decode.

    Example:
        >>> token_list = TokenList.from_json(payload)
        >>> token_list.tokens[0].extensions["polygon_chain_id"].as_i64()
        137
    """

    OMIT_WHEN_EMPTY: ClassVar[Tuple[str, ...]] = ("logo_uri", "keywords", "tags", "tokens")

    # Required fields
    name: StrictStr = Field(description="The name of the token list")
    timestamp: AwareDatetime = Field(description="When this immutable version of the list was created")
    version: Version = Field(description="The version of the list, used in change detection")

    # Optional fields
    logo_uri: Optional[AnyUrl] = Field(default=None, alias="logoURI", description="A URI for the logo of the token list")
    keywords: List[StrictStr] = Field(default_factory=list, description="Keywords associated with the contents of the list")
    tags: Dict[str, Tag] = Field(default_factory=dict, description="A mapping of tag identifiers to their name and description")
    tokens: List[Token] = Field(default_factory=list, description="The list of tokens included in the list")

    @field_validator("timestamp", mode="before")
    @classmethod
    def require_date_time_string(cls, v: Any) -> Any:
        """Only accept RFC 3339 strings (or datetimes built in code), never epoch numbers."""
        if isinstance(v, datetime):
            return v
        if isinstance(v, str) and RFC3339_DATE_TIME.fullmatch(v):
            return v
        raise ValueError("Timestamp must be a date-time string with a UTC offset")

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        # isoformat keeps the given offset instead of rewriting UTC as "Z"
        return value.isoformat()

    @classmethod
    def json_schema(cls) -> Dict[str, Any]:
        """JSON Schema of the wire form, keyed by wire field names."""
        return cls.model_json_schema(by_alias=True, mode="validation")


def decode(data: Union[str, bytes]) -> TokenList:
    """Decode a token list from its JSON wire form."""
    return TokenList.from_json(data)


def encode(token_list: TokenList, indent: Optional[int] = None) -> str:
    """Encode a token list to its JSON wire form."""
    return token_list.to_json(indent=indent)
