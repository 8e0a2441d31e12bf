# models/token.py
from typing import ClassVar, Dict, List, Optional, Tuple

from pydantic import AnyUrl, Field, StrictInt, StrictStr

from .base import WireModel
from .extension import ExtensionValue

MAX_CHAIN_ID: int = 2**32 - 1
MAX_DECIMALS: int = 2**16 - 1


class Tag(WireModel):
    """Definition of a tag that tokens reference by its identifier"""
    name: StrictStr = Field(description="The name of the tag")
    description: StrictStr = Field(description="A user-friendly description of the tag")


class Token(WireModel):
    """Metadata for a single token in a token list.

    Addresses, symbols and tag references are carried as given; nothing here
    checks checksums or that referenced tags exist in the list.
    """

    OMIT_WHEN_EMPTY: ClassVar[Tuple[str, ...]] = ("logo_uri", "tags", "extensions")

    # Required fields
    name: StrictStr = Field(description="The name of the token")
    symbol: StrictStr = Field(description="The symbol for the token")
    address: StrictStr = Field(description="The checksummed address of the token on the specified chain ID")
    chain_id: StrictInt = Field(ge=0, le=MAX_CHAIN_ID, description="The chain ID of the network where this token is deployed")
    decimals: StrictInt = Field(ge=0, le=MAX_DECIMALS, description="The number of decimals for the token balance")

    # Optional fields
    logo_uri: Optional[AnyUrl] = Field(default=None, alias="logoURI", description="A URI to the token logo asset")
    tags: List[StrictStr] = Field(default_factory=list, description="Identifiers of list level tags associated with the token")
    extensions: Dict[str, Optional[ExtensionValue]] = Field(
        default_factory=dict, description="Arbitrary or vendor-specific token metadata"
    )
