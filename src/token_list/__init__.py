"""Ethereum token list standard.

Typed models for https://tokenlists.org documents and their JSON wire form.
HTTP fetching lives in ``token_list.services.fetch`` (aiohttp) and
``token_list.utils.fetch`` (requests) so the core never imports a client.
"""

from token_list.config import PACKAGE_VERSION as __version__
from token_list.errors import DecodeError, TokenListError, TransportError
from token_list.models.extension import ExtensionKind, ExtensionValue
from token_list.models.token import Tag, Token
from token_list.models.token_list import TokenList, decode, encode
from token_list.models.version import Version
from token_list.utils.logging import configure_logging, disable_logging, get_logger

__all__ = [
    "__version__",
    "DecodeError",
    "ExtensionKind",
    "ExtensionValue",
    "Tag",
    "Token",
    "TokenList",
    "TokenListError",
    "TransportError",
    "Version",
    "configure_logging",
    "decode",
    "disable_logging",
    "encode",
    "get_logger",
]
