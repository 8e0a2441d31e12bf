from typing import Dict, Optional, Union
import asyncio
import aiohttp
from yarl import URL

from token_list.config import DEFAULT_HEADERS
from token_list.errors import TransportError
from token_list.models.token_list import TokenList
from ..utils.logging import get_logger

logger = get_logger(__name__)


class TokenListService:
    """Fetches token lists over HTTP with aiohttp.

    Each fetch is a single GET with no retries. The service either owns its
    session (created on first use, closed on exit) or borrows one from the
    caller, which then stays open.
    """

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the service.

        Args:
            session: Optional session to borrow instead of creating one
            headers: Extra request headers, merged over the defaults
        """
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        """Context manager entry."""
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, uri: Union[str, URL]) -> TokenList:
        """
        Fetch and decode a token list.

        Args:
            uri: Location of the token list document

        Raises:
            TransportError: If the request fails or the status is not 2xx
            DecodeError: If the body is not a valid token list
        """
        if not self.session or self.session.closed:
            self.session = aiohttp.ClientSession()
            self._owns_session = True

        uri = str(uri)
        logger.debug(f"Fetching token list from {uri}")

        try:
            async with self.session.get(uri, headers=self.headers) as response:
                logger.debug(f"Received HTTP {response.status} from {uri}")
                if not 200 <= response.status < 300:
                    raise TransportError(uri, status=response.status, reason=response.reason)
                body = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(uri, reason=str(e) or type(e).__name__) from e

        return TokenList.from_json(body)


async def fetch_token_list(
    uri: Union[str, URL], session: Optional[aiohttp.ClientSession] = None
) -> TokenList:
    """
    Fetch a token list with a single GET request.

    Args:
        uri: Location of the token list document
        session: Optional aiohttp session to reuse; it is left open
    """
    async with TokenListService(session=session) as service:
        return await service.fetch(uri)
