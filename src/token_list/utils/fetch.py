# utils/fetch.py
from typing import Dict, Optional
import requests

from token_list.config import DEFAULT_HEADERS
from token_list.errors import TransportError
from token_list.models.token_list import TokenList
from .logging import get_logger

logger = get_logger(__name__)


class TokenListAPI:
    """Blocking token list fetcher built on requests."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.headers = {**DEFAULT_HEADERS, **(headers or {})}

    def fetch(self, uri: str) -> TokenList:
        """
        Fetch and decode a token list.

        Args:
            uri: Location of the token list document

        Raises:
            TransportError: If the request fails or the status is not 2xx
            DecodeError: If the body is not a valid token list
        """
        logger.debug(f"Fetching token list from {uri}")

        try:
            response = self.session.get(uri, headers=self.headers)
        except requests.RequestException as e:
            raise TransportError(uri, reason=str(e) or type(e).__name__) from e

        logger.debug(f"Received HTTP {response.status_code} from {uri}")
        if not 200 <= response.status_code < 300:
            raise TransportError(uri, status=response.status_code, reason=response.reason)

        return TokenList.from_json(response.content)

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def fetch_token_list_blocking(uri: str, session: Optional[requests.Session] = None) -> TokenList:
    """Fetch a token list with a single blocking GET request."""
    with TokenListAPI(session=session) as api:
        return api.fetch(uri)
