"""Shared pytest fixtures for token list tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

TELCOIN_ADDRESS = "0x467bccd9d29f223bce8043b84e8c8b282827790f"
TELCOIN_LOGO = "https://raw.githubusercontent.com/telcoin/token-lists/master/assets/logo-telcoin-250x250.png"
MATIC_ADDRESS = "0xdf7837de1f2fa4631d716cf2502f8b230f1dcc32"


@pytest.fixture
def minimal_document() -> dict[str, Any]:
    """Token list with only the required fields, keys in wire order."""
    return {
        "name": "TELcoins",
        "timestamp": "2021-07-05T20:25:22+00:00",
        "version": {"major": 0, "minor": 1, "patch": 0},
        "tokens": [
            {
                "name": "Telcoin",
                "symbol": "TEL",
                "address": TELCOIN_ADDRESS,
                "chainId": 1,
                "decimals": 2,
            }
        ],
    }


@pytest.fixture
def full_document() -> dict[str, Any]:
    """Token list using every optional field."""
    return {
        "name": "TELcoins",
        "timestamp": "2021-07-05T20:25:22+00:00",
        "version": {"major": 0, "minor": 1, "patch": 0},
        "logoURI": TELCOIN_LOGO,
        "keywords": ["defi", "telcoin"],
        "tags": {
            "telcoin": {
                "name": "telcoin",
                "description": "Part of the Telcoin ecosystem.",
            }
        },
        "tokens": [
            {
                "name": "Telcoin",
                "symbol": "TEL",
                "address": TELCOIN_ADDRESS,
                "chainId": 1,
                "decimals": 2,
                "logoURI": TELCOIN_LOGO,
                "tags": ["telcoin"],
                "extensions": {
                    "is_mapped_to_matic": True,
                    "matic_address": MATIC_ADDRESS,
                    "matic_chain_id": 137,
                },
            }
        ],
    }


@pytest.fixture
def token_document(minimal_document: dict[str, Any]) -> dict[str, Any]:
    """A single token entry, safe to mutate."""
    return copy.deepcopy(minimal_document["tokens"][0])
