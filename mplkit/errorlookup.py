"""Look up a hex error code across every known program's error table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .metadata_errors import METADATA_ERROR
from .program_errors import (
    ANCHOR_ERROR,
    AUCTION_HOUSE_ERROR,
    AUCTIONEER_ERROR,
    CANDY_ERROR,
)


@dataclass(frozen=True)
class FoundError:
    """An error message together with the program domain it belongs to."""

    domain: str
    message: str


_DOMAINS: tuple[tuple[str, Mapping[str, str]], ...] = (
    ("Anchor Program", ANCHOR_ERROR),
    ("Token Metadata", METADATA_ERROR),
    ("Auction House", AUCTION_HOUSE_ERROR),
    ("Auctioneer", AUCTIONEER_ERROR),
    ("Candy Machine", CANDY_ERROR),
)


def find_errors(hex_code: str) -> list[FoundError]:
    """Return every known error matching ``hex_code``, in a fixed domain order."""
    code = hex_code.upper()
    return [
        FoundError(domain=domain, message=table[code])
        for domain, table in _DOMAINS
        if code in table
    ]