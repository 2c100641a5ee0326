"""Client for the indexed JSON-RPC service used for snapshots.

Holds the record types the service returns and the three queries the
snapshot commands need.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

import httpx

from .spinner import create_alt_spinner

THE_INDEX_MAINNET = "https://rpc.theindex.io/mainnet-beta"
THE_INDEX_ROOT = "https://rpc.theindex.io"

TOKEN_METADATA_PROGRAM_ID = "metaqbxxUerdq28cj1RbAWkYQm3ybzjb6a8bt518x1s"
SPL_TOKEN_PROGRAM_ID = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"

# Offsets into a metadata account of the first creator's address and of its
# verified flag, and the size of an SPL token account.
FIRST_CREATOR_OFFSET = 326
FIRST_CREATOR_VERIFIED_OFFSET = 358
TOKEN_ACCOUNT_SIZE = 165


class TokenStandard(str, Enum):
    NON_FUNGIBLE = "NonFungible"
    FUNGIBLE = "Fungible"
    FUNGIBLE_ASSET = "FungibleAsset"
    NONFUNGIBLE_EDITION = "NonfungibleEdition"


class UseMethod(str, Enum):
    BURN = "Burn"
    MULTIPLE = "Multiple"
    SINGLE = "Single"


@dataclass(frozen=True)
class Creator:
    address: str
    share: int
    verified: bool


@dataclass(frozen=True)
class Uses:
    use_method: UseMethod
    remaining: int
    total: int


@dataclass(frozen=True)
class Collection:
    key: str
    verified: bool


@dataclass(frozen=True)
class CollectionMetadata:
    update_authority: str
    mint: str
    name: str
    symbol: str
    uri: str
    seller_fee_basis_points: int
    creators: list[Creator] | None
    is_mutable: bool
    primary_sale_happened: bool
    token_standard: TokenStandard | None
    uses: Uses | None
    collection: Collection | None
    pubkey: str


def _field(data: Any, key: str, kind: type, where: str) -> Any:
    """Fetch ``data[key]`` and check that it has the expected JSON type."""
    if not isinstance(data, Mapping):
        raise ValueError(f"{where} must be a JSON object")
    if key not in data:
        raise ValueError(f"missing field {key!r} in {where}")
    value = data[key]
    if kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ValueError(f"field {key!r} in {where} must be of type {kind.__name__}")
    return float(value) if kind is float else value


@dataclass
class JRPCRequest:
    """A JSON-RPC 2.0 request body."""

    method: str
    params: Any
    jsonrpc: str = "2.0"
    id: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "jsonrpc": self.jsonrpc,
            "params": self.params,
            "id": self.id,
        }


@dataclass(frozen=True)
class IndexIoAccount:
    data: Any
    executable: bool
    lamports: int
    owner: str
    rent_epoch: int

    @staticmethod
    def from_dict(data: Any) -> "IndexIoAccount":
        where = "account"
        if not isinstance(data, Mapping) or "data" not in data:
            raise ValueError(f"missing field 'data' in {where}")
        return IndexIoAccount(
            data=data["data"],
            executable=_field(data, "executable", bool, where),
            lamports=_field(data, "lamports", int, where),
            owner=_field(data, "owner", str, where),
            rent_epoch=_field(data, "rentEpoch", int, where),
        )


@dataclass(frozen=True)
class GPAResult:
    """One entry of a getProgramAccounts result."""

    pubkey: str
    account: IndexIoAccount

    @staticmethod
    def from_dict(data: Any) -> "GPAResult":
        where = "program account"
        return GPAResult(
            pubkey=_field(data, "pubkey", str, where),
            account=IndexIoAccount.from_dict(_field(data, "account", Mapping, where)),
        )


@dataclass(frozen=True)
class Context:
    slot: int


@dataclass(frozen=True)
class LargestAccount:
    address: str
    amount: str
    decimals: int
    ui_amount: float
    ui_amount_string: str

    @staticmethod
    def from_dict(data: Any) -> "LargestAccount":
        where = "largest account"
        return LargestAccount(
            address=_field(data, "address", str, where),
            amount=_field(data, "amount", str, where),
            decimals=_field(data, "decimals", int, where),
            ui_amount=_field(data, "uiAmount", float, where),
            ui_amount_string=_field(data, "uiAmountString", str, where),
        )


@dataclass(frozen=True)
class TLAResult:
    """A getTokenLargestAccounts result."""

    context: Context
    value: list[LargestAccount] = field(default_factory=list)

    @staticmethod
    def from_dict(data: Any) -> "TLAResult":
        where = "largest accounts result"
        context = _field(data, "context", Mapping, where)
        values = _field(data, "value", list, where)
        return TLAResult(
            context=Context(slot=_field(context, "slot", int, "context")),
            value=[LargestAccount.from_dict(item) for item in values],
        )


def _parse_gpa_response(payload: Any) -> list[GPAResult]:
    where = "getProgramAccounts response"
    _field(payload, "jsonrpc", str, where)
    _field(payload, "id", int, where)
    results = _field(payload, "result", list, where)
    return [GPAResult.from_dict(item) for item in results]


async def _post(url: str, request: JRPCRequest) -> Any:
    async with httpx.AsyncClient() as client:
        response = await client.post(url, json=request.to_dict())
    return response.json()


async def get_verified_creator_accounts(api_key: str, creator: str) -> list[GPAResult]:
    """Fetch metadata accounts whose first creator is ``creator`` and verified."""
    params = [
        TOKEN_METADATA_PROGRAM_ID,
        {
            "commitment": "finalized",
            "encoding": "base64",
            "filters": [
                {"memcmp": {"offset": FIRST_CREATOR_OFFSET, "bytes": creator}},
                {"memcmp": {"offset": FIRST_CREATOR_VERIFIED_OFFSET, "bytes": "2"}},
            ],
        },
    ]
    request = JRPCRequest("getProgramAccounts", params)
    spinner = create_alt_spinner("Fetching data from TheIndex.io. . .")
    try:
        payload = await _post(f"{THE_INDEX_MAINNET}/{api_key}", request)
    finally:
        spinner.finish()
    return _parse_gpa_response(payload)


async def get_holder_token_accounts(api_key: str, mint_account: str) -> list[GPAResult]:
    """Fetch every token account of ``mint_account``."""
    params = [
        SPL_TOKEN_PROGRAM_ID,
        {
            "commitment": "finalized",
            "encoding": "base64",
            "filters": [
                {"memcmp": {"offset": 0, "bytes": mint_account}},
                {"dataSize": TOKEN_ACCOUNT_SIZE},
            ],
        },
    ]
    request = JRPCRequest("getProgramAccounts", params)
    payload = await _post(f"{THE_INDEX_MAINNET}/{api_key}", request)
    return _parse_gpa_response(payload)


async def get_token_largest_accounts(mint_account: str) -> TLAResult:
    """Fetch the largest token accounts of ``mint_account``."""
    request = JRPCRequest("getTokenLargestAccounts", [mint_account])
    payload = await _post(THE_INDEX_ROOT, request)
    return TLAResult.from_dict(payload)