import json

import httpx
import pytest
import respx

from mplkit.theindexio import (
    SPL_TOKEN_PROGRAM_ID,
    THE_INDEX_MAINNET,
    THE_INDEX_ROOT,
    TOKEN_METADATA_PROGRAM_ID,
    GPAResult,
    IndexIoAccount,
    JRPCRequest,
    LargestAccount,
    TLAResult,
    TokenStandard,
    UseMethod,
    get_holder_token_accounts,
    get_token_largest_accounts,
    get_verified_creator_accounts,
)

API_KEY = "placeholder"


def _account(data="AAAA"):
    return {
        "data": [data, "base64"],
        "executable": False,
        "lamports": 5616720,
        "owner": TOKEN_METADATA_PROGRAM_ID,
        "rentEpoch": 361,
    }


def _gpa_payload(entries):
    return {"jsonrpc": "2.0", "id": 1, "result": entries}


def test_jrpc_request_to_dict():
    request = JRPCRequest("getProgramAccounts", ["x"])
    assert request.to_dict() == {
        "method": "getProgramAccounts",
        "jsonrpc": "2.0",
        "params": ["x"],
        "id": 1,
    }


def test_enum_values_follow_wire_names():
    assert TokenStandard("NonfungibleEdition") is TokenStandard.NONFUNGIBLE_EDITION
    assert UseMethod("Burn") is UseMethod.BURN


def test_index_io_account_from_dict_renames_rent_epoch():
    account = IndexIoAccount.from_dict(_account("QUJD"))
    assert account.rent_epoch == 361
    assert account.data == ["QUJD", "base64"]
    assert account.owner == TOKEN_METADATA_PROGRAM_ID


def test_gpa_result_missing_account_raises():
    with pytest.raises(ValueError):
        GPAResult.from_dict({"pubkey": "abc"})


def test_index_io_account_rejects_bool_lamports():
    data = _account()
    data["lamports"] = True
    with pytest.raises(ValueError):
        IndexIoAccount.from_dict(data)


def test_largest_account_from_dict():
    account = LargestAccount.from_dict(
        {
            "address": "addr",
            "amount": "1",
            "decimals": 0,
            "uiAmount": 1,
            "uiAmountString": "1",
        }
    )
    assert account.ui_amount == 1.0
    assert account.ui_amount_string == "1"


def test_tla_result_from_dict():
    result = TLAResult.from_dict(
        {
            "context": {"slot": 42},
            "value": [
                {
                    "address": "addr",
                    "amount": "1",
                    "decimals": 0,
                    "uiAmount": 1.0,
                    "uiAmountString": "1",
                }
            ],
        }
    )
    assert result.context.slot == 42
    assert [v.address for v in result.value] == ["addr"]


@pytest.mark.asyncio
async def test_get_verified_creator_accounts_sends_filters_and_parses():
    creator = "Creator1111111111111111111111111111111111"
    with respx.mock:
        route = respx.post(f"{THE_INDEX_MAINNET}/{API_KEY}").mock(
            return_value=httpx.Response(
                200, json=_gpa_payload([{"pubkey": "meta1", "account": _account()}])
            )
        )
        results = await get_verified_creator_accounts(API_KEY, creator)

    assert [r.pubkey for r in results] == ["meta1"]
    body = json.loads(route.calls.last.request.content)
    assert body["method"] == "getProgramAccounts"
    assert body["params"][0] == TOKEN_METADATA_PROGRAM_ID
    filters = body["params"][1]["filters"]
    assert filters[0]["memcmp"] == {"offset": 326, "bytes": creator}
    assert filters[1]["memcmp"] == {"offset": 358, "bytes": "2"}
    assert body["params"][1]["commitment"] == "finalized"


@pytest.mark.asyncio
async def test_get_holder_token_accounts_sends_mint_filter():
    mint = "Mint111111111111111111111111111111111111111"
    with respx.mock:
        route = respx.post(f"{THE_INDEX_MAINNET}/{API_KEY}").mock(
            return_value=httpx.Response(
                200,
                json=_gpa_payload(
                    [
                        {"pubkey": "ata1", "account": _account()},
                        {"pubkey": "ata2", "account": _account()},
                    ]
                ),
            )
        )
        results = await get_holder_token_accounts(API_KEY, mint)

    assert [r.pubkey for r in results] == ["ata1", "ata2"]
    body = json.loads(route.calls.last.request.content)
    assert body["params"][0] == SPL_TOKEN_PROGRAM_ID
    assert body["params"][1]["filters"] == [
        {"memcmp": {"offset": 0, "bytes": mint}},
        {"dataSize": 165},
    ]


@pytest.mark.asyncio
async def test_get_holder_token_accounts_malformed_response_raises():
    with respx.mock:
        respx.post(f"{THE_INDEX_MAINNET}/{API_KEY}").mock(
            return_value=httpx.Response(200, json={"error": "bad"})
        )
        with pytest.raises(ValueError):
            await get_holder_token_accounts(API_KEY, "mint")


@pytest.mark.asyncio
async def test_get_token_largest_accounts():
    mint = "Mint111111111111111111111111111111111111111"
    with respx.mock:
        route = respx.post(THE_INDEX_ROOT).mock(
            return_value=httpx.Response(
                200,
                json={
                    "context": {"slot": 7},
                    "value": [
                        {
                            "address": "holder",
                            "amount": "1",
                            "decimals": 0,
                            "uiAmount": 1.0,
                            "uiAmountString": "1",
                        }
                    ],
                },
            )
        )
        result = await get_token_largest_accounts(mint)

    assert result.context.slot == 7
    assert result.value[0].address == "holder"
    body = json.loads(route.calls.last.request.content)
    assert body["method"] == "getTokenLargestAccounts"
    assert body["params"] == [mint]