import json

import pytest

from mplkit.holders import (
    find_holder,
    holders_prefix,
    parse_owner,
    parse_token_amount,
    write_errors,
    write_holders,
)
from mplkit.snapshot import Holder


def _account(amount="1", owner="OwnerWallet111"):
    info = {"tokenAmount": {"amount": amount}}
    if owner is not None:
        info["owner"] = owner
    return {"program": "spl-token", "parsed": {"info": info, "type": "account"}}


def test_parse_token_amount_reads_amount():
    assert parse_token_amount(_account(amount="42")) == 42


def test_parse_token_amount_missing_info():
    with pytest.raises(ValueError, match="Invalid data account!"):
        parse_token_amount({"parsed": {}})


def test_parse_token_amount_missing_token_amount():
    with pytest.raises(ValueError, match="Invalid token amount!"):
        parse_token_amount({"parsed": {"info": {"owner": "x"}}})


def test_parse_token_amount_non_string_amount():
    with pytest.raises(ValueError, match="Invalid token amount!"):
        parse_token_amount({"parsed": {"info": {"tokenAmount": {"amount": 1}}}})


@pytest.mark.parametrize("bad", ["abc", "-1", "", "1.5", str(2**64)])
def test_parse_token_amount_rejects_bad_numbers(bad):
    with pytest.raises(ValueError):
        parse_token_amount(_account(amount=bad))


def test_parse_owner_reads_owner():
    assert parse_owner(_account(owner="Wallet999")) == "Wallet999"


def test_parse_owner_missing_owner():
    with pytest.raises(ValueError, match="Invalid owner account!"):
        parse_owner(_account(owner=None))


def test_parse_owner_non_string_owner():
    with pytest.raises(ValueError, match="Invalid owner amount!"):
        parse_owner({"parsed": {"info": {"owner": 5}}})


def test_find_holder_picks_account_with_one_token():
    accounts = [
        ("AtaEmpty", _account(amount="0", owner="Nobody")),
        ("AtaBroken", {"parsed": {}}),
        ("AtaHeld", _account(amount="1", owner="HolderWallet")),
    ]
    holder = find_holder("MintA", "MetaA", accounts)
    assert holder == Holder(
        owner_wallet="HolderWallet",
        mint_account="MintA",
        metadata_account="MetaA",
        associated_token_address="AtaHeld",
    )


def test_find_holder_skips_holder_without_owner():
    accounts = [
        ("AtaNoOwner", _account(amount="1", owner=None)),
        ("AtaGood", _account(amount="1", owner="Second")),
    ]
    assert find_holder("MintB", "MetaB", accounts).associated_token_address == "AtaGood"


def test_find_holder_raises_when_nobody_holds():
    with pytest.raises(ValueError, match="No holder found for mint MintC"):
        find_holder("MintC", "MetaC", [("Ata", _account(amount="0"))])


def test_holders_prefix_precedence():
    assert holders_prefix("Auth", "Creator", "mints.json") == "Auth"
    assert holders_prefix(None, "Creator", "mints.json") == "Creator"
    assert holders_prefix(None, None, "mints.json") == "mints"


def test_holders_prefix_requires_a_source():
    with pytest.raises(ValueError, match="--mint-accounts-file"):
        holders_prefix(None, None, None)


def test_write_holders_sorted_round_trip(tmp_path):
    holders = [
        Holder("WalletB", "Mint2", "Meta2", "Ata2"),
        Holder("WalletA", "Mint1", "Meta1", "Ata1"),
    ]
    path = write_holders(holders, str(tmp_path), "Creator")
    assert path == tmp_path / "Creator_holders.json"
    loaded = json.loads(path.read_text(encoding="utf-8"))
    assert [Holder(**item) for item in loaded] == sorted(holders)
    assert list(loaded[0]) == [
        "owner_wallet",
        "mint_account",
        "metadata_account",
        "associated_token_address",
    ]


def test_write_errors_round_trip(tmp_path):
    errors = [ValueError("first failure"), "second failure"]
    path = write_errors(errors, str(tmp_path), "Creator")
    assert path.name == "Creator_errors.json"
    assert json.loads(path.read_text(encoding="utf-8")) == [
        "first failure",
        "second failure",
    ]