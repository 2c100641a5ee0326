import dataclasses

import pytest

from mplkit.errorlookup import FoundError, find_errors
from mplkit.metadata_errors import METADATA_ERROR
from mplkit.program_errors import (
    ANCHOR_ERROR,
    AUCTION_HOUSE_ERROR,
    AUCTIONEER_ERROR,
    CANDY_ERROR,
)


def test_custom_program_code_matches_three_domains_in_order():
    found = find_errors("1770")
    assert [f.domain for f in found] == ["Auction House", "Auctioneer", "Candy Machine"]
    assert found[0].message == AUCTION_HOUSE_ERROR["1770"]
    assert found[1].message == AUCTIONEER_ERROR["1770"]
    assert found[2].message == CANDY_ERROR["1770"]


def test_anchor_comes_before_metadata():
    found = find_errors("64")
    assert found == [
        FoundError("Anchor Program", ANCHOR_ERROR["64"]),
        FoundError("Token Metadata", METADATA_ERROR["64"]),
    ]


def test_metadata_only_code():
    assert find_errors("3B") == [
        FoundError("Token Metadata", "DataIsImmutable: Data is immutable")
    ]


def test_lower_case_code_is_normalised():
    assert find_errors("bb8") == find_errors("BB8")
    assert find_errors("bb8")[0].domain == "Anchor Program"


def test_unknown_code_yields_empty_list():
    assert find_errors("NOPE") == []


def test_candy_only_code():
    found = find_errors("17A2")
    assert [f.domain for f in found] == ["Candy Machine"]
    assert found[0].message == CANDY_ERROR["17A2"]


@pytest.mark.parametrize(
    "table",
    [ANCHOR_ERROR, METADATA_ERROR, AUCTION_HOUSE_ERROR, AUCTIONEER_ERROR, CANDY_ERROR],
)
def test_every_table_entry_is_found(table):
    for code, message in table.items():
        assert message in [f.message for f in find_errors(code)]


def test_found_error_is_immutable():
    error = find_errors("1388")[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        error.domain = "other"
    assert error.message == ANCHOR_ERROR["1388"]