"""Find the current holder of an NFT and write holder snapshots to disk."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict
from pathlib import Path
from typing import Any, Iterable, Mapping

from .snapshot import Holder

log = logging.getLogger(__name__)

_U64 = re.compile(r"\+?[0-9]+")
_U64_MAX = 2**64 - 1


def _get(value: Any, key: str) -> Any:
    """Return ``value[key]`` for a JSON object, or None for anything else."""
    if isinstance(value, Mapping):
        return value.get(key)
    return None


def _info(data: Any) -> Any:
    return _get(_get(data, "parsed"), "info")


def parse_token_amount(data: Mapping[str, Any]) -> int:
    """Return the raw token amount of a parsed SPL token account."""
    info = _info(data)
    if info is None:
        raise ValueError("Invalid data account!")
    token_amount = _get(info, "tokenAmount")
    if token_amount is None:
        raise ValueError("Invalid token amount!")
    amount = _get(token_amount, "amount")
    if not isinstance(amount, str):
        raise ValueError("Invalid token amount!")
    if not _U64.fullmatch(amount):
        raise ValueError(f"invalid digit found in token amount {amount!r}")
    value = int(amount)
    if value > _U64_MAX:
        raise ValueError(f"token amount {amount!r} is too large")
    return value


def parse_owner(data: Mapping[str, Any]) -> str:
    """Return the owner wallet of a parsed SPL token account."""
    info = _info(data)
    if info is None:
        raise ValueError("Invalid owner account!")
    owner = _get(info, "owner")
    if owner is None:
        raise ValueError("Invalid owner account!")
    if not isinstance(owner, str):
        raise ValueError("Invalid owner amount!")
    return owner


def find_holder(
    mint_account: str,
    metadata_account: str,
    token_accounts: Iterable[tuple[Any, Mapping[str, Any]]],
) -> Holder:
    """Return the holder of the first token account that holds exactly one token.

    ``token_accounts`` yields ``(associated_token_address, parsed_account)``
    pairs. Accounts that cannot be read are logged and skipped.
    """
    for address, parsed in token_accounts:
        try:
            amount = parse_token_amount(parsed)
        except ValueError as err:
            log.error("Account %s has no amount: %s", address, err)
            continue

        if amount != 1:
            continue

        try:
            owner_wallet = parse_owner(parsed)
        except ValueError as err:
            log.error("Account %s has no owner: %s", address, err)
            continue

        return Holder(
            owner_wallet=owner_wallet,
            mint_account=str(mint_account),
            metadata_account=str(metadata_account),
            associated_token_address=str(address),
        )
    raise ValueError(f"No holder found for mint {mint_account}")


def holders_prefix(
    update_authority: str | None,
    creator: str | None,
    mint_accounts_file: str | None,
) -> str:
    """Choose the file-name prefix of a holder snapshot from its source."""
    if update_authority is not None:
        return update_authority
    if creator is not None:
        return creator
    if mint_accounts_file is not None:
        return mint_accounts_file.replace(".json", "")
    raise ValueError(
        "Must specify either --update-authority or --candy-machine-id or --mint-accounts-file"
    )


def _write_json(path: Path, value: Any) -> Path:
    path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def write_holders(holders: Iterable[Holder], output: str, prefix: str) -> Path:
    """Write the sorted holders to ``<output>/<prefix>_holders.json``."""
    records = [asdict(holder) for holder in sorted(holders)]
    return _write_json(Path(output) / f"{prefix}_holders.json", records)


def write_errors(errors: Iterable[Any], output: str, creator: str) -> Path:
    """Write error messages to ``<output>/<creator>_errors.json``."""
    messages = [str(error) for error in errors]
    return _write_json(Path(output) / f"{creator}_errors.json", messages)