"""Snapshot records and the files that snapshots are written to."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable

PARALLEL_LIMIT = 50

# Candy machine accounts have a fixed length; config accounts do not.
CANDY_MACHINE_ACCOUNT_LEN = 529


@dataclass(frozen=True, order=True)
class Holder:
    """The current holder of one NFT."""

    owner_wallet: str
    mint_account: str
    metadata_account: str
    associated_token_address: str


@dataclass(frozen=True)
class ConfigAccount:
    address: str
    data_len: int


@dataclass(frozen=True)
class CandyMachineAccount:
    address: str
    data_len: int


@dataclass
class CandyMachineProgramAccounts:
    """Accounts of the candy machine program, split by kind."""

    config_accounts: list[ConfigAccount] = field(default_factory=list)
    candy_machine_accounts: list[CandyMachineAccount] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "config_accounts": [asdict(a) for a in self.config_accounts],
            "candy_machine_accounts": [asdict(a) for a in self.candy_machine_accounts],
        }


def split_cm_accounts(accounts: Iterable[tuple[Any, bytes]]) -> CandyMachineProgramAccounts:
    """Sort ``(address, data)`` pairs into candy machine and config accounts."""
    result = CandyMachineProgramAccounts()
    for address, data in accounts:
        length = len(data)
        if length == CANDY_MACHINE_ACCOUNT_LEN:
            result.candy_machine_accounts.append(
                CandyMachineAccount(address=str(address), data_len=length)
            )
        else:
            result.config_accounts.append(ConfigAccount(address=str(address), data_len=length))
    return result


def _write_json(path: Path, value: Any) -> Path:
    path.write_text(json.dumps(value, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def write_mint_accounts(mint_addresses: Iterable[str], output: str, prefix: str) -> Path:
    """Write the sorted mint addresses to ``<output>/<prefix>_mint_accounts.json``."""
    return _write_json(Path(output) / f"{prefix}_mint_accounts.json", sorted(mint_addresses))


def write_cm_accounts(
    program_accounts: CandyMachineProgramAccounts, output: str, update_authority: str
) -> Path:
    """Write candy machine accounts to ``<output>/<update_authority>_accounts.json``."""
    return _write_json(
        Path(output) / f"{update_authority}_accounts.json", program_accounts.to_dict()
    )