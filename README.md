# mplkit

A small library for working with token-metadata programs: look up what a
program error code means, turn error enum sources into lookup tables, query
an indexer for metadata and token accounts, and write holder, mint and
candy machine snapshots to JSON files.

## Looking up an error code

Program errors arrive as hexadecimal codes. `find_errors` in
`mplkit.errorlookup` checks every known error table and returns a list of
`FoundError(domain, message)` records, one per match, in the order Anchor
Program, Token Metadata, Auction House, Auctioneer, Candy Machine. Case does
not matter; an unknown code gives an empty list.

```python
from mplkit.errorlookup import find_errors

for found in find_errors("1770"):
    print(found.domain, "-", found.message)
```

A single table can be queried directly; each function returns the message
or `None`:

```python
from mplkit.metadata_errors import metadata_error
from mplkit.program_errors import anchor_error, auction_house_error, auctioneer_error, candy_error

print(metadata_error("b"))     # NameTooLong: Name too long
print(candy_error("177A"))     # CandyMachineEmpty: Candy machine is empty!
```

The tables themselves are read-only mappings: `METADATA_ERROR` in
`mplkit.metadata_errors`, and `ANCHOR_ERROR`, `AUCTIONEER_ERROR`,
`AUCTION_HOUSE_ERROR` and `CANDY_ERROR` in `mplkit.program_errors`.

## Generating error tables

`mplkit.wtfgen.convert_to_wtf_error(file_name, file_contents)` reads the
source text of an error enum and returns the text of a static map
declaration from hex code to `Name: message`. The map is named after the
file (`candy-error.rs` becomes `CANDY_ERROR`) and the enum is looked up by
the same words capitalised (`CandyError`), or `ErrorCode` when the file name
contains `anchor`. Codes start at 100 for such anchor files, at 6000 when
messages use `#[msg(...)]`, and at 0 otherwise; an explicit `= N`
discriminant resets the counter. A missing or malformed enum raises
`WtfConversionError` (a `ValueError`).

```python
from mplkit.wtfgen import convert_to_wtf_error

table = convert_to_wtf_error("candy-error.rs", source_text)
```

`generate_phf_map_var(var_name)` returns just the opening line of such a
declaration.

## Spinners

`mplkit.spinner.create_spinner(msg)` and `create_alt_spinner(msg)` return a
started `Spinner` that redraws one line on a background thread. It draws
only when its stream (standard error by default) is a terminal. Stop it with
`finish()`, `finish_with_message(...)` or `finish_and_clear()`; the message
can be changed with `set_message(...)`. A `Spinner` is also a context
manager that starts on entry and clears itself on exit.

```python
from mplkit.spinner import create_spinner

spinner = create_spinner("Getting accounts...")
...
spinner.finish_with_message("Getting accounts...Done!")
```

## Indexer queries

`mplkit.theindexio` sends JSON-RPC requests with `httpx` and parses the
responses into dataclasses (`GPAResult`, `IndexIoAccount`, `TLAResult`,
`LargestAccount`). Responses missing a field or holding the wrong type raise
`ValueError`. All three queries are coroutines:

- `get_verified_creator_accounts(api_key, creator)` lists metadata accounts
  whose first creator is `creator` and verified.
- `get_holder_token_accounts(api_key, mint_account)` lists the token
  accounts of one mint.
- `get_token_largest_accounts(mint_account)` returns its largest accounts.

```python
import asyncio
from mplkit.theindexio import get_verified_creator_accounts

results = asyncio.run(get_verified_creator_accounts("placeholder", creator_address))
print(len(results), "metadata accounts")
```

The module also defines the record types `CollectionMetadata`, `Creator`,
`Uses`, `Collection`, `TokenStandard` and `UseMethod`.

## Snapshots

`mplkit.snapshot` and `mplkit.holders` hold the pieces used to build
snapshot files. Each writer returns the `Path` it wrote, as indented JSON.

- `split_cm_accounts(accounts)` sorts `(address, data)` pairs into a
  `CandyMachineProgramAccounts`: candy machine accounts have exactly 529
  bytes of data, everything else is a config account. `write_cm_accounts`
  saves it as `<output>/<update_authority>_accounts.json`.
- `write_mint_accounts` sorts mint addresses and saves them as
  `<output>/<prefix>_mint_accounts.json`.
- `find_holder(mint_account, metadata_account, token_accounts)` returns a
  `Holder` for the first parsed token account holding exactly one token,
  logging and skipping unreadable ones; it raises `ValueError` when none is
  found. `parse_token_amount` and `parse_owner` read the amount and owner of
  a parsed token account.
- `holders_prefix` chooses the file prefix from the update authority, the
  creator, or the mint list file name without `.json`, in that order.
- `write_holders` saves `<output>/<prefix>_holders.json` in sorted order,
  and `write_errors` saves messages as `<output>/<creator>_errors.json`.

## What this package does not do

There is no command-line program. The package does not talk to a cluster
RPC node, build or sign transactions, decode on-chain metadata accounts, or
update, mint, burn or verify anything; the snapshot helpers work on account
data and parsed token accounts that the caller supplies.

## Running the tests

The test suite uses pytest, pytest-asyncio and respx, listed under the
`test` extra.