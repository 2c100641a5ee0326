"""Error codes of the Anchor framework, Auctioneer, Auction House and Candy Machine.

Every table is keyed by the upper-case hexadecimal error code.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

AUCTIONEER_ERROR: Mapping[str, str] = MappingProxyType(
    {
        "1770": "BumpSeedNotInHashMap: Bump seed not in hash map",
        "1771": "AuctionNotStarted: Auction has not started yet",
        "1772": "AuctionEnded: Auction has ended",
        "1773": "AuctionActive: Auction has not ended yet",
        "1774": "BidTooLow: The bid was lower than the highest bid",
        "1775": "SignerNotAuth: The signer must be the Auction House authority",
        "1776": "NotHighestBidder: Execute Sale must be run on the highest bidder",
        "1777": "BelowReservePrice: The bid price must be greater than the reserve price",
        "1778": "BelowBidIncrement: The bid must match the highest bid plus the minimum bid increment",
        "1779": "CannotCancelHighestBid: The highest bidder is not allowed to cancel",
    }
)

AUCTION_HOUSE_ERROR: Mapping[str, str] = MappingProxyType(
    {
        "1770": "PublicKeyMismatch: PublicKeyMismatch",
        "1771": "InvalidMintAuthority: InvalidMintAuthority",
        "1772": "UninitializedAccount: UninitializedAccount",
        "1773": "IncorrectOwner: IncorrectOwner",
        "1774": "PublicKeysShouldBeUnique: PublicKeysShouldBeUnique",
        "1775": "StatementFalse: StatementFalse",
        "1776": "NotRentExempt: NotRentExempt",
        "1777": "NumericalOverflow: NumericalOverflow",
        "1778": "ExpectedSolAccount: Expected a sol account but got an spl token account instead",
        "1779": "CannotExchangeSOLForSol: Cannot exchange sol for sol",
        "177A": "SOLWalletMustSign: If paying with sol, sol wallet must be signer",
        "177B": "CannotTakeThisActionWithoutAuctionHouseSignOff: Cannot take this action without auction house signing too",
        "177C": "NoPayerPresent: No payer present on this txn",
        "177D": "DerivedKeyInvalid: Derived key invalid",
        "177E": "MetadataDoesntExist: Metadata doesn't exist",
        "177F": "InvalidTokenAmount: Invalid token amount",
        "1780": "BothPartiesNeedToAgreeToSale: Both parties need to agree to this sale",
        "1781": "CannotMatchFreeSalesWithoutAuctionHouseOrSellerSignoff: Cannot match free sales unless the auction house or seller signs off",
        "1782": "SaleRequiresSigner: This sale requires a signer",
        "1783": "OldSellerNotInitialized: Old seller not initialized",
        "1784": "SellerATACannotHaveDelegate: Seller ata cannot have a delegate set",
        "1785": "BuyerATACannotHaveDelegate: Buyer ata cannot have a delegate set",
        "1786": "NoValidSignerPresent: No valid signer present",
        "1787": "InvalidBasisPoints: BP must be less than or equal to 10000",
        "1788": "TradeStateDoesntExist: The trade state account does not exist",
        "1789": "TradeStateIsNotEmpty: The trade state is not empty",
        "178A": "ReceiptIsEmpty: The receipt is empty",
        "178B": "InstructionMismatch: The instruction does not match",
        "178C": "InvalidAuctioneer: Invalid Auctioneer for this Auction House instance.",
        "178D": "MissingAuctioneerScope: The Auctioneer does not have the correct scope for this action.",
        "178E": "MustUseAuctioneerHandler: Must use auctioneer handler.",
        "178F": "NoAuctioneerProgramSet: No Auctioneer program set.",
        "1790": "TooManyScopes: Too many scopes.",
        "1791": "AuctionHouseNotDelegated: Auction House not delegated.",
        "1792": "BumpSeedNotInHashMap: Bump seed not in hash map.",
        "1793": "EscrowUnderRentExemption: The instruction would drain the escrow below rent exemption threshold",
        "1794": "InvalidSeedsOrAuctionHouseNotDelegated: Invalid seeds or Auction House not delegated",
        "1795": "BuyerTradeStateNotValid: The buyer trade state was unable to be initialized.",
        "1796": "MissingElementForPartialOrder: Partial order size and price must both be provided in a partial buy.",
        "1797": "NotEnoughTokensAvailableForPurchase: Amount of tokens available for purchase is less than the partial order amount.",
        "1798": "PartialPriceMismatch: Calculated partial price does not not partial price that was provided.",
        "1799": "AuctionHouseAlreadyDelegated: Auction House already delegated.",
        "179A": "AuctioneerAuthorityMismatch: Auctioneer Authority Mismatch",
        "179B": "InsufficientFunds: Insufficient funds in escrow account to purchase.",
    }
)

CANDY_ERROR: Mapping[str, str] = MappingProxyType(
    {
        "1770": "IncorrectOwner: Account does not have correct owner!",
        "1771": "Uninitialized: Account is not initialized!",
        "1772": "MintMismatch: Mint Mismatch!",
        "1773": "IndexGreaterThanLength: Index greater than length!",
        "1774": "NumericalOverflowError: Numerical overflow error!",
        "1775": "TooManyCreators: Can only provide up to 4 creators to candy machine (because candy machine is one)!",
        "1776": "UuidMustBeExactly6Length: Uuid must be exactly of 6 length",
        "1777": "NotEnoughTokens: Not enough tokens to pay for this minting",
        "1778": "NotEnoughSOL: Not enough SOL to pay for this minting",
        "1779": "TokenTransferFailed: Token transfer failed",
        "177A": "CandyMachineEmpty: Candy machine is empty!",
        "177B": "CandyMachineNotLive: Candy machine is not live!",
        "177C": "HiddenSettingsConfigsDoNotHaveConfigLines: Configs that are using hidden uris do not have config lines, they have a single hash representing hashed order",
        "177D": "CannotChangeNumberOfLines: Cannot change number of lines unless is a hidden config",
        "177E": "DerivedKeyInvalid: Derived key invalid",
        "177F": "PublicKeyMismatch: Public key mismatch",
        "1780": "NoWhitelistToken: No whitelist token present",
        "1781": "TokenBurnFailed: Token burn failed",
        "1782": "GatewayAppMissing: Missing gateway app when required",
        "1783": "GatewayTokenMissing: Missing gateway token when required",
        "1784": "GatewayTokenExpireTimeInvalid: Invalid gateway token expire time",
        "1785": "NetworkExpireFeatureMissing: Missing gateway network expire feature when required",
        "1786": "CannotFindUsableConfigLine: Unable to find an unused config line near your random number index",
        "1787": "InvalidString: Invalid string",
        "1788": "SuspiciousTransaction: Suspicious transaction detected",
        "1789": "CannotSwitchToHiddenSettings: Cannot Switch to Hidden Settings after items available is greater than 0",
        "178A": "IncorrectSlotHashesPubkey: Incorrect SlotHashes PubKey",
        "178B": "IncorrectCollectionAuthority: Incorrect collection NFT authority",
        "178C": "MismatchedCollectionPDA: Collection PDA address is invalid",
        "178D": "MismatchedCollectionMint: Provided mint account doesn't match collection PDA mint",
        "178E": "SlotHashesEmpty: Slot hashes Sysvar is empty",
        "178F": "MetadataAccountMustBeEmpty: The metadata account has data in it, and this must be empty to mint a new NFT",
        "1790": "MissingSetCollectionDuringMint: Missing set collection during mint IX for Candy Machine with collection set",
        "1791": "NoChangingCollectionDuringMint: Can't change collection settings after items have begun to be minted",
        "1792": "CandyCollectionRequiresRetainAuthority: Retain authority must be true for Candy Machines with a collection set",
        "1793": "GatewayProgramError: Error within Gateway program",
        "1794": "NoChangingFreezeDuringMint",
        "1795": "NoChangingAuthorityWithCollection: Can't change authority while collection is enabled. Disable collection first.",
        "1796": "NoChangingTokenWithFreeze: Can't change token while freeze is enabled. Disable freeze first.",
        "1797": "InvalidThawNft: Cannot thaw NFT unless all NFTs are minted or Candy Machine authority enables thawing",
        "1798": "IncorrectRemainingAccountsLen: The number of remaining accounts passed in doesn't match the Candy Machine settings",
        "1799": "MissingFreezeAta: FreezePDA ATA needs to be passed in if token mint is enabled.",
        "179A": "IncorrectFreezeAta: Incorrect freeze ATA address.",
        "179B": "FreezePDAMismatch: FreezePDA doesn't belong to this Candy Machine.",
        "179C": "EnteredFreezeIsMoreThanMaxFreeze: Freeze time can't be longer than MAX_FREEZE_TIME.",
        "179D": "NoWithdrawWithFreeze: Can't withdraw Candy Machine while freeze is active. Disable freeze first.",
        "179E": "NoWithdrawWithFrozenFunds",
        "179F": "MissingRemoveFreezeTokenAccounts: Missing required remaining accounts for remove_freeze with token mint.",
        "17A0": "InvalidFreezeWithdrawTokenAddress: Can't withdraw SPL Token from freeze PDA into itself",
        "17A1": "NoUnlockWithNFTsStillFrozen: Can't unlock funds while NFTs are still frozen. Run thaw on all NFTs first.",
        "17A2": "SizedCollectionMetadataMustBeMutable: Setting a sized collection requires the collection metadata to be mutable.",
    }
)

ANCHOR_ERROR: Mapping[str, str] = MappingProxyType(
    {
        "64": "InstructionMissing: 8 byte instruction identifier not provided",
        "65": "InstructionFallbackNotFound: Fallback functions are not supported",
        "66": "InstructionDidNotDeserialize: The program could not deserialize the given instruction",
        "67": "InstructionDidNotSerialize: The program could not serialize the given instruction",
        "3E8": "IdlInstructionStub: The program was compiled without idl instructions",
        "3E9": "IdlInstructionInvalidProgram: Invalid program given to the IDL instruction",
        "7D0": "ConstraintMut: A mut constraint was violated",
        "7D1": "ConstraintHasOne: A has one constraint was violated",
        "7D2": "ConstraintSigner: A signer constraint was violated",
        "7D3": "ConstraintRaw: A raw constraint was violated",
        "7D4": "ConstraintOwner: An owner constraint was violated",
        "7D5": "ConstraintRentExempt: A rent exemption constraint was violated",
        "7D6": "ConstraintSeeds: A seeds constraint was violated",
        "7D7": "ConstraintExecutable: An executable constraint was violated",
        "7D8": "ConstraintState: A state constraint was violated",
        "7D9": "ConstraintAssociated: An associated constraint was violated",
        "7DA": "ConstraintAssociatedInit: An associated init constraint was violated",
        "7DB": "ConstraintClose: A close constraint was violated",
        "7DC": "ConstraintAddress: An address constraint was violated",
        "7DD": "ConstraintZero: Expected zero account discriminant",
        "7DE": "ConstraintTokenMint: A token mint constraint was violated",
        "7DF": "ConstraintTokenOwner: A token owner constraint was violated",
        "7E0": "ConstraintMintMintAuthority: A mint mint authority constraint was violated",
        "7E1": "ConstraintMintFreezeAuthority: A mint freeze authority constraint was violated",
        "7E2": "ConstraintMintDecimals: A mint decimals constraint was violated",
        "7E3": "ConstraintSpace: A space constraint was violated",
        "9C4": "RequireViolated: A require expression was violated",
        "9C5": "RequireEqViolated: A require_eq expression was violated",
        "9C6": "RequireKeysEqViolated: A require_keys_eq expression was violated",
        "9C7": "RequireNeqViolated: A require_neq expression was violated",
        "9C8": "RequireKeysNeqViolated: A require_keys_neq expression was violated",
        "9C9": "RequireGtViolated: A require_gt expression was violated",
        "9CA": "RequireGteViolated: A require_gte expression was violated",
        "BB8": "AccountDiscriminatorAlreadySet: The account discriminator was already set on this account",
        "BB9": "AccountDiscriminatorNotFound: No 8 byte discriminator was found on the account",
        "BBA": "AccountDiscriminatorMismatch: 8 byte discriminator did not match what was expected",
        "BBB": "AccountDidNotDeserialize: Failed to deserialize the account",
        "BBC": "AccountDidNotSerialize: Failed to serialize the account",
        "BBD": "AccountNotEnoughKeys: Not enough account keys given to the instruction",
        "BBE": "AccountNotMutable: The given account is not mutable",
        "BBF": "AccountOwnedByWrongProgram: The given account is owned by a different program than expected",
        "BC0": "InvalidProgramId: Program ID was not as expected",
        "BC1": "InvalidProgramExecutable: Program account is not executable",
        "BC2": "AccountNotSigner: The given account did not sign",
        "BC3": "AccountNotSystemOwned: The given account is not owned by the system program",
        "BC4": "AccountNotInitialized: The program expected this account to be already initialized",
        "BC5": "AccountNotProgramData: The given account is not a program data account",
        "BC6": "AccountNotAssociatedTokenAccount: The given account is not the associated token account",
        "BC7": "AccountSysvarMismatch: The given public key does not match the required sysvar",
        "BC8": "AccountReallocExceedsLimit: The account reallocation exceeds the MAX_PERMITTED_DATA_INCREASE limit",
        "BC9": "AccountDuplicateReallocs: The account was duplicated for more than one reallocation",
        "FA0": "StateInvalidAddress: The given state account does not have the correct address",
        "1004": "DeclaredProgramIdMismatch: The declared program id does not match the actual program id",
        "1388": "Deprecated: The API being used is deprecated and should no longer be used",
    }
)


def anchor_error(hex_code: str) -> str | None:
    """Return the Anchor framework error message for a hex code, or None."""
    return ANCHOR_ERROR.get(hex_code.upper())


def auctioneer_error(hex_code: str) -> str | None:
    """Return the Auctioneer error message for a hex code, or None."""
    return AUCTIONEER_ERROR.get(hex_code.upper())


def auction_house_error(hex_code: str) -> str | None:
    """Return the Auction House error message for a hex code, or None."""
    return AUCTION_HOUSE_ERROR.get(hex_code.upper())


def candy_error(hex_code: str) -> str | None:
    """Return the Candy Machine error message for a hex code, or None."""
    return CANDY_ERROR.get(hex_code.upper())