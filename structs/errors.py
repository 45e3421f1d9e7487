class Bech32Error(ValueError):
    """Base class for every failure raised while encoding or decoding a bech32 string."""


class HrpInvalidError(Bech32Error):
    pass


class TotalLengthExceededError(Bech32Error):
    pass


class MixedCaseError(Bech32Error):
    pass


class SeparatorNotFoundError(Bech32Error):
    pass


class DataPartTooShortError(Bech32Error):
    pass


class InvalidCharacterError(Bech32Error):
    pass


class ChecksumMismatchError(Bech32Error):
    pass


class NonZeroPaddingError(Bech32Error):
    pass


class IncompleteGroupError(Bech32Error):
    pass


class ChiaDataError(ValueError):
    """Base class for failures of the helpers that sit next to the codec (hex, amounts, blocks, zstd)."""


class InvalidHexError(ChiaDataError):
    pass


class AmountError(ChiaDataError):
    pass


class BlockDecodeError(ChiaDataError):
    pass


class DecompressError(ChiaDataError):
    pass
