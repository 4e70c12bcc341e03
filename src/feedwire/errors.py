"""Exceptions raised by feedwire conversions."""


class FeedwireError(Exception):
    """Base exception for feedwire errors."""


class InvalidIdentifierError(FeedwireError, ValueError):
    """Raised when identifier text or bytes cannot form a price identifier."""


class InvalidLengthError(InvalidIdentifierError):
    """Raised when an identifier does not decode to exactly 32 bytes."""


class InvalidHexError(InvalidIdentifierError):
    """Raised when identifier text contains non-hex characters."""


class MissingParsedDataError(FeedwireError):
    """Raised when an envelope without parsed updates is converted to domain updates."""
