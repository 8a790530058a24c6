"""
Error types for the token generators

Every error is a local validation failure raised before any computation
starts, so callers never receive partially computed output.
"""


class TokenForgeError(Exception):
    """Base for all TokenForge errors"""


class InvalidParameter(TokenForgeError, ValueError):
    """A numeric parameter, hex colour or token name was rejected"""


class DuplicateToken(InvalidParameter):
    """The value already exists in the target scale"""


class UnsupportedFormat(TokenForgeError, ValueError):
    """Unknown export format tag"""


__all__ = ["TokenForgeError", "InvalidParameter", "DuplicateToken", "UnsupportedFormat"]
