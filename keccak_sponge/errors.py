"""
Error types raised by the sponge and digest layers.

Hierarchy
---------
KeccakError
 ├─ ConfigurationError  : unknown variant or invalid sponge parameters
 └─ BufferTooSmallError : output buffer cannot hold the digest
"""


class KeccakError(Exception):
    """Base class for errors raised by keccak_sponge."""

    def __init__(self, message=""):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__

    def __str__(self):
        return self.message


class ConfigurationError(KeccakError, ValueError):
    """A context was requested with an unknown variant or bad parameters."""


class BufferTooSmallError(KeccakError, ValueError):
    """The caller's output buffer is shorter than the digest."""

    def __init__(self, needed, got):
        super().__init__(f"output buffer too small: need {needed} bytes, got {got}")
        self.needed = needed
        self.got = got
