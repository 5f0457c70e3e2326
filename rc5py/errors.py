"""Errors raised by the RC5 cipher.

All of them derive from `RC5Error` and from `ValueError`, since they
are caused by invalid arguments rather than by an internal failure.
"""


class RC5Error(Exception):
    """Base class of the errors raised by the RC5 cipher."""


class InvalidKeySize(RC5Error, ValueError):
    """The secret key is longer than 256 bytes (or is not 16 bytes long
    in the RC5-32/12/16 preset)."""


class InvalidRoundsCount(RC5Error, ValueError):
    """The number of rounds is not between 0 and 256."""


class InvalidWordSize(RC5Error, ValueError):
    """A rotation amount could not be derived from a word."""


class InvalidBytes(RC5Error, ValueError):
    """A byte string cannot be converted to a word."""


class InvalidInputLength(RC5Error, ValueError):
    """The plaintext or ciphertext length is not a multiple of the block size."""
