"""Unpadded RFC 4648 base-32 used for the text form of nkeys.

Output is always uppercase with no ``=`` padding. Decoding is strict: only
the 32 alphabet characters are accepted, the length must correspond to a
whole number of bytes, and the fill bits of the last character must be zero,
so every byte string has exactly one accepted text form.
"""

from __future__ import annotations

import base64
import binascii

from nkeys_sdk.errors import NKeysError, NKeysErrorCode

_ALPHABET = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567")

# Trailing character counts (len % 8) that cannot hold a whole number of bytes.
_BAD_REMAINDERS = frozenset({1, 3, 6})


def encode32(data: bytes | bytearray) -> str:
    """Encode *data* as unpadded uppercase base-32."""
    return base64.b32encode(bytes(data)).decode("ascii").rstrip("=")


def decode32(text: str | bytes | bytearray) -> bytes:
    """Decode unpadded base-32 *text*.

    Raises:
        NKeysError: ``INVALID_ENCODING`` for non-text input, characters
            outside the alphabet (padding included), a length that is not a
            whole byte count, or non-zero fill bits.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("ascii")
        except UnicodeDecodeError as exc:
            raise NKeysError(NKeysErrorCode.INVALID_ENCODING, "non-ascii input") from exc
    if not isinstance(text, str):
        raise NKeysError(NKeysErrorCode.INVALID_ENCODING, f"expected text, got {type(text).__name__}")
    if len(text) % 8 in _BAD_REMAINDERS:
        raise NKeysError(NKeysErrorCode.INVALID_ENCODING, f"invalid base32 length {len(text)}")
    for c in text:
        if c not in _ALPHABET:
            raise NKeysError(NKeysErrorCode.INVALID_ENCODING, f"invalid base32 character {c!r}")
    try:
        data = base64.b32decode(text + "=" * (-len(text) % 8))
    except binascii.Error as exc:
        raise NKeysError(NKeysErrorCode.INVALID_ENCODING, str(exc)) from exc
    if encode32(data) != text:
        raise NKeysError(NKeysErrorCode.INVALID_ENCODING, "non-zero padding bits")
    return data
