"""Error kinds raised by the nkeys SDK.

Every failure surfaces as a single exception type, :class:`NKeysError`,
carrying a machine-readable :class:`NKeysErrorCode` so callers can branch on
the kind without parsing messages::

    try:
        kp = from_seed(text)
    except NKeysError as exc:
        if exc.code is NKeysErrorCode.INVALID_CHECKSUM:
            ...
"""

from __future__ import annotations

from enum import Enum


class NKeysErrorCode(str, Enum):
    """Kinds of nkeys failure."""

    INVALID_ENCODING = "invalid_encoding"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_PREFIX = "invalid_prefix"
    INVALID_SEED = "invalid_seed"
    INVALID_PUBLIC_KEY = "invalid_public_key"
    INVALID_PRIVATE_KEY = "invalid_private_key"
    INVALID_SIGNATURE = "invalid_signature"
    INCOMPATIBLE_KEY = "incompatible_key"
    PUBLIC_KEY_ONLY = "public_key_only"
    CLEARED_PAIR = "cleared_pair"


class NKeysError(ValueError):
    """Raised for malformed key material and invalid key pair operations."""

    def __init__(self, code: NKeysErrorCode, message: str | None = None) -> None:
        self.code = code
        self.message = message or code.value.replace("_", " ")
        super().__init__(f"nkeys: {self.message}")
