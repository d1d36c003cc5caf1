"""Role table: prefix bytes for every class of encoded nkey.

The top five bits of a prefix byte are the first base-32 character of the
encoded string, which is why a user public key reads ``U...`` and a seed
reads ``S...``.
"""

from __future__ import annotations

from enum import IntEnum

from nkeys_sdk.errors import NKeysError, NKeysErrorCode


class Prefix(IntEnum):
    """Prefix bytes for encoded keys."""

    SEED = 18 << 3
    PRIVATE = 15 << 3
    OPERATOR = 14 << 3
    SERVER = 13 << 3
    CLUSTER = 2 << 3
    ACCOUNT = 0
    USER = 20 << 3
    CURVE = 23 << 3
    # Generic payloads (signatures, nonces) that belong to no role.
    UNKNOWN = 25 << 3

    @property
    def char(self) -> str:
        """Base-32 display character for this prefix."""
        return "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"[self.value >> 3]


_ROLES: frozenset[Prefix] = frozenset(
    {
        Prefix.OPERATOR,
        Prefix.SERVER,
        Prefix.CLUSTER,
        Prefix.ACCOUNT,
        Prefix.USER,
        Prefix.CURVE,
    }
)

_BY_BYTE: dict[int, Prefix] = {p.value: p for p in Prefix}


def role_to_byte(role: Prefix) -> int:
    return int(role)


def byte_to_role(value: int) -> Prefix:
    """Look up the prefix for *value*.

    Raises:
        NKeysError: ``INVALID_PREFIX`` if the byte names no prefix.
    """
    try:
        return _BY_BYTE[value]
    except KeyError:
        raise NKeysError(
            NKeysErrorCode.INVALID_PREFIX, f"unknown prefix byte {value:#04x}"
        ) from None


def is_valid_public_prefix(value: int) -> bool:
    """Return ``True`` if *value* is a role that may prefix a public key or seed."""
    return value in _ROLES
