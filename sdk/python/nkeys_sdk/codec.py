"""Typed codec: prefix + payload + CRC-16 + base-32.

Layout of every encoded string::

    base32_nopad( prefix || payload || crc16_le(prefix || payload) )

Seeds carry two prefix bytes packing the ``S`` marker together with the role,
so ``SU...`` is a user seed. Public keys carry the role byte alone, private
keys the ``P`` marker, and generic payloads the ``Z`` marker.

Every decode validates the checksum before looking at the prefix, and the
prefix before returning any payload.
"""

from __future__ import annotations

import struct

from nkeys_sdk import crc16
from nkeys_sdk.base32 import decode32, encode32
from nkeys_sdk.errors import NKeysError, NKeysErrorCode
from nkeys_sdk.prefix import Prefix, byte_to_role, is_valid_public_prefix

SEED_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
PRIVATE_KEY_LENGTH = 64

# Prefix byte plus checksum.
_MIN_RAW_LENGTH = 3


def _checked(raw: bytes) -> str:
    return encode32(raw + struct.pack("<H", crc16.crc16(raw)))


def _unchecked(src: str | bytes | bytearray) -> bytes:
    """Base-32 decode *src* and strip a verified checksum."""
    raw = decode32(src)
    if len(raw) < _MIN_RAW_LENGTH:
        raise NKeysError(NKeysErrorCode.INVALID_ENCODING, "encoded key is too short")
    body, (expected,) = raw[:-2], struct.unpack("<H", raw[-2:])
    if not crc16.validate(body, expected):
        raise NKeysError(NKeysErrorCode.INVALID_CHECKSUM)
    return body


def _require_role(role: int) -> Prefix:
    if not is_valid_public_prefix(role):
        raise NKeysError(NKeysErrorCode.INVALID_PREFIX, f"{role!r} is not a key role")
    return Prefix(role)


class Codec:
    """Encode and decode typed nkey strings."""

    # ----- generic building blocks ----------------------------------------

    @staticmethod
    def encode(prefix: Prefix, payload: bytes | bytearray) -> str:
        """Encode *payload* behind a single *prefix* byte."""
        return _checked(bytes([int(prefix)]) + bytes(payload))

    @staticmethod
    def decode(src: str | bytes | bytearray) -> tuple[Prefix, bytes]:
        """Decode a single-byte-prefixed string without checking its class.

        Returns:
            A ``(prefix, payload)`` tuple.
        """
        body = _unchecked(src)
        return byte_to_role(body[0]), body[1:]

    @staticmethod
    def decode_expected(expected: Prefix, src: str | bytes | bytearray) -> bytes:
        """Decode *src* and require its prefix byte to be *expected*."""
        body = _unchecked(src)
        if body[0] != int(expected):
            raise NKeysError(
                NKeysErrorCode.INVALID_PREFIX,
                f"expected prefix {expected.char!r}, got byte {body[0]:#04x}",
            )
        return body[1:]

    @staticmethod
    def prefix_of(src: str | bytes | bytearray) -> Prefix:
        """Classify an encoded string.

        Returns ``Prefix.SEED`` for seeds, ``Prefix.PRIVATE`` for private keys,
        the role for public keys and ``Prefix.UNKNOWN`` for generic payloads.
        """
        body = _unchecked(src)
        if body[0] & 0xF8 == Prefix.SEED and len(body) >= 2:
            Codec._seed_role(body)
            return Prefix.SEED
        return byte_to_role(body[0])

    # ----- seeds ------------------------------------------------------------

    @staticmethod
    def encode_seed(role: Prefix, seed: bytes | bytearray) -> str:
        """Encode a raw 32-byte seed for *role*."""
        role = _require_role(role)
        if len(seed) != SEED_LENGTH:
            raise NKeysError(NKeysErrorCode.INVALID_SEED, f"seed must be {SEED_LENGTH} bytes, got {len(seed)}")
        b0 = Prefix.SEED | (role >> 5)
        b1 = (role & 31) << 3
        return _checked(bytes([b0, b1]) + bytes(seed))

    @staticmethod
    def _seed_role(body: bytes) -> Prefix:
        if body[0] & 0xF8 != Prefix.SEED:
            raise NKeysError(NKeysErrorCode.INVALID_PREFIX, "not a seed")
        role = ((body[0] & 0x07) << 5) | ((body[1] & 0xF8) >> 3)
        if not is_valid_public_prefix(role):
            raise NKeysError(NKeysErrorCode.INVALID_PREFIX, f"seed has unknown role byte {role:#04x}")
        return Prefix(role)

    @staticmethod
    def decode_seed(src: str | bytes | bytearray) -> tuple[Prefix, bytes]:
        """Decode an encoded seed.

        Returns:
            A ``(role, seed)`` tuple with the raw 32-byte seed.

        Raises:
            NKeysError: ``INVALID_ENCODING``, ``INVALID_CHECKSUM``,
                ``INVALID_SEED`` or ``INVALID_PREFIX``.
        """
        body = _unchecked(src)
        if len(body) < 2:
            raise NKeysError(NKeysErrorCode.INVALID_SEED, "seed is too short")
        role = Codec._seed_role(body)
        seed = body[2:]
        if len(seed) != SEED_LENGTH:
            raise NKeysError(NKeysErrorCode.INVALID_SEED, f"seed must be {SEED_LENGTH} bytes, got {len(seed)}")
        return role, seed

    # ----- public keys -----------------------------------------------------

    @staticmethod
    def encode_public_key(role: Prefix, public_key: bytes | bytearray) -> str:
        role = _require_role(role)
        if len(public_key) != PUBLIC_KEY_LENGTH:
            raise NKeysError(
                NKeysErrorCode.INVALID_PUBLIC_KEY,
                f"public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}",
            )
        return Codec.encode(role, public_key)

    @staticmethod
    def decode_public_key(src: str | bytes | bytearray) -> tuple[Prefix, bytes]:
        """Decode an encoded public key into ``(role, public_key)``."""
        body = _unchecked(src)
        if not is_valid_public_prefix(body[0]):
            raise NKeysError(NKeysErrorCode.INVALID_PREFIX, f"byte {body[0]:#04x} is not a public key role")
        public_key = body[1:]
        if len(public_key) != PUBLIC_KEY_LENGTH:
            raise NKeysError(
                NKeysErrorCode.INVALID_PUBLIC_KEY,
                f"public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(public_key)}",
            )
        return Prefix(body[0]), public_key

    # ----- private keys ----------------------------------------------------

    @staticmethod
    def encode_private_key(private_key: bytes | bytearray) -> str:
        """Encode a 64-byte expanded private key (seed followed by public key)."""
        if len(private_key) != PRIVATE_KEY_LENGTH:
            raise NKeysError(
                NKeysErrorCode.INVALID_PRIVATE_KEY,
                f"private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(private_key)}",
            )
        return Codec.encode(Prefix.PRIVATE, private_key)

    @staticmethod
    def decode_private_key(src: str | bytes | bytearray) -> bytes:
        private_key = Codec.decode_expected(Prefix.PRIVATE, src)
        if len(private_key) != PRIVATE_KEY_LENGTH:
            raise NKeysError(
                NKeysErrorCode.INVALID_PRIVATE_KEY,
                f"private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(private_key)}",
            )
        return private_key

    # ----- generic payloads -------------------------------------------------

    @staticmethod
    def encode_generic(data: bytes | bytearray) -> str:
        """Encode an arbitrary-length payload such as a signature or nonce."""
        return Codec.encode(Prefix.UNKNOWN, data)

    @staticmethod
    def decode_generic(src: str | bytes | bytearray) -> bytes:
        return Codec.decode_expected(Prefix.UNKNOWN, src)
