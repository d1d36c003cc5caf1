"""nkeys identity primitives: role generators, import, validation.

All cryptographic operations use Ed25519 via PyNaCl (libsodium binding).
Keys are rendered as prefixed, CRC-protected base-32 strings whose first
character names the role (``O`` operator, ``A`` account, ``U`` user,
``C`` cluster, ``N`` server). Signatures and nonces travel as standard
base64, see :func:`encode` and :func:`decode`.
"""

from __future__ import annotations

import base64
import binascii

from nkeys_sdk.codec import Codec
from nkeys_sdk.errors import NKeysError, NKeysErrorCode
from nkeys_sdk.keypair import KeyPair
from nkeys_sdk.prefix import Prefix


def create_pair(role: Prefix) -> KeyPair:
    """Generate a random key pair for *role*.

    Raises:
        NKeysError: ``INVALID_PREFIX`` if *role* cannot sign.
    """
    return KeyPair.generate(role)


def create_operator() -> KeyPair:
    return KeyPair.generate(Prefix.OPERATOR)


def create_account() -> KeyPair:
    return KeyPair.generate(Prefix.ACCOUNT)


def create_user() -> KeyPair:
    return KeyPair.generate(Prefix.USER)


def create_cluster() -> KeyPair:
    return KeyPair.generate(Prefix.CLUSTER)


def create_server() -> KeyPair:
    return KeyPair.generate(Prefix.SERVER)


def from_seed(src: str | bytes | bytearray) -> KeyPair:
    """Import a signing identity from an encoded seed.

    Args:
        src: The seed as text (``"SU..."``) or its ASCII bytes.

    Raises:
        NKeysError: ``INVALID_ENCODING``, ``INVALID_CHECKSUM``,
            ``INVALID_PREFIX`` or ``INVALID_SEED``.
    """
    return KeyPair.from_seed(src)


def from_raw_seed(role: Prefix, seed: bytes | bytearray) -> KeyPair:
    return KeyPair.from_raw_seed(role, seed)


def from_public(src: str | bytes | bytearray) -> KeyPair:
    """Import a verify-only identity from an encoded public key."""
    return KeyPair.from_public(src)


def encode(data: bytes | bytearray) -> str:
    """Encode a signature or nonce as standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode(text: str | bytes) -> bytes:
    """Decode base64 text produced by :func:`encode`.

    Raises:
        NKeysError: ``INVALID_ENCODING`` if *text* is not valid base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise NKeysError(NKeysErrorCode.INVALID_ENCODING, f"invalid base64: {exc}") from exc


def is_valid_public_key(src: str | bytes, role: Prefix | None = None) -> bool:
    """Check whether *src* is an encoded public key, optionally of *role*.

    Never raises for malformed input.
    """
    try:
        decoded_role, _ = Codec.decode_public_key(src)
    except NKeysError:
        return False
    return role is None or decoded_role == role


def is_valid_public_operator_key(src: str | bytes) -> bool:
    return is_valid_public_key(src, Prefix.OPERATOR)


def is_valid_public_account_key(src: str | bytes) -> bool:
    return is_valid_public_key(src, Prefix.ACCOUNT)


def is_valid_public_user_key(src: str | bytes) -> bool:
    return is_valid_public_key(src, Prefix.USER)


def is_valid_public_cluster_key(src: str | bytes) -> bool:
    return is_valid_public_key(src, Prefix.CLUSTER)


def is_valid_public_server_key(src: str | bytes) -> bool:
    return is_valid_public_key(src, Prefix.SERVER)


def compatible_key_pair(kp: KeyPair, *roles: Prefix) -> None:
    """Require *kp* to have one of *roles*.

    Raises:
        NKeysError: ``INCOMPATIBLE_KEY`` otherwise.
    """
    if kp.role not in roles:
        expected = ", ".join(r.name for r in roles) or "nothing"
        raise NKeysError(
            NKeysErrorCode.INCOMPATIBLE_KEY,
            f"{kp.role.name} key pair where {expected} was expected",
        )
