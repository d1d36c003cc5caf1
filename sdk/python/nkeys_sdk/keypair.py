"""Role-typed Ed25519 key pairs.

:class:`KeyPair` holds either a raw 32-byte seed (full signing identity) or
a raw 32-byte public key (verification only). The bytes live in a private
``bytearray`` owned by the pair; :meth:`KeyPair.clear` overwrites it with
zeros in place and every later operation raises ``CLEARED_PAIR``.

PyNaCl key objects are built per call and never cached on the pair, so the
buffer is the only long-lived copy of the secret held by this object.
"""

from __future__ import annotations

import logging
import threading

from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey
from nacl.utils import random as random_bytes

from nkeys_sdk.codec import SEED_LENGTH, Codec
from nkeys_sdk.errors import NKeysError, NKeysErrorCode
from nkeys_sdk.prefix import Prefix

logger = logging.getLogger(__name__)

# Roles that sign with Ed25519. CURVE keys are X25519 and cannot sign.
_SIGNING_ROLES = frozenset(
    {Prefix.OPERATOR, Prefix.ACCOUNT, Prefix.USER, Prefix.CLUSTER, Prefix.SERVER}
)


def _signing_role(role: int) -> Prefix:
    if role not in _SIGNING_ROLES:
        raise NKeysError(NKeysErrorCode.INVALID_PREFIX, f"{role!r} is not a signing key role")
    return Prefix(role)


class KeyPair:
    """An nkey identity, either seed-capable or public-only.

    Pairs are created via :meth:`generate`, :meth:`from_seed`,
    :meth:`from_raw_seed` or :meth:`from_public`. A single lock guards the
    buffer and the cleared flag so that :meth:`clear` never interleaves with
    a read of the key material.
    """

    __slots__ = ("_role", "_buffer", "_seed_capable", "_cleared", "_lock")

    def __init__(self, role: Prefix, material: bytes | bytearray, *, seed_capable: bool) -> None:
        self._role = role
        self._buffer = bytearray(material)
        self._seed_capable = seed_capable
        self._cleared = False
        self._lock = threading.Lock()

    # ----- constructors ----------------------------------------------------

    @classmethod
    def generate(cls, role: Prefix) -> "KeyPair":
        """Create a new pair for *role* from 32 random bytes."""
        role = _signing_role(role)
        return cls(role, random_bytes(SEED_LENGTH), seed_capable=True)._logged("generated")

    @classmethod
    def from_seed(cls, src: str | bytes | bytearray) -> "KeyPair":
        """Create a seed-capable pair from an encoded seed (``S...``)."""
        role, seed = Codec.decode_seed(src)
        return cls(_signing_role(role), seed, seed_capable=True)._logged("imported")

    @classmethod
    def from_raw_seed(cls, role: Prefix, seed: bytes | bytearray) -> "KeyPair":
        """Create a seed-capable pair from a raw 32-byte seed."""
        role = _signing_role(role)
        if len(seed) != SEED_LENGTH:
            raise NKeysError(NKeysErrorCode.INVALID_SEED, f"seed must be {SEED_LENGTH} bytes, got {len(seed)}")
        return cls(role, seed, seed_capable=True)._logged("imported")

    @classmethod
    def from_public(cls, src: str | bytes | bytearray) -> "KeyPair":
        """Create a verify-only pair from an encoded public key."""
        role, public_key = Codec.decode_public_key(src)
        return cls(_signing_role(role), public_key, seed_capable=False)._logged("imported verify-only")

    # ----- properties ------------------------------------------------------

    @property
    def role(self) -> Prefix:
        return self._role

    @property
    def is_cleared(self) -> bool:
        return self._cleared

    @property
    def can_sign(self) -> bool:
        """``True`` for seed-capable pairs, ``False`` for public-only ones."""
        return self._seed_capable

    # ----- internal helpers ------------------------------------------------

    def _logged(self, action: str) -> "KeyPair":
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s %s key pair %s", action, self._role.name, self.get_public_key())
        return self

    # Callers hold ``self._lock``.

    def _check(self, *, needs_seed: bool = False) -> None:
        if self._cleared:
            raise NKeysError(NKeysErrorCode.CLEARED_PAIR)
        if needs_seed and not self._seed_capable:
            raise NKeysError(NKeysErrorCode.PUBLIC_KEY_ONLY)

    def _signing_key(self) -> SigningKey:
        return SigningKey(bytes(self._buffer))

    def _raw_public_key(self) -> bytes:
        if self._seed_capable:
            return bytes(self._signing_key().verify_key)
        return bytes(self._buffer)

    # ----- accessors -------------------------------------------------------

    def get_public_key(self) -> str:
        """Return the encoded public key, e.g. ``UAHJ...``."""
        with self._lock:
            self._check()
            return Codec.encode_public_key(self._role, self._raw_public_key())

    def get_seed(self) -> bytes:
        """Return the encoded seed as ASCII bytes."""
        with self._lock:
            self._check(needs_seed=True)
            return Codec.encode_seed(self._role, self._buffer).encode("ascii")

    def get_private_key(self) -> str:
        """Return the encoded 64-byte expanded private key (``P...``)."""
        with self._lock:
            self._check(needs_seed=True)
            sk = self._signing_key()
            return Codec.encode_private_key(bytes(self._buffer) + bytes(sk.verify_key))

    # ----- signing ---------------------------------------------------------

    def sign(self, message: bytes) -> bytes:
        """Sign *message*.

        Returns:
            The 64-byte Ed25519 signature.
        """
        with self._lock:
            self._check(needs_seed=True)
            return self._signing_key().sign(bytes(message)).signature

    def verify(self, message: bytes, signature: bytes) -> bool:
        """Verify an Ed25519 *signature* over *message*.

        Returns:
            ``True`` if the signature is valid, ``False`` otherwise
            (including signatures of the wrong length).
        """
        with self._lock:
            self._check()
            public_key = self._raw_public_key()
        try:
            VerifyKey(public_key).verify(bytes(message), bytes(signature))
        except (BadSignatureError, ValueError):
            return False
        return True

    # ----- lifecycle -------------------------------------------------------

    def clear(self) -> None:
        """Zero the key material in place. Safe to call more than once."""
        with self._lock:
            if self._cleared:
                return
            for i in range(len(self._buffer)):
                self._buffer[i] = 0
            self._cleared = True
        logger.debug("cleared %s key pair", self._role.name)

    def __repr__(self) -> str:
        if self._cleared:
            state = "cleared"
        elif self._seed_capable:
            state = "seed"
        else:
            state = "public"
        return f"<KeyPair role={self._role.name} {state}>"
