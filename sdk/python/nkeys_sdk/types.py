"""Pydantic v2 types for nkeys on the wire.

Public keys are carried as their encoded text, signatures as standard
base64. These types let application models validate nkeys at the boundary
instead of passing unchecked strings around.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    GetCoreSchemaHandler,
    field_serializer,
)
from pydantic_core import CoreSchema, core_schema

from nkeys_sdk.codec import Codec
from nkeys_sdk.errors import NKeysError
from nkeys_sdk.identity import decode, encode, from_public
from nkeys_sdk.keypair import KeyPair
from nkeys_sdk.prefix import Prefix

SIGNATURE_LENGTH = 64


# ---------------------------------------------------------------------------
# Annotated scalar types
# ---------------------------------------------------------------------------


class PublicKey(str):
    """An encoded nkey public key (``U...``, ``A...``, ...).

    Subclasses ``str`` so it serialises natively as a JSON string while
    still enforcing format and checksum on creation.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(cls._validate)

    @classmethod
    def _validate(cls, v: Any) -> "PublicKey":
        if isinstance(v, (bytes, bytearray)):
            v = bytes(v).decode("ascii", errors="replace")
        if not isinstance(v, str):
            raise ValueError("public key must be a string")
        Codec.decode_public_key(v)
        return cls(v)

    @property
    def role(self) -> Prefix:
        """The role encoded in the key's prefix."""
        return Codec.decode_public_key(self)[0]

    @property
    def raw(self) -> bytes:
        """The raw 32-byte Ed25519 public key."""
        return Codec.decode_public_key(self)[1]


class Signature(bytes):
    """64-byte Ed25519 signature with base64 serialisation."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(cls._validate)

    @classmethod
    def _validate(cls, v: Any) -> "Signature":
        if isinstance(v, str):
            v = decode(v)
        if not isinstance(v, (bytes, bytearray)):
            raise ValueError("signature must be bytes or base64 text")
        if len(v) != SIGNATURE_LENGTH:
            raise ValueError(f"signature must be {SIGNATURE_LENGTH} bytes, got {len(v)}")
        return cls(v)

    def b64(self) -> str:
        return encode(self)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class SignedNonce(BaseModel):
    """A server nonce signed by an nkey, as sent when authenticating."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    public_key: PublicKey
    nonce: str = Field(min_length=1)
    signature: Signature = Field(alias="sig")

    @field_serializer("signature")
    def _serialize_signature(self, v: Signature) -> str:
        return encode(v)

    @classmethod
    def create(cls, kp: KeyPair, nonce: str) -> "SignedNonce":
        """Sign the UTF-8 bytes of *nonce* with a seed-capable pair."""
        signature = kp.sign(nonce.encode("utf-8"))
        return cls(public_key=kp.get_public_key(), nonce=nonce, signature=signature)

    def verify(self) -> bool:
        """Check the signature against the embedded public key.

        Returns ``False`` when the key's role cannot sign, such as a curve key.
        """
        try:
            kp = from_public(self.public_key)
        except NKeysError:
            return False
        try:
            return kp.verify(self.nonce.encode("utf-8"), self.signature)
        finally:
            kp.clear()
