"""nkeys Python SDK.

Role-typed Ed25519 identities for operators, accounts, users, clusters and
servers: generation, import from encoded seeds or public keys, signing,
verification and in-place clearing of secret material.

Quick start::

    from nkeys_sdk import create_user, from_public

    user = create_user()
    sig = user.sign(b"nonce")

    verifier = from_public(user.get_public_key())
    assert verifier.verify(b"nonce", sig)
    user.clear()
"""

from nkeys_sdk.codec import Codec
from nkeys_sdk.errors import NKeysError, NKeysErrorCode
from nkeys_sdk.identity import (
    compatible_key_pair,
    create_account,
    create_cluster,
    create_operator,
    create_pair,
    create_server,
    create_user,
    decode,
    encode,
    from_public,
    from_raw_seed,
    from_seed,
    is_valid_public_account_key,
    is_valid_public_cluster_key,
    is_valid_public_key,
    is_valid_public_operator_key,
    is_valid_public_server_key,
    is_valid_public_user_key,
)
from nkeys_sdk.keypair import KeyPair
from nkeys_sdk.prefix import Prefix
from nkeys_sdk.types import PublicKey, Signature, SignedNonce

__all__ = [
    # Codec
    "Codec",
    "Prefix",
    # Errors
    "NKeysError",
    "NKeysErrorCode",
    # Key pairs
    "KeyPair",
    "create_pair",
    "create_operator",
    "create_account",
    "create_user",
    "create_cluster",
    "create_server",
    "from_seed",
    "from_raw_seed",
    "from_public",
    # Generic text codec
    "encode",
    "decode",
    # Validation
    "compatible_key_pair",
    "is_valid_public_key",
    "is_valid_public_operator_key",
    "is_valid_public_account_key",
    "is_valid_public_user_key",
    "is_valid_public_cluster_key",
    "is_valid_public_server_key",
    # Types
    "PublicKey",
    "Signature",
    "SignedNonce",
]

__version__ = "0.1.0"
