"""Tests for nkeys_sdk.identity: known vectors, base64 codec, validation."""

from __future__ import annotations

import os

import pytest

from nkeys_sdk.codec import Codec
from nkeys_sdk.errors import NKeysError, NKeysErrorCode
from nkeys_sdk.identity import (
    compatible_key_pair,
    create_account,
    create_pair,
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
from nkeys_sdk.prefix import Prefix

_VERIFY_VECTOR = {
    "seed": "SAAFYOZ5U4UBAJMHPITLSKDWAFBJNWH53K7LPZDQKOC5TXAGBIP4DY4WCA",
    "public_key": "AAASUT7FDZDS6UCTBE7JQS2G6KUZBJC5YW7VFVK45JLUK3UDVA6NXJWD",
    "private_key": (
        "PBODWPNHFAICLB32E24SQ5QBIKLNR7O2X236I4CTQXM5YBQKD7A6GAJKJ7SR4RZPKBJQSPUY"
        "JNDPFKMQURO4LP2S2VOOUV2FN2B2QPG3AHUA"
    ),
    "nonce": "uPMbFqF4nSX75B0Nlk9uug==",
    "sig": "y9t/0VxLZET6fYlSL7whq52TSv8tP7FBXZdqbQhfdpKCa3pveV7889zqkpiQcv8ivwtACQwumPe6EgrxFc7yDw==",
}

_ALBERTOR_VECTOR = {
    "seed": "SUAGC3DCMVZHI33SMFWGEZLSORXXEYLMMJSXE5DPOJQWYYTFOJ2G64VAPY",
    "public_key": "UAHJLSMYZDJCBHQ2SARL37IEALR3TI7VVPZ2MJ7F4SZKNOG7HJJIYW5T",
    "private_key": (
        "PBQWYYTFOJ2G64TBNRRGK4TUN5ZGC3DCMVZHI33SMFWGEZLSORXXEDUVZGMMRURATYNJAIV57U"
        "CAFY5ZUP22X45GE7S6JMVGXDPTUUUMRKXA"
    ),
}


class TestKnownVectors:
    """Interoperability with other nkeys implementations."""

    def test_encoded_seed_returns_stable_values(self) -> None:
        encoded = Codec.encode_seed(Prefix.USER, b"albertoralbertoralbertoralbertor")
        assert encoded == _ALBERTOR_VECTOR["seed"]

        kp = from_seed(encoded)
        assert kp.get_seed().decode() == _ALBERTOR_VECTOR["seed"]
        assert kp.get_public_key() == _ALBERTOR_VECTOR["public_key"]
        assert kp.get_private_key() == _ALBERTOR_VECTOR["private_key"]

    def test_cross_implementation_signature(self) -> None:
        nonce = _VERIFY_VECTOR["nonce"].encode()
        sig = decode(_VERIFY_VECTOR["sig"])
        assert len(sig) == 64

        pk = from_public(_VERIFY_VECTOR["public_key"])
        assert pk.verify(nonce, sig) is True

        seed = from_seed(_VERIFY_VECTOR["seed"].encode())
        assert seed.verify(nonce, sig) is True
        assert seed.get_public_key() == _VERIFY_VECTOR["public_key"]
        assert seed.get_private_key() == _VERIFY_VECTOR["private_key"]

        assert encode(seed.sign(nonce)) == _VERIFY_VECTOR["sig"]

    def test_vector_roles(self) -> None:
        assert from_seed(_VERIFY_VECTOR["seed"]).role is Prefix.ACCOUNT
        assert from_seed(_ALBERTOR_VECTOR["seed"]).role is Prefix.USER


class TestGenericTextCodec:
    """Standard base64 for signatures and nonces."""

    @pytest.mark.parametrize("size", [0, 1, 2, 3, 16, 64])
    def test_roundtrip(self, size: int) -> None:
        data = os.urandom(size)
        assert decode(encode(data)) == data

    def test_padded_output(self) -> None:
        assert encode(b"\x00" * 16).endswith("==")

    @pytest.mark.parametrize("text", ["not base64!", "abc", "y9t/0VxL*"])
    def test_invalid_input_raises(self, text: str) -> None:
        with pytest.raises(NKeysError) as excinfo:
            decode(text)
        assert excinfo.value.code is NKeysErrorCode.INVALID_ENCODING


class TestPublicKeyValidation:
    """Role-aware validity checks."""

    def test_valid_for_matching_role(self) -> None:
        user = create_user().get_public_key()
        assert is_valid_public_key(user)
        assert is_valid_public_key(user, Prefix.USER)
        assert is_valid_public_user_key(user)
        assert not is_valid_public_account_key(user)
        assert not is_valid_public_operator_key(user)
        assert not is_valid_public_cluster_key(user)
        assert not is_valid_public_server_key(user)

    @pytest.mark.parametrize("role", [Prefix.OPERATOR, Prefix.ACCOUNT, Prefix.CLUSTER, Prefix.SERVER])
    def test_each_role(self, role: Prefix) -> None:
        assert is_valid_public_key(create_pair(role).get_public_key(), role)

    def test_seed_is_not_a_public_key(self) -> None:
        assert not is_valid_public_key(create_user().get_seed())

    @pytest.mark.parametrize("text", ["", "U", "hello", _ALBERTOR_VECTOR["public_key"][:-1] + "A"])
    def test_malformed_input(self, text: str) -> None:
        assert not is_valid_public_key(text)

    @pytest.mark.parametrize("value", [None, 42, ["U"]])
    def test_non_text_input(self, value: object) -> None:
        assert is_valid_public_key(value) is False


class TestCompatibleKeyPair:
    """Role guards for callers that accept several kinds of pair."""

    def test_accepts_listed_role(self) -> None:
        compatible_key_pair(create_account(), Prefix.OPERATOR, Prefix.ACCOUNT)

    def test_rejects_other_role(self) -> None:
        with pytest.raises(NKeysError) as excinfo:
            compatible_key_pair(create_user(), Prefix.OPERATOR, Prefix.ACCOUNT)
        assert excinfo.value.code is NKeysErrorCode.INCOMPATIBLE_KEY
        assert "USER" in str(excinfo.value)


class TestRawSeed:
    """Importing raw seed bytes."""

    def test_matches_encoded_seed(self) -> None:
        kp = from_raw_seed(Prefix.USER, b"albertoralbertoralbertoralbertor")
        assert kp.get_seed().decode() == _ALBERTOR_VECTOR["seed"]
        assert kp.get_public_key() == _ALBERTOR_VECTOR["public_key"]
