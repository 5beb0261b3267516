import hashlib

import pytest

from proxysign.delegation import DelegationIssuer, ProxyCredential
from proxysign.digest import digest_int, int_to_signed_bytes
from proxysign.errors import DigestUnavailableError, MalformedKeyError, NonceExhaustedError
from proxysign.keygen import generate_key_pair
from proxysign.sign import ProxySigner, Signature
from proxysign.verifier import SignatureVerifier, gen_value

MESSAGE = b"Pelnomocnictwo do podpisania umowy nr 17/2024"


@pytest.mark.parametrize("value,encoded", [
    (0, b"\x00"),
    (9, b"\x09"),
    (127, b"\x7f"),
    (128, b"\x00\x80"),
    (255, b"\x00\xff"),
    (256, b"\x01\x00"),
])
def test_signed_big_endian_encoding(value, encoded):
    assert int_to_signed_bytes(value) == encoded


def test_digest_is_unsigned_sha256_of_message_and_value():
    expected = int.from_bytes(hashlib.sha256(b"abc" + b"\x00\x80").digest(), "big")
    assert digest_int(b"abc", 128) == expected
    assert digest_int(b"abc", 128) >= 0


@pytest.mark.parametrize("name", ["NOPE", "SHA1", "Hash", "BLAKE2s"])
def test_unusable_digest_algorithms(name):
    with pytest.raises(DigestUnavailableError):
        digest_int(b"abc", 1, name)


def test_small_domain_scenario(tiny_domain, tiny_key_pair, fixed_nonce):
    credential = ProxyCredential(r=8, s=8)
    signature = ProxySigner(tiny_domain, credential, fixed_nonce(5)).sign(MESSAGE)

    e = digest_int(MESSAGE, 9)
    assert signature == Signature(sp=(5 + 8 * e) % 11, e=e, r=8)

    verifier = SignatureVerifier(tiny_domain, tiny_key_pair.y)
    assert verifier.recover_commitment(signature) == 9
    result = verifier.verify(signature, MESSAGE)
    assert result.is_valid
    assert result.e_prime == e
    assert result.value == 9


@pytest.mark.parametrize("message", [b"", b"\x00", MESSAGE, bytes(range(256)) * 40])
def test_round_trip(safe_domain, message):
    pair = generate_key_pair(safe_domain)
    credential = DelegationIssuer(safe_domain, pair).issue()
    signature = ProxySigner(safe_domain, credential).sign(message)
    assert SignatureVerifier(safe_domain, pair.y).verify(signature, message).is_valid


@pytest.fixture
def signed(safe_domain, fixed_nonce):
    pair = generate_key_pair(safe_domain)
    credential = DelegationIssuer(safe_domain, pair, fixed_nonce(123)).issue()
    signature = ProxySigner(safe_domain, credential, fixed_nonce(456)).sign(MESSAGE)
    verifier = SignatureVerifier(safe_domain, pair.y)
    assert verifier.verify(signature, MESSAGE).is_valid
    return verifier, signature


def test_flipped_message_byte_is_rejected(signed):
    verifier, signature = signed
    tampered = bytearray(MESSAGE)
    tampered[3] ^= 0x01
    assert not verifier.verify(signature, bytes(tampered)).is_valid


def test_incremented_sp_is_rejected(signed):
    verifier, signature = signed
    bad = Signature(sp=signature.sp + 1, e=signature.e, r=signature.r)
    assert not verifier.verify(bad, MESSAGE).is_valid


def test_incremented_e_is_rejected(signed):
    verifier, signature = signed
    bad = Signature(sp=signature.sp, e=signature.e + 1, r=signature.r)
    assert not verifier.verify(bad, MESSAGE).is_valid


def test_incremented_r_is_rejected(signed):
    verifier, signature = signed
    bad = Signature(sp=signature.sp, e=signature.e, r=signature.r + 1)
    assert not verifier.verify(bad, MESSAGE).is_valid


def test_wrong_public_key_is_rejected(signed, safe_domain):
    verifier, signature = signed
    other = SignatureVerifier(safe_domain, verifier.y * 2 % safe_domain.p)
    assert not other.verify(signature, MESSAGE).is_valid


def test_gen_value_uses_r_times_e_exponent(tiny_domain):
    # g^sp * y^-e * r^-(r*e) with sp=3, e=2, y=18, r=8 over p=23
    p = tiny_domain.p
    expected = pow(2, 3, p) * pow(pow(18, 2, p), -1, p) * pow(pow(8, 16, p), -1, p) % p
    assert gen_value(2, 3, 18, 8, 2, p) == expected


def test_zero_base_is_malformed(tiny_domain):
    signature = Signature(sp=1, e=2, r=23)
    with pytest.raises(MalformedKeyError):
        SignatureVerifier(tiny_domain, 18).verify(signature, MESSAGE)
    with pytest.raises(MalformedKeyError):
        SignatureVerifier(tiny_domain, 0).verify(Signature(sp=1, e=2, r=8), MESSAGE)


def test_signer_never_reuses_l(tiny_domain):
    signer = ProxySigner(tiny_domain, ProxyCredential(r=8, s=8))
    for _ in range(8):
        signer.sign(MESSAGE)
    assert signer.signatures_issued == 8
    with pytest.raises(NonceExhaustedError):
        signer.sign(MESSAGE)
