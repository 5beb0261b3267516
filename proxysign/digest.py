"""Message digest binding a message to a group element."""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

from proxysign.errors import DigestUnavailableError

DEFAULT_ALGORITHM = "SHA256"
DIGEST_BYTES = 32


def int_to_signed_bytes(value):
    """Minimal big-endian two's-complement encoding (128 -> b'\\x00\\x80')."""
    length = value.bit_length() // 8 + 1
    return value.to_bytes(length, "big", signed=True)


def _hash_algorithm(name):
    algorithm_cls = getattr(hashes, name, None)
    if not (isinstance(algorithm_cls, type) and issubclass(algorithm_cls, hashes.HashAlgorithm)):
        raise DigestUnavailableError(f"Algorithm {name} was not found!")
    try:
        algorithm = algorithm_cls()
    except TypeError as e:
        raise DigestUnavailableError(f"Algorithm {name} needs parameters: {e}") from e
    if algorithm.digest_size != DIGEST_BYTES:
        raise DigestUnavailableError(f"Algorithm {name} is not a 256-bit digest")
    return algorithm


def digest_int(message, value, algorithm=DEFAULT_ALGORITHM):
    """H(message || bytes(value)) read as an unsigned big-endian integer."""
    try:
        h = hashes.Hash(_hash_algorithm(algorithm))
    except UnsupportedAlgorithm as e:
        raise DigestUnavailableError(f"Algorithm {algorithm} is not supported by this runtime") from e
    h.update(bytes(message))
    h.update(int_to_signed_bytes(value))
    return int.from_bytes(h.finalize(), "big")
