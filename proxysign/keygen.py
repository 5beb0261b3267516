import logging
import secrets
from dataclasses import dataclass

from proxysign.errors import NonceExhaustedError

logger = logging.getLogger(__name__)

# consecutive repeats tolerated from a nonce source before giving up
MAX_NONCE_DRAWS = 1000


@dataclass(frozen=True)
class PrincipalKeyPair:
    """Delegator key pair: secret x, public y = g^x mod p."""
    x: int
    y: int


def random_nonce(modulus):
    """Uniform secret integer in [2, modulus - 2] by rejection sampling.

    Draws modulus.bit_length() bits from the OS CSPRNG and discards anything
    outside the range, so each call is an independent draw.
    """
    if modulus < 4:
        raise ValueError(f"[2, {modulus - 2}] is empty")
    bits = modulus.bit_length()
    while True:
        value = secrets.randbits(bits)
        if 2 <= value <= modulus - 2:
            return value


def gen_x(p):
    """Private key: random integer in [2, p - 2]."""
    return random_nonce(p)


def gen_y(g, x, p):
    """Public key y = g^x mod p."""
    return pow(g, x, p)


def generate_key_pair(domain):
    x = gen_x(domain.p)
    return PrincipalKeyPair(x=x, y=gen_y(domain.g, x, domain.p))


class NonceLedger:
    """Hand out one-time nonces from [2, modulus - 2], never the same one twice."""

    def __init__(self, modulus, source=random_nonce):
        self.modulus = modulus
        self._source = source
        self._used = set()

    @property
    def capacity(self):
        return self.modulus - 3

    def __len__(self):
        return len(self._used)

    def draw(self):
        if len(self._used) >= self.capacity:
            raise NonceExhaustedError(f"all {self.capacity} nonces modulo {self.modulus} are used")
        for _ in range(MAX_NONCE_DRAWS):
            value = self._source(self.modulus)
            if not 2 <= value <= self.modulus - 2:
                raise ValueError(f"nonce source returned {value}, outside [2, {self.modulus - 2}]")
            if value not in self._used:
                self._used.add(value)
                return value
            logger.debug("nonce source repeated a used value, drawing again")
        raise NonceExhaustedError(f"no fresh nonce after {MAX_NONCE_DRAWS} draws")
