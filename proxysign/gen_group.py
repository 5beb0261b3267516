import logging
import secrets
from dataclasses import dataclass

from proxysign.aks import is_prime
from proxysign.errors import DomainParameterError
from proxysign.factorize import IntegerFactorizer

logger = logging.getLogger(__name__)

# 11 = 2 * 5 + 1 is the smallest prime with a usable q
MIN_BIT_LENGTH = 4
# nonces are drawn from [2, q - 2], which is empty below 5
MIN_SUBGROUP_ORDER = 5


@dataclass(frozen=True)
class DomainParameters:
    """Prime p, prime q | p - 1, and g of multiplicative order exactly q."""
    p: int
    q: int
    g: int


def order_is_exactly(num, q, p):
    """num^q == 1 (mod p) and num^a != 1 for every 1 <= a < q."""
    if pow(num, q, p) != 1:
        return False
    acc = 1
    for _ in range(1, q):
        acc = (acc * num) % p
        if acc == 1:
            return False
    return True


class DomainParameterBuilder:
    """Generate (p, q, g) the brute-force way.

    Every step is exhaustive search, so only primes of a few tens of bits are
    practical. The factorizer (and its cache) belongs to this builder.
    """

    def __init__(self, factorizer=None, primality=is_prime, randbits=secrets.randbits):
        self.factorizer = factorizer or IntegerFactorizer()
        self.is_prime = primality
        self._randbits = randbits

    def gen_p(self, bit_length):
        """Random prime of exactly bit_length bits."""
        if bit_length < MIN_BIT_LENGTH:
            raise DomainParameterError(f"bit length must be at least {MIN_BIT_LENGTH}, got {bit_length}")
        while True:
            candidate = self._randbits(bit_length)
            candidate |= (1 << (bit_length - 1)) | 1
            if self.is_prime(candidate):
                return candidate

    def gen_q(self, p):
        """Largest prime factor of p - 1."""
        factors = self.factorizer.factorize(p - 1, with_duplicates=False)
        return factors[-1]

    def gen_g(self, p, q):
        """Smallest num in [2, p - 2] whose order modulo p is exactly q."""
        for num in range(2, p - 1):
            if order_is_exactly(num, q, p):
                return num
        raise DomainParameterError(f"no element of order {q} other than p-1 exists modulo {p}")

    def build(self, bit_length):
        """gen_p -> gen_q -> gen_g, redrawing p until the domain is usable."""
        while True:
            p = self.gen_p(bit_length)
            q = self.gen_q(p)
            if q < MIN_SUBGROUP_ORDER:
                logger.debug(f"p={p}: q={q} leaves no room for nonces, drawing again")
                continue
            try:
                g = self.gen_g(p, q)
            except DomainParameterError as e:
                logger.debug(f"p={p}: {e}, drawing again")
                continue
            domain = DomainParameters(p=p, q=q, g=g)
            logger.debug(f"domain parameters: p={p} q={q} g={g}")
            return domain

    def validate(self, domain):
        """Check every invariant of a DomainParameters instance."""
        p, q, g = domain.p, domain.q, domain.g
        return (self.is_prime(p)
                and self.is_prime(q)
                and (p - 1) % q == 0
                and 1 < g < p
                and order_is_exactly(g, q, p))


def gen_p_q_g(bit_length):
    return DomainParameterBuilder().build(bit_length)
