import logging
from dataclasses import dataclass
from typing import Optional

from proxysign.digest import DEFAULT_ALGORITHM, digest_int
from proxysign.errors import MalformedKeyError

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Result of signature verification"""
    is_valid: bool
    e: int
    e_prime: int
    value: Optional[int] = None


def inverse_pow(base, exp, mod):
    """(base^exp)^-1 mod mod; base must be invertible."""
    if base % mod == 0:
        raise MalformedKeyError(f"{base} has no inverse modulo {mod}")
    return pow(pow(base, exp, mod), -1, mod)


def gen_value(g, sp, y, r, e, p):
    """g^sp * y^-e * r^-(r*e) mod p; equals rp for an honest signature."""
    return pow(g, sp, p) * inverse_pow(y, e, p) % p * inverse_pow(r, r * e, p) % p


class SignatureVerifier:
    """Check proxy signatures against the delegator's public key."""

    def __init__(self, domain, y, algorithm=DEFAULT_ALGORITHM):
        self.domain = domain
        self.y = y
        self.algorithm = algorithm

    def recover_commitment(self, signature):
        return gen_value(self.domain.g, signature.sp, self.y, signature.r, signature.e, self.domain.p)

    def verify(self, signature, message):
        """Recompute e' = H(m || value) and compare with the embedded e."""
        value = self.recover_commitment(signature)
        e_prime = digest_int(message, value, self.algorithm)
        logger.debug(f"e   = {signature.e}")
        logger.debug(f"e'  = {e_prime}")
        return VerificationResult(is_valid=signature.e == e_prime,
                                  e=signature.e,
                                  e_prime=e_prime,
                                  value=value)
