import logging
from dataclasses import dataclass

from proxysign.errors import DelegationVerificationError
from proxysign.keygen import NonceLedger, random_nonce

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProxyCredential:
    """Proxy key (r, s): r = g^k mod p, s = (x + k*r) mod q."""
    r: int
    s: int


def gen_r(g, k, p):
    return pow(g, k, p)


def gen_s(x, k, r, q):
    return (x + k * r) % q


def credential_holds(domain, y, credential):
    """g^s == y * r^r  (mod p)"""
    p = domain.p
    left = pow(domain.g, credential.s, p)
    right = (y % p) * pow(credential.r, credential.r, p) % p
    return left == right


class DelegationIssuer:
    """Delegator side: derive proxy credentials from the private key x.

    Every k drawn by one issuer is remembered, so no two credentials from the
    same key share a nonce.
    """

    def __init__(self, domain, key_pair, nonce_source=random_nonce):
        self.domain = domain
        self.key_pair = key_pair
        self._nonces = NonceLedger(domain.q, nonce_source)

    def issue(self):
        """Return a verified ProxyCredential or raise DelegationVerificationError."""
        p, q, g = self.domain.p, self.domain.q, self.domain.g
        x, y = self.key_pair.x, self.key_pair.y

        k = self._nonces.draw()
        r = gen_r(g, k, p)
        s = gen_s(x, k, r, q)
        credential = ProxyCredential(r=r, s=s)
        logger.debug(f"k = {k}")
        logger.debug(f"r = {r}")
        logger.debug(f"s = {s}")

        if not credential_holds(self.domain, y, credential):
            logger.error("Generated proxy key verification failed")
            raise DelegationVerificationError("generated proxy key does not satisfy g^s = y * r^r (mod p)")
        return credential
