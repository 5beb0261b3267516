import logging
from dataclasses import dataclass

from proxysign.digest import DEFAULT_ALGORITHM, digest_int
from proxysign.keygen import NonceLedger, random_nonce

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Signature:
    """Proxy signature (sp, e, r)."""
    sp: int
    e: int
    r: int


class ProxySigner:
    """Proxy side: sign documents with one proxy credential."""

    def __init__(self, domain, credential, nonce_source=random_nonce, algorithm=DEFAULT_ALGORITHM):
        self.domain = domain
        self.credential = credential
        self.algorithm = algorithm
        self._nonces = NonceLedger(domain.q, nonce_source)

    def sign(self, message):
        """sp = l + s * H(m || g^l) mod q, with a fresh l per call."""
        p, q, g = self.domain.p, self.domain.q, self.domain.g
        l = self._nonces.draw()
        rp = pow(g, l, p)
        e = digest_int(message, rp, self.algorithm)
        sp = (l + self.credential.s * e) % q
        logger.debug(f"l = {l}")
        logger.debug(f"rp = {rp}")
        logger.debug(f"e = {e}")
        logger.debug(f"e(hex) = {e:x}")
        logger.debug(f"sp = {sp}")
        return Signature(sp=sp, e=e, r=self.credential.r)

    @property
    def signatures_issued(self):
        return len(self._nonces)
