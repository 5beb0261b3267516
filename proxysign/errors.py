"""Exceptions raised by the proxy signature tools."""


class ProxySignError(Exception):
    """Base class for every error the package raises on purpose."""


class InputIOError(ProxySignError):
    """A key, credential, signature or message file is missing or unreadable."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class OutputIOError(ProxySignError):
    """An artifact could not be written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class MalformedKeyError(ProxySignError, ValueError):
    """Wrong field count or invalid hex in a key, credential or signature."""


class DomainParameterError(ProxySignError):
    """The requested domain (p, q, g) cannot be constructed."""


class DelegationError(ProxySignError):
    """Delegation failed; no proxy credential may be released."""


class DelegationVerificationError(DelegationError):
    """The issued credential does not satisfy g^s = y * r^r (mod p)."""


class DigestUnavailableError(ProxySignError):
    """The configured hash algorithm is missing or is not a 256-bit digest."""


class NonceExhaustedError(ProxySignError):
    """No fresh one-time nonce can be drawn for this key or credential."""
