"""
Key, credential and signature artifacts.

Every artifact is a '#'-separated list of lower-case hex integers:
    public key   p#g#q#y
    private key  x
    proxy key    r#s
    signature    sp#e#r
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from proxysign.delegation import ProxyCredential
from proxysign.errors import InputIOError, MalformedKeyError, OutputIOError
from proxysign.gen_group import DomainParameters
from proxysign.sign import Signature

logger = logging.getLogger(__name__)

SEPARATOR = "#"
_HEX = re.compile(r"-?[0-9a-fA-F]+")


@dataclass(frozen=True)
class PublicKey:
    domain: DomainParameters
    y: int


def _to_hex(value):
    return format(value, "x")


def _fields(text, count, kind):
    parts = text.strip().split(SEPARATOR)
    if len(parts) != count:
        raise MalformedKeyError(f"{kind} needs {count} field(s), found {len(parts)}")
    values = []
    for part in parts:
        if not _HEX.fullmatch(part):
            raise MalformedKeyError(f"{kind} field {part!r} is not a hex integer")
        values.append(int(part, 16))
    return values


def encode_public_key(public_key):
    d = public_key.domain
    return SEPARATOR.join(_to_hex(v) for v in (d.p, d.g, d.q, public_key.y))


def decode_public_key(text):
    p, g, q, y = _fields(text, 4, "public key")
    if p < 3:
        raise MalformedKeyError(f"public key modulus p={p} is not an odd prime")
    if q < 2:
        raise MalformedKeyError(f"public key subgroup order q={q} is below 2")
    if not 1 < g < p:
        raise MalformedKeyError(f"public key generator g={g} is outside (1, p)")
    return PublicKey(domain=DomainParameters(p=p, q=q, g=g), y=y)


def encode_private_key(x):
    return _to_hex(x)


def decode_private_key(text):
    (x,) = _fields(text, 1, "private key")
    return x


def encode_credential(credential):
    return SEPARATOR.join(_to_hex(v) for v in (credential.r, credential.s))


def decode_credential(text):
    r, s = _fields(text, 2, "proxy key")
    if r <= 0:
        raise MalformedKeyError(f"proxy key r={r} must be positive")
    return ProxyCredential(r=r, s=s)


def encode_signature(signature):
    return SEPARATOR.join(_to_hex(v) for v in (signature.sp, signature.e, signature.r))


def decode_signature(text):
    sp, e, r = _fields(text, 3, "signature")
    if r <= 0:
        raise MalformedKeyError(f"signature r={r} must be positive")
    return Signature(sp=sp, e=e, r=r)


def read_bytes(path):
    """Whole file content; InputIOError if it is missing or unreadable."""
    path = Path(path)
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise InputIOError(path, "file does not exist") from e
    except OSError as e:
        raise InputIOError(path, e.strerror or str(e)) from e


def read_text(path):
    data = read_bytes(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedKeyError(f"{path}: not a text artifact") from e


def write_text(path, text):
    path = Path(path)
    try:
        path.write_bytes(text.encode("utf-8"))
    except OSError as e:
        raise OutputIOError(path, e.strerror or str(e)) from e
    logger.debug(f"wrote {path}")
    return path


def load_public_key(path):
    return decode_public_key(read_text(path))


def load_private_key(path):
    return decode_private_key(read_text(path))


def load_credential(path):
    return decode_credential(read_text(path))


def load_signature(path):
    return decode_signature(read_text(path))
