import pytest

from proxysign.config import get_settings
from proxysign.gen_group import DomainParameters
from proxysign.keygen import PrincipalKeyPair


@pytest.fixture
def tiny_domain():
    # 22 = 2 * 11, 2^11 = 2048 = 89 * 23 + 1
    return DomainParameters(p=23, q=11, g=2)


@pytest.fixture
def tiny_key_pair():
    return PrincipalKeyPair(x=6, y=18)


@pytest.fixture
def safe_domain():
    # 2039 = 2 * 1019 + 1, and 2 is a quadratic residue since 2039 = 7 (mod 8)
    return DomainParameters(p=2039, q=1019, g=2)


@pytest.fixture
def fixed_nonce():
    """Nonce source that always answers the same value."""
    def make(value):
        return lambda modulus: value
    return make


@pytest.fixture
def sequence_nonce():
    """Nonce source replaying a fixed list of values."""
    def make(values):
        it = iter(values)
        return lambda modulus: next(it)
    return make


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
