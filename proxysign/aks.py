"""
Deterministic AKS primality test.

The polynomial step works in Z_n[X] / (X^r - 1). Polynomials are lists of r
coefficients; products are computed by packing the coefficients into a single
integer (Kronecker substitution), so one big-int multiplication replaces the
r^2 coefficient loop.
"""

import logging
import math

from sympy import n_order, perfect_power, totient

logger = logging.getLogger(__name__)


def _floor_log2(n):
    return n.bit_length() - 1


def find_r(n):
    """Smallest r coprime to n with ord_r(n) > floor(log2 n)^2."""
    max_k = _floor_log2(n) ** 2
    r = 2
    while True:
        if math.gcd(r, n) == 1 and n_order(n, r) > max_k:
            return r
        r += 1


def _slot_bytes(r, n):
    # each folded coefficient is a sum of r products below n^2
    return ((r * (n - 1) ** 2).bit_length() + 8) // 8


def _pack(coeffs, width):
    return int.from_bytes(b"".join(c.to_bytes(width, "little") for c in coeffs), "little")


def _unpack(value, r, width, n):
    data = value.to_bytes(r * width, "little")
    return [int.from_bytes(data[i * width:(i + 1) * width], "little") % n for i in range(r)]


def _poly_mulmod(a, b, r, n, width):
    product = _pack(a, width) * _pack(b, width)
    shift = r * width * 8
    # X^r == 1: fold coefficients r..2r-2 back onto 0..r-2
    folded = (product & ((1 << shift) - 1)) + (product >> shift)
    return _unpack(folded, r, width, n)


def _poly_powmod(base, exponent, r, n, width):
    result = [1] + [0] * (r - 1)
    for bit in bin(exponent)[2:]:
        result = _poly_mulmod(result, result, r, n, width)
        if bit == "1":
            result = _poly_mulmod(result, base, r, n, width)
    return result


def congruence_holds(n, r, a, width=None):
    """Check (X + a)^n == X^n + a  (mod X^r - 1, n)."""
    width = width or _slot_bytes(r, n)
    base = [0] * r
    base[0] = a % n
    base[1 % r] = (base[1 % r] + 1) % n
    lhs = _poly_powmod(base, n, r, n, width)

    rhs = [0] * r
    rhs[0] = a % n
    rhs[n % r] = (rhs[n % r] + 1) % n
    return lhs == rhs


def is_prime(n):
    """Return True iff n is prime. No error probability."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    if perfect_power(n):
        return False

    r = find_r(n)
    for a in range(2, r + 1):
        d = math.gcd(a, n)
        if 1 < d < n:
            return False
    if r >= n:
        return True

    limit = math.floor(math.sqrt(int(totient(r))) * math.log2(n))
    width = _slot_bytes(r, n)
    logger.debug(f"AKS n={n}: r={r}, checking a=1..{limit}")
    for a in range(1, limit + 1):
        if not congruence_holds(n, r, a, width):
            logger.debug(f"AKS n={n}: congruence fails at a={a}")
            return False
    return True
