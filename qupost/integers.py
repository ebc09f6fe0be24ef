"""
Greatest common divisor and least common multiple.

Operands are non-negative integers (Python ints or numpy integer scalars).
Results are Python ints, so products never overflow.

Conventions:
- gcd(0, k) = k and gcd(0, 0) = 0
- gcd of a single number is that number; gcd of nothing is an error
- lcm needs positive operands, except that lcm of a single number is that
  number, whatever its value
"""

import operator
from typing import Iterable, List, Optional

from .errors import EmptyInputError, InvalidArgumentError


# =============================================================================
# Operand checks
# =============================================================================

def as_integer(value, where: str) -> int:
    """Convert value to a Python int, refusing bools, floats and other non-integers."""
    if isinstance(value, bool):
        raise InvalidArgumentError(where, f"expected an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(where, f"expected an integer, got {value!r}") from None


def as_natural(value, where: str) -> int:
    """Like as_integer, but also refuses negative values."""
    value = as_integer(value, where)
    if value < 0:
        raise InvalidArgumentError(where, f"expected a non-negative integer, got {value}")
    return value


def _as_naturals(ns: Iterable[int], where: str) -> List[int]:
    return [as_natural(x, where) for x in ns]


# =============================================================================
# GCD
# =============================================================================

def _gcd(m: int, n: int) -> int:
    if m == 0 or n == 0:
        return max(m, n)

    while n:
        m, n = n, m % n
    return m


def gcd(m: int, n: int) -> int:
    """
    Greatest common divisor of two non-negative integers (Euclid).

    Args:
        m, n: Non-negative integers

    Returns:
        gcd(m, n); if either operand is 0 the other one is returned
    """
    return _gcd(as_natural(m, "gcd"), as_natural(n, "gcd"))


def gcd_list(ns: Iterable[int]) -> int:
    """
    Greatest common divisor of a collection of non-negative integers.

    Folds the pairwise gcd from left to right, starting from the first
    element.

    Args:
        ns: Non-empty collection of non-negative integers

    Returns:
        gcd of all numbers in ns

    Raises:
        EmptyInputError: if ns is empty
    """
    ns = _as_naturals(ns, "gcd_list")
    if len(ns) == 0:
        raise EmptyInputError("gcd_list", "gcd of an empty collection is undefined")

    result = ns[0]  # convention: gcd({n}) = n
    for x in ns[1:]:
        result = _gcd(result, x)
    return result


def is_coprime(a: int, b: int) -> bool:
    """True if a and b share no common factor, i.e. gcd(a, b) == 1."""
    return gcd(a, b) == 1


def mod_inverse(a: int, N: int) -> Optional[int]:
    """
    Modular inverse of a mod N using the extended Euclidean algorithm.

    Args:
        a: Number to invert
        N: Modulus, positive

    Returns:
        x such that (a * x) mod N == 1, or None if no inverse exists

    Raises:
        InvalidArgumentError: if N is 0
    """
    a = as_natural(a, "mod_inverse")
    N = as_natural(N, "mod_inverse")
    if N == 0:
        raise InvalidArgumentError("mod_inverse", "modulus must be positive")

    # Invariant: r0 == s0 * a (mod N) and r1 == s1 * a (mod N)
    r0, r1 = N, a % N
    s0, s1 = 0, 1
    while r1:
        q, rem = divmod(r0, r1)
        r0, r1 = r1, rem
        s0, s1 = s1, s0 - q * s1

    if r0 != 1:
        return None
    return s0 % N


# =============================================================================
# LCM
# =============================================================================

def lcm(m: int, n: int) -> int:
    """
    Least common multiple of two positive integers.

    Args:
        m, n: Positive integers

    Returns:
        lcm(m, n) = m * n / gcd(m, n)

    Raises:
        InvalidArgumentError: if m or n is 0
    """
    m = as_natural(m, "lcm")
    n = as_natural(n, "lcm")
    if m == 0 or n == 0:
        raise InvalidArgumentError("lcm", "lcm is only defined for positive integers")

    return m // _gcd(m, n) * n


def lcm_list(ns: Iterable[int]) -> int:
    """
    Least common multiple of a collection of positive integers.

    A single element is returned unchanged, even if it is 0. With two or
    more elements every one of them must be positive.

    Args:
        ns: Non-empty collection of integers

    Returns:
        lcm of all numbers in ns

    Raises:
        EmptyInputError: if ns is empty
        InvalidArgumentError: if ns has two or more elements and one is 0
    """
    ns = list(ns)
    if len(ns) == 0:
        raise EmptyInputError("lcm_list", "lcm of an empty collection is undefined")

    if len(ns) == 1:  # convention: lcm({n}) = n
        return as_integer(ns[0], "lcm_list")

    ns = _as_naturals(ns, "lcm_list")
    if 0 in ns:
        raise InvalidArgumentError("lcm_list", "lcm is only defined for positive integers")

    result = ns[0]
    for x in ns[1:]:
        result = result // _gcd(result, x) * x
    return result
