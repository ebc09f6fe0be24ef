"""
Simple continued fractions.

Expansion turns a measured phase into its term sequence [a0, a1, a2, ...]
with x ≈ a0 + 1/(a1 + 1/(a2 + ...)); reconstruction evaluates such a
sequence back to a real value. The two are not exact inverses: expansion
stops early once floating point noise dominates, and reconstruction may use
only a prefix of the terms.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import EmptyInputError, InvalidArgumentError
from .integers import as_integer, as_natural

_logger = logging.getLogger(__name__)

# Stop the expansion once the next reciprocal exceeds this value
DEFAULT_CUTOFF = 1e5


def x2contfrac(x: float, n: int, cut: float = DEFAULT_CUTOFF) -> List[int]:
    """
    Continued fraction expansion of a real number.

    Each step takes floor(x) as the next term and replaces x by the
    reciprocal of the remainder. The expansion stops early, returning the
    terms collected so far, when that reciprocal is not finite (the
    remainder was zero) or is larger than cut.

    Args:
        x: Real number to expand (must be finite)
        n: Maximum number of terms, at least 1
        cut: Stop when the next reciprocal is greater than cut

    Returns:
        List of at most n integer terms

    Raises:
        InvalidArgumentError: if n is 0 or x is not finite

    Example:
        >>> x2contfrac(1.5, 5)
        [1, 2]
    """
    n = as_natural(n, "x2contfrac")
    if n == 0:
        raise InvalidArgumentError("x2contfrac", "number of terms must be positive")

    x = np.float64(x)
    if not np.isfinite(x):
        raise InvalidArgumentError("x2contfrac", f"cannot expand non-finite value {x}")

    terms = []
    with np.errstate(divide="ignore", over="ignore"):
        for i in range(n):
            floor = np.floor(x)
            # a float64 floor is an exact integer of any magnitude
            terms.append(int(floor))
            x = np.float64(1.0) / (x - floor)
            if not np.isfinite(x) or x > cut:
                if i + 1 < n:
                    _logger.debug("x2contfrac: stopped after %d of %d terms", i + 1, n)
                return terms

    return terms


def contfrac2x(cf: Sequence[int], n: Optional[int] = None) -> float:
    """
    Real value of a simple continued fraction.

    Evaluates cf[0] + 1/(cf[1] + 1/(... + 1/cf[n-1])) from the last term
    towards the first. A single term is returned as is.

    Args:
        cf: Term sequence, at least one term
        n: Number of leading terms to use; clamped to len(cf).
           None uses every term.

    Returns:
        The value as a float. A zero term past the first yields inf.

    Raises:
        EmptyInputError: if cf is empty
        InvalidArgumentError: if n is 0, or a used term does not fit in a
            float64
    """
    terms = [as_integer(t, "contfrac2x") for t in cf]
    if len(terms) == 0:
        raise EmptyInputError("contfrac2x", "continued fraction has no terms")

    if n is None:
        n = len(terms)
    else:
        n = as_natural(n, "contfrac2x")
        if n == 0:
            raise InvalidArgumentError("contfrac2x", "number of terms must be positive")
        n = min(n, len(terms))

    try:
        values = np.array(terms[:n], dtype=np.float64)
    except OverflowError:
        raise InvalidArgumentError(
            "contfrac2x", "term too large to represent as a float"
        ) from None

    if n == 1:  # degenerate case, integer
        return float(values[0])

    with np.errstate(divide="ignore"):
        tmp = 1.0 / values[n - 1]
        for i in range(n - 2, 0, -1):
            tmp = 1.0 / (tmp + values[i])

    return float(values[0] + tmp)


def convergents(cf: Sequence[int]) -> List[Tuple[int, int]]:
    """
    Convergents of a continued fraction.

    The k-th convergent p_k/q_k is the exact rational value of the first
    k+1 terms; successive convergents are the best rational approximations
    of the expanded number.

    Args:
        cf: Term sequence, at least one term

    Returns:
        List of (numerator, denominator) pairs, one per term

    Raises:
        EmptyInputError: if cf is empty
    """
    terms = [as_integer(t, "convergents") for t in cf]
    if len(terms) == 0:
        raise EmptyInputError("convergents", "continued fraction has no terms")

    # p_k = a_k p_{k-1} + p_{k-2}, same for q, seeded with p_{-1}/q_{-1} = 1/0
    p_prev, p = 1, terms[0]
    q_prev, q = 0, 1
    result = [(p, q)]
    for a in terms[1:]:
        p_prev, p = p, a * p + p_prev
        q_prev, q = q, a * q + q_prev
        result.append((p, q))
    return result
