"""
Period recovery for Shor-style order finding.

After phase estimation the control register holds an integer m whose
phase m / 2^n approximates s/r for some unknown s, where r is the order of
a mod N. The functions here turn such measurements into r and then into
factors of N:

    >>> r = extract_period(4, 4, 15, 7)        # phase 0.25 = 1/4
    >>> factors_from_period(15, 7, r)
    (3, 5)

When s and r share a factor, the continued fraction only recovers a
divisor of r. extract_period tries multiples of each candidate
denominator; combine_periods takes the lcm of divisors found over several
runs.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from .contfrac import convergents, x2contfrac
from .errors import EmptyInputError, InvalidArgumentError
from .integers import as_natural, gcd, is_coprime, lcm_list

_logger = logging.getLogger(__name__)

# Number of continued fraction terms used to approximate a phase
DEFAULT_MAX_TERMS = 20


def phase_from_measurement(measurement: int, num_qubits: int) -> float:
    """
    Phase m / 2^n encoded by a control register measurement.

    Args:
        measurement: Measured register value, 0 <= measurement < 2^num_qubits
        num_qubits: Number of qubits in the control register

    Returns:
        Phase in [0, 1)
    """
    measurement = as_natural(measurement, "phase_from_measurement")
    num_qubits = as_natural(num_qubits, "phase_from_measurement")
    if measurement >= 2 ** num_qubits:
        raise InvalidArgumentError(
            "phase_from_measurement",
            f"measurement {measurement} does not fit in {num_qubits} qubits",
        )
    return measurement / (2 ** num_qubits)


def candidate_denominators(
    phase: float,
    max_denominator: int,
    max_terms: int = DEFAULT_MAX_TERMS,
) -> List[int]:
    """
    Denominators of the convergents of phase, smallest first.

    Args:
        phase: Real number to approximate
        max_denominator: Largest denominator worth keeping
        max_terms: Number of continued fraction terms to compute

    Returns:
        Distinct positive denominators <= max_denominator
    """
    max_denominator = as_natural(max_denominator, "candidate_denominators")

    denoms = []
    for _, denom in convergents(x2contfrac(phase, max_terms)):
        if 0 < denom <= max_denominator and denom not in denoms:
            denoms.append(denom)
    return denoms


def extract_period(
    measurement: int,
    num_qubits: int,
    N: int,
    a: int,
    max_terms: int = DEFAULT_MAX_TERMS,
    verbose: bool = False,
) -> Optional[int]:
    """
    Extract the period r of a^x mod N from one measurement.

    Args:
        measurement: Measured value of the control register
        num_qubits: Number of qubits in the control register
        N: Number being factored
        a: Base of the modular exponentiation, coprime to N
        max_terms: Number of continued fraction terms to compute
        verbose: If True, print progress

    Returns:
        Smallest r < N found with a^r mod N == 1, or None if this
        measurement gives no usable period

    Raises:
        InvalidArgumentError: if N < 2 or a and N are not coprime
    """
    N = as_natural(N, "extract_period")
    a = as_natural(a, "extract_period")
    if N < 2:
        raise InvalidArgumentError("extract_period", f"modulus must be at least 2, got {N}")
    if not is_coprime(a, N):
        raise InvalidArgumentError("extract_period", f"{a} and {N} are not coprime")

    phase = phase_from_measurement(measurement, num_qubits)
    if phase == 0:
        # Measurement 0 gives no information
        if verbose:
            print("Measurement 0 carries no period information")
        return None

    denoms = candidate_denominators(phase, N, max_terms)
    if verbose:
        print(f"Phase {measurement}/{2 ** num_qubits} = {phase}")
        print(f"Candidate denominators: {denoms}")

    for denom in denoms:
        # Try multiples of denom (handles reduced fractions like 1/2 when r=4)
        r = denom
        while r < N:
            if pow(a, r, N) == 1:
                _logger.debug("extract_period: r=%d from denominator %d", r, denom)
                if verbose:
                    print(f"Period r = {r} (from denominator {denom})")
                return r
            r += denom

    _logger.debug("extract_period: no period found for measurement %d", measurement)
    if verbose:
        print("No period found")
    return None


def combine_periods(periods: Iterable[Optional[int]]) -> int:
    """
    Combine partial periods from several runs into one candidate.

    Each run may only recover a divisor of the true period; their lcm is
    the best candidate. Failed runs (None) are skipped.

    Args:
        periods: Periods or divisors of the period, None for failed runs

    Returns:
        lcm of the given periods

    Raises:
        EmptyInputError: if no run produced a period
    """
    found = [p for p in periods if p is not None]
    if len(found) == 0:
        raise EmptyInputError("combine_periods", "no period candidates to combine")
    return lcm_list(found)


def factors_from_period(
    N: int,
    a: int,
    r: Optional[int],
    verbose: bool = False,
) -> Optional[Tuple[int, int]]:
    """
    Non-trivial factors of N from the period r of a mod N.

    Uses gcd(a^(r/2) - 1, N) and gcd(a^(r/2) + 1, N).

    Args:
        N: Number being factored
        a: Base of the modular exponentiation
        r: Period of a mod N (None is accepted and gives None)
        verbose: If True, print the computation

    Returns:
        (p, N // p) with 1 < p < N, or None if r is odd or only trivial
        factors appear
    """
    N = as_natural(N, "factors_from_period")
    a = as_natural(a, "factors_from_period")
    if N < 2:
        raise InvalidArgumentError("factors_from_period", f"modulus must be at least 2, got {N}")

    if r is not None:
        r = as_natural(r, "factors_from_period")
    if not r or r % 2 == 1:
        if verbose:
            print(f"Period {r} is unusable (missing, zero or odd)")
        return None

    x = pow(a, r // 2, N)
    factor1 = gcd((x - 1) % N, N)
    factor2 = gcd((x + 1) % N, N)

    if verbose:
        print(f"a^(r/2) mod N = {a}^{r // 2} mod {N} = {x}")
        print(f"gcd({x} - 1, {N}) = {factor1}")
        print(f"gcd({x} + 1, {N}) = {factor2}")

    for factor in (factor1, factor2):
        if factor != 1 and factor != N:
            p, q = sorted((factor, N // factor))
            _logger.debug("factors_from_period: %d = %d * %d", N, p, q)
            return (p, q)

    if verbose:
        print("Only trivial factors found")
    return None
