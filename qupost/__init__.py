"""
Qupost - classical post-processing for quantum simulation results.

This package provides the number theory that turns raw simulator output
into answers, and the permutation algebra used to track qubit orderings
through circuit transformations.

Modules:
    contfrac  - Continued fraction expansion, reconstruction and convergents
    integers  - GCD/LCM over pairs and collections, modular inverse
    perms     - Permutation validation, inversion and composition
    period    - Period recovery and factoring for Shor-style order finding
    errors    - Error kinds, exceptions and tagged results

Quick Start:
    >>> from qupost import *
    >>> x2contfrac(1.5, 5)
    [1, 2]
    >>> lcm_list([4, 6])
    12
    >>> invperm([2, 0, 1])
    [1, 2, 0]
"""

# Errors
from .errors import (
    ErrorKind,
    QupostError,
    InvalidArgumentError,
    EmptyInputError,
    InvalidPermutationError,
    Ok,
    Err,
    Result,
    attempt,
)

# Continued fractions
from .contfrac import (
    DEFAULT_CUTOFF,
    x2contfrac,
    contfrac2x,
    convergents,
)

# Integer reduction
from .integers import (
    gcd,
    gcd_list,
    lcm,
    lcm_list,
    is_coprime,
    mod_inverse,
)

# Permutations
from .perms import (
    check_perm,
    identity_perm,
    invperm,
    compperm,
)

# Period recovery
from .period import (
    DEFAULT_MAX_TERMS,
    phase_from_measurement,
    candidate_denominators,
    extract_period,
    combine_periods,
    factors_from_period,
)

__version__ = "0.1.0"
__all__ = [
    # Errors
    "ErrorKind",
    "QupostError",
    "InvalidArgumentError",
    "EmptyInputError",
    "InvalidPermutationError",
    "Ok",
    "Err",
    "Result",
    "attempt",
    # Continued fractions
    "DEFAULT_CUTOFF",
    "x2contfrac",
    "contfrac2x",
    "convergents",
    # Integer reduction
    "gcd",
    "gcd_list",
    "lcm",
    "lcm_list",
    "is_coprime",
    "mod_inverse",
    # Permutations
    "check_perm",
    "identity_perm",
    "invperm",
    "compperm",
    # Period recovery
    "DEFAULT_MAX_TERMS",
    "phase_from_measurement",
    "candidate_denominators",
    "extract_period",
    "combine_periods",
    "factors_from_period",
]
