"""
Permutations of qubit/basis indices.

A permutation of length N is a sequence holding each of 0, ..., N-1 exactly
once. perm[i] is where index i is sent. Inputs can be lists, tuples or 1-D
numpy integer arrays; results are always new lists of ints.
"""

import operator
from typing import List, Sequence

from .errors import InvalidPermutationError
from .integers import as_natural


def check_perm(perm: Sequence[int]) -> bool:
    """
    Check that perm is a bijection on {0, ..., len(perm) - 1}.

    Args:
        perm: Candidate permutation

    Returns:
        True if every element is an integer in range and no value repeats
    """
    n = len(perm)
    seen = [False] * n
    for x in perm:
        if isinstance(x, bool):
            return False
        try:
            x = operator.index(x)
        except TypeError:
            return False
        if x < 0 or x >= n or seen[x]:
            return False
        seen[x] = True
    return True


def identity_perm(n: int) -> List[int]:
    """The identity permutation [0, 1, ..., n-1]."""
    n = as_natural(n, "identity_perm")
    return list(range(n))


def invperm(perm: Sequence[int]) -> List[int]:
    """
    Inverse of a permutation.

    Args:
        perm: Permutation

    Returns:
        result with result[perm[i]] == i for every i

    Raises:
        InvalidPermutationError: if perm is not a permutation
    """
    if not check_perm(perm):
        raise InvalidPermutationError("invperm", f"{list(perm)} is not a permutation")

    result = [0] * len(perm)
    for i, x in enumerate(perm):
        result[operator.index(x)] = i
    return result


def compperm(perm: Sequence[int], sigma: Sequence[int]) -> List[int]:
    """
    Composition perm ∘ sigma: apply sigma first, then perm.

    Composition is associative but not commutative, so operand order
    matters.

    Args:
        perm: Permutation applied second
        sigma: Permutation applied first, same length as perm

    Returns:
        result with result[i] == perm[sigma[i]]

    Raises:
        InvalidPermutationError: if either input is not a permutation, or
            their lengths differ
    """
    if not check_perm(perm):
        raise InvalidPermutationError("compperm", f"{list(perm)} is not a permutation")
    if not check_perm(sigma):
        raise InvalidPermutationError("compperm", f"{list(sigma)} is not a permutation")
    if len(perm) != len(sigma):
        raise InvalidPermutationError(
            "compperm", f"length mismatch: {len(perm)} != {len(sigma)}"
        )

    return [operator.index(perm[operator.index(s)]) for s in sigma]
