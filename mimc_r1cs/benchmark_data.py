"""Throw-away parameters for benchmarks and tests.

NOTHING IN THIS MODULE IS CRYPTOGRAPHIC.  Random keys, all-ones matrices and
0/1 matrices can make the permutations trivially invertible or degenerate.
Production parameters must come from an audited source.
"""

import numpy as np

from .constants import (
    SHARKMIMC_FULL_ROUNDS,
    SHARKMIMC_MIDDLE_ROUNDS,
    SHARKMIMC_NUM_BRANCHES,
)
from .errors import ConfigurationError
from .linear_layer import cauchy_matrix
from .parameters import LongsightFParameters, SharkMimcParameters, num_round_keys

# x and y vectors of the two Cauchy matrices of the reference benchmarks;
# "cauchy" (the default) is the second one.
CAUCHY_MATRIX_1 = ((1, 2, 3, 4), (5, 6, 7, 8))
CAUCHY_MATRIX_2 = ((9, 10, 11, 12), (13, 14, 15, 16))


# -----------------------------------------------------------------------------
# Random data
# -----------------------------------------------------------------------------


def _rng(seed) -> np.random.Generator:
    """One generator shared by every draw of a parameter set.

    galois accepts a Generator as ``seed`` and advances it on each call.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def random_elements(GF, count: int, seed=None) -> list:
    return list(GF.Random(count, seed=_rng(seed)))


def random_matrix(GF, n: int, seed=None):
    return GF.Random((n, n), seed=_rng(seed))


def all_ones_matrix(GF, n: int):
    return GF([[1] * n for _ in range(n)])


def zero_one_matrix(GF, n: int, seed=None):
    return GF.Random((n, n), low=0, high=2, seed=_rng(seed))


MATRIX_GENERATORS = {
    "cauchy": lambda GF, n, rng: cauchy_matrix(
        GF, list(CAUCHY_MATRIX_2[0][:n]), list(CAUCHY_MATRIX_2[1][:n])
    ),
    "cauchy_1": lambda GF, n, rng: cauchy_matrix(
        GF, list(CAUCHY_MATRIX_1[0][:n]), list(CAUCHY_MATRIX_1[1][:n])
    ),
    "random": random_matrix,
    "ones": lambda GF, n, rng: all_ones_matrix(GF, n),
    "zero_one": zero_one_matrix,
}


# -----------------------------------------------------------------------------
# Parameter sets
# -----------------------------------------------------------------------------


def benchmark_sharkmimc_parameters(
    GF, seed=None, matrix: str = "cauchy", **shape
) -> SharkMimcParameters:
    """SharkMimc parameters with random round keys.

    ``matrix`` picks one of ``MATRIX_GENERATORS``; ``shape`` may override
    ``num_branches``, ``full_rounds`` and ``middle_rounds``.
    """
    rng = _rng(seed)
    num_branches = shape.get("num_branches", SHARKMIMC_NUM_BRANCHES)
    if matrix.startswith("cauchy") and num_branches > len(CAUCHY_MATRIX_2[0]):
        raise ConfigurationError(
            f"cauchy benchmark matrix only covers {len(CAUCHY_MATRIX_2[0])} branches"
        )

    count = num_round_keys(
        num_branches,
        shape.get("full_rounds", SHARKMIMC_FULL_ROUNDS),
        shape.get("middle_rounds", SHARKMIMC_MIDDLE_ROUNDS),
    )
    keys = random_elements(GF, count, rng)
    return SharkMimcParameters(
        GF, keys, MATRIX_GENERATORS[matrix](GF, num_branches, rng), **shape
    )


def benchmark_longsightf_parameters(
    GF, num_rounds: int, seed=None, **kwargs
) -> LongsightFParameters:
    return LongsightFParameters(GF, random_elements(GF, num_rounds, seed), **kwargs)
