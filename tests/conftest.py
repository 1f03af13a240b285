"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
repo_dir = Path(__file__).parent.parent
if str(repo_dir) not in sys.path:
    sys.path.insert(0, str(repo_dir))

from mimc_r1cs.benchmark_data import benchmark_sharkmimc_parameters  # noqa: E402
from mimc_r1cs.constants import MERSENNE61  # noqa: E402
from mimc_r1cs.field import BN254, prime_field  # noqa: E402
from mimc_r1cs.r1cs import ConstraintSystem  # noqa: E402

P = BN254.characteristic


@pytest.fixture(scope="session")
def GF():
    return BN254


@pytest.fixture(scope="session")
def GF61():
    return prime_field(MERSENNE61)


@pytest.fixture
def cs(GF):
    return ConstraintSystem(GF)


@pytest.fixture(scope="session")
def shark_params_data(GF):
    """Keys and matrix as plain data so each test can build fresh parameters."""
    params = benchmark_sharkmimc_parameters(GF, seed=20240611)
    return [int(k) for k in params.round_keys], [
        [int(v) for v in row] for row in params.matrix
    ]


# -----------------------------------------------------------------------------
# Reference implementations on plain integers
# -----------------------------------------------------------------------------


def power_sbox(exponent: int, p: int = P):
    if exponent == -1:
        return lambda t: pow(t, -1, p)
    return lambda t: pow(t, exponent, p)


def longsightf_reference(constants, left, right, exponent=3, p=P):
    """All round values x[0..R-1] of the LongsightF chain."""
    sbox = power_sbox(exponent, p)
    x = []
    for i, c in enumerate(constants):
        x_left = left if i == 0 else x[i - 1]
        if i == 0:
            x_right = right
        elif i == 1:
            x_right = left
        else:
            x_right = x[i - 2]
        x.append((x_right + sbox((x_left + c) % p)) % p)
    return x


def sharkmimc_reference(
    keys, matrix, inputs, exponent=3, n=4, full_rounds=3, middle_rounds=38, p=P
):
    """SharkMimc output computed with a running key offset."""
    sbox = power_sbox(exponent, p)
    state = [v % p for v in inputs]
    k = 0

    def mixed(s):
        return [sum(matrix[i][j] * s[j] for j in range(n)) % p for i in range(n)]

    def full_round(state):
        nonlocal k
        s = []
        for b in range(n):
            s.append(sbox((state[b] + keys[k]) % p))
            k += 1
        return mixed(s)

    for _ in range(full_rounds):
        state = full_round(state)

    for _ in range(middle_rounds):
        s = [sbox((state[0] + keys[k]) % p)]
        k += 1
        for b in range(1, n):
            s.append((state[b] + keys[k]) % p)
            k += 1
        state = mixed(s)

    for _ in range(full_rounds - 1):
        state = full_round(state)

    out = []
    for b in range(n):
        s = sbox((state[b] + keys[k]) % p)
        k += 1
        out.append((s + keys[k]) % p)
        k += 1

    assert k == len(keys)
    return out
