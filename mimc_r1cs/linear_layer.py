"""Dense branch mixing for the SharkMimc linear layer.

The layer is purely linear, so in the circuit it costs nothing by itself: the
mixed values are linear combinations of the S-box outputs and are folded into
the C slot of a ``1 * (...) = next_state`` constraint by the caller.
"""

import numpy as np

from .field import fermat_inverse
from .r1cs import LinearCombination, lc_scale, lc_sum


def mix(matrix, state: list) -> list:
    """out[i] = sum_j M[i][j] * s[j] on field values."""
    GF = type(matrix)
    n = len(state)
    assert matrix.shape == (n, n), "matrix does not match the state width"

    out = []
    for i in range(n):
        acc = GF(0)
        for j in range(n):
            acc = acc + matrix[i, j] * state[j]
        out.append(acc)
    return out


def mix_linear_combinations(
    matrix, state: list[LinearCombination]
) -> list[LinearCombination]:
    """Same weighted sum as ``mix`` but on linear combinations."""
    n = len(state)
    assert matrix.shape == (n, n), "matrix does not match the state width"

    return [
        lc_sum(*(lc_scale(state[j], matrix[i, j]) for j in range(n)))
        for i in range(n)
    ]


def cauchy_matrix(GF, xs: list[int], ys: list[int]):
    """M[i][j] = (x_i + y_j)^(p-2), i.e. the Fermat inverse of x_i + y_j.

    For distinct x_i and distinct y_j with no x_i + y_j = 0 this is a Cauchy
    matrix and therefore MDS.  A zero sum gives a zero entry.
    """
    assert len(xs) == len(ys), "xs and ys must have the same length"

    rows = []
    for x in xs:
        row = []
        for y in ys:
            element = GF((x + y) % GF.characteristic)
            row.append(int(fermat_inverse(element)))
        rows.append(row)
    return GF(rows)


def is_invertible(matrix) -> bool:
    n = matrix.shape[0]
    return matrix.shape == (n, n) and int(np.linalg.matrix_rank(matrix)) == n
