# The constraint system is a sparse R1CS over a galois prime field.
#
# Every constraint row is a dict {var_idx -> coeff}.  Variable 0 is the
# constant wire ONE, so a constant term c is written {0: c}.  A row pair
# (A_k, B_k, C_k) together with the witness vector w is satisfied iff
#
#     (A_k · w) * (B_k · w) = C_k · w
#
# The witness vector is filled in by the gadgets' witness pass.  Variables are
# split into a primary (public) part and an auxiliary (private) part by
# allocation order: the first ``num_inputs`` variables after ONE are primary.

import logging

import numpy as np

from .errors import MissingWitness, UnsatisfiedConstraint
from .field import to_field

logger = logging.getLogger(__name__)

ONE = 0

LinearCombination = dict[int, int]


# -----------------------------------------------------------------------------
# Linear combination helpers
# -----------------------------------------------------------------------------


def lc_var(var: int, coeff=1) -> LinearCombination:
    return {var: int(coeff)}


def lc_const(value) -> LinearCombination:
    return {ONE: int(value)}


def lc_scale(lc: LinearCombination, factor) -> LinearCombination:
    factor = int(factor)
    return {idx: coeff * factor for idx, coeff in lc.items()}


def lc_sum(*terms: LinearCombination) -> LinearCombination:
    """Add linear combinations term-wise; coefficients are reduced later."""
    acc: LinearCombination = {}
    for term in terms:
        for idx, coeff in term.items():
            acc[idx] = acc.get(idx, 0) + int(coeff)
    return acc


def as_lc(value) -> LinearCombination:
    """Accept a variable index or a linear combination."""
    if isinstance(value, dict):
        return value
    return lc_var(value)


# -----------------------------------------------------------------------------
# Constraint system
# -----------------------------------------------------------------------------


class ConstraintSystem:
    """Sparse R1CS plus the witness vector that (hopefully) satisfies it.

    The constant 1 is assigned index 0 in the witness vector so that constant
    terms are coefficients on variable 0.
    """

    def __init__(self, GF):
        self.GF = GF
        self.q = GF.characteristic

        self.witness: list = [GF(1)]
        self.labels: list[str] = ["ONE"]
        self.num_inputs = 0

        self.A_rows: list[LinearCombination] = []
        self.B_rows: list[LinearCombination] = []
        self.C_rows: list[LinearCombination] = []
        self.annotations: list[str] = []

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def allocate_variable(self, label: str = "") -> int:
        """Reserve a witness slot and return its index."""
        idx = len(self.witness)
        self.witness.append(None)
        self.labels.append(label)
        return idx

    def allocate_variables(self, n: int, label: str = "") -> list[int]:
        return [self.allocate_variable(f"{label}[{i}]") for i in range(n)]

    @property
    def num_variables(self) -> int:
        """Allocated variables, not counting the constant wire."""
        return len(self.witness) - 1

    @property
    def num_constraints(self) -> int:
        return len(self.A_rows)

    def set_input_sizes(self, num_inputs: int) -> None:
        assert 0 <= num_inputs <= self.num_variables, "input size out of range"
        self.num_inputs = num_inputs

    # ------------------------------------------------------------------
    # Constraint emission
    # ------------------------------------------------------------------

    def _normalize(self, lc) -> LinearCombination:
        row = {}
        for idx, coeff in as_lc(lc).items():
            assert 0 <= idx < len(self.witness), f"unknown variable {idx}"
            coeff = int(coeff) % self.q
            if coeff:
                row[idx] = coeff
        return row

    def add_constraint(self, a, b, c, annotation: str = "") -> None:
        """Append the row a * b = c; each side is a variable or an lc."""
        self.A_rows.append(self._normalize(a))
        self.B_rows.append(self._normalize(b))
        self.C_rows.append(self._normalize(c))
        self.annotations.append(annotation)

    # ------------------------------------------------------------------
    # Witness access
    # ------------------------------------------------------------------

    def set_witness(self, var: int, value) -> None:
        assert 0 < var < len(self.witness), f"cannot assign variable {var}"
        self.witness[var] = to_field(self.GF, value)

    def get_witness(self, var: int):
        value = self.witness[var]
        if value is None:
            raise MissingWitness(f"variable {var} ({self.labels[var]}) is unassigned")
        return value

    def clear_witness(self, variables=None) -> None:
        """Unassign ``variables``, or every slot except ONE."""
        if variables is None:
            variables = range(1, len(self.witness))
        for idx in variables:
            assert 0 < idx < len(self.witness), f"cannot clear variable {idx}"
            self.witness[idx] = None

    def evaluate(self, lc):
        """Value of a linear combination under the current witness."""
        acc = 0
        for idx, coeff in as_lc(lc).items():
            acc += int(coeff) * int(self.get_witness(idx))
        return self.GF(acc % self.q)

    def primary_input(self) -> list:
        return [self.get_witness(i) for i in range(1, 1 + self.num_inputs)]

    def auxiliary_input(self) -> list:
        return [
            self.get_witness(i) for i in range(1 + self.num_inputs, len(self.witness))
        ]

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify_constraints(self) -> None:
        """Check every row; raise ``UnsatisfiedConstraint`` on the first failure."""
        for k, (a_row, b_row, c_row) in enumerate(
            zip(self.A_rows, self.B_rows, self.C_rows)
        ):
            left = self.evaluate(a_row)
            right = self.evaluate(b_row)
            out = self.evaluate(c_row)

            if left * right != out:
                raise UnsatisfiedConstraint(
                    k, self.annotations[k], int(left), int(right), int(out)
                )

        logger.debug(
            "%d constraints satisfied over %d variables",
            self.num_constraints,
            self.num_variables,
        )

    def is_satisfied(self) -> bool:
        try:
            self.verify_constraints()
        except (UnsatisfiedConstraint, MissingWitness):
            return False
        return True

    # ------------------------------------------------------------------
    # Export helpers
    # ------------------------------------------------------------------

    def to_dense(self):
        """Dense galois matrices A, B, C and the witness column vector."""
        num_cols = len(self.witness)
        w = self.GF([int(self.get_witness(i)) for i in range(num_cols)])

        def _dense(rows):
            dense_rows = []
            for row in rows:
                dense = [0] * num_cols
                for j, coeff in row.items():
                    dense[j] = coeff
                dense_rows.append(dense)
            return self.GF(dense_rows)

        return _dense(self.A_rows), _dense(self.B_rows), _dense(self.C_rows), w

    def check_hadamard(self) -> bool:
        """Matrix form of the satisfaction check: (A·w) ⊙ (B·w) == C·w."""
        if self.num_constraints == 0:
            return True

        A, B, C, w = self.to_dense()
        Ax = A @ w
        Bx = B @ w
        Cx = C @ w
        hadamard = np.multiply(Ax, Bx)
        return bool(np.array_equal(hadamard, Cx))
