# coding: utf-8
"""LongsightF: a Feistel chain with a power-map (or inverse) round function.

    L = start_L, R = start_R

    x[0] = R      + (L      + C[0])^k
    x[1] = L      + (x[0]   + C[1])^k
    x[i] = x[i-2] + (x[i-1] + C[i])^k        for i > 1

    output = x[len(C) - 1]

With k = 3 each round costs 3 constraints: two for the cube and one binding
the Feistel addition

    t   = x[i-1] + C[i]
    sq  = t * t
    cb  = sq * t
    1 * (cb + x[i-2]) = x[i]

The inverse variant replaces the cube by t * inv = 1 (2 constraints per round)
and fails with ``InverseOfZero`` when some t is zero.
"""

import logging

from .gadget import Gadget
from .parameters import LongsightFParameters
from .r1cs import ConstraintSystem, lc_const, lc_sum, lc_var
from .sbox import SBox, sbox_for_exponent

logger = logging.getLogger(__name__)


class FeistelRound:
    """One round x_out = x_right + (x_left + constant)^k."""

    def __init__(
        self,
        cs: ConstraintSystem,
        constant,
        sbox: SBox,
        x_left: int,
        x_right: int,
        label: str,
    ):
        self.cs = cs
        self.constant = constant
        self.sbox = sbox
        self.x_left = x_left
        self.x_right = x_right
        self.label = label

        self.wires = sbox.allocate(cs, f"{label}.sbox")
        self.out = cs.allocate_variable(f"{label}.out")

    @property
    def num_constraints(self) -> int:
        return self.sbox.num_constraints + 1

    @property
    def variables(self) -> list[int]:
        return [*self.wires.variables, self.out]

    def sbox_input(self):
        return lc_sum(lc_var(self.x_left), lc_const(self.constant))

    def generate_r1cs_constraints(self) -> None:
        self.sbox.generate_r1cs_constraints(self.cs, self.wires, self.sbox_input())

        self.cs.add_constraint(
            lc_const(1),
            lc_sum(lc_var(self.wires.output), lc_var(self.x_right)),
            lc_var(self.out),
            f"{self.label} feistel add",
        )

    def generate_r1cs_witness(self):
        t = self.cs.get_witness(self.x_left) + self.constant
        s = self.sbox.generate_r1cs_witness(self.cs, self.wires, t)

        x_out = self.cs.get_witness(self.x_right) + s
        self.cs.set_witness(self.out, x_out)
        return x_out


class LongsightF(Gadget):
    def __init__(
        self,
        cs: ConstraintSystem,
        params: LongsightFParameters,
        start_L: int,
        start_R: int,
        sbox: SBox | None = None,
        annotation_prefix: str = "LongsightF",
    ):
        super().__init__(cs, annotation_prefix)
        self.params = params
        self.sbox = sbox if sbox is not None else sbox_for_exponent(params.exponent)
        self.start_L = start_L
        self.start_R = start_R

        self.round_gadgets: list[FeistelRound] = []
        for i, constant in enumerate(params.round_constants):
            x_left = start_L if i == 0 else self.round_gadgets[i - 1].out
            if i == 0:
                x_right = start_R
            elif i == 1:
                x_right = start_L
            else:
                x_right = self.round_gadgets[i - 2].out

            self.round_gadgets.append(
                FeistelRound(cs, constant, self.sbox, x_left, x_right, self.label(f"round[{i}]"))
            )

        logger.debug(
            "%s: %d rounds with %s S-box, %d variables allocated",
            self.annotation_prefix,
            params.num_rounds,
            self.sbox.name,
            cs.num_variables,
        )

    @property
    def rounds(self) -> list[int]:
        return [r.out for r in self.round_gadgets]

    def result(self) -> int:
        return self.round_gadgets[-1].out

    def owned_variables(self) -> list[int]:
        return [v for r in self.round_gadgets for v in r.variables]

    def _generate_constraints(self) -> None:
        constrained = self.round_gadgets[: self.params.num_constrained_rounds]
        for round_gadget in constrained:
            round_gadget.generate_r1cs_constraints()

        if len(constrained) < len(self.round_gadgets):
            logger.warning(
                "%s: last %d rounds are not constrained",
                self.annotation_prefix,
                len(self.round_gadgets) - len(constrained),
            )
        logger.debug(
            "%s: %d constraints over %d rounds",
            self.annotation_prefix,
            sum(r.num_constraints for r in constrained),
            len(constrained),
        )

    def generate_r1cs_witness(self, left=None, right=None):
        """Fill every round value and return the output.

        ``left`` and ``right`` assign the start variables first; otherwise
        they must already hold values.
        """
        self._require_constraints()
        self._reset_witness()

        if left is not None:
            self.cs.set_witness(self.start_L, left)
        if right is not None:
            self.cs.set_witness(self.start_R, right)

        x = None
        for round_gadget in self.round_gadgets:
            x = round_gadget.generate_r1cs_witness()
        return x
