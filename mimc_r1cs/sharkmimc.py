# coding: utf-8
"""SharkMimc: an SPN permutation over ``num_branches`` field elements.

With the default shape (4 branches, 3 full + 38 partial + 3 full rounds):

    rounds  1..3    key-add + S-box on every branch, then mix
    rounds  4..41   key-add + S-box on branch 0, key-add on the rest, then mix
    rounds 42..43   key-add + S-box on every branch, then mix
    round  44       key-add + S-box on every branch, add output key, no mix

Key slots for every round come from ``SharkMimcParameters.schedule`` so the
constraint pass and the witness pass read exactly the same keys.  Both passes
count the slots they consume and raise ``IndexDrift`` if the count differs
from the schedule.

Every mixing step is bound by one constraint per branch

    1 * (sum_j M[i][j] * s_j) = state[i]

and the final round by 1 * (sbox_out_i + key) = output_i, so no state value
is fixed by witness assignment alone.
"""

import logging
from dataclasses import dataclass

from .errors import ConfigurationError, IndexDrift
from .gadget import Gadget
from .linear_layer import mix, mix_linear_combinations
from .parameters import RoundKind, SharkMimcParameters
from .r1cs import ConstraintSystem, lc_const, lc_sum, lc_var
from .sbox import CubeSBox, SBox, SBoxWires

logger = logging.getLogger(__name__)


@dataclass
class RoundWires:
    round_no: int
    sboxes: list[SBoxWires]
    out: list[int]


class SharkMimc(Gadget):
    def __init__(
        self,
        cs: ConstraintSystem,
        params: SharkMimcParameters,
        inputs: list[int],
        sbox: SBox | None = None,
        annotation_prefix: str = "SharkMimc",
    ):
        super().__init__(cs, annotation_prefix)
        if len(inputs) != params.num_branches:
            raise ConfigurationError(
                f"expected {params.num_branches} input variables, got {len(inputs)}"
            )

        self.params = params
        self.sbox = sbox if sbox is not None else CubeSBox()
        self.inputs = list(inputs)
        self.key_slots_consumed: dict[str, int] = {}

        self.layers: list[RoundWires] = []
        for keys in params.schedule:
            prefix = self.label(f"round[{keys.round_no}]")
            sboxes = [
                self.sbox.allocate(cs, f"{prefix}.sbox[{b}]")
                for b in range(len(keys.sbox))
            ]
            if keys.kind is RoundKind.FINAL:
                out = cs.allocate_variables(params.num_branches, self.label("output"))
            else:
                out = cs.allocate_variables(params.num_branches, f"{prefix}.state")
            self.layers.append(RoundWires(keys.round_no, sboxes, out))

        logger.debug(
            "%s: %d rounds with %s S-box, %d variables allocated",
            self.annotation_prefix,
            len(self.layers),
            self.sbox.name,
            cs.num_variables,
        )

    @property
    def output(self) -> list[int]:
        return self.layers[-1].out

    def result(self) -> list[int]:
        return self.output

    def owned_variables(self) -> list[int]:
        owned = []
        for layer in self.layers:
            for wires in layer.sboxes:
                owned.extend(wires.variables)
            owned.extend(layer.out)
        return owned

    @property
    def num_sboxes(self) -> int:
        return sum(len(layer.sboxes) for layer in self.layers)

    def _check_consumed(self, pass_name: str, consumed: int) -> None:
        self.key_slots_consumed[pass_name] = consumed
        if consumed != self.params.num_round_keys:
            raise IndexDrift(pass_name, consumed, self.params.num_round_keys)

    # ------------------------------------------------------------------
    # Constraint pass
    # ------------------------------------------------------------------

    def _generate_constraints(self) -> None:
        cs = self.cs
        round_keys = self.params.round_keys
        start = cs.num_constraints

        state = [lc_var(v) for v in self.inputs]
        consumed = 0

        for keys, layer in zip(self.params.schedule, self.layers):
            prefix = self.label(f"round[{keys.round_no}]")
            branch_out = []

            for b, (slot, wires) in enumerate(zip(keys.sbox, layer.sboxes)):
                t = lc_sum(state[b], lc_const(round_keys[slot]))
                self.sbox.generate_r1cs_constraints(cs, wires, t)
                branch_out.append(lc_var(wires.output))
                consumed += 1

            for b, slot in enumerate(keys.passthrough, start=len(keys.sbox)):
                branch_out.append(lc_sum(state[b], lc_const(round_keys[slot])))
                consumed += 1

            if keys.kind is RoundKind.FINAL:
                for b, slot in enumerate(keys.output):
                    cs.add_constraint(
                        lc_const(1),
                        lc_sum(branch_out[b], lc_const(round_keys[slot])),
                        lc_var(layer.out[b]),
                        f"{prefix} output[{b}]",
                    )
                    consumed += 1
            else:
                mixed = mix_linear_combinations(self.params.matrix, branch_out)
                for b, lc in enumerate(mixed):
                    cs.add_constraint(
                        lc_const(1), lc, lc_var(layer.out[b]), f"{prefix} mix[{b}]"
                    )

            state = [lc_var(v) for v in layer.out]

        self._check_consumed("constraint", consumed)
        logger.debug(
            "%s: %d constraints, %d S-boxes",
            self.annotation_prefix,
            cs.num_constraints - start,
            self.num_sboxes,
        )

    # ------------------------------------------------------------------
    # Witness pass
    # ------------------------------------------------------------------

    def generate_r1cs_witness(self, values=None) -> list:
        """Evaluate the permutation and fill the witness; returns the outputs.

        ``values`` assigns the input variables first.  Raises
        ``InverseOfZero`` with the inverse S-box if a key-added branch is 0.
        """
        self._require_constraints()
        self._reset_witness()
        cs = self.cs
        round_keys = self.params.round_keys

        if values is not None:
            if len(values) != len(self.inputs):
                raise ConfigurationError(
                    f"expected {len(self.inputs)} input values, got {len(values)}"
                )
            for var, value in zip(self.inputs, values):
                cs.set_witness(var, value)

        state = [cs.get_witness(v) for v in self.inputs]
        consumed = 0

        for keys, layer in zip(self.params.schedule, self.layers):
            branch_out = []

            for b, (slot, wires) in enumerate(zip(keys.sbox, layer.sboxes)):
                t = state[b] + round_keys[slot]
                branch_out.append(self.sbox.generate_r1cs_witness(cs, wires, t))
                consumed += 1

            for b, slot in enumerate(keys.passthrough, start=len(keys.sbox)):
                branch_out.append(state[b] + round_keys[slot])
                consumed += 1

            if keys.kind is RoundKind.FINAL:
                state = []
                for b, slot in enumerate(keys.output):
                    state.append(branch_out[b] + round_keys[slot])
                    consumed += 1
            else:
                state = mix(self.params.matrix, branch_out)

            for var, value in zip(layer.out, state):
                cs.set_witness(var, value)

        self._check_consumed("witness", consumed)
        return state
