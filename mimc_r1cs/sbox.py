"""Nonlinear substitution steps as R1CS fragments.

An S-box is a strategy object handed to the permutation gadgets.  The gadget
owns the round structure; the S-box only knows how to

* ``allocate`` the wires one application needs (the last one is the output),
* ``generate_r1cs_constraints`` for an input linear combination ``t``,
* ``generate_r1cs_witness`` for the concrete value of ``t``.

Per application:

    =========  ===========  =========  =====================================
    S-box      constraints  variables  rows
    =========  ===========  =========  =====================================
    cube       2            2          t*t = sq, sq*t = cube
    quintic    3            3          t*t = sq, sq*sq = quad, quad*t = quint
    inverse    1            1          t*inv = 1
    =========  ===========  =========  =====================================
"""

from dataclasses import dataclass
from typing import Protocol

from .errors import ConfigurationError
from .field import inverse
from .r1cs import ConstraintSystem, LinearCombination, lc_const, lc_var


@dataclass(frozen=True)
class SBoxWires:
    label: str
    variables: tuple[int, ...]

    @property
    def output(self) -> int:
        return self.variables[-1]


class SBox(Protocol):
    name: str
    num_constraints: int
    num_variables: int

    def allocate(self, cs: ConstraintSystem, label: str) -> SBoxWires: ...

    def generate_r1cs_constraints(
        self, cs: ConstraintSystem, wires: SBoxWires, t: LinearCombination
    ) -> None: ...

    def generate_r1cs_witness(self, cs: ConstraintSystem, wires: SBoxWires, t): ...


def _allocate(cs: ConstraintSystem, label: str, names: tuple[str, ...]) -> SBoxWires:
    return SBoxWires(
        label, tuple(cs.allocate_variable(f"{label}.{name}") for name in names)
    )


class CubeSBox:
    """x -> x^3"""

    name = "cube"
    exponent = 3
    num_constraints = 2
    num_variables = 2

    def allocate(self, cs, label):
        return _allocate(cs, label, ("sq", "cube"))

    def generate_r1cs_constraints(self, cs, wires, t):
        sq, cube = wires.variables
        cs.add_constraint(t, t, lc_var(sq), f"{wires.label} t*t=sq")
        cs.add_constraint(lc_var(sq), t, lc_var(cube), f"{wires.label} sq*t=cube")

    def generate_r1cs_witness(self, cs, wires, t):
        sq, cube = wires.variables
        t_sq = t * t
        t_cube = t_sq * t
        cs.set_witness(sq, t_sq)
        cs.set_witness(cube, t_cube)
        return t_cube


class QuinticSBox:
    """x -> x^5 through x^2 and x^4"""

    name = "quintic"
    exponent = 5
    num_constraints = 3
    num_variables = 3

    def allocate(self, cs, label):
        return _allocate(cs, label, ("sq", "quad", "quint"))

    def generate_r1cs_constraints(self, cs, wires, t):
        sq, quad, quint = wires.variables
        cs.add_constraint(t, t, lc_var(sq), f"{wires.label} t*t=sq")
        cs.add_constraint(lc_var(sq), lc_var(sq), lc_var(quad), f"{wires.label} sq*sq=quad")
        cs.add_constraint(lc_var(quad), t, lc_var(quint), f"{wires.label} quad*t=quint")

    def generate_r1cs_witness(self, cs, wires, t):
        sq, quad, quint = wires.variables
        t_sq = t * t
        t_quad = t_sq * t_sq
        t_quint = t_quad * t
        cs.set_witness(sq, t_sq)
        cs.set_witness(quad, t_quad)
        cs.set_witness(quint, t_quint)
        return t_quint


class InverseSBox:
    """x -> x^-1

    Zero has no inverse, so witness generation raises ``InverseOfZero``
    instead of silently assigning 0 (which would leave t*inv = 1 unsatisfied).
    """

    name = "inverse"
    exponent = -1
    num_constraints = 1
    num_variables = 1

    def allocate(self, cs, label):
        return _allocate(cs, label, ("inv",))

    def generate_r1cs_constraints(self, cs, wires, t):
        (inv,) = wires.variables
        cs.add_constraint(t, lc_var(inv), lc_const(1), f"{wires.label} t*inv=1")

    def generate_r1cs_witness(self, cs, wires, t):
        (inv,) = wires.variables
        t_inv = inverse(t, wires.label)
        cs.set_witness(inv, t_inv)
        return t_inv


_SBOXES = {3: CubeSBox, 5: QuinticSBox, -1: InverseSBox}


def sbox_for_exponent(exponent: int) -> SBox:
    try:
        return _SBOXES[exponent]()
    except KeyError:
        raise ConfigurationError(
            f"no S-box for exponent {exponent}, expected one of {sorted(_SBOXES)}"
        ) from None
