"""Tests for the S-box strategies in isolation."""

import pytest

from mimc_r1cs.errors import ConfigurationError, InverseOfZero
from mimc_r1cs.r1cs import lc_const, lc_sum, lc_var
from mimc_r1cs.sbox import CubeSBox, InverseSBox, QuinticSBox, sbox_for_exponent

from conftest import P


def _apply(cs, sbox, x_value, constant):
    """Wire t = x + constant through ``sbox`` and run both passes."""
    x = cs.allocate_variable("x")
    cs.set_input_sizes(1)
    wires = sbox.allocate(cs, "s")
    t = lc_sum(lc_var(x), lc_const(constant))
    sbox.generate_r1cs_constraints(cs, wires, t)

    cs.set_witness(x, x_value)
    out = sbox.generate_r1cs_witness(cs, wires, cs.evaluate(t))
    return x, wires, t, out


class TestCubeSBox:
    def test_values(self, cs, GF):
        _, wires, _, out = _apply(cs, CubeSBox(), 5, 2)
        sq, cube = wires.variables
        assert cs.get_witness(sq) == GF(49)
        assert cs.get_witness(cube) == GF(343)
        assert out == GF(343)
        assert wires.output == cube

    def test_constraints_satisfied(self, cs):
        _apply(cs, CubeSBox(), 123456789, 987654321)
        cs.verify_constraints()

    def test_cost(self, cs):
        sbox = CubeSBox()
        _apply(cs, sbox, 1, 1)
        assert cs.num_constraints == sbox.num_constraints == 2
        assert cs.num_variables == 1 + sbox.num_variables

    def test_wrapping_input(self, cs, GF):
        _, _, _, out = _apply(cs, CubeSBox(), P - 1, 0)
        assert out == GF(P - 1)
        cs.verify_constraints()

    def test_tampered_square_fails(self, cs):
        _, wires, _, _ = _apply(cs, CubeSBox(), 5, 2)
        cs.set_witness(wires.variables[0], 50)
        assert not cs.is_satisfied()


class TestQuinticSBox:
    def test_values(self, cs, GF):
        _, wires, _, out = _apply(cs, QuinticSBox(), 1, 2)
        sq, quad, quint = wires.variables
        assert cs.get_witness(sq) == GF(9)
        assert cs.get_witness(quad) == GF(81)
        assert out == GF(243)
        cs.verify_constraints()

    def test_cost(self, cs):
        _apply(cs, QuinticSBox(), 3, 4)
        assert cs.num_constraints == 3


class TestInverseSBox:
    def test_values(self, cs, GF):
        _, _, t, out = _apply(cs, InverseSBox(), 5, 2)
        assert out * GF(7) == GF(1)
        cs.verify_constraints()

    def test_cost(self, cs):
        _apply(cs, InverseSBox(), 5, 2)
        assert cs.num_constraints == 1
        assert cs.num_variables == 2

    def test_zero_input_raises(self, cs, GF):
        sbox = InverseSBox()
        with pytest.raises(InverseOfZero):
            _apply(cs, sbox, P - 2, 2)

    def test_zero_input_leaves_system_reusable(self, cs, GF):
        sbox = InverseSBox()
        x = cs.allocate_variable("x")
        wires = sbox.allocate(cs, "s")
        t = lc_sum(lc_var(x), lc_const(2))
        sbox.generate_r1cs_constraints(cs, wires, t)

        cs.set_witness(x, P - 2)
        with pytest.raises(InverseOfZero) as exc_info:
            sbox.generate_r1cs_witness(cs, wires, cs.evaluate(t))
        assert exc_info.value.label == "s"
        assert cs.witness[wires.output] is None
        assert cs.num_constraints == 1

        cs.set_witness(x, 1)
        sbox.generate_r1cs_witness(cs, wires, cs.evaluate(t))
        cs.verify_constraints()
        assert cs.get_witness(wires.output) * GF(3) == GF(1)


class TestSBoxSelection:
    @pytest.mark.parametrize(
        "exponent,cls", [(3, CubeSBox), (5, QuinticSBox), (-1, InverseSBox)]
    )
    def test_known_exponents(self, exponent, cls):
        assert isinstance(sbox_for_exponent(exponent), cls)

    def test_unknown_exponent(self):
        with pytest.raises(ConfigurationError):
            sbox_for_exponent(7)
