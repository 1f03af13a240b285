"""Tests for the SharkMimc SPN gadget."""

from dataclasses import replace

import pytest

from mimc_r1cs.benchmark_data import benchmark_sharkmimc_parameters
from mimc_r1cs.errors import (
    ArithmetizationError,
    ConfigurationError,
    IndexDrift,
    InverseOfZero,
    UnsatisfiedConstraint,
)
from mimc_r1cs.parameters import SharkMimcParameters
from mimc_r1cs.r1cs import ConstraintSystem
from mimc_r1cs.sbox import InverseSBox
from mimc_r1cs.sharkmimc import SharkMimc

from conftest import P, sharkmimc_reference

INPUTS = [1, 2, 3, 4]


def _build(GF, params, **kwargs):
    cs = ConstraintSystem(GF)
    inputs = cs.allocate_variables(params.num_branches, "input")
    cs.set_input_sizes(params.num_branches)
    gadget = SharkMimc(cs, params, inputs, **kwargs)
    gadget.generate_r1cs_constraints()
    return cs, gadget


@pytest.fixture
def params(GF, shark_params_data):
    keys, matrix = shark_params_data
    return SharkMimcParameters(GF, keys, matrix)


class TestSharkMimcCube:
    def test_shape(self, GF, params):
        cs, gadget = _build(GF, params)
        # 62 S-boxes * 2 + 43 mixing rounds * 4 + 4 output bindings
        assert gadget.num_sboxes == 62
        assert cs.num_constraints == 300
        assert cs.num_variables == 4 + 300

    def test_matches_reference(self, GF, params, shark_params_data):
        keys, matrix = shark_params_data
        cs, gadget = _build(GF, params)
        out = gadget.generate_r1cs_witness(INPUTS)

        expected = sharkmimc_reference(keys, matrix, INPUTS)
        assert [int(v) for v in out] == expected
        assert [int(cs.get_witness(v)) for v in gadget.result()] == expected

    def test_constraints_satisfied(self, GF, params):
        cs, gadget = _build(GF, params)
        gadget.generate_r1cs_witness(INPUTS)
        cs.verify_constraints()
        assert cs.primary_input() == [GF(v) for v in INPUTS]

    def test_every_key_slot_consumed(self, GF, params):
        cs, gadget = _build(GF, params)
        gadget.generate_r1cs_witness(INPUTS)
        assert gadget.key_slots_consumed == {"constraint": 180, "witness": 180}

    def test_deterministic(self, GF, params):
        cs, gadget = _build(GF, params)
        first = [int(v) for v in gadget.generate_r1cs_witness(INPUTS)]
        witness = [int(w) for w in cs.witness]

        second = [int(v) for v in gadget.generate_r1cs_witness(INPUTS)]
        assert second == first
        assert [int(w) for w in cs.witness] == witness

    def test_wrapping_inputs(self, GF, params, shark_params_data):
        keys, matrix = shark_params_data
        values = [P - 1, 0, P - 2, 5]
        cs, gadget = _build(GF, params)
        out = gadget.generate_r1cs_witness(values)
        assert [int(v) for v in out] == sharkmimc_reference(keys, matrix, values)
        cs.verify_constraints()

    def test_tampered_state_is_caught(self, GF, params):
        cs, gadget = _build(GF, params)
        gadget.generate_r1cs_witness(INPUTS)

        state = gadget.layers[0].out[1]
        cs.set_witness(state, cs.get_witness(state) + GF(1))
        with pytest.raises(UnsatisfiedConstraint) as exc_info:
            cs.verify_constraints()
        assert "mix" in exc_info.value.annotation

    def test_tampered_output_is_caught(self, GF, params):
        cs, gadget = _build(GF, params)
        gadget.generate_r1cs_witness(INPUTS)

        cs.set_witness(gadget.output[3], 0)
        with pytest.raises(UnsatisfiedConstraint) as exc_info:
            cs.verify_constraints()
        assert "output[3]" in exc_info.value.annotation


class TestSharkMimcInverse:
    def test_shape(self, GF, params):
        cs, gadget = _build(GF, params, sbox=InverseSBox())
        assert cs.num_constraints == 62 + 172 + 4

    def test_matches_reference(self, GF, params, shark_params_data):
        keys, matrix = shark_params_data
        cs, gadget = _build(GF, params, sbox=InverseSBox())
        out = gadget.generate_r1cs_witness(INPUTS)

        expected = sharkmimc_reference(keys, matrix, INPUTS, exponent=-1)
        assert [int(v) for v in out] == expected
        cs.verify_constraints()

    def test_differs_from_cube(self, GF, params):
        _, cube = _build(GF, params)
        _, inverse = _build(GF, params, sbox=InverseSBox())
        assert cube.generate_r1cs_witness(INPUTS) != inverse.generate_r1cs_witness(
            INPUTS
        )

    def test_inverse_of_zero(self, GF, params, shark_params_data):
        keys, _ = shark_params_data
        cs, gadget = _build(GF, params, sbox=InverseSBox())
        values = [P - keys[0], 2, 3, 4]
        with pytest.raises(InverseOfZero) as exc_info:
            gadget.generate_r1cs_witness(values)
        assert "round[1].sbox[0]" in exc_info.value.label

        gadget.generate_r1cs_witness(INPUTS)
        cs.verify_constraints()

    def test_failed_pass_leaves_no_stale_values(self, GF, params, shark_params_data):
        keys, _ = shark_params_data
        cs, gadget = _build(GF, params, sbox=InverseSBox())
        gadget.generate_r1cs_witness(INPUTS)

        values = [P - keys[0], 2, 3, 4]
        with pytest.raises(InverseOfZero):
            gadget.generate_r1cs_witness(values)

        assert all(cs.witness[v] is None for v in gadget.result())
        assert all(cs.witness[v] is None for v in gadget.owned_variables())
        assert cs.primary_input() == [GF(v) for v in values]


class TestSharkMimcShapes:
    def test_small_shape(self, GF):
        params = benchmark_sharkmimc_parameters(
            GF, seed=5, num_branches=3, full_rounds=2, middle_rounds=4
        )
        cs, gadget = _build(GF, params)
        # 16 S-boxes * 2 + 7 mixing rounds * 3 + 3 output bindings
        assert gadget.num_sboxes == 16
        assert cs.num_constraints == 56

        values = [7, 8, 9]
        out = gadget.generate_r1cs_witness(values)
        expected = sharkmimc_reference(
            [int(k) for k in params.round_keys],
            [[int(v) for v in row] for row in params.matrix],
            values,
            n=3,
            full_rounds=2,
            middle_rounds=4,
        )
        assert [int(v) for v in out] == expected
        assert gadget.key_slots_consumed["witness"] == 27
        cs.verify_constraints()

    def test_random_matrix(self, GF61):
        params = benchmark_sharkmimc_parameters(GF61, seed=11, matrix="random")
        cs, gadget = _build(GF61, params)
        out = gadget.generate_r1cs_witness(INPUTS)

        expected = sharkmimc_reference(
            [int(k) for k in params.round_keys],
            [[int(v) for v in row] for row in params.matrix],
            INPUTS,
            p=GF61.characteristic,
        )
        assert [int(v) for v in out] == expected
        cs.verify_constraints()


class TestSharkMimcErrors:
    def test_wrong_number_of_input_variables(self, GF, params):
        cs = ConstraintSystem(GF)
        inputs = cs.allocate_variables(3, "input")
        with pytest.raises(ConfigurationError, match="4 input variables"):
            SharkMimc(cs, params, inputs)

    def test_wrong_number_of_input_values(self, GF, params):
        cs, gadget = _build(GF, params)
        with pytest.raises(ConfigurationError, match="4 input values"):
            gadget.generate_r1cs_witness([1, 2, 3])

    def test_schedule_drift(self, GF, params):
        cs = ConstraintSystem(GF)
        inputs = cs.allocate_variables(4, "input")
        gadget = SharkMimc(cs, params, inputs)

        final = params.schedule[-1]
        params.schedule = params.schedule[:-1] + (
            replace(final, output=final.output[:-1]),
        )
        with pytest.raises(IndexDrift) as exc_info:
            gadget.generate_r1cs_constraints()
        assert exc_info.value.pass_name == "constraint"
        assert exc_info.value.consumed == 179
        assert exc_info.value.expected == 180

    def test_witness_before_constraints(self, GF, params):
        cs = ConstraintSystem(GF)
        gadget = SharkMimc(cs, params, cs.allocate_variables(4, "input"))
        with pytest.raises(ArithmetizationError):
            gadget.generate_r1cs_witness(INPUTS)
