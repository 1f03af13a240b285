"""
R1CS arithmetization of the LongsightF and SharkMimc permutations.

Usage:
    from mimc_r1cs import BN254, ConstraintSystem, LongsightF, LongsightFParameters

    cs = ConstraintSystem(BN254)
    start_L = cs.allocate_variable("start_L")
    start_R = cs.allocate_variable("start_R")
    cs.set_input_sizes(2)

    params = LongsightFParameters.from_table(BN254, "LongsightF5p3")
    gadget = LongsightF(cs, params, start_L, start_R)
    gadget.generate_r1cs_constraints()
    gadget.generate_r1cs_witness(left=2, right=3)
    cs.verify_constraints()
"""

from .errors import (
    ArithmetizationError,
    ConfigurationError,
    IndexDrift,
    InverseOfZero,
    MimcR1CSError,
    MissingWitness,
    UnsatisfiedConstraint,
)
from .field import BN254, fast_pow, inverse, naive_pow, parse_decimal, prime_field
from .linear_layer import cauchy_matrix, mix, mix_linear_combinations
from .longsightf import FeistelRound, LongsightF
from .parameters import (
    LongsightFParameters,
    RoundKeys,
    RoundKind,
    SharkMimcParameters,
    key_schedule,
)
from .r1cs import ONE, ConstraintSystem
from .sbox import CubeSBox, InverseSBox, QuinticSBox, sbox_for_exponent
from .sharkmimc import SharkMimc

__version__ = "0.1.0"
__all__ = [
    # Errors
    "MimcR1CSError",
    "ConfigurationError",
    "ArithmetizationError",
    "InverseOfZero",
    "IndexDrift",
    "MissingWitness",
    "UnsatisfiedConstraint",
    # Field
    "BN254",
    "prime_field",
    "parse_decimal",
    "inverse",
    "fast_pow",
    "naive_pow",
    # R1CS
    "ONE",
    "ConstraintSystem",
    # Parameters
    "LongsightFParameters",
    "SharkMimcParameters",
    "RoundKeys",
    "RoundKind",
    "key_schedule",
    # Gadgets
    "CubeSBox",
    "QuinticSBox",
    "InverseSBox",
    "sbox_for_exponent",
    "mix",
    "mix_linear_combinations",
    "cauchy_matrix",
    "FeistelRound",
    "LongsightF",
    "SharkMimc",
]
