# Scalar field of the BN254 (alt_bn128) curve, the default field of the
# libsnark protoboards these circuits were first written for.
BN254_SCALAR_MODULUS = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)

# Multiplicative generator of the BN254 scalar field. Passing it to galois
# skips the factorisation of p - 1 that a primitive root search needs.
BN254_SCALAR_GENERATOR = 5

# Mersenne 61 field, small enough for quick hand-checked examples.
MERSENNE61 = 2**61 - 1

# SharkMimc shape
SHARKMIMC_NUM_BRANCHES = 4
SHARKMIMC_FULL_ROUNDS = 3
SHARKMIMC_MIDDLE_ROUNDS = 38

# LongsightF needs at least this many round constants
LONGSIGHTF_MIN_ROUNDS = 3
