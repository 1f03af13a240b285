# coding: utf-8
"""Prime field helpers on top of galois.

Every gadget in this package takes the field as a ``galois.GF`` class and
works with 0-d field arrays as scalars. ``BN254`` is the default field.
"""

import galois

from .constants import BN254_SCALAR_GENERATOR, BN254_SCALAR_MODULUS
from .errors import InverseOfZero

BN254 = galois.GF(
    BN254_SCALAR_MODULUS, primitive_element=BN254_SCALAR_GENERATOR, verify=False
)


def prime_field(modulus: int, primitive_element: int | None = None):
    """Return the galois class for GF(``modulus``).

    Without ``primitive_element`` galois searches for one, which means
    factoring ``modulus - 1``; that is fine for small moduli only.
    """
    if primitive_element is None:
        return galois.GF(modulus)
    return galois.GF(modulus, primitive_element=primitive_element, verify=False)


def parse_decimal(GF, value: str) -> "GF":
    """Parse a decimal string into ``GF``, reducing modulo the characteristic."""
    return GF(int(value, 10) % GF.characteristic)


def to_field(GF, value) -> "GF":
    if isinstance(value, galois.FieldArray):
        if type(value) is not GF:
            raise TypeError(f"{value!r} belongs to a different field than {GF.name}")
        return value
    if isinstance(value, str):
        return parse_decimal(GF, value)
    return GF(int(value) % GF.characteristic)


def inverse(x: "GF", label: str = "") -> "GF":
    """Multiplicative inverse; zero has none and raises ``InverseOfZero``.

    Goes through ``fermat_inverse``, the same routine ``cauchy_matrix`` uses.
    """
    if x == 0:
        raise InverseOfZero(label)
    return fermat_inverse(x)


# -----------------------------------------------------------------------------
# Exponentiation
# -----------------------------------------------------------------------------


def fast_pow(base: "GF", exponent: int) -> "GF":
    """Square-and-multiply exponentiation in the multiplicative group."""
    assert exponent >= 0, "exponent must be non-negative"

    GF = type(base)
    result = GF(1)
    square = base
    while exponent > 0:
        if exponent & 1:
            result = result * square
        square = square * square
        exponent >>= 1
    return result


def naive_pow(base: "GF", exponent: int) -> "GF":
    """Repeated multiplication, used to cross-check ``fast_pow``."""
    assert exponent >= 0, "exponent must be non-negative"

    result = type(base)(1)
    for _ in range(exponent):
        result = result * base
    return result


def fermat_inverse(x: "GF") -> "GF":
    """x^(p-2); maps zero to zero instead of failing."""
    return fast_pow(x, type(x).characteristic - 2)
