class MimcR1CSError(Exception):
    """Base exception for circuit construction"""

    pass


class ConfigurationError(MimcR1CSError, ValueError):
    """Parameters rejected at construction time"""

    pass


class ArithmetizationError(MimcR1CSError):
    """Constraint or witness generation failed"""

    pass


class InverseOfZero(ArithmetizationError, ZeroDivisionError):
    """An inverse S-box was asked to invert zero during witness generation.

    The constraint system is left untouched; only the running witness pass
    is aborted.
    """

    def __init__(self, label: str = ""):
        self.label = label
        where = f" at {label}" if label else ""
        super().__init__(f"cannot invert zero{where}")


class IndexDrift(ArithmetizationError):
    """A pass consumed a different number of round-key slots than scheduled."""

    def __init__(self, pass_name: str, consumed: int, expected: int):
        self.pass_name = pass_name
        self.consumed = consumed
        self.expected = expected
        super().__init__(
            f"{pass_name} pass consumed {consumed} round-key slots, "
            f"schedule has {expected}"
        )


class MissingWitness(ArithmetizationError):
    """A witness slot was read before it was assigned"""

    pass


class UnsatisfiedConstraint(MimcR1CSError):
    """Raised by verification when (A·w)·(B·w) != C·w for some row."""

    def __init__(self, index: int, annotation: str, left, right, out):
        self.index = index
        self.annotation = annotation
        detail = f" ({annotation})" if annotation else ""
        super().__init__(
            f"Constraint {index}{detail} failed: {left} * {right} != {out}"
        )
