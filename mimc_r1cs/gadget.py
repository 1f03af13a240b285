from abc import ABC, abstractmethod

from .errors import ArithmetizationError
from .r1cs import ConstraintSystem


class Gadget(ABC):
    """A circuit fragment bound to one constraint system.

    Variables are allocated in the constructor.  ``generate_r1cs_constraints``
    runs once and fixes the shape of the system; ``generate_r1cs_witness`` can
    then be called any number of times with different inputs.  Each witness
    pass starts from unassigned slots, so a pass that fails part way leaves
    no values from an earlier input behind.
    """

    def __init__(self, cs: ConstraintSystem, annotation_prefix: str = ""):
        self.cs = cs
        self.annotation_prefix = annotation_prefix
        self.constraints_generated = False

    def label(self, name: str) -> str:
        if self.annotation_prefix:
            return f"{self.annotation_prefix}.{name}"
        return name

    def generate_r1cs_constraints(self) -> None:
        if self.constraints_generated:
            raise ArithmetizationError(
                f"{type(self).__name__}: constraints already generated"
            )
        self._generate_constraints()
        self.constraints_generated = True

    def _require_constraints(self) -> None:
        if not self.constraints_generated:
            raise ArithmetizationError(
                f"{type(self).__name__}: generate constraints before the witness"
            )

    def _reset_witness(self) -> None:
        """Unassign every slot this gadget allocated, leaving its inputs."""
        self.cs.clear_witness(self.owned_variables())

    @abstractmethod
    def owned_variables(self) -> list[int]:
        pass

    @abstractmethod
    def _generate_constraints(self) -> None:
        pass

    @abstractmethod
    def result(self):
        pass
