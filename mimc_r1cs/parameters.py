from dataclasses import dataclass, field
from enum import Enum

import galois

from .constants import (
    LONGSIGHTF_MIN_ROUNDS,
    SHARKMIMC_FULL_ROUNDS,
    SHARKMIMC_MIDDLE_ROUNDS,
    SHARKMIMC_NUM_BRANCHES,
)
from .errors import ConfigurationError
from .field import to_field
from .linear_layer import is_invertible
from .round_constants import LONGSIGHTF_TABLES

# -----------------------------------------------------------------------------
# LongsightF
# -----------------------------------------------------------------------------


@dataclass
class LongsightFParameters:
    """Round constants and S-box choice for a LongsightF chain.

    ``constrain_all_rounds=False`` leaves the last two rounds without
    constraints, exactly like the libsnark gadget the round structure comes
    from; their values are still computed by the witness pass.
    """

    GF: type
    round_constants: tuple
    exponent: int = 3
    constrain_all_rounds: bool = True

    def __post_init__(self):
        if len(self.round_constants) < LONGSIGHTF_MIN_ROUNDS:
            raise ConfigurationError(
                f"LongsightF needs at least {LONGSIGHTF_MIN_ROUNDS} round "
                f"constants, got {len(self.round_constants)}"
            )
        if self.exponent not in (3, 5, -1):
            raise ConfigurationError(f"unsupported S-box exponent {self.exponent}")
        self.round_constants = tuple(
            to_field(self.GF, c) for c in self.round_constants
        )

    @property
    def num_rounds(self) -> int:
        return len(self.round_constants)

    @property
    def num_constrained_rounds(self) -> int:
        if self.constrain_all_rounds:
            return self.num_rounds
        return self.num_rounds - 2

    @classmethod
    def from_table(cls, GF, name: str, **kwargs) -> "LongsightFParameters":
        try:
            table = LONGSIGHTF_TABLES[name]
        except KeyError:
            raise ConfigurationError(
                f"unknown constant table {name!r}, expected one of "
                f"{sorted(LONGSIGHTF_TABLES)}"
            ) from None
        return cls(GF, table, **kwargs)


# -----------------------------------------------------------------------------
# SharkMimc round-key schedule
# -----------------------------------------------------------------------------


class RoundKind(Enum):
    FULL = "full"
    PARTIAL = "partial"
    FINAL = "final"


@dataclass(frozen=True)
class RoundKeys:
    """Key slots read by one SharkMimc round.

    ``sbox`` holds one slot per S-box (all branches in full and final rounds,
    branch 0 only in partial rounds), ``passthrough`` one slot per branch that
    skips the S-box, ``output`` the slot added after the final S-box layer.
    """

    round_no: int
    kind: RoundKind
    sbox: tuple[int, ...]
    passthrough: tuple[int, ...] = ()
    output: tuple[int, ...] = ()

    @property
    def num_slots(self) -> int:
        return len(self.sbox) + len(self.passthrough) + len(self.output)


def num_round_keys(num_branches: int, full_rounds: int, middle_rounds: int) -> int:
    return (middle_rounds + 2 * full_rounds + 1) * num_branches


def key_schedule(
    num_branches: int, full_rounds: int, middle_rounds: int
) -> tuple[RoundKeys, ...]:
    """Table of round index -> key indices, shared by both circuit passes.

    Rounds are numbered from 1.  The first ``full_rounds`` rounds put every
    branch through the S-box, the next ``middle_rounds`` only branch 0, then
    ``full_rounds - 1`` full rounds and one final round without mixing.
    """
    schedule = []
    offset = 0
    round_no = 1

    def take(n: int) -> tuple[int, ...]:
        nonlocal offset
        slots = tuple(range(offset, offset + n))
        offset += n
        return slots

    for _ in range(full_rounds):
        schedule.append(RoundKeys(round_no, RoundKind.FULL, take(num_branches)))
        round_no += 1

    for _ in range(middle_rounds):
        sbox = take(1)
        passthrough = take(num_branches - 1)
        schedule.append(RoundKeys(round_no, RoundKind.PARTIAL, sbox, passthrough))
        round_no += 1

    for _ in range(full_rounds - 1):
        schedule.append(RoundKeys(round_no, RoundKind.FULL, take(num_branches)))
        round_no += 1

    # Final round interleaves S-box key and output key per branch.
    sbox, output = [], []
    for _ in range(num_branches):
        sbox.extend(take(1))
        output.extend(take(1))
    schedule.append(RoundKeys(round_no, RoundKind.FINAL, tuple(sbox), (), tuple(output)))

    assert offset == num_round_keys(num_branches, full_rounds, middle_rounds)
    return tuple(schedule)


# -----------------------------------------------------------------------------
# SharkMimc
# -----------------------------------------------------------------------------


@dataclass
class SharkMimcParameters:
    """Round keys and mixing matrix for SharkMimc.

    Production use needs externally vetted keys and an MDS matrix; see
    ``benchmark_data`` for the throw-away generators used in tests.
    """

    GF: type
    round_keys: tuple
    matrix: galois.FieldArray
    num_branches: int = SHARKMIMC_NUM_BRANCHES
    full_rounds: int = SHARKMIMC_FULL_ROUNDS
    middle_rounds: int = SHARKMIMC_MIDDLE_ROUNDS
    schedule: tuple[RoundKeys, ...] = field(init=False, repr=False)

    def __post_init__(self):
        if self.num_branches < 2:
            raise ConfigurationError("SharkMimc needs at least 2 branches")
        if self.full_rounds < 1 or self.middle_rounds < 0:
            raise ConfigurationError(
                f"invalid round counts: full={self.full_rounds}, "
                f"middle={self.middle_rounds}"
            )

        expected = num_round_keys(self.num_branches, self.full_rounds, self.middle_rounds)
        if len(self.round_keys) != expected:
            raise ConfigurationError(
                f"expected {expected} round keys, got {len(self.round_keys)}"
            )
        self.round_keys = tuple(to_field(self.GF, k) for k in self.round_keys)
        self.matrix = self._as_matrix(self.matrix)
        self.schedule = key_schedule(
            self.num_branches, self.full_rounds, self.middle_rounds
        )

    def _as_matrix(self, matrix):
        rows = [list(row) for row in matrix]
        n = self.num_branches
        if len(rows) != n or any(len(row) != n for row in rows):
            raise ConfigurationError(
                f"mixing matrix must be {n}x{n}, got "
                f"{len(rows)}x{len(rows[0]) if rows else 0}"
            )
        try:
            return self.GF([[int(to_field(self.GF, v)) for v in row] for row in rows])
        except TypeError as exc:
            raise ConfigurationError(f"mixing matrix: {exc}") from exc

    @property
    def total_rounds(self) -> int:
        return 2 * self.full_rounds + self.middle_rounds

    @property
    def num_round_keys(self) -> int:
        return len(self.round_keys)

    def check_invertible(self) -> None:
        if not is_invertible(self.matrix):
            raise ConfigurationError("mixing matrix is singular")
