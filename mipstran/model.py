"""Core data types shared by the assembler and disassembler."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum

PARAM_COUNT = 4


class Status(IntEnum):
    """Outcome of a parse, encode or decode step."""

    NO_ERROR = 0
    WRONG_COMMAND = 1
    UNRECOGNIZED_COMMAND = 2
    UNRECOGNIZED_COND = 3
    COMPLETE_ENCODE = 4
    COMPLETE_DECODE = 5
    MISSING_REG = 6
    INVALID_REG = 7
    MISSING_PARAM = 8
    INVALID_PARAM = 9
    UNEXPECTED_PARAM = 10
    INVALID_IMMED = 11
    MISSING_SPACE = 12
    MISSING_COMMA = 13
    INVALID_SHIFT = 14
    MISSING_SHIFT = 15
    UNDEF_ERROR = 16


class ParamType(Enum):
    """Kind of an instruction operand."""

    EMPTY = 0
    REGISTER = 1
    IMMEDIATE = 2


@dataclass(frozen=True)
class Param:
    """A single operand: a register number or an immediate value."""

    type: ParamType = ParamType.EMPTY
    value: int = 0


def _empty_params() -> tuple[Param, ...]:
    return tuple(Param() for _ in range(PARAM_COUNT))


@dataclass(frozen=True)
class Instruction:
    """A textual instruction: an op code and up to four operands."""

    op: str = ""
    params: tuple[Param, ...] = field(default_factory=_empty_params)

    def __post_init__(self) -> None:
        params = tuple(self.params)
        if len(params) > PARAM_COUNT:
            raise ValueError(
                f"an instruction holds at most {PARAM_COUNT} parameters"
            )
        padded = params + tuple(Param() for _ in range(PARAM_COUNT - len(params)))
        object.__setattr__(self, "params", padded)

    @staticmethod
    def _check_index(index: int) -> None:
        if not 1 <= index <= PARAM_COUNT:
            raise IndexError(f"parameter index must be 1..{PARAM_COUNT}, got {index}")

    def param(self, index: int) -> Param:
        """Return the operand at the 1-based position ``index``."""
        self._check_index(index)
        return self.params[index - 1]

    def with_param(self, index: int, param: Param) -> Instruction:
        """Return a copy with the operand at 1-based ``index`` replaced."""
        self._check_index(index)
        params = list(self.params)
        params[index - 1] = param
        return replace(self, params=tuple(params))


class TranslationError(Exception):
    """Raised when an instruction cannot be parsed, encoded or decoded."""

    def __init__(self, status: Status) -> None:
        super().__init__(status.name)
        self.status = status