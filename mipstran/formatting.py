"""Rendering of instructions, machine words and status messages."""

from __future__ import annotations

import textwrap

from mipstran.bits import WORD_MASK
from mipstran.model import Instruction, Param, ParamType, Status

_NAMED_REGISTERS = {0: "$zero", 28: "$gp", 29: "$sp", 30: "$fp", 31: "$ra"}

# (first, last, prefix, base): registers first..last render as prefix + (n - base)
_REGISTER_RANGES = (
    (2, 3, "$v", 2),
    (4, 7, "$a", 4),
    (8, 15, "$t", 8),
    (16, 23, "$s", 16),
    (24, 25, "$t", 16),
)

_MEMORY_OPS = frozenset({"LW", "SW"})

_ERROR_MESSAGES = {
    Status.UNRECOGNIZED_COMMAND: "The given instruction was not recognized",
    Status.UNRECOGNIZED_COND: "The given conditional is not recognized",
    Status.MISSING_REG: "Missing register parameter",
    Status.INVALID_REG: "The given register is invalid for the specified command",
    Status.MISSING_PARAM: "Expected a param, none was found",
    Status.INVALID_PARAM: "The given parameter is invalid for the specified command",
    Status.UNEXPECTED_PARAM: "Found a parameter when none was expected",
    Status.INVALID_IMMED: "The given immediate value is invalid for the specified command",
    Status.MISSING_SPACE: "Expected a space, none was found",
    Status.MISSING_COMMA: "Expected a comma, none was found",
    Status.INVALID_SHIFT: "The given shift is invalid",
    Status.MISSING_SHIFT: "Expected a shift value but none was found",
}
_UNKNOWN_ERROR = "An unknown error code has occured"


def _register_name(number: int) -> str:
    if number in _NAMED_REGISTERS:
        return _NAMED_REGISTERS[number]
    for first, last, prefix, base in _REGISTER_RANGES:
        if first <= number <= last:
            return f"{prefix}{number - base}"
    return ""


def format_param(param: Param) -> str:
    """Render one operand: '$name' for registers, '#0xHEX' for immediates."""
    if param.type is ParamType.IMMEDIATE:
        return f"#0x{param.value:X}"
    if param.type is ParamType.EMPTY:
        # An empty operand is marked and then rendered like a register.
        return "<>" + _register_name(param.value)
    return _register_name(param.value)


def format_assembly(instruction: Instruction) -> str:
    """Render an instruction as a line of assembly."""
    first, second, third, fourth = instruction.params
    parts = [instruction.op, " "]
    if first.type is not ParamType.EMPTY:
        parts.append(format_param(first))
    if second.type is not ParamType.EMPTY:
        parts.append(", " + format_param(second))
    if third.type is not ParamType.EMPTY:
        if third.type is ParamType.REGISTER and instruction.op in _MEMORY_OPS:
            parts.append(f"({format_param(third)})")
        else:
            parts.append(", " + format_param(third))
    if fourth.type is not ParamType.EMPTY:
        parts.append(", " + format_param(fourth))
    return "".join(parts)


def format_machine(word: int) -> str:
    """Render a machine word in hex and as nibble-grouped binary."""
    word &= WORD_MASK
    groups = " ".join(textwrap.wrap(format(word, "032b"), 4))
    return f"Hex: 0x{word:08X}\tBinary:{groups} "


def status_message(status: Status) -> str:
    """Return the message shown for a status that carries no result."""
    if status in (Status.COMPLETE_ENCODE, Status.COMPLETE_DECODE):
        raise ValueError(f"{status.name} is reported by its result, not a message")
    if status is Status.NO_ERROR:
        return "System is Error Free"
    return "ERROR: " + _ERROR_MESSAGES.get(status, _UNKNOWN_ERROR)