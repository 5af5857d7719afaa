"""Parsing of assembly text and of hexadecimal or binary machine words."""

from __future__ import annotations

import string

from mipstran.bits import WORD_MASK
from mipstran.model import (
    PARAM_COUNT,
    Instruction,
    Param,
    ParamType,
    Status,
    TranslationError,
)

# Value given to a register operand whose name is not recognised; it is
# rejected later, when the instruction is encoded.
UNKNOWN_REGISTER = 0xFFFFFFFF

# Longer mnemonics come before the shorter ones they start with.
OP_CODES = (
    "ADDI", "ADD", "ANDI", "AND", "BEQ", "BNE", "DIV", "LUI", "LW",
    "MFHI", "MFLO", "MULT", "ORI", "OR", "SLTI", "SLT", "SUB", "SW",
)

_REGISTERS = {
    "zero": 0,
    "v0": 2, "v1": 3,
    "a0": 4, "a1": 5, "a2": 6, "a3": 7,
    "t0": 8, "t1": 9, "t2": 10, "t3": 11,
    "t4": 12, "t5": 13, "t6": 14, "t7": 15,
    "s0": 16, "s1": 17, "s2": 18, "s3": 19,
    "s4": 20, "s5": 21, "s6": 22, "s7": 23,
    "t8": 24, "t9": 25,
    "gp": 28, "sp": 29, "fp": 30, "ra": 31,
}

# Op codes whose operands need no separating comma.
_COMMA_OPTIONAL = frozenset({"LW", "SW", "MFLO", "MFHI"})

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ALNUM = frozenset(string.ascii_letters + string.digits)
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)


def _split_while(text: str, allowed: frozenset[str]) -> tuple[str, str]:
    end = next((i for i, char in enumerate(text) if char not in allowed), len(text))
    return text[:end], text[end:]


def _has_hex_prefix(text: str) -> bool:
    return text[:1] == "0" and text[1:2].upper() == "X"


def starts_with(line: str, prefix: str) -> bool:
    """Return True if ``line`` begins with ``prefix``, ignoring ASCII case."""
    return line.translate(_UPPER).startswith(prefix.translate(_UPPER))


def register_number(name: str) -> int | None:
    """Return the number of the register called ``name`` (without '$'), or None."""
    return _REGISTERS.get(name)


def parse_immediate(text: str) -> tuple[int, str]:
    """Read a decimal or '0x'-prefixed hex number from the start of ``text``.

    Returns the value, wrapped to 32 bits, and the text that follows it.
    """
    if _has_hex_prefix(text):
        digits, rest = _split_while(text[2:], _HEX_DIGITS)
        base = 16
    else:
        digits, rest = _split_while(text, _DIGITS)
        base = 10
    value = int(digits, base) & WORD_MASK if digits else 0
    return value, rest


def _read_param(line: str, op: str) -> tuple[Param, str]:
    line = line.lstrip(" ")
    comma_seen = line.startswith(",")
    if comma_seen:
        line = line[1:]
    if line.startswith("("):
        line = line[1:]
    line = line.lstrip(" ")
    if not line:
        raise TranslationError(Status.MISSING_PARAM)

    if line[0] == "$":
        name, line = _split_while(line[1:], _ALNUM)
        number = register_number(name)
        param = Param(
            ParamType.REGISTER, UNKNOWN_REGISTER if number is None else number
        )
    elif line[0] == "#":
        value, line = parse_immediate(line[1:])
        param = Param(ParamType.IMMEDIATE, value)
    else:
        raise TranslationError(Status.INVALID_PARAM)

    if line.startswith(")"):
        line = line[1:]
    line = line.lstrip(" ")

    if not comma_seen and op not in _COMMA_OPTIONAL and not line.startswith(","):
        raise TranslationError(Status.MISSING_COMMA)
    return param, line


def parse_assembly(line: str) -> Instruction:
    """Parse one line of assembly into an :class:`Instruction`."""
    if not line:
        raise TranslationError(Status.UNDEF_ERROR)

    op = next((code for code in OP_CODES if starts_with(line, code)), None)
    if op is None:
        raise TranslationError(Status.UNRECOGNIZED_COMMAND)

    rest = line[len(op):]
    if not rest.startswith(" "):
        raise TranslationError(Status.MISSING_SPACE)
    rest = rest.lstrip(" ")

    params: list[Param] = []
    while len(params) < PARAM_COUNT:
        param, rest = _read_param(rest, op)
        params.append(param)
        if not rest:
            break
    return Instruction(op, tuple(params))


def parse_hex(line: str) -> int:
    """Parse a hexadecimal machine word, with or without a '0x' prefix."""
    if not line:
        raise TranslationError(Status.UNDEF_ERROR)
    text = line[2:] if _has_hex_prefix(line) else line
    digits, _ = _split_while(text, _HEX_DIGITS)
    return int(digits, 16) & WORD_MASK if digits else 0


def parse_binary(line: str) -> int:
    """Parse a binary machine word; characters other than '0' and '1' are skipped."""
    if not line:
        raise TranslationError(Status.UNDEF_ERROR)
    digits = "".join(char for char in line if char in "01")
    return int(digits, 2) & WORD_MASK if digits else 0