"""Encoders and decoders for the register-format (R-type) instructions.

Every R-type word has a zero op code in bits 31..26 and is told apart by
its function code in bits 5..0. Encoders take an :class:`Instruction` and
return the 32-bit word; decoders take a word and return the instruction.
A mismatching op code or function code raises
:class:`TranslationError` with ``Status.WRONG_COMMAND``.
"""

from __future__ import annotations

from mipstran.bits import check_bits, get_bits, set_bits, set_number
from mipstran.model import Instruction, Param, ParamType, Status, TranslationError

_OPCODE = "000000"
_MAX_REGISTER = 31

# Bit positions of the top bit of each register field.
_RS = 25
_RT = 20
_RD = 15
_SHAMT = 10
_FUNCT = 5

_FUNCT_ADD = "100000"
_FUNCT_SUB = "100010"
_FUNCT_MULT = "011000"
_FUNCT_DIV = "011010"
_FUNCT_MFHI = "010010"
_FUNCT_MFLO = "010000"
_FUNCT_AND = "100100"
_FUNCT_OR = "100101"
_FUNCT_SLT = "101010"


def _require_op(instruction: Instruction, op: str) -> None:
    if instruction.op != op:
        raise TranslationError(Status.WRONG_COMMAND)


def _registers(instruction: Instruction, count: int) -> list[int]:
    """Return the first ``count`` operands as register numbers, validated."""
    params = instruction.params[:count]
    if any(param.type is not ParamType.REGISTER for param in params):
        raise TranslationError(Status.MISSING_REG)
    if any(not 0 <= param.value <= _MAX_REGISTER for param in params):
        raise TranslationError(Status.INVALID_REG)
    return [param.value for param in params]


def _base_word(funct: str) -> int:
    return set_bits(set_bits(0, 31, _OPCODE), _FUNCT, funct)


def _require_funct(word: int, funct: str) -> None:
    if not (check_bits(word, 31, _OPCODE) and check_bits(word, _FUNCT, funct)):
        raise TranslationError(Status.WRONG_COMMAND)


def _registers_instruction(op: str, *numbers: int) -> Instruction:
    return Instruction(op, tuple(Param(ParamType.REGISTER, n) for n in numbers))


# Three registers: OP $rd, $rs, $rt

def _encode_three(instruction: Instruction, op: str, funct: str) -> int:
    _require_op(instruction, op)
    rd, rs, rt = _registers(instruction, 3)
    word = _base_word(funct)
    word = set_number(word, _RS, rs, 5)
    word = set_number(word, _RT, rt, 5)
    word = set_number(word, _RD, rd, 5)
    return word


def _decode_three(word: int, op: str, funct: str) -> Instruction:
    _require_funct(word, funct)
    rd = get_bits(word, _RD, 5)
    rs = get_bits(word, _RS, 5)
    rt = get_bits(word, _RT, 5)
    return _registers_instruction(op, rd, rs, rt)


# Two registers: OP $rt, $rs (the HI/LO operations)

def _encode_two(instruction: Instruction, op: str, funct: str) -> int:
    _require_op(instruction, op)
    rt, rs = _registers(instruction, 2)
    word = _base_word(funct)
    word = set_number(word, _RT, rt, 5)
    word = set_number(word, _RS, rs, 5)
    return word


def _decode_two(word: int, op: str, funct: str) -> Instruction:
    _require_funct(word, funct)
    rs = get_bits(word, _RS, 5)
    rt = get_bits(word, _RT, 5)
    return _registers_instruction(op, rt, rs)


# One register: OP $rd (moves from HI/LO)

def _encode_move(instruction: Instruction, op: str, funct: str) -> int:
    _require_op(instruction, op)
    (rd,) = _registers(instruction, 1)
    return set_number(_base_word(funct), _RD, rd, 5)


def _decode_move(word: int, op: str, funct: str) -> Instruction:
    _require_funct(word, funct)
    if not (check_bits(word, _RS, "0" * 10) and check_bits(word, _SHAMT, "00000")):
        raise TranslationError(Status.WRONG_COMMAND)
    return _registers_instruction(op, get_bits(word, _RD, 5))


def encode_add(instruction: Instruction) -> int:
    """Encode ``ADD $rd, $rs, $rt``."""
    return _encode_three(instruction, "ADD", _FUNCT_ADD)


def decode_add(word: int) -> Instruction:
    """Decode an ADD word."""
    return _decode_three(word, "ADD", _FUNCT_ADD)


def encode_sub(instruction: Instruction) -> int:
    """Encode ``SUB $rd, $rs, $rt``."""
    return _encode_three(instruction, "SUB", _FUNCT_SUB)


def decode_sub(word: int) -> Instruction:
    """Decode a SUB word."""
    return _decode_three(word, "SUB", _FUNCT_SUB)


def encode_mult(instruction: Instruction) -> int:
    """Encode ``MULT $rt, $rs``."""
    return _encode_two(instruction, "MULT", _FUNCT_MULT)


def decode_mult(word: int) -> Instruction:
    """Decode a MULT word."""
    return _decode_two(word, "MULT", _FUNCT_MULT)


def encode_div(instruction: Instruction) -> int:
    """Encode ``DIV $rt, $rs``."""
    return _encode_two(instruction, "DIV", _FUNCT_DIV)


def decode_div(word: int) -> Instruction:
    """Decode a DIV word."""
    return _decode_two(word, "DIV", _FUNCT_DIV)


def encode_mfhi(instruction: Instruction) -> int:
    """Encode ``MFHI $rd``."""
    return _encode_move(instruction, "MFHI", _FUNCT_MFHI)


def decode_mfhi(word: int) -> Instruction:
    """Decode an MFHI word; bits 25..16 and 10..6 must be zero."""
    return _decode_move(word, "MFHI", _FUNCT_MFHI)


def encode_mflo(instruction: Instruction) -> int:
    """Encode ``MFLO $rd``."""
    return _encode_move(instruction, "MFLO", _FUNCT_MFLO)


def decode_mflo(word: int) -> Instruction:
    """Decode an MFLO word; bits 25..16 and 10..6 must be zero."""
    return _decode_move(word, "MFLO", _FUNCT_MFLO)


def encode_and(instruction: Instruction) -> int:
    """Encode ``AND $rd, $rs, $rt``."""
    return _encode_three(instruction, "AND", _FUNCT_AND)


def decode_and(word: int) -> Instruction:
    """Decode an AND word."""
    return _decode_three(word, "AND", _FUNCT_AND)


def encode_or(instruction: Instruction) -> int:
    """Encode ``OR $rd, $rs, $rt``."""
    return _encode_three(instruction, "OR", _FUNCT_OR)


def decode_or(word: int) -> Instruction:
    """Decode an OR word."""
    return _decode_three(word, "OR", _FUNCT_OR)


def encode_slt(instruction: Instruction) -> int:
    """Encode ``SLT $rd, $rs, $rt``."""
    return _encode_three(instruction, "SLT", _FUNCT_SLT)


def decode_slt(word: int) -> Instruction:
    """Decode an SLT word."""
    return _decode_three(word, "SLT", _FUNCT_SLT)