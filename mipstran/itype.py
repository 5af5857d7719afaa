"""Encoders and decoders for the immediate-format (I-type) instructions.

Each I-type word carries its op code in bits 31..26, one register field in
bits 25..21, another in bits 20..16 and a 16-bit immediate in bits 15..0.
Encoders take an :class:`Instruction` and return the 32-bit word; decoders
take a word and return the instruction. A mismatching op code raises
:class:`TranslationError` with ``Status.WRONG_COMMAND``.
"""

from __future__ import annotations

from mipstran.bits import check_bits, get_bits, set_bits, set_number
from mipstran.model import Instruction, Param, ParamType, Status, TranslationError

_MAX_REGISTER = 31
_MAX_IMMEDIATE = 0xFFFF
_MAX_LOAD_OFFSET = 0x7FFF

# Bit positions of the top bit of each field.
_OPCODE = 31
_RS = 25
_RT = 20
_IMMEDIATE = 15

_OPCODE_ADDI = "001000"
_OPCODE_ANDI = "001100"
_OPCODE_ORI = "001101"
_OPCODE_LUI = "001111"
_OPCODE_LW = "100011"
_OPCODE_SW = "101011"
_OPCODE_BEQ = "000100"
_OPCODE_BNE = "000101"
_OPCODE_SLTI = "001010"


def _require_op(instruction: Instruction, op: str) -> None:
    if instruction.op != op:
        raise TranslationError(Status.WRONG_COMMAND)


def _require_opcode(word: int, opcode: str) -> None:
    if not check_bits(word, _OPCODE, opcode):
        raise TranslationError(Status.WRONG_COMMAND)


def _in_range(value: int, limit: int) -> bool:
    return 0 <= value <= limit


def _register(number: int) -> Param:
    return Param(ParamType.REGISTER, number)


def _immediate(value: int) -> Param:
    return Param(ParamType.IMMEDIATE, value)


def _build(opcode: str, rs: int, rt: int, immediate: int) -> int:
    word = set_bits(0, _OPCODE, opcode)
    word = set_number(word, _RT, rt, 5)
    word = set_number(word, _RS, rs, 5)
    return set_number(word, _IMMEDIATE, immediate, 16)


# Arithmetic, logic and branch form: OP $rt, $rs, #imm

def _encode_immediate(
    instruction: Instruction,
    op: str,
    opcode: str,
    *,
    zero_rs: bool = False,
) -> int:
    _require_op(instruction, op)
    rt, rs, imm = instruction.params[:3]
    if rt.type is not ParamType.REGISTER or rs.type is not ParamType.REGISTER:
        raise TranslationError(Status.MISSING_REG)
    if imm.type is not ParamType.IMMEDIATE:
        raise TranslationError(Status.INVALID_PARAM)
    if not _in_range(rt.value, _MAX_REGISTER):
        raise TranslationError(Status.INVALID_REG)
    rs_valid = rs.value == 0 if zero_rs else _in_range(rs.value, _MAX_REGISTER)
    if not rs_valid:
        raise TranslationError(Status.INVALID_REG)
    if not _in_range(imm.value, _MAX_IMMEDIATE):
        raise TranslationError(Status.INVALID_IMMED)
    return _build(opcode, rs.value, rt.value, imm.value)


def _decode_immediate(word: int, op: str, opcode: str) -> Instruction:
    _require_opcode(word, opcode)
    rs = get_bits(word, _RS, 5)
    rt = get_bits(word, _RT, 5)
    imm = get_bits(word, _IMMEDIATE, 16)
    return Instruction(op, (_register(rt), _register(rs), _immediate(imm)))


# Memory form: OP $rt, #offset($base)

def _encode_memory(
    instruction: Instruction,
    op: str,
    opcode: str,
    *,
    wrong_offset_type: Status,
    offset_limit: int,
) -> int:
    _require_op(instruction, op)
    rt, offset, base = instruction.params[:3]
    if rt.type is not ParamType.REGISTER:
        raise TranslationError(Status.MISSING_REG)
    if offset.type is not ParamType.IMMEDIATE:
        raise TranslationError(wrong_offset_type)
    if base.type is not ParamType.REGISTER:
        raise TranslationError(Status.MISSING_REG)
    if not _in_range(rt.value, _MAX_REGISTER):
        raise TranslationError(Status.INVALID_REG)
    if not _in_range(offset.value, offset_limit):
        raise TranslationError(Status.INVALID_IMMED)
    if not _in_range(base.value, _MAX_REGISTER):
        raise TranslationError(Status.INVALID_REG)
    return _build(opcode, base.value, rt.value, offset.value)


def _decode_memory(word: int, op: str, opcode: str) -> Instruction:
    _require_opcode(word, opcode)
    rt = get_bits(word, _RT, 5)
    base = get_bits(word, _RS, 5)
    offset = get_bits(word, _IMMEDIATE, 16)
    return Instruction(op, (_register(rt), _immediate(offset), _register(base)))


def encode_addi(instruction: Instruction) -> int:
    """Encode ``ADDI $rt, $rs, #imm``."""
    return _encode_immediate(instruction, "ADDI", _OPCODE_ADDI)


def decode_addi(word: int) -> Instruction:
    """Decode an ADDI word."""
    return _decode_immediate(word, "ADDI", _OPCODE_ADDI)


def encode_andi(instruction: Instruction) -> int:
    """Encode ``ANDI $rt, $rs, #imm``."""
    return _encode_immediate(instruction, "ANDI", _OPCODE_ANDI)


def decode_andi(word: int) -> Instruction:
    """Decode an ANDI word."""
    return _decode_immediate(word, "ANDI", _OPCODE_ANDI)


def encode_ori(instruction: Instruction) -> int:
    """Encode ``ORI $rt, $rs, #imm``.

    The word is written with the op code 001000, the one ADDI uses; only
    decoding recognises the ORI op code 001101.
    """
    return _encode_immediate(instruction, "ORI", _OPCODE_ADDI)


def decode_ori(word: int) -> Instruction:
    """Decode an ORI word (op code 001101)."""
    return _decode_immediate(word, "ORI", _OPCODE_ORI)


def encode_lui(instruction: Instruction) -> int:
    """Encode ``LUI $rt, $zero, #imm``; the middle register must be $zero."""
    return _encode_immediate(instruction, "LUI", _OPCODE_LUI, zero_rs=True)


def decode_lui(word: int) -> Instruction:
    """Decode an LUI word."""
    return _decode_immediate(word, "LUI", _OPCODE_LUI)


def encode_lw(instruction: Instruction) -> int:
    """Encode ``LW $rt, #offset($base)``; the offset may be at most 0x7FFF."""
    return _encode_memory(
        instruction,
        "LW",
        _OPCODE_LW,
        wrong_offset_type=Status.INVALID_IMMED,
        offset_limit=_MAX_LOAD_OFFSET,
    )


def decode_lw(word: int) -> Instruction:
    """Decode an LW word."""
    return _decode_memory(word, "LW", _OPCODE_LW)


def encode_sw(instruction: Instruction) -> int:
    """Encode ``SW $rt, #offset($base)``; the offset may be at most 0xFFFF."""
    return _encode_memory(
        instruction,
        "SW",
        _OPCODE_SW,
        wrong_offset_type=Status.INVALID_PARAM,
        offset_limit=_MAX_IMMEDIATE,
    )


def decode_sw(word: int) -> Instruction:
    """Decode an SW word."""
    return _decode_memory(word, "SW", _OPCODE_SW)


def encode_beq(instruction: Instruction) -> int:
    """Encode ``BEQ $rt, $rs, #offset``."""
    return _encode_immediate(instruction, "BEQ", _OPCODE_BEQ)


def decode_beq(word: int) -> Instruction:
    """Decode a BEQ word."""
    return _decode_immediate(word, "BEQ", _OPCODE_BEQ)


def encode_bne(instruction: Instruction) -> int:
    """Encode ``BNE $rt, $rs, #offset``."""
    return _encode_immediate(instruction, "BNE", _OPCODE_BNE)


def decode_bne(word: int) -> Instruction:
    """Decode a BNE word."""
    return _decode_immediate(word, "BNE", _OPCODE_BNE)


def encode_slti(instruction: Instruction) -> int:
    """Encode ``SLTI $rt, $rs, #imm``."""
    return _encode_immediate(instruction, "SLTI", _OPCODE_SLTI)


def decode_slti(word: int) -> Instruction:
    """Decode an SLTI word."""
    return _decode_immediate(word, "SLTI", _OPCODE_SLTI)