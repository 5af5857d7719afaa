"""Top-level translation between assembly text and 32-bit machine words."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from mipstran import itype, rtype
from mipstran.model import Instruction, Status, TranslationError
from mipstran.parsing import parse_assembly, parse_binary, parse_hex

Encoder = Callable[[Instruction], int]
Decoder = Callable[[int], Instruction]

# Tried in this order; the first one that does not report WRONG_COMMAND wins.
_ENCODERS: tuple[Encoder, ...] = (
    itype.encode_addi,
    itype.encode_andi,
    itype.encode_ori,
    itype.encode_lui,
    itype.encode_lw,
    itype.encode_beq,
    itype.encode_bne,
    itype.encode_slti,
    itype.encode_sw,
    rtype.encode_add,
    rtype.encode_sub,
    rtype.encode_mult,
    rtype.encode_div,
    rtype.encode_mfhi,
    rtype.encode_mflo,
    rtype.encode_and,
    rtype.encode_or,
    rtype.encode_slt,
)

_DECODERS: tuple[Decoder, ...] = (
    itype.decode_addi,
    itype.decode_andi,
    itype.decode_ori,
    itype.decode_lui,
    itype.decode_lw,
    itype.decode_beq,
    itype.decode_bne,
    itype.decode_slti,
    itype.decode_sw,
    rtype.decode_add,
    rtype.decode_sub,
    rtype.decode_mult,
    rtype.decode_div,
    rtype.decode_mfhi,
    rtype.decode_mflo,
    rtype.decode_and,
    rtype.decode_or,
    rtype.decode_slt,
)


def _first_match(handlers: Sequence[Callable], value):
    for handler in handlers:
        try:
            return handler(value)
        except TranslationError as error:
            if error.status is not Status.WRONG_COMMAND:
                raise
    raise TranslationError(Status.UNRECOGNIZED_COMMAND)


def encode(instruction: Instruction) -> int:
    """Encode a parsed instruction into its 32-bit machine word."""
    return _first_match(_ENCODERS, instruction)


def decode(word: int) -> Instruction:
    """Decode a 32-bit machine word into an instruction."""
    return _first_match(_DECODERS, word)


def assemble(line: str) -> int:
    """Parse and encode one line of assembly."""
    return encode(parse_assembly(line))


def disassemble_hex(line: str) -> Instruction:
    """Parse a hexadecimal machine word and decode it."""
    return decode(parse_hex(line))


def disassemble_binary(line: str) -> Instruction:
    """Parse a binary machine word and decode it."""
    return decode(parse_binary(line))