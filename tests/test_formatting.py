import pytest

from mipstran.formatting import (
    format_assembly,
    format_machine,
    format_param,
    status_message,
)
from mipstran.model import Instruction, Param, ParamType, Status
from mipstran.parsing import parse_assembly, register_number

R = ParamType.REGISTER
I = ParamType.IMMEDIATE

REGISTER_NAMES = [
    "zero", "v0", "v1", "a0", "a1", "a2", "a3",
    "t0", "t1", "t2", "t3", "t4", "t5", "t6", "t7",
    "s0", "s1", "s2", "s3", "s4", "s5", "s6", "s7",
    "t8", "t9", "gp", "sp", "fp", "ra",
]


@pytest.mark.parametrize("name", REGISTER_NAMES)
def test_register_names_round_trip(name):
    assert format_param(Param(R, register_number(name))) == "$" + name


@pytest.mark.parametrize("number", [1, 26, 27, 32])
def test_unnamed_registers_render_empty(number):
    assert format_param(Param(R, number)) == ""


def test_immediate_is_upper_hex():
    assert format_param(Param(I, 0x34)) == "#0x34"
    assert format_param(Param(I, 0xFF)) == "#0xFF"


def test_empty_param_is_marked():
    assert format_param(Param()).startswith("<>")


@pytest.mark.parametrize(
    "line",
    [
        "BEQ $zero, $t5, #0x34",
        "DIV $t0, $t6",
        "MFHI $t8",
        "MFLO $t7",
        "MULT $t2, $t1",
        "ORI $s0, $t9, #0xFF",
        "LW $s4, #0x0($s7)",
        "SW $s5, #0x4($s7)",
        "AND $t1, $t2, $t3",
    ],
)
def test_format_assembly_round_trip(line):
    assert format_assembly(parse_assembly(line)) == line


def test_format_assembly_four_operands():
    instruction = parse_assembly("ADD $t1, $t2, $t3, #0x5")
    assert format_assembly(instruction) == "ADD $t1, $t2, $t3, #0x5"


def test_register_third_operand_outside_memory_ops_uses_comma():
    instruction = Instruction("ADD", (Param(R, 9), Param(I, 4), Param(R, 23)))
    assert format_assembly(instruction).endswith(", $s7")


@pytest.mark.parametrize("word", [0, 1, 0x12345678, 0xFFFFFFFF, 0x8C000000])
def test_format_machine_structure(word):
    text = format_machine(word)
    head, bits = text.split("Binary:")
    assert head.startswith("Hex: 0x")
    assert head.endswith("\t")
    assert int(head.strip()[len("Hex: 0x"):], 16) == word
    assert bits.replace(" ", "") == format(word, "032b")
    assert [len(group) for group in bits.split()] == [4] * 8
    assert bits.endswith(" ")


def test_format_machine_zero():
    assert format_machine(0).startswith("Hex: 0x00000000\tBinary:")


def test_status_message_no_error():
    assert status_message(Status.NO_ERROR) == "System is Error Free"


@pytest.mark.parametrize(
    "status, message",
    [
        (Status.MISSING_REG, "Missing register parameter"),
        (Status.MISSING_COMMA, "Expected a comma, none was found"),
        (Status.UNRECOGNIZED_COMMAND, "The given instruction was not recognized"),
        (Status.UNDEF_ERROR, "An unknown error code has occured"),
        (Status.WRONG_COMMAND, "An unknown error code has occured"),
    ],
)
def test_status_message_errors(status, message):
    assert status_message(status) == "ERROR: " + message


@pytest.mark.parametrize("status", [Status.COMPLETE_ENCODE, Status.COMPLETE_DECODE])
def test_status_message_rejects_results(status):
    with pytest.raises(ValueError):
        status_message(status)