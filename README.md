# mipstran

An interactive translator between a subset of MIPS assembly and 32-bit
machine code. Type a line of assembly to see its encoding, or type a
machine word in hexadecimal or binary to see the instruction it holds.

## Supported instructions

- Register form: `ADD`, `SUB`, `MULT`, `DIV`, `MFHI`, `MFLO`, `AND`, `OR`, `SLT`
- Immediate form: `ADDI`, `ANDI`, `ORI`, `LUI`, `LW`, `SW`, `BEQ`, `BNE`, `SLTI`

Registers are written by name (`$zero`, `$v0`–`$v1`, `$a0`–`$a3`,
`$t0`–`$t9`, `$s0`–`$s7`, `$gp`, `$sp`, `$fp`, `$ra`). Immediates start
with `#` and are decimal or hexadecimal with a `0x` prefix. Loads and
stores use the offset form, e.g. `LW $s4, #0x0($s7)`.

Operand rules that the encoders enforce:

- Immediates are unsigned and at most `0xFFFF`; an `LW` offset is at
  most `0x7FFF`.
- `LUI` is written `LUI $rt, $zero, #imm`; the middle register must be `$zero`.
- `ORI` words are decoded from op code `001101`, but assembling `ORI`
  writes op code `001000` (the one `ADDI` uses).

## Installation

    pip install .

## Interactive use

    mipstran

The main menu offers:

1. Assembly to machine code
2. Machine code to assembly (hexadecimal or binary input)
3. Quit

An empty line returns to the previous menu; the program also ends when
input runs out. For example:

    Enter a line of assembly:
    > DIV $t0, $t6
    Hex: 0x01C8001A	Binary:0000 0001 1100 1000 0000 0000 0001 1010

    Enter Binary:
    > 000000 00000 00000 11000 00000 010010
    MFHI $t8

In binary input, any character other than `0` and `1` is ignored, so
fields may be separated by spaces. Invalid input is reported with a
message such as `ERROR: Missing register parameter`.

## Library use

    from mipstran.formatting import format_assembly, format_machine
    from mipstran.translator import assemble, disassemble_binary, disassemble_hex

    word = assemble("ADD $t0, $t1, $t2")              # 0x012A4020
    print(format_machine(word))

    instruction = disassemble_hex("0x012A4020")        # an Instruction
    print(format_assembly(instruction))                # ADD $t0, $t1, $t2

    instruction = disassemble_binary("100011 10111 10100 0000000000000000")
    print(format_assembly(instruction))                # LW $s4, #0x0($s7)

The modules are:

- `mipstran.model` – `Instruction`, `Param`, `ParamType`, `Status` and
  `TranslationError`.
- `mipstran.parsing` – `parse_assembly`, `parse_hex`, `parse_binary`,
  `parse_immediate`, `register_number`, `starts_with`.
- `mipstran.translator` – `encode`, `decode`, `assemble`,
  `disassemble_hex`, `disassemble_binary`.
- `mipstran.rtype` and `mipstran.itype` – one `encode_<op>` and
  `decode_<op>` function per instruction.
- `mipstran.formatting` – `format_param`, `format_assembly`,
  `format_machine`, `status_message`.
- `mipstran.bits` – bit-field helpers for 32-bit words.

Errors are raised as `mipstran.model.TranslationError`, whose `status`
attribute is a `mipstran.model.Status` member.

## What it does not do

It translates one instruction at a time. It does not read or write
source or object files, does not resolve labels or directives, and does
not run the instructions it translates.

## Running the tests

    pip install .[test]
    pytest