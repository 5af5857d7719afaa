"""Interactive menu for translating between assembly and machine code."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from mipstran.formatting import format_assembly, format_machine, status_message
from mipstran.model import Status, TranslationError
from mipstran.parsing import parse_assembly
from mipstran.translator import assemble, disassemble_binary, disassemble_hex

_SAMPLE_LINE = "AND $t1, $t2, $t3"


class _EndOfInput(Exception):
    """Raised when the input stream is exhausted."""


class _Session:
    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._stream = stream
        self._out = out

    def write(self, text: str) -> None:
        self._out.write(text)

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def read(self) -> str:
        line = self._stream.readline()
        if not line:
            raise _EndOfInput
        return line[:-1] if line.endswith("\n") else line

    def menu(self, title: str, options: list[str]) -> str:
        self.say("\n" + title)
        for option in options:
            self.say("\t" + option)
        self.write("\n> ")
        return self.read()

    def convert(self, title: str, translate: Callable[[str], str]) -> None:
        """Translate entered lines until an empty one is given."""
        while True:
            self.say("\n" + title)
            self.write("> ")
            line = self.read()
            if not line:
                return
            try:
                self.say(translate(line))
            except TranslationError as error:
                self.say(status_message(error.status))

    def machine_menu(self) -> None:
        while True:
            choice = self.menu(
                "Please select an option:",
                [
                    "(1) Hexadecimal to Assembly",
                    "(2) Binary to Assembly",
                    "[3] Main Menu",
                ],
            )
            if choice == "1":
                self.convert(
                    "Enter Hex:", lambda line: format_assembly(disassemble_hex(line))
                )
            elif choice == "2":
                self.convert(
                    "Enter Binary:",
                    lambda line: format_assembly(disassemble_binary(line)),
                )
            else:
                return

    def sample(self) -> None:
        self.say(_SAMPLE_LINE)
        instruction = parse_assembly(_SAMPLE_LINE)
        self.say(status_message(Status.NO_ERROR))
        self.say(format_assembly(instruction))


def run(stream: TextIO, out: TextIO) -> int:
    """Run the interactive menu, reading from ``stream`` and writing to ``out``."""
    session = _Session(stream, out)
    session.say("Welcome to the MIPS-Translatron 3000 Tool")
    try:
        while True:
            choice = session.menu(
                "Please enter an option:",
                [
                    "(1) Assembly to Machine Code",
                    "(2) Machine Code to Assembly",
                    "(3) Quit",
                ],
            )
            if choice == "1":
                session.convert(
                    "Enter a line of assembly:",
                    lambda line: format_machine(assemble(line)),
                )
            elif choice == "2":
                session.machine_menu()
            elif choice == "3":
                return 0
            elif choice == "test":
                session.sample()
    except _EndOfInput:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive translator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="mipstran",
        description="Translate MIPS assembly to machine code and back.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())