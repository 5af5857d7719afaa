"""Translate between MIPS assembly and 32-bit machine code."""

__version__ = "0.1.0"
__all__ = ["bits", "cli", "formatting", "itype", "model", "parsing", "rtype", "translator"]