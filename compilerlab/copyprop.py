"""Copy propagation over three-address code."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Iterable

from compilerlab.tac import Instruction


def propagate_copies(instructions: Iterable[Instruction]) -> list[Instruction]:
    """Replace later uses of each copied variable with its source."""
    code = list(instructions)
    for i, instr in enumerate(code):
        if not instr.is_copy():
            continue
        target, source = instr.result, instr.arg1
        for j in range(i + 1, len(code)):
            later = code[j]
            changes = {}
            if later.arg1 == target:
                changes["arg1"] = source
            if later.arg2 == target:
                changes["arg2"] = source
            if changes:
                code[j] = dataclasses.replace(later, **changes)
    return code


def remove_dead_copies(instructions: Iterable[Instruction]) -> list[Instruction]:
    """Drop copy instructions whose result is never used afterwards."""
    code = list(instructions)
    kept = []
    for i, instr in enumerate(code):
        if instr.is_copy():
            used = any(instr.result in (later.arg1, later.arg2) for later in code[i + 1:])
            if not used:
                continue
        kept.append(instr)
    return kept


def sample_program() -> list[Instruction]:
    """Return the sample program with a chain of copies."""
    return [
        Instruction("t1", "=", "a", ""),
        Instruction("t2", "=", "t1", ""),
        Instruction("t3", "+", "t2", "b"),
        Instruction("t4", "*", "t3", "c"),
    ]


def main(argv: list[str] | None = None) -> int:
    """Print the sample program before and after copy propagation."""
    parser = argparse.ArgumentParser(prog="copyprop", description="Copy propagation on sample TAC.")
    parser.parse_args(argv)
    program = sample_program()

    print("Original TAC:")
    for instr in program:
        print(instr.format())

    print("\nOptimized TAC after Copy Propagation:")
    for instr in remove_dead_copies(propagate_copies(program)):
        print(instr.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())