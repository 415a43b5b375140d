"""Dead-code reporting and common-subexpression elimination over TAC."""

from __future__ import annotations

import argparse
import dataclasses
import sys
from collections.abc import Collection, Iterable

from compilerlab.tac import Instruction


def _full_form(instr: Instruction) -> str:
    return f"{instr.result} = {instr.arg1} {instr.op} {instr.arg2}"


def dead_code_report(instructions: Iterable[Instruction], used: Collection[str]) -> list[str]:
    """Describe each instruction, flagging those whose result is not in ``used``."""
    lines = []
    for instr in instructions:
        if instr.result in used:
            lines.append(_full_form(instr))
        else:
            lines.append(f"Dead code found: {_full_form(instr)}")
    return lines


def eliminate_common_subexpressions(instructions: Iterable[Instruction]) -> list[Instruction]:
    """Rewrite instructions whose operands repeat an earlier recorded expression."""
    seen: list[str] = []
    output = []
    for instr in instructions:
        match = next(
            (expr for expr in seen if expr == instr.arg1 and expr == instr.arg2),
            None,
        )
        if match is not None:
            output.append(dataclasses.replace(instr, arg1=match))
        else:
            seen.append(instr.arg1)
            output.append(instr)
    return output


def sample_program() -> list[Instruction]:
    """Return the sample program with a repeated expression and dead code."""
    return [
        Instruction("t1", "+", "a", "b"),
        Instruction("t2", "+", "c", "d"),
        Instruction("t3", "*", "t1", "t2"),
        Instruction("t4", "+", "t1", "t2"),
        Instruction("x", "=", "t3", ""),
    ]


def main(argv: list[str] | None = None) -> int:
    """Run both passes over the sample program and print the results."""
    parser = argparse.ArgumentParser(prog="optimise", description="Optimise a sample TAC program.")
    parser.parse_args(argv)
    program = sample_program()

    print("Dead Code Elimination:")
    for line in dead_code_report(program, used=()):
        print(line)

    print("\nCommon Subexpression Elimination:")
    for instr in eliminate_common_subexpressions(program):
        print(_full_form(instr))
    return 0


if __name__ == "__main__":
    sys.exit(main())