"""Translate simple three-address instructions into 8086 assembly."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

REGISTERS = ("AX", "BX", "CX", "DX")

SAMPLE_INSTRUCTIONS = (
    "t0 = t1 + t2",
    "t1 = t3 - t4",
    "t2 = t5 * t6",
    "t3 = t7 / t8",
)


class OutOfRegistersError(RuntimeError):
    """Raised when every register has been handed out."""


class UnsupportedOperationError(ValueError):
    """Raised for an operator the generator does not know."""

    def __init__(self, op: str) -> None:
        super().__init__(f"Unsupported operation: {op}")
        self.op = op


class RegisterAllocator:
    """Hands out registers in order until none are left."""

    def __init__(self, registers: Iterable[str] = REGISTERS) -> None:
        self._pool = iter(tuple(registers))

    def allocate(self) -> str:
        """Return the next free register."""
        try:
            return next(self._pool)
        except StopIteration:
            raise OutOfRegistersError("Not enough registers!") from None


def generate_assembly(instruction: str, allocator: RegisterAllocator) -> list[str]:
    """Return the assembly lines for one ``result = a op b`` instruction."""
    tokens = instruction.split()
    if len(tokens) < 5 or tokens[1] != "=":
        raise ValueError(f"malformed instruction: {instruction!r}")
    _result, left, op, right = tokens[0], tokens[2], tokens[3], tokens[4]

    reg1 = allocator.allocate()
    reg2 = allocator.allocate()
    reg_result = allocator.allocate()

    if op in ("+", "-"):
        mnemonic = "ADD" if op == "+" else "SUB"
        return [
            f"MOV {reg1}, {left}",
            f"{mnemonic} {reg1}, {right}",
            f"MOV {reg_result}, {reg1}",
        ]
    if op in ("*", "/"):
        mnemonic = "IMUL" if op == "*" else "DIV"
        return [
            f"MOV {reg1}, {left}",
            f"MOV {reg2}, {right}",
            f"{mnemonic} {reg2}",
            f"MOV {reg_result}, AX",
        ]
    raise UnsupportedOperationError(op)


def main(argv: list[str] | None = None) -> int:
    """Print assembly for the given instructions, or for a built-in sample."""
    parser = argparse.ArgumentParser(prog="asm8086", description="Generate 8086 assembly from TAC.")
    parser.add_argument("instructions", nargs="*", help='instructions such as "t0 = t1 + t2"')
    args = parser.parse_args(argv)
    instructions = args.instructions or SAMPLE_INSTRUCTIONS

    print("Generating 8086 Assembly Code:\n")
    allocator = RegisterAllocator()
    for instruction in instructions:
        try:
            lines = generate_assembly(instruction, allocator)
        except OutOfRegistersError:
            print("Error: Not enough registers!")
            return 1
        except UnsupportedOperationError as exc:
            print(f"Unsupported operation: {exc.op}")
            return 1
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
        print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())