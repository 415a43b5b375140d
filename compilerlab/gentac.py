"""Emit three-address code for a few fixed source constructs."""

from __future__ import annotations

import argparse
import sys

_ARITHMETIC = {
    "(a + b) * (c - d)": [
        "t1 = a + b",
        "t2 = c - d",
        "x = t1 * t2",
    ],
}

_IF_ELSE = {
    "x > y": [
        "if x > y goto L1",
        "t2 = x - y",
        "z = t2",
        "goto L2",
        "L1: t1 = x + y",
        "z = t1",
        "L2:",
    ],
}

_WHILE = {
    "x < y": [
        "L1: if x >= y goto L2",
        "t1 = x + 1",
        "x = t1",
        "goto L1",
        "L2:",
    ],
}


def arithmetic_tac(expr: str) -> list[str]:
    """Return TAC for a known arithmetic expression, or an empty list."""
    return list(_ARITHMETIC.get(expr, []))


def if_else_tac(condition: str) -> list[str]:
    """Return TAC for an if-else on a known condition, or an empty list."""
    return list(_IF_ELSE.get(condition, []))


def while_tac(condition: str) -> list[str]:
    """Return TAC for a while loop on a known condition, or an empty list."""
    return list(_WHILE.get(condition, []))


def main(argv: list[str] | None = None) -> int:
    """Print the TAC for the built-in examples."""
    parser = argparse.ArgumentParser(prog="gentac", description="Print sample three-address code.")
    parser.parse_args(argv)

    print("Generating TAC for Arithmetic Expression:")
    for line in arithmetic_tac("(a + b) * (c - d)"):
        print(line)
    print("\nGenerating TAC for If-Else Statement:")
    for line in if_else_tac("x > y"):
        print(line)
    print("\nGenerating TAC for While Loop:")
    for line in while_tac("x < y"):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())