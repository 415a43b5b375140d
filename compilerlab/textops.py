"""Small string utilities and an interactive command for each of them."""

from __future__ import annotations

import argparse
import string
import sys
from collections import Counter
from collections.abc import Callable

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters converted to upper case."""
    return text.translate(_UPPER)


def find_substring(text: str, sub: str) -> int | None:
    """Return the index of the first occurrence of ``sub`` in ``text``, or None."""
    index = text.find(sub)
    return index if index >= 0 else None


def strings_equal(first: str, second: str) -> bool:
    """Return True when both strings are identical."""
    return first == second


def remove_spaces(text: str) -> str:
    """Return ``text`` with every space character removed."""
    return text.replace(" ", "")


def char_frequencies(text: str) -> dict[str, int]:
    """Count each character, ordered by code point, ignoring newlines."""
    counts = Counter(text)
    return {ch: counts[ch] for ch in sorted(counts) if ch != "\n"}


def concatenate(first: str, second: str) -> str:
    """Return ``second`` appended to ``first``."""
    return first + second


def replace_char(text: str, old: str, new: str) -> str:
    """Replace every occurrence of the character ``old`` with ``new``."""
    if len(old) != 1 or len(new) != 1:
        raise ValueError("old and new must each be a single character")
    return text.replace(old, new)


def _read_line(prompt: str, size: int = 100, keep_newline: bool = False) -> str:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline(size - 1)
    if not keep_newline:
        line = line.split("\n", 1)[0]
    return line


def _read_char(prompt: str) -> str:
    print(prompt, end="", flush=True)
    while True:
        ch = sys.stdin.read(1)
        if not ch:
            raise EOFError("expected a character")
        if not ch.isspace():
            return ch


def _cmd_upper() -> None:
    line = _read_line("Enter a string: ", keep_newline=True)
    print(f"Uppercase: {to_upper(line)}", end="")


def _cmd_find() -> None:
    text = _read_line("Enter the main string: ")
    sub = _read_line("Enter the substring to search: ")
    index = find_substring(text, sub)
    if index is None:
        print("Substring not found.")
    else:
        print(f"Substring found at index {index}")


def _cmd_compare() -> None:
    first = _read_line("Enter the first string: ")
    second = _read_line("Enter the second string: ")
    if strings_equal(first, second):
        print("The strings are the same.")
    else:
        print("The strings are different.")


def _cmd_strip_spaces() -> None:
    line = _read_line("Enter a string: ", keep_newline=True)
    print(f"String without spaces: {remove_spaces(line)}")


def _cmd_freq() -> None:
    line = _read_line("Enter a string: ", size=1000, keep_newline=True)
    print("Character frequencies:")
    for ch, count in char_frequencies(line).items():
        print(f"'{ch}' = {count}")


def _cmd_concat() -> None:
    first = _read_line("Enter the first string: ", size=200)
    second = _read_line("Enter the second string: ")
    print(f"Concatenated string: {concatenate(first, second)}")


def _cmd_replace() -> None:
    line = _read_line("Enter a string: ", keep_newline=True)
    old = _read_char("Enter the character to replace: ")
    new = _read_char("Enter the new character: ")
    print(f"Modified string: {replace_char(line, old, new)}", end="")


_COMMANDS: dict[str, Callable[[], None]] = {
    "upper": _cmd_upper,
    "find": _cmd_find,
    "compare": _cmd_compare,
    "strip-spaces": _cmd_strip_spaces,
    "freq": _cmd_freq,
    "concat": _cmd_concat,
    "replace": _cmd_replace,
}


def main(argv: list[str] | None = None) -> int:
    """Run one interactive string operation, reading its input from stdin."""
    parser = argparse.ArgumentParser(prog="textops", description="Interactive string operations.")
    parser.add_argument("command", choices=sorted(_COMMANDS))
    args = parser.parse_args(argv)
    try:
        _COMMANDS[args.command]()
    except EOFError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())