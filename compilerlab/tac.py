"""Three-address code instructions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Instruction:
    """One instruction of the form ``result = arg1 op arg2``."""

    result: str
    op: str
    arg1: str
    arg2: str = ""

    def format(self) -> str:
        """Render the instruction; copies are shown as ``result = arg1``."""
        if self.arg2:
            return f"{self.result} = {self.arg1} {self.op} {self.arg2}"
        return f"{self.result} = {self.arg1}"

    def is_copy(self) -> bool:
        """Return True for a plain copy ``result = arg1``."""
        return self.op == "=" and not self.arg2