"""Compiler-course tools: string exercises, fixed TAC generation, TAC optimisation passes and 8086 output."""

__version__ = "0.1.0"

__all__ = ["textops", "asm8086", "gentac", "tac", "optimise", "copyprop"]